"""Shared test fixtures for TripMap."""

from __future__ import annotations

from pathlib import Path

import pytest

from tripmap.types import GeoCoordinate, TripContinuationAnnotation, TripInstanceRef


@pytest.fixture
def sample_ref() -> TripInstanceRef:
    """A trip reference for unit tests."""
    return TripInstanceRef(trip_id="1_12345", service_date=1700000000000, vehicle_id="1_4321")


@pytest.fixture
def sample_annotation(sample_ref) -> TripContinuationAnnotation:
    """A single continuation annotation in Seattle."""
    return TripContinuationAnnotation(
        title="Trip continues as Route 10",
        trip_reference=sample_ref,
        coordinate=GeoCoordinate(47.61, -122.33),
    )


@pytest.fixture
def annotations_yaml(tmp_path) -> Path:
    """A small annotations file mixing explicit titles and route names."""
    path = tmp_path / "continuations.yaml"
    path.write_text(
        "continuations:\n"
        "  - trip_id: '1_12345'\n"
        "    service_date: 1700000000000\n"
        "    vehicle_id: '1_4321'\n"
        "    title: 'Trip continues as Route 10'\n"
        "    lat: 47.61\n"
        "    lon: -122.33\n"
        "  - trip_id: '1_67890'\n"
        "    route: '49'\n"
        "    lat: 47.62\n"
        "    lon: -122.32\n"
    )
    return path
