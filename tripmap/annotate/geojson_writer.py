"""Write map annotations as GeoJSON for web map surfaces."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from tripmap.annotate.base import MapAnnotation
from tripmap.types import TripContinuationAnnotation

logger = logging.getLogger(__name__)


def annotation_to_feature(annotation: MapAnnotation, include_trip: bool = True) -> dict[str, Any]:
    """Convert one annotation to a GeoJSON Feature.

    Args:
        annotation: Any object satisfying the MapAnnotation protocol.
        include_trip: Add the trip reference under ``properties.trip`` for
                      continuation annotations.

    Returns:
        A Feature dict with Point geometry. GeoJSON orders positions as
        [longitude, latitude]; values are not range-checked.
    """
    lat, lon = annotation.coordinate
    properties: dict[str, Any] = {"title": annotation.title}

    if include_trip and isinstance(annotation, TripContinuationAnnotation):
        ref = annotation.trip_reference
        properties["trip"] = {
            "trip_id": ref.trip_id,
            "service_date": ref.service_date,
            "vehicle_id": ref.vehicle_id,
        }

    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
        "properties": properties,
    }


def annotations_to_feature_collection(
    annotations: Iterable[MapAnnotation],
    include_trip: bool = True,
) -> dict[str, Any]:
    """Wrap annotations in a GeoJSON FeatureCollection."""
    return {
        "type": "FeatureCollection",
        "features": [annotation_to_feature(a, include_trip) for a in annotations],
    }


def write_geojson(
    path: Path,
    annotations: Iterable[MapAnnotation],
    include_trip: bool = True,
    indent: int | None = 2,
) -> Path:
    """Write annotations to a GeoJSON file.

    Args:
        path: Output file path. Parent directories are created.
        annotations: Annotations to write. An empty iterable writes an
                     empty FeatureCollection.
        include_trip: Embed trip reference fields.
        indent: JSON indent, or None for compact output.

    Returns:
        Path to the written file.
    """
    collection = annotations_to_feature_collection(annotations, include_trip)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(collection, f, indent=indent, ensure_ascii=False)

    logger.info("Wrote %d annotations to %s", len(collection["features"]), path)
    return path
