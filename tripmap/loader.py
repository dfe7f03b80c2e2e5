"""Annotations file parser: loads continuation entries from YAML.

Expected layout::

    continuations:
      - trip_id: "1_12345"
        service_date: 1700000000000   # optional
        vehicle_id: "1_4321"          # optional
        route: "10"                   # or title: "..."
        lat: 47.61
        lon: -122.33

A bare top-level list of entries is accepted as well.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from tripmap.annotate.titles import continuation_title
from tripmap.config import AnnotationConfig
from tripmap.errors import AnnotationLoadError
from tripmap.types import GeoCoordinate, TripContinuationAnnotation, TripInstanceRef

logger = logging.getLogger(__name__)


def parse_entry(
    entry: dict[str, Any],
    config: AnnotationConfig | None = None,
) -> TripContinuationAnnotation:
    """Build an annotation from one mapping.

    Raises:
        KeyError: A required key is missing.
        TypeError, ValueError: A value has the wrong type.
    """
    vehicle_id = entry.get("vehicle_id")
    ref = TripInstanceRef(
        trip_id=str(entry["trip_id"]),
        service_date=int(entry.get("service_date") or 0),
        vehicle_id=None if vehicle_id is None else str(vehicle_id),
    )
    coordinate = GeoCoordinate(float(entry["lat"]), float(entry["lon"]))

    # null title/route behave like absent keys
    route = entry.get("route")
    if entry.get("title") is not None:
        title = str(entry["title"])
    else:
        title = continuation_title("" if route is None else str(route), config)

    return TripContinuationAnnotation(title=title, trip_reference=ref, coordinate=coordinate)


def load_annotations(
    path: Path,
    config: AnnotationConfig | None = None,
) -> list[TripContinuationAnnotation]:
    """Load all continuation annotations from a YAML file.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        AnnotationLoadError: The document or one of its entries is malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(path)

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise AnnotationLoadError(path, -1, f"invalid YAML: {e}") from e

    if data is None:
        entries: list[Any] = []
    elif isinstance(data, dict):
        entries = data.get("continuations") or []
    else:
        entries = data

    if not isinstance(entries, list):
        raise AnnotationLoadError(path, -1, "expected a list of continuations")

    annotations: list[TripContinuationAnnotation] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise AnnotationLoadError(path, i, f"expected a mapping, got {type(entry).__name__}")
        try:
            annotations.append(parse_entry(entry, config))
        except KeyError as e:
            raise AnnotationLoadError(path, i, f"missing key {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise AnnotationLoadError(path, i, str(e)) from e

    logger.info("Loaded %d continuation annotations from %s", len(annotations), path)
    return annotations
