"""Core data types for TripMap.

Every map-facing module produces/consumes these types:
- GeoCoordinate: a latitude/longitude pair handed to the map surface verbatim
- TripInstanceRef: opaque identity of one transit trip instance
- TripContinuationAnnotation: the pin marking where a trip continues
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from tripmap.errors import MissingTripReferenceError


# ---------------------------------------------------------------------------
# Geography
# ---------------------------------------------------------------------------


class GeoCoordinate(NamedTuple):
    """A (latitude, longitude) pair in degrees.

    No range checks: range validation belongs to the rendering surface.
    """

    latitude: float
    longitude: float


# ---------------------------------------------------------------------------
# Trip identity
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TripInstanceRef:
    """Identifies a single run of a transit trip.

    A trip id alone is ambiguous across service days, so the service date
    (ms since epoch) and, when known, the vehicle are part of the identity.
    """

    trip_id: str
    service_date: int = 0
    vehicle_id: str | None = None

    def __str__(self) -> str:
        return self.trip_id


# ---------------------------------------------------------------------------
# Map annotations
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class TripContinuationAnnotation:
    """Map pin indicating that a trip continues past the displayed segment.

    Satisfies the ``MapAnnotation`` protocol (``title`` and ``coordinate``)
    and carries ``trip_reference`` so a tap handler can recover the trip.
    Equality and hashing are identity-based.
    """

    title: str
    trip_reference: TripInstanceRef
    coordinate: GeoCoordinate | tuple[float, float]

    def __post_init__(self) -> None:
        if self.trip_reference is None:
            raise MissingTripReferenceError(
                f"Trip continuation annotation {self.title!r} requires a trip reference"
            )

    @classmethod
    def create(
        cls,
        title: str,
        trip_reference: TripInstanceRef,
        coordinate: GeoCoordinate | tuple[float, float],
    ) -> TripContinuationAnnotation:
        """Build an annotation. Inputs are stored as given."""
        return cls(title=title, trip_reference=trip_reference, coordinate=coordinate)
