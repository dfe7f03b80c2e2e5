"""Protocol for objects a map surface can place as pins."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tripmap.types import GeoCoordinate


@runtime_checkable
class MapAnnotation(Protocol):
    """Minimal annotation contract of a map-rendering surface.

    Implementations: TripContinuationAnnotation.
    """

    @property
    def title(self) -> str:
        """Label shown next to the pin."""
        ...

    @property
    def coordinate(self) -> GeoCoordinate:
        """Where the pin is placed, as (latitude, longitude)."""
        ...
