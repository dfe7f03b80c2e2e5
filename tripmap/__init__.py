"""TripMap — Map annotations for transit trip continuations."""

__version__ = "0.1.0"

from tripmap.types import GeoCoordinate, TripContinuationAnnotation, TripInstanceRef

__all__ = ["GeoCoordinate", "TripContinuationAnnotation", "TripInstanceRef", "__version__"]
