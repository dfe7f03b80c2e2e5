"""Map selection handling: from a tapped pin back to its trip."""

from __future__ import annotations

import logging

from tripmap.types import TripContinuationAnnotation, TripInstanceRef

logger = logging.getLogger(__name__)


def trip_for_selection(annotation: object) -> TripInstanceRef | None:
    """Return the trip behind a selected annotation.

    Map surfaces report selections for every kind of pin they show; only
    continuation pins carry a trip, anything else yields ``None``.
    """
    if not isinstance(annotation, TripContinuationAnnotation):
        logger.debug("Ignoring selection of %s", type(annotation).__name__)
        return None
    logger.debug(
        "Selected continuation %r -> trip %s", annotation.title, annotation.trip_reference
    )
    return annotation.trip_reference
