"""Error types for TripMap."""

from __future__ import annotations

from pathlib import Path


class TripMapError(Exception):
    """Base exception for TripMap."""


class MissingTripReferenceError(TripMapError, ValueError):
    """Raised when a continuation annotation is built without a trip."""


class AnnotationLoadError(TripMapError):
    """Raised when an annotations file entry cannot be turned into an annotation."""

    def __init__(self, path: Path, index: int, message: str) -> None:
        # index -1 means the document as a whole
        self.path = path
        self.index = index
        where = f"{path}" if index < 0 else f"{path}: entry {index}"
        super().__init__(f"{where}: {message}")
