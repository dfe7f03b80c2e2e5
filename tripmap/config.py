"""Configuration models for TripMap.

Pydantic v2 models with sensible defaults, works without a config file.
"""

from __future__ import annotations

from pathlib import Path
from string import Formatter

import yaml
from pydantic import BaseModel, Field, field_validator

# Placeholders available to AnnotationConfig.title_template
TITLE_PLACEHOLDERS = {"route"}


class AnnotationConfig(BaseModel):
    """How continuation annotations are labelled."""

    title_template: str = Field(
        "Trip continues as {route}",
        description="Title for a continuation pin. Available placeholders: {route}.",
    )
    fallback_title: str = Field(
        "Trip continues",
        description="Title used when the next route has no displayable name.",
    )

    @field_validator("title_template")
    @classmethod
    def _check_placeholders(cls, value: str) -> str:
        try:
            fields = {name for _, name, _, _ in Formatter().parse(value) if name is not None}
        except ValueError as e:
            raise ValueError(f"Malformed title_template {value!r}: {e}") from e
        unknown = fields - TITLE_PLACEHOLDERS
        if unknown:
            raise ValueError(
                f"Unknown placeholder(s) in title_template: {', '.join(sorted(unknown))}. "
                f"Available: {', '.join(sorted(TITLE_PLACEHOLDERS))}"
            )
        return value


class ExportConfig(BaseModel):
    """Configuration for GeoJSON export."""

    include_trip: bool = Field(True, description="Embed trip reference fields in feature properties")
    indent: int | None = Field(2, description="JSON indent for written files (None = compact)")


class TripMapConfig(BaseModel):
    """Top-level configuration for TripMap."""

    annotation: AnnotationConfig = Field(default_factory=AnnotationConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> TripMapConfig:
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    @classmethod
    def default(cls) -> TripMapConfig:
        """Return configuration with all defaults."""
        return cls()
