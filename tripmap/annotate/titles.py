"""Display titles for continuation pins."""

from __future__ import annotations

from tripmap.config import AnnotationConfig


def continuation_title(route_name: str, config: AnnotationConfig | None = None) -> str:
    """Format the pin title for a trip that continues as ``route_name``.

    Blank route names fall back to ``config.fallback_title``.
    """
    config = config or AnnotationConfig()
    route_name = route_name.strip()
    if not route_name:
        return config.fallback_title
    return config.title_template.format(route=route_name)
