"""Turn a page capture into a design snapshot."""

from __future__ import annotations

from design_collector.extract.categories import detect_style_categories
from design_collector.extract.colors import extract_colors
from design_collector.extract.effects import extract_effects
from design_collector.extract.layout import extract_layout
from design_collector.extract.types import PageCapture
from design_collector.extract.typography import extract_typography
from design_collector.models.snapshot import DesignSnapshot, PageMeta
from design_collector.utils.time import utc_timestamp


class ExtractionError(RuntimeError):
    """Raised when a page could not be captured or summarized."""


def extract_design(capture: PageCapture, timestamp: str | None = None) -> DesignSnapshot:
    """Build a ``DesignSnapshot`` from a capture. Pure; the capture is not modified."""
    elements = capture.elements
    colors = extract_colors(elements)
    typography = extract_typography(elements)
    layout = extract_layout(elements)
    effects = extract_effects(elements)
    return DesignSnapshot(
        url=capture.url,
        title=capture.title,
        timestamp=timestamp or utc_timestamp(),
        colors=colors,
        typography=typography,
        layout=layout,
        effects=effects,
        style_categories=detect_style_categories(colors, effects, layout),
        meta=PageMeta(viewport=capture.viewport or "not set", theme_color=capture.theme_color),
    )


__all__ = ["ExtractionError", "extract_design"]
