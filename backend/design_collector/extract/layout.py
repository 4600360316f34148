"""Layout extraction: containers, flex/grid usage and spacing rhythm."""

from __future__ import annotations

import re
from typing import Sequence

from design_collector.extract.types import ElementStyle
from design_collector.models.snapshot import Layout

MIN_CONTAINER_WIDTH = 100
MAX_CONTAINER_WIDTHS = 5
MAX_SPACINGS = 10
SPACING_PROPERTIES = ("padding", "margin", "gap")
SPACING_TAGS = ("section", "div", "article")

_ZERO_LENGTH_RE = re.compile(r"^(?:0(?:\.0+)?(?:px|em|rem|%)?\s*)+$")


def _is_container(element: ElementStyle) -> bool:
    return element.class_contains("container", "wrapper") or element.is_tag("main", "article")


def _references(element: ElementStyle, keyword: str) -> bool:
    return keyword in element.class_name or keyword in element.inline_style


def _is_spacing(value: str) -> bool:
    return bool(value) and value != "normal" and not _ZERO_LENGTH_RE.match(value)


def extract_layout(elements: Sequence[ElementStyle]) -> Layout:
    widths: set[int] = set()
    flex_count = 0
    grid_count = 0
    spacings: dict[str, None] = {}

    for element in elements:
        if _is_container(element):
            width = int(element.width)
            if width > MIN_CONTAINER_WIDTH:
                widths.add(width)
        if _references(element, "flex"):
            flex_count += 1
        if _references(element, "grid"):
            grid_count += 1
        if element.is_tag(*SPACING_TAGS):
            for prop in SPACING_PROPERTIES:
                value = element.css(prop)
                if _is_spacing(value):
                    spacings.setdefault(value, None)

    return Layout(
        container_widths=sorted(widths, reverse=True)[:MAX_CONTAINER_WIDTHS],
        uses_flexbox=flex_count > 0,
        uses_grid=grid_count > 0,
        flex_count=flex_count,
        grid_count=grid_count,
        common_spacings=list(spacings)[:MAX_SPACINGS],
    )


__all__ = ["extract_layout"]
