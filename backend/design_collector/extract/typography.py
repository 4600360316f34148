"""Typography extraction."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from design_collector.extract.types import ElementStyle
from design_collector.models.snapshot import FontEntry, FontSizeEntry, HeadingStyle, Typography

TEXT_TAGS = frozenset(
    {"h1", "h2", "h3", "h4", "h5", "h6", "p", "span", "a", "button", "li", "td", "th", "label", "input"}
)
HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
MAX_FONTS = 5
MAX_FONT_SIZES = 10


def primary_font_family(value: str) -> str:
    """First family in a ``font-family`` list, without quotes."""
    first = value.split(",")[0]
    return first.replace('"', "").replace("'", "").strip()


def _most_common(counts: Counter[str], limit: int) -> list[tuple[str, int]]:
    # sorted() is stable, so ties keep first-seen order
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]


def extract_typography(elements: Sequence[ElementStyle]) -> Typography:
    fonts: Counter[str] = Counter()
    sizes: Counter[str] = Counter()
    headings: dict[str, HeadingStyle] = {}

    for element in elements:
        if element.tag not in TEXT_TAGS:
            continue
        family = primary_font_family(element.css("font-family"))
        if family:
            fonts[family] += 1
        size = element.css("font-size")
        if size:
            sizes[size] += 1
        if element.tag in HEADING_TAGS and element.tag not in headings:
            headings[element.tag] = HeadingStyle(
                tag=element.tag,
                font_family=family,
                font_size=size,
                font_weight=element.css("font-weight"),
                line_height=element.css("line-height"),
                letter_spacing=element.css("letter-spacing"),
            )

    return Typography(
        fonts=[FontEntry(font=font, count=count) for font, count in _most_common(fonts, MAX_FONTS)],
        font_sizes=[FontSizeEntry(size=size, count=count) for size, count in _most_common(sizes, MAX_FONT_SIZES)],
        heading_styles=[headings[tag] for tag in HEADING_TAGS if tag in headings],
    )


__all__ = ["extract_typography", "primary_font_family"]
