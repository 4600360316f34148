"""Color extraction and classification."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable

from design_collector.extract.types import ElementStyle
from design_collector.models.snapshot import ColorCategory, ColorEntry

COLOR_PROPERTIES = (
    "background-color",
    "color",
    "border-color",
    "border-top-color",
    "border-bottom-color",
    "border-left-color",
    "border-right-color",
    "outline-color",
    "box-shadow",
)
IGNORED_VALUES = frozenset({"", "transparent", "rgba(0, 0, 0, 0)"})
NOISE_HEXES = frozenset({"#000000", "#FFFFFF"})
MAX_COLORS = 20

_HEX_RE = re.compile(r"#[0-9A-F]{6}")

_RGB_RE = re.compile(
    r"rgba?\(\s*(\d+(?:\.\d+)?)[,\s]\s*(\d+(?:\.\d+)?)[,\s]\s*(\d+(?:\.\d+)?)"
    r"(?:\s*[,/]\s*(\d*\.?\d+%?))?"
)


def rgb_to_hex(value: str | None) -> str | None:
    """Convert a CSS color string to ``#RRGGBB``; alpha is ignored."""
    if not value:
        return None
    value = value.strip()
    if value.startswith("#"):
        return value.upper()
    match = _RGB_RE.search(value)
    if not match:
        return None
    channels = (min(int(float(match.group(idx))), 255) for idx in (1, 2, 3))
    return "#" + "".join(f"{channel:02X}" for channel in channels)


def _alpha(value: str) -> float:
    match = _RGB_RE.search(value)
    if not match or match.group(4) is None:
        return 1.0
    raw = match.group(4)
    if raw.endswith("%"):
        return float(raw[:-1]) / 100
    return float(raw)


def _channels(hex_value: str) -> tuple[int, int, int]:
    return int(hex_value[1:3], 16), int(hex_value[3:5], 16), int(hex_value[5:7], 16)


def categorize_color(hex_value: str) -> ColorCategory:
    """Bucket a color by lightness, then by its single dominant channel."""
    r, g, b = _channels(hex_value)
    lightness = (max(r, g, b) + min(r, g, b)) / 2 / 255
    if lightness > 0.9:
        return ColorCategory.BACKGROUND_LIGHT
    if lightness < 0.1:
        return ColorCategory.TEXT_DARK
    if r > g and r > b:
        return ColorCategory.ACCENT_WARM
    if b > r and b > g:
        return ColorCategory.ACCENT_COOL
    if g > r and g > b:
        return ColorCategory.ACCENT_NATURE
    return ColorCategory.NEUTRAL


def mean_channel(hex_value: str) -> float:
    return sum(_channels(hex_value)) / 3


def extract_colors(elements: Iterable[ElementStyle]) -> list[ColorEntry]:
    """Tally color usage across all elements and keep the most frequent."""
    counts: Counter[str] = Counter()
    translucent: set[str] = set()
    for element in elements:
        for prop in COLOR_PROPERTIES:
            value = element.css(prop)
            if value in IGNORED_VALUES:
                continue
            hex_value = rgb_to_hex(value)
            if not hex_value or hex_value in NOISE_HEXES or not _HEX_RE.fullmatch(hex_value):
                continue
            counts[hex_value] += 1
            if 0 < _alpha(value) < 1:
                translucent.add(hex_value)

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:MAX_COLORS]
    return [
        ColorEntry(
            hex=hex_value,
            count=count,
            category=categorize_color(hex_value),
            translucent=hex_value in translucent,
        )
        for hex_value, count in ranked
    ]


__all__ = ["rgb_to_hex", "categorize_color", "mean_channel", "extract_colors", "COLOR_PROPERTIES"]
