"""Heuristic style categorization as an ordered rule table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence

from design_collector.extract.colors import mean_channel
from design_collector.models.snapshot import FALLBACK_STYLE_CATEGORY, ColorEntry, Effects, Layout

PRIMARY_HEXES = frozenset({"#FF0000", "#0000FF", "#FFFF00", "#FF00FF"})
DARK_MEAN_CHANNEL = 50
DARK_MIN_COUNT = 5

_ZERO_PX_RE = re.compile(r"(?<![\d.])0px\b")


@dataclass(frozen=True, slots=True)
class StyleSignals:
    colors: Sequence[ColorEntry]
    effects: Effects
    layout: Layout


@dataclass(frozen=True, slots=True)
class StyleRule:
    label: str
    applies: Callable[[StyleSignals], bool]


def _has_hard_shadow(effects: Effects) -> bool:
    return any("0 0" in _ZERO_PX_RE.sub("0", shadow) for shadow in effects.shadows)


def _is_glassmorphism(signals: StyleSignals) -> bool:
    return signals.effects.blur and any(color.translucent for color in signals.colors)


def _is_minimalism(signals: StyleSignals) -> bool:
    return len(signals.colors) < 6 and len(signals.effects.shadows) < 2


def _is_bento_grid(signals: StyleSignals) -> bool:
    return signals.layout.uses_grid and signals.layout.grid_count > 3


def _is_dark_mode(signals: StyleSignals) -> bool:
    return any(
        mean_channel(color.hex) < DARK_MEAN_CHANNEL and color.count > DARK_MIN_COUNT
        for color in signals.colors
    )


def _is_neubrutalism(signals: StyleSignals) -> bool:
    return _has_hard_shadow(signals.effects) and any(color.hex in PRIMARY_HEXES for color in signals.colors)


# Evaluated in order; rules are not mutually exclusive.
STYLE_RULES: tuple[StyleRule, ...] = (
    StyleRule("Glassmorphism", _is_glassmorphism),
    StyleRule("Minimalism", _is_minimalism),
    StyleRule("Bento Box Grid", _is_bento_grid),
    StyleRule("Dark Mode", _is_dark_mode),
    StyleRule("Neubrutalism", _is_neubrutalism),
)


def detect_style_categories(
    colors: Sequence[ColorEntry],
    effects: Effects,
    layout: Layout,
    rules: Sequence[StyleRule] = STYLE_RULES,
) -> list[str]:
    signals = StyleSignals(colors=colors, effects=effects, layout=layout)
    labels = [rule.label for rule in rules if rule.applies(signals)]
    return labels or [FALLBACK_STYLE_CATEGORY]


__all__ = ["StyleRule", "StyleSignals", "STYLE_RULES", "detect_style_categories"]
