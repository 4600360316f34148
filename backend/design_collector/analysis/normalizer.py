"""Merge generator output with deterministic snapshot-derived fallbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from design_collector.analysis.keywords import enrich_keywords
from design_collector.analysis.parser import ParsedAnalysis, parse_labeled_lines
from design_collector.models.entities import FIELD_LABELS, AnalysisFields
from design_collector.models.snapshot import DesignSnapshot

Fallback = Callable[[DesignSnapshot], str]


def _effects_fallback(snapshot: DesignSnapshot) -> str:
    effects = snapshot.effects
    flags = [
        "backdrop-blur" if effects.blur else "",
        "gradients" if effects.gradients else "",
        "animations" if effects.animations else "",
    ]
    return ", ".join(flag for flag in flags if flag) or "minimal"


def _constant(value: str) -> Fallback:
    return lambda _snapshot: value


FALLBACKS: dict[str, Fallback] = {
    "style_category": lambda snapshot: snapshot.primary_category,
    "type": _constant("General"),
    "keywords": lambda snapshot: ", ".join(snapshot.style_categories),
    "primary_colors": lambda snapshot: ", ".join(snapshot.top_hexes(3)),
    "secondary_colors": _constant(""),
    "effects_animation": _effects_fallback,
    "best_for": _constant(""),
    "do_not_use_for": _constant(""),
    "light_mode": _constant("?"),
    "dark_mode": _constant("?"),
    "performance": _constant("Good"),
    "accessibility": _constant("Needs review"),
    "mobile_friendly": _constant("Good"),
    "framework_compat": _constant("Tailwind 9/10"),
    "complexity": _constant("Medium"),
    "notes": _constant(""),
}


@dataclass(slots=True)
class NormalizedAnalysis:
    fields: AnalysisFields
    fallbacks: list[str] = field(default_factory=list)
    parsed: ParsedAnalysis = field(default_factory=ParsedAnalysis)

    @property
    def used_generator(self) -> bool:
        return len(self.parsed) > 0


def resolve_fields(snapshot: DesignSnapshot, parsed: ParsedAnalysis) -> tuple[AnalysisFields, list[str]]:
    """Pick parsed values where present and non-blank, fallbacks otherwise."""
    values: dict[str, str] = {}
    fallbacks: list[str] = []
    for name, (label, _column) in FIELD_LABELS.items():
        value = parsed.get(label)
        # absent and present-but-blank both defer to the snapshot
        if value:
            values[name] = value
        else:
            values[name] = FALLBACKS[name](snapshot)
            fallbacks.append(name)
    return AnalysisFields(**values), fallbacks


def normalize_analysis(snapshot: DesignSnapshot, text: str | None) -> NormalizedAnalysis:
    """Produce complete fields for ``snapshot``; ``text`` may be None or empty."""
    parsed = parse_labeled_lines(text)
    fields, fallbacks = resolve_fields(snapshot, parsed)
    fields.keywords = enrich_keywords(snapshot, fields)
    return NormalizedAnalysis(fields=fields, fallbacks=fallbacks, parsed=parsed)


__all__ = ["FALLBACKS", "NormalizedAnalysis", "normalize_analysis", "resolve_fields"]
