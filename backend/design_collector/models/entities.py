"""Internal dataclasses representing analysis results and persisted rows."""

from __future__ import annotations

from dataclasses import dataclass, fields

# Attribute name -> (label the generator emits, CSV column header).
FIELD_LABELS: dict[str, tuple[str, str]] = {
    "style_category": ("STYLE_CATEGORY", "Style Category"),
    "type": ("TYPE", "Type"),
    "keywords": ("KEYWORDS", "Keywords"),
    "primary_colors": ("PRIMARY_COLORS", "Primary Colors"),
    "secondary_colors": ("SECONDARY_COLORS", "Secondary Colors"),
    "effects_animation": ("EFFECTS_ANIMATION", "Effects & Animation"),
    "best_for": ("BEST_FOR", "Best For"),
    "do_not_use_for": ("DO_NOT_USE_FOR", "Do Not Use For"),
    "light_mode": ("LIGHT_MODE", "Light Mode"),
    "dark_mode": ("DARK_MODE", "Dark Mode"),
    "performance": ("PERFORMANCE", "Performance"),
    "accessibility": ("ACCESSIBILITY", "Accessibility"),
    "mobile_friendly": ("MOBILE_FRIENDLY", "Mobile-Friendly"),
    "framework_compat": ("FRAMEWORK_COMPAT", "Framework Compatibility"),
    "complexity": ("COMPLEXITY", "Complexity"),
    "notes": ("NOTES", "Notes"),
}

TABLE_HEADER: tuple[str, ...] = (
    "ID",
    "Date",
    "Style Category",
    "Type",
    "Source",
    "Keywords",
    "Primary Colors",
    "Secondary Colors",
    "Effects & Animation",
    "Best For",
    "Do Not Use For",
    "Light Mode",
    "Dark Mode",
    "Performance",
    "Accessibility",
    "Mobile-Friendly",
    "Framework Compatibility",
    "Complexity",
    "Notes",
)

ID_COLUMN = TABLE_HEADER.index("ID")
SOURCE_COLUMN = TABLE_HEADER.index("Source")


@dataclass(slots=True)
class AnalysisFields:
    """Sixteen analysis fields; every value is a string, possibly empty."""

    style_category: str = ""
    type: str = ""
    keywords: str = ""
    primary_colors: str = ""
    secondary_colors: str = ""
    effects_animation: str = ""
    best_for: str = ""
    do_not_use_for: str = ""
    light_mode: str = ""
    dark_mode: str = ""
    performance: str = ""
    accessibility: str = ""
    mobile_friendly: str = ""
    framework_compat: str = ""
    complexity: str = ""
    notes: str = ""

    def by_column(self) -> dict[str, str]:
        return {FIELD_LABELS[f.name][1]: getattr(self, f.name) for f in fields(self)}


@dataclass(slots=True)
class DesignRecord:
    """One table row before it is written."""

    id: str
    date: str
    source: str
    analysis: AnalysisFields

    def to_row(self) -> list[str]:
        columns = self.analysis.by_column()
        columns.update({"ID": self.id, "Date": self.date, "Source": self.source})
        return [columns[name] for name in TABLE_HEADER]


__all__ = [
    "FIELD_LABELS",
    "TABLE_HEADER",
    "ID_COLUMN",
    "SOURCE_COLUMN",
    "AnalysisFields",
    "DesignRecord",
]
