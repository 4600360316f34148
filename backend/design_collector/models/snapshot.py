"""Pydantic models describing one captured page design.

Field names are snake_case in Python and camelCase on the wire, which is
the shape the browser extension posts to ``/analyze``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "extra": "ignore",
}

FALLBACK_STYLE_CATEGORY = "Modern/Custom"


class ColorCategory(str, Enum):
    BACKGROUND_LIGHT = "background-light"
    TEXT_DARK = "text-dark"
    ACCENT_WARM = "accent-warm"
    ACCENT_COOL = "accent-cool"
    ACCENT_NATURE = "accent-nature"
    NEUTRAL = "neutral"


class ColorEntry(BaseModel):
    model_config = _WIRE_CONFIG

    hex: str
    count: int = Field(ge=1)
    category: ColorCategory
    translucent: bool = False


class FontEntry(BaseModel):
    model_config = _WIRE_CONFIG

    font: str
    count: int


class FontSizeEntry(BaseModel):
    model_config = _WIRE_CONFIG

    size: str
    count: int


class HeadingStyle(BaseModel):
    model_config = _WIRE_CONFIG

    tag: str
    font_family: str = ""
    font_size: str = ""
    font_weight: str = ""
    line_height: str = ""
    letter_spacing: str = ""


class Typography(BaseModel):
    model_config = _WIRE_CONFIG

    fonts: list[FontEntry] = Field(default_factory=list)
    font_sizes: list[FontSizeEntry] = Field(default_factory=list)
    heading_styles: list[HeadingStyle] = Field(default_factory=list)


class Layout(BaseModel):
    model_config = _WIRE_CONFIG

    container_widths: list[int] = Field(default_factory=list)
    uses_flexbox: bool = False
    uses_grid: bool = False
    flex_count: int = 0
    grid_count: int = 0
    common_spacings: list[str] = Field(default_factory=list)


class Effects(BaseModel):
    model_config = _WIRE_CONFIG

    shadows: list[str] = Field(default_factory=list)
    border_radius: list[str] = Field(default_factory=list)
    gradients: list[str] = Field(default_factory=list)
    blur: bool = False
    animations: list[str] = Field(default_factory=list)
    transitions: list[str] = Field(default_factory=list)
    transforms: list[str] = Field(default_factory=list)
    interactions: list[str] = Field(default_factory=list)


class PageMeta(BaseModel):
    model_config = _WIRE_CONFIG

    viewport: str = "not set"
    theme_color: str | None = None


class DesignSnapshot(BaseModel):
    """One immutable capture of a page's design signals."""

    model_config = {**_WIRE_CONFIG, "frozen": True}

    url: str
    title: str = ""
    timestamp: str = ""
    colors: list[ColorEntry] = Field(default_factory=list)
    typography: Typography = Field(default_factory=Typography)
    layout: Layout = Field(default_factory=Layout)
    effects: Effects = Field(default_factory=Effects)
    style_categories: list[str] = Field(default_factory=lambda: [FALLBACK_STYLE_CATEGORY])
    meta: PageMeta = Field(default_factory=PageMeta)

    @field_validator("style_categories")
    @classmethod
    def _never_empty(cls, value: list[str]) -> list[str]:
        return value or [FALLBACK_STYLE_CATEGORY]

    def top_hexes(self, limit: int) -> list[str]:
        return [color.hex for color in self.colors[:limit]]

    @property
    def primary_category(self) -> str:
        return self.style_categories[0] if self.style_categories else FALLBACK_STYLE_CATEGORY


__all__ = [
    "ColorCategory",
    "ColorEntry",
    "FontEntry",
    "FontSizeEntry",
    "HeadingStyle",
    "Typography",
    "Layout",
    "Effects",
    "PageMeta",
    "DesignSnapshot",
    "FALLBACK_STYLE_CATEGORY",
]
