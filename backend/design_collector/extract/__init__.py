"""Design-signal extraction components."""

from .categories import STYLE_RULES, detect_style_categories
from .colors import categorize_color, extract_colors, rgb_to_hex
from .effects import extract_effects
from .extractor import ExtractionError, extract_design
from .layout import extract_layout
from .types import ElementStyle, ExtractionResult, PageCapture
from .typography import extract_typography

__all__ = [
    "STYLE_RULES",
    "detect_style_categories",
    "categorize_color",
    "extract_colors",
    "rgb_to_hex",
    "extract_effects",
    "ExtractionError",
    "extract_design",
    "extract_layout",
    "ElementStyle",
    "ExtractionResult",
    "PageCapture",
    "extract_typography",
]
