"""Analysis normalization: prompt, generator client, parsing and fallbacks."""

from .generator import CommandGenerator, DisabledGenerator, GeneratorError, TextGenerator
from .keywords import enrich_keywords
from .normalizer import NormalizedAnalysis, normalize_analysis
from .parser import ParsedAnalysis, parse_labeled_lines
from .prompt import build_analysis_prompt

__all__ = [
    "CommandGenerator",
    "DisabledGenerator",
    "GeneratorError",
    "TextGenerator",
    "enrich_keywords",
    "NormalizedAnalysis",
    "normalize_analysis",
    "ParsedAnalysis",
    "parse_labeled_lines",
    "build_analysis_prompt",
]
