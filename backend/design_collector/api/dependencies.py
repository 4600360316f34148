"""Shared FastAPI dependencies."""

from __future__ import annotations

from functools import lru_cache

from design_collector.analysis.generator import CommandGenerator, DisabledGenerator, TextGenerator
from design_collector.core.config import Settings, get_settings
from design_collector.service.pipeline import AnalysisPipeline
from design_collector.store.csv_table import DesignTable

_TABLE: DesignTable | None = None
_GENERATOR: TextGenerator | None = None
_PIPELINE: AnalysisPipeline | None = None


@lru_cache(maxsize=1)
def get_app_settings() -> Settings:
    return get_settings()


def get_table() -> DesignTable:
    global _TABLE
    if _TABLE is None:
        _TABLE = DesignTable(get_app_settings().table_path)
    return _TABLE


def get_generator() -> TextGenerator:
    global _GENERATOR
    if _GENERATOR is None:
        settings = get_app_settings()
        if settings.generator_enabled:
            _GENERATOR = CommandGenerator(settings.generator_argv, timeout=settings.generator_timeout)
        else:
            _GENERATOR = DisabledGenerator()
    return _GENERATOR


def get_pipeline() -> AnalysisPipeline:
    global _PIPELINE
    if _PIPELINE is None:
        _PIPELINE = AnalysisPipeline(table=get_table(), generator=get_generator())
    return _PIPELINE


__all__ = ["get_app_settings", "get_table", "get_generator", "get_pipeline"]
