"""Test fixtures for the design collector."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from design_collector.extract.types import ElementStyle  # noqa: E402


def _reset_singletons() -> None:
    from design_collector.api import dependencies as deps
    from design_collector.core.config import get_settings

    get_settings.cache_clear()
    deps.get_app_settings.cache_clear()
    deps._TABLE = None
    deps._GENERATOR = None
    deps._PIPELINE = None


@pytest.fixture(autouse=True)
def reset_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset global singletons and environment between tests."""
    monkeypatch.setenv("DCOL_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("DCOL_CONFIG", raising=False)
    monkeypatch.delenv("DCOL_GENERATOR_ENABLED", raising=False)
    _reset_singletons()
    yield
    _reset_singletons()


@pytest.fixture
def element() -> Callable[..., ElementStyle]:
    """Factory for rendered elements; keyword ``css`` holds computed styles."""

    def make(tag: str = "div", css: dict[str, str] | None = None, **kwargs: Any) -> ElementStyle:
        return ElementStyle(tag=tag, computed=css or {}, **kwargs)

    return make


@pytest.fixture
def snapshot_payload() -> dict[str, Any]:
    """Wire-format snapshot as the browser extension posts it."""
    return {
        "url": "https://example.com",
        "title": "Example Domain",
        "timestamp": "2026-10-19T08:00:00.000Z",
        "colors": [
            {"hex": "#1A73E8", "count": 12, "category": "accent-cool"},
            {"hex": "#F1F3F4", "count": 9, "category": "background-light"},
            {"hex": "#202124", "count": 4, "category": "text-dark"},
            {"hex": "#34A853", "count": 2, "category": "accent-nature"},
        ],
        "typography": {
            "fonts": [{"font": "Inter", "count": 30}],
            "fontSizes": [{"size": "16px", "count": 20}],
            "headingStyles": [
                {
                    "tag": "h1",
                    "fontFamily": "Inter",
                    "fontSize": "48px",
                    "fontWeight": "700",
                    "lineHeight": "56px",
                    "letterSpacing": "normal",
                }
            ],
        },
        "layout": {
            "containerWidths": [1200],
            "usesFlexbox": True,
            "usesGrid": False,
            "flexCount": 6,
            "gridCount": 0,
            "commonSpacings": ["16px", "24px 0px"],
        },
        "effects": {
            "shadows": [],
            "borderRadius": ["8px"],
            "gradients": [],
            "blur": False,
            "animations": [],
            "transitions": ["opacity 0.2s"],
            "transforms": [],
            "interactions": ["buttons(3)"],
        },
        "styleCategories": ["Minimalism"],
    }
