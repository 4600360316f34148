"""Common extraction data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from design_collector.models.snapshot import DesignSnapshot


@dataclass(slots=True)
class ElementStyle:
    """Serialized view of one rendered element."""

    tag: str
    class_name: str = ""
    inline_style: str = ""
    role: str = ""
    data_attributes: frozenset[str] = frozenset()
    width: float = 0
    computed: Mapping[str, str] = field(default_factory=dict)

    def css(self, prop: str) -> str:
        """Computed value for ``prop``; unreadable properties read as empty."""
        value = self.computed.get(prop)
        return value.strip() if isinstance(value, str) else ""

    def class_contains(self, *needles: str) -> bool:
        return any(needle in self.class_name for needle in needles)

    def has_class(self, token: str) -> bool:
        return token in self.class_name.split()

    def is_tag(self, *tags: str) -> bool:
        return self.tag in tags

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ElementStyle":
        computed = payload.get("computed") or {}
        try:
            width = float(payload.get("width") or 0)
        except (TypeError, ValueError):
            width = 0
        return cls(
            tag=str(payload.get("tag") or "").lower(),
            class_name=str(payload.get("className") or ""),
            inline_style=str(payload.get("inlineStyle") or ""),
            role=str(payload.get("role") or ""),
            data_attributes=frozenset(payload.get("dataAttributes") or ()),
            width=width,
            computed={str(k): str(v) for k, v in computed.items() if v is not None},
        )


@dataclass(slots=True)
class PageCapture:
    """Everything the extractor needs from one rendered page, in document order."""

    url: str
    title: str
    elements: list[ElementStyle]
    viewport: str | None = None
    theme_color: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PageCapture":
        return cls(
            url=str(payload.get("url") or ""),
            title=str(payload.get("title") or ""),
            elements=[ElementStyle.from_payload(item) for item in payload.get("elements") or ()],
            viewport=payload.get("viewport"),
            theme_color=payload.get("themeColor"),
        )


@dataclass(slots=True)
class ExtractionResult:
    """Outcome of a snapshot request at the extraction boundary."""

    success: bool
    snapshot: DesignSnapshot | None = None
    error: str | None = None


__all__ = ["ElementStyle", "PageCapture", "ExtractionResult"]
