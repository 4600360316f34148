"""Text processing helpers."""

from __future__ import annotations

import re
from typing import Iterable


WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Collapse whitespace and strip."""
    return WHITESPACE_RE.sub(" ", text).strip()


def unique(items: Iterable[str]) -> list[str]:
    """Remove duplicates and blanks while preserving order."""
    seen: set[str] = set()
    ordered: list[str] = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def split_list(value: str, sep: str = ",") -> list[str]:
    """Split a delimited string into normalized, non-empty parts."""
    return [normalize(part) for part in value.split(sep) if part.strip()]
