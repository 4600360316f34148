"""Tolerant ``LABEL: value`` parser for generator output.

Labels are matched case-insensitively, underscores may be written as spaces
or hyphens, and labels may be wrapped in markdown bullets or bold markers. A
value runs until the end of its line or until the next recognized label on
the same line. The first occurrence of a label wins.
A label that appears with nothing after it is kept as an empty string, which
callers can tell apart from a label that never appeared.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from design_collector.models.entities import FIELD_LABELS

KNOWN_LABELS: tuple[str, ...] = tuple(label for label, _ in FIELD_LABELS.values())

_LINE_PREFIX_RE = re.compile(r"^[\s>*\-•#]+")


def _label_pattern(labels: Iterable[str]) -> re.Pattern[str]:
    # longest first so DO_NOT_USE_FOR is not shadowed by a shorter label
    alternatives = "|".join(
        re.escape(label).replace("_", "[_ -]") for label in sorted(labels, key=len, reverse=True)
    )
    return re.compile(rf"(?<![A-Za-z0-9_])\**({alternatives})\**\s*:", re.IGNORECASE)


_LABEL_RE = _label_pattern(KNOWN_LABELS)


@dataclass(slots=True)
class ParsedAnalysis:
    """Mapping of label to value for the labels that were present."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, label: str) -> str | None:
        return self.values.get(label.upper())

    def __contains__(self, label: str) -> bool:
        return label.upper() in self.values

    def __len__(self) -> int:
        return len(self.values)


def _clean_value(raw: str) -> str:
    return raw.strip().strip("*").strip()


def parse_labeled_lines(text: str | None) -> ParsedAnalysis:
    parsed = ParsedAnalysis()
    if not text:
        return parsed
    for line in text.splitlines():
        body = _LINE_PREFIX_RE.sub("", line)
        matches = list(_LABEL_RE.finditer(body))
        for idx, match in enumerate(matches):
            label = re.sub(r"[ -]", "_", match.group(1)).upper()
            end = matches[idx + 1].start() if idx + 1 < len(matches) else len(body)
            parsed.values.setdefault(label, _clean_value(body[match.end() : end]))
    return parsed


__all__ = ["KNOWN_LABELS", "ParsedAnalysis", "parse_labeled_lines"]
