"""Search keyword enrichment.

Keywords are accumulated from the analysis fields and the page hostname with
plain substring triggers, then de-duplicated in first-seen order.
"""

from __future__ import annotations

from urllib.parse import urlparse

from design_collector.models.entities import AnalysisFields
from design_collector.models.snapshot import DesignSnapshot
from design_collector.utils.text import normalize, split_list, unique

# (trigger substrings, keywords added when any trigger is present)
Trigger = tuple[tuple[str, ...], tuple[str, ...]]

STYLE_TRIGGERS: tuple[Trigger, ...] = (
    (("minimal",), ("minimalism",)),
    (("clean",), ("clean",)),
    (("modern",), ("modern",)),
    (("professional",), ("professional",)),
)

TYPE_TRIGGERS: tuple[Trigger, ...] = (
    (("landing",), ("landing page",)),
    (("dashboard",), ("dashboard",)),
)

COLOR_TRIGGERS: tuple[Trigger, ...] = (
    (("white",), ("white background",)),
    (("#fff",), ("white",)),
    (("black", "#000"), ("black",)),
    (("gray", "grey"), ("neutral", "grayscale")),
    (("green",), ("green accent",)),
    (("blue",), ("blue accent",)),
    (("red",), ("red accent",)),
    (("orange",), ("orange accent",)),
)

EFFECT_TRIGGERS: tuple[Trigger, ...] = (
    (("blur",), ("glassmorphism", "frosted")),
    (("gradient",), ("gradient",)),
    (("animation",), ("animated",)),
    (("hover",), ("hover effects",)),
    (("sticky",), ("sticky header",)),
    (("grid",), ("grid layout",)),
    (("flex",), ("flexbox",)),
)

HOST_TRIGGERS: tuple[Trigger, ...] = (
    (("bio", "tech", "science"), ("biotech", "science", "healthcare", "pharmaceutical")),
    (("saas", "app"), ("saas",)),
    (("shop", "store"), ("ecommerce",)),
    (("portfolio", "design"), ("portfolio",)),
)

DISCOVERY_KEYWORDS = ("design", "ui", "ux", "inspiration", "reference")


def _triggered(text: str, triggers: tuple[Trigger, ...]) -> list[str]:
    haystack = text.lower()
    added: list[str] = []
    for needles, keywords in triggers:
        if any(needle in haystack for needle in needles):
            added.extend(keywords)
    return added


def page_hostname(url: str) -> str:
    try:
        hostname = urlparse(url).hostname or ""
    except ValueError:
        return ""
    return hostname.removeprefix("www.")


def enrich_keywords(snapshot: DesignSnapshot, fields: AnalysisFields) -> str:
    """Combine generator keywords with derived tags into one ``", "`` list."""
    keywords = split_list(fields.keywords)

    if fields.style_category:
        keywords.append(normalize(fields.style_category))
        keywords.extend(_triggered(fields.style_category, STYLE_TRIGGERS))

    if fields.type:
        keywords.append(normalize(fields.type))
        keywords.extend(_triggered(fields.type, TYPE_TRIGGERS))

    keywords.extend(_triggered(fields.primary_colors, COLOR_TRIGGERS))
    keywords.extend(_triggered(fields.effects_animation, EFFECT_TRIGGERS))
    keywords.extend(_triggered(page_hostname(snapshot.url), HOST_TRIGGERS))
    keywords.extend(DISCOVERY_KEYWORDS)
    return ", ".join(unique(keywords))


__all__ = ["enrich_keywords", "page_hostname", "DISCOVERY_KEYWORDS"]
