"""Prompt construction for the external text generator."""

from __future__ import annotations

from design_collector.models.snapshot import DesignSnapshot

PROMPT_COLOR_LIMIT = 8

_OUTPUT_INSTRUCTIONS = """---OUTPUT (one line each, no markdown):---
STYLE_CATEGORY: [e.g., "Dark Mode SaaS", "Glassmorphism Dashboard"]
TYPE: [General, Landing Page, Dashboard, E-commerce, Portfolio]
KEYWORDS: [8-12 keywords]
PRIMARY_COLORS: [2-3 main colors with hex]
SECONDARY_COLORS: [1-2 accent colors with hex]
EFFECTS_ANIMATION: [DETAILED UX: button hover (scale/shadow/color), card interactions, scroll-triggered animations, page transitions, loading states, micro-interactions. Be specific: "buttons: scale 1.05 + lift shadow", "cards: stagger fade-in on scroll", "nav: sticky blur header"]
BEST_FOR: [3-5 use cases]
DO_NOT_USE_FOR: [2-3 anti-cases]
LIGHT_MODE: [Full, Partial, No]
DARK_MODE: [Full, Partial, No]
PERFORMANCE: [Excellent, Good, Moderate, Poor]
ACCESSIBILITY: [WCAG AAA, WCAG AA, Low contrast, Needs review]
MOBILE_FRIENDLY: [High, Good, Medium, Low]
FRAMEWORK_COMPAT: [e.g., "Tailwind 10/10, React 9/10"]
COMPLEXITY: [Low, Medium, High]
NOTES: [1 sentence focusing on unique UX/interaction pattern]"""


def visual_summary(snapshot: DesignSnapshot) -> str:
    effects = snapshot.effects
    parts = [
        "backdrop-blur/glassmorphism" if effects.blur else "",
        f"gradients({len(effects.gradients)})" if effects.gradients else "",
        "box-shadows" if effects.shadows else "",
        f"rounded({effects.border_radius[0]})" if effects.border_radius else "",
    ]
    return ", ".join(part for part in parts if part)


def motion_summary(snapshot: DesignSnapshot) -> str:
    effects = snapshot.effects
    parts = [
        f"animations: {', '.join(effects.animations[:3])}" if effects.animations else "",
        f"transitions: {'; '.join(effects.transitions[:3])}" if effects.transitions else "",
        f"transforms: {', '.join(effects.transforms)}" if effects.transforms else "",
    ]
    return " | ".join(part for part in parts if part)


def build_analysis_prompt(snapshot: DesignSnapshot) -> str:
    layout = snapshot.layout
    layout_line = " ".join(
        part for part in ("Grid" if layout.uses_grid else "", "Flexbox" if layout.uses_flexbox else "") if part
    )
    header = [
        "Analyze this webpage design with focus on UX interactions and motion. "
        "Output EXACTLY in this format:",
        "",
        f"URL: {snapshot.url}",
        f"Title: {snapshot.title}",
        f"Colors: {', '.join(snapshot.top_hexes(PROMPT_COLOR_LIMIT))}",
        f"Fonts: {', '.join(entry.font for entry in snapshot.typography.fonts)}",
        f"Visual: {visual_summary(snapshot) or 'minimal'}",
        f"Motion: {motion_summary(snapshot) or 'minimal transitions'}",
        f"Interactions: {', '.join(snapshot.effects.interactions) or 'basic'}",
        f"Layout: {layout_line}",
        "",
    ]
    return "\n".join(header) + _OUTPUT_INSTRUCTIONS


__all__ = ["build_analysis_prompt", "visual_summary", "motion_summary"]
