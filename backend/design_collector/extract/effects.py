"""Visual effect and interaction-affordance extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence

from design_collector.extract.types import ElementStyle
from design_collector.models.snapshot import Effects

MAX_SHADOWS = 5
MAX_RADII = 5
MAX_GRADIENTS = 5
MAX_ANIMATIONS = 10
MAX_TRANSITIONS = 8
MAX_TRANSFORMS = 5

_IDLE_TRANSITIONS = frozenset({"", "none", "all 0s ease 0s", "all"})
_TRANSFORM_RE = re.compile(r"^(\w+)")


@dataclass(frozen=True, slots=True)
class InteractionRule:
    """Tag emitted when any element matches; ``counted`` appends the match count."""

    tag: str
    matches: Callable[[ElementStyle], bool]
    counted: bool = False


INTERACTION_RULES: tuple[InteractionRule, ...] = (
    InteractionRule(
        "buttons",
        lambda el: el.is_tag("button") or el.role == "button" or (el.is_tag("a") and el.has_class("btn")) or el.has_class("button"),
        counted=True,
    ),
    InteractionRule("cards", lambda el: el.class_contains("card", "Card"), counted=True),
    InteractionRule("modals", lambda el: el.class_contains("modal", "dialog") or el.role == "dialog"),
    InteractionRule("dropdowns", lambda el: el.class_contains("dropdown", "menu") or el.is_tag("select")),
    InteractionRule("carousel/slider", lambda el: el.class_contains("carousel", "slider", "swiper")),
    InteractionRule("accordions", lambda el: el.class_contains("accordion", "collapse") or el.is_tag("details")),
    InteractionRule("tabs", lambda el: el.role == "tablist" or el.class_contains("tabs")),
    InteractionRule("tooltips", lambda el: el.class_contains("tooltip") or "data-tooltip" in el.data_attributes),
    InteractionRule("scroll-animations", lambda el: el.class_contains("aos", "scroll", "reveal", "animate")),
    InteractionRule(
        "parallax/sticky",
        lambda el: el.class_contains("parallax", "sticky") or "data-parallax" in el.data_attributes,
    ),
)


def detect_interactions(elements: Sequence[ElementStyle]) -> list[str]:
    tags: list[str] = []
    for rule in INTERACTION_RULES:
        hits = sum(1 for element in elements if rule.matches(element))
        if not hits:
            continue
        tags.append(f"{rule.tag}({hits})" if rule.counted else rule.tag)
    return tags


def _is_set(value: str) -> bool:
    return bool(value) and value != "none"


def extract_effects(elements: Sequence[ElementStyle]) -> Effects:
    # dicts double as insertion-ordered sets
    shadows: dict[str, None] = {}
    radii: dict[str, None] = {}
    gradients: dict[str, None] = {}
    animations: dict[str, None] = {}
    transitions: dict[str, None] = {}
    transforms: dict[str, None] = {}
    blur = False

    for element in elements:
        shadow = element.css("box-shadow")
        if _is_set(shadow):
            shadows.setdefault(shadow, None)

        radius = element.css("border-radius")
        if radius and radius != "0px":
            radii.setdefault(radius, None)

        background = element.css("background-image")
        if "gradient" in background:
            gradients.setdefault(background, None)

        if _is_set(element.css("backdrop-filter")):
            blur = True

        animation = element.css("animation-name")
        if _is_set(animation):
            animations.setdefault(animation, None)

        if element.css("transition") not in _IDLE_TRANSITIONS:
            pair = f"{element.css('transition-property')} {element.css('transition-duration')}".strip()
            transitions.setdefault(pair, None)

        transform = element.css("transform")
        if _is_set(transform):
            match = _TRANSFORM_RE.match(transform)
            if match:
                transforms.setdefault(match.group(1), None)

    return Effects(
        shadows=list(shadows)[:MAX_SHADOWS],
        border_radius=list(radii)[:MAX_RADII],
        gradients=list(gradients)[:MAX_GRADIENTS],
        blur=blur,
        animations=list(animations)[:MAX_ANIMATIONS],
        transitions=list(transitions)[:MAX_TRANSITIONS],
        transforms=list(transforms)[:MAX_TRANSFORMS],
        interactions=detect_interactions(elements),
    )


__all__ = ["extract_effects", "detect_interactions", "INTERACTION_RULES", "InteractionRule"]
