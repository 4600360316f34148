"""Tests for typography, layout, effects and style categorization."""

from __future__ import annotations

from design_collector.extract.categories import detect_style_categories
from design_collector.extract.effects import extract_effects
from design_collector.extract.extractor import extract_design
from design_collector.extract.layout import extract_layout
from design_collector.extract.types import PageCapture
from design_collector.extract.typography import extract_typography
from design_collector.models.snapshot import ColorCategory, ColorEntry, Effects, Layout


def test_typography_counts_text_tags_and_first_heading(element) -> None:
    heading_css = {
        "font-family": '"Playfair Display", serif',
        "font-size": "48px",
        "font-weight": "700",
        "line-height": "56px",
        "letter-spacing": "-0.5px",
    }
    elements = [
        element("h1", css=heading_css),
        element("h1", css={"font-family": "Arial", "font-size": "32px"}),
        *[element("p", css={"font-family": "Inter, sans-serif", "font-size": "16px"}) for _ in range(3)],
        element("div", css={"font-family": "Comic Sans MS", "font-size": "99px"}),
    ]

    typography = extract_typography(elements)

    assert [(f.font, f.count) for f in typography.fonts] == [("Inter", 3), ("Playfair Display", 1), ("Arial", 1)]
    assert [(s.size, s.count) for s in typography.font_sizes] == [("16px", 3), ("48px", 1), ("32px", 1)]
    assert len(typography.heading_styles) == 1
    h1 = typography.heading_styles[0]
    assert (h1.tag, h1.font_family, h1.font_weight, h1.letter_spacing) == ("h1", "Playfair Display", "700", "-0.5px")


def test_layout_containers_flex_grid_and_spacing(element) -> None:
    elements = [
        element(class_name="container", width=1200),
        element("main", width=1200),
        element(class_name="page-wrapper", width=960),
        element("article", width=80),
        element(class_name="flex items-center"),
        element(inline_style="display: grid"),
        element("section", css={"padding": "24px", "margin": "0px", "gap": "normal"}),
        element("div", css={"padding": "0px 0px", "margin": "16px 0px"}),
        element("span", css={"padding": "8px"}),
    ]

    layout = extract_layout(elements)

    assert layout.container_widths == [1200, 960]
    assert (layout.uses_flexbox, layout.flex_count) == (True, 1)
    assert (layout.uses_grid, layout.grid_count) == (True, 1)
    assert layout.common_spacings == ["24px", "16px 0px"]


def test_effects_single_scan(element) -> None:
    soft = "rgba(0, 0, 0, 0.1) 0px 1px 3px 0px"
    elements = [
        element(
            css={
                "box-shadow": soft,
                "border-radius": "8px",
                "transition": "opacity 0.2s ease 0s",
                "transition-property": "opacity",
                "transition-duration": "0.2s",
            }
        ),
        element(
            css={
                "box-shadow": soft,
                "border-radius": "0px",
                "background-image": "linear-gradient(red, blue)",
                "backdrop-filter": "blur(10px)",
                "animation-name": "fadeIn",
                "transform": "matrix(1, 0, 0, 1, 0, 0)",
                "transition": "all 0s ease 0s",
            }
        ),
        element(css={"box-shadow": "none", "backdrop-filter": "none", "animation-name": "none", "transform": "none"}),
    ]

    effects = extract_effects(elements)

    assert effects.shadows == [soft]
    assert effects.border_radius == ["8px"]
    assert effects.gradients == ["linear-gradient(red, blue)"]
    assert effects.blur is True
    assert effects.animations == ["fadeIn"]
    assert effects.transitions == ["opacity 0.2s"]
    assert effects.transforms == ["matrix"]
    assert effects.interactions == []


def test_effects_caps_distinct_shadows(element) -> None:
    elements = [element(css={"box-shadow": f"rgb(1, 2, 3) 0px {n}px 4px 0px"}) for n in range(7)]
    assert len(extract_effects(elements).shadows) == 5


def test_interaction_tags(element) -> None:
    elements = [
        element("button"),
        element(role="button"),
        element("a", class_name="btn primary"),
        element(class_name="product-card"),
        element(class_name="modal-backdrop"),
        element("select"),
        element(class_name="swiper-container"),
        element("details"),
        element(role="tablist"),
        element("span", data_attributes=frozenset({"data-tooltip"})),
        element(class_name="reveal-on-scroll"),
        element("header", class_name="site-header is-sticky"),
    ]

    assert extract_effects(elements).interactions == [
        "buttons(3)",
        "cards(1)",
        "modals",
        "dropdowns",
        "carousel/slider",
        "accordions",
        "tabs",
        "tooltips",
        "scroll-animations",
        "parallax/sticky",
    ]


def test_minimalism_for_empty_page() -> None:
    assert "Minimalism" in detect_style_categories([], Effects(), Layout())


def test_fallback_label_when_no_rule_fires() -> None:
    effects = Effects(shadows=["rgba(0, 0, 0, 0.1) 0px 1px 3px 0px", "rgba(0, 0, 0, 0.2) 0px 4px 6px -1px"])
    assert detect_style_categories([], effects, Layout()) == ["Modern/Custom"]


def test_dark_mode_and_bento_rules() -> None:
    colors = [ColorEntry(hex="#121212", count=40, category=ColorCategory.TEXT_DARK)]
    layout = Layout(uses_grid=True, grid_count=4)
    assert detect_style_categories(colors, Effects(), layout) == ["Minimalism", "Bento Box Grid", "Dark Mode"]


def test_neubrutalism_needs_hard_shadow_and_primary_color() -> None:
    effects = Effects(shadows=["rgb(0, 0, 0) 4px 4px 0px 0px", "rgb(0, 0, 0) 2px 2px 0px 0px"])
    red = [ColorEntry(hex="#FF0000", count=3, category=ColorCategory.ACCENT_WARM)]
    teal = [ColorEntry(hex="#008080", count=3, category=ColorCategory.NEUTRAL)]
    assert detect_style_categories(red, effects, Layout()) == ["Neubrutalism"]
    assert detect_style_categories(teal, effects, Layout()) == ["Modern/Custom"]


def test_glassmorphism_needs_blur_and_translucent_color() -> None:
    glass = [ColorEntry(hex="#3366CC", count=2, category=ColorCategory.ACCENT_COOL, translucent=True)]
    assert detect_style_categories(glass, Effects(blur=True), Layout()) == ["Glassmorphism", "Minimalism"]
    assert detect_style_categories(glass, Effects(blur=False), Layout()) == ["Minimalism"]


def test_extract_design_from_capture_payload() -> None:
    capture = PageCapture.from_payload(
        {
            "url": "https://example.com/",
            "title": "Example",
            "themeColor": "#1a73e8",
            "elements": [
                {"tag": "BODY", "computed": {"background-color": "rgb(18, 18, 18)"}},
                {"tag": "h1", "className": "hero", "computed": {"color": "rgb(26, 115, 232)", "font-family": "Inter"}},
                {"tag": "div", "className": "container", "width": 1140, "computed": {"padding": "32px"}},
            ],
        }
    )

    snapshot = extract_design(capture, timestamp="2026-10-19T00:00:00.000Z")

    assert snapshot.url == "https://example.com/"
    assert snapshot.timestamp == "2026-10-19T00:00:00.000Z"
    assert [c.hex for c in snapshot.colors] == ["#121212", "#1A73E8"]
    assert snapshot.typography.heading_styles[0].tag == "h1"
    assert snapshot.layout.container_widths == [1140]
    assert snapshot.style_categories == ["Minimalism"]
    assert snapshot.meta.viewport == "not set"
    assert snapshot.meta.theme_color == "#1a73e8"
    wire = snapshot.model_dump(by_alias=True)
    assert "styleCategories" in wire and "fontSizes" in wire["typography"]
