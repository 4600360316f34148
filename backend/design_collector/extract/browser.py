"""Headless browser capture of computed styles via Playwright."""

from __future__ import annotations

import time

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from design_collector.core.config import Settings
from design_collector.core.logging import get_logger
from design_collector.core.metrics import EXTRACTION_DURATION
from design_collector.extract.extractor import ExtractionError, extract_design
from design_collector.extract.types import ExtractionResult, PageCapture

logger = get_logger(__name__)

CAPTURED_PROPERTIES = (
    "background-color",
    "color",
    "border-color",
    "border-top-color",
    "border-bottom-color",
    "border-left-color",
    "border-right-color",
    "outline-color",
    "box-shadow",
    "font-family",
    "font-size",
    "font-weight",
    "line-height",
    "letter-spacing",
    "padding",
    "margin",
    "gap",
    "border-radius",
    "background-image",
    "backdrop-filter",
    "animation-name",
    "transition",
    "transition-property",
    "transition-duration",
    "transform",
)

NETWORK_IDLE_TIMEOUT_MS = 15000

# Read-only: serializes every element without touching the DOM.
_CAPTURE_SCRIPT = """(props) => {
    const elements = [];
    document.querySelectorAll('*').forEach(el => {
        let computed = {};
        try {
            const style = window.getComputedStyle(el);
            props.forEach(p => { computed[p] = style.getPropertyValue(p); });
        } catch (e) {
            computed = {};
        }
        const dataAttributes = [];
        for (const attr of el.attributes) {
            if (attr.name.startsWith('data-')) dataAttributes.push(attr.name);
        }
        elements.push({
            tag: el.tagName.toLowerCase(),
            className: el.getAttribute('class') || '',
            inlineStyle: el.getAttribute('style') || '',
            role: el.getAttribute('role') || '',
            dataAttributes,
            width: el.offsetWidth || 0,
            computed,
        });
    });
    const meta = (name) => {
        const node = document.querySelector(`meta[name="${name}"]`);
        return node ? node.content : null;
    };
    return {
        url: window.location.href,
        title: document.title,
        viewport: meta('viewport'),
        themeColor: meta('theme-color'),
        elements,
    };
}"""


async def capture_page(url: str, settings: Settings) -> PageCapture:
    """Render ``url`` in headless Chromium and serialize its computed styles."""
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True)
        try:
            context = await browser.new_context(
                viewport={"width": settings.viewport_width, "height": settings.viewport_height},
                device_scale_factor=1,
            )
            page = await context.new_page()
            await page.goto(url, wait_until="domcontentloaded", timeout=settings.browser_timeout_ms)
            try:
                await page.wait_for_load_state("networkidle", timeout=NETWORK_IDLE_TIMEOUT_MS)
            except PlaywrightTimeoutError:
                logger.debug("Network never went idle for %s; capturing anyway", url)
            payload = await page.evaluate(_CAPTURE_SCRIPT, list(CAPTURED_PROPERTIES))
        finally:
            await browser.close()
    if not isinstance(payload, dict):
        raise ExtractionError(f"Page at {url} returned no capture")
    return PageCapture.from_payload(payload)


async def snapshot_url(url: str, settings: Settings) -> ExtractionResult:
    """Capture and extract one page; failures come back as a tagged result."""
    started = time.perf_counter()
    try:
        capture = await capture_page(url, settings)
        snapshot = extract_design(capture)
    except (PlaywrightError, ExtractionError, ValueError) as exc:
        EXTRACTION_DURATION.labels(status="error").observe(time.perf_counter() - started)
        logger.warning("Extraction failed for %s: %s", url, exc, extra={"ctx_url": url})
        return ExtractionResult(success=False, error=str(exc) or exc.__class__.__name__)
    EXTRACTION_DURATION.labels(status="ok").observe(time.perf_counter() - started)
    logger.info(
        "Extracted %s colors from %s",
        len(snapshot.colors),
        url,
        extra={"ctx_url": url, "ctx_styles": snapshot.style_categories},
    )
    return ExtractionResult(success=True, snapshot=snapshot)


__all__ = ["CAPTURED_PROPERTIES", "capture_page", "snapshot_url"]
