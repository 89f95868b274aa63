"""Headless-browser page renderer.

Renders a URL in an isolated Chromium session, strips non-content elements
from the DOM and returns the page title plus the remaining visible text.
"""

from __future__ import annotations

import structlog
from playwright.sync_api import Page, sync_playwright
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from article_reader.config import settings
from article_reader.scraper.models import ExtractedContent

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# DOM cleanup
# ---------------------------------------------------------------------------

NON_CONTENT_TAGS: tuple[str, ...] = (
    "footer",
    "header",
    "nav",
    "script",
    "style",
    "link",
    "meta",
    "noscript",
    "img",
    "picture",
    "video",
    "audio",
    "iframe",
    "object",
    "embed",
    "param",
    "track",
    "source",
    "canvas",
    "map",
    "area",
    "svg",
    "math",
)

# Removes the first match of each tag only, then reads the rendered text.
_CLEANUP_SCRIPT = """
(tags) => {
    tags.forEach((tag) => {
        const el = document.querySelector(tag);
        if (el) el.remove();
    });
    return document.body.innerText;
}
"""


def extract_content(page: Page) -> ExtractedContent:
    """Strip non-content elements from *page* and read its title and text."""
    title = page.title()
    content = page.evaluate(_CLEANUP_SCRIPT, list(NON_CONTENT_TAGS))
    return ExtractedContent(title=title, content=content or "")


def _salvage(page: Page, url: str) -> ExtractedContent | None:
    """Try to extract from a page whose navigation timed out.

    Returns ``None`` (after logging) when the partially loaded page cannot be
    read either.
    """
    try:
        return extract_content(page)
    except Exception as exc:  # noqa: BLE001
        logger.error("salvage_failed", url=url, error=str(exc))
        return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def render_page(
    url: str,
    *,
    navigation_timeout_ms: int | None = None,
    headless: bool | None = None,
) -> ExtractedContent:
    """Render *url* in headless Chromium and return its cleaned title and text.

    Navigation waits for network idle, bounded by ``navigation_timeout_ms``
    (``settings.navigation_timeout`` by default).  When Playwright reports a
    timeout the content of the partially loaded page is extracted anyway; if
    that also fails the original timeout error is re-raised.

    The browser is closed exactly once on every exit path.

    Raises:
        playwright.sync_api.TimeoutError: Navigation timed out and the partial
            page could not be read.
        playwright.sync_api.Error: Any other navigation or evaluation failure.
    """
    if navigation_timeout_ms is None:
        navigation_timeout_ms = settings.navigation_timeout_ms
    if headless is None:
        headless = settings.headless

    with sync_playwright() as pw:
        browser = pw.chromium.launch(headless=headless)
        try:
            page = browser.new_page()
            try:
                page.goto(url, wait_until="networkidle", timeout=navigation_timeout_ms)
                return extract_content(page)
            except PlaywrightTimeoutError as exc:
                logger.warning("render_timeout", url=url, error=str(exc))
                salvaged = _salvage(page, url)
                if salvaged is None:
                    raise
                logger.info("render_salvaged", url=url, chars=len(salvaged.content))
                return salvaged
        except Exception as exc:
            logger.error("render_failed", url=url, error=str(exc))
            raise
        finally:
            browser.close()
