"""Read workflow for a single URL.

``read_article`` orchestrates one read from a raw URL to a payload:

    render → check for challenge page → (fallback scrape) → result
"""

from __future__ import annotations

from typing import Callable

import structlog

from article_reader.config import settings
from article_reader.scraper.fallback import FirecrawlClient
from article_reader.scraper.models import ExtractedContent, ReadResult
from article_reader.scraper.renderer import render_page

logger = structlog.get_logger(__name__)

Renderer = Callable[[str], ExtractedContent]


def is_challenge_page(text: str, marker: str) -> bool:
    """Return ``True`` if *text* is a bot-verification interstitial."""
    return bool(marker) and marker in text


def read_article(
    url: str,
    *,
    fallback: FirecrawlClient,
    renderer: Renderer | None = None,
    challenge_marker: str | None = None,
) -> ReadResult:
    """Render *url* and return its content, falling back to Firecrawl when blocked.

    Pipeline:
        1. :func:`~article_reader.scraper.renderer.render_page`: headless
           render plus DOM cleanup.
        2. If the rendered text contains ``challenge_marker``, call
           :meth:`~article_reader.scraper.fallback.FirecrawlClient.scrape` and
           return its payload instead.

    Args:
        url: The web page URL to read.
        fallback: Client used when a challenge page is detected.
        renderer: Callable producing :class:`ExtractedContent` for a URL.
            Defaults to :func:`render_page`.
        challenge_marker: Substring identifying a challenge page.  Defaults to
            ``settings.challenge_marker``.

    Raises:
        Whatever the renderer or the fallback client raise; nothing is caught
        here.
    """
    if renderer is None:
        renderer = render_page
    if challenge_marker is None:
        challenge_marker = settings.challenge_marker

    logger.info("read_started", url=url)
    extracted = renderer(url)

    if is_challenge_page(extracted.content, challenge_marker):
        logger.warning("challenge_detected", url=url)
        payload = fallback.scrape(url)
        logger.info("read_complete", url=url, source="fallback")
        return ReadResult(payload=payload, source="fallback")

    logger.info("read_complete", url=url, source="browser", chars=len(extracted.content))
    return ReadResult(payload=extracted, source="browser")
