"""Shared fixtures.

Playwright is never launched in the test suite.  ``fake_browser`` patches
``sync_playwright`` in the renderer module with a ``MagicMock`` chain
(``sync_playwright() → playwright → chromium.launch() → browser →
new_page() → page``) so tests can script ``page.goto`` / ``page.evaluate``
and inspect ``browser.close``.
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from article_reader.config import Settings


@pytest.fixture()
def fake_browser():
    page = MagicMock(name="page")
    page.title.return_value = "Test Page"
    page.evaluate.return_value = "Main article text."

    browser = MagicMock(name="browser")
    browser.new_page.return_value = page

    pw = MagicMock(name="playwright")
    pw.chromium.launch.return_value = browser

    manager = MagicMock(name="sync_playwright")
    manager.return_value.__enter__.return_value = pw
    manager.return_value.__exit__.return_value = False

    with patch("article_reader.scraper.renderer.sync_playwright", manager):
        yield SimpleNamespace(manager=manager, playwright=pw, browser=browser, page=page)


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        firecrawl_api_key="fc-test-key",
        firecrawl_base_url="https://api.firecrawl.dev/v1",
        firecrawl_timeout=5.0,
        navigation_timeout=10.0,
        headless=True,
        challenge_marker="Verifying you are human by completing",
        log_level="WARNING",
        cors_origins=["*"],
    )
