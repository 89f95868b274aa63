"""Scraper package: browser rendering & fallback extraction."""

from article_reader.scraper.fallback import FirecrawlClient
from article_reader.scraper.models import ExtractedContent, ReadResult
from article_reader.scraper.renderer import extract_content, render_page

__all__ = [
    "render_page",
    "extract_content",
    "FirecrawlClient",
    "ExtractedContent",
    "ReadResult",
]
