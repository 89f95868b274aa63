"""Fallback content extraction through the Firecrawl scrape API.

Used when the rendered page turns out to be a bot-verification challenge.
Firecrawl performs its own fetch and cleanup and returns markdown.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from article_reader.config import Settings
from article_reader.exceptions import FallbackExtractionError, FallbackNotConfiguredError

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.firecrawl.dev/v1"


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class FirecrawlClient:
    """Minimal client for Firecrawl's ``/scrape`` endpoint.

    The API key is passed in explicitly; nothing is read from the environment
    here.  Use :meth:`from_settings` to build one from application settings.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> FirecrawlClient:
        return cls(
            settings.firecrawl_api_key,
            base_url=settings.firecrawl_base_url,
            timeout=settings.firecrawl_timeout,
        )

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def scrape(self, url: str) -> Any:
        """Scrape *url* as markdown and return the provider's ``data`` payload.

        The payload is returned exactly as Firecrawl sends it (typically
        ``{"markdown": ..., "metadata": {...}}``).

        Raises:
            FallbackNotConfiguredError: No API key was configured.
            FallbackExtractionError: Non-2xx status, or ``success`` is not
                truthy in the response body.
            httpx.HTTPError: Transport-level failure.
        """
        if not self.configured:
            raise FallbackNotConfiguredError(
                "Fallback extraction requires FIRECRAWL_API_KEY to be set"
            )

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        payload = {"url": url, "formats": ["markdown"]}

        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.post(
                    f"{self._base_url}/scrape", headers=headers, json=payload
                )
        except httpx.HTTPError as exc:
            logger.error("fallback_request_failed", url=url, error=str(exc))
            raise

        if not response.is_success:
            logger.error(
                "fallback_http_error",
                url=url,
                status_code=response.status_code,
                body=_error_body(response),
            )
            raise FallbackExtractionError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        data = response.json()
        if not data.get("success"):
            logger.error("fallback_unsuccessful", url=url, body=data)
            raise FallbackExtractionError(
                "Failed to extract content using FireCrawl",
                status_code=response.status_code,
            )

        return data.get("data")
