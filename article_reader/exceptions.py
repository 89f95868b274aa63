"""Exception hierarchy for Article Reader.

Hierarchy::

    ArticleReaderError
    └── FallbackExtractionError      (status_code: int | None)
        └── FallbackNotConfiguredError

Browser failures are not wrapped: Playwright's own ``Error`` and
``TimeoutError`` propagate out of the renderer unchanged so the timeout
salvage path can recognise them.
"""

from __future__ import annotations


class ArticleReaderError(Exception):
    """Base class for all Article Reader exceptions."""


class FallbackExtractionError(ArticleReaderError):
    """Raised when the fallback extraction provider fails.

    Args:
        message: Human-readable description of the failure.
        status_code: HTTP status returned by the provider, if any.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FallbackNotConfiguredError(FallbackExtractionError):
    """Raised when a challenge page needs the fallback but no API key is set."""
