"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal


@dataclass
class ExtractedContent:
    """Title and visible body text of a rendered page."""

    title: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class ReadResult:
    """Outcome of one read: the payload plus which path produced it.

    ``payload`` is an :class:`ExtractedContent` when the browser path won, or
    the fallback provider's ``data`` object passed through as-is.
    """

    payload: ExtractedContent | dict[str, Any]
    source: Literal["browser", "fallback"]

    def payload_dict(self) -> dict[str, Any]:
        """Return the payload as a JSON-ready dict."""
        if isinstance(self.payload, ExtractedContent):
            return self.payload.to_dict()
        return self.payload
