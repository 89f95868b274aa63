"""Centralised settings for the Article Reader service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fallback provider (Firecrawl)
    # ------------------------------------------------------------------
    firecrawl_api_key: str = field(
        default_factory=lambda: os.environ.get("FIRECRAWL_API_KEY", "")
    )
    firecrawl_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "FIRECRAWL_BASE_URL", "https://api.firecrawl.dev/v1"
        )
    )
    firecrawl_timeout: float = field(
        default_factory=lambda: float(os.environ.get("FIRECRAWL_TIMEOUT", "60.0"))
    )

    # ------------------------------------------------------------------
    # Browser rendering
    # ------------------------------------------------------------------
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("NAVIGATION_TIMEOUT", "10.0"))
    )
    headless: bool = field(
        default_factory=lambda: _env_bool("BROWSER_HEADLESS", "true")
    )

    # Text shown by interstitial bot-verification pages instead of the article.
    challenge_marker: str = field(
        default_factory=lambda: os.environ.get(
            "CHALLENGE_MARKER", "Verifying you are human by completing"
        )
    )

    # ------------------------------------------------------------------
    # HTTP server / logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )
    host: str = field(default_factory=lambda: os.environ.get("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "8080")))
    cors_origins: list[str] = field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
    )

    @property
    def navigation_timeout_ms(self) -> int:
        """Navigation timeout in milliseconds, as Playwright expects it."""
        return int(self.navigation_timeout * 1000)


# Module-level singleton, import this everywhere:
#   from article_reader.config import settings
settings = Settings()
