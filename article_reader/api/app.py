"""FastAPI application factory.

State
-----
The factory builds one :class:`~article_reader.scraper.fallback.FirecrawlClient`
from the supplied settings and shares it across requests via
``request.app.state.fallback_client``.  Nothing else outlives a request.

Routers
-------
    /content       render a URL and return its title and text
    /health-check  liveness
"""

from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from article_reader import __version__
from article_reader.api.routers import content as content_router
from article_reader.api.routers import health as health_router
from article_reader.config import Settings, settings as default_settings
from article_reader.logging_config import configure_logging, request_id_var
from article_reader.scraper.fallback import FirecrawlClient

logger = structlog.get_logger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    cfg = app_settings or default_settings
    configure_logging(cfg.log_level)

    app = FastAPI(
        title="Article Reader API",
        description=(
            "Renders a web page in a headless browser, strips non-content "
            "elements and returns the title and visible text.  Pages blocked "
            "by a bot-verification challenge are read through Firecrawl."
        ),
        version=__version__,
    )
    app.state.fallback_client = FirecrawlClient.from_settings(cfg)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Bind a request ID to the log context and log status + duration."""
        request_id = str(uuid.uuid4())
        request_id_var.set(request_id)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("unhandled_exception", exc_info=exc)
            raise
        finally:
            elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
            status_code = response.status_code if response is not None else 500
            log_fn = logger.warning if status_code >= 400 else logger.info
            log_fn("request_complete", status_code=status_code, elapsed_ms=elapsed_ms)

        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(content_router.router, prefix="/content", tags=["Article Reader"])
    app.include_router(health_router.router, prefix="/health-check", tags=["Health Check"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn article_reader.api.app:app --reload
app = create_app()
