"""Article reader endpoint.

Routes
------
GET /content?url=<url>    → read_article
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from article_reader.api.responses import (
    CONTENT_SUCCESS_MESSAGE,
    ArticleReaderResponse,
    ServiceResponse,
    handle_service_response,
)
from article_reader.reader import read_article

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=ArticleReaderResponse,
    responses={
        400: {"model": ArticleReaderResponse, "description": "Missing or repeated url"},
        500: {"model": ArticleReaderResponse, "description": "Fetch or extraction failed"},
    },
)
def get_content(
    request: Request,
    url: list[str] | None = Query(None, description="Page to read; must be given exactly once."),
) -> JSONResponse:
    """Render the page at ``url`` and return its title and visible text.

    ``url`` must be given exactly once.  When the rendered page is a bot
    challenge the Firecrawl payload is returned in ``responseObject`` instead.
    Declared as a plain ``def`` so FastAPI runs it in the threadpool, where
    Playwright's sync API is allowed.
    """
    if not url or len(url) != 1:
        return handle_service_response(
            ServiceResponse.failed("URL must be a string", status_code=400)
        )
    target = url[0]

    try:
        result = read_article(target, fallback=request.app.state.fallback_client)
    except Exception as exc:
        message = f"Error fetching content: {exc}"
        logger.error("content_failed", url=target, error=str(exc))
        return handle_service_response(ServiceResponse.failed(message, status_code=500))

    return handle_service_response(
        ServiceResponse.ok(CONTENT_SUCCESS_MESSAGE, result.payload_dict())
    )
