"""Liveness endpoint.

Routes
------
GET /health-check
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from article_reader.api.responses import ServiceResponse, handle_service_response

HEALTHY_MESSAGE = "Service is healthy"

router = APIRouter()


@router.get("")
def health_check() -> JSONResponse:
    return handle_service_response(ServiceResponse.ok(HEALTHY_MESSAGE))
