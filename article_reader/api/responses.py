"""Uniform response envelope shared by every route.

Every endpoint answers with::

    {"status": "Success"|"Failed", "message": ..., "responseObject": ..., "statusCode": ...}

and the HTTP status always equals ``statusCode``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field


# Message sent with every successful /content response; clients match on it.
CONTENT_SUCCESS_MESSAGE = "Service is healthy"


class ResponseStatus(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"


class ServiceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: ResponseStatus
    message: str
    response_object: Any = Field(default=None, alias="responseObject")
    status_code: int = Field(alias="statusCode")

    @classmethod
    def ok(cls, message: str, response_object: Any = None, status_code: int = 200) -> ServiceResponse:
        return cls(
            status=ResponseStatus.SUCCESS,
            message=message,
            response_object=response_object,
            status_code=status_code,
        )

    @classmethod
    def failed(cls, message: str, status_code: int) -> ServiceResponse:
        return cls(
            status=ResponseStatus.FAILED,
            message=message,
            response_object=None,
            status_code=status_code,
        )


class ExtractedContentSchema(BaseModel):
    """OpenAPI schema for the browser-path payload."""

    title: str
    content: str


class ArticleReaderResponse(BaseModel):
    """OpenAPI schema for ``GET /content``."""

    status: ResponseStatus
    message: str
    responseObject: ExtractedContentSchema | dict[str, Any] | None
    statusCode: int


def handle_service_response(service_response: ServiceResponse) -> JSONResponse:
    """Render *service_response* with its own status code."""
    return JSONResponse(
        status_code=service_response.status_code,
        content=service_response.model_dump(mode="json", by_alias=True),
    )
