"""
Error types and FastAPI exception handlers.

The API knows two user-visible failures: a ``ValidationError`` when a
required field is missing or empty (HTTP 400) and a ``NotFoundError``
when no user has the requested id (HTTP 404).  Both are raised by the
service layer and rendered by the handlers registered in
``setup_error_handling`` as ``{"error": "<message>"}``.  Framework
errors (unknown routes, unparsable bodies) are rendered in the same
shape.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "invalid request body"


class APIError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(APIError):
    """A required request field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "name and email are required"


class NotFoundError(APIError):
    """No user with the given id exists."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "user not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject bodies that are not a JSON object of strings.

    FastAPI would answer with a 422 and pydantic's error list; this API
    only distinguishes client errors by 400 and a single message.
    """
    logger.info(
        "%s %s -> 400: %d body validation error(s)",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def setup_error_handling(app: FastAPI) -> None:
    """Register the exception handlers on ``app``."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
