"""
Centralized error handlers for FastAPI.

Routes every error to map_error so that all error responses share the
ErrorPayload shape: the request path, the status code and a message.
Error responses carry the secure headers themselves, since a 500 is
written outside the middleware that adds them to other responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.person.errors import PersonDomainError
from app.shared.errors.error_mapper import HTTP_500, map_error
from app.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)


def error_response(request: Request, exc: Exception) -> JSONResponse:
    """Build the JSON error response for an exception raised by a request."""
    status_code, payload = map_error(exc, request.url.path)
    if status_code >= HTTP_500:
        logger.error(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc_info=exc,
        )
    else:
        logger.warning(
            "%s %s -> %d: %s",
            request.method,
            request.url.path,
            status_code,
            payload.message,
        )
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(),
        headers=SECURE_HEADERS,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(PersonDomainError)
    async def handle_person_domain(
        request: Request, exc: PersonDomainError
    ) -> JSONResponse:
        """Handle not-found, invalid-name and missing-parameter errors."""
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle path and query parameters that fail type conversion."""
        return error_response(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle unknown routes, wrong verbs and rate limiting."""
        return error_response(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for store faults and anything else unexpected."""
        return error_response(request, exc)
