"""
Error-to-HTTP mapping.

Translates any exception raised while serving a request into a status
code and the uniform ErrorPayload. The mapping is total: errors without
a dedicated entry become a 500 carrying the error's own description.
That includes path parameters that fail type conversion and unknown
sort properties: only the domain taxonomy produces a 400 or 404.
"""

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.person.errors import (
    InvalidNameError,
    MissingParameterError,
    PersonDomainError,
    PersonNotFoundError,
)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

_DOMAIN_STATUS: tuple[tuple[type[PersonDomainError], int], ...] = (
    (PersonNotFoundError, HTTP_404),
    (InvalidNameError, HTTP_400),
    (MissingParameterError, HTTP_400),
)


class ErrorPayload(BaseModel):
    """Body of every error response.

    Attributes:
        url: Path of the request that failed.
        status: HTTP status code, repeated from the response line.
        message: Human-readable description of the failure.
    """

    url: str
    status: int
    message: str


def map_error(error: Exception, url: str) -> tuple[int, ErrorPayload]:
    """Map an error to its HTTP status code and payload.

    Args:
        error: The exception raised while handling the request.
        url: Path of the request, echoed back in the payload.

    Returns:
        A (status_code, payload) pair.
    """
    status, message = _status_and_message(error)
    return status, ErrorPayload(url=url, status=status, message=message)


def _status_and_message(error: Exception) -> tuple[int, str]:
    if isinstance(error, PersonDomainError):
        for error_type, status in _DOMAIN_STATUS:
            if isinstance(error, error_type):
                return status, error.message
        return HTTP_500, error.message

    if isinstance(error, RequestValidationError):
        return HTTP_500, _describe_validation_error(error)

    if isinstance(error, RateLimitExceeded):
        return error.status_code, f"Rate limit exceeded: {error.detail}"

    if isinstance(error, StarletteHTTPException):
        return error.status_code, str(error.detail)

    return HTTP_500, str(error) or type(error).__name__


def _describe_validation_error(error: RequestValidationError) -> str:
    """Describe the first failing request parameter."""
    errors = error.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = first.get("loc") or ()
    parameter = location[-1] if location else "request"
    return f"Invalid value for parameter '{parameter}': {first.get('msg', 'invalid value')}"
