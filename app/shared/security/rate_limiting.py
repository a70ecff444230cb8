"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client rate limit on every person route.
Protects the person store against request floods.

Limits are attached to each endpoint with ``Limiter.limit`` when the
router is built, so they are checked inside the endpoint call and do not
depend on middleware resolving the route.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import Settings
from app.shared.errors.handlers import error_response


def build_limiter(app_settings: Settings) -> Limiter:
    """Create the limiter for one application instance.

    Each application gets its own in-memory counters.

    Args:
        app_settings: Settings providing the on/off switch.

    Returns:
        A Limiter keyed by client address.
    """
    return Limiter(
        key_func=get_remote_address,
        enabled=app_settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the uniform error payload.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    return error_response(request, exc)
