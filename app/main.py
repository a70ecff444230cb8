"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, person)
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Person store schema

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from app.core.config import Settings, settings
from app.interfaces.health import router as health_router
from app.interfaces.person.dependencies import get_engine
from app.interfaces.person.router import build_person_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the person store on startup, release it on shutdown."""
    engine = get_engine()
    logger.info("%s %s started", settings.project_name, settings.version)

    yield

    engine.dispose()
    get_engine.cache_clear()


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings for this instance. Defaults to the
            environment-derived settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(
        level=app_settings.log_level, sql_echo=app_settings.database_echo
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    limiter = build_limiter(app_settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(
        build_person_router(limiter, app_settings.rate_limit_default)
    )

    return app


app = create_app()
