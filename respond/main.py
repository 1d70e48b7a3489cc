"""
Application entry point.

Creates a FastAPI application wired for envelope responses:
- Health router
- Error handlers (centralized exception-to-envelope mapping)
- Rate limiting
- Logging configuration

No business logic belongs here. Host applications either use
``create_app()`` as their base or call ``register_error_handlers``
on their own app.
"""

from fastapi import FastAPI

from respond.core.config import settings
from respond.interfaces.health import router as health_router
from respond.shared.errors.handlers import register_error_handlers
from respond.shared.logging import configure_logging
from respond.shared.security.rate_limiting import limiter


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers and rate limiting.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter

    # --- Error Handlers (including the 429 envelope) ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")

    return app


app = create_app()
