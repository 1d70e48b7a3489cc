"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
The status payload is wrapped in a success envelope like every
other response.
"""

from fastapi import APIRouter, Request
from starlette.responses import Response

from respond.application.responders import success
from respond.core.config import settings
from respond.infrastructure.starlette_transport import StarletteTransport
from respond.shared.security.rate_limiting import limiter

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check",
    description="Returns application health status and version.",
)
@limiter.limit(settings.rate_limit_default)
def health_check(request: Request) -> Response:
    """Return current application health status."""
    transport = StarletteTransport()
    success({"status": "ok", "version": settings.version}, transport)
    return transport.to_response()
