"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits.
Exceeded limits are answered with a ``custom`` 429 error envelope.
"""

import logging
from typing import Awaitable, Callable

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from respond.application.responders import Responder, default_responder
from respond.core.config import settings
from respond.infrastructure.starlette_transport import StarletteTransport

logger = logging.getLogger(__name__)

HTTP_429 = 429
RATE_LIMIT_MESSAGE = "Rate limit exceeded: %s"

limiter = Limiter(
    key_func=get_remote_address, default_limits=[settings.rate_limit_default]
)

RateLimitHandler = Callable[[Request, RateLimitExceeded], Awaitable[Response]]


def build_rate_limit_exceeded_handler(
    responder: Responder = default_responder,
) -> RateLimitHandler:
    """Create a 429 handler that answers through ``responder``.

    Args:
        responder: Responder whose builder (localizer, settings) renders
            the envelope.

    Returns:
        An exception handler for RateLimitExceeded.
    """

    async def rate_limit_exceeded_handler(
        _request: Request, exc: RateLimitExceeded
    ) -> Response:
        """Answer a rate limit violation with an error envelope."""
        logger.warning("Rate limit exceeded: %s", exc.detail)
        transport = StarletteTransport()
        responder.error.custom(
            RATE_LIMIT_MESSAGE % exc.detail, transport, error_code=HTTP_429
        )
        return transport.to_response()

    return rate_limit_exceeded_handler


rate_limit_exceeded_handler = build_rate_limit_exceeded_handler()
