"""
Centralized error handlers for FastAPI.

Maps exceptions reaching the web layer to error envelopes.
No stack traces or internal details are exposed to clients.
All error responses go through the responders and a StarletteTransport.
"""

import logging
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from respond.application.responders import Responder, default_responder
from respond.domain.envelope.catalog import ErrorKind
from respond.domain.envelope.errors import ApiError
from respond.infrastructure.starlette_transport import StarletteTransport
from respond.shared.security.rate_limiting import build_rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404

_MISSING_ERROR_TYPES = frozenset({"missing", "value_error.missing"})


def _custom_detail(exc: StarletteHTTPException) -> Optional[str]:
    """Return the exception detail unless it is the default status phrase."""
    detail = str(exc.detail)
    if detail == HTTPStatus(exc.status_code).phrase:
        return None
    return detail


def _field_name(loc: tuple) -> str:
    """Return the offending field from a pydantic error location.

    The leading ``body``/``query``/``path`` segment is dropped.
    """
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


def register_error_handlers(
    app: FastAPI, responder: Responder = default_responder
) -> None:
    """Register all envelope error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        responder: Responder used to build and deliver the envelopes.
    """

    app.add_exception_handler(
        RateLimitExceeded, build_rate_limit_exceeded_handler(responder)
    )

    @app.exception_handler(ApiError)
    async def handle_api_error(_request: Request, exc: ApiError) -> Response:
        """Send the envelope for an explicitly raised error kind."""
        logger.info("API error: %s", exc.message)
        transport = StarletteTransport()
        responder.send_error(
            exc.kind,
            transport,
            exc.kind_args,
            exc.internal_code,
            exc.status_override,
            exc.detail,
        )
        return transport.to_response()

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> Response:
        """Report the first invalid or missing parameter."""
        errors = exc.errors()
        transport = StarletteTransport()
        if not errors:
            responder.error.custom("Invalid request.", transport)
            return transport.to_response()

        first = errors[0]
        field = _field_name(tuple(first.get("loc", ())))
        logger.warning("Request validation failed: %s (%s)", field, first.get("type"))
        if first.get("type") in _MISSING_ERROR_TYPES:
            responder.error.param_required(field, transport)
        else:
            responder.error.param_invalid(field, transport)
        return transport.to_response()

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Translate framework HTTP errors into the matching kind.

        404 and 401 always use the catalog text; their ``detail`` is
        dropped. A 403 keeps a route-specific ``detail``.
        """
        transport = StarletteTransport()
        if exc.status_code == HTTP_404:
            responder.error.not_found(transport)
        elif exc.status_code == HTTP_401:
            responder.error.login_required(transport)
        elif exc.status_code == HTTP_403:
            responder.error.forbidden(transport, message=_custom_detail(exc))
        else:
            responder.send_error(
                ErrorKind.CUSTOM,
                transport,
                status_override=exc.status_code,
                message=str(exc.detail),
            )
        response = transport.to_response()
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        transport = StarletteTransport()
        responder.error.server_error(transport)
        return transport.to_response()
