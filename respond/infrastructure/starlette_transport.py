"""
Starlette adapter for the Transport port.

Buffers status and body in memory and turns them into a Starlette
Response once the envelope has been written. Used by FastAPI route
handlers and exception handlers:

    transport = StarletteTransport()
    respond.error.not_found(transport)
    return transport.to_response()
"""

import json
import logging
from typing import Any, Optional

from starlette.responses import JSONResponse, Response

from respond.domain.envelope.ports import Transport

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


class TransportClosedError(RuntimeError):
    """Raised when writing to a transport that already finished."""


class StarletteTransport(Transport):
    """In-memory response transport.

    The first ``send`` or ``end`` finalizes the transport. Later writes
    raise TransportClosedError and ``set_status`` returns False.
    """

    def __init__(self, status_code: int = 200) -> None:
        self._status_code = status_code
        self._response: Optional[Response] = None

    @property
    def headers_sent(self) -> bool:
        return self._response is not None

    @property
    def status_code(self) -> int:
        return self._status_code

    def set_status(self, code: int) -> bool:
        if self.headers_sent:
            return False
        self._status_code = code
        return True

    def send(self, payload: dict[str, Any]) -> None:
        self._ensure_open()
        self._response = JSONResponse(content=payload, status_code=self._status_code)

    def end(self, raw: str) -> None:
        self._ensure_open()
        self._response = Response(
            content=raw, status_code=self._status_code, media_type=JSON_MEDIA_TYPE
        )

    def to_response(self) -> Response:
        """Return the finished response.

        A transport nothing was written to yields an empty JSON object
        with the current status, so the client always gets a JSON body.
        """
        if self._response is None:
            logger.warning("Transport finalized without a body")
            return Response(
                content=json.dumps({}),
                status_code=self._status_code,
                media_type=JSON_MEDIA_TYPE,
            )
        return self._response

    def _ensure_open(self) -> None:
        if self.headers_sent:
            raise TransportClosedError("Response has already been sent")
