"""
Public responder API.

Every responder builds an envelope and hands it to the Dispatcher:

    respond.success({"id": 1})                  # value-mode: returns the dict
    respond.error.item_not_found("Widget", transport)  # writes through transport

In value-mode the envelope dict is returned. With a transport the
DispatchResult is returned so the caller can inspect the delivery
outcome.
"""

import logging
from collections.abc import Sequence
from typing import Any, Optional, Union

from respond.application.dispatch import Dispatcher, DispatchResult
from respond.core.config import Settings, settings
from respond.domain.envelope.builder import EnvelopeBuilder
from respond.domain.envelope.catalog import ErrorKind
from respond.domain.envelope.entities import Envelope
from respond.domain.envelope.ports import MessageLocalizer, Transport

logger = logging.getLogger(__name__)

ResponderResult = Union[dict[str, Any], DispatchResult]


class Responder:
    """Binds an EnvelopeBuilder to a Dispatcher.

    Args:
        builder: Envelope builder; a plain one is used when omitted.
        dispatcher: Dispatcher; a fresh one is used when omitted.
        success_status_code: ``code`` of value-mode success envelopes.
    """

    def __init__(
        self,
        builder: Optional[EnvelopeBuilder] = None,
        dispatcher: Optional[Dispatcher] = None,
        success_status_code: int = 200,
    ) -> None:
        self.builder = builder or EnvelopeBuilder()
        self.dispatcher = dispatcher or Dispatcher()
        self.success_status_code = success_status_code
        self.error = ErrorResponders(self)

    @classmethod
    def from_settings(
        cls,
        config: Settings,
        localizer: Optional[MessageLocalizer] = None,
    ) -> "Responder":
        """Create a responder configured from application settings."""
        builder = EnvelopeBuilder(
            localizer=localizer,
            format_messages=config.format_parameterized_messages,
        )
        return cls(builder=builder, success_status_code=config.success_status_code)

    def success(
        self,
        result: Any,
        transport: Optional[Transport] = None,
        internal_code: Any = None,
    ) -> ResponderResult:
        """Respond with a successful result."""
        return self.send_success(transport, result, internal_code)

    def send_success(
        self,
        transport: Optional[Transport],
        result: Any,
        internal_code: Any = None,
    ) -> ResponderResult:
        """Respond with a successful result, transport first.

        Through a transport the envelope ``code`` is the status the
        transport currently carries; success never changes the status.
        """
        code = self.success_status_code
        if transport is not None:
            try:
                code = transport.status_code
            except Exception:
                # Delivery will report the fault; keep the default status.
                logger.warning("Transport status unreadable", exc_info=True)
        envelope = self.builder.build_success(result, internal_code, code=code)
        return self._deliver(envelope, transport)

    def send_error(
        self,
        kind: Union[ErrorKind, str],
        transport: Optional[Transport] = None,
        args: Sequence[Any] = (),
        internal_code: Any = None,
        status_override: Optional[int] = None,
        message: Optional[str] = None,
    ) -> ResponderResult:
        """Respond with any named error kind."""
        envelope = self.builder.build_error(
            kind,
            args,
            internal_code,
            status_override,
            message=message,
            via_transport=transport is not None,
        )
        return self._deliver(envelope, transport)

    def _deliver(
        self, envelope: Envelope, transport: Optional[Transport]
    ) -> ResponderResult:
        result = self.dispatcher.dispatch(envelope, transport)
        if transport is None:
            return result.payload
        return result


class ErrorResponders:
    """One responder per named error kind."""

    def __init__(self, responder: Responder) -> None:
        self._responder = responder

    def custom(
        self,
        message: str,
        transport: Optional[Transport] = None,
        internal_code: Any = None,
        error_code: Optional[int] = None,
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.CUSTOM,
            transport,
            internal_code=internal_code,
            status_override=error_code,
            message=message,
        )

    def forbidden(
        self,
        transport: Optional[Transport] = None,
        internal_code: Any = None,
        message: Optional[str] = None,
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.FORBIDDEN, transport, internal_code=internal_code, message=message
        )

    access_denied = forbidden

    def socket_not_allowed(
        self, transport: Optional[Transport] = None, internal_code: Any = None
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.SOCKET_NOT_ALLOWED, transport, internal_code=internal_code
        )

    def xhr_not_allowed(
        self, transport: Optional[Transport] = None, internal_code: Any = None
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.XHR_NOT_ALLOWED, transport, internal_code=internal_code
        )

    def not_found(
        self, transport: Optional[Transport] = None, internal_code: Any = None
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.NOT_FOUND, transport, internal_code=internal_code
        )

    def item_not_found(
        self,
        name: Any,
        transport: Optional[Transport] = None,
        internal_code: Any = None,
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.ITEM_NOT_FOUND, transport, (name,), internal_code
        )

    def login_required(
        self, transport: Optional[Transport] = None, internal_code: Any = None
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.LOGIN_REQUIRED, transport, internal_code=internal_code
        )

    def login_invalidated(
        self, transport: Optional[Transport] = None, internal_code: Any = None
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.LOGIN_INVALIDATED, transport, internal_code=internal_code
        )

    def param_required(
        self,
        field: str,
        transport: Optional[Transport] = None,
        internal_code: Any = None,
        error_code: Optional[int] = None,
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.PARAM_REQUIRED, transport, (field,), internal_code, error_code
        )

    def param_invalid(
        self,
        field: str,
        transport: Optional[Transport] = None,
        internal_code: Any = None,
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.PARAM_INVALID, transport, (field,), internal_code
        )

    def server_error(
        self,
        transport: Optional[Transport] = None,
        internal_code: Any = None,
        error_code: Optional[int] = None,
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.SERVER_ERROR,
            transport,
            internal_code=internal_code,
            status_override=error_code,
        )

    def disabled(
        self, transport: Optional[Transport] = None, internal_code: Any = None
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.DISABLED, transport, internal_code=internal_code
        )

    def localhost_not_supported(
        self, transport: Optional[Transport] = None, internal_code: Any = None
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.LOCALHOST_NOT_SUPPORTED, transport, internal_code=internal_code
        )

    def not_implemented(
        self, transport: Optional[Transport] = None, internal_code: Any = None
    ) -> ResponderResult:
        return self._responder.send_error(
            ErrorKind.NOT_IMPLEMENTED, transport, internal_code=internal_code
        )


default_responder = Responder.from_settings(settings)

success = default_responder.success
send_success = default_responder.send_success
send_error = default_responder.send_error
error = default_responder.error
