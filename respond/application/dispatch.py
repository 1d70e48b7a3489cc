"""
Use case: Deliver a built envelope.

Input: an Envelope and an optional Transport.
Output: DispatchResult describing what happened.
Side effects: writes to the transport when one is supplied.
Failure cases: none raised. Delivery faults are logged and reported
through DispatchResult.outcome / DispatchResult.cause.
"""

import json
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from respond.domain.envelope.entities import Envelope
from respond.domain.envelope.ports import Transport

logger = logging.getLogger(__name__)


class DeliveryOutcome(Enum):
    """Terminal state of a single dispatch."""

    RETURNED_AS_VALUE = "returned_as_value"
    DELIVERED = "delivered"
    DELIVERED_VIA_FALLBACK = "delivered_via_fallback"
    DELIVERY_FAILED = "delivery_failed"


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of dispatching one envelope.

    Attributes:
        outcome: Which terminal state the dispatch reached.
        payload: The wire representation of the envelope.
        cause: The exception behind a fallback or failed delivery.
    """

    outcome: DeliveryOutcome
    payload: dict[str, Any]
    cause: Optional[BaseException] = None

    @property
    def delivered(self) -> bool:
        return self.outcome in (
            DeliveryOutcome.DELIVERED,
            DeliveryOutcome.DELIVERED_VIA_FALLBACK,
        )


class Dispatcher:
    """Returns an envelope as a value or writes it through a transport.

    Transport writes are attempted once. If they raise, a single raw
    fallback write of the JSON-serialized envelope is attempted. Nothing
    raised by the transport escapes ``dispatch``.
    """

    def dispatch(
        self, envelope: Envelope, transport: Optional[Transport] = None
    ) -> DispatchResult:
        """Deliver ``envelope``.

        Args:
            envelope: A success or error envelope.
            transport: Response object to write through. When None the
                envelope is returned as a value and no IO happens.

        Returns:
            The dispatch outcome together with the payload.
        """
        payload = envelope.to_dict()
        if transport is None:
            return DispatchResult(DeliveryOutcome.RETURNED_AS_VALUE, payload)

        try:
            if not envelope.success and not transport.headers_sent:
                transport.set_status(envelope.code)
            transport.send(payload)
        except Exception as exc:
            logger.error(
                "Envelope delivery failed (success=%s, headers_sent=%s): %s",
                envelope.success,
                _headers_sent(transport),
                type(exc).__name__,
                exc_info=True,
            )
            return self._fallback(envelope, transport, payload, exc)

        return DispatchResult(DeliveryOutcome.DELIVERED, payload)

    def _fallback(
        self,
        envelope: Envelope,
        transport: Transport,
        payload: dict[str, Any],
        cause: Exception,
    ) -> DispatchResult:
        try:
            if not envelope.success and not transport.set_status(envelope.code):
                logger.warning(
                    "Fallback write skipped: status %d could not be set",
                    envelope.code,
                )
                return DispatchResult(DeliveryOutcome.DELIVERY_FAILED, payload, cause)
            transport.end(to_strict_json(payload))
        except Exception as exc:
            logger.error(
                "Fallback write failed: %s", type(exc).__name__, exc_info=True
            )
            return DispatchResult(DeliveryOutcome.DELIVERY_FAILED, payload, exc)

        return DispatchResult(DeliveryOutcome.DELIVERED_VIA_FALLBACK, payload, cause)


def _headers_sent(transport: Transport) -> Any:
    try:
        return transport.headers_sent
    except Exception:
        return "unknown"


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with None, recursing into containers."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def to_strict_json(payload: dict[str, Any]) -> str:
    """Serialize ``payload`` as standards-compliant JSON.

    Non-finite floats become ``null`` and unknown types are rendered
    with ``str()``, so the result always parses.
    """
    return json.dumps(_finite(payload), default=str, allow_nan=False)
