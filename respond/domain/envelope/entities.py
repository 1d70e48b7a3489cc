"""
Envelope entities.

An envelope is the uniform JSON-shaped body returned for every API
outcome. It is a tagged variant: SuccessEnvelope carries ``result``,
ErrorEnvelope carries a message under ``description`` (transport
delivery) or ``reason`` (value-mode). Which one is fixed when the
envelope is built, never afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

INTERNAL_CODE_KEY = "internalCode"


class MessageField(Enum):
    """Name of the field holding an error message on the wire."""

    DESCRIPTION = "description"
    REASON = "reason"


@dataclass(frozen=True)
class SuccessEnvelope:
    """Successful outcome wrapping an arbitrary result."""

    result: Any
    code: int
    internal_code: Any = None

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        body: dict[str, Any] = {
            "success": True,
            "code": self.code,
            "result": self.result,
        }
        if self.internal_code is not None:
            body[INTERNAL_CODE_KEY] = self.internal_code
        return body


@dataclass(frozen=True)
class ErrorEnvelope:
    """Failed outcome with a human-readable message.

    Attributes:
        message: Rendered message, or ``[template, *args]`` when left
            unformatted for client-side localization.
        code: HTTP status code.
        internal_code: Optional secondary code. Always None for
            value-mode envelopes, where it is folded into the message.
        message_field: Wire name of the message field.
    """

    message: Union[str, list]
    code: int
    internal_code: Any = None
    message_field: MessageField = MessageField.REASON

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        message = list(self.message) if isinstance(self.message, list) else self.message
        body: dict[str, Any] = {
            "success": False,
            self.message_field.value: message,
            "code": self.code,
        }
        if self.internal_code is not None:
            body[INTERNAL_CODE_KEY] = self.internal_code
        return body


Envelope = Union[SuccessEnvelope, ErrorEnvelope]
