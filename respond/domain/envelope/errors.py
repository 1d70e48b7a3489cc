"""
Domain-specific errors for the envelope bounded context.

ApiError is raised by business code that wants a named error envelope
sent to the client; it is mapped to a response at the interface layer.
No framework imports allowed.
"""

from collections.abc import Sequence
from typing import Any, Optional


class EnvelopeError(Exception):
    """Base error for all envelope domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnknownErrorKindError(EnvelopeError, ValueError):
    """Raised when an error kind name is not in the catalog."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown error kind: {kind}")
        self.kind = kind


class ApiError(EnvelopeError):
    """Raised to abort request handling with a named error envelope.

    Attributes:
        kind: Error kind or its wire name (e.g. ``"itemNotFound"``).
        args: Arguments for parameterized kinds.
        internal_code: Optional machine-readable code for the client.
        status_override: Replaces the kind's default status when set.
        detail: Caller-supplied message for ``custom`` and ``forbidden``.
    """

    def __init__(
        self,
        kind: Any,
        args: Sequence[Any] = (),
        internal_code: Any = None,
        status_override: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        kind_name = getattr(kind, "value", kind)
        super().__init__(f"API error: {kind_name}")
        self.kind = kind
        self.kind_args = tuple(args)
        self.internal_code = internal_code
        self.status_override = status_override
        self.detail = detail
