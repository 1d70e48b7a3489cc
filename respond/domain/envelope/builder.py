"""
Envelope construction.

Builds success and error envelopes from a result or a named error kind.
Pure construction: no IO, no shared mutable state. Whether the envelope
is meant for transport delivery or for value-mode is decided here so
that the shape never has to be patched downstream.
"""

from collections.abc import Sequence
from typing import Any, Optional, Union

from respond.domain.envelope.catalog import ErrorKind, lookup, resolve_kind
from respond.domain.envelope.entities import (
    ErrorEnvelope,
    MessageField,
    SuccessEnvelope,
)
from respond.domain.envelope.formatter import format_message
from respond.domain.envelope.ports import MessageLocalizer

DEFAULT_SUCCESS_STATUS = 200

# Kinds whose default text may be replaced by a caller-supplied message.
_OVERRIDABLE_MESSAGE = frozenset({ErrorKind.CUSTOM, ErrorKind.FORBIDDEN})


def render_internal_code(internal_code: Any) -> str:
    """Render an internal code the way it appears inside a message."""
    if isinstance(internal_code, bool):
        return "true" if internal_code else "false"
    return str(internal_code)


def internal_code_suffix(internal_code: Any) -> str:
    return " { internalCode: " + render_internal_code(internal_code) + " }"


class EnvelopeBuilder:
    """Builds envelopes for success results and named error kinds.

    Args:
        localizer: Optional hook applied to every message template.
        format_messages: When False, parameterized messages are kept as
            ``[template, *args]`` for the client to format.
    """

    def __init__(
        self,
        localizer: Optional[MessageLocalizer] = None,
        format_messages: bool = True,
    ) -> None:
        self._localizer = localizer
        self._format_messages = format_messages

    def build_success(
        self,
        result: Any,
        internal_code: Any = None,
        *,
        code: int = DEFAULT_SUCCESS_STATUS,
    ) -> SuccessEnvelope:
        """Wrap ``result`` verbatim in a success envelope."""
        return SuccessEnvelope(result=result, code=code, internal_code=internal_code)

    def build_error(
        self,
        kind: Union[ErrorKind, str],
        args: Sequence[Any] = (),
        internal_code: Any = None,
        status_override: Optional[int] = None,
        *,
        message: Optional[str] = None,
        via_transport: bool = False,
    ) -> ErrorEnvelope:
        """Build the error envelope for a named kind.

        Args:
            kind: Error kind or its wire name.
            args: Values for parameterized kinds (``itemNotFound``,
                ``paramRequired``, ``paramInvalid``). For ``custom`` the
                first argument is used as the message if ``message`` is
                not given.
            internal_code: Optional machine-readable code.
            status_override: Replaces the default status when truthy.
            message: Caller text for ``custom``, or a replacement for the
                default ``forbidden`` text.
            via_transport: Build for transport delivery (``description``
                field, ``internalCode`` kept) instead of value-mode
                (``reason`` field, internal code appended to the text).

        Raises:
            UnknownErrorKindError: If ``kind`` is not a known kind name.
        """
        resolved = resolve_kind(kind)
        entry = lookup(resolved)
        code = status_override or entry.status

        template = entry.template
        if resolved in _OVERRIDABLE_MESSAGE and message is not None:
            template = message
        elif resolved is ErrorKind.CUSTOM:
            template = str(args[0]) if args else ""
        template = self._localize(template or "")

        rendered: Union[str, list]
        if not entry.parameterized:
            rendered = template
        elif self._format_messages:
            rendered = format_message(template, args)
        else:
            rendered = [template, *args]

        if via_transport:
            return ErrorEnvelope(
                message=rendered,
                code=code,
                internal_code=internal_code,
                message_field=MessageField.DESCRIPTION,
            )

        if internal_code is not None:
            suffix = internal_code_suffix(internal_code)
            if isinstance(rendered, list):
                rendered = [rendered[0] + suffix, *rendered[1:]]
            else:
                rendered = rendered + suffix
        return ErrorEnvelope(
            message=rendered, code=code, message_field=MessageField.REASON
        )

    def _localize(self, template: str) -> str:
        if self._localizer is None or not template:
            return template
        return self._localizer.localize(template)
