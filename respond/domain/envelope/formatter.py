"""
printf-style message formatting for parameterized error messages.

Only the ``%s`` directive is understood. Formatting never fails:
placeholders without a matching argument are left as a literal ``%s``.
"""

import re
from collections.abc import Sequence
from typing import Any

PLACEHOLDER = "%s"
_PLACEHOLDER_RE = re.compile(re.escape(PLACEHOLDER))


def format_message(template: str, args: Sequence[Any] = ()) -> str:
    """Substitute each ``%s`` in ``template`` with the next argument.

    Args:
        template: Message template, e.g. ``'"%s" Not Found'``.
        args: Positional values, consumed in order.

    Returns:
        The rendered message. Surplus arguments are ignored.
    """
    remaining = iter(args)

    def _next(match: re.Match[str]) -> str:
        try:
            return str(next(remaining))
        except StopIteration:
            return match.group(0)

    return _PLACEHOLDER_RE.sub(_next, template)
