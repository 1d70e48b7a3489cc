"""
Error kind catalog.

A closed set of named API error kinds, each mapped to a default message
template and HTTP status. The catalog is built once at import time and
is read-only afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from respond.domain.envelope.errors import UnknownErrorKindError


class ErrorKind(Enum):
    """Named error kinds. Values are the wire names used by callers."""

    CUSTOM = "custom"
    FORBIDDEN = "forbidden"
    SOCKET_NOT_ALLOWED = "socketNotAllowed"
    XHR_NOT_ALLOWED = "xhrNotAllowed"
    NOT_FOUND = "notFound"
    ITEM_NOT_FOUND = "itemNotFound"
    LOGIN_REQUIRED = "loginRequired"
    LOGIN_INVALIDATED = "loginInvalidated"
    PARAM_REQUIRED = "paramRequired"
    PARAM_INVALID = "paramInvalid"
    SERVER_ERROR = "serverError"
    DISABLED = "disabled"
    LOCALHOST_NOT_SUPPORTED = "localhostNotSupported"
    NOT_IMPLEMENTED = "notImplemented"


@dataclass(frozen=True)
class CatalogEntry:
    """Default rendering of an error kind.

    Attributes:
        template: Message template, or None when the caller supplies it.
        status: Default HTTP status code.
        parameterized: Whether the template contains ``%s`` placeholders.
    """

    template: Optional[str]
    status: int
    parameterized: bool = False


ERROR_CATALOG: Mapping[ErrorKind, CatalogEntry] = MappingProxyType(
    {
        ErrorKind.CUSTOM: CatalogEntry(None, 400),
        ErrorKind.FORBIDDEN: CatalogEntry(
            "You do not have access privileges to view this content.", 403
        ),
        ErrorKind.SOCKET_NOT_ALLOWED: CatalogEntry(
            "This API cannot be accessed via sockets; please use XHR.", 403
        ),
        ErrorKind.XHR_NOT_ALLOWED: CatalogEntry(
            "This API cannot be accessed via XHR; please use sockets.", 403
        ),
        ErrorKind.NOT_FOUND: CatalogEntry("Resource Not Found", 404),
        ErrorKind.ITEM_NOT_FOUND: CatalogEntry('"%s" Not Found', 404, True),
        ErrorKind.LOGIN_REQUIRED: CatalogEntry("Login Required", 401),
        ErrorKind.LOGIN_INVALIDATED: CatalogEntry("Login Invalidated", 401),
        ErrorKind.PARAM_REQUIRED: CatalogEntry(
            '"%s" is a required parameter.', 400, True
        ),
        ErrorKind.PARAM_INVALID: CatalogEntry(
            '"%s" contained an invalid value.', 400, True
        ),
        ErrorKind.SERVER_ERROR: CatalogEntry(
            "The server has encountered an error. "
            "Please try again, or contact support.",
            500,
        ),
        ErrorKind.DISABLED: CatalogEntry("This feature is currently disabled.", 500),
        ErrorKind.LOCALHOST_NOT_SUPPORTED: CatalogEntry(
            "Localhost cannot support this request.", 500
        ),
        ErrorKind.NOT_IMPLEMENTED: CatalogEntry(
            "This API has not been implemented yet, but is reserved for future use.",
            501,
        ),
    }
)

_missing = [kind.value for kind in ErrorKind if kind not in ERROR_CATALOG]
if _missing:
    raise RuntimeError(f"Error catalog has no entry for: {', '.join(_missing)}")
del _missing


def resolve_kind(kind: "ErrorKind | str") -> ErrorKind:
    """Return the ErrorKind for an enum member or its wire name.

    Raises:
        UnknownErrorKindError: If the name is not a known kind.
    """
    if isinstance(kind, ErrorKind):
        return kind
    try:
        return ErrorKind(kind)
    except ValueError:
        raise UnknownErrorKindError(str(kind)) from None


def lookup(kind: "ErrorKind | str") -> CatalogEntry:
    """Return the catalog entry for a kind or wire name."""
    return ERROR_CATALOG[resolve_kind(kind)]
