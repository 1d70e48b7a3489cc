"""
Port interfaces (ABCs) for the envelope bounded context.

Ports define what envelope delivery needs from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """Port for a response object an envelope can be written through.

    Writes may fail: the underlying stream can already be finalized or
    otherwise unusable. Callers must be prepared for ``send`` and
    ``set_status`` to raise.
    """

    @property
    @abstractmethod
    def headers_sent(self) -> bool:
        """Whether the status line and headers have already gone out."""
        raise NotImplementedError

    @property
    @abstractmethod
    def status_code(self) -> int:
        """The status code the response currently carries."""
        raise NotImplementedError

    @abstractmethod
    def set_status(self, code: int) -> bool:
        """Set the response status.

        Returns:
            True if the status was applied, False if it can no longer be.
        """
        raise NotImplementedError

    @abstractmethod
    def send(self, payload: dict[str, Any]) -> None:
        """Serialize ``payload`` as JSON and finish the response."""
        raise NotImplementedError

    @abstractmethod
    def end(self, raw: str) -> None:
        """Finish the response with an already serialized body."""
        raise NotImplementedError


class MessageLocalizer(ABC):
    """Port for translating message templates before they are formatted."""

    @abstractmethod
    def localize(self, template: str) -> str:
        """Return the translated template, keeping its placeholders."""
        raise NotImplementedError
