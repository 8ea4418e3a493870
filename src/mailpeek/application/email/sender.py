"""Application email – EmailSender Protocol (port)."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from mailpeek.application.email.message import EmailMessage

__all__ = ["EmailSender"]


@runtime_checkable
class EmailSender(Protocol):
    """Port: anything that can send (or pretend to send) a message."""

    def send(self, message: EmailMessage) -> Any:
        """Send a single message."""
        ...
