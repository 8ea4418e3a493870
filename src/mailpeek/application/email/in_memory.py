"""Application email – InMemoryEmailSender for unit tests."""
from __future__ import annotations

import uuid

from mailpeek.application.email.message import EmailMessage

__all__ = ["InMemoryEmailSender"]


class InMemoryEmailSender:
    """Fake EmailSender that captures sent messages in memory."""

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []
        self._ids: list[str] = []

    def send(self, message: EmailMessage) -> str:
        self.sent.append(message)
        msg_id = str(uuid.uuid4())
        self._ids.append(msg_id)
        return msg_id

    def reset(self) -> None:
        """Clear the outbox."""
        self.sent.clear()
        self._ids.clear()

    # convenience helpers
    @property
    def count(self) -> int:
        return len(self.sent)

    def last(self) -> EmailMessage | None:
        return self.sent[-1] if self.sent else None
