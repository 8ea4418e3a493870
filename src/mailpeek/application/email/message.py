"""Application email – EmailMessage, Body and Attachment value objects."""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO

__all__ = ["Attachment", "Body", "EmailMessage", "MaterializedAttachment"]


@dataclass(frozen=True)
class Body:
    """One renderable representation of the message, tagged by MIME type."""

    content_type: str
    content: str


@dataclass
class Attachment:
    """A file attachment; ``reader`` is consumed once, then closed."""

    name: str
    content_type: str
    reader: BinaryIO

    @classmethod
    def from_bytes(cls, name: str, content_type: str, data: bytes) -> "Attachment":
        return cls(name=name, content_type=content_type, reader=io.BytesIO(data))

    def __repr__(self) -> str:  # pragma: no cover
        return f"Attachment(name={self.name!r}, content_type={self.content_type!r})"


@dataclass(frozen=True)
class MaterializedAttachment:
    """An attachment written to disk during a send."""

    path: str
    name: str


@dataclass
class EmailMessage:
    """A message as the application would have sent it."""

    from_: str
    to: list[str]
    subject: str
    bodies: list[Body] = field(default_factory=list)
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)

    def all_recipients(self) -> list[str]:
        """Return combined to + cc + bcc recipient list."""
        return self.to + self.cc + self.bcc

    @property
    def content_types(self) -> list[str]:
        return [b.content_type for b in self.bodies]
