"""Domain errors: the message itself cannot be previewed."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mailpeek.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a message cannot be turned into preview files."""

    default_code = "domain_error"


class UnknownContentTypeError(DomainError):
    """No file extension is registered for an attachment's MIME type."""

    default_code = "unknown_content_type"

    def __init__(self, content_type: str, attachment: str | None = None, **kwargs: Any) -> None:
        msg = f"No file extension known for content type '{content_type}'"
        if attachment is not None:
            msg = f"{msg} (attachment '{attachment}')"
        kwargs.setdefault("detail", {"content_type": content_type, "attachment": attachment})
        super().__init__(msg, **kwargs)
        self.content_type = content_type
        self.attachment = attachment


class TemplateError(DomainError):
    """A rendered body could not be compiled or executed as a template."""

    default_code = "template_error"


class UnresolvedAttachmentReferenceError(TemplateError):
    """A body references an attachment name that was not materialized."""

    default_code = "unresolved_attachment_reference"

    def __init__(self, reference: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"reference": reference})
        super().__init__(f"Body references unknown attachment '{reference}'", **kwargs)
        self.reference = reference


class NoBodyRenderedError(DomainError):
    """Not a single body of the message was rendered."""

    default_code = "no_body_rendered"

    def __init__(
        self,
        content_types: Sequence[str],
        allowed: Sequence[str] = (),
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault(
            "detail",
            {"content_types": list(content_types), "allowed": list(allowed)},
        )
        super().__init__("No body of the message was rendered", **kwargs)
        self.content_types = tuple(content_types)
        self.allowed = tuple(allowed)


__all__ = [
    "DomainError",
    "NoBodyRenderedError",
    "TemplateError",
    "UnknownContentTypeError",
    "UnresolvedAttachmentReferenceError",
]
