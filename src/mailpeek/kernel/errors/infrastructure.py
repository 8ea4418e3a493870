"""Infrastructure errors: stream, filesystem and viewer failures."""

from __future__ import annotations

from typing import Any

from mailpeek.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a problem with the message."""

    default_code = "infrastructure_error"


class AttachmentReadError(InfrastructureError):
    """The attachment's byte stream failed before EOF."""

    default_code = "attachment_read_error"

    def __init__(self, attachment: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"attachment": attachment})
        super().__init__(f"Failed to read attachment '{attachment}'", **kwargs)
        self.attachment = attachment


class AttachmentWriteError(InfrastructureError):
    """An attachment could not be written to the output directory."""

    default_code = "attachment_write_error"

    def __init__(self, attachment: str, path: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"attachment": attachment, "path": path})
        super().__init__(f"Failed to write attachment '{attachment}' to {path}", **kwargs)
        self.attachment = attachment
        self.path = path


class BodyWriteError(InfrastructureError):
    """A rendered body could not be written to the output directory."""

    default_code = "body_write_error"

    def __init__(self, content_type: str, path: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"content_type": content_type, "path": path})
        super().__init__(f"Failed to write {content_type} body to {path}", **kwargs)
        self.content_type = content_type
        self.path = path


class ViewerOpenError(InfrastructureError):
    """The external viewer could not open a written body."""

    default_code = "viewer_open_error"

    def __init__(self, path: str, message: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"path": path})
        super().__init__(message or f"Could not open {path} in a viewer", **kwargs)
        self.path = path


__all__ = [
    "AttachmentReadError",
    "AttachmentWriteError",
    "BodyWriteError",
    "InfrastructureError",
    "ViewerOpenError",
]
