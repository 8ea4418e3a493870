"""Application email – AttachmentMaterializer: write attachments next to the preview."""
from __future__ import annotations

import contextlib
import mimetypes
import os
import uuid
from collections.abc import Iterable
from pathlib import Path

from mailpeek.application.email.message import Attachment, MaterializedAttachment
from mailpeek.kernel.errors import (
    AttachmentReadError,
    AttachmentWriteError,
    UnknownContentTypeError,
)
from mailpeek.observability.logging import get_logger

__all__ = [
    "MAX_NAME_LENGTH",
    "AttachmentMaterializer",
    "extension_for",
    "truncate_name",
]

MAX_NAME_LENGTH = 50

# built-in table only, so results do not depend on the host's mime.types
_MIME_TYPES = mimetypes.MimeTypes()

logger = get_logger(__name__)


def truncate_name(name: str, limit: int = MAX_NAME_LENGTH) -> str:
    return name[:limit]


def extension_for(content_type: str, mime_types: mimetypes.MimeTypes | None = None) -> str | None:
    """Return the preferred file extension (with dot) for *content_type*."""
    return (mime_types or _MIME_TYPES).guess_extension(content_type)


class AttachmentMaterializer:
    """Writes attachments to ``<output_dir>/<uuid>_<name><ext>``.

    Each attachment's reader is read fully, once, and closed. The first
    failure aborts the call; files written before it are left on disk.
    """

    def __init__(
        self,
        output_dir: str,
        *,
        max_name_length: int = MAX_NAME_LENGTH,
        mime_types: mimetypes.MimeTypes | None = None,
    ) -> None:
        self.output_dir = output_dir
        self.max_name_length = max_name_length
        self._mime_types = mime_types or _MIME_TYPES

    def materialize(self, attachments: Iterable[Attachment]) -> list[MaterializedAttachment]:
        return [self.materialize_one(a) for a in attachments]

    def materialize_one(self, attachment: Attachment) -> MaterializedAttachment:
        name = truncate_name(attachment.name, self.max_name_length)

        ext = extension_for(attachment.content_type, self._mime_types)
        if ext is None:
            raise UnknownContentTypeError(attachment.content_type, attachment=name)

        path = os.path.join(self.output_dir, f"{uuid.uuid4()}_{name}{ext}")

        try:
            with contextlib.closing(attachment.reader) as reader:
                data = reader.read()
        except (OSError, ValueError) as exc:
            raise AttachmentReadError(name, cause=exc) from exc
        if isinstance(data, str):
            data = data.encode("utf-8")

        try:
            Path(path).write_bytes(data)
        except OSError as exc:
            raise AttachmentWriteError(name, path, cause=exc) from exc

        logger.debug("attachment materialized", attachment=name, path=path, size=len(data))
        return MaterializedAttachment(path=path, name=name)
