"""Application email – preview pipeline, ports and value objects."""
from mailpeek.application.email.attachments import (
    MAX_NAME_LENGTH,
    AttachmentMaterializer,
    extension_for,
    truncate_name,
)
from mailpeek.application.email.file_sender import FileSender, open_in_browser, wrap
from mailpeek.application.email.in_memory import InMemoryEmailSender
from mailpeek.application.email.links import LinkResolver
from mailpeek.application.email.message import (
    Attachment,
    Body,
    EmailMessage,
    MaterializedAttachment,
)
from mailpeek.application.email.policy import ContentTypePolicy, only, should_render
from mailpeek.application.email.renderer import DEFAULT_RENDER_RULES, ContentRenderer, RenderRule
from mailpeek.application.email.sender import EmailSender

__all__ = [
    "DEFAULT_RENDER_RULES",
    "MAX_NAME_LENGTH",
    "Attachment",
    "AttachmentMaterializer",
    "Body",
    "ContentRenderer",
    "ContentTypePolicy",
    "EmailMessage",
    "EmailSender",
    "FileSender",
    "InMemoryEmailSender",
    "LinkResolver",
    "MaterializedAttachment",
    "RenderRule",
    "extension_for",
    "only",
    "open_in_browser",
    "should_render",
    "truncate_name",
    "wrap",
]
