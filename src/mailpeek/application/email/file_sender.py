"""Application email – FileSender: render messages to disk and open them.

Instead of talking to a mail server, :class:`FileSender` writes every allowed
body to ``<output_dir>/<content_type>_body_<uuid>.html`` (with a From/To/Cc/
Bcc/Subject header spliced in), writes the attachments beside it and opens
the result in the default browser::

    sender = FileSender(only=only("text/html"))
    sender.send(message)

Use :func:`wrap` to swap a real sender for a ``FileSender`` in development.
"""
from __future__ import annotations

import uuid
import webbrowser
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from mailpeek.application.email.attachments import AttachmentMaterializer
from mailpeek.application.email.links import LinkResolver
from mailpeek.application.email.message import Body, EmailMessage, MaterializedAttachment
from mailpeek.application.email.policy import ContentTypePolicy
from mailpeek.application.email.renderer import ContentRenderer, RenderRule
from mailpeek.application.email.sender import EmailSender
from mailpeek.config.settings import EnvSettingsLoader, MailPeekSettings, default_output_dir
from mailpeek.kernel.errors import BodyWriteError, NoBodyRenderedError, ViewerOpenError
from mailpeek.observability.logging import get_logger

__all__ = ["FileSender", "Opener", "body_filename", "open_in_browser", "wrap"]

Opener = Callable[[str], Any]

logger = get_logger(__name__)


def open_in_browser(path: str) -> None:
    """Open *path* with the platform's default browser."""
    uri = Path(path).resolve().as_uri()
    try:
        opened = webbrowser.open(uri)
    except webbrowser.Error as exc:
        raise ViewerOpenError(path, cause=exc) from exc
    if not opened:
        raise ViewerOpenError(path, f"No browser available to open {path}")


def body_filename(content_type: str) -> str:
    return f"{content_type.replace('/', '_')}_body_{uuid.uuid4()}.html"


class FileSender:
    """EmailSender that previews messages as local HTML files.

    Args:
        output_dir: Directory for bodies and attachments. Defaults to
            ``$MAILPEEK_DIR`` or the platform temp directory.
        open: Open every written body with *opener*.
        only: Content types to render; empty renders every type with a rule.
        rules: Render rule table keyed by content type.
        opener: Viewer action, called with the path of each written body.
    """

    def __init__(
        self,
        output_dir: str | None = None,
        *,
        open: bool = True,  # noqa: A002
        only: ContentTypePolicy | Iterable[str] = (),
        rules: Mapping[str, RenderRule] | None = None,
        opener: Opener = open_in_browser,
    ) -> None:
        self.output_dir = default_output_dir() if output_dir is None else output_dir
        self.open = open
        self.policy = only if isinstance(only, ContentTypePolicy) else ContentTypePolicy(only)
        self._renderer = ContentRenderer(rules)
        self._resolver = LinkResolver()
        self._opener = opener

    @classmethod
    def from_settings(cls, settings: MailPeekSettings, **kwargs: Any) -> "FileSender":
        return cls(settings.dir, open=settings.open, only=settings.only, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "FileSender":
        """Build a sender from ``MAILPEEK_*`` environment variables."""
        return cls.from_settings(EnvSettingsLoader().load(MailPeekSettings), **kwargs)

    def send(self, message: EmailMessage) -> list[str]:
        """Render, write and (optionally) open every allowed body.

        Returns the paths of the written body files, in body order.

        Raises:
            NoBodyRenderedError: no body was allowed and renderable.
            UnknownContentTypeError, AttachmentReadError, AttachmentWriteError:
                an attachment could not be materialized.
            TemplateError: a body references an unknown attachment or is not
                a valid template.
            BodyWriteError: a body file could not be written.
            ViewerOpenError: the viewer failed; later bodies are not processed.
        """
        log = logger.bind(subject=message.subject, output_dir=self.output_dir)
        written: list[str] = []
        materialized: list[MaterializedAttachment] | None = None

        for body in message.bodies:
            if not self.policy.allows(body.content_type):
                log.debug("body skipped by policy", content_type=body.content_type)
                continue
            if not self._renderer.supports(body.content_type):
                log.warning("no render rule for body", content_type=body.content_type)
                continue

            content = self._renderer.render(body, message)
            # written once per send and shared by every body
            if materialized is None:
                materialized = AttachmentMaterializer(self.output_dir).materialize(message.attachments)
            content = self._resolver.resolve(content, materialized)

            path = self._write_body(body, content)
            log.info("body written", content_type=body.content_type, path=path)
            written.append(path)

            if self.open:
                self._open(path)
                log.debug("body opened", path=path)

        if not written:
            raise NoBodyRenderedError(message.content_types, sorted(self.policy.allowed))

        log.info("message previewed", bodies=len(written), attachments=len(materialized or []))
        return written

    def _write_body(self, body: Body, content: str) -> str:
        path = str(Path(self.output_dir) / body_filename(body.content_type))
        try:
            Path(path).write_text(content, encoding="utf-8", newline="")
        except OSError as exc:
            raise BodyWriteError(body.content_type, path, cause=exc) from exc
        return path

    def _open(self, path: str) -> None:
        try:
            self._opener(path)
        except ViewerOpenError:
            raise
        except Exception as exc:
            raise ViewerOpenError(path, f"Viewer failed to open {path}: {exc}", cause=exc) from exc


def wrap(sender: EmailSender, env: str | None = None) -> EmailSender:
    """Return a :class:`FileSender` in development, *sender* everywhere else.

    The environment comes from *env* or ``MAILPEEK_ENV``; it counts as
    development when it is ``"development"`` or empty.
    """
    settings = EnvSettingsLoader().load(MailPeekSettings)
    if env is not None:
        settings.env = env
    if settings.is_development:
        logger.debug("using file sender", env=settings.env, output_dir=settings.dir)
        return FileSender.from_settings(settings)
    return sender
