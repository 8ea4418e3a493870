"""Application email – LinkResolver: point attachment references at written files."""
from __future__ import annotations

import re
from collections.abc import Sequence

import jinja2

from mailpeek.application.email.message import MaterializedAttachment
from mailpeek.kernel.errors import TemplateError, UnresolvedAttachmentReferenceError

__all__ = ["LinkResolver"]

# StrictUndefined messages: "'x' is undefined", "... has no attribute 'x'",
# "... has no element 'x'" (or an unquoted repr for non-string keys)
_UNDEFINED_NAME = re.compile(
    r"'([^']*)' is undefined|has no attribute '([^']*)'|has no element (?:'([^']*)'|(.+))"
)


def _reference_from(exc: jinja2.UndefinedError) -> str:
    match = _UNDEFINED_NAME.search(exc.message or "")
    if match is None:
        return exc.message or "?"
    return next(group for group in match.groups() if group is not None)


class LinkResolver:
    """Expands attachment placeholders in a rendered body with Jinja2.

    The body is executed as a template with this context:

    * ``attachments`` – the materialized attachments, in message order;
    * ``attachment(name)`` – path of the attachment called *name*;
    * ``files`` – mapping of attachment name to path.

    Only name-to-path substitution is part of the contract, e.g.
    ``<a href="{{ attachment('report.pdf') }}">``.

    Jinja2 rewrites every line break of the template to a single newline
    sequence. A body containing ``\\r\\n`` is rendered with ``\\r\\n`` line
    endings and any other body with ``\\n``, so bodies with consistent line
    endings come back unchanged. Mixed line endings are unified.
    """

    def __init__(self) -> None:
        self._env = jinja2.Environment(
            undefined=jinja2.StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._crlf_env = self._env.overlay(newline_sequence="\r\n")

    def resolve(self, content: str, attachments: Sequence[MaterializedAttachment]) -> str:
        files = {a.name: a.path for a in attachments}

        def attachment(name: str) -> str:
            try:
                return files[name]
            except KeyError:
                raise UnresolvedAttachmentReferenceError(name) from None

        env = self._crlf_env if "\r\n" in content else self._env
        try:
            template = env.from_string(content)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateError(
                f"Body is not a valid template: {exc.message}",
                detail={"lineno": exc.lineno},
                cause=exc,
            ) from exc

        try:
            return template.render(attachments=list(attachments), attachment=attachment, files=files)
        except jinja2.UndefinedError as exc:
            raise UnresolvedAttachmentReferenceError(_reference_from(exc), cause=exc) from exc
