"""Application email – ContentRenderer and the per-content-type render rules.

A :class:`RenderRule` tells the renderer how to turn a body into a previewable
HTML document:

* ``preformatter`` (optional) wraps raw content into a minimal HTML shell so
  that the anchor element exists (plain text is not HTML yet);
* ``header_template`` is a ``%``-style format string with five ``%s`` slots
  (From, To, Cc, Bcc, Subject). Every other percent sign, including those of
  the Jinja2 tags the header carries for the attachment list, is written
  ``%%``;
* ``anchor`` is the opening tag right after which the header is spliced in.

The splice is a text substitution, not a DOM parse, so caller markup is kept
byte-for-byte. Content without a matching anchor passes through unchanged.
"""
from __future__ import annotations

import html
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType

from mailpeek.application.email.message import Body, EmailMessage

__all__ = [
    "DEFAULT_RENDER_RULES",
    "ContentRenderer",
    "RenderRule",
    "escape_header_value",
    "load_header_template",
    "wrap_plain_text",
]


def load_header_template(name: str) -> str:
    """Read a header template shipped in ``mailpeek/application/email/templates``."""
    source = resources.files("mailpeek.application.email") / "templates" / name
    return source.read_text(encoding="utf-8").rstrip("\n")


def escape_header_value(value: str) -> str:
    """HTML-escape *value* and turn braces into entities.

    The rendered body is later executed as a Jinja2 template, so header values
    must not be able to open a ``{{``, ``{%`` or ``{#`` delimiter.
    """
    return html.escape(value).replace("{", "&#123;").replace("}", "&#125;")


def wrap_plain_text(content: str) -> str:
    return f"<html><head></head><body><pre>{content}</pre></body></html>"


@dataclass(frozen=True)
class RenderRule:
    """How bodies of one content type are rendered."""

    header_template: str
    anchor: re.Pattern[str]
    preformatter: Callable[[str], str] | None = None

    def header(self, message: EmailMessage) -> str:
        return self.header_template % (
            escape_header_value(message.from_),
            escape_header_value(",".join(message.to)),
            escape_header_value(",".join(message.cc)),
            escape_header_value(",".join(message.bcc)),
            escape_header_value(message.subject),
        )

    def apply(self, content: str, header: str) -> str:
        if self.preformatter is not None:
            content = self.preformatter(content)
        # only the first anchor gets the header
        return self.anchor.sub(lambda m: f"{m.group(0)}\n{header}\n", content, count=1)


DEFAULT_RENDER_RULES: Mapping[str, RenderRule] = MappingProxyType(
    {
        "text/html": RenderRule(
            header_template=load_header_template("html_header.html"),
            anchor=re.compile(r"<body\b[^>]*>", re.IGNORECASE),
        ),
        "text/plain": RenderRule(
            header_template=load_header_template("plain_header.txt"),
            anchor=re.compile(r"<pre\b[^>]*>", re.IGNORECASE),
            preformatter=wrap_plain_text,
        ),
    }
)


class ContentRenderer:
    """Injects the From/To/Cc/Bcc/Subject header into a body's markup."""

    def __init__(self, rules: Mapping[str, RenderRule] | None = None) -> None:
        self._rules = DEFAULT_RENDER_RULES if rules is None else rules

    @property
    def content_types(self) -> list[str]:
        return list(self._rules)

    def supports(self, content_type: str) -> bool:
        return content_type in self._rules

    def render(self, body: Body, message: EmailMessage) -> str:
        """Return *body* as an HTML document carrying the message header.

        Raises ``KeyError`` when no rule is registered for the content type;
        check :meth:`supports` first.
        """
        rule = self._rules[body.content_type]
        return rule.apply(body.content, rule.header(message))
