"""Shared fixtures for the mailpeek test suite."""

from __future__ import annotations

import pytest

from mailpeek.application.email import Attachment, Body, EmailMessage

HTML_CONTENT = "<html><head></head><body><div>Some Message</div></body></html>"
PLAIN_CONTENT = "Same message"


class RecordingOpener:
    """Viewer stand-in that remembers every path it was asked to open."""

    def __init__(self) -> None:
        self.opened: list[str] = []

    def __call__(self, path: str) -> None:
        self.opened.append(path)


@pytest.fixture()
def opener() -> RecordingOpener:
    return RecordingOpener()


@pytest.fixture()
def message() -> EmailMessage:
    return EmailMessage(
        from_="testing@testing.com",
        to=["testing@other.com"],
        cc=["aa@other.com"],
        bcc=["aax@other.com"],
        subject="something",
        bodies=[
            Body(content_type="text/html", content=HTML_CONTENT),
            Body(content_type="text/plain", content=PLAIN_CONTENT),
        ],
    )


@pytest.fixture()
def attachments() -> list[Attachment]:
    return [
        Attachment.from_bytes("txt_test", "text/plain", b"plain text"),
        Attachment.from_bytes("csv_test", "text/csv", b"a,b\n1,2\n"),
        Attachment.from_bytes("img_test", "image/jpeg", b"\xff\xd8\xff"),
        Attachment.from_bytes("pdf_test", "application/pdf", b"%PDF-1.4"),
    ]
