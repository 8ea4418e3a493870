"""Preview a message with an HTML body, a plain body and a PDF attachment.

Run with::

    pip install -e .
    python docs/examples/preview_message.py

Files land in ``$MAILPEEK_DIR`` (or the temp directory) and the HTML body
opens in the default browser.
"""
from __future__ import annotations

import logging

from mailpeek.application.email import Attachment, Body, EmailMessage, FileSender, only
from mailpeek.observability.logging import JsonLoggerFactory

HTML = """<html>
<head><title>Your invoice</title></head>
<body style="font-family: sans-serif">
  <h1>Thanks for your order</h1>
  <p>Your invoice is <a href="{{ attachment('invoice.pdf') }}">attached</a>.</p>
</body>
</html>
"""


def main() -> None:
    JsonLoggerFactory.configure(level=logging.DEBUG)

    message = EmailMessage(
        from_="shop@example.com",
        to=["customer@example.com"],
        subject="Your invoice",
        bodies=[
            Body("text/html", HTML),
            Body("text/plain", "Thanks for your order. Your invoice is attached."),
        ],
        attachments=[Attachment.from_bytes("invoice.pdf", "application/pdf", b"%PDF-1.4\n%%EOF\n")],
    )

    for path in FileSender(only=only("text/html")).send(message):
        print(path)


if __name__ == "__main__":
    main()
