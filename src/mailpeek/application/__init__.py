"""Application – use-case building blocks."""

from mailpeek.application.email import EmailMessage, EmailSender, FileSender

__all__ = ["EmailMessage", "EmailSender", "FileSender"]
