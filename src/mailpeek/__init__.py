"""
mailpeek – preview outgoing email in the local browser.

Import path convention::

    from mailpeek.application.email import EmailMessage, Body, FileSender
    from mailpeek.kernel.errors import NoBodyRenderedError
    from mailpeek.config import MailPeekSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
