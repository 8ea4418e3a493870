"""Application-layer errors: misuse of the library at configuration level."""

from __future__ import annotations

from mailpeek.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
