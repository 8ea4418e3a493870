"""Kernel – framework-agnostic building blocks."""

from mailpeek.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
]
