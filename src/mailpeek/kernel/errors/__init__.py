"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                       (domain.py)
    │   ├── UnknownContentTypeError
    │   ├── TemplateError
    │   │   └── UnresolvedAttachmentReferenceError
    │   └── NoBodyRenderedError
    ├── ApplicationError                  (application.py)
    └── InfrastructureError               (infrastructure.py)
        ├── AttachmentReadError
        ├── AttachmentWriteError
        ├── BodyWriteError
        └── ViewerOpenError
"""

from mailpeek.kernel.errors.application import ApplicationError
from mailpeek.kernel.errors.base import BaseError
from mailpeek.kernel.errors.domain import (
    DomainError,
    NoBodyRenderedError,
    TemplateError,
    UnknownContentTypeError,
    UnresolvedAttachmentReferenceError,
)
from mailpeek.kernel.errors.infrastructure import (
    AttachmentReadError,
    AttachmentWriteError,
    BodyWriteError,
    InfrastructureError,
    ViewerOpenError,
)

__all__ = [
    "ApplicationError",
    "AttachmentReadError",
    "AttachmentWriteError",
    "BaseError",
    "BodyWriteError",
    "DomainError",
    "InfrastructureError",
    "NoBodyRenderedError",
    "TemplateError",
    "UnknownContentTypeError",
    "UnresolvedAttachmentReferenceError",
    "ViewerOpenError",
]
