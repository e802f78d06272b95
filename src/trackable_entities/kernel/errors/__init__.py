"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── ObserverError
    └── ApplicationError     (application.py)
"""

from trackable_entities.kernel.errors.application import ApplicationError
from trackable_entities.kernel.errors.base import BaseError
from trackable_entities.kernel.errors.domain import (
    DomainError,
    ObserverError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ObserverError",
    "ValidationError",
]
