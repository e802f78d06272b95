"""Kernel – framework-agnostic entity building blocks."""

from trackable_entities.kernel.errors import (
    ApplicationError,
    BaseError,
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
