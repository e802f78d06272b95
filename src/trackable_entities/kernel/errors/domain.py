"""Domain errors — identifier validation and change-notification failures."""

from __future__ import annotations

from typing import Any

from trackable_entities.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class ObserverError(DomainError):
    """A property-changed observer raised while being notified."""

    default_code = "observer_error"

    def __init__(
        self,
        property_name: str,
        observer: Any,
        *,
        cause: BaseException,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Observer {observer!r} failed for property '{property_name}'",
            detail={"property_name": property_name},
            cause=cause,
            **kwargs,
        )
        self.property_name = property_name
        self.observer = observer


__all__ = [
    "DomainError",
    "ObserverError",
    "ValidationError",
]
