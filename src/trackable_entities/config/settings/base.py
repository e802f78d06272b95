"""Config settings – Settings base class for ``<PREFIX>_*`` environment settings."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses set ``_prefix`` (``TrackingSettings`` uses ``"TRACKABLE"``) and
    override :meth:`_validate` for cross-field checks.
    """

    _prefix: ClassVar[str] = ""
    #: Field names left out of :meth:`as_log_fields`.
    _unlogged: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def as_log_fields(self) -> dict[str, Any]:
        """Field values as structlog key-value pairs, minus ``_unlogged`` ones."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.name not in self._unlogged
        }


__all__ = ["Settings"]
