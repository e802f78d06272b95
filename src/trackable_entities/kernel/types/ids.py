"""UUID-based entity identifier value object."""

from __future__ import annotations

import dataclasses
import uuid
from typing import Any, ClassVar

from trackable_entities.kernel.errors.domain import ValidationError


@dataclasses.dataclass(frozen=True, slots=True)
class EntityIdentifier:
    """Synthetic correlation identifier backed by a 128-bit UUID.

    The all-zero UUID (``EntityIdentifier.EMPTY``) means "not yet assigned";
    an empty identifier is falsy and never correlates with anything.

    Examples::

        eid = EntityIdentifier.generate()                 # new random id
        eid = EntityIdentifier.from_str("6f1c...-...")    # from wire text
        EntityIdentifier.EMPTY.is_empty                   # True
    """

    value: uuid.UUID

    EMPTY: ClassVar[EntityIdentifier]

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise ValidationError(
                f"{type(self).__name__} requires a UUID, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return str(self.value)

    def __bool__(self) -> bool:
        return not self.is_empty

    @property
    def is_empty(self) -> bool:
        return self.value.int == 0

    @classmethod
    def generate(cls) -> EntityIdentifier:
        """Return a new random (UUID v4) ``EntityIdentifier``."""
        return cls(uuid.uuid4())

    @classmethod
    def from_str(cls, value: str) -> EntityIdentifier:
        """Parse canonical UUID text."""
        try:
            return cls(uuid.UUID(value))
        except (ValueError, AttributeError, TypeError) as exc:
            raise ValidationError(f"Invalid entity identifier: {value!r}", cause=exc) from exc

    @classmethod
    def coerce(cls, value: Any) -> EntityIdentifier:
        """Accept an ``EntityIdentifier``, a ``uuid.UUID`` or UUID text."""
        if isinstance(value, cls):
            return value
        if isinstance(value, uuid.UUID):
            return cls(value)
        if isinstance(value, str):
            return cls.from_str(value)
        raise ValidationError(
            f"Cannot convert {type(value).__name__} to {cls.__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: Any,
    ) -> Any:
        from pydantic_core import core_schema

        def _validate(value: Any) -> EntityIdentifier:
            try:
                return cls.coerce(value)
            except ValidationError as exc:
                raise ValueError(exc.message) from exc

        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.to_string_ser_schema(),
        )


EntityIdentifier.EMPTY = EntityIdentifier(uuid.UUID(int=0))


__all__ = ["EntityIdentifier"]
