"""Identifiable capability — opt-in identity correlation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from trackable_entities.kernel.errors.domain import ValidationError
from trackable_entities.kernel.types.ids import EntityIdentifier


@runtime_checkable
class Identifiable(Protocol):
    """Capability: an object carrying an :class:`EntityIdentifier`.

    Participation is structural; any object exposing ``entity_identifier``
    and ``is_equatable`` takes part in correlation.  Everything else is
    treated as non-participating and compares unequal.
    """

    entity_identifier: EntityIdentifier

    def is_equatable(self, other: object) -> bool: ...


def read_identifier(obj: object) -> EntityIdentifier | None:
    """Return *obj*'s identifier, or ``None`` when there is nothing usable to read.

    A participant whose ``entity_identifier`` is unset (``None``) or does not
    convert to an :class:`EntityIdentifier` reads as ``None``.
    """
    if not isinstance(obj, Identifiable):
        return None
    try:
        return EntityIdentifier.coerce(obj.entity_identifier)
    except ValidationError:
        return None


def identifier_of(obj: object) -> EntityIdentifier:
    """Return *obj*'s identifier, or ``EntityIdentifier.EMPTY`` when it has none."""
    identifier = read_identifier(obj)
    return EntityIdentifier.EMPTY if identifier is None else identifier


def identifiers_match(left: object, right: object) -> bool:
    """Both participate, neither identifier is empty, and they are equal."""
    if not (isinstance(left, Identifiable) and isinstance(right, Identifiable)):
        return False
    ours = identifier_of(left)
    return not ours.is_empty and ours == identifier_of(right)


def identifier_equals(left: object, right: object) -> bool:
    """Free-function form of ``left.is_equatable(right)``.

    Non-participating *left* objects always yield ``False``.
    """
    if not isinstance(left, Identifiable):
        return False
    return left.is_equatable(right)


__all__ = [
    "Identifiable",
    "identifier_equals",
    "identifier_of",
    "identifiers_match",
    "read_identifier",
]
