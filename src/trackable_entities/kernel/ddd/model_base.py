"""ModelBase — identity correlation plus property-changed notification.

Entities that travel client → server → client come back as new objects.
``ModelBase`` gives each one a synthetic :class:`EntityIdentifier` so the
returned copy can be matched to the instance it was produced from,
independent of any primary key.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, overload

from trackable_entities.kernel.ddd.identifiable import identifiers_match, read_identifier
from trackable_entities.kernel.ddd.notify import (
    PropertyChangedNotifier,
    PropertyChangedObserver,
)
from trackable_entities.kernel.types.ids import EntityIdentifier
from trackable_entities.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

_MISSING: Any = object()


class ModelBase:
    """Base class for client-side model entities.

    Example::

        class Product(ModelBase):
            name = notifying_property()

            def __init__(self, name: str) -> None:
                self.name = name

        original = Product("Chai")
        original.ensure_identifier()
        returned = Product("Chai")             # reconstituted after a round trip
        returned.copy_identifier_from(original)
        assert original.is_equatable(returned)
    """

    _entity_identifier: EntityIdentifier = EntityIdentifier.EMPTY

    # -- identity correlation ------------------------------------------------

    @property
    def entity_identifier(self) -> EntityIdentifier:
        return self._entity_identifier

    @entity_identifier.setter
    def entity_identifier(self, value: EntityIdentifier) -> None:
        self.set_identifier(value)

    def ensure_identifier(self) -> EntityIdentifier:
        """Generate an identifier if none is assigned yet; idempotent."""
        if self._entity_identifier.is_empty:
            self._entity_identifier = EntityIdentifier.generate()
            logger.debug(
                "entity_identifier.generated",
                entity_type=type(self).__name__,
                entity_identifier=str(self._entity_identifier),
            )
        return self._entity_identifier

    def set_identifier(self, value: EntityIdentifier | Any) -> None:
        """Overwrite the identifier unconditionally."""
        self._entity_identifier = EntityIdentifier.coerce(value)

    def copy_identifier_from(self, other: object) -> bool:
        """Adopt *other*'s identifier.

        Returns ``False`` and leaves this entity untouched when *other*
        does not participate in identity correlation or carries no usable
        identifier.
        """
        identifier = read_identifier(other)
        if identifier is None:
            return False
        self._entity_identifier = identifier
        logger.debug(
            "entity_identifier.copied",
            entity_type=type(self).__name__,
            source_type=type(other).__name__,
            entity_identifier=str(self._entity_identifier),
        )
        return True

    def is_equatable(self, other: object) -> bool:
        """Identifier-based equality; override for a custom comparison.

        Unassigned identifiers never compare equal, not even to each other.
        """
        return identifiers_match(self, other)

    # -- change notification -------------------------------------------------

    @property
    def property_changed(self) -> PropertyChangedNotifier:
        notifier = self.__dict__.get("_notifier")
        if notifier is None:
            notifier = PropertyChangedNotifier(self)
            self.__dict__["_notifier"] = notifier
        return notifier

    def subscribe(self, observer: PropertyChangedObserver) -> PropertyChangedObserver:
        return self.property_changed.subscribe(observer)

    def unsubscribe(self, observer: PropertyChangedObserver) -> bool:
        return self.property_changed.unsubscribe(observer)

    def on_property_changed(self, property_name: str) -> None:
        """Notify every subscribed observer that *property_name* changed."""
        notifier = self.__dict__.get("_notifier")
        if notifier is not None:
            notifier.notify(property_name)

    # -- serialisation -------------------------------------------------------

    def __getstate__(self) -> dict[str, Any]:
        # Observers stay with the in-memory instance.
        state = self.__dict__.copy()
        state.pop("_notifier", None)
        return state

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(entity_identifier={self._entity_identifier!s})"


class notifying_property(Generic[T]):  # noqa: N801
    """Data descriptor that raises ``on_property_changed`` when its value changes.

    The notified name defaults to the attribute the descriptor is bound to.
    Assigning an equal value is silent.
    """

    def __init__(self, default: T = _MISSING, *, name: str | None = None) -> None:
        self._default = default
        self._property_name = name
        self._attr = ""

    def __set_name__(self, owner: type, attr: str) -> None:
        self._attr = attr
        if self._property_name is None:
            self._property_name = attr

    @property
    def property_name(self) -> str:
        return self._property_name or self._attr

    @overload
    def __get__(self, obj: None, owner: type) -> notifying_property[T]: ...

    @overload
    def __get__(self, obj: ModelBase, owner: type) -> T: ...

    def __get__(self, obj: ModelBase | None, owner: type) -> Any:
        if obj is None:
            return self
        value = obj.__dict__.get(self._attr, self._default)
        if value is _MISSING:
            raise AttributeError(f"{type(obj).__name__!r} has no value for {self._attr!r}")
        return value

    def __set__(self, obj: ModelBase, value: T) -> None:
        previous = obj.__dict__.get(self._attr, _MISSING)
        obj.__dict__[self._attr] = value
        if previous is _MISSING or previous != value:
            obj.on_property_changed(self.property_name)

    def __delete__(self, obj: ModelBase) -> None:
        if obj.__dict__.pop(self._attr, _MISSING) is _MISSING:
            raise AttributeError(self._attr)


__all__ = ["ModelBase", "notifying_property"]
