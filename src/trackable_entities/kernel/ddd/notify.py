"""Property-changed notification — explicit observer list with sync fan-out."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Callable

from trackable_entities.kernel.errors.domain import ObserverError
from trackable_entities.observability.logging import get_logger

logger = get_logger(__name__)


class ObserverErrorPolicy(str, enum.Enum):
    """What happens when an observer raises during fan-out."""

    ISOLATE = "isolate"
    PROPAGATE = "propagate"


@dataclasses.dataclass(frozen=True)
class PropertyChangedEvent:
    """Payload delivered to every observer."""

    sender: Any
    property_name: str


#: Observer callable signature.
PropertyChangedObserver = Callable[[PropertyChangedEvent], None]

_default_policy = ObserverErrorPolicy.ISOLATE


def get_default_observer_error_policy() -> ObserverErrorPolicy:
    return _default_policy


def set_default_observer_error_policy(policy: ObserverErrorPolicy | str) -> None:
    """Set the policy used by notifiers created without an explicit one."""
    global _default_policy
    _default_policy = ObserverErrorPolicy(policy)


class PropertyChangedNotifier:
    """Ordered list of observers for a single sender.

    Observers are called synchronously in subscription order.  The same
    callable may be subscribed more than once and is then called once per
    registration.

    Example::

        notifier = PropertyChangedNotifier(entity)
        notifier.subscribe(lambda e: print(e.property_name))
        notifier.notify("name")
    """

    def __init__(
        self,
        sender: Any,
        *,
        error_policy: ObserverErrorPolicy | str | None = None,
    ) -> None:
        self._sender = sender
        self._observers: list[PropertyChangedObserver] = []
        self._error_policy = ObserverErrorPolicy(error_policy) if error_policy is not None else None

    @property
    def error_policy(self) -> ObserverErrorPolicy:
        return self._error_policy or get_default_observer_error_policy()

    @error_policy.setter
    def error_policy(self, policy: ObserverErrorPolicy | str | None) -> None:
        self._error_policy = ObserverErrorPolicy(policy) if policy is not None else None

    @property
    def observers(self) -> tuple[PropertyChangedObserver, ...]:
        return tuple(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def subscribe(self, observer: PropertyChangedObserver) -> PropertyChangedObserver:
        """Register *observer*; returns it so this can be used as a decorator."""
        self._observers.append(observer)
        return observer

    def unsubscribe(self, observer: PropertyChangedObserver) -> bool:
        """Remove the most recent registration of *observer*."""
        for index in range(len(self._observers) - 1, -1, -1):
            if self._observers[index] == observer:
                del self._observers[index]
                return True
        return False

    def clear(self) -> None:
        self._observers.clear()

    def notify(self, property_name: str) -> None:
        """Deliver a :class:`PropertyChangedEvent` to every observer."""
        if not self._observers:
            return
        event = PropertyChangedEvent(sender=self._sender, property_name=property_name)
        policy = self.error_policy
        # Snapshot: observers may (un)subscribe while being notified.
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception as exc:
                error = ObserverError(property_name, observer, cause=exc)
                if policy is ObserverErrorPolicy.PROPAGATE:
                    raise error from exc
                logger.exception(
                    "property_changed.observer_failed",
                    entity_type=type(self._sender).__name__,
                    observer=repr(observer),
                    **error.log_fields(),
                )


__all__ = [
    "ObserverErrorPolicy",
    "PropertyChangedEvent",
    "PropertyChangedNotifier",
    "PropertyChangedObserver",
    "get_default_observer_error_policy",
    "set_default_observer_error_policy",
]
