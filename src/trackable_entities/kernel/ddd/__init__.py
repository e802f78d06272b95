"""Entity building blocks — public re-export surface."""

from trackable_entities.kernel.ddd.identifiable import (
    Identifiable,
    identifier_equals,
    identifier_of,
    identifiers_match,
    read_identifier,
)
from trackable_entities.kernel.ddd.model_base import ModelBase, notifying_property
from trackable_entities.kernel.ddd.notify import (
    ObserverErrorPolicy,
    PropertyChangedEvent,
    PropertyChangedNotifier,
    PropertyChangedObserver,
    get_default_observer_error_policy,
    set_default_observer_error_policy,
)

__all__ = [
    "Identifiable",
    "ModelBase",
    "ObserverErrorPolicy",
    "PropertyChangedEvent",
    "PropertyChangedNotifier",
    "PropertyChangedObserver",
    "get_default_observer_error_policy",
    "identifier_equals",
    "identifier_of",
    "identifiers_match",
    "notifying_property",
    "read_identifier",
    "set_default_observer_error_policy",
]
