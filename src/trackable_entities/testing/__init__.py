"""Testing support – fakes and generators for entity tests."""

from trackable_entities.testing.fakes import FailingObserver, RecordingObserver
from trackable_entities.testing.generators import entity_identifier_strategy

__all__ = [
    "FailingObserver",
    "RecordingObserver",
    "entity_identifier_strategy",
]
