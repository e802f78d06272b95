"""Testing fakes – observer doubles."""
from trackable_entities.testing.fakes.observer import FailingObserver, RecordingObserver

__all__ = ["FailingObserver", "RecordingObserver"]
