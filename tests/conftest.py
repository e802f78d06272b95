"""Shared fixtures for the unit suite."""

from __future__ import annotations

import pytest
import structlog

from trackable_entities.kernel.ddd import (
    ObserverErrorPolicy,
    set_default_observer_error_policy,
)


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Each test starts with the isolate policy and default structlog config."""
    set_default_observer_error_policy(ObserverErrorPolicy.ISOLATE)
    yield
    set_default_observer_error_policy(ObserverErrorPolicy.ISOLATE)
    structlog.reset_defaults()
