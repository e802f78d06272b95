"""Config settings – TrackingSettings and process-wide ``configure``."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from trackable_entities.config.settings.base import Settings
from trackable_entities.config.validation import InvalidSettingValueError
from trackable_entities.kernel.ddd.notify import (
    ObserverErrorPolicy,
    set_default_observer_error_policy,
)
from trackable_entities.observability.logging import JsonLoggerFactory, get_logger

logger = get_logger(__name__)

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class TrackingSettings(Settings):
    """Runtime knobs, read from ``TRACKABLE_*`` environment variables."""

    _prefix: ClassVar[str] = "TRACKABLE"

    observer_error_policy: str = ObserverErrorPolicy.ISOLATE.value
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        policies = {p.value for p in ObserverErrorPolicy}
        if str(self.observer_error_policy).lower() not in policies:
            raise InvalidSettingValueError(
                "observer_error_policy",
                self.observer_error_policy,
                f"expected one of {sorted(policies)}",
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )

    @property
    def policy(self) -> ObserverErrorPolicy:
        return ObserverErrorPolicy(str(self.observer_error_policy).lower())

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def configure(settings: TrackingSettings | None = None) -> TrackingSettings:
    """Apply *settings* (or the environment) process-wide."""
    if settings is None:
        from trackable_entities.config.settings.loaders import EnvSettingsLoader

        settings = EnvSettingsLoader().load(TrackingSettings)

    JsonLoggerFactory.configure(settings.level, json=settings.json_logs)
    set_default_observer_error_policy(settings.policy)
    logger.info("trackable_entities.configured", **settings.as_log_fields())
    return settings


__all__ = ["TrackingSettings", "configure"]
