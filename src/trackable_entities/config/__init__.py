"""Config – 12-factor settings and validation errors."""

from trackable_entities.config.settings import (
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    TrackingSettings,
    configure,
)
from trackable_entities.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "TrackingSettings",
    "configure",
]
