"""Config settings – 12-factor env-based configuration."""
from trackable_entities.config.settings.base import Settings
from trackable_entities.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from trackable_entities.config.settings.tracking import TrackingSettings, configure

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "TrackingSettings", "configure"]
