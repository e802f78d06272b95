"""Config validation errors raised while loading ``TRACKABLE_*`` settings."""
from trackable_entities.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or applied."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable has no value.

    ``setting_name`` is the full environment key, e.g. ``TRACKABLE_LOG_LEVEL``.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value is present but unusable, such as an unknown observer error policy."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
