"""Unit tests for config settings & validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar

import pytest
from structlog.testing import capture_logs

from trackable_entities.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
    TrackingSettings,
    configure,
)
from trackable_entities.kernel.ddd import ObserverErrorPolicy, get_default_observer_error_policy
from trackable_entities.observability.logging import JsonLoggerFactory


# ---------------------------------------------------------------------------
# Concrete settings classes used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class CredentialSettings(Settings):
    _prefix: ClassVar[str] = "CRED"
    _unlogged: ClassVar[frozenset[str]] = frozenset({"api_key"})

    api_key: str = "secret"
    region: str = "eu"


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    api_key: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_unset(self) -> None:
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "localhost"
        assert settings.port == 8080

    def test_loads_typed_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_DEBUG", "yes")
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "a.com, b.com,")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "example.com"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.allowed_origins == ["a.com", "b.com"]

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_API_KEY", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_API_KEY"

    def test_bad_int_is_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"
        assert isinstance(exc_info.value, ConfigError)


# ---------------------------------------------------------------------------
# TrackingSettings
# ---------------------------------------------------------------------------


class TestTrackingSettings:
    def test_defaults(self) -> None:
        settings = TrackingSettings()
        assert settings.policy is ObserverErrorPolicy.ISOLATE
        assert settings.level == logging.INFO
        assert settings.json_logs is True

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACKABLE_OBSERVER_ERROR_POLICY", "PROPAGATE")
        monkeypatch.setenv("TRACKABLE_LOG_LEVEL", "debug")
        monkeypatch.setenv("TRACKABLE_JSON_LOGS", "false")
        settings = EnvSettingsLoader().load(TrackingSettings)
        assert settings.policy is ObserverErrorPolicy.PROPAGATE
        assert settings.level == logging.DEBUG
        assert settings.json_logs is False

    def test_invalid_policy(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            TrackingSettings(observer_error_policy="swallow")
        assert exc_info.value.setting_name == "observer_error_policy"

    def test_invalid_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            TrackingSettings(log_level="LOUD")

    def test_as_log_fields(self) -> None:
        assert TrackingSettings().as_log_fields() == {
            "observer_error_policy": "isolate",
            "log_level": "INFO",
            "json_logs": True,
        }

    def test_as_log_fields_skips_unlogged(self) -> None:
        assert CredentialSettings().as_log_fields() == {"region": "eu"}

    def test_invalid_value_detail(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            TrackingSettings(log_level="LOUD")
        assert exc_info.value.detail["setting"] == "log_level"

    def test_invalid_env_value_is_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACKABLE_OBSERVER_ERROR_POLICY", "swallow")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(TrackingSettings)


# ---------------------------------------------------------------------------
# configure
# ---------------------------------------------------------------------------


class TestConfigure:
    @pytest.fixture()
    def logging_calls(self, monkeypatch: pytest.MonkeyPatch) -> list[tuple[Any, bool]]:
        calls: list[tuple[Any, bool]] = []

        def fake_configure(level: Any = logging.INFO, *, json: bool = True) -> None:
            calls.append((level, json))

        monkeypatch.setattr(JsonLoggerFactory, "configure", staticmethod(fake_configure))
        return calls

    def test_applies_explicit_settings(self, logging_calls: list[tuple[Any, bool]]) -> None:
        configure(TrackingSettings(observer_error_policy="propagate", log_level="WARNING"))
        assert get_default_observer_error_policy() is ObserverErrorPolicy.PROPAGATE
        assert logging_calls == [(logging.WARNING, True)]

    def test_logs_applied_settings(self, logging_calls: list[tuple[Any, bool]]) -> None:
        with capture_logs() as logs:
            configure(TrackingSettings(log_level="DEBUG"))
        assert logs[-1]["event"] == "trackable_entities.configured"
        assert logs[-1]["observer_error_policy"] == "isolate"

    def test_reads_environment(
        self,
        monkeypatch: pytest.MonkeyPatch,
        logging_calls: list[tuple[Any, bool]],
    ) -> None:
        monkeypatch.setenv("TRACKABLE_OBSERVER_ERROR_POLICY", "propagate")
        monkeypatch.setenv("TRACKABLE_JSON_LOGS", "0")
        settings = configure()
        assert settings.policy is ObserverErrorPolicy.PROPAGATE
        assert get_default_observer_error_policy() is ObserverErrorPolicy.PROPAGATE
        assert logging_calls == [(logging.INFO, False)]
