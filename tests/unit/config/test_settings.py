"""Unit tests for LoggerSettings and the settings loaders."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from bugsnag_logger.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    LoggerSettings,
    MissingRequiredSettingError,
    Settings,
)


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    api_key: str
    debug: bool = False
    ratio: float = 1.0
    tags: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# LoggerSettings
# ---------------------------------------------------------------------------


class TestLoggerSettings:
    def test_defaults(self) -> None:
        settings = LoggerSettings()
        assert settings.title_limit == 100
        assert settings.title_end == "..."

    def test_rejects_non_positive_limit(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            LoggerSettings(title_limit=0)
        assert exc_info.value.setting_name == "title_limit"

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUGSNAG_LOGGER_TITLE_LIMIT", "40")
        monkeypatch.setenv("BUGSNAG_LOGGER_TITLE_END", " …")
        settings = EnvSettingsLoader().load(LoggerSettings)
        assert settings.title_limit == 40
        assert settings.title_end == " …"

    def test_env_defaults_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BUGSNAG_LOGGER_TITLE_LIMIT", raising=False)
        monkeypatch.delenv("BUGSNAG_LOGGER_TITLE_END", raising=False)
        assert EnvSettingsLoader().load(LoggerSettings) == LoggerSettings()

    def test_env_non_integer_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUGSNAG_LOGGER_TITLE_LIMIT", "lots")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(LoggerSettings)

    def test_env_negative_limit_fails_validation(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUGSNAG_LOGGER_TITLE_LIMIT", "-1")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(LoggerSettings)


# ---------------------------------------------------------------------------
# EnvSettingsLoader coercion
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("APP_API_KEY", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting_name == "APP_API_KEY"

    def test_coerces_types(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_API_KEY", "k")
        monkeypatch.setenv("APP_DEBUG", "yes")
        monkeypatch.setenv("APP_RATIO", "0.5")
        monkeypatch.setenv("APP_TAGS", "a, b,,c")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.api_key == "k"
        assert settings.debug is True
        assert settings.ratio == 0.5
        assert settings.tags == ["a", "b", "c"]

    def test_config_error_is_application_error_family(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)

    def test_explicit_environ(self) -> None:
        loader = EnvSettingsLoader(environ={"BUGSNAG_LOGGER_TITLE_LIMIT": "7"})
        assert loader.load(LoggerSettings).title_limit == 7

    def test_env_key(self) -> None:
        assert EnvSettingsLoader.env_key(LoggerSettings, "title_end") == "BUGSNAG_LOGGER_TITLE_END"

    def test_invalid_value_detail(self) -> None:
        loader = EnvSettingsLoader(environ={"BUGSNAG_LOGGER_TITLE_LIMIT": "ten"})
        with pytest.raises(InvalidSettingValueError) as exc_info:
            loader.load(LoggerSettings)
        assert exc_info.value.detail["setting"] == "BUGSNAG_LOGGER_TITLE_LIMIT"


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_loads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        pytest.importorskip("dotenv")
        monkeypatch.delenv("BUGSNAG_LOGGER_TITLE_LIMIT", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("BUGSNAG_LOGGER_TITLE_LIMIT=12\n")
        try:
            settings = DotenvSettingsLoader(str(env_file)).load(LoggerSettings)
        finally:
            monkeypatch.delenv("BUGSNAG_LOGGER_TITLE_LIMIT", raising=False)
        assert settings.title_limit == 12
