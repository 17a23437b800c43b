"""Config – settings dataclasses, loaders and validation errors."""
from bugsnag_logger.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggerSettings,
    Settings,
    SettingsLoader,
)
from bugsnag_logger.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
