"""Config settings – 12-factor env-based configuration."""
from bugsnag_logger.config.settings.base import LoggerSettings, Settings
from bugsnag_logger.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LoggerSettings", "Settings", "SettingsLoader"]
