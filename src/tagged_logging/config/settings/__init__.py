"""Config settings – environment-based configuration."""
from tagged_logging.config.settings.base import Settings
from tagged_logging.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from tagged_logging.config.settings.logging_settings import TaggedLoggingSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "TaggedLoggingSettings",
]
