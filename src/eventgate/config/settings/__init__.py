"""Config settings – environment-based configuration."""
from eventgate.config.settings.base import Settings
from eventgate.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from eventgate.config.settings.engine import EngineSettings

__all__ = [
    "DotenvSettingsLoader",
    "EngineSettings",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
]
