"""Config – environment settings and validation errors."""

from eventgate.config.settings import (
    DotenvSettingsLoader,
    EngineSettings,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from eventgate.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EngineSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
