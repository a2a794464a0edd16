"""Config – 12-factor settings and loaders."""

from ras_party.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from ras_party.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigurationError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
