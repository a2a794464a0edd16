"""Config settings – 12-factor env-based configuration."""
from ras_party.config.settings.base import Settings
from ras_party.config.settings.factory import SettingsFactory
from ras_party.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
