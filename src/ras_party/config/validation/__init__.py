"""Config validation errors."""
from ras_party.config.validation.errors import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["ConfigurationError", "InvalidSettingValueError", "MissingRequiredSettingError"]
