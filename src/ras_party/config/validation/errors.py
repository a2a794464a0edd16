"""Config validation errors.

All of them abort start-up: ``__main__`` lets them propagate.
"""
from __future__ import annotations

from ras_party.kernel.errors import ApplicationError


class ConfigurationError(ApplicationError):
    default_code = "configuration_error"


class MissingRequiredSettingError(ConfigurationError):
    """No source supplied a setting that has no default."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Setting '{setting_name}' must be provided")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigurationError):
    """A setting was supplied but cannot be used, e.g. a non-numeric port."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}'={value!r} {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigurationError", "InvalidSettingValueError", "MissingRequiredSettingError"]
