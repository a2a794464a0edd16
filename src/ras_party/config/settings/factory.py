"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from ras_party.config.settings.base import Settings
from ras_party.config.settings.loaders import SettingsLoader
from ras_party.config.validation.errors import ConfigurationError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


def _required(settings_cls: type[Settings]) -> list[str]:
    return [
        field.name
        for field in dataclasses.fields(settings_cls)
        if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING
    ]


class SettingsFactory:
    """Builds a :class:`Settings` subclass from layered sources.

    Precedence, lowest first: dataclass defaults, each loader in order,
    then ``overrides``.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        values: dict[str, Any] = {}
        for loader in loaders or ():
            values.update(loader.read(settings_cls))
        values.update(overrides or {})

        missing = [name for name in _required(settings_cls) if name not in values]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            return settings_cls(**values)
        except ConfigurationError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Cannot build {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
