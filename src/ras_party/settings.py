"""Service settings."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from ras_party.config import EnvSettingsLoader, InvalidSettingValueError, Settings, SettingsFactory


@dataclasses.dataclass
class PartySettings(Settings):
    """Settings for the party service, overridable by same-named env vars."""

    service_name: str = "ras-rm-party"
    port: int = 8059
    app_version: str = "unknown"
    unleash_uri: str = "http://localhost:4242/api"
    unleash_refresh_interval: float = 15.0
    unleash_metrics_interval: float = 60.0
    unleash_timeout: float = 5.0
    unleash_disable_metrics: bool = False
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if not 0 < self.port < 65536:
            raise InvalidSettingValueError("port", self.port, "must be between 1 and 65535")
        if not self.service_name:
            raise InvalidSettingValueError("service_name", self.service_name, "must not be empty")


def load_settings(
    environ: Mapping[str, str] | None = None, **overrides: Any
) -> PartySettings:
    """Build :class:`PartySettings` from the environment plus explicit overrides."""
    return SettingsFactory.create(
        PartySettings, loaders=[EnvSettingsLoader(environ)], overrides=overrides or None
    )


__all__ = ["PartySettings", "load_settings"]
