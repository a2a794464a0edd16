"""Unit tests for config settings, loaders and the party settings."""

from dataclasses import dataclass
from typing import ClassVar

import pytest

from ras_party.config import (
    ConfigurationError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
    SettingsFactory,
)
from ras_party.settings import PartySettings, load_settings


# ---------------------------------------------------------------------------
# Concrete settings classes used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    ratio: float = 0.5


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


def _load(settings_cls: type[Settings], environ: dict[str, str] | None = None) -> Settings:
    return SettingsFactory.create(settings_cls, loaders=[EnvSettingsLoader(environ)])


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_empty(self) -> None:
        settings = _load(AppSettings, {})
        assert settings == AppSettings()

    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        settings = _load(AppSettings)
        assert settings.host == "example.com"

    def test_loads_int(self) -> None:
        settings = _load(AppSettings, {"APP_PORT": "9000"})
        assert settings.port == 9000

    def test_loads_float(self) -> None:
        settings = _load(AppSettings, {"APP_RATIO": "0.25"})
        assert settings.ratio == 0.25

    @pytest.mark.parametrize("truthy", ["true", "True", "1", "yes", "on"])
    def test_loads_bool_true(self, truthy: str) -> None:
        settings = _load(AppSettings, {"APP_DEBUG": truthy})
        assert settings.debug is True

    @pytest.mark.parametrize("falsy", ["false", "False", "0", "no", "off"])
    def test_loads_bool_false(self, falsy: str) -> None:
        settings = _load(AppSettings, {"APP_DEBUG": falsy})
        assert settings.debug is False

    def test_bad_bool_raises_invalid_value(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            _load(AppSettings, {"APP_DEBUG": "maybe"})
        assert exc_info.value.setting_name == "APP_DEBUG"

    def test_bad_int_raises_invalid_value(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            _load(AppSettings, {"APP_PORT": "eighty"})

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            _load(RequiredSettings, {})
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_read_returns_only_present_values(self) -> None:
        values = EnvSettingsLoader({"APP_PORT": "1"}).read(AppSettings)
        assert values == {"port": 1}


# ---------------------------------------------------------------------------
# SettingsFactory
# ---------------------------------------------------------------------------


class TestSettingsFactory:
    def test_overrides_win_over_loaders(self) -> None:
        settings = SettingsFactory.create(
            AppSettings,
            loaders=[EnvSettingsLoader({"APP_HOST": "env-host"})],
            overrides={"host": "override-host"},
        )
        assert settings.host == "override-host"

    def test_later_loader_wins(self) -> None:
        settings = SettingsFactory.create(
            AppSettings,
            loaders=[
                EnvSettingsLoader({"APP_PORT": "1"}),
                EnvSettingsLoader({"APP_PORT": "2"}),
            ],
        )
        assert settings.port == 2

    def test_later_loader_does_not_reset_earlier_value_to_default(self) -> None:
        settings = SettingsFactory.create(
            AppSettings,
            loaders=[EnvSettingsLoader({"APP_PORT": "1"}), EnvSettingsLoader({})],
        )
        assert settings.port == 1

    def test_missing_required_field(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(RequiredSettings)

    def test_required_field_from_overrides(self) -> None:
        settings = SettingsFactory.create(RequiredSettings, overrides={"token": "t"})
        assert settings.token == "t"

    def test_unknown_override_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            SettingsFactory.create(AppSettings, overrides={"nope": 1})


# ---------------------------------------------------------------------------
# PartySettings
# ---------------------------------------------------------------------------


class TestPartySettings:
    def test_defaults(self) -> None:
        settings = load_settings({})
        assert settings.service_name == "ras-rm-party"
        assert settings.port == 8059
        assert settings.app_version == "unknown"
        assert settings.unleash_uri == "http://localhost:4242/api"
        assert settings.unleash_refresh_interval == 15.0

    def test_environment_overrides(self) -> None:
        settings = load_settings(
            {
                "SERVICE_NAME": "party-test",
                "PORT": "9001",
                "APP_VERSION": "1.2.3",
                "UNLEASH_URI": "http://flags:4242/api",
                "UNLEASH_DISABLE_METRICS": "true",
            }
        )
        assert settings.service_name == "party-test"
        assert settings.port == 9001
        assert settings.app_version == "1.2.3"
        assert settings.unleash_uri == "http://flags:4242/api"
        assert settings.unleash_disable_metrics is True

    def test_keyword_overrides(self) -> None:
        settings = load_settings({"PORT": "9001"}, port=9002)
        assert settings.port == 9002

    def test_port_out_of_range(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PartySettings(port=0)

    def test_empty_service_name(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            load_settings({"SERVICE_NAME": ""})
