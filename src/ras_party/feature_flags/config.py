"""Feature flags – UnleashConfig."""
from __future__ import annotations

import dataclasses
import socket
import uuid

import httpx

from ras_party.config.validation import InvalidSettingValueError
from ras_party.feature_flags.listener import Listener


def _default_instance_id() -> str:
    return f"{socket.gethostname()}-{uuid.uuid4().hex[:8]}"


@dataclasses.dataclass(frozen=True)
class UnleashConfig:
    """Connection and scheduling options for :class:`UnleashClient`.

    Raises :class:`~ras_party.config.validation.InvalidSettingValueError`
    (a ``ConfigurationError``) when the URL is empty or not an absolute
    http(s) URL, when ``app_name`` is empty, or when an interval or the
    timeout is not positive.
    """
    url: str
    app_name: str
    refresh_interval: float = 15.0
    metrics_interval: float = 60.0
    timeout: float = 5.0
    instance_id: str = dataclasses.field(default_factory=_default_instance_id)
    listener: Listener | None = None
    disable_metrics: bool = False

    def __post_init__(self) -> None:
        if not self.url or not self.url.strip():
            raise InvalidSettingValueError("url", self.url, "must not be empty")
        try:
            parsed = httpx.URL(self.url)
        except httpx.InvalidURL as exc:
            raise InvalidSettingValueError("url", self.url, str(exc)) from exc
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise InvalidSettingValueError("url", self.url, "must be an absolute http(s) URL")
        if not self.app_name:
            raise InvalidSettingValueError("app_name", self.app_name, "must not be empty")
        for name in ("refresh_interval", "metrics_interval", "timeout"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidSettingValueError(name, value, "must be positive")


__all__ = ["UnleashConfig"]
