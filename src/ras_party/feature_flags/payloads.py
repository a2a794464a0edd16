"""Feature flags – registration and metrics payloads sent to the flag server."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Mapping


def _timestamp(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


@dataclasses.dataclass(frozen=True)
class ClientRegistration:
    """Sent once when the client starts."""
    app_name: str
    instance_id: str
    sdk_version: str
    started: datetime
    interval_ms: int
    strategies: tuple[str, ...] = ("default",)

    def to_payload(self) -> dict[str, Any]:
        return {
            "appName": self.app_name,
            "instanceId": self.instance_id,
            "sdkVersion": self.sdk_version,
            "strategies": list(self.strategies),
            "started": _timestamp(self.started),
            "interval": self.interval_ms,
        }


@dataclasses.dataclass(frozen=True)
class ToggleCount:
    yes: int = 0
    no: int = 0


@dataclasses.dataclass(frozen=True)
class MetricsBatch:
    """Flag query counts for one reporting window."""
    app_name: str
    instance_id: str
    start: datetime
    stop: datetime
    toggles: Mapping[str, ToggleCount] = dataclasses.field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.toggles

    def to_payload(self) -> dict[str, Any]:
        return {
            "appName": self.app_name,
            "instanceId": self.instance_id,
            "bucket": {
                "start": _timestamp(self.start),
                "stop": _timestamp(self.stop),
                "toggles": {
                    name: {"yes": count.yes, "no": count.no}
                    for name, count in self.toggles.items()
                },
            },
        }


__all__ = ["ClientRegistration", "MetricsBatch", "ToggleCount"]
