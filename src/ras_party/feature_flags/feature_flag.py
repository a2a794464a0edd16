"""Feature flags – FeatureFlag and Strategy value objects, wire parsing."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Mapping

from ras_party.kernel.errors import SerializationError

DEFAULT_STRATEGY = "default"


@dataclasses.dataclass(frozen=True)
class Strategy:
    """An activation strategy attached to a feature."""
    name: str = DEFAULT_STRATEGY
    id: int = 0
    constraints: tuple[Any, ...] = ()
    parameters: Mapping[str, Any] = dataclasses.field(default_factory=lambda: MappingProxyType({}))

    def resolves(self) -> bool:
        # Targeting parameters are not evaluated: "default" and any other
        # strategy name resolve true.
        return True


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    """A named boolean toggle as served by the flag server."""
    name: str
    enabled: bool = False
    description: str = ""
    strategies: tuple[Strategy, ...] = ()

    @property
    def is_active(self) -> bool:
        """``enabled`` and at least one strategy resolves (no strategies counts as resolved)."""
        if not self.enabled:
            return False
        if not self.strategies:
            return True
        return any(strategy.resolves() for strategy in self.strategies)

    @classmethod
    def from_payload(cls, payload: Any) -> "FeatureFlag":
        if not isinstance(payload, dict):
            raise SerializationError("Feature entry must be an object", payload_type="feature")
        name = payload.get("name")
        if not isinstance(name, str) or not name:
            raise SerializationError("Feature entry has no name", payload_type="feature")
        enabled = payload.get("enabled", False)
        if not isinstance(enabled, bool):
            raise SerializationError(
                f"Feature '{name}' has a non-boolean 'enabled'", payload_type="feature"
            )
        strategies = payload.get("strategies") or []
        if not isinstance(strategies, list):
            raise SerializationError(
                f"Feature '{name}' has malformed strategies", payload_type="feature"
            )
        return cls(
            name=name,
            enabled=enabled,
            description=payload.get("description") or "",
            strategies=tuple(_strategy_from_payload(name, s) for s in strategies),
        )


def _strategy_from_payload(feature: str, payload: Any) -> Strategy:
    if not isinstance(payload, dict):
        raise SerializationError(
            f"Feature '{feature}' has a malformed strategy", payload_type="strategy"
        )
    try:
        return Strategy(
            name=str(payload.get("name") or DEFAULT_STRATEGY),
            id=int(payload.get("id") or 0),
            constraints=tuple(payload.get("constraints") or ()),
            parameters=MappingProxyType(dict(payload.get("parameters") or {})),
        )
    except (TypeError, ValueError, OverflowError) as exc:
        raise SerializationError(
            f"Feature '{feature}' has a malformed strategy", payload_type="strategy", cause=exc
        ) from exc


def parse_features(payload: Any) -> tuple[int, tuple[FeatureFlag, ...]]:
    """Parse a ``GET /client/features`` body into ``(version, flags)``.

    Raises :class:`SerializationError` when the body does not have the
    ``{"version": int, "features": [...]}`` shape.
    """
    if not isinstance(payload, dict):
        raise SerializationError("Feature list must be a JSON object", payload_type="features")
    features = payload.get("features")
    if not isinstance(features, list):
        raise SerializationError("Feature list has no 'features' array", payload_type="features")
    version = payload.get("version", 0)
    if not isinstance(version, int) or isinstance(version, bool):
        raise SerializationError("Feature list has a non-integer version", payload_type="features")
    return version, tuple(FeatureFlag.from_payload(item) for item in features)


__all__ = ["DEFAULT_STRATEGY", "FeatureFlag", "Strategy", "parse_features"]
