"""Feature flags – InMemoryFeatureFlagProvider."""

from __future__ import annotations

from ras_party.feature_flags.feature_flag import FeatureFlag


class InMemoryFeatureFlagProvider:
    """Static provider backed by a ``{name: bool}`` dict.

    Satisfies :class:`~ras_party.feature_flags.provider.FeatureFlagProvider`;
    handy for pinning flags in tests or when no flag server is available.
    """

    def __init__(self, flags: dict[str, bool] | None = None) -> None:
        self._flags: dict[str, bool] = dict(flags or {})

    def set(self, flag: FeatureFlag | str, enabled: bool) -> None:
        """Enable or disable a flag by name or :class:`FeatureFlag` instance."""
        name = flag.name if isinstance(flag, FeatureFlag) else flag
        self._flags[name] = enabled

    def is_enabled(self, name: str, fallback: bool = False) -> bool:
        return self._flags.get(name, fallback)


__all__ = ["InMemoryFeatureFlagProvider"]
