"""Feature flags – FeatureFlagProvider port."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FeatureFlagProvider(Protocol):
    """Port: answer "is this feature on?" without I/O or blocking.

    Implementations must be safe to call from many threads at once and must
    return ``fallback`` for names they do not know.
    """

    def is_enabled(self, name: str, fallback: bool = False) -> bool: ...


__all__ = ["FeatureFlagProvider"]
