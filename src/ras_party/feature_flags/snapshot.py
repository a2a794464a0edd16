"""Feature flags – FeatureSnapshot and SnapshotStore.

A snapshot is never mutated: every completed poll builds a new one and the
store swaps its single reference under a lock.  Readers take the reference
without locking, so they always see one poll's flags in full.
"""
from __future__ import annotations

import dataclasses
import threading
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Iterable, Mapping

from ras_party.feature_flags.feature_flag import FeatureFlag


@dataclasses.dataclass(frozen=True)
class FeatureSnapshot:
    """Immutable view of every feature known after one poll."""
    features: Mapping[str, FeatureFlag] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )
    version: int = 0
    fetched_at: datetime | None = None
    etag: str | None = None

    @classmethod
    def from_flags(
        cls,
        flags: Iterable[FeatureFlag],
        *,
        version: int = 0,
        etag: str | None = None,
        fetched_at: datetime | None = None,
    ) -> "FeatureSnapshot":
        return cls(
            features=MappingProxyType({flag.name: flag for flag in flags}),
            version=version,
            fetched_at=fetched_at or datetime.now(UTC),
            etag=etag,
        )

    def get(self, name: str) -> FeatureFlag | None:
        return self.features.get(name)

    def is_enabled(self, name: str, fallback: bool = False) -> bool:
        flag = self.features.get(name)
        if flag is None:
            return fallback
        return flag.is_active

    def as_dict(self) -> dict[str, bool]:
        return {name: flag.is_active for name, flag in self.features.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.features

    def __len__(self) -> int:
        return len(self.features)


class SnapshotStore:
    """Holds the current snapshot; ``replace`` is the only writer."""

    def __init__(self, initial: FeatureSnapshot | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot = initial or FeatureSnapshot()
        self._generation = 0

    @property
    def current(self) -> FeatureSnapshot:
        return self._snapshot

    @property
    def generation(self) -> int:
        """Number of snapshots installed since construction."""
        return self._generation

    def replace(self, snapshot: FeatureSnapshot) -> None:
        with self._lock:
            self._snapshot = snapshot
            self._generation += 1


__all__ = ["FeatureSnapshot", "SnapshotStore"]
