"""Feature flags – MetricsCollector."""
from __future__ import annotations

import threading
from datetime import UTC, datetime

from ras_party.feature_flags.payloads import MetricsBatch, ToggleCount


class MetricsCollector:
    """Counts flag queries between two metrics submissions.

    ``count`` is called from request threads, ``drain`` from the metrics loop.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: dict[str, list[int]] = {}
        self._start = datetime.now(UTC)

    def count(self, name: str, enabled: bool) -> None:
        with self._lock:
            bucket = self._counts.setdefault(name, [0, 0])
            bucket[0 if enabled else 1] += 1

    def drain(self, app_name: str, instance_id: str) -> MetricsBatch:
        """Return the counts collected so far and start a new window."""
        now = datetime.now(UTC)
        with self._lock:
            counts, self._counts = self._counts, {}
            start, self._start = self._start, now
        return MetricsBatch(
            app_name=app_name,
            instance_id=instance_id,
            start=start,
            stop=now,
            toggles={name: ToggleCount(yes=yes, no=no) for name, (yes, no) in counts.items()},
        )


__all__ = ["MetricsCollector"]
