"""Testing fakes – in-process doubles for external services."""
from ras_party.testing.fakes.locks import ReadWriteLock
from ras_party.testing.fakes.unleash import FakeUnleashServer

__all__ = ["FakeUnleashServer", "ReadWriteLock"]
