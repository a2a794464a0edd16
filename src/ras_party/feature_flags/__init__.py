"""Feature flags – polling Unleash client, snapshot store and evaluation port."""
from ras_party.feature_flags.client import UnleashClient
from ras_party.feature_flags.config import UnleashConfig
from ras_party.feature_flags.feature_flag import FeatureFlag, Strategy, parse_features
from ras_party.feature_flags.in_memory import InMemoryFeatureFlagProvider
from ras_party.feature_flags.listener import BasicListener, DebugListener, Listener
from ras_party.feature_flags.metrics import MetricsCollector
from ras_party.feature_flags.payloads import ClientRegistration, MetricsBatch, ToggleCount
from ras_party.feature_flags.provider import FeatureFlagProvider
from ras_party.feature_flags.snapshot import FeatureSnapshot, SnapshotStore

__all__ = [
    "BasicListener",
    "ClientRegistration",
    "DebugListener",
    "FeatureFlag",
    "FeatureFlagProvider",
    "FeatureSnapshot",
    "InMemoryFeatureFlagProvider",
    "Listener",
    "MetricsBatch",
    "MetricsCollector",
    "SnapshotStore",
    "Strategy",
    "ToggleCount",
    "UnleashClient",
    "UnleashConfig",
    "parse_features",
]
