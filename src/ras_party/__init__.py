"""ras-party – respondent/party HTTP API gated by Unleash feature flags."""

__version__ = "0.1.0"
