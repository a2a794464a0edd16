"""Feature flags – lifecycle listeners for :class:`UnleashClient`.

The client calls these synchronously, from its poll loop or from whichever
thread queried a flag.  Implementations must return quickly and tolerate
concurrent calls.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from ras_party.observability.logging import get_logger

if TYPE_CHECKING:
    from ras_party.feature_flags.payloads import ClientRegistration, MetricsBatch
    from ras_party.kernel.errors import BaseError

_log = get_logger(__name__)


class Listener:
    """No-op listener; subclass and override the events you care about."""

    def on_error(self, error: "BaseError") -> None:
        """A poll cycle failed."""

    def on_warning(self, warning: "BaseError") -> None:
        """A registration or metrics submission failed."""

    def on_ready(self) -> None:
        """The first snapshot has been installed."""

    def on_count(self, name: str, enabled: bool) -> None:
        """A flag was queried."""

    def on_sent(self, batch: "MetricsBatch") -> None:
        """A metrics batch was accepted by the server."""

    def on_registered(self, registration: "ClientRegistration") -> None:
        """The client registration was accepted by the server."""


class BasicListener(Listener):
    """Logs errors and readiness, stays quiet otherwise."""

    def on_error(self, error: "BaseError") -> None:
        _log.error("unleash.error", error=error.message, code=error.code)

    def on_ready(self) -> None:
        _log.info("unleash.ready")


class DebugListener(BasicListener):
    """Logs every event; noisy, meant for local debugging."""

    def on_warning(self, warning: "BaseError") -> None:
        _log.warning("unleash.warning", warning=warning.message, code=warning.code)

    def on_count(self, name: str, enabled: bool) -> None:
        _log.debug("unleash.count", feature=name, enabled=enabled)

    def on_sent(self, batch: "MetricsBatch") -> None:
        _log.debug("unleash.sent", toggles=len(batch.toggles))

    def on_registered(self, registration: "ClientRegistration") -> None:
        _log.debug("unleash.registered", instance_id=registration.instance_id)


__all__ = ["BasicListener", "DebugListener", "Listener"]
