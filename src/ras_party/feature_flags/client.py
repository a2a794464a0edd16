"""Feature flags – UnleashClient, a polling client for an Unleash-compatible server.

The client keeps the last successfully fetched :class:`FeatureSnapshot` and
serves :meth:`UnleashClient.is_enabled` from it without doing any I/O.  Two
background tasks run on the event loop that called :meth:`start`:

* the poll loop refreshes the snapshot every ``refresh_interval`` seconds;
* the metrics loop posts query counts every ``metrics_interval`` seconds.

A failed poll leaves the current snapshot in place and is reported to the
listener as a :class:`FetchError`.  A failed registration or metrics post is
logged and reported as a :class:`SendError` warning.  Neither is retried
before the next scheduled cycle.

Usage::

    client = UnleashClient(UnleashConfig(url="http://unleash/api", app_name="party"))
    await client.start()
    if client.is_enabled("party.api.get.respondents"):
        ...
    await client.close()
"""
from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import Any, Awaitable, Callable

import httpx

from ras_party import __version__
from ras_party.adapters.http import HttpxHttpClient
from ras_party.feature_flags.config import UnleashConfig
from ras_party.feature_flags.feature_flag import DEFAULT_STRATEGY, parse_features
from ras_party.feature_flags.listener import Listener
from ras_party.feature_flags.metrics import MetricsCollector
from ras_party.feature_flags.payloads import ClientRegistration
from ras_party.feature_flags.snapshot import FeatureSnapshot, SnapshotStore
from ras_party.kernel.errors import (
    BaseError,
    ExternalServiceError,
    FetchError,
    SendError,
    SerializationError,
)
from ras_party.observability.logging import get_logger

FEATURES_PATH = "/client/features"
REGISTER_PATH = "/client/register"
METRICS_PATH = "/client/metrics"

SDK_VERSION = f"ras-party:{__version__}"


class UnleashClient:
    """Polls the flag server and answers flag queries from memory."""

    def __init__(self, config: UnleashConfig, *, http_client: HttpxHttpClient | None = None) -> None:
        self._config = config
        self._listener = config.listener or Listener()
        self._store = SnapshotStore()
        self._metrics = MetricsCollector()
        self._http = http_client
        self._log = get_logger(__name__, app_name=config.app_name)

        self._tasks: list[asyncio.Task[None]] = []
        self._stopping = asyncio.Event()
        self._ready_event = asyncio.Event()
        self._ready = False
        self._started = False
        self._closed = False
        self._started_at = datetime.now(UTC)

    async def __aenter__(self) -> "UnleashClient":
        await self.start()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> UnleashConfig:
        return self._config

    @property
    def snapshot(self) -> FeatureSnapshot:
        """The snapshot installed by the most recent completed poll."""
        return self._store.current

    @property
    def ready(self) -> bool:
        """``True`` once the first poll has succeeded."""
        return self._ready

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Flag evaluation
    # ------------------------------------------------------------------

    def is_enabled(self, name: str, fallback: bool = False) -> bool:
        """Return whether *name* is on, or *fallback* when the server never mentioned it."""
        flag = self._store.current.get(name)
        enabled = fallback if flag is None else flag.is_active
        if not self._config.disable_metrics:
            self._metrics.count(name, enabled)
        self._notify("on_count", name, enabled)
        return enabled

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Register, run the first poll, then schedule the background loops.

        Failures of the registration and of the first poll are reported to
        the listener, not raised.  Calling ``start`` again is a no-op.
        """
        if self._started or self._closed:
            return
        self._started = True
        self._log.info("unleash.starting", url=self._config.url)

        await self.register()
        try:
            await self.fetch()
        except Exception as exc:  # noqa: BLE001
            self._fetch_crashed(exc)

        self._tasks.append(
            asyncio.create_task(
                self._run_every(self._config.refresh_interval, self.fetch, self._fetch_crashed),
                name="unleash-poll",
            )
        )
        if not self._config.disable_metrics:
            self._tasks.append(
                asyncio.create_task(
                    self._run_every(
                        self._config.metrics_interval, self.send_metrics, self._metrics_crashed
                    ),
                    name="unleash-metrics",
                )
            )

    async def close(self) -> None:
        """Stop the background loops and release the HTTP client.

        In-flight requests are allowed to finish (bounded by ``timeout``).
        The last snapshot keeps being served.  Safe to call more than once.
        """
        if self._closed:
            return
        self._closed = True
        self._stopping.set()
        tasks, self._tasks = self._tasks, []
        await asyncio.gather(*tasks, return_exceptions=True)
        if self._http is not None:
            await self._http.aclose()
        self._log.info("unleash.closed")

    async def wait_until_ready(self, timeout: float | None = None) -> bool:
        """Wait for the first successful poll; ``False`` if *timeout* elapses first."""
        try:
            await asyncio.wait_for(self._ready_event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return False
        return True

    # ------------------------------------------------------------------
    # Remote operations
    # ------------------------------------------------------------------

    async def fetch(self) -> bool:
        """Run one poll cycle; return ``True`` when the snapshot is current."""
        headers: dict[str, str] = {}
        etag = self._store.current.etag
        if etag:
            headers["If-None-Match"] = etag

        try:
            response = await self._client().get(
                FEATURES_PATH, headers=headers, allow_status=(httpx.codes.NOT_MODIFIED,)
            )
            if response.status_code == httpx.codes.NOT_MODIFIED:
                self._log.debug("unleash.not_modified")
            else:
                if response.status_code != httpx.codes.OK:
                    raise ExternalServiceError(
                        service=FEATURES_PATH,
                        message=f"Unexpected HTTP {response.status_code} from GET {FEATURES_PATH}",
                        status_code=response.status_code,
                    )
                self._store.replace(self._parse(response))
        except BaseError as exc:
            error = FetchError(f"Failed to fetch feature flags: {exc.message}", cause=exc)
            self._log.warning("unleash.fetch_failed", error=exc.message, code=exc.code)
            self._notify("on_error", error)
            return False

        if not self._ready:
            self._ready = True
            self._ready_event.set()
            self._log.info("unleash.ready", features=len(self._store.current))
            self._notify("on_ready")
        return True

    async def register(self) -> bool:
        """Announce this instance to the server; best effort."""
        registration = ClientRegistration(
            app_name=self._config.app_name,
            instance_id=self._config.instance_id,
            sdk_version=SDK_VERSION,
            started=self._started_at,
            interval_ms=int(self._config.metrics_interval * 1000),
            strategies=(DEFAULT_STRATEGY,),
        )
        try:
            await self._client().post(REGISTER_PATH, json=registration.to_payload())
        except BaseError as exc:
            self._send_failed("register", exc)
            return False
        self._notify("on_registered", registration)
        return True

    async def send_metrics(self) -> bool:
        """Post the query counts gathered since the last call; best effort.

        Nothing is sent when no flag was queried.  Counts from a failed post
        are dropped.
        """
        batch = self._metrics.drain(self._config.app_name, self._config.instance_id)
        if batch.is_empty:
            return True
        try:
            await self._client().post(METRICS_PATH, json=batch.to_payload())
        except BaseError as exc:
            self._send_failed("metrics", exc)
            return False
        self._notify("on_sent", batch)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _client(self) -> HttpxHttpClient:
        if self._http is None:
            self._http = HttpxHttpClient(
                base_url=self._config.url,
                timeout=self._config.timeout,
                headers={
                    "UNLEASH-APPNAME": self._config.app_name,
                    "UNLEASH-INSTANCEID": self._config.instance_id,
                    "User-Agent": self._config.app_name,
                },
            )
        return self._http

    def _parse(self, response: httpx.Response) -> FeatureSnapshot:
        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            raise SerializationError(
                "Feature list is not valid JSON", payload_type="features", cause=exc
            ) from exc
        version, flags = parse_features(payload)
        return FeatureSnapshot.from_flags(
            flags, version=version, etag=response.headers.get("etag")
        )

    async def _run_every(
        self,
        interval: float,
        action: Callable[[], Awaitable[bool]],
        on_crash: Callable[[Exception], None],
    ) -> None:
        while not self._stopping.is_set():
            try:
                await asyncio.wait_for(self._stopping.wait(), timeout=interval)
            except asyncio.TimeoutError:
                try:
                    await action()
                except Exception as exc:  # noqa: BLE001
                    on_crash(exc)

    def _fetch_crashed(self, exc: Exception) -> None:
        self._log.exception("unleash.fetch_crashed")
        self._notify("on_error", FetchError(f"Failed to fetch feature flags: {exc!r}", cause=exc))

    def _metrics_crashed(self, exc: Exception) -> None:
        self._log.exception("unleash.metrics_crashed")
        self._notify("on_warning", SendError(f"Failed to send metrics: {exc!r}", cause=exc))

    def _send_failed(self, what: str, exc: BaseError) -> None:
        warning = SendError(f"Failed to send {what}: {exc.message}", cause=exc)
        self._log.warning("unleash.send_failed", what=what, error=exc.message)
        self._notify("on_warning", warning)

    def _notify(self, event: str, *args: Any) -> None:
        try:
            getattr(self._listener, event)(*args)
        except Exception:  # noqa: BLE001
            self._log.exception("unleash.listener_failed", listener_event=event)


__all__ = ["FEATURES_PATH", "METRICS_PATH", "REGISTER_PATH", "UnleashClient"]
