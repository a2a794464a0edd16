"""Composition root – builds the FastAPI application."""
from __future__ import annotations

import contextlib
from typing import AsyncIterator

from fastapi import FastAPI

from ras_party.adapters.fastapi import FastAPIExceptionMapper, FastAPIHealthRouter
from ras_party.api import info, respondents
from ras_party.feature_flags import BasicListener, FeatureFlagProvider, UnleashClient, UnleashConfig
from ras_party.observability.logging import get_logger
from ras_party.settings import PartySettings, load_settings

_log = get_logger(__name__)


def build_unleash_client(settings: PartySettings) -> UnleashClient:
    """Create (but do not start) the flag client described by *settings*."""
    return UnleashClient(
        UnleashConfig(
            url=settings.unleash_uri,
            app_name=settings.service_name,
            refresh_interval=settings.unleash_refresh_interval,
            metrics_interval=settings.unleash_metrics_interval,
            timeout=settings.unleash_timeout,
            listener=BasicListener(),
            disable_metrics=settings.unleash_disable_metrics,
        )
    )


def create_app(
    settings: PartySettings | None = None,
    feature_flags: FeatureFlagProvider | None = None,
) -> FastAPI:
    """Wire settings, the flag provider, error mapping and routes together.

    When *feature_flags* is omitted an :class:`UnleashClient` is built from
    *settings*.  An ``UnleashClient`` is started and closed by the app lifespan.
    """
    settings = settings or load_settings()
    flags = feature_flags if feature_flags is not None else build_unleash_client(settings)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if isinstance(flags, UnleashClient):
            await flags.start()
        _log.info("party.started", port=settings.port, version=settings.app_version)
        try:
            yield
        finally:
            _log.info("party.stopping")
            if isinstance(flags, UnleashClient):
                await flags.close()

    async def feature_flags_ready() -> bool:
        return bool(getattr(flags, "ready", True))

    app = FastAPI(title=settings.service_name, version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.feature_flags = flags

    FastAPIExceptionMapper().register(app)
    app.include_router(info.router)
    app.include_router(respondents.router)
    app.include_router(FastAPIHealthRouter(readiness_checks=[feature_flags_ready]))
    return app


__all__ = ["build_unleash_client", "create_app"]
