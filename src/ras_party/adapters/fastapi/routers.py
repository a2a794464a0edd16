"""FastAPI adapter – ``/health/live`` and ``/health/ready``."""
from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ras_party.observability.logging import get_logger

ReadinessCheck = Callable[[], Awaitable[bool]]

_log = get_logger(__name__)


def FastAPIHealthRouter(
    path: str = "/health",
    readiness_checks: list[ReadinessCheck] | None = None,
    tags: list[str] | None = None,
) -> APIRouter:
    """Build the probe router.

    ``{path}/live`` answers 200 while the process serves requests.
    ``{path}/ready`` awaits every check and answers 503 ``"degraded"`` when
    one returns ``False`` or raises; each check is reported under its
    function name.
    """
    router = APIRouter(prefix=path, tags=tags or ["health"])
    checks = list(readiness_checks or [])

    @router.get("/live")
    async def live() -> dict[str, str]:
        return {"status": "ok"}

    @router.get("/ready")
    async def ready() -> JSONResponse:
        results = {getattr(check, "__name__", repr(check)): await _run(check) for check in checks}
        healthy = all(results.values())
        return JSONResponse(
            {"status": "ok" if healthy else "degraded", "checks": results},
            status_code=200 if healthy else 503,
        )

    return router


async def _run(check: ReadinessCheck) -> bool:
    try:
        return bool(await check())
    except Exception:  # noqa: BLE001
        _log.warning("health.check_failed", check=getattr(check, "__name__", repr(check)), exc_info=True)
        return False


__all__ = ["FastAPIHealthRouter", "ReadinessCheck"]
