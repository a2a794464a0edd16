"""``/v2/info`` route."""
from __future__ import annotations

from fastapi import APIRouter, Request

from ras_party.api.models import Info

router = APIRouter(prefix="/v2", tags=["info"])


@router.get("/info", response_model=Info)
def get_info(request: Request) -> Info:
    settings = request.app.state.settings
    return Info(name=settings.service_name, version=settings.app_version)


__all__ = ["router"]
