"""FastAPI adapter – reusable dependency functions."""
from __future__ import annotations

from typing import Any

from fastapi import Depends, Request

from ras_party.feature_flags.provider import FeatureFlagProvider
from ras_party.kernel.errors import FeatureDisabledError


def get_feature_flags(request: Request) -> FeatureFlagProvider:
    """Return the provider the composition root stored on ``app.state``."""
    return request.app.state.feature_flags


def require_feature(name: str, fallback: bool = False) -> Any:
    """Dependency that rejects the request with 405 while *name* is off.

    Usage::

        @router.get("/widgets", dependencies=[require_feature("api.get.widgets")])
        def list_widgets(): ...
    """

    def check_feature(flags: FeatureFlagProvider = Depends(get_feature_flags)) -> None:
        if not flags.is_enabled(name, fallback):
            raise FeatureDisabledError(name)

    return Depends(check_feature)


__all__ = ["get_feature_flags", "require_feature"]
