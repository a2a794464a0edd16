"""Application-layer errors – request handling concerns."""

from __future__ import annotations

from typing import Any

from ras_party.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class FeatureDisabledError(ApplicationError):
    """The endpoint is switched off by its feature flag."""

    default_code = "feature_disabled"

    def __init__(self, feature: str, **kwargs: Any) -> None:
        super().__init__(f"Feature '{feature}' is disabled", **kwargs)
        self.feature = feature


class NotImplementedYetError(ApplicationError):
    """The endpoint exists but has no behaviour behind it yet."""

    default_code = "not_implemented"

    def __init__(self, message: str = "Not implemented", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "FeatureDisabledError",
    "NotImplementedYetError",
]
