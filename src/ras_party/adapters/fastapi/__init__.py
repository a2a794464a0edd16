"""FastAPI adapter – exception mapper, health router, feature-flag deps."""
from ras_party.adapters.fastapi.deps import get_feature_flags, require_feature
from ras_party.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from ras_party.adapters.fastapi.routers import FastAPIHealthRouter, ReadinessCheck

__all__ = [
    "FastAPIExceptionMapper",
    "FastAPIHealthRouter",
    "ReadinessCheck",
    "get_feature_flags",
    "require_feature",
]
