"""API response models."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Info:
    """Body of ``GET /v2/info``."""
    name: str
    version: str


@dataclasses.dataclass(frozen=True)
class ErrorBody:
    """Body of every JSON error response; ``errors`` lists per-field problems on 400s."""
    error: str
    code: str
    errors: list[dict[str, str]] | None = None


__all__ = ["ErrorBody", "Info"]
