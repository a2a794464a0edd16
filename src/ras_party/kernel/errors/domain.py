"""Kernel errors – rejected input."""
from __future__ import annotations

from typing import Any

from ras_party.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """A request failed validation; answered with HTTP 400.

    ``errors`` optionally lists per-field problems, e.g.
    ``[{"field": "telephone", "message": "required"}]``.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors = list(errors or [])

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


__all__ = ["DomainError", "ValidationError"]
