"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from ras_party.kernel.errors import (
    BaseError,
    DomainError,
    FeatureDisabledError,
    InfrastructureError,
    NotImplementedYetError,
    TimeoutError,
    ValidationError,
)
from ras_party.observability.logging import get_logger

_log = get_logger(__name__)


class FastAPIExceptionMapper:
    """Register error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"error": "...", "code": "validation_error"}

    A ``ValidationError`` carrying field errors adds them under ``"errors"``.

    Mappings
    --------
    ``ValidationError``         → 400
    ``FeatureDisabledError``    → 405 (empty body)
    ``NotImplementedYetError``  → 501
    ``TimeoutError``            → 504
    ``InfrastructureError``     → 503
    ``DomainError``             → 422
    """

    def __init__(self) -> None:
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[BaseError], int, bool]] = [
            (ValidationError, 400, True),
            (FeatureDisabledError, 405, False),
            (NotImplementedYetError, 501, True),
            (TimeoutError, 504, True),
            (InfrastructureError, 503, True),
            (DomainError, 422, True),
        ]

    def register(self, app: FastAPI) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type, status, with_body in self._map:
            app.add_exception_handler(exc_type, self._handler(status, with_body))

    @staticmethod
    def _handler(status: int, with_body: bool) -> Callable[[Request, Any], Response]:
        def handler(request: Request, exc: BaseError) -> Response:
            if status >= 500:
                _log.warning(
                    "http.error", path=request.url.path, status=status, code=exc.code, error=exc.message
                )
            if not with_body:
                return Response(status_code=status)
            content: dict[str, Any] = {"error": exc.message, "code": exc.code}
            if isinstance(exc, ValidationError) and exc.errors:
                content["errors"] = exc.errors
            return JSONResponse(status_code=status, content=content)

        return handler


__all__ = ["FastAPIExceptionMapper"]
