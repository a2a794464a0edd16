"""Kernel errors – talking to the flag server and other remotes."""
from __future__ import annotations

from typing import Any

from ras_party.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """A remote call ran past the configured timeout."""

    default_code = "infrastructure_timeout"


class SerializationError(InfrastructureError):
    """A remote answered with a body we could not decode.

    ``payload_type`` names what was being decoded (``"features"``,
    ``"feature"``, ``"strategy"``).
    """

    default_code = "serialization_error"

    def __init__(self, message: str, *, payload_type: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """A remote could not be reached or answered with an error status.

    ``status_code`` is ``None`` when no response arrived at all.
    """

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Call to {service} failed", **kwargs)
        self.service = service
        self.status_code = status_code


class FetchError(InfrastructureError):
    """A feature-flag poll cycle failed; the previous snapshot stays in use."""

    default_code = "fetch_error"


class SendError(InfrastructureError):
    """Registration or metrics submission to the flag server failed."""

    default_code = "send_error"


__all__ = [
    "ExternalServiceError",
    "FetchError",
    "InfrastructureError",
    "SendError",
    "SerializationError",
    "TimeoutError",
]
