"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    │   ├── FeatureDisabledError
    │   ├── NotImplementedYetError
    │   └── ConfigurationError  (ras_party.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── TimeoutError
        ├── SerializationError
        ├── ExternalServiceError
        ├── FetchError
        └── SendError
"""

from ras_party.kernel.errors.application import (
    ApplicationError,
    FeatureDisabledError,
    NotImplementedYetError,
)
from ras_party.kernel.errors.base import BaseError
from ras_party.kernel.errors.domain import DomainError, ValidationError
from ras_party.kernel.errors.infrastructure import (
    ExternalServiceError,
    FetchError,
    InfrastructureError,
    SendError,
    SerializationError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "FeatureDisabledError",
    "FetchError",
    "InfrastructureError",
    "NotImplementedYetError",
    "SendError",
    "SerializationError",
    "TimeoutError",
    "ValidationError",
]
