"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError      (application.py)
    │   └── ConfigError       (levellog.config.validation)
    ├── LoggingError          (logging.py)
    │   └── NilClientError
    └── InfrastructureError   (infrastructure.py)
        └── ExternalServiceError
"""

from levellog.kernel.errors.application import ApplicationError
from levellog.kernel.errors.base import BaseError
from levellog.kernel.errors.infrastructure import ExternalServiceError, InfrastructureError
from levellog.kernel.errors.logging import LoggingError, NilClientError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ExternalServiceError",
    "InfrastructureError",
    "LoggingError",
    "NilClientError",
]
