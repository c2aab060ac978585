"""Infrastructure errors – failures talking to external collectors."""

from __future__ import annotations

from typing import Any

from levellog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure outside the logger's control."""

    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """An event collector could not be reached or rejected an event."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = ["ExternalServiceError", "InfrastructureError"]
