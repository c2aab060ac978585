"""Logging errors – raised by the levelled logger itself."""

from __future__ import annotations

from levellog.kernel.errors.base import BaseError


class LoggingError(BaseError):
    """Base for errors raised by :class:`~levellog.observability.logging.Logger`."""

    default_code = "logging_error"


class NilClientError(LoggingError):
    """A forwarding client was registered as ``None``.

    The logger keeps whichever forwarder it had before the call.
    """

    default_code = "client_nil"

    def __init__(self, message: str = "attempted to register a nil forwarding client") -> None:
        super().__init__(message)


__all__ = ["LoggingError", "NilClientError"]
