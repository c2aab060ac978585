"""Application errors – misuse of the library by the embedding code."""

from __future__ import annotations

from levellog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The caller asked for something the library cannot do as configured."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
