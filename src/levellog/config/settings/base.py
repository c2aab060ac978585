"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass(frozen=True)
class Settings:
    """Base class for immutable settings read from the environment.

    ``_prefix`` names the variable namespace, so a field ``log_level`` on a
    subclass with ``_prefix = "LEVELLOG"`` is read from ``LEVELLOG_LOG_LEVEL``.
    """

    _prefix: ClassVar[str] = ""


__all__ = ["Settings"]
