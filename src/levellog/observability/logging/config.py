"""Observability – LoggerConfig."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Mapping

from levellog.config.settings import Settings
from levellog.config.validation import InvalidSettingValueError
from levellog.observability.logging.severity import Severity, is_valid_level


@dataclasses.dataclass(frozen=True)
class LoggerConfig(Settings):
    """Configuration of a :class:`~levellog.observability.logging.Logger`.

    Parameters
    ----------
    prefix:
        Identifies the emitting service or module; extended by
        :meth:`Logger.new_module`.
    log_level:
        Threshold severity name (``"OFF"`` .. ``"ALL"``, any case).  An
        unrecognised name is accepted and produces a logger that prints
        nothing; call :meth:`validate` to detect it early.
    add_timestamp:
        Prepend an RFC-3339 timestamp to each console line.

    Loaded from the environment as ``LEVELLOG_PREFIX``,
    ``LEVELLOG_LOG_LEVEL`` and ``LEVELLOG_ADD_TIMESTAMP`` by
    :class:`~levellog.config.settings.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "LEVELLOG"

    prefix: str = "service"
    log_level: str = Severity.INFO.name
    add_timestamp: bool = True

    @classmethod
    def default(cls) -> LoggerConfig:
        """Prefix ``"service"``, threshold ``INFO``, timestamps enabled."""
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LoggerConfig:
        """Build a config from decoded JSON/YAML; unknown keys are ignored."""
        known = {field.name for field in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    def with_prefix(self, prefix: str) -> LoggerConfig:
        return dataclasses.replace(self, prefix=prefix)

    def validate(self) -> list[str]:
        """Return a list of problems; empty when the config is usable."""
        errors: list[str] = []
        if not isinstance(self.prefix, str):
            errors.append(f"prefix must be a string, got {self.prefix!r}")
        if not is_valid_level(self.log_level):
            names = ", ".join(s.name for s in Severity)
            errors.append(f"log_level {self.log_level!r} is not one of {names}")
        return errors

    def require_valid(self) -> None:
        """Raise :class:`InvalidSettingValueError` when the level name is unknown."""
        if not is_valid_level(self.log_level):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "unknown severity name, logger would be silent"
            )


__all__ = ["LoggerConfig"]
