"""Config settings – EnvSettingsLoader, DotenvSettingsLoader.

Both read ``<PREFIX>_<FIELD>`` variables, e.g. ``LEVELLOG_LOG_LEVEL`` for
:class:`~levellog.LoggerConfig`. Variables that are not set leave the
field default in place.
"""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from levellog.config.settings.base import Settings
from levellog.config.validation import ConfigError, InvalidSettingValueError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Build settings from environment variables.

    *environ* replaces ``os.environ`` as the source, which keeps tests
    free of global state.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = settings_class._prefix.upper()
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = f"{prefix}_{field.name.upper()}" if prefix else field.name.upper()
            if key in environ:
                values[field.name] = _coerce(key, environ[key], field.type)
        try:
            return settings_class(**values)
        except TypeError as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}") from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import load_dotenv  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError("Install 'levellog[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


def _coerce(key: str, raw: str, type_hint: Any) -> Any:
    if type_hint is bool or type_hint == "bool":
        flag = raw.strip().lower()
        if flag in _TRUE:
            return True
        if flag in _FALSE:
            return False
        raise InvalidSettingValueError(key, raw, "expected a boolean such as true/false or 1/0")
    return raw


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
