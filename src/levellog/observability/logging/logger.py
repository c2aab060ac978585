"""Observability – Logger (levelled console output + event forwarding).

Every public emit method goes through the same two gates:

1. *console gate* – the line is written to the sink when the message
   severity rank is ``<=`` the configured threshold;
2. *forwarding gate* – FATAL, ERROR, WARN and INFO messages are submitted
   to the attached forwarding client whatever the console gate decided.
   DEBUG and TRACE never leave the process.

Console lines are rendered as ``[<RFC-3339 timestamp> | ]LEVEL | prefix | message``.
``fatal``/``fatalln`` only label the line; they never raise or exit.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from levellog.kernel.errors import NilClientError
from levellog.kernel.time import Clock, SystemClock, rfc3339
from levellog.observability.events import Event
from levellog.observability.logging.config import LoggerConfig
from levellog.observability.logging.protocol import ForwardingClient, Sink
from levellog.observability.logging.severity import FORWARDED, Severity, level_rank

_THRESHOLD_ONLY = frozenset({Severity.OFF, Severity.ALL})


class Logger:
    """Levelled logger writing to *sink* and optionally forwarding events.

    Parameters
    ----------
    sink:
        Destination of rendered lines.  Not owned: the creator keeps it
        open for as long as the logger is used.
    config:
        Prefix, threshold and timestamp flag.  Defaults to
        :meth:`LoggerConfig.default`.  The threshold name is resolved once
        here; an unknown name yields a logger that prints nothing at any
        level, FATAL included.
    clock:
        Source of timestamps.  Defaults to :class:`SystemClock`.

    Example
    -------
    ::

        import sys
        from levellog import Logger, LoggerConfig

        log = Logger(sys.stdout, LoggerConfig(prefix="svc", log_level="WARN"))
        db = log.new_module(".db")
        db.warnln("disk low")       # <ts> | WARN | svc.db | disk low
        db.info("started %d", 3)    # filtered out
    """

    def __init__(
        self,
        sink: Sink,
        config: LoggerConfig | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._sink = sink
        self._config = config if config is not None else LoggerConfig.default()
        self._level = level_rank(self._config.log_level)
        self._clock: Clock = clock or SystemClock()
        self._forwarder: ForwardingClient | None = None

    def __repr__(self) -> str:
        return f"Logger(prefix={self.prefix!r}, level={self._config.log_level!r})"

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def prefix(self) -> str:
        return self._config.prefix

    @property
    def level(self) -> int:
        """Resolved threshold rank (``-1`` for an unknown level name)."""
        return self._level

    @property
    def forwarder(self) -> ForwardingClient | None:
        return self._forwarder

    def is_enabled_for(self, severity: Severity) -> bool:
        """Return ``True`` if a *severity* message would reach the sink.

        ``OFF`` and ``ALL`` are thresholds, never message severities, so
        they are never enabled.
        """
        return severity not in _THRESHOLD_ONLY and severity <= self._level

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def new_module(self, prefix: str) -> Logger:
        """Return a child logger whose prefix is ``self.prefix + prefix``.

        No separator is inserted.  The child shares the sink, the clock and
        the forwarder attached *at this moment*; registering another
        forwarder on either logger later does not affect the other.
        """
        child = Logger(
            self._sink,
            self._config.with_prefix(self._config.prefix + prefix),
            clock=self._clock,
        )
        child._forwarder = self._forwarder
        return child

    def use_forwarder(self, client: ForwardingClient | None) -> None:
        """Register *client* to receive FATAL..INFO events from this logger.

        Raises
        ------
        NilClientError
            If *client* is ``None``; the current forwarder is kept.
        """
        if client is None:
            raise NilClientError()
        self._forwarder = client

    # ------------------------------------------------------------------
    # Generic entry points
    # ------------------------------------------------------------------

    def log(self, severity: Severity, template: str, *args: Any) -> None:
        """Emit ``template % args`` at *severity*, without a trailing newline.

        *template* is used verbatim when no args are given.  A single
        mapping argument is used for ``%(name)s`` style substitution.
        """
        _require_message_severity(severity)
        self._emit(severity, template, args, end="")

    def logln(self, severity: Severity, message: str) -> None:
        """Emit the literal *message* at *severity*, newline-terminated."""
        _require_message_severity(severity)
        self._emit(severity, message, (), end="\n")

    # ------------------------------------------------------------------
    # Formatted variant
    # ------------------------------------------------------------------

    def fatal(self, template: str, *args: Any) -> None:
        """Print a fatal message. Does NOT raise or exit."""
        self.log(Severity.FATAL, template, *args)

    def error(self, template: str, *args: Any) -> None:
        self.log(Severity.ERROR, template, *args)

    def warn(self, template: str, *args: Any) -> None:
        self.log(Severity.WARN, template, *args)

    def info(self, template: str, *args: Any) -> None:
        self.log(Severity.INFO, template, *args)

    def debug(self, template: str, *args: Any) -> None:
        """Print a debug message. Never forwarded."""
        self.log(Severity.DEBUG, template, *args)

    def trace(self, template: str, *args: Any) -> None:
        """Print a trace message. Never forwarded."""
        self.log(Severity.TRACE, template, *args)

    # ------------------------------------------------------------------
    # Line variant
    # ------------------------------------------------------------------

    def fatalln(self, message: str) -> None:
        """Print a fatal line. Does NOT raise or exit."""
        self.logln(Severity.FATAL, message)

    def errorln(self, message: str) -> None:
        self.logln(Severity.ERROR, message)

    def warnln(self, message: str) -> None:
        self.logln(Severity.WARN, message)

    def infoln(self, message: str) -> None:
        self.logln(Severity.INFO, message)

    def debugln(self, message: str) -> None:
        self.logln(Severity.DEBUG, message)

    def traceln(self, message: str) -> None:
        self.logln(Severity.TRACE, message)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _emit(self, severity: Severity, template: str, args: tuple[Any, ...], end: str) -> None:
        forwarder = self._forwarder if severity in FORWARDED else None
        printable = severity <= self._level
        if not printable and forwarder is None:
            return

        message = _format(template, args)
        if printable:
            self._sink.write(self._render(severity.name, message) + end)
        if forwarder is not None:
            forwarder.submit(
                Event(service=self._config.prefix, state=severity.name, description=message)
            )

    def _render(self, level: str, message: str) -> str:
        stamp = f"{rfc3339(self._clock.now())} | " if self._config.add_timestamp else ""
        return f"{stamp}{level} | {self._config.prefix} | {message}"


def _format(template: str, args: tuple[Any, ...]) -> str:
    if not args:
        return template
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values: Any = args[0]
    else:
        values = args
    try:
        return template % values
    except (TypeError, ValueError, KeyError):
        # Mismatched arguments are rendered, not raised.
        return f"{template} %!(ARGS {args!r})"


def _require_message_severity(severity: Severity) -> None:
    if severity in _THRESHOLD_ONLY:
        raise ValueError(f"{severity.name} is a threshold, not a message severity")


__all__ = ["Logger"]
