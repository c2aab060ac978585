"""Observability – levelled console logging and event forwarding."""

from levellog.observability.events import Event
from levellog.observability.logging import (
    ForwardingClient,
    Logger,
    LoggerConfig,
    Severity,
    Sink,
)

__all__ = [
    "Event",
    "ForwardingClient",
    "Logger",
    "LoggerConfig",
    "Severity",
    "Sink",
]
