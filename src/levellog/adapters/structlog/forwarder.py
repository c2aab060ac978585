"""structlog adapter – StructlogEventForwarder."""
from __future__ import annotations

from typing import Any

import structlog

from levellog.observability.events import Event

_METHODS: dict[str, str] = {
    "FATAL": "critical",
    "ERROR": "error",
    "WARN": "warning",
    "INFO": "info",
}


class StructlogEventForwarder:
    """Forwarding client that re-emits events on a structlog logger.

    Lets an application already shipping structlog output to its monitoring
    stack receive levellog events there, with ``service``, ``state`` and
    ``description`` as bound fields.
    """

    def __init__(self, logger: Any = None, event_name: str = "levellog.event") -> None:
        self._log = logger if logger is not None else structlog.get_logger("levellog.events")
        self._event_name = event_name

    def submit(self, event: Event) -> None:
        method = getattr(self._log, _METHODS.get(event.state, "info"))
        method(self._event_name, **event.to_dict())


__all__ = ["StructlogEventForwarder"]
