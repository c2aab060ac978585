"""Observability – Sink and ForwardingClient protocols."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from levellog.observability.events import Event


@runtime_checkable
class Sink(Protocol):
    """Anything accepting a fully rendered line in one ``write`` call.

    Text streams such as ``sys.stdout``, ``io.StringIO`` and open files all
    qualify. Flushing and closing remain the owner's responsibility.
    """

    def write(self, text: str, /) -> object: ...


@runtime_checkable
class ForwardingClient(Protocol):
    """External collector receiving forwarded events, fire-and-forget."""

    def submit(self, event: Event) -> None: ...


__all__ = ["ForwardingClient", "Sink"]
