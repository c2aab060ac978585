"""Observability – forwarded events."""
from levellog.observability.events.event import Event

__all__ = ["Event"]
