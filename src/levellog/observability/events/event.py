from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Event"]


@dataclass(frozen=True)
class Event:
    """Record submitted to a forwarding client for every forwarded log call.

    ``service`` is the emitting logger's prefix, ``state`` the severity name
    (``"FATAL"`` .. ``"INFO"``) and ``description`` the formatted message.
    """

    service: str
    state: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "service": self.service,
            "state": self.state,
            "description": self.description,
        }
