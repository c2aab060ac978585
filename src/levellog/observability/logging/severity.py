"""Observability – Severity levels and name/rank conversion.

Ranks are ordered from quietest to noisiest; a logger configured with
threshold *r* prints every message whose rank is ``<= r``.
"""
from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType


class Severity(IntEnum):
    """Ordered log severities.

    ``OFF`` and ``ALL`` only make sense as thresholds; the six levels in
    between are the ones messages are emitted at.
    """

    OFF = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6
    ALL = 7

    @classmethod
    def parse(cls, name: str) -> Severity | None:
        """Return the severity called *name* (any case) or ``None``."""
        rank = level_rank(name)
        if rank == INVALID_RANK:
            return None
        return cls(rank)


INVALID_RANK = -1
"""Rank returned for unrecognised level names; no message passes it."""

_NAMES: MappingProxyType[int, str] = MappingProxyType({s.value: s.name for s in Severity})
_RANKS: MappingProxyType[str, int] = MappingProxyType({s.name: s.value for s in Severity})

# Levels that are also submitted to an attached forwarding client.
FORWARDED: frozenset[Severity] = frozenset(
    {Severity.FATAL, Severity.ERROR, Severity.WARN, Severity.INFO}
)


def level_name(rank: int) -> str:
    """Return the human readable name of *rank*, ``"ALL"`` when out of range."""
    return _NAMES.get(rank, Severity.ALL.name)


def level_rank(name: object) -> int:
    """Return the rank for *name* (case-insensitive), or ``INVALID_RANK``.

    Anything that is not a string, such as ``None`` from an empty YAML value,
    is invalid.
    """
    if not isinstance(name, str):
        return INVALID_RANK
    return _RANKS.get(name.upper(), INVALID_RANK)


def is_valid_level(name: object) -> bool:
    return level_rank(name) != INVALID_RANK


__all__ = [
    "FORWARDED",
    "INVALID_RANK",
    "Severity",
    "is_valid_level",
    "level_name",
    "level_rank",
]
