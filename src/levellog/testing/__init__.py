"""Testing support – in-memory sinks, forwarders, clocks and strategies.

Use them to assert on what a :class:`~levellog.Logger` printed and
forwarded without touching stdout or a real collector::

    sink, forwarder = InMemorySink(), InMemoryForwarder()
    log = Logger(sink, LoggerConfig(add_timestamp=False))
    log.use_forwarder(forwarder)
"""

from levellog.testing.fakes import FakeClock, InMemoryForwarder, InMemorySink
from levellog.testing.generators import (
    invalid_level_name_strategy,
    level_name_strategy,
    message_severity_strategy,
    severity_strategy,
)

__all__ = [
    "FakeClock",
    "InMemoryForwarder",
    "InMemorySink",
    "invalid_level_name_strategy",
    "level_name_strategy",
    "message_severity_strategy",
    "severity_strategy",
]
