"""
levellog – Embeddable levelled logging with optional event forwarding.

Import path convention::

    from levellog import Logger, LoggerConfig
    from levellog.observability.events import Event
    from levellog.adapters.http import HttpEventForwarder
    from levellog.testing.fakes import InMemorySink, InMemoryForwarder
"""

from levellog.kernel.errors import NilClientError
from levellog.observability.events import Event
from levellog.observability.logging import (
    ForwardingClient,
    Logger,
    LoggerConfig,
    Severity,
    Sink,
    level_name,
    level_rank,
)

__version__ = "0.1.0"
__all__ = [
    "Event",
    "ForwardingClient",
    "Logger",
    "LoggerConfig",
    "NilClientError",
    "Severity",
    "Sink",
    "__version__",
    "level_name",
    "level_rank",
]
