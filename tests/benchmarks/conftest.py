"""conftest.py for benchmarks.

Provides loggers wired to in-memory collaborators so that benchmarks measure
rendering and gating cost, not I/O.
"""

from __future__ import annotations

import pytest

from levellog import Logger, LoggerConfig
from levellog.testing import FakeClock, InMemoryForwarder, InMemorySink


class _NullSink:
    def write(self, text: str) -> int:
        return len(text)


class _NullForwarder:
    def submit(self, event: object) -> None:
        pass


@pytest.fixture()
def null_logger() -> Logger:
    """Logger printing everything with timestamps into a discarding sink."""
    return Logger(_NullSink(), LoggerConfig(prefix="bench", log_level="ALL"), clock=FakeClock())


@pytest.fixture()
def forwarding_logger() -> Logger:
    """Silent console, forwarder attached: measures the forwarding path alone."""
    logger = Logger(_NullSink(), LoggerConfig(prefix="bench", log_level="OFF"))
    logger.use_forwarder(_NullForwarder())
    return logger


@pytest.fixture()
def recording_logger() -> tuple[Logger, InMemorySink, InMemoryForwarder]:
    sink, forwarder = InMemorySink(), InMemoryForwarder()
    logger = Logger(sink, LoggerConfig(prefix="bench", add_timestamp=False))
    logger.use_forwarder(forwarder)
    return logger, sink, forwarder
