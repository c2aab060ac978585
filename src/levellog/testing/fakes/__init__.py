"""Testing fakes – in-memory doubles for logger collaborators."""
from levellog.kernel.time import FrozenClock
from levellog.testing.fakes.clock import FakeClock
from levellog.testing.fakes.forwarder import InMemoryForwarder
from levellog.testing.fakes.sink import InMemorySink

__all__ = ["FakeClock", "FrozenClock", "InMemoryForwarder", "InMemorySink"]
