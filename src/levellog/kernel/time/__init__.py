"""Kernel time – Clock port + implementations."""
from levellog.kernel.time.clock import Clock, FrozenClock, SystemClock, rfc3339

__all__ = ["Clock", "FrozenClock", "SystemClock", "rfc3339"]
