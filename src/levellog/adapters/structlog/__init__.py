"""structlog adapter – forward log events into structlog."""
from levellog.adapters.structlog.forwarder import StructlogEventForwarder

__all__ = ["StructlogEventForwarder"]
