"""HTTP adapter – forward log events to a collector over HTTP."""
from levellog.adapters.http.forwarder import HttpEventForwarder

__all__ = ["HttpEventForwarder"]
