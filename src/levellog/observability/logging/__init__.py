"""Observability – levelled logger, its configuration and collaborators."""
from levellog.observability.logging.config import LoggerConfig
from levellog.observability.logging.logger import Logger
from levellog.observability.logging.protocol import ForwardingClient, Sink
from levellog.observability.logging.severity import (
    FORWARDED,
    INVALID_RANK,
    Severity,
    is_valid_level,
    level_name,
    level_rank,
)

__all__ = [
    "FORWARDED",
    "INVALID_RANK",
    "ForwardingClient",
    "Logger",
    "LoggerConfig",
    "Severity",
    "Sink",
    "is_valid_level",
    "level_name",
    "level_rank",
]
