"""Testing generators – hypothesis strategies for severities and level names."""
from levellog.testing.generators.strategies import (
    invalid_level_name_strategy,
    level_name_strategy,
    message_severity_strategy,
    severity_strategy,
)

__all__ = [
    "invalid_level_name_strategy",
    "level_name_strategy",
    "message_severity_strategy",
    "severity_strategy",
]
