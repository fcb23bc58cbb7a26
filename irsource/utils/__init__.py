"""
irsource utility modules.

- Logging (loguru, environment-driven level)
- Serialization of results for JSON output
"""

# Logger
from .logger import configure_logging, is_debug_enabled, logger, resolve_log_level

# Serialization
from .serialization import serialize_to_primitives

__all__ = [
    # Logger
    "configure_logging",
    "is_debug_enabled",
    "logger",
    "resolve_log_level",
    # Serialization
    "serialize_to_primitives",
]
