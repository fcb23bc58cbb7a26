"""
Logging for irsource.

All modules log through loguru. Library code never configures sinks; the
CLI (or an embedding application) calls configure_logging() once.

Environment:
- IRSOURCE_LOG_LEVEL: explicit level name (DEBUG, INFO, WARNING, ...)
- IRSOURCE_DEBUG=true: shorthand for DEBUG
"""

import os
import sys

from loguru import logger as loguru_logger

DEFAULT_LEVEL = "WARNING"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get("IRSOURCE_DEBUG", "").lower() == "true"


def resolve_log_level(level: str | None = None) -> str:
    """Pick the log level from the argument, then the environment."""
    if level:
        return level.upper()
    env_level = os.environ.get("IRSOURCE_LOG_LEVEL", "").strip()
    if env_level:
        return env_level.upper()
    return "DEBUG" if is_debug_enabled() else DEFAULT_LEVEL


def configure_logging(level: str | None = None) -> str:
    """Send log output to stderr at the resolved level.

    Replaces loguru's default sink so repeated calls do not duplicate output.

    Returns:
        The level that was applied.
    """
    resolved = resolve_log_level(level)
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=resolved)
    return resolved


# Export loguru logger for direct use
logger = loguru_logger
