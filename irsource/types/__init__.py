"""
irsource type definitions.

This module exports the value types and error types shared by the parsing,
annotation and CLI layers.
"""

# Core types
from .core import NO_LOOP, CharRange, DisplayRange, LineFlag, SourcePosition

# Error types
from .errors import (
    ConfigurationError,
    DumpFormatError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    IRSourceError,
    MalformedBlockError,
)

__all__ = [
    # Core types
    "NO_LOOP",
    "CharRange",
    "DisplayRange",
    "LineFlag",
    "SourcePosition",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "ErrorContext",
    "IRSourceError",
    "ConfigurationError",
    "DumpFormatError",
    "MalformedBlockError",
]
