"""
Error handling for irsource.

Only structurally inconsistent input is an error here. Sources the parser
cannot read, instructions without positions and offsets past the end of a
source are expected and degrade silently; they never raise.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from irsource.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Input/IR Errors (1000-1999)
    MALFORMED_BLOCK = 1001
    INVALID_DUMP = 1002

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    component: str | None = None
    method_name: str | None = None
    block_name: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class IRSourceError(Exception):
    """Base error class for irsource."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.method_name:
            parts.append(f"   Method: {self.context.method_name}")
        if self.context.block_name:
            parts.append(f"   Block: {self.context.block_name}")
        if self.context.component:
            parts.append(f"   Component: {self.context.component}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "component": self.context.component,
                "method_name": self.context.method_name,
                "block_name": self.context.block_name,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "original_error": str(self.original_error) if self.original_error else None,
        }


class MalformedBlockError(IRSourceError):
    """A block has low-level IR but no block-entry instruction.

    This means the decoder produced inconsistent IR; the annotation pass for
    the whole method is abandoned.
    """

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_BLOCK,
            message=message,
            user_message=user_message or "Block has no entry instruction.",
            severity=ErrorSeverity.HIGH,
            context=context,
        )


class DumpFormatError(IRSourceError):
    """A method dump is missing required fields or has the wrong shape."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DUMP,
            message=message,
            user_message=user_message or "Method dump is malformed.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_error=original_error,
        )


class ConfigurationError(IRSourceError):
    """Invalid annotator configuration."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration is invalid.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
        )
