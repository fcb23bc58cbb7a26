"""Tests for the error types."""

from irsource.types import (
    DumpFormatError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    IRSourceError,
    MalformedBlockError,
)


class TestIRSourceError:
    def test_formatted_message(self):
        error = MalformedBlockError(
            "Block B3 of foo has no BlockEntry instruction",
            context=ErrorContext(operation="annotate", method_name="foo", block_name="B3"),
        )
        message = error.get_formatted_message()

        assert "[Error] Block has no entry instruction." in message
        assert f"Code: {ErrorCode.MALFORMED_BLOCK.value}" in message
        assert "Method: foo" in message
        assert "Block: B3" in message

    def test_to_dict(self):
        cause = ValueError("bad")
        error = DumpFormatError("missing key", original_error=cause)
        data = error.to_dict()

        assert data["name"] == "DumpFormatError"
        assert data["code"] == ErrorCode.INVALID_DUMP.value
        assert data["message"] == "missing key"
        assert data["severity"] == ErrorSeverity.MEDIUM
        assert data["original_error"] == "bad"
        assert "timestamp" in data["context"]

    def test_hierarchy(self):
        assert issubclass(MalformedBlockError, IRSourceError)
        assert issubclass(DumpFormatError, IRSourceError)
        assert MalformedBlockError("x").severity == ErrorSeverity.HIGH
