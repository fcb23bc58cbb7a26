"""Shared constants and helpers for irsource."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


# Operation tag of the high-level instruction that opens every block.
BLOCK_ENTRY_OP = "BlockEntry"

# Low-level operations inserted for register allocation and control flow.
# They carry positions but do not make a source line live.
ARTIFICIAL_OPS: frozenset[str] = frozenset(
    {
        "gap",  # parallel move inserted by the register allocator
        "label",  # branch target
        "goto",  # unconditional branch
        "stack-check",  # interrupt check
    }
)

# Source dumps are either "(params) { body }" or "function name(params) { body }".
# Wrapping turns both into a single parenthesized function expression.
FUNCTION_PREFIX = "(function "
EXPRESSION_PREFIX = "("
WRAP_SUFFIX = ")"

# Grammar used to re-parse source dumps.
SOURCE_LANGUAGE = "javascript"
