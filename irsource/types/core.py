"""
Core value types for source annotation.

These are the small immutable records passed between the reconstructor,
the range/loop queries and the annotator: character ranges, IR source
positions, per-line flags and display ranges handed to the viewer.
"""

from dataclasses import dataclass
from enum import IntFlag

# Loop index returned when a position is not inside any loop body.
NO_LOOP = -1


class LineFlag(IntFlag):
    """Per-line annotation bits.

    Every line starts as DEAD. LIVE and LICM are OR-ed in independently, so
    a line can carry both.
    """

    DEAD = 1
    LIVE = 2
    LICM = 4


@dataclass(frozen=True)
class CharRange:
    """Half-open interval ``[start, end)`` of character offsets in a source."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("end must be >= start")

    @property
    def length(self) -> int:
        """Number of characters covered by this range."""
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        """Check if an offset falls within this range (end exclusive)."""
        return self.start <= offset < self.end

    def encloses(self, other: "CharRange") -> bool:
        """Check if another range lies entirely within this one."""
        return self.start <= other.start and other.end <= self.end


@dataclass(frozen=True)
class SourcePosition:
    """An absolute character offset into the source of one inlined function."""

    inline_id: int
    position: int


@dataclass(frozen=True)
class DisplayRange:
    """A source line as handed to the viewer.

    ``highlight`` is the ``(start_column, end_column)`` pair of the enclosing
    syntax node when that node fits on this line or runs into the next one.
    ``column`` is the column of the position itself, used for the caret.
    Both are None when no syntax information was available.
    """

    text: str
    highlight: tuple[int, int] | None = None
    column: int | None = None
