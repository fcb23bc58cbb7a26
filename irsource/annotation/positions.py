"""Offset <-> line/column conversion and display ranges.

Offsets are absolute character offsets into a source whose lines were
joined with single newlines. An offset pointing at a line's newline
resolves to that line, one column past its last character.
"""

from __future__ import annotations

from typing import Sequence

from irsource.annotation.locator import range_of
from irsource.parsing.ast_types import SyntaxTree
from irsource.types.core import DisplayRange


def _resolve(lines: Sequence[str], offset: int) -> tuple[int, int]:
    line, ch = 0, offset
    while line < len(lines) and ch > len(lines[line]):
        ch -= len(lines[line]) + 1
        line += 1
    return line, ch


def line_of(lines: Sequence[str], offset: int) -> int:
    """Zero-based line of ``offset``; ``len(lines)`` if it is past the end."""
    return _resolve(lines, offset)[0]


def column_of(lines: Sequence[str], offset: int) -> int:
    """Column of ``offset`` within the line returned by line_of."""
    return _resolve(lines, offset)[1]


def offset_of(lines: Sequence[str], line: int, column: int) -> int:
    """Absolute offset of ``(line, column)``; the inverse of line_of/column_of."""
    return sum(len(text) + 1 for text in lines[:line]) + column


def line_text(lines: Sequence[str], offset: int) -> str | None:
    """Text of the line containing ``offset``, or None past the end of the source."""
    line = line_of(lines, offset)
    return lines[line] if line < len(lines) else None


def display_range(
    lines: Sequence[str],
    tree: SyntaxTree | None,
    offset: int,
) -> DisplayRange | None:
    """Line of ``offset`` with the enclosing syntax node highlighted.

    The node is highlighted only if it starts on the offset's line and ends
    on that line or the next one; otherwise just the caret column is kept.
    Without a syntax tree only the line text is returned.

    Returns:
        The display range, or None if the offset is past the end of the source.
    """
    line_no, column = _resolve(lines, offset)
    if line_no >= len(lines):
        return None
    text = lines[line_no]

    node_range = range_of(tree, offset)
    if node_range is None:
        return DisplayRange(text=text)

    start_line, start_column = _resolve(lines, node_range.start)
    end_line, end_column = _resolve(lines, node_range.end)

    highlight = None
    if start_line == line_no and end_line in (line_no, line_no + 1):
        highlight = (start_column, end_column)

    return DisplayRange(text=text, highlight=highlight, column=column)
