"""Minimal method/block/instruction model.

A Method owns the sources of every function inlined into it. The annotator
fills in ``InlinedFunction.annotations`` and ``Method.src_mapping``; nothing
else here is mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from irsource.types.core import DisplayRange, LineFlag


@dataclass(frozen=True)
class Source:
    """Dumped source of one function, as an ordered list of lines."""

    id: int
    lines: tuple[str, ...]

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass
class InlinedFunction:
    """A function body inlined into a method (index 0 is the method itself)."""

    source: Source
    annotations: list[LineFlag] = field(default_factory=list)


@dataclass(frozen=True)
class Instruction:
    """An IR instruction: an opaque id plus its operation tag."""

    id: str
    op: str


@dataclass
class Block:
    """A basic block with its high-level and low-level instructions.

    ``lir`` is None when the low-level IR was not dumped for this block.
    """

    name: str
    hir: list[Instruction] = field(default_factory=list)
    lir: list[Instruction] | None = None


@dataclass
class Method:
    """A compiled method and the functions inlined into it."""

    name: str
    sources: list[Source] = field(default_factory=list)
    inlined: list[InlinedFunction] = field(default_factory=list)
    src_mapping: dict[str, DisplayRange] = field(default_factory=dict)

    def source_for(self, inline_id: int) -> Source:
        """Source of the function with the given inline id."""
        return self.inlined[inline_id].source
