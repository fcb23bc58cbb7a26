"""Filter for artificial low-level instructions."""

from __future__ import annotations

from typing import Iterable, Iterator

from irsource.constants import ARTIFICIAL_OPS
from irsource.ir.model import Instruction


def is_interesting_op(instr: Instruction, artificial_ops: frozenset[str] = ARTIFICIAL_OPS) -> bool:
    """True unless the instruction is register-allocator or control-flow bookkeeping.

    Gap moves, labels, gotos and stack checks carry positions, but emitting
    them does not make a source line live.
    """
    return instr.op not in artificial_ops


def interesting(
    instructions: Iterable[Instruction],
    artificial_ops: frozenset[str] = ARTIFICIAL_OPS,
) -> Iterator[Instruction]:
    """Yield the instructions that take part in source annotation."""
    return (instr for instr in instructions if is_interesting_op(instr, artificial_ops))
