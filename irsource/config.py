"""Annotator configuration.

Settings can be passed explicitly or read from the environment:

- ``IRSOURCE_HOIST_POLICY``: ``index`` (default) or ``containment``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum

from irsource.constants import ARTIFICIAL_OPS, BLOCK_ENTRY_OP
from irsource.types.core import NO_LOOP, CharRange
from irsource.types.errors import ConfigurationError, ErrorContext


class HoistPolicy(StrEnum):
    """How to decide that an instruction was hoisted out of its loop.

    DISCOVERY_INDEX compares loop discovery indices: the instruction was
    hoisted if its loop was discovered after the block's loop. Inner loops
    are always discovered after the loops around them, but a loop nested in
    an earlier sibling also has a smaller index than a later sibling, so
    the comparison is only an approximation of nesting depth.

    CONTAINMENT compares the loop ranges themselves: the instruction was
    hoisted if its loop does not enclose the block's loop.
    """

    DISCOVERY_INDEX = "index"
    CONTAINMENT = "containment"

    def is_hoisted(
        self,
        loops: list[CharRange],
        block_loop: int,
        instr_loop: int,
        same_source: bool = True,
    ) -> bool:
        """Decide whether an instruction in ``instr_loop`` was hoisted out of it.

        Args:
            loops: Loop table of the instruction's source, in discovery order.
            block_loop: Loop index of the block entry, or NO_LOOP.
            instr_loop: Loop index of the instruction, or NO_LOOP.
            same_source: Whether the block entry and the instruction come
                from the same source. Loop indices of different sources are
                still compared by DISCOVERY_INDEX; CONTAINMENT treats a loop
                of another function as never enclosing the block.
        """
        if instr_loop == NO_LOOP:
            return False
        if self is HoistPolicy.DISCOVERY_INDEX:
            return block_loop < instr_loop
        if block_loop == NO_LOOP or not same_source:
            return True
        return not loops[instr_loop].encloses(loops[block_loop])


@dataclass(frozen=True)
class AnnotatorConfig:
    """Settings for one annotation pass."""

    hoist_policy: HoistPolicy = HoistPolicy.DISCOVERY_INDEX
    block_entry_op: str = BLOCK_ENTRY_OP
    artificial_ops: frozenset[str] = ARTIFICIAL_OPS

    @classmethod
    def from_env(cls) -> AnnotatorConfig:
        """Build a config from ``IRSOURCE_*`` environment variables."""
        raw = os.environ.get("IRSOURCE_HOIST_POLICY", "").strip().lower()
        if not raw:
            return cls()
        return cls(hoist_policy=parse_hoist_policy(raw))


def parse_hoist_policy(value: str) -> HoistPolicy:
    """Parse a hoist policy name.

    Raises:
        ConfigurationError: If the name is not a known policy.
    """
    try:
        return HoistPolicy(value)
    except ValueError as e:
        choices = ", ".join(p.value for p in HoistPolicy)
        raise ConfigurationError(
            f"Unknown hoist policy '{value}' (expected one of: {choices})",
            context=ErrorContext(operation="parse_hoist_policy", component="config"),
        ) from e
