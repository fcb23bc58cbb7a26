"""Dict-backed PositionLookup."""

from __future__ import annotations

from dataclasses import dataclass, field

from irsource.types.core import SourcePosition


@dataclass
class IRInfo:
    """Position tables recorded by the decoder for one method.

    ``lir2hir`` maps low-level instruction ids to the high-level instruction
    they were lowered from; ``hir2pos`` maps high-level ids to positions.
    """

    lir2hir: dict[str, str] = field(default_factory=dict)
    hir2pos: dict[str, SourcePosition] = field(default_factory=dict)

    def correlate(self, lir_id: str) -> str | None:
        return self.lir2hir.get(lir_id)

    def position_of(self, hir_id: str) -> SourcePosition | None:
        return self.hir2pos.get(hir_id)
