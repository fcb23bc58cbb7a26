"""Position lookup protocol.

Defines the PositionLookup Protocol the annotator uses to get from a
low-level instruction to the source position of the high-level
instruction it was generated from.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from irsource.types.core import SourcePosition


@runtime_checkable
class PositionLookup(Protocol):
    """Correspondence between IR layers and source positions.

    Both lookups return None when the decoder recorded nothing for the id;
    callers skip such instructions.
    """

    def correlate(self, lir_id: str) -> str | None:
        """High-level instruction id a low-level instruction came from."""
        ...

    def position_of(self, hir_id: str) -> SourcePosition | None:
        """Source position attached to a high-level instruction."""
        ...
