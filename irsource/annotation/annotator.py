"""Annotate method sources with information derived from IR.

For every source line of every function inlined into a method, the
annotator decides whether any surviving low-level instruction came from
that line (LIVE), and whether such an instruction was hoisted out of the
loop it sits in (LICM). Lines nothing maps to stay DEAD. Along the way it
fills ``Method.src_mapping`` with the display range of each high-level
instruction that low-level code was emitted for.

Usage:
    annotator = SourceAnnotator()
    summary = annotator.annotate(method, blocks, ir_info)
    method.inlined[0].annotations  # [LineFlag.DEAD, LineFlag.DEAD | LineFlag.LIVE, ...]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from loguru import logger

from irsource.annotation import positions
from irsource.annotation.filters import interesting
from irsource.annotation.loops import find_loops, loop_of
from irsource.config import AnnotatorConfig
from irsource.ir.model import Block, Instruction, Method, Source
from irsource.ir.protocols import PositionLookup
from irsource.parsing.ast_types import SyntaxTree
from irsource.parsing.tree_sitter_wrapper import SourceReconstructor
from irsource.types.core import NO_LOOP, CharRange, DisplayRange, LineFlag, SourcePosition
from irsource.types.errors import ErrorContext, MalformedBlockError


@dataclass(frozen=True)
class AnnotationSummary:
    """Counts describing one finished annotation pass."""

    method_name: str
    blocks: int
    mapped_instructions: int
    live_lines: int
    licm_lines: int
    unparsable_sources: int


class AnnotationPass:
    """Syntax trees and loop tables of one method, built for a single pass.

    Every source referenced by the method's inlined functions is parsed
    once. Sources that fail to parse get no tree and an empty loop table.
    """

    def __init__(self, method: Method, reconstructor: SourceReconstructor) -> None:
        self.method = method

        sources: dict[int, Source] = {}
        for function in method.inlined:
            sources.setdefault(function.source.id, function.source)
        self.sources = sources

        self.trees: dict[int, SyntaxTree | None] = {
            source_id: reconstructor.reconstruct(source.lines, source_id)
            for source_id, source in sources.items()
        }
        self.loops: dict[int, list[CharRange]] = {
            source_id: find_loops(tree) for source_id, tree in self.trees.items()
        }

        for source_id, loops in self.loops.items():
            logger.debug(f"Source {source_id}: {len(loops)} loop(s)")

    @property
    def unparsable_sources(self) -> list[int]:
        return [source_id for source_id, tree in self.trees.items() if tree is None]

    def source_id(self, position: SourcePosition) -> int:
        return self.method.source_for(position.inline_id).id

    def lines_of(self, position: SourcePosition) -> tuple[str, ...]:
        return self.sources[self.source_id(position)].lines

    def loop_of(self, position: SourcePosition | None) -> int:
        """Innermost loop index containing ``position`` in its own source."""
        if position is None:
            return NO_LOOP
        return loop_of(self.loops[self.source_id(position)], position)

    def loops_for(self, position: SourcePosition) -> list[CharRange]:
        return self.loops[self.source_id(position)]

    def line_of(self, position: SourcePosition) -> int:
        return positions.line_of(self.lines_of(position), position.position)

    def column_of(self, position: SourcePosition) -> int:
        return positions.column_of(self.lines_of(position), position.position)

    def line_text(self, position: SourcePosition) -> str | None:
        return positions.line_text(self.lines_of(position), position.position)

    def display_range(self, position: SourcePosition) -> DisplayRange | None:
        source_id = self.source_id(position)
        return positions.display_range(
            self.sources[source_id].lines,
            self.trees[source_id],
            position.position,
        )


class SourceAnnotator:
    """Classifies source lines of a method as dead, live or hoisted.

    The annotator itself is stateless between passes; every call to
    ``annotate`` builds its trees and loop tables from scratch.
    """

    def __init__(
        self,
        config: AnnotatorConfig | None = None,
        reconstructor: SourceReconstructor | None = None,
    ) -> None:
        self._config = config or AnnotatorConfig()
        self._reconstructor = reconstructor or SourceReconstructor()

    @property
    def config(self) -> AnnotatorConfig:
        return self._config

    def prepare(self, method: Method) -> AnnotationPass:
        """Parse the method's sources and compute their loop tables."""
        return AnnotationPass(method, self._reconstructor)

    def annotate(
        self,
        method: Method,
        blocks: Mapping[str, Block],
        ir_info: PositionLookup,
    ) -> AnnotationSummary:
        """Attach per-line flags and the source mapping to ``method``.

        Args:
            method: Method whose inlined functions get ``annotations``.
            blocks: Blocks of the method, by name.
            ir_info: Low-level to high-level correlation and positions.

        Returns:
            Summary counts for the pass.

        Raises:
            MalformedBlockError: If a block with low-level IR has no
                block-entry instruction.
        """
        state = self.prepare(method)

        annotations = []
        for function in method.inlined:
            function.annotations = [LineFlag.DEAD] * function.source.line_count
            annotations.append(function.annotations)

        mapping: dict[str, DisplayRange] = {}
        method.src_mapping = mapping

        block_loops: list[tuple[Block, int, int | None]] = []
        for block in blocks.values():
            if block.lir is None:
                continue
            entry = self._block_entry(method, block)
            entry_position = ir_info.position_of(entry.id)
            entry_source = state.source_id(entry_position) if entry_position is not None else None
            block_loops.append((block, state.loop_of(entry_position), entry_source))

            previous: SourcePosition | None = None
            for instr in self._interesting(block):
                hir_id = ir_info.correlate(instr.id)
                if hir_id is None:
                    continue

                position = ir_info.position_of(hir_id)
                if position is None or position == previous:
                    continue

                display = state.display_range(position)
                if display is not None:
                    mapping[hir_id] = display
                previous = position

        # Second pass: mark lines from the instructions generated for them.
        for block, block_loop, entry_source in block_loops:
            for instr in self._interesting(block):
                hir_id = ir_info.correlate(instr.id)
                if hir_id is None:
                    continue

                position = ir_info.position_of(hir_id)
                if position is None:
                    continue

                line = state.line_of(position)
                flags = annotations[position.inline_id]
                if line >= len(flags):
                    logger.debug(f"Position {position} is past the end of its source")
                    continue

                instr_loop = state.loop_of(position)
                if self._config.hoist_policy.is_hoisted(
                    state.loops_for(position),
                    block_loop,
                    instr_loop,
                    same_source=entry_source == state.source_id(position),
                ):
                    flags[line] |= LineFlag.LICM
                else:
                    flags[line] |= LineFlag.LIVE

        summary = AnnotationSummary(
            method_name=method.name,
            blocks=len(block_loops),
            mapped_instructions=len(mapping),
            live_lines=sum(1 for flags in annotations for f in flags if f & LineFlag.LIVE),
            licm_lines=sum(1 for flags in annotations for f in flags if f & LineFlag.LICM),
            unparsable_sources=len(state.unparsable_sources),
        )
        logger.debug(
            f"Annotated {summary.method_name}: {summary.blocks} block(s), "
            f"{summary.mapped_instructions} mapped, {summary.live_lines} live, "
            f"{summary.licm_lines} LICM"
        )
        return summary

    def _interesting(self, block: Block) -> list[Instruction]:
        return list(interesting(block.lir or [], self._config.artificial_ops))

    def _block_entry(self, method: Method, block: Block) -> Instruction:
        for instr in block.hir:
            if instr.op == self._config.block_entry_op:
                return instr
        raise MalformedBlockError(
            f"Block {block.name} of {method.name} has no {self._config.block_entry_op} instruction",
            context=ErrorContext(
                operation="annotate",
                component="annotator",
                method_name=method.name,
                block_name=block.name,
            ),
        )


def annotate(
    method: Method,
    blocks: Mapping[str, Block],
    ir_info: PositionLookup,
    config: AnnotatorConfig | None = None,
) -> AnnotationSummary:
    """Annotate ``method`` with a fresh SourceAnnotator."""
    return SourceAnnotator(config=config).annotate(method, blocks, ir_info)
