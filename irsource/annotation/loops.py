"""Loop body ranges of a reconstructed function.

Loop ranges are used to detect instructions moved out of their loop by
loop-invariant code motion: an instruction whose source sits deeper in the
loop nest than its block's entry was hoisted.
"""

from __future__ import annotations

from typing import Sequence

from irsource.parsing.ast_types import NodeKind, SyntaxNode, SyntaxTree, is_function_boundary
from irsource.parsing.traversal import VisitAction, traverse
from irsource.types.core import NO_LOOP, CharRange, SourcePosition


def find_loops(tree: SyntaxTree | None) -> list[CharRange]:
    """Compute the ranges of for/while/do-while loop bodies in a function.

    Ranges come out in document order, so an outer loop always precedes the
    loops nested inside it. Loops of nested functions are not included.
    """
    if tree is None:
        return []

    loops: list[CharRange] = []

    def on_enter(node: SyntaxNode, parent: SyntaxNode | None) -> VisitAction | None:
        if is_function_boundary(node):
            return VisitAction.SKIP

        if node.kind is NodeKind.FOR:
            # The init clause runs once; only what follows it repeats.
            loops.append(CharRange(node.init_clause_end(), node.range.end))
        elif node.kind in (NodeKind.WHILE, NodeKind.DO_WHILE):
            loops.append(node.range)
        return None

    traverse(tree.body, on_enter=on_enter)
    return loops


def loop_of(loops: Sequence[CharRange], position: SourcePosition | None) -> int:
    """Index of the innermost loop containing ``position``, or NO_LOOP.

    ``loops`` must be in discovery order (see find_loops); scanning it
    backwards hits the innermost loop first.
    """
    if position is None:
        return NO_LOOP

    for index in range(len(loops) - 1, -1, -1):
        if loops[index].contains(position.position):
            return index
    return NO_LOOP
