"""Smallest syntax node enclosing a source offset."""

from __future__ import annotations

from irsource.parsing.ast_types import SyntaxNode, SyntaxTree, is_function_boundary
from irsource.parsing.traversal import VisitAction, traverse
from irsource.types.core import CharRange


def range_of(tree: SyntaxTree | None, offset: int) -> CharRange | None:
    """Range of the deepest node of ``tree`` that contains ``offset``.

    Subtrees that do not contain the offset are pruned, and nested functions
    are never entered. A nested function that contains the offset is still
    left normally, so positions inside it resolve to the function itself.

    Returns:
        The node's range, or None if there is no tree or no node contains
        the offset.
    """
    if tree is None:
        return None

    found: CharRange | None = None

    def on_enter(node: SyntaxNode, parent: SyntaxNode | None) -> VisitAction | None:
        if is_function_boundary(node):
            return VisitAction.SKIP
        if not node.range.contains(offset):
            return VisitAction.SKIP
        return None

    def on_leave(node: SyntaxNode, parent: SyntaxNode | None) -> VisitAction | None:
        nonlocal found
        node_range = node.range
        if node_range.contains(offset):
            # Children leave before their parent: the first hit is the deepest.
            found = node_range
            return VisitAction.BREAK
        return None

    traverse(tree.body, on_enter=on_enter, on_leave=on_leave)
    return found
