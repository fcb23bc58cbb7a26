"""Narrow view of a reconstructed syntax tree.

The annotator only needs to know, for each node, what kind of construct it
is, which characters it covers, and (for ``for`` loops) where the init
clause ends. ``SyntaxNode`` exposes exactly that over a tree-sitter node,
with ranges already converted to character offsets into the original,
unwrapped source dump.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Callable, Iterator

from irsource.types.core import CharRange

if TYPE_CHECKING:
    from tree_sitter import Node


class NodeKind(StrEnum):
    """Construct kinds the annotator distinguishes."""

    FUNCTION = "function"
    FOR = "for"
    WHILE = "while"
    DO_WHILE = "do_while"
    OTHER = "other"


# tree-sitter-javascript node types -> NodeKind. "function" is the name of
# function expressions in grammars older than 0.21.
_TS_KINDS: dict[str, NodeKind] = {
    "function": NodeKind.FUNCTION,
    "function_expression": NodeKind.FUNCTION,
    "function_declaration": NodeKind.FUNCTION,
    "generator_function": NodeKind.FUNCTION,
    "generator_function_declaration": NodeKind.FUNCTION,
    "arrow_function": NodeKind.FUNCTION,
    "method_definition": NodeKind.FUNCTION,
    "for_statement": NodeKind.FOR,
    "while_statement": NodeKind.WHILE,
    "do_statement": NodeKind.DO_WHILE,
}


def kind_of_type(node_type: str) -> NodeKind:
    """Map a tree-sitter node type to a NodeKind."""
    return _TS_KINDS.get(node_type, NodeKind.OTHER)


def is_function_boundary(node: SyntaxNode) -> bool:
    """True for nodes that start a nested function.

    Loops and positions inside a nested function never belong to the
    enclosing function.
    """
    return node.kind is NodeKind.FUNCTION


class SyntaxNode:
    """A syntax node with character ranges relative to the unwrapped source."""

    __slots__ = ("_node", "_to_range")

    def __init__(self, node: Node, to_range: Callable[[int, int], CharRange]) -> None:
        self._node = node
        self._to_range = to_range

    @property
    def kind(self) -> NodeKind:
        return kind_of_type(self._node.type)

    @property
    def type(self) -> str:
        """Raw parser node type, for debugging."""
        return self._node.type

    @property
    def range(self) -> CharRange:
        return self._to_range(self._node.start_byte, self._node.end_byte)

    @property
    def children(self) -> Iterator[SyntaxNode]:
        """Named children in source order (punctuation and keywords are skipped)."""
        for child in self._node.named_children:
            yield SyntaxNode(child, self._to_range)

    def init_clause_end(self) -> int:
        """Offset just past the init clause of a ``for`` statement.

        A loop without an init clause (``for (;;)``) ends its init clause at
        the opening parenthesis.
        """
        init = self._node.child_by_field_name("initializer")
        if init is not None:
            return self._to_range(init.start_byte, init.end_byte).end
        for child in self._node.children:
            if child.type == "(":
                return self._to_range(child.start_byte, child.end_byte).end
        return self.range.start

    def __repr__(self) -> str:
        r = self.range
        return f"SyntaxNode({self.type}, {r.start}..{r.end})"


@dataclass(frozen=True)
class SyntaxTree:
    """Body of one reconstructed function.

    ``body`` is the function's block statement; ``text`` is the source as it
    was fed to the parser, without the wrapping prefix and suffix.
    """

    source_id: int
    body: SyntaxNode
    text: str
