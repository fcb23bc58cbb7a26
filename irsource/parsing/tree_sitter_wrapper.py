"""Reconstruct parseable JavaScript from function source dumps.

The compiler dumps each function as ``(params) { body }`` (sometimes with
the ``function`` keyword and name still attached, and sometimes with a
trailing separator after the closing brace). Wrapping the dump in
parentheses, with a ``function`` keyword where one is missing, turns it
into a single function expression that tree-sitter can parse.

Dumps the grammar cannot read (V8 natives syntax such as ``%DebugPrint``)
come back as None: callers treat that as "no structure available".
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Sequence

from loguru import logger

from irsource.constants import (
    EXPRESSION_PREFIX,
    FUNCTION_PREFIX,
    SOURCE_LANGUAGE,
    WRAP_SUFFIX,
)
from irsource.parsing.ast_types import NodeKind, SyntaxNode, SyntaxTree, kind_of_type
from irsource.types.core import CharRange

if TYPE_CHECKING:
    from tree_sitter import Node, Parser


_HAS_FUNCTION_KEYWORD = re.compile(r"^\s*(async\s+)?function\b")


def prepare_source(lines: Sequence[str]) -> tuple[str, str]:
    """Join dump lines and pick the wrapping prefix.

    Everything after the last ``}`` is dropped. A dump without any ``}``
    becomes empty and will not parse.

    Returns:
        Tuple of (trimmed source text, prefix to prepend).
    """
    text = "\n".join(lines)
    text = text[: text.rfind("}") + 1]
    prefix = EXPRESSION_PREFIX if _HAS_FUNCTION_KEYWORD.match(text) else FUNCTION_PREFIX
    return text, prefix


def _char_offsets(text: str, encoded: bytes) -> Callable[[int], int]:
    """Byte offset -> character offset converter for ``text``."""
    if len(encoded) == len(text):
        return lambda b: b

    table: list[int] = []
    for index, ch in enumerate(text):
        table.extend([index] * len(ch.encode("utf-8")))
    table.append(len(text))
    return lambda b: table[b]


class SourceReconstructor:
    """Parses function source dumps into SyntaxTrees.

    The tree-sitter parser is created on first use. If the grammar cannot be
    loaded every source is reported as unparsable.
    """

    def __init__(self, language: str = SOURCE_LANGUAGE) -> None:
        self._language = language
        self._parser: Parser | None = None
        self._available: bool | None = None

    def _ensure_parser(self) -> bool:
        """Lazily initialize the parser.

        Returns:
            True if the parser is available.
        """
        if self._available is not None:
            return self._available

        try:
            import tree_sitter_language_pack as tslp
            from tree_sitter import Parser

            self._parser = Parser(tslp.get_language(self._language))
            self._available = True
            logger.debug(f"Initialized tree-sitter parser for {self._language}")
        except Exception as e:
            logger.warning(f"Failed to initialize tree-sitter for {self._language}: {e}")
            self._available = False

        return self._available

    def reconstruct(self, lines: Sequence[str], source_id: int = 0) -> SyntaxTree | None:
        """Parse one function dump.

        Args:
            lines: Source lines of the function, without line terminators.
            source_id: Id of the source, carried into the tree for logging.

        Returns:
            The function body's tree with ranges relative to the joined
            ``lines``, or None if the dump cannot be parsed.
        """
        if not self._ensure_parser():
            return None

        text, prefix = prepare_source(lines)
        wrapped = prefix + text + WRAP_SUFFIX
        encoded = wrapped.encode("utf-8")

        try:
            tree = self._parser.parse(encoded)
        except Exception as e:
            logger.debug(f"Parser failed on source {source_id}: {e}")
            return None

        if tree.root_node.has_error:
            logger.debug(f"Source {source_id} is not valid JavaScript, skipping structure")
            return None

        function = _find_wrapped_function(tree.root_node)
        body = function.child_by_field_name("body") if function is not None else None
        if body is None:
            logger.debug(f"Source {source_id} did not reconstruct into a function")
            return None

        to_char = _char_offsets(wrapped, encoded)
        shift = len(prefix)

        def to_range(start_byte: int, end_byte: int) -> CharRange:
            return CharRange(to_char(start_byte) - shift, to_char(end_byte) - shift)

        return SyntaxTree(source_id=source_id, body=SyntaxNode(body, to_range), text=text)


def _find_wrapped_function(root: Node) -> Node | None:
    """Find the function expression at the top of ``(function ...)``.

    The chain is program > expression_statement > parenthesized_expression >
    function expression; only the first named child is followed at each step.
    """
    node: Node | None = root
    while node is not None:
        if node.is_named and kind_of_type(node.type) is NodeKind.FUNCTION:
            return node
        children = node.named_children
        node = children[0] if children else None
    return None
