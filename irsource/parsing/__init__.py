"""Parsing of dumped function sources into syntax trees."""

from .ast_types import NodeKind, SyntaxNode, SyntaxTree, is_function_boundary
from .traversal import VisitAction, traverse
from .tree_sitter_wrapper import SourceReconstructor, prepare_source

__all__ = [
    "NodeKind",
    "SourceReconstructor",
    "SyntaxNode",
    "SyntaxTree",
    "VisitAction",
    "is_function_boundary",
    "prepare_source",
    "traverse",
]
