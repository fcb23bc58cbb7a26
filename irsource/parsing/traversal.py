"""Depth-first traversal with enter/leave callbacks.

Callbacks steer the walk through their return value:

- ``VisitAction.CONTINUE`` (or None): keep going.
- ``VisitAction.SKIP`` from ``on_enter``: do not descend into this node's
  children. The node's own ``on_leave`` still fires.
- ``VisitAction.BREAK`` from either callback: stop the whole traversal.

Leave events fire for children before their parent, so the first leave
event that matches some predicate is the deepest matching node.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from irsource.parsing.ast_types import SyntaxNode


class VisitAction(Enum):
    CONTINUE = "continue"
    SKIP = "skip"
    BREAK = "break"


Visitor = Callable[[SyntaxNode, Optional[SyntaxNode]], Optional[VisitAction]]


def traverse(
    root: SyntaxNode,
    on_enter: Visitor | None = None,
    on_leave: Visitor | None = None,
) -> bool:
    """Walk the tree rooted at ``root``.

    Args:
        root: Node to start from.
        on_enter: Called with (node, parent) before the node's children.
        on_leave: Called with (node, parent) after the node's children.

    Returns:
        False if a callback aborted the walk with BREAK, True otherwise.
    """
    # Explicit stack so deeply nested sources cannot hit the recursion limit.
    # Entries are (node, parent, entered).
    stack: list[tuple[SyntaxNode, SyntaxNode | None, bool]] = [(root, None, False)]

    while stack:
        node, parent, entered = stack.pop()

        if entered:
            if on_leave is not None and on_leave(node, parent) is VisitAction.BREAK:
                return False
            continue

        action = on_enter(node, parent) if on_enter is not None else None
        if action is VisitAction.BREAK:
            return False

        stack.append((node, parent, True))
        if action is VisitAction.SKIP:
            continue

        children = list(node.children)
        for child in reversed(children):
            stack.append((child, node, False))

    return True
