#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/ast/walk.py
"""Depth-first enter/exit traversal of the AST.

The renderer is event driven: every container node is visited twice, once
when the walk enters it and once when it leaves, with its children visited
in between. Leaf nodes (no children) receive both events as well.

Examples
--------
Count the nodes of a tree:

    >>> from mmarkfmt.ast import Document, Paragraph, Text
    >>> from mmarkfmt.ast.walk import WalkStatus, walk
    >>> seen = []
    >>> def visit(node, entering):
    ...     if entering:
    ...         seen.append(type(node).__name__)
    ...     return WalkStatus.GO_TO_NEXT
    >>> walk(Document(children=[Paragraph(children=[Text("hi")])]), visit)
    <WalkStatus.GO_TO_NEXT: 'go_to_next'>
    >>> seen
    ['Document', 'Paragraph', 'Text']

"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from mmarkfmt.ast.nodes import Node


class WalkStatus(Enum):
    """Instruction returned by a visitor to steer the walk."""

    GO_TO_NEXT = "go_to_next"
    """Continue with the children (on enter) or the next node (on exit)."""

    SKIP_CHILDREN = "skip_children"
    """On enter: do not visit the children and do not send the exit event."""

    TERMINATE = "terminate"
    """Stop the whole walk."""


WalkFunc = Callable[["Node", bool], WalkStatus]


def walk(node: Node, visitor: WalkFunc) -> WalkStatus:
    """Walk ``node`` and its descendants depth-first.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk
    visitor : callable
        Called as ``visitor(node, entering)`` for every event

    Returns
    -------
    WalkStatus
        ``TERMINATE`` if the visitor stopped the walk, else ``GO_TO_NEXT``

    """
    status = visitor(node, True)
    if status is WalkStatus.TERMINATE:
        return status
    if status is WalkStatus.SKIP_CHILDREN:
        return WalkStatus.GO_TO_NEXT

    # snapshot; a visitor may detach children of the node it is visiting
    for child in list(node.children):
        if walk(child, visitor) is WalkStatus.TERMINATE:
            return WalkStatus.TERMINATE

    if visitor(node, False) is WalkStatus.TERMINATE:
        return WalkStatus.TERMINATE
    return WalkStatus.GO_TO_NEXT
