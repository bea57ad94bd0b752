#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_walk.py
"""Unit tests for the depth-first enter/exit walk."""

import pytest

from mmarkfmt.ast import Document, Emph, Paragraph, Text, WalkStatus, walk


def sample_tree() -> Document:
    return Document(
        children=[
            Paragraph(children=[Text("a"), Emph(children=[Text("b")])]),
            Paragraph(children=[Text("c")]),
        ]
    )


def label(node) -> str:
    return getattr(node, "literal", "") or type(node).__name__


@pytest.mark.unit
class TestWalk:
    """Tests for walk()."""

    def test_event_order(self):
        events = []

        def visit(node, entering):
            events.append(("+" if entering else "-") + label(node))
            return WalkStatus.GO_TO_NEXT

        assert walk(sample_tree(), visit) is WalkStatus.GO_TO_NEXT
        assert events == [
            "+Document",
            "+Paragraph",
            "+a",
            "-a",
            "+Emph",
            "+b",
            "-b",
            "-Emph",
            "-Paragraph",
            "+Paragraph",
            "+c",
            "-c",
            "-Paragraph",
            "-Document",
        ]

    def test_skip_children_suppresses_exit(self):
        events = []

        def visit(node, entering):
            events.append(("+" if entering else "-") + label(node))
            if isinstance(node, Emph):
                return WalkStatus.SKIP_CHILDREN
            return WalkStatus.GO_TO_NEXT

        walk(sample_tree(), visit)
        assert "+Emph" in events
        assert "+b" not in events
        assert "-Emph" not in events
        assert "+c" in events

    def test_terminate_stops_walk(self):
        events = []

        def visit(node, entering):
            events.append(("+" if entering else "-") + label(node))
            if label(node) == "b":
                return WalkStatus.TERMINATE
            return WalkStatus.GO_TO_NEXT

        assert walk(sample_tree(), visit) is WalkStatus.TERMINATE
        assert events[-1] == "+b"
        assert "+c" not in events

    def test_terminate_on_exit(self):
        def visit(node, entering):
            if not entering and isinstance(node, Paragraph):
                return WalkStatus.TERMINATE
            return WalkStatus.GO_TO_NEXT

        assert walk(sample_tree(), visit) is WalkStatus.TERMINATE

    def test_children_detached_during_visit(self):
        """Test the walk tolerates a visitor removing children of the current node."""
        doc = sample_tree()
        seen = []

        def visit(node, entering):
            if entering:
                seen.append(label(node))
                if isinstance(node, Document):
                    node.children.pop()
            return WalkStatus.GO_TO_NEXT

        walk(doc, visit)
        assert "c" not in seen
        assert len(doc.children) == 1
