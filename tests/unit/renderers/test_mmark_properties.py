"""Property-based tests for the canonical renderer.

This test module uses Hypothesis to generate random documents and checks
the layout guarantees of the rendered output.

Test Coverage:
- Property: Wrapped lines never exceed the text width unless a single token does
- Property: No output line ends with a space
- Property: Column separators line up across every row of a table
- Property: Rendering is deterministic
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import make_table, pipe_offsets

from mmarkfmt.ast import Aside, BlockQuote, Document, List, ListItem, Paragraph, Text
from mmarkfmt.options import MmarkRendererOptions
from mmarkfmt.renderers import MmarkRenderer

words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=15)
sentences = st.lists(words, min_size=1, max_size=40).map(" ".join)
cell_text = st.text(alphabet="abcdefghijklmnopqrstuvwxyz*_|", min_size=1, max_size=8)


def wrap_in(kind: str, block):
    if kind == "quote":
        return BlockQuote(children=[block])
    if kind == "aside":
        return Aside(children=[block])
    return List(children=[ListItem(children=[block])])


nestings = st.lists(st.sampled_from(["quote", "aside", "list"]), max_size=4)


@st.composite
def tables(draw):
    columns = draw(st.integers(min_value=2, max_value=5))
    row = st.lists(cell_text, min_size=columns, max_size=columns)
    header = draw(st.lists(row, min_size=1, max_size=2))
    body = draw(st.lists(row, min_size=1, max_size=4))
    footer = draw(st.lists(row, max_size=2))
    return make_table(header, body, footer or None)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestRendererProperties:
    """Property-based tests for the rendered layout using Hypothesis."""

    @given(sentences, st.integers(min_value=10, max_value=100), nestings)
    def test_width_bound(self, text, width, nesting):
        """Property: every line fits the width, or holds a single overlong token."""
        block = Paragraph(children=[Text(text)])
        for kind in reversed(nesting):
            block = wrap_in(kind, block)

        result = MmarkRenderer(MmarkRendererOptions(text_width=width)).render_to_string(Document(children=[block]))

        prefix_width = sum(2 if kind == "quote" else 3 for kind in nesting)
        for line in result.splitlines():
            content = line[prefix_width:]
            assert len(line) <= width or " " not in content

    @given(sentences, nestings)
    def test_no_trailing_whitespace(self, text, nesting):
        """Property: no line ends with a space; separator lines carry at most the bare prefix."""
        block = Paragraph(children=[Text(text)])
        for kind in reversed(nesting):
            block = wrap_in(kind, block)
        doc = Document(children=[block, Paragraph(children=[Text(text)])])

        result = MmarkRenderer(MmarkRendererOptions(text_width=20)).render_to_string(doc)

        assert result.endswith("\n")
        for line in result.split("\n"):
            assert not line.endswith(" ")

    @given(tables())
    def test_table_alignment(self, table):
        """Property: separator offsets are identical on every row of the table."""
        result = MmarkRenderer().render_to_string(Document(children=[table]))

        lines = result.splitlines()
        expected = pipe_offsets(lines[0])
        assert expected
        for line in lines:
            assert pipe_offsets(line) == expected

    @given(sentences, st.integers(min_value=10, max_value=100))
    def test_deterministic(self, text, width):
        """Property: rendering the same tree twice yields identical text."""
        doc = Document(children=[BlockQuote(children=[Paragraph(children=[Text(text)])])])
        renderer = MmarkRenderer(MmarkRendererOptions(text_width=width))
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)
