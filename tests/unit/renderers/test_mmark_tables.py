#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_mmark_tables.py
"""Unit tests for table layout and rendering.

Tests cover:
- TableLayout and TableContext bookkeeping
- The measuring pass
- Header and footer rules, padding, missing cells and escaping
- Tables nested in quotes and lists

"""

import pytest
from utils import make_rows, make_table

from mmarkfmt.ast import (
    BlockQuote,
    Document,
    List,
    ListItem,
    Paragraph,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHeader,
    TableRow,
    Text,
)
from mmarkfmt.renderers.table import TableContext, TableLayout, TableSection, measure_table


def plain_cell(cell: TableCell) -> str:
    return "".join(child.literal for child in cell.children)


@pytest.mark.unit
class TestTableLayout:
    """Tests for the column width plan."""

    def test_observe_grows_columns(self):
        layout = TableLayout()
        layout.observe(2, 3)
        assert layout.widths == [0, 0, 3]
        assert layout.columns == 3

    def test_observe_keeps_maximum(self):
        layout = TableLayout()
        layout.observe(0, 4)
        layout.observe(0, 2)
        assert layout.width(0) == 4

    def test_width_of_unknown_column(self):
        assert TableLayout(widths=[1]).width(5) == 0

    def test_pad(self):
        assert TableLayout(widths=[4]).pad(0, "ab") == "ab  "

    def test_rule(self):
        assert TableLayout(widths=[1, 2]).rule("-") == "-|--"
        assert TableLayout(widths=[3, 1]).rule("=") == "===|="


@pytest.mark.unit
class TestTableContext:
    """Tests for per-table rendering state."""

    def test_default_section_is_body(self):
        assert TableContext(layout=TableLayout()).section is TableSection.BODY

    def test_row_cells_padded_and_joined(self):
        context = TableContext(layout=TableLayout(widths=[3, 2]))
        context.start_row()
        context.add_cell("a")
        context.add_cell("bb")
        assert context.finish_row() == "a  |bb"

    def test_missing_cells_filled(self):
        context = TableContext(layout=TableLayout(widths=[1, 2, 3]))
        context.start_row()
        context.add_cell("x")
        assert context.finish_row() == "x|  |   "

    def test_start_row_resets(self):
        context = TableContext(layout=TableLayout(widths=[1]))
        context.start_row()
        context.add_cell("a")
        context.finish_row()
        context.start_row()
        assert context.column == 0
        assert context.cells == []


@pytest.mark.unit
class TestMeasureTable:
    """Tests for the measuring pass."""

    def test_widths_across_sections(self):
        table = make_table([["A", "BB"]], [["1", "22"], ["333", ""]], footer=[["", "4444"]])
        layout = measure_table(table, plain_cell)
        assert layout.widths == [3, 4]

    def test_ragged_rows(self):
        table = make_table([["A"]], [["1", "2", "3"]])
        assert measure_table(table, plain_cell).widths == [1, 1, 1]

    def test_measuring_does_not_descend_into_cells(self):
        seen = []

        def render_cell(cell):
            seen.append(cell)
            return "x"

        table = make_table([["A", "B"]], [["1", "2"]])
        measure_table(table, render_cell)
        assert len(seen) == 4


@pytest.mark.unit
class TestTableRendering:
    """Tests for rendered tables."""

    def test_two_by_two_table(self, renderer):
        doc = Document(children=[make_table([["A", "BB"]], [["1", "22"]])])
        assert renderer.render_to_string(doc) == "A|BB\n-|--\n1|22\n"

    def test_cells_padded_to_column_width(self, renderer):
        doc = Document(children=[make_table([["Name", "Value"]], [["a", "1"], ["bb", "22"]])])
        assert renderer.render_to_string(doc) == "Name|Value\n----|-----\na   |1\nbb  |22\n"

    def test_footer_rule(self, renderer):
        doc = Document(children=[make_table([["A", "BB"]], [["1", "22"]], footer=[["x", "y"]])])
        assert renderer.render_to_string(doc) == "A|BB\n-|--\n1|22\n=|==\nx|y\n"

    def test_multiple_header_rows(self, renderer):
        doc = Document(children=[make_table([["A", "B"], ["C", "D"]], [["1", "2"]])])
        assert renderer.render_to_string(doc) == "A|B\nC|D\n-|-\n1|2\n"

    def test_missing_cells(self, renderer):
        doc = Document(children=[make_table([["A", "B", "C"]], [["1"]])])
        assert renderer.render_to_string(doc) == "A|B|C\n-|-|-\n1| |\n"

    def test_pipe_in_cell_escaped(self, renderer):
        doc = Document(children=[make_table([["H"]], [["a|b"]])])
        assert renderer.render_to_string(doc) == "H\n----\na\\|b\n"

    def test_inline_markup_in_cell(self, renderer):
        row = TableRow(children=[TableCell(children=[Strong(children=[Text("x")])])])
        table = Table(children=[TableHeader(children=make_rows([["Head"]])), TableBody(children=[row])])
        assert renderer.render_to_string(Document(children=[table])) == "Head\n-----\n**x**\n"

    def test_table_in_quote(self, renderer):
        doc = Document(children=[BlockQuote(children=[make_table([["A", "BB"]], [["1", "22"]])])])
        assert renderer.render_to_string(doc) == "> A|BB\n> -|--\n> 1|22\n"

    def test_table_in_list_item(self, renderer):
        doc = Document(children=[List(children=[ListItem(children=[make_table([["A", "BB"]], [["1", "22"]])])])])
        assert renderer.render_to_string(doc) == "*  A|BB\n   -|--\n   1|22\n"

    def test_table_followed_by_paragraph(self, renderer):
        doc = Document(children=[make_table([["A"]], [["1"]]), Paragraph(children=[Text("after")])])
        assert renderer.render_to_string(doc) == "A\n-\n1\n\nafter\n"

    def test_consecutive_tables_do_not_share_widths(self, renderer):
        doc = Document(children=[make_table([["AAAA"]], [["1"]]), make_table([["B"]], [["2"]])])
        assert renderer.render_to_string(doc) == "AAAA\n----\n1\n\nB\n-\n2\n"

    def test_cell_outside_table_rendered_inline(self, renderer):
        doc = Document(children=[Paragraph(children=[TableCell(children=[Text("loose")])])])
        assert renderer.render_to_string(doc) == "loose\n"
