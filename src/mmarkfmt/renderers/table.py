#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/renderers/table.py
"""Two-pass table layout.

A table is laid out in two passes over the same subtree:

1. The measuring pass renders every cell's content to a scratch buffer and
   records the widest cell per column across header, body and footer. It
   emits nothing and produces a :class:`TableLayout`.
2. The rendering pass walks the table again with a :class:`TableContext`
   carrying that layout, the current section and the current column, and
   pads every cell to its column's width.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from mmarkfmt.ast.nodes import Table, TableCell, TableRow
from mmarkfmt.ast.walk import WalkStatus, walk
from mmarkfmt.constants import TABLE_CELL_SEPARATOR

logger = logging.getLogger(__name__)


class TableSection(Enum):
    """Section of a table a row belongs to."""

    HEADER = "header"
    BODY = "body"
    FOOTER = "footer"


@dataclass
class TableLayout:
    """Column widths of one table.

    Parameters
    ----------
    widths : list of int, default = empty list
        Width of every column, in column order

    Examples
    --------
        >>> layout = TableLayout()
        >>> layout.observe(0, 1)
        >>> layout.observe(1, 2)
        >>> layout.rule("-")
        '-|--'

    """

    widths: list[int] = field(default_factory=list)

    @property
    def columns(self) -> int:
        return len(self.widths)

    def observe(self, column: int, width: int) -> None:
        """Record a cell of ``width`` in ``column``, growing the layout as needed."""
        while len(self.widths) <= column:
            self.widths.append(0)
        self.widths[column] = max(self.widths[column], width)

    def width(self, column: int) -> int:
        """Return the width of ``column`` (0 for columns never observed)."""
        return self.widths[column] if column < len(self.widths) else 0

    def pad(self, column: int, content: str) -> str:
        """Right-pad ``content`` with spaces to the width of ``column``."""
        return content.ljust(self.width(column))

    def rule(self, char: str) -> str:
        """Return a separator line of ``char`` sized to every column."""
        return TABLE_CELL_SEPARATOR.join(char * width for width in self.widths)


@dataclass
class TableContext:
    """Rendering state of the table currently being emitted.

    Parameters
    ----------
    layout : TableLayout
        Widths from the measuring pass
    section : TableSection, default = TableSection.BODY
        Section of the row being rendered
    column : int, default = 0
        Index of the next cell in the current row
    cells : list of str, default = empty list
        Padded cells of the current row

    """

    layout: TableLayout
    section: TableSection = TableSection.BODY
    column: int = 0
    cells: list[str] = field(default_factory=list)

    def start_row(self) -> None:
        self.column = 0
        self.cells = []

    def add_cell(self, content: str) -> None:
        self.cells.append(self.layout.pad(self.column, content))
        self.column += 1

    def finish_row(self) -> str:
        """Return the current row's cells, completed to the full column count, joined."""
        while self.column < self.layout.columns:
            self.add_cell("")
        return TABLE_CELL_SEPARATOR.join(self.cells)


def measure_table(table: Table, render_cell: Callable[[TableCell], str]) -> TableLayout:
    """Run the measuring pass over ``table``.

    Parameters
    ----------
    table : Table
        Table to measure
    render_cell : callable
        Returns the rendered content of a cell exactly as the rendering pass
        will emit it

    Returns
    -------
    TableLayout
        Maximum rendered width per column

    """
    layout = TableLayout()
    column = 0

    def visit(node, entering: bool) -> WalkStatus:
        nonlocal column
        if not entering:
            return WalkStatus.GO_TO_NEXT
        if isinstance(node, TableRow):
            column = 0
        elif isinstance(node, TableCell):
            layout.observe(column, len(render_cell(node)))
            column += 1
            return WalkStatus.SKIP_CHILDREN
        return WalkStatus.GO_TO_NEXT

    walk(table, visit)
    logger.debug("Measured table with %d columns: widths %s", layout.columns, layout.widths)
    return layout
