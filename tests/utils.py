"""Test utilities for building mmark document trees."""

from mmarkfmt.ast import (
    List,
    ListItem,
    ListType,
    Paragraph,
    Table,
    TableBody,
    TableCell,
    TableFooter,
    TableHeader,
    TableRow,
    Text,
)


def make_rows(cells: list[list[str]]) -> list[TableRow]:
    """Build table rows from a grid of cell strings (empty string: empty cell)."""
    return [TableRow(children=[TableCell(children=[Text(c)] if c else []) for c in row]) for row in cells]


def make_table(
    header: list[list[str]], body: list[list[str]], footer: list[list[str]] | None = None
) -> Table:
    """Build a table from grids of cell strings, one grid per section."""
    children = [TableHeader(children=make_rows(header)), TableBody(children=make_rows(body))]
    if footer:
        children.append(TableFooter(children=make_rows(footer)))
    return Table(children=children)


def make_list(*items: str, flags: ListType = ListType.UNORDERED) -> List:
    """Build a list whose items each hold one paragraph of text."""
    return List(
        list_flags=flags,
        children=[ListItem(list_flags=flags, children=[Paragraph(children=[Text(item)])]) for item in items],
    )


def pipe_offsets(line: str) -> list[int]:
    """Return the offsets of unescaped column separators in a table line."""
    offsets = []
    escaped = False
    for i, char in enumerate(line):
        if char == "|" and not escaped:
            offsets.append(i)
        escaped = char == "\\" and not escaped
    return offsets
