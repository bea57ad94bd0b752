#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_escape.py
"""Unit tests for mmark escaping helpers."""

import pytest

from mmarkfmt.utils.escape import escape_table_cell, escape_text, escape_title


@pytest.mark.unit
class TestEscapeText:
    """Tests for literal text escaping."""

    @pytest.mark.parametrize("char", list("\\`*_[]<>~^"))
    def test_special_characters_escaped(self, char):
        assert escape_text(f"a{char}b") == f"a\\{char}b"

    def test_plain_text_unchanged(self):
        assert escape_text("Hello, world. 1 + 2 = 3!") == "Hello, world. 1 + 2 = 3!"

    def test_empty(self):
        assert escape_text("") == ""

    def test_every_occurrence(self):
        assert escape_text("**bold**") == "\\*\\*bold\\*\\*"

    def test_dialect_markers_escaped(self):
        text = "H~2~O and x^2^ and ~~gone~~ see (#intro)"
        assert escape_text(text) == "H\\~2\\~O and x\\^2\\^ and \\~\\~gone\\~\\~ see \\(#intro)"

    @pytest.mark.parametrize(
        "text,expected",
        [("(!item)", "\\(!item)"), ("(#a) (#b)", "\\(#a) \\(#b)"), ("f(x) #1 !", "f(x) #1 !"), ("end (", "end (")],
    )
    def test_reference_parenthesis(self, text, expected):
        assert escape_text(text) == expected


@pytest.mark.unit
class TestEscapeTitle:
    """Tests for link title escaping."""

    def test_quotes(self):
        assert escape_title('say "hi"') == 'say \\"hi\\"'

    def test_backslash_first(self):
        assert escape_title('a\\"b') == 'a\\\\\\"b'

    def test_plain(self):
        assert escape_title("Title") == "Title"


@pytest.mark.unit
class TestEscapeTableCell:
    """Tests for column separator escaping."""

    def test_pipe(self):
        assert escape_table_cell("a|b") == "a\\|b"

    def test_already_escaped_pipe(self):
        assert escape_table_cell("a\\|b") == "a\\|b"

    def test_escaped_backslash_before_pipe(self):
        assert escape_table_cell("a\\\\|b") == "a\\\\\\|b"

    def test_no_pipe(self):
        assert escape_table_cell("**x**") == "**x**"
