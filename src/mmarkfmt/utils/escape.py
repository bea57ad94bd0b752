#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/utils/escape.py
"""Text escaping for mmark output.

Literal text must be written so that re-parsing the output yields the very
same text node. Every character the mmark grammar treats as markup is
therefore preceded by a backslash.

"""

from __future__ import annotations

from mmarkfmt.constants import MARKUP_SPECIAL_CHARS, PAREN_REFERENCE_MARKERS


def escape_text(text: str) -> str:
    r"""Escape markup-significant characters in a literal text run.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for mmark inline content

    Examples
    --------
        >>> escape_text("2 * 3 = [six]")
        '2 \\* 3 = \\[six\\]'
        >>> escape_text("a_b <c>")
        'a\\_b \\<c\\>'

    """
    if not text:
        return text

    escaped_chars = []
    for i, char in enumerate(text):
        if char in MARKUP_SPECIAL_CHARS:
            escaped_chars.append("\\")
        elif char == "(" and i + 1 < len(text) and text[i + 1] in PAREN_REFERENCE_MARKERS:
            escaped_chars.append("\\")
        escaped_chars.append(char)
    return "".join(escaped_chars)


def escape_title(text: str) -> str:
    r"""Escape a link or image title for use inside double quotes.

    Examples
    --------
        >>> escape_title('say "hi"')
        'say \\"hi\\"'

    """
    if not text:
        return text

    result = text.replace("\\", "\\\\")  # Escape backslashes first
    return result.replace('"', '\\"')


def escape_table_cell(text: str) -> str:
    r"""Escape the column separator in rendered table cell content.

    Backslash escapes already present in ``text`` are left alone, so an
    escaped pipe is never escaped twice.

    Examples
    --------
        >>> escape_table_cell("a|b")
        'a\\|b'

    """
    out = []
    escaped = False
    for char in text:
        if char == "|" and not escaped:
            out.append("\\")
        out.append(char)
        escaped = char == "\\" and not escaped
    return "".join(out)
