#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/renderers/wrap.py
"""Paragraph re-flowing and block indentation.

A paragraph's inline content is first rendered as one run of markup, then
re-flowed here into lines no wider than the configured text width. Line
breaks are only placed between tokens; constructs whose meaning would change
if a newline landed inside them are kept whole.

"""

from __future__ import annotations

import re
from typing import Optional

# Openers and closers of inline constructs that must stay on one line:
# link/image destinations, citations, cross-references, index entries,
# callouts and inline math.
_PROTECTED_SPANS: tuple[tuple[str, str], ...] = (
    ("](", ")"),
    ("[@", "]"),
    ("(#", ")"),
    ("(!", ")"),
    ("<<", ">>"),
    ("$$", "$$"),
)

# Tokens that would open a block construct if a line started with them.
_UNSAFE_LINE_START = re.compile(r"^(#{1,6}|[-+=]+|\d+[.)]|:|~{3,}.*|%%%|\{.*)$")
_ORDERED_MARKER = re.compile(r"^(\d+)([.)])$")


def _escape_line_start(token: str) -> str:
    r"""Backslash-escape the character that lets ``token`` open a block.

    Examples
    --------
        >>> _escape_line_start("#")
        '\\#'
        >>> _escape_line_start("12.")
        '12\\.'

    """
    ordered = _ORDERED_MARKER.match(token)
    if ordered:
        return f"{ordered.group(1)}\\{ordered.group(2)}"
    return "\\" + token


def _code_span_end(text: str, start: int) -> tuple[Optional[int], int]:
    """Return the end of the code span opened at ``start`` and its delimiter length."""
    run = 0
    while start + run < len(text) and text[start + run] == "`":
        run += 1

    i = start + run
    while True:
        j = text.find("`" * run, i)
        if j == -1:
            return None, run
        k = j
        while k < len(text) and text[k] == "`":
            k += 1
        if k - j == run:
            return k, run
        i = k


def _span_end(text: str, start: int, opener: str, closer: str) -> Optional[int]:
    """Return the index just past ``closer`` for the span opened at ``start``."""
    i = start + len(opener)
    depth = 0
    in_title = False
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if opener == "](" and char == '"':
            in_title = not in_title
        elif not in_title:
            if closer == ")" and char == "(":
                depth += 1
            elif text.startswith(closer, i):
                if depth == 0:
                    return i + len(closer)
                depth -= 1
        i += 1
    return None


def tokenize_inline(text: str) -> list[str]:
    r"""Split rendered inline markup into unbreakable tokens.

    Tokens are separated by whitespace, except that backslash escapes, code
    spans and the constructs in ``_PROTECTED_SPANS`` are never split. A
    token that would start a block construct at the beginning of a line
    (``#``, ``-``, ``1.``, ...) is joined to the token before it. The first
    token has nothing to join, so its opening character is escaped instead.

    Parameters
    ----------
    text : str
        Rendered inline markup

    Returns
    -------
    list of str
        Tokens in order

    Examples
    --------
        >>> tokenize_inline("see [the docs](http://x.org \"A title\") now")
        ['see', '[the', 'docs](http://x.org "A title")', 'now']
        >>> tokenize_inline("run `make all` - done")
        ['run', '`make all` -', 'done']

    """
    tokens: list[str] = []
    current: list[str] = []

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    i = 0
    while i < len(text):
        char = text[i]
        if char.isspace():
            flush()
            i += 1
            continue

        if char == "\\":
            current.append(text[i : i + 2])
            i += 2
            continue

        if char == "`":
            end, run = _code_span_end(text, i)
            if end is None:
                current.append(text[i : i + run])
                i += run
            else:
                current.append(text[i:end].replace("\n", " "))
                i = end
            continue

        for opener, closer in _PROTECTED_SPANS:
            if text.startswith(opener, i):
                end = _span_end(text, i, opener, closer)
                if end is not None:
                    current.append(text[i:end].replace("\n", " "))
                    i = end
                    break
        else:
            current.append(char)
            i += 1
    flush()

    merged: list[str] = []
    for token in tokens:
        if not _UNSAFE_LINE_START.match(token):
            merged.append(token)
        elif merged:
            merged[-1] = f"{merged[-1]} {token}"
        else:
            merged.append(_escape_line_start(token))
    return merged


def wrap_text(text: str, width: int, prefix: str, first_prefix: Optional[str] = None) -> str:
    """Greedily re-flow inline markup into prefixed lines.

    Every line, the first included, starts with a prefix. A token is added
    to the current line when the line stays within ``width``; otherwise a new
    line is started. A token wider than the available space on an empty line
    is emitted on a line of its own.

    Parameters
    ----------
    text : str
        Rendered inline markup of one paragraph
    width : int
        Maximum line width, prefix included
    prefix : str
        Prefix of every line
    first_prefix : str, optional
        Prefix of the first line if it differs (e.g. carries a list marker)

    Returns
    -------
    str
        The wrapped lines, each terminated by a newline; empty if ``text``
        holds no tokens

    Examples
    --------
        >>> wrap_text("The quick brown fox", 12, "> ")
        '> The quick\\n> brown fox\\n'

    """
    tokens = tokenize_inline(text)
    if not tokens:
        return ""

    line_prefix = prefix if first_prefix is None else first_prefix
    lines: list[str] = []
    current: list[str] = []
    length = len(line_prefix)
    for token in tokens:
        if current and length + 1 + len(token) > width:
            lines.append(line_prefix + " ".join(current))
            line_prefix = prefix
            current = [token]
            length = len(prefix) + len(token)
        else:
            length += len(token) + (1 if current else 0)
            current.append(token)
    lines.append(line_prefix + " ".join(current))
    return "\n".join(lines) + "\n"


def indent_text(text: str, prefix: str, first_prefix: Optional[str] = None) -> str:
    """Prefix every line of a verbatim block.

    Parameters
    ----------
    text : str
        Block content; a single trailing newline is not treated as an extra
        empty line
    prefix : str
        Prefix of every line
    first_prefix : str, optional
        Prefix of the first line if it differs

    Returns
    -------
    str
        Prefixed lines, each terminated by a newline

    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    indented = []
    for i, line in enumerate(lines):
        line_prefix = first_prefix if i == 0 and first_prefix is not None else prefix
        indented.append(line_prefix + line)
    return "\n".join(indented) + "\n" if indented else ""
