#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/constants.py
"""Constants shared across the mmarkfmt renderer.

This module centralizes the literal markup fragments and default values used
when re-emitting mmark documents, so the renderer, the wrapper and the tests
agree on a single canonical layout.

"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Layout defaults
# =============================================================================

DEFAULT_TEXT_WIDTH: Final[int] = 80
"""Maximum rendered line width (prefix included) for wrapped paragraphs."""

# =============================================================================
# Nesting prefixes
# =============================================================================

LIST_INDENT: Final[str] = "   "
QUOTE_PREFIX: Final[str] = "> "
ASIDE_PREFIX: Final[str] = "A> "

# =============================================================================
# List markers
# =============================================================================

ORDERED_MARKER: Final[str] = "1. "
UNORDERED_MARKER: Final[str] = "*  "
DEFINITION_MARKER: Final[str] = ":  "
TERM_MARKER: Final[str] = ""

# =============================================================================
# Block markup
# =============================================================================

TITLE_FENCE: Final[str] = "%%%"
CODE_FENCE_CHAR: Final[str] = "~"
CODE_FENCE_MIN: Final[int] = 3
MATH_FENCE: Final[str] = "$$"
HORIZONTAL_RULE: Final[str] = "********"

FRONTMATTER_MARKER: Final[str] = "{frontmatter}"
MAINMATTER_MARKER: Final[str] = "{mainmatter}"
BACKMATTER_MARKER: Final[str] = "{backmatter}"

# =============================================================================
# Tables
# =============================================================================

TABLE_CELL_SEPARATOR: Final[str] = "|"
TABLE_HEADER_RULE_CHAR: Final[str] = "-"
TABLE_FOOTER_RULE_CHAR: Final[str] = "="

# =============================================================================
# Captions
# =============================================================================

CAPTION_FIGURE_LABEL: Final[str] = "Figure: "
CAPTION_TABLE_LABEL: Final[str] = "Table: "
CAPTION_QUOTE_LABEL: Final[str] = "Quote: "

# =============================================================================
# Escaping
# =============================================================================

MARKUP_SPECIAL_CHARS: Final[str] = "\\`*_[]<>~^"
"""Characters escaped with a backslash inside literal text runs."""

PAREN_REFERENCE_MARKERS: Final[str] = "#!"
"""Characters that turn a preceding ``(`` into a cross-reference or index entry."""

EMPTY_ANCHOR_NAME: Final[str] = "empty"
"""Slug used by the parser for headings without any letters or digits."""
