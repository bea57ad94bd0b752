#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/renderers/__init__.py
"""AST renderers for re-emitting parsed mmark documents.

This package provides the canonical mmark renderer together with the
building blocks it is made of: the output buffer, the prefix stack, the
paragraph wrapper and the table layout engine.

Examples
--------
Render a document to canonical mmark:

    >>> from mmarkfmt.ast import Document, Paragraph, Text
    >>> from mmarkfmt.renderers import MmarkRenderer
    >>> from mmarkfmt.options import MmarkRendererOptions
    >>> doc = Document(children=[Paragraph(children=[Text("Hello")])])
    >>> renderer = MmarkRenderer(MmarkRendererOptions(text_width=72))
    >>> renderer.render_to_string(doc)
    'Hello\\n'

"""

from mmarkfmt.renderers.base import BaseRenderer
from mmarkfmt.renderers.buffer import OutputBuffer, TextWriter
from mmarkfmt.renderers.mmark import MmarkRenderer
from mmarkfmt.renderers.prefix import PrefixStack
from mmarkfmt.renderers.table import TableContext, TableLayout, TableSection, measure_table

__all__ = [
    "BaseRenderer",
    "MmarkRenderer",
    "OutputBuffer",
    "PrefixStack",
    "TableContext",
    "TableLayout",
    "TableSection",
    "TextWriter",
    "measure_table",
]
