#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed mmark documents.

The module consists of:

- nodes: node classes mirroring the external parser's document tree
- visitors: the closed visitor interface renderers implement
- walk: the depth-first enter/exit traversal driver

Examples
--------
    >>> from mmarkfmt.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, heading_id="title", children=[Text("Title")]),
    ...     Paragraph(children=[Text("Hello world")]),
    ... ])

"""

from __future__ import annotations

from mmarkfmt.ast.nodes import (
    Aside,
    Attribute,
    Bibliography,
    BibliographyItem,
    BlockQuote,
    Callout,
    Caption,
    CaptionFigure,
    Citation,
    CitationType,
    Code,
    CodeBlock,
    CrossReference,
    Del,
    Document,
    DocumentIndex,
    DocumentMatter,
    Emph,
    Hardbreak,
    Heading,
    HorizontalRule,
    HTMLBlock,
    HTMLSpan,
    Image,
    Index,
    IndexItem,
    IndexLetter,
    IndexLink,
    IndexSubItem,
    Link,
    List,
    ListItem,
    ListType,
    Math,
    MathBlock,
    MatterType,
    Node,
    Paragraph,
    Softbreak,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableBody,
    TableCell,
    TableFooter,
    TableHeader,
    TableRow,
    Text,
    Title,
    is_last,
    next_sibling,
    prev_sibling,
)
from mmarkfmt.ast.visitors import NodeVisitor
from mmarkfmt.ast.walk import WalkFunc, WalkStatus, walk

__all__ = [
    "Attribute",
    "Aside",
    "Bibliography",
    "BibliographyItem",
    "BlockQuote",
    "Callout",
    "Caption",
    "CaptionFigure",
    "Citation",
    "Code",
    "CodeBlock",
    "CrossReference",
    "Del",
    "Document",
    "DocumentIndex",
    "DocumentMatter",
    "Emph",
    "Hardbreak",
    "Heading",
    "HorizontalRule",
    "HTMLBlock",
    "HTMLSpan",
    "Image",
    "Index",
    "IndexItem",
    "IndexLetter",
    "IndexLink",
    "IndexSubItem",
    "Link",
    "List",
    "ListItem",
    "Math",
    "MathBlock",
    "Paragraph",
    "Softbreak",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "TableBody",
    "TableCell",
    "TableFooter",
    "TableHeader",
    "TableRow",
    "Text",
    "Title",
    "CitationType",
    "ListType",
    "MatterType",
    "Node",
    "NodeVisitor",
    "WalkFunc",
    "WalkStatus",
    "is_last",
    "next_sibling",
    "prev_sibling",
    "walk",
]
