#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/ast/visitors.py
"""Visitor interface for enter/exit AST traversal.

:class:`NodeVisitor` declares one abstract ``visit_*`` method per node
variant. Because every method is abstract, a visitor that forgets a variant
cannot be instantiated, which turns a missing handler into an immediate
``TypeError`` instead of silently dropped output.

Each method receives the node and the traversal direction and returns the
:class:`~mmarkfmt.ast.walk.WalkStatus` that steers :func:`~mmarkfmt.ast.walk.walk`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from mmarkfmt.ast.nodes import (
    Aside,
    Bibliography,
    BibliographyItem,
    BlockQuote,
    Callout,
    Caption,
    CaptionFigure,
    Citation,
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
    Math,
    MathBlock,
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
)
from mmarkfmt.ast.walk import WalkStatus


class NodeVisitor(ABC):
    """Abstract base class for enter/exit AST visitors.

    Examples
    --------
    Subclasses implement every ``visit_*`` method; nodes dispatch to them
    through ``accept``:

        >>> status = node.accept(visitor, True)

    """

    @abstractmethod
    def visit_document(self, node: Document, entering: bool) -> WalkStatus:
        """Handle a Document node."""

    @abstractmethod
    def visit_title(self, node: Title, entering: bool) -> WalkStatus:
        """Handle a Title node."""

    @abstractmethod
    def visit_document_matter(self, node: DocumentMatter, entering: bool) -> WalkStatus:
        """Handle a DocumentMatter node."""

    @abstractmethod
    def visit_heading(self, node: Heading, entering: bool) -> WalkStatus:
        """Handle a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, entering: bool) -> WalkStatus:
        """Handle a Paragraph node."""

    @abstractmethod
    def visit_list(self, node: List, entering: bool) -> WalkStatus:
        """Handle a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem, entering: bool) -> WalkStatus:
        """Handle a ListItem node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock, entering: bool) -> WalkStatus:
        """Handle a CodeBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote, entering: bool) -> WalkStatus:
        """Handle a BlockQuote node."""

    @abstractmethod
    def visit_aside(self, node: Aside, entering: bool) -> WalkStatus:
        """Handle a Aside node."""

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule, entering: bool) -> WalkStatus:
        """Handle a HorizontalRule node."""

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock, entering: bool) -> WalkStatus:
        """Handle a HTMLBlock node."""

    @abstractmethod
    def visit_math_block(self, node: MathBlock, entering: bool) -> WalkStatus:
        """Handle a MathBlock node."""

    @abstractmethod
    def visit_caption(self, node: Caption, entering: bool) -> WalkStatus:
        """Handle a Caption node."""

    @abstractmethod
    def visit_caption_figure(self, node: CaptionFigure, entering: bool) -> WalkStatus:
        """Handle a CaptionFigure node."""

    @abstractmethod
    def visit_table(self, node: Table, entering: bool) -> WalkStatus:
        """Handle a Table node."""

    @abstractmethod
    def visit_table_header(self, node: TableHeader, entering: bool) -> WalkStatus:
        """Handle a TableHeader node."""

    @abstractmethod
    def visit_table_body(self, node: TableBody, entering: bool) -> WalkStatus:
        """Handle a TableBody node."""

    @abstractmethod
    def visit_table_footer(self, node: TableFooter, entering: bool) -> WalkStatus:
        """Handle a TableFooter node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow, entering: bool) -> WalkStatus:
        """Handle a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell, entering: bool) -> WalkStatus:
        """Handle a TableCell node."""

    @abstractmethod
    def visit_text(self, node: Text, entering: bool) -> WalkStatus:
        """Handle a Text node."""

    @abstractmethod
    def visit_softbreak(self, node: Softbreak, entering: bool) -> WalkStatus:
        """Handle a Softbreak node."""

    @abstractmethod
    def visit_hardbreak(self, node: Hardbreak, entering: bool) -> WalkStatus:
        """Handle a Hardbreak node."""

    @abstractmethod
    def visit_emph(self, node: Emph, entering: bool) -> WalkStatus:
        """Handle a Emph node."""

    @abstractmethod
    def visit_strong(self, node: Strong, entering: bool) -> WalkStatus:
        """Handle a Strong node."""

    @abstractmethod
    def visit_del(self, node: Del, entering: bool) -> WalkStatus:
        """Handle a Del node."""

    @abstractmethod
    def visit_code(self, node: Code, entering: bool) -> WalkStatus:
        """Handle a Code node."""

    @abstractmethod
    def visit_math(self, node: Math, entering: bool) -> WalkStatus:
        """Handle a Math node."""

    @abstractmethod
    def visit_subscript(self, node: Subscript, entering: bool) -> WalkStatus:
        """Handle a Subscript node."""

    @abstractmethod
    def visit_superscript(self, node: Superscript, entering: bool) -> WalkStatus:
        """Handle a Superscript node."""

    @abstractmethod
    def visit_link(self, node: Link, entering: bool) -> WalkStatus:
        """Handle a Link node."""

    @abstractmethod
    def visit_image(self, node: Image, entering: bool) -> WalkStatus:
        """Handle a Image node."""

    @abstractmethod
    def visit_html_span(self, node: HTMLSpan, entering: bool) -> WalkStatus:
        """Handle a HTMLSpan node."""

    @abstractmethod
    def visit_citation(self, node: Citation, entering: bool) -> WalkStatus:
        """Handle a Citation node."""

    @abstractmethod
    def visit_cross_reference(self, node: CrossReference, entering: bool) -> WalkStatus:
        """Handle a CrossReference node."""

    @abstractmethod
    def visit_index(self, node: Index, entering: bool) -> WalkStatus:
        """Handle a Index node."""

    @abstractmethod
    def visit_callout(self, node: Callout, entering: bool) -> WalkStatus:
        """Handle a Callout node."""

    @abstractmethod
    def visit_bibliography(self, node: Bibliography, entering: bool) -> WalkStatus:
        """Handle a Bibliography node."""

    @abstractmethod
    def visit_bibliography_item(self, node: BibliographyItem, entering: bool) -> WalkStatus:
        """Handle a BibliographyItem node."""

    @abstractmethod
    def visit_document_index(self, node: DocumentIndex, entering: bool) -> WalkStatus:
        """Handle a DocumentIndex node."""

    @abstractmethod
    def visit_index_letter(self, node: IndexLetter, entering: bool) -> WalkStatus:
        """Handle a IndexLetter node."""

    @abstractmethod
    def visit_index_item(self, node: IndexItem, entering: bool) -> WalkStatus:
        """Handle a IndexItem node."""

    @abstractmethod
    def visit_index_sub_item(self, node: IndexSubItem, entering: bool) -> WalkStatus:
        """Handle a IndexSubItem node."""

    @abstractmethod
    def visit_index_link(self, node: IndexLink, entering: bool) -> WalkStatus:
        """Handle a IndexLink node."""
