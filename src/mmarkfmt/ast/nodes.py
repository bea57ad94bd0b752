#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/ast/nodes.py
"""AST node classes for parsed mmark documents.

This module defines the node hierarchy the renderer consumes. The tree is
produced by an external mmark parser; the classes here mirror that parser's
node model so callers (and tests) can hand the renderer a tree built in
Python.

The variant set is closed: every concrete class overrides ``accept`` and is
matched by exactly one abstract ``visit_*`` method on
:class:`mmarkfmt.ast.visitors.NodeVisitor`. A ``Node`` subclass that does not
override ``accept`` is rejected with :class:`UnsupportedNodeError`.

Node Hierarchy
--------------
Front matter and sections:
    - Document, Title, DocumentMatter

Block-level nodes:
    - Heading, Paragraph, CodeBlock, BlockQuote, Aside
    - List, ListItem, HorizontalRule, HTMLBlock, MathBlock
    - Table, TableHeader, TableBody, TableFooter, TableRow, TableCell
    - Caption, CaptionFigure

Inline nodes:
    - Text, Softbreak, Hardbreak, Emph, Strong, Del, Code, Math
    - Subscript, Superscript, Link, Image, HTMLSpan
    - Citation, CrossReference, Index, Callout

Parser-generated back matter (never re-emitted):
    - Bibliography, BibliographyItem
    - DocumentIndex, IndexLetter, IndexItem, IndexSubItem, IndexLink

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import TYPE_CHECKING, Optional

from mmarkfmt.exceptions import UnsupportedNodeError

if TYPE_CHECKING:
    from mmarkfmt.ast.visitors import NodeVisitor
    from mmarkfmt.ast.walk import WalkStatus


class ListType(IntFlag):
    """Flags describing the kind of a list or list item."""

    UNORDERED = 0
    ORDERED = 1
    DEFINITION = 2
    TERM = 4


class CitationType(Enum):
    """Reference kind of a single citation key."""

    INFORMATIVE = "informative"
    NORMATIVE = "normative"
    SUPPRESSED = "suppressed"


class MatterType(Enum):
    """Top-level document section."""

    FRONT = "front"
    MAIN = "main"
    BACK = "back"


@dataclass
class Attribute:
    """Block attribute annotation attached to a node by the parser.

    Parameters
    ----------
    id : str, default = ""
        Identifier, rendered as ``#id``
    classes : list of str, default = empty list
        Class names, rendered as ``.name`` in order
    attrs : dict, default = empty dict
        Key/value pairs, rendered as ``key="value"`` sorted by key

    Examples
    --------
        >>> Attribute(id="fig-1", classes=["wide"], attrs={"width": "5"}).to_markup()
        '{#fig-1 .wide width="5"}'

    """

    id: str = ""
    classes: list[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)

    def to_markup(self) -> str:
        """Return the attribute block in its ``{...}`` source form."""
        parts: list[str] = []
        if self.id:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f'{key}="{self.attrs[key]}"' for key in sorted(self.attrs))
        return "{" + " ".join(parts) + "}"


@dataclass
class Node:
    """Base class for all AST nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Ordered child nodes. Leaf variants keep this empty.
    attribute : Attribute or None, default = None
        Attribute block attached by the parser
    parent : Node or None, default = None
        Non-owning back-reference, filled in when the node is attached to a
        parent. Excluded from comparison and repr.

    """

    children: list[Node] = field(default_factory=list, kw_only=True)
    attribute: Optional[Attribute] = field(default=None, kw_only=True)
    parent: Optional[Node] = field(default=None, kw_only=True, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Point every child's parent reference at this node."""
        for child in self.children:
            child.parent = self

    def append_child(self, child: Node) -> Node:
        """Attach ``child`` as the last child of this node and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        """Dispatch to the visitor; the base class has no handler.

        Raises
        ------
        UnsupportedNodeError
            Always. Concrete node classes override this method.

        """
        raise UnsupportedNodeError(type(self).__name__)


def is_last(node: Node) -> bool:
    """Return True if ``node`` is the last child of its parent (or has none)."""
    if node.parent is None or not node.parent.children:
        return True
    return node.parent.children[-1] is node


def _sibling(node: Node, offset: int) -> Optional[Node]:
    if node.parent is None:
        return None
    siblings = node.parent.children
    for index, candidate in enumerate(siblings):
        if candidate is node:
            target = index + offset
            if 0 <= target < len(siblings):
                return siblings[target]
            return None
    return None


def next_sibling(node: Node) -> Optional[Node]:
    """Return the sibling following ``node``, or None."""
    return _sibling(node, 1)


def prev_sibling(node: Node) -> Optional[Node]:
    """Return the sibling preceding ``node``, or None."""
    return _sibling(node, -1)


# ============================================================================
# Document structure
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_document(self, entering)


@dataclass
class Title(Node):
    """Title block holding the raw TOML between the ``%%%`` fences.

    Parameters
    ----------
    content : str, default = ""
        Raw title block content, without the fences

    """

    content: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_title(self, entering)


@dataclass
class DocumentMatter(Node):
    """Front, main or back matter section.

    Parameters
    ----------
    matter : MatterType
        Which section this node opens

    """

    matter: MatterType = MatterType.MAIN

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_document_matter(self, entering)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    heading_id : str, default = ""
        Anchor id assigned by the parser, either the default slug of the
        heading text or an explicit ``{#id}``
    is_special : bool, default = False
        Special (unnumbered) section such as an abstract, written ``.#``
    is_title_block : bool, default = False
        Heading generated from a title block

    """

    level: int = 1
    heading_id: str = ""
    is_special: bool = False
    is_title_block: bool = False

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        super().__post_init__()

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_heading(self, entering)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_paragraph(self, entering)


@dataclass
class List(Node):
    """List node (ordered, unordered or definition list).

    Parameters
    ----------
    list_flags : ListType, default = ListType.UNORDERED
        Kind of list
    start : int, default = 1
        Starting number for ordered lists. Canonical output always numbers
        items ``1.``, so this is informational only.

    """

    list_flags: ListType = ListType.UNORDERED
    start: int = 1

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_list(self, entering)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    list_flags : ListType, default = ListType.UNORDERED
        Kind of item. Definition lists mark terms with ``TERM`` and
        descriptions with ``DEFINITION``.

    """

    list_flags: ListType = ListType.UNORDERED

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_list_item(self, entering)


@dataclass
class CodeBlock(Node):
    """Fenced code block.

    Parameters
    ----------
    literal : str, default = ""
        Code content, emitted verbatim
    info : str, default = ""
        Info string following the opening fence

    """

    literal: str = ""
    info: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_code_block(self, entering)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_block_quote(self, entering)


@dataclass
class Aside(Node):
    """Aside node, rendered with an ``A>`` prefix on every line."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_aside(self, entering)


@dataclass
class HorizontalRule(Node):
    """Thematic break."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_horizontal_rule(self, entering)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, emitted verbatim.

    Parameters
    ----------
    content : str, default = ""
        Raw HTML content

    """

    content: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_html_block(self, entering)


@dataclass
class MathBlock(Node):
    """Display math block.

    Parameters
    ----------
    literal : str, default = ""
        Math source between the ``$$`` fences

    """

    literal: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_math_block(self, entering)


@dataclass
class Caption(Node):
    """Caption of the preceding table, code block or block quote."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_caption(self, entering)


@dataclass
class CaptionFigure(Node):
    """Wrapper grouping a captioned block with its Caption."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_caption_figure(self, entering)


# ============================================================================
# Tables
# ============================================================================


@dataclass
class Table(Node):
    """Table node; children are TableHeader, TableBody and TableFooter."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_table(self, entering)


@dataclass
class TableHeader(Node):
    """Header section of a table."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_table_header(self, entering)


@dataclass
class TableBody(Node):
    """Body section of a table."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_table_body(self, entering)


@dataclass
class TableFooter(Node):
    """Footer section of a table."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_table_footer(self, entering)


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_table_row(self, entering)


@dataclass
class TableCell(Node):
    """Table cell node containing inline content.

    Parameters
    ----------
    is_header : bool, default = False
        Whether the cell belongs to a header row

    """

    is_header: bool = False

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_table_cell(self, entering)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run.

    Parameters
    ----------
    literal : str, default = ""
        Unescaped text content

    """

    literal: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_text(self, entering)


@dataclass
class Softbreak(Node):
    """Soft line break inside a paragraph."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_softbreak(self, entering)


@dataclass
class Hardbreak(Node):
    """Hard line break inside a paragraph."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_hardbreak(self, entering)


@dataclass
class Emph(Node):
    """Emphasis (italic) span."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_emph(self, entering)


@dataclass
class Strong(Node):
    """Strong (bold) span."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_strong(self, entering)


@dataclass
class Del(Node):
    """Deleted (strikethrough) span."""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_del(self, entering)


@dataclass
class Code(Node):
    """Inline code span.

    Parameters
    ----------
    literal : str, default = ""
        Code content, emitted verbatim

    """

    literal: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_code(self, entering)


@dataclass
class Math(Node):
    """Inline math span."""

    literal: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_math(self, entering)


@dataclass
class Subscript(Node):
    """Subscript text, rendered ``~literal~``."""

    literal: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_subscript(self, entering)


@dataclass
class Superscript(Node):
    """Superscript text, rendered ``^literal^``."""

    literal: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_superscript(self, entering)


@dataclass
class Link(Node):
    """Hyperlink; the children form the visible label.

    Parameters
    ----------
    destination : str, default = ""
        Link target
    title : str, default = ""
        Optional link title

    """

    destination: str = ""
    title: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_link(self, entering)


@dataclass
class Image(Node):
    """Image; the children form the alternative text.

    Parameters
    ----------
    destination : str, default = ""
        Image source
    title : str, default = ""
        Optional image title

    """

    destination: str = ""
    title: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_image(self, entering)


@dataclass
class HTMLSpan(Node):
    """Inline raw HTML, emitted verbatim."""

    content: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_html_span(self, entering)


@dataclass
class Citation(Node):
    """Citation of one or more bibliography keys.

    Parameters
    ----------
    destinations : list of str, default = empty list
        Cited reference keys, in order
    types : list of CitationType, default = empty list
        Reference kind per key; missing entries are informative
    suffixes : list of str, default = empty list
        Locator text per key (e.g. ``p. 23``); missing entries are empty

    """

    destinations: list[str] = field(default_factory=list)
    types: list[CitationType] = field(default_factory=list)
    suffixes: list[str] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_citation(self, entering)


@dataclass
class CrossReference(Node):
    """Reference to an anchor inside the document, rendered ``(#id)``."""

    destination: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_cross_reference(self, entering)


@dataclass
class Index(Node):
    """Index entry.

    Parameters
    ----------
    item : str, default = ""
        Primary index term
    subitem : str, default = ""
        Optional sub term
    primary : bool, default = False
        Whether this occurrence is the primary one for the term

    """

    item: str = ""
    subitem: str = ""
    primary: bool = False

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_index(self, entering)


@dataclass
class Callout(Node):
    """Callout marker inside a code block, rendered ``<<id>>``."""

    callout_id: str = ""

    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_callout(self, entering)


# ============================================================================
# Parser-generated back matter
# ============================================================================


@dataclass
class Bibliography(Node):
    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_bibliography(self, entering)


@dataclass
class BibliographyItem(Node):
    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_bibliography_item(self, entering)


@dataclass
class DocumentIndex(Node):
    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_document_index(self, entering)


@dataclass
class IndexLetter(Node):
    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_index_letter(self, entering)


@dataclass
class IndexItem(Node):
    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_index_item(self, entering)


@dataclass
class IndexSubItem(Node):
    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_index_sub_item(self, entering)


@dataclass
class IndexLink(Node):
    def accept(self, visitor: NodeVisitor, entering: bool) -> WalkStatus:
        return visitor.visit_index_link(self, entering)
