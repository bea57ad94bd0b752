#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/renderers/mmark.py
"""Canonical mmark rendering from AST.

This module provides the MmarkRenderer class which re-emits a parsed mmark
document as normalized markup: paragraphs re-flowed to a fixed width, one
list marker per list kind, padded tables and fenced code blocks. The output
parses back to the same tree, and rendering that tree again yields the same
text.

The renderer is event driven. :meth:`MmarkRenderer.render_node` is called
for every node on entering and on exiting; nesting constructs push their line
prefix on a :class:`~mmarkfmt.renderers.prefix.PrefixStack`, and paragraphs
and headings post-process the text their children wrote once they close.

"""

from __future__ import annotations

import logging
import re
from typing import Optional, cast

from mmarkfmt.ast.nodes import (
    Aside,
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
from mmarkfmt.ast.walk import WalkStatus, walk
from mmarkfmt.constants import (
    ASIDE_PREFIX,
    BACKMATTER_MARKER,
    CAPTION_FIGURE_LABEL,
    CAPTION_QUOTE_LABEL,
    CAPTION_TABLE_LABEL,
    CODE_FENCE_CHAR,
    CODE_FENCE_MIN,
    DEFINITION_MARKER,
    FRONTMATTER_MARKER,
    HORIZONTAL_RULE,
    LIST_INDENT,
    MAINMATTER_MARKER,
    MATH_FENCE,
    ORDERED_MARKER,
    QUOTE_PREFIX,
    TABLE_FOOTER_RULE_CHAR,
    TABLE_HEADER_RULE_CHAR,
    TERM_MARKER,
    TITLE_FENCE,
    UNORDERED_MARKER,
)
from mmarkfmt.exceptions import UnsupportedNodeError
from mmarkfmt.options.mmark import MmarkRendererOptions
from mmarkfmt.renderers.base import BaseRenderer
from mmarkfmt.renderers.buffer import OutputBuffer, TextWriter
from mmarkfmt.renderers.prefix import PrefixStack
from mmarkfmt.renderers.table import TableContext, TableSection, measure_table
from mmarkfmt.renderers.wrap import indent_text, tokenize_inline, wrap_text
from mmarkfmt.utils.escape import escape_table_cell, escape_text, escape_title
from mmarkfmt.utils.text import sanitize_anchor_name

logger = logging.getLogger(__name__)

_MATTER_MARKERS = {
    MatterType.FRONT: FRONTMATTER_MARKER,
    MatterType.MAIN: MAINMATTER_MARKER,
    MatterType.BACK: BACKMATTER_MARKER,
}

_CITATION_MODIFIERS = {
    CitationType.INFORMATIVE: "",
    CitationType.NORMATIVE: "!",
    CitationType.SUPPRESSED: "-",
}

_BACKTICK_RUN = re.compile(r"`+")

# A mark on the output buffer paired with the last character written before it
_Mark = tuple[int, str]


class MmarkRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to canonical mmark text.

    Parameters
    ----------
    options : MmarkRendererOptions or None, default = None
        Rendering options (text width, render-node hook)

    Examples
    --------
    Basic usage:

        >>> from mmarkfmt.ast import Document, Heading, Text
        >>> from mmarkfmt.renderers.mmark import MmarkRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, heading_id="title", children=[Text("Title")])
        ... ])
        >>> MmarkRenderer().render_to_string(doc)
        '# Title\\n'

    Notes
    -----
    An instance keeps traversal state between events and must not be shared
    by concurrent renders. State is reset at the start of every document, so
    sequential reuse is fine.

    """

    def __init__(self, options: MmarkRendererOptions | None = None):
        """Initialize the mmark renderer with options."""
        BaseRenderer._validate_options_type(options, MmarkRendererOptions, "mmark")
        options = options or MmarkRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MmarkRendererOptions = options
        self._writer: TextWriter = OutputBuffer()
        self._reset_state()

    def _reset_state(self) -> None:
        self._prefix = PrefixStack()
        self._paragraph_marks: list[Optional[_Mark]] = []
        self._heading_marks: list[Optional[_Mark]] = []
        # prefix stack depth -> marker the next emitted line shows at that depth
        self._pending_markers: dict[int, str] = {}
        self._tables: list[TableContext] = []
        self._last_char = ""

    # ------------------------------------------------------------------
    # Driver contract
    # ------------------------------------------------------------------

    def render_header(self, writer: TextWriter, doc: Document) -> None:
        """Reset all traversal state before rendering ``doc``."""
        self._writer = writer
        self._reset_state()

    def render_node(self, writer: TextWriter, node: Node, entering: bool) -> WalkStatus:
        """Render one enter or exit event of ``node``.

        Parameters
        ----------
        writer : TextWriter
            Output destination
        node : Node
            Node being entered or exited
        entering : bool
            True on entering, False on exiting

        Returns
        -------
        WalkStatus
            How the walk should proceed

        Raises
        ------
        UnsupportedNodeError
            If ``node`` is of a variant the renderer has no handler for

        """
        self._writer = writer

        hook = self.options.render_node_hook
        if hook is not None:
            status, handled = hook(writer, node, entering)
            if handled:
                return status

        attribute = getattr(node, "attribute", None)
        if entering and attribute is not None and self._owns_attribute(node):
            self._cr()
            self._out(self._prefix.flatten() + attribute.to_markup() + "\n")

        accept = getattr(node, "accept", None)
        if accept is None:
            logger.error("Cannot render %s: not a document node", type(node).__name__)
            raise UnsupportedNodeError(type(node).__name__)
        try:
            return accept(self, entering)
        except UnsupportedNodeError:
            logger.error("Unknown node %s; aborting render", type(node).__name__)
            raise

    def render_footer(self, writer: TextWriter, doc: Document) -> None:
        """Strip trailing spaces from every line of the finished output."""
        if not isinstance(writer, OutputBuffer):
            logger.debug("Output target does not support buffer introspection; trailing spaces are kept")
            return

        text = writer.getvalue()
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        writer.replace("".join(line.rstrip(" ") + "\n" for line in lines))

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _out(self, text: str) -> None:
        if text:
            self._writer.write(text)
            self._last_char = text[-1]

    def _cr(self) -> None:
        """End the current line unless it is already ended."""
        if self._last_char not in ("", "\n"):
            self._out("\n")

    def _blank_line(self) -> None:
        """Write a separator line that keeps the open nesting constructs open."""
        self._cr()
        self._out(self._prefix.flatten().rstrip() + "\n")

    def _end_block(self, node: Node) -> None:
        self._cr()
        if is_last(node) or isinstance(next_sibling(node), Caption):
            return
        self._blank_line()

    def _line_prefix(self) -> str:
        """Return the prefix for the next line, applying pending list markers."""
        if not self._pending_markers:
            return self._prefix.flatten()

        parts = []
        for depth, part in enumerate(self._prefix):
            marker = self._pending_markers.get(depth)
            parts.append(part if marker is None else marker)
        self._pending_markers.clear()
        return "".join(parts)

    def _mark(self) -> Optional[_Mark]:
        if isinstance(self._writer, OutputBuffer):
            return self._writer.mark(), self._last_char
        return None

    def _render_children(self, node: Node) -> str:
        """Render the children of ``node`` into a scratch buffer and return the text."""
        saved_writer, saved_last_char = self._writer, self._last_char
        scratch = OutputBuffer()
        self._writer = scratch
        self._last_char = ""
        try:
            for child in node.children:
                walk(child, lambda n, entering: self.render_node(scratch, n, entering))
        finally:
            self._writer, self._last_char = saved_writer, saved_last_char
        return scratch.getvalue()

    @staticmethod
    def _owns_attribute(node: Node) -> bool:
        # A figure around a code block or quote shares the inner block's attribute.
        if isinstance(node, CaptionFigure):
            return bool(node.children) and not isinstance(node.children[0], (CodeBlock, BlockQuote))
        return True

    @staticmethod
    def _list_marker(flags: ListType) -> str:
        if flags & ListType.ORDERED:
            return ORDERED_MARKER
        if flags & ListType.TERM:
            return TERM_MARKER
        if flags & ListType.DEFINITION:
            return DEFINITION_MARKER
        return UNORDERED_MARKER

    @staticmethod
    def _code_fence(literal: str) -> str:
        """Return a fence longer than any run of fence characters in ``literal``."""
        fence_length = CODE_FENCE_MIN
        if CODE_FENCE_CHAR in literal:
            max_consecutive = 0
            current_consecutive = 0
            for char in literal:
                if char == CODE_FENCE_CHAR:
                    current_consecutive += 1
                    max_consecutive = max(max_consecutive, current_consecutive)
                else:
                    current_consecutive = 0
            fence_length = max(fence_length, max_consecutive + 1)
        return CODE_FENCE_CHAR * fence_length

    def _inline_marker(self, entering: bool, opening: str, closing: str) -> WalkStatus:
        self._out(opening if entering else closing)
        return WalkStatus.GO_TO_NEXT

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def visit_document(self, node: Document, entering: bool) -> WalkStatus:
        return WalkStatus.GO_TO_NEXT

    def visit_title(self, node: Title, entering: bool) -> WalkStatus:
        if entering:
            self._cr()
            self._out(self._line_prefix() + TITLE_FENCE + "\n")
            content = node.content.strip("\n")
            if content:
                self._out(indent_text(content, self._prefix.flatten()))
            self._out(self._prefix.flatten() + TITLE_FENCE)
            self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_document_matter(self, node: DocumentMatter, entering: bool) -> WalkStatus:
        if not entering:
            self._end_block(node)
            return WalkStatus.GO_TO_NEXT

        self._cr()
        self._out(self._line_prefix() + _MATTER_MARKERS[node.matter] + "\n")
        if node.children:
            self._blank_line()
        return WalkStatus.GO_TO_NEXT

    def visit_heading(self, node: Heading, entering: bool) -> WalkStatus:
        """Render a Heading node.

        The heading's explicit anchor is only written when the parser would
        not derive the same id from the heading text on its own.

        """
        if entering:
            self._cr()
            special = "." if node.is_special else ""
            self._out(self._line_prefix() + special + "#" * node.level + " ")
            self._heading_marks.append(self._mark())
            return WalkStatus.GO_TO_NEXT

        mark = self._heading_marks.pop()
        if node.heading_id:
            if mark is None:
                logger.debug("Output target does not support buffer introspection; keeping anchor {#%s}", node.heading_id)
                self._out(" {#" + node.heading_id + "}")
            elif sanitize_anchor_name(self._writer.slice(mark[0])) != node.heading_id:  # type: ignore[attr-defined]
                self._out(" {#" + node.heading_id + "}")
        self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    def visit_paragraph(self, node: Paragraph, entering: bool) -> WalkStatus:
        """Render a Paragraph node.

        On entering only the buffer position is recorded; the children then
        write their inline markup. On exiting that markup is cut from the
        buffer and written back re-flowed to the configured width.

        """
        if entering:
            mark = self._mark()
            self._paragraph_marks.append(mark)
            if mark is None:
                logger.debug("Output target does not support buffer introspection; paragraph is not rewrapped")
                self._cr()
                self._out(self._line_prefix())
            return WalkStatus.GO_TO_NEXT

        mark = self._paragraph_marks.pop()
        if mark is not None:
            buffer = cast(OutputBuffer, self._writer)
            position, last_char = mark
            raw = buffer.slice(position)
            buffer.truncate(position)
            self._last_char = last_char
            if not tokenize_inline(raw):
                # Nothing to write; a pending list marker stays for the next line.
                return WalkStatus.GO_TO_NEXT

            self._cr()
            first_prefix = self._line_prefix()
            self._out(wrap_text(raw, self.options.text_width, self._prefix.flatten(), first_prefix=first_prefix))
        self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_list(self, node: List, entering: bool) -> WalkStatus:
        if entering:
            self._prefix.push(LIST_INDENT)
        else:
            self._prefix.pop()
            self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_list_item(self, node: ListItem, entering: bool) -> WalkStatus:
        """Render a ListItem node.

        The item's marker replaces the list indent in the first line the item
        emits, whatever block produces that line.

        """
        depth = self._prefix.depth - 1
        if entering:
            if depth >= 0:
                self._pending_markers[depth] = self._list_marker(node.list_flags)
            return WalkStatus.GO_TO_NEXT

        if depth in self._pending_markers:
            # Empty item: still emit its marker so the item survives.
            self._cr()
            self._out(self._line_prefix().rstrip() + "\n")
        self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_code_block(self, node: CodeBlock, entering: bool) -> WalkStatus:
        if not entering:
            return WalkStatus.GO_TO_NEXT

        fence = self._code_fence(node.literal)
        info = f" {node.info}" if node.info else ""
        self._cr()
        self._out(self._line_prefix() + fence + info + "\n")
        prefix = self._prefix.flatten()
        self._out(indent_text(node.literal, prefix))
        self._out(prefix + fence)
        self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> WalkStatus:
        if entering:
            self._prefix.push(QUOTE_PREFIX)
        else:
            self._prefix.pop()
            self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_aside(self, node: Aside, entering: bool) -> WalkStatus:
        if entering:
            self._prefix.push(ASIDE_PREFIX)
        else:
            self._prefix.pop()
            self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_horizontal_rule(self, node: HorizontalRule, entering: bool) -> WalkStatus:
        if entering:
            self._cr()
            self._out(self._line_prefix() + HORIZONTAL_RULE)
            self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> WalkStatus:
        if entering:
            self._cr()
            first_prefix = self._line_prefix()
            self._out(indent_text(node.content.rstrip("\n"), self._prefix.flatten(), first_prefix=first_prefix))
            self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_math_block(self, node: MathBlock, entering: bool) -> WalkStatus:
        if entering:
            self._cr()
            self._out(self._line_prefix() + MATH_FENCE + "\n")
            prefix = self._prefix.flatten()
            self._out(indent_text(node.literal.strip("\n"), prefix))
            self._out(prefix + MATH_FENCE)
            self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def visit_caption(self, node: Caption, entering: bool) -> WalkStatus:
        if not entering:
            self._cr()
            return WalkStatus.GO_TO_NEXT

        previous = prev_sibling(node)
        label = ""
        if isinstance(previous, BlockQuote):
            label = CAPTION_QUOTE_LABEL
        elif isinstance(previous, Table):
            label = CAPTION_TABLE_LABEL
        elif isinstance(previous, CodeBlock):
            label = CAPTION_FIGURE_LABEL
        self._cr()
        self._out(self._line_prefix() + label)
        return WalkStatus.GO_TO_NEXT

    def visit_caption_figure(self, node: CaptionFigure, entering: bool) -> WalkStatus:
        if not entering:
            self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _render_cell(self, cell: TableCell) -> str:
        return escape_table_cell(self._render_children(cell))

    def visit_table(self, node: Table, entering: bool) -> WalkStatus:
        """Render a Table node.

        Entering runs the measuring pass over the whole table; the walk then
        descends into the sections with the resulting layout in place.

        """
        if entering:
            layout = measure_table(node, self._render_cell)
            self._tables.append(TableContext(layout=layout))
            self._cr()
        else:
            self._tables.pop()
            self._end_block(node)
        return WalkStatus.GO_TO_NEXT

    def _enter_section(self, section: TableSection, entering: bool) -> WalkStatus:
        if entering and self._tables:
            self._tables[-1].section = section
        return WalkStatus.GO_TO_NEXT

    def visit_table_header(self, node: TableHeader, entering: bool) -> WalkStatus:
        return self._enter_section(TableSection.HEADER, entering)

    def visit_table_body(self, node: TableBody, entering: bool) -> WalkStatus:
        return self._enter_section(TableSection.BODY, entering)

    def visit_table_footer(self, node: TableFooter, entering: bool) -> WalkStatus:
        return self._enter_section(TableSection.FOOTER, entering)

    def visit_table_row(self, node: TableRow, entering: bool) -> WalkStatus:
        if not self._tables:
            return WalkStatus.GO_TO_NEXT
        table = self._tables[-1]

        if entering:
            table.start_row()
            if table.section is TableSection.FOOTER and prev_sibling(node) is None:
                self._out(self._line_prefix() + table.layout.rule(TABLE_FOOTER_RULE_CHAR) + "\n")
            return WalkStatus.GO_TO_NEXT

        self._out(self._line_prefix() + table.finish_row() + "\n")
        if table.section is TableSection.HEADER and is_last(node):
            self._out(self._prefix.flatten() + table.layout.rule(TABLE_HEADER_RULE_CHAR) + "\n")
        return WalkStatus.GO_TO_NEXT

    def visit_table_cell(self, node: TableCell, entering: bool) -> WalkStatus:
        if not self._tables:
            logger.debug("Table cell outside of a table; rendering its content inline")
            return WalkStatus.GO_TO_NEXT
        if entering:
            self._tables[-1].add_cell(self._render_cell(node))
        return WalkStatus.SKIP_CHILDREN

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text, entering: bool) -> WalkStatus:
        if entering:
            self._out(escape_text(node.literal))
        return WalkStatus.GO_TO_NEXT

    def visit_softbreak(self, node: Softbreak, entering: bool) -> WalkStatus:
        # Line breaks are chosen by the wrapper; keep the words apart.
        if entering:
            self._out(" ")
        return WalkStatus.GO_TO_NEXT

    def visit_hardbreak(self, node: Hardbreak, entering: bool) -> WalkStatus:
        if entering:
            self._out(" ")
        return WalkStatus.GO_TO_NEXT

    def visit_emph(self, node: Emph, entering: bool) -> WalkStatus:
        return self._inline_marker(entering, "*", "*")

    def visit_strong(self, node: Strong, entering: bool) -> WalkStatus:
        return self._inline_marker(entering, "**", "**")

    def visit_del(self, node: Del, entering: bool) -> WalkStatus:
        return self._inline_marker(entering, "~~", "~~")

    def visit_code(self, node: Code, entering: bool) -> WalkStatus:
        """Render a Code node.

        The delimiter is one backtick longer than the longest backtick run in
        the literal, and padded with a space if the literal starts or ends
        with a backtick.

        """
        if entering:
            longest = max((len(run) for run in _BACKTICK_RUN.findall(node.literal)), default=0)
            ticks = "`" * (longest + 1)
            pad = " " if node.literal.startswith("`") or node.literal.endswith("`") else ""
            self._out(f"{ticks}{pad}{node.literal}{pad}{ticks}")
        return WalkStatus.GO_TO_NEXT

    def visit_math(self, node: Math, entering: bool) -> WalkStatus:
        if entering:
            self._out(MATH_FENCE + node.literal + MATH_FENCE)
        return WalkStatus.GO_TO_NEXT

    def visit_subscript(self, node: Subscript, entering: bool) -> WalkStatus:
        if entering:
            self._out("~" + escape_text(node.literal) + "~")
        return WalkStatus.GO_TO_NEXT

    def visit_superscript(self, node: Superscript, entering: bool) -> WalkStatus:
        if entering:
            self._out("^" + escape_text(node.literal) + "^")
        return WalkStatus.GO_TO_NEXT

    def _link_target(self, destination: str, title: str) -> str:
        if title:
            return f'({destination} "{escape_title(title)}")'
        return f"({destination})"

    def visit_link(self, node: Link, entering: bool) -> WalkStatus:
        """Render a Link node.

        The label is rendered eagerly, so the walk must not descend into the
        children again.

        """
        if not entering:
            return WalkStatus.GO_TO_NEXT

        label = self._render_children(node)
        self._out(f"[{label}]" + self._link_target(node.destination, node.title))
        return WalkStatus.SKIP_CHILDREN

    def visit_image(self, node: Image, entering: bool) -> WalkStatus:
        if not entering:
            return WalkStatus.GO_TO_NEXT

        label = self._render_children(node)
        self._out(f"![{label}]" + self._link_target(node.destination, node.title))
        return WalkStatus.SKIP_CHILDREN

    def visit_html_span(self, node: HTMLSpan, entering: bool) -> WalkStatus:
        if entering:
            self._out(node.content)
        return WalkStatus.GO_TO_NEXT

    def visit_citation(self, node: Citation, entering: bool) -> WalkStatus:
        """Render a Citation node as ``[@key]``, several keys ``;``-separated."""
        if not entering:
            return WalkStatus.GO_TO_NEXT

        parts = []
        for i, destination in enumerate(node.destinations):
            kind = node.types[i] if i < len(node.types) else CitationType.INFORMATIVE
            suffix = node.suffixes[i] if i < len(node.suffixes) else ""
            part = "@" + _CITATION_MODIFIERS[kind] + destination
            if suffix:
                part += ", " + suffix
            parts.append(part)
        self._out("[" + "; ".join(parts) + "]")
        return WalkStatus.SKIP_CHILDREN

    def visit_cross_reference(self, node: CrossReference, entering: bool) -> WalkStatus:
        if not entering:
            return WalkStatus.GO_TO_NEXT

        self._out("(#" + node.destination + ")")
        return WalkStatus.SKIP_CHILDREN

    def visit_index(self, node: Index, entering: bool) -> WalkStatus:
        if not entering:
            return WalkStatus.GO_TO_NEXT

        self._out("(!")
        if node.primary:
            self._out("!")
        self._out(node.item)
        if node.subitem:
            self._out(", " + node.subitem)
        self._out(")")
        return WalkStatus.GO_TO_NEXT

    def visit_callout(self, node: Callout, entering: bool) -> WalkStatus:
        if entering:
            self._out("<<" + node.callout_id + ">>")
        return WalkStatus.GO_TO_NEXT

    # ------------------------------------------------------------------
    # Parser-generated back matter: regenerated by the parser, never emitted
    # ------------------------------------------------------------------

    def visit_bibliography(self, node: Bibliography, entering: bool) -> WalkStatus:
        return WalkStatus.SKIP_CHILDREN

    def visit_bibliography_item(self, node: BibliographyItem, entering: bool) -> WalkStatus:
        return WalkStatus.SKIP_CHILDREN

    def visit_document_index(self, node: DocumentIndex, entering: bool) -> WalkStatus:
        return WalkStatus.SKIP_CHILDREN

    def visit_index_letter(self, node: IndexLetter, entering: bool) -> WalkStatus:
        return WalkStatus.SKIP_CHILDREN

    def visit_index_item(self, node: IndexItem, entering: bool) -> WalkStatus:
        return WalkStatus.SKIP_CHILDREN

    def visit_index_sub_item(self, node: IndexSubItem, entering: bool) -> WalkStatus:
        return WalkStatus.SKIP_CHILDREN

    def visit_index_link(self, node: IndexLink, entering: bool) -> WalkStatus:
        return WalkStatus.SKIP_CHILDREN
