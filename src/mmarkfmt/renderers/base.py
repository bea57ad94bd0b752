#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from. A
renderer is driven event by event: :meth:`BaseRenderer.render` resets the
renderer with :meth:`~BaseRenderer.render_header`, walks the document calling
:meth:`~BaseRenderer.render_node` on every enter and exit event, and finishes
with :meth:`~BaseRenderer.render_footer`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from mmarkfmt.ast.walk import WalkStatus, walk
from mmarkfmt.exceptions import InvalidOptionsError
from mmarkfmt.options.base import BaseRendererOptions
from mmarkfmt.renderers.buffer import OutputBuffer, TextWriter

if TYPE_CHECKING:
    from mmarkfmt.ast.nodes import Document, Node


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from mmarkfmt.ast import WalkStatus
        >>> from mmarkfmt.renderers.base import BaseRenderer
        >>>
        >>> class NullRenderer(BaseRenderer):
        ...     def render_header(self, writer, doc):
        ...         pass
        ...
        ...     def render_node(self, writer, node, entering):
        ...         return WalkStatus.GO_TO_NEXT
        ...
        ...     def render_footer(self, writer, doc):
        ...         pass

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @abstractmethod
    def render_header(self, writer: TextWriter, doc: Document) -> None:
        """Prepare for a new document; called before the walk starts."""
        pass

    @abstractmethod
    def render_node(self, writer: TextWriter, node: Node, entering: bool) -> WalkStatus:
        """Render one enter or exit event of ``node`` to ``writer``."""
        pass

    @abstractmethod
    def render_footer(self, writer: TextWriter, doc: Document) -> None:
        """Finish the document; called after the walk completes."""
        pass

    def render(self, doc: Document, output: TextWriter) -> None:
        """Render ``doc`` into ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : TextWriter
            Output destination. An :class:`OutputBuffer` gets the complete
            canonical output; any other object with a ``write(str)`` method is
            written to sequentially, and features that need to revisit
            already written output are skipped.

        Raises
        ------
        RenderingError
            If rendering fails

        """
        self.render_header(output, doc)
        walk(doc, lambda node, entering: self.render_node(output, node, entering))
        self.render_footer(output, doc)

    def render_to_string(self, doc: Document) -> str:
        """Render ``doc`` into a fresh :class:`OutputBuffer` and return its content.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        buffer = OutputBuffer()
        self.render(doc, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
