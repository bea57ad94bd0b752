"""mmarkfmt - canonical formatting for mmark documents.

mmarkfmt takes the tree an mmark parser produces and writes it back as
normalized mmark: paragraphs re-flowed to a fixed width, a single marker per
list kind, aligned tables and fenced code blocks. Formatting the same tree
twice gives the same text, so the output is stable under version control.

Examples
--------
Render a document tree:

    >>> from mmarkfmt import render
    >>> from mmarkfmt.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, heading_id="intro", children=[Text("Intro")]),
    ...     Paragraph(children=[Text("Some text.")]),
    ... ])
    >>> print(render(doc), end="")
    # Intro
    <BLANKLINE>
    Some text.

Rendering into any writable object:

    >>> import io
    >>> from mmarkfmt import MmarkRenderer
    >>> out = io.StringIO()
    >>> MmarkRenderer().render(doc, out)

See Also
--------
mmarkfmt.ast : AST node definitions and the traversal driver
mmarkfmt.renderers : The renderer and its building blocks

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mmarkfmt requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from typing import TYPE_CHECKING, Any, Optional

from mmarkfmt.exceptions import (
    InvalidOptionsError,
    MmarkFmtError,
    RenderingError,
    UnsupportedNodeError,
    ValidationError,
)
from mmarkfmt.logging_utils import configure_logging, reset_logging
from mmarkfmt.options import BaseRendererOptions, MmarkRendererOptions
from mmarkfmt.renderers import MmarkRenderer, OutputBuffer

if TYPE_CHECKING:
    from mmarkfmt.ast import Document


def render(doc: "Document", options: Optional[MmarkRendererOptions] = None, **kwargs: Any) -> str:
    """Render a document tree to canonical mmark text.

    Parameters
    ----------
    doc : Document
        Parsed document to render
    options : MmarkRendererOptions, optional
        Rendering options. Defaults are used when omitted.
    **kwargs : Any
        Individual option overrides applied on top of ``options``
        (e.g. ``text_width=72``)

    Returns
    -------
    str
        The rendered document

    Raises
    ------
    UnsupportedNodeError
        If the tree contains a node the renderer has no handler for
    InvalidOptionsError
        If ``options`` is not a MmarkRendererOptions instance

    """
    if kwargs:
        options = (options or MmarkRendererOptions()).create_updated(**kwargs)
    return MmarkRenderer(options).render_to_string(doc)


__all__ = [
    "__version__",
    "render",
    "MmarkRenderer",
    "OutputBuffer",
    "BaseRendererOptions",
    "MmarkRendererOptions",
    # Logging
    "configure_logging",
    "reset_logging",
    # Exceptions
    "MmarkFmtError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "UnsupportedNodeError",
]
