#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/utils/text.py
"""Text processing utilities for heading anchors.

Functions
---------
sanitize_anchor_name : Derive the default heading id the parser assigns

Examples
--------
    >>> from mmarkfmt.utils.text import sanitize_anchor_name
    >>> sanitize_anchor_name("My Heading Title")
    'my-heading-title'

"""

from __future__ import annotations

from mmarkfmt.constants import EMPTY_ANCHOR_NAME


def sanitize_anchor_name(text: str) -> str:
    """Create the default anchor id the parser derives from heading text.

    This reproduces the parser's slug so the renderer can tell whether a
    heading's id was assigned automatically (and may be omitted) or given
    explicitly (and must be kept):

    - Letters and digits are kept and lower-cased
    - Any run of other characters between two kept characters becomes a
      single hyphen
    - Leading and trailing runs are dropped
    - An empty result becomes ``"empty"``

    Parameters
    ----------
    text : str
        Rendered heading text

    Returns
    -------
    str
        Anchor id

    Examples
    --------
        >>> sanitize_anchor_name("Hello, World!")
        'hello-world'
        >>> sanitize_anchor_name("  API v2.0 ")
        'api-v2-0'
        >>> sanitize_anchor_name("***")
        'empty'

    """
    anchor: list[str] = []
    future_dash = False
    for char in text:
        if char.isalpha() or char.isdigit():
            if future_dash and anchor:
                anchor.append("-")
            future_dash = False
            anchor.append(char.lower())
        else:
            future_dash = True

    if not anchor:
        return EMPTY_ANCHOR_NAME
    return "".join(anchor)
