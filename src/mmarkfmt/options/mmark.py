#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/options/mmark.py
"""Configuration options for the canonical mmark renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from mmarkfmt.constants import DEFAULT_TEXT_WIDTH
from mmarkfmt.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MmarkRendererOptions(BaseRendererOptions):
    """Configuration options for rendering an AST back to mmark.

    Parameters
    ----------
    text_width : int, default=80
        Maximum line width, current prefix included, for wrapped paragraphs.
        A single unbreakable token longer than this gets a line of its own.

    Examples
    --------
        >>> options = MmarkRendererOptions(text_width=72)
        >>> options.create_updated(text_width=100).text_width
        100

    """

    text_width: int = field(
        default=DEFAULT_TEXT_WIDTH,
        metadata={
            "help": "Maximum width of wrapped paragraph lines, prefix included",
            "type": int,
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If text_width is not positive.

        """
        if self.text_width <= 0:
            raise ValueError(f"text_width must be positive, got {self.text_width}")
