#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/options/__init__.py
"""Renderer configuration options."""

from mmarkfmt.options.base import BaseRendererOptions, CloneFrozenMixin, Flags, RenderNodeHook
from mmarkfmt.options.mmark import MmarkRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "Flags",
    "MmarkRendererOptions",
    "RenderNodeHook",
]
