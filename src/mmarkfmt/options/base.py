#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/options/base.py
"""Base classes for renderer options.

Options are frozen dataclasses; each field carries ``help`` and
``importance`` metadata describing it for documentation and host
applications.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from enum import IntFlag
from typing import TYPE_CHECKING, Any, Callable, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

if TYPE_CHECKING:
    from mmarkfmt.ast.nodes import Node
    from mmarkfmt.ast.walk import WalkStatus

RenderNodeHook = Callable[[Any, "Node", bool], tuple["WalkStatus", bool]]
"""Override called as ``hook(writer, node, entering)`` before built-in dispatch.

It returns ``(status, handled)``; when ``handled`` is true the status is used
as-is and the renderer does nothing else for that node and direction.
"""


class Flags(IntFlag):
    """Optional behaviors of the renderer."""

    NONE = 0
    COMMON = NONE


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    flags : Flags, default=Flags.NONE
        Optional renderer behaviors
    render_node_hook : RenderNodeHook or None, default=None
        Caller-supplied override consulted before built-in rendering of
        every node, on entering and on exiting

    """

    flags: Flags = field(
        default=Flags.NONE,
        metadata={"help": "Optional renderer behavior flags", "importance": "advanced"},
    )
    render_node_hook: Optional[RenderNodeHook] = field(
        default=None,
        metadata={
            "help": "Callable (writer, node, entering) -> (status, handled) overriding built-in rendering",
            "importance": "advanced",
        },
    )
