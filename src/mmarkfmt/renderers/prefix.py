#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/renderers/prefix.py
"""Left-margin bookkeeping for nested block constructs."""

from __future__ import annotations

from typing import Iterator


class PrefixStack:
    """Stack of line prefixes contributed by the open nesting constructs.

    Block quotes push ``"> "``, asides ``"A> "`` and lists three spaces; the
    concatenation of all entries, in push order, is the left margin of every
    line emitted at the current depth. Callers pair every :meth:`push` with a
    :meth:`pop` when the construct closes.

    Examples
    --------
        >>> stack = PrefixStack()
        >>> stack.push("> ")
        >>> stack.push("   ")
        >>> stack.push("A> ")
        >>> stack.flatten()
        '>    A> '
        >>> stack.length()
        8
        >>> stack.pop()
        'A> '

    """

    def __init__(self) -> None:
        self._entries: list[str] = []

    def push(self, prefix: str) -> None:
        """Open a nesting level contributing ``prefix``."""
        self._entries.append(prefix)

    def pop(self) -> str:
        """Close the innermost nesting level and return its prefix.

        Raises
        ------
        IndexError
            If the stack is empty.

        """
        if not self._entries:
            raise IndexError("pop from an empty prefix stack")
        return self._entries.pop()

    def flatten(self) -> str:
        """Return the concatenated prefix."""
        return "".join(self._entries)

    def length(self) -> int:
        """Return the length of the concatenated prefix."""
        return sum(len(entry) for entry in self._entries)

    @property
    def depth(self) -> int:
        """Number of open nesting levels."""
        return len(self._entries)

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"PrefixStack({self._entries!r})"
