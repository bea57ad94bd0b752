#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mmarkfmt/renderers/buffer.py
"""In-memory output buffer with position bookkeeping.

The renderer writes everything it emits sequentially. Some handlers need to
look back at what their children produced (to re-wrap a paragraph or to
derive a heading's anchor), so the primary output target is an
:class:`OutputBuffer` that can report its length, return the text written
since a mark and cut itself back to that mark.

Any other object with a ``write(str)`` method is accepted as a restricted
output target; see :class:`TextWriter`.

"""

from __future__ import annotations

from typing import Any, Protocol


class TextWriter(Protocol):
    """Minimal output contract: sequential text writes."""

    def write(self, text: str) -> Any:
        """Append ``text`` to the output."""
        ...


class OutputBuffer:
    """Append-only, position-addressable text buffer.

    Parameters
    ----------
    initial : str, default = ""
        Initial content

    Examples
    --------
        >>> buf = OutputBuffer()
        >>> buf.write("# ")
        2
        >>> start = buf.mark()
        >>> buf.write("Title")
        5
        >>> buf.slice(start)
        'Title'
        >>> buf.truncate(start)
        >>> buf.getvalue()
        '# '

    """

    def __init__(self, initial: str = "") -> None:
        self._chunks: list[str] = [initial] if initial else []
        self._length = len(initial)

    def __len__(self) -> int:
        return self._length

    def write(self, text: str) -> int:
        """Append ``text`` and return the number of characters written."""
        if text:
            self._chunks.append(text)
            self._length += len(text)
        return len(text)

    def getvalue(self) -> str:
        """Return the whole buffer content."""
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def mark(self) -> int:
        """Return the current length, to be passed to :meth:`slice` or :meth:`truncate`."""
        return self._length

    def slice(self, mark: int) -> str:
        """Return everything written since ``mark``.

        Raises
        ------
        ValueError
            If ``mark`` is outside the buffer.

        """
        self._check_mark(mark)
        return self.getvalue()[mark:]

    def truncate(self, mark: int) -> None:
        """Discard everything written since ``mark``.

        Raises
        ------
        ValueError
            If ``mark`` is outside the buffer.

        """
        self._check_mark(mark)
        content = self.getvalue()[:mark]
        self._chunks = [content] if content else []
        self._length = mark

    def replace(self, text: str) -> None:
        """Replace the whole content with ``text``."""
        self._chunks = [text] if text else []
        self._length = len(text)

    def _check_mark(self, mark: int) -> None:
        if not 0 <= mark <= self._length:
            raise ValueError(f"Mark {mark} is outside the buffer (length {self._length})")
