"""A cursor that walks source text while tracking line, column and offset."""

from __future__ import annotations

from .diagnostics import Position

__all__ = ["END", "TextCursor"]

#: What :meth:`TextCursor.peek` returns once the text is exhausted.
END = ""

_WHITESPACE = frozenset(" \t\n\v\f\r")


class TextCursor:
    """Reads a text one character at a time, counting lines and columns.

    A ``\\r\\n`` pair counts as a single line break.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._line = 1
        self._pos = 1
        self._index = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def line(self) -> int:
        return self._line

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def index(self) -> int:
        return self._index

    def peek(self) -> str:
        """The current character, or :data:`END` at the end of the text."""
        if self.is_end():
            return END
        return self._text[self._index]

    def is_end(self) -> bool:
        return self._index >= len(self._text)

    def is_whitespace(self) -> bool:
        return not self.is_end() and self._text[self._index] in _WHITESPACE

    def is_newline(self) -> bool:
        """True at ``\\n`` or at the ``\\r`` of a ``\\r\\n`` pair."""
        if self.is_end():
            return False
        ch = self._text[self._index]
        if ch == "\r" and self._index + 1 < len(self._text):
            return self._text[self._index + 1] == "\n"
        return ch == "\n"

    def advance(self) -> Position:
        """Move one character forward and return the position just left.

        At the end of the text the cursor stays where it is.
        """
        before = self.snapshot()
        if self.is_end():
            return before
        if self.is_newline():
            if self._text[self._index] == "\r":
                self._index += 1
            self._line += 1
            self._pos = 1
        else:
            self._pos += 1
        self._index += 1
        return before

    def snapshot(self) -> Position:
        """The current location as an immutable :class:`Position`."""
        return Position(self._line, self._pos, self._index)