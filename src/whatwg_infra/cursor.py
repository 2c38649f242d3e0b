"""Immutable cursor over a code point string.

The Infra Standard describes its scanning algorithms in terms of a
"position variable" that walks an input string. This module models that
variable as an immutable cursor, so every scan must rebind the cursor to make
progress and can never silently loop in place.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Positions are code point indices (Python str indices), never UTF-16
      code unit offsets

Line Ending Support:
    skip_line_end() treats CR LF as ONE line ending and consumes both code
    points together; a lone CR or a lone LF is one line ending each.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from whatwg_infra.constants import CR, LF

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position tracker over a code point string.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if the position is at or past the end of the source."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get the code point at the current position.

        Returns:
            Single code point string

        Raises:
            EOFError: If at end of input. Check is_eof first.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at the code point at pos + offset without advancing.

        Returns:
            Code point at pos + offset, or None if beyond EOF

        Example:
            >>> Cursor("\\r\\n", 0).peek(1)
            '\\n'
            >>> Cursor("\\r", 0).peek(1) is None
            True
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> Cursor:
        """Return a new cursor advanced by count code points.

        The new position is clamped to the end of the source.
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract the source from the current position to end_pos (exclusive).

        Example:
            >>> start = Cursor("hello world", 0)
            >>> end = start.skip_while(lambda ch: ch != " ")
            >>> start.slice_to(end.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def skip_while(self, predicate: Callable[[str], bool]) -> Cursor:
        """Advance past every consecutive code point satisfying predicate.

        Args:
            predicate: Test applied to one code point at a time

        Returns:
            Cursor at the first code point failing predicate, or at EOF.
            The predicate is never called on a position past the end.

        Example:
            >>> Cursor("   x", 0).skip_while(lambda ch: ch == " ").pos
            3
            >>> Cursor("x", 0).skip_while(lambda ch: ch == " ").pos
            0
        """
        source = self.source
        end = len(source)
        pos = self.pos
        while pos < end and predicate(source[pos]):
            pos += 1
        if pos == self.pos:
            return self
        return Cursor(source, pos)

    def skip_line_end(self) -> Cursor:
        """Skip an LF, CR, or CR LF line ending.

        Returns:
            Cursor past the line ending, or unchanged if not at a line end.

        Example:
            >>> Cursor("a\\r\\nb", 1).skip_line_end().pos
            3
            >>> Cursor("a\\rb", 1).skip_line_end().pos
            2
        """
        if self.is_eof:
            return self
        if self.current == CR:
            cursor = self.advance()
            # CR LF is one line ending
            if not cursor.is_eof and cursor.current == LF:
                return cursor.advance()
            return cursor
        if self.current == LF:
            return self.advance()
        return self
