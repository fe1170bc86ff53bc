"""Immutable cursor infrastructure for parser combinators.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor; a parser can never move another
      parser's position, so backtracking is just reusing an old Cursor
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Support:
    \\n is the line delimiter. CRLF text works because the \\n is still
    present; CR-only text reports everything on line 1.
"""

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable (text, offset) position marker.

    Invariant: ``0 <= offset <= len(text)``, checked on construction.
    advance() only moves forward and clamps to the end of the text.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    text: str
    offset: int = 0

    def __post_init__(self) -> None:
        """Validate the offset invariant.

        Raises:
            ValueError: If offset is negative or past the end of text
        """
        if not 0 <= self.offset <= len(self.text):
            msg = f"Cursor.offset must be in [0, {len(self.text)}], got {self.offset}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True if no input remains at this position."""
        return self.offset >= len(self.text)

    @property
    def current(self) -> str:
        """Character at the cursor.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.offset}"
            raise EOFError(msg)
        return self.text[self.offset]

    @property
    def remaining(self) -> str:
        """Unconsumed text from the cursor to the end."""
        return self.text[self.offset :]

    def advance(self, by: int = 1) -> "Cursor":
        """Return new cursor advanced by ``by`` characters.

        Args:
            by: Number of characters to advance (default: 1)

        Returns:
            New Cursor over the same text (original unchanged), clamped
            to the end of the text

        Raises:
            ValueError: If ``by`` is negative

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(3).offset
            3
            >>> cursor.offset
            0
        """
        if by < 0:
            msg = f"Cursor.advance() requires by >= 0, got {by}"
            raise ValueError(msg)
        return Cursor(self.text, min(self.offset + by, len(self.text)))

    def startswith(self, token: str) -> bool:
        """True if the remaining text begins with ``token``."""
        return self.text.startswith(token, self.offset)

    def slice_ahead(self, n: int) -> str:
        """Get up to n characters without advancing.

        Example:
            >>> Cursor("hello", 0).slice_ahead(3)
            'hel'
            >>> Cursor("hello", 3).slice_ahead(10)
            'lo'
        """
        return self.text[self.offset : self.offset + n]

    def slice_to(self, other: "Cursor") -> str:
        """Text consumed between this cursor and a later one over the same text."""
        return self.text[self.offset : other.offset]

    def span_while(self, predicate: Callable[[str], bool]) -> int:
        """Length of the longest run of characters satisfying ``predicate``.

        Example:
            >>> Cursor("123abc", 0).span_while(str.isdigit)
            3
        """
        end = self.offset
        text = self.text
        while end < len(text) and predicate(text[end]):
            end += 1
        return end - self.offset

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> source = "line1\\nline2\\nline3"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 8).compute_line_col()
            (2, 3)
        """
        line = self.text.count("\n", 0, self.offset) + 1
        last_newline = self.text.rfind("\n", 0, self.offset)
        col = self.offset - last_newline if last_newline >= 0 else self.offset + 1
        return (line, col)

