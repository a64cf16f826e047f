"""Immutable cursor over ICU message text.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("{name}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        'n'
        >>> cursor.current  # Original unchanged (immutability)
        '{'
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of message at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None if beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def starts_with(self, prefix: str) -> bool:
        """True if the remaining text starts with prefix."""
        return self.source.startswith(prefix, self.pos)

    def expect(self, text: str) -> "Cursor | None":
        """Consume text if it is next, return None otherwise.

        Example:
            >>> Cursor("offset:1", 0).expect("offset")
            Cursor(source='offset:1', pos=6)
            >>> Cursor("one", 0).expect("=") is None
            True
        """
        if self.starts_with(text):
            return self.advance(len(text))
        return None

    def skip_whitespace(self) -> "Cursor":
        """Skip Unicode white space (ICU Pattern_White_Space and friends)."""
        pos = self.pos
        source = self.source
        while pos < len(source) and source[pos].isspace():
            pos += 1
        return Cursor(source, pos) if pos != self.pos else self

    def slice_to(self, end_pos: int) -> str:
        """Source text from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parsed value plus the cursor positioned after it.

    Attributes:
        value: Parsed value
        cursor: Cursor after the parsed text
    """

    value: T
    cursor: Cursor
