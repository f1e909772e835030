"""Immutable read position over a rule string.

Scanning never mutates state: every step yields a fresh Cursor, and end of
input is a property to test rather than a sentinel character.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Cursor"]

# CLDR data occasionally wraps long rules, so line breaks separate tokens too.
_WHITESPACE: str = " \t\n\r"


@dataclass(frozen=True, slots=True)
class Cursor:
    """Offset into a rule string.

    Example:
        >>> start = Cursor("n = 1", 0)
        >>> start.advance().skip_whitespace().current
        '='
        >>> start.current
        'n'
        >>> Cursor("n", 1).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: At end of input
        """
        if self.is_eof:
            msg = f"No character at position {self.pos}: end of rule"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character ``offset`` places ahead, or None past the end."""
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else None

    def advance(self, count: int = 1) -> "Cursor":
        """Cursor ``count`` characters further on, stopping at the end."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def skip_whitespace(self) -> "Cursor":
        end = self.pos
        while end < len(self.source) and self.source[end] in _WHITESPACE:
            end += 1
        return Cursor(self.source, end)

    def take_while(self, chars: str) -> tuple[str, "Cursor"]:
        """Split off the longest prefix made only of ``chars``.

        Returns:
            The consumed text and the cursor just past it
        """
        end = self.pos
        while end < len(self.source) and self.source[end] in chars:
            end += 1
        return self.source[self.pos : end], Cursor(self.source, end)
