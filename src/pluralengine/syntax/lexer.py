"""Tokenizer for CLDR plural rule conditions.

Splits the condition part of a rule string into words, numbers and
punctuation. Scanning stops at the sample marker ``@``; the sample
annotation is handled by the parser and never reaches the token stream.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from pluralengine.constants import SAMPLE_MARKER
from pluralengine.diagnostics import ErrorTemplate, ParseErrorKind, RuleParseError

from .cursor import Cursor

__all__ = ["Lexer", "Token", "TokenKind", "tokenize"]

# ASCII digits only. str.isdigit() accepts superscripts and other scripts
# whose digits int() would either reject or silently reinterpret.
_ASCII_DIGITS: str = "0123456789"

_ASCII_LETTERS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class TokenKind(StrEnum):
    """Lexical token classes of the rule grammar."""

    WORD = "word"
    """Operand name or keyword (and, or, mod, is, not, in, within)"""

    NUMBER = "number"
    """Unsigned integer literal"""

    EQUALS = "="
    NOT_EQUALS = "!="
    PERCENT = "%"
    COMMA = ","
    RANGE = ".."


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical token.

    Attributes:
        kind: Token class
        text: Exact source text of the token
        position: Character offset of the token's first character
    """

    kind: TokenKind
    text: str
    position: int

    @property
    def end(self) -> int:
        """Offset one past the token's last character."""
        return self.position + len(self.text)


_PUNCTUATION: dict[str, TokenKind] = {
    "=": TokenKind.EQUALS,
    "%": TokenKind.PERCENT,
    ",": TokenKind.COMMA,
}


class Lexer:
    """Iterator over the tokens of a rule condition.

    Example:
        >>> [t.text for t in Lexer("n % 10 = 3..4 @integer 3")]
        ['n', '%', '10', '=', '3', '..', '4']

    Raises:
        RuleParseError: UNEXPECTED_TOKEN on a character outside the grammar
    """

    __slots__ = ("_cursor",)

    def __init__(self, source: str) -> None:
        self._cursor = Cursor(source, 0)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        cursor = self._cursor.skip_whitespace()
        if cursor.is_eof or cursor.current == SAMPLE_MARKER:
            self._cursor = cursor
            raise StopIteration

        token, cursor = self._scan(cursor)
        self._cursor = cursor
        return token

    @property
    def position(self) -> int:
        """Offset where scanning resumes (end of condition once exhausted)."""
        return self._cursor.pos

    @staticmethod
    def _scan(cursor: Cursor) -> tuple[Token, Cursor]:
        start = cursor.pos
        ch = cursor.current

        if ch in _ASCII_LETTERS:
            text, cursor = cursor.take_while(_ASCII_LETTERS)
            return Token(TokenKind.WORD, text, start), cursor

        if ch in _ASCII_DIGITS:
            text, cursor = cursor.take_while(_ASCII_DIGITS)
            return Token(TokenKind.NUMBER, text, start), cursor

        if ch in _PUNCTUATION:
            return Token(_PUNCTUATION[ch], ch, start), cursor.advance()

        if ch == "!" and cursor.peek(1) == "=":
            return Token(TokenKind.NOT_EQUALS, "!=", start), cursor.advance(2)

        if ch == "." and cursor.peek(1) == ".":
            return Token(TokenKind.RANGE, "..", start), cursor.advance(2)

        diagnostic = ErrorTemplate.unexpected_token(cursor.source, start, ch)
        raise RuleParseError(
            diagnostic,
            kind=ParseErrorKind.UNEXPECTED_TOKEN,
            position=start,
            source=cursor.source,
        )


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize the condition part of a rule string.

    Args:
        source: Rule string; anything from ``@`` on is ignored

    Returns:
        Tuple of tokens in source order

    Raises:
        RuleParseError: On a character that is not part of the grammar
    """
    return tuple(Lexer(source))
