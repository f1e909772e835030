"""Tests for the plural rule tokenizer."""

from __future__ import annotations

import pytest

from pluralengine.diagnostics import ParseErrorKind, RuleParseError
from pluralengine.syntax import Lexer, Token, TokenKind, tokenize


def kinds(source: str) -> list[TokenKind]:
    return [token.kind for token in tokenize(source)]


class TestTokenize:
    """Token classes and positions."""

    def test_relation_tokens(self) -> None:
        """A relation splits into operand, operator and range tokens."""
        tokens = tokenize("n % 10 = 3..4")

        assert [t.text for t in tokens] == ["n", "%", "10", "=", "3", "..", "4"]
        assert [t.kind for t in tokens] == [
            TokenKind.WORD,
            TokenKind.PERCENT,
            TokenKind.NUMBER,
            TokenKind.EQUALS,
            TokenKind.NUMBER,
            TokenKind.RANGE,
            TokenKind.NUMBER,
        ]

    def test_positions_are_character_offsets(self) -> None:
        """Token positions are offsets into the source."""
        tokens = tokenize("i = 1 and v != 0")
        assert [t.position for t in tokens] == [0, 2, 4, 6, 10, 12, 15]
        assert tokens[-2].text == "!="
        assert tokens[-2].end == 14

    def test_no_whitespace_needed_around_punctuation(self) -> None:
        """'n%10=3' lexes like 'n % 10 = 3'."""
        assert kinds("n%10=1,3..5") == [
            TokenKind.WORD,
            TokenKind.PERCENT,
            TokenKind.NUMBER,
            TokenKind.EQUALS,
            TokenKind.NUMBER,
            TokenKind.COMMA,
            TokenKind.NUMBER,
            TokenKind.RANGE,
            TokenKind.NUMBER,
        ]

    def test_keywords_are_words(self) -> None:
        """Keywords and operands are both WORD tokens."""
        tokens = tokenize("n mod 10 not within 1..2 or i is not 3")
        words = [t.text for t in tokens if t.kind is TokenKind.WORD]
        assert words == ["n", "mod", "not", "within", "or", "i", "is", "not"]

    def test_line_breaks_and_tabs_separate_tokens(self) -> None:
        """Tabs and newlines separate tokens."""
        assert [t.text for t in tokenize("i = 1\n\tand v = 0")] == [
            "i", "=", "1", "and", "v", "=", "0",
        ]

    def test_scanning_stops_at_sample_marker(self) -> None:
        """Lexing ends at the first '@'."""
        tokens = tokenize("i = 1 @integer 1, 2 ~ junk")
        assert [t.text for t in tokens] == ["i", "=", "1"]

    def test_empty_and_sample_only_sources(self) -> None:
        """No condition text means no tokens."""
        assert tokenize("") == ()
        assert tokenize("   ") == ()
        assert tokenize(" @integer 0, 2~16, …") == ()

    def test_lexer_position_marks_condition_end(self) -> None:
        """Lexer.position is where the condition text ends."""
        lexer = Lexer("i = 1 @integer 1")
        list(lexer)
        assert lexer.position == 6

    def test_token_is_immutable(self) -> None:
        """Tokens are frozen."""
        token = Token(TokenKind.NUMBER, "1", 0)
        with pytest.raises(AttributeError):
            token.text = "2"  # type: ignore[misc]


class TestLexerErrors:
    """Characters outside the grammar fail with their offset."""

    @pytest.mark.parametrize(
        ("source", "position"),
        [
            ("n = 1 & v = 0", 6),
            ("n ! 1", 2),
            ("n = 1.5", 5),
            ("n = -1", 4),
            ("n = ١", 4),  # Arabic-Indic digit one
            ("é = 1", 0),
        ],
    )
    def test_unexpected_character(self, source: str, position: int) -> None:
        """Characters outside the grammar are rejected where they appear."""
        with pytest.raises(RuleParseError) as exc_info:
            tokenize(source)

        assert exc_info.value.kind is ParseErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.position == position
        assert exc_info.value.source == source

    def test_single_dot_is_rejected(self) -> None:
        """A lone '.' is not a token."""
        with pytest.raises(RuleParseError) as exc_info:
            tokenize("n = 1.")
        assert exc_info.value.position == 5

    def test_double_equals_is_two_tokens(self) -> None:
        """'==' lexes fine; the parser rejects it."""
        assert kinds("n == 1")[1:3] == [TokenKind.EQUALS, TokenKind.EQUALS]
