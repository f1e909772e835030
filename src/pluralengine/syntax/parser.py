"""Recursive-descent parser for CLDR plural rule strings.

Grammar (UTS #35, Language Plural Rules):

    condition      := and_condition ('or' and_condition)*
    and_condition  := relation ('and' relation)*
    relation       := expr ['not'] ('is' ['not'] value | 'in' range_list
                      | '=' range_list | '!=' range_list | 'within' range_list)
    expr           := operand [('mod' | '%') value]
    operand        := 'n' | 'i' | 'f' | 't' | 'v' | 'w' | 'c' | 'e'
    range_list     := (range | value) (',' (range | value))*
    range          := value '..' value
    value          := digit+

    samples        := ['@integer' sample_list] ['@decimal' sample_list]
    sample_list    := sample_range (',' sample_range)* [',' ('…' | '...')]
    sample_range   := sample_value ['~' sample_value]
    sample_value   := digit+ ['.' digit+] [('c' | 'e') digit+]

``and`` binds tighter than ``or``. Samples are informative: they are
validated and returned by parse_rule() but never affect evaluation.

Every failure raises RuleParseError carrying a ParseErrorKind and the
character offset of the problem. Nothing is ever recovered: a rule that
cannot be parsed has no meaning.

Python 3.13+. Zero external dependencies.
"""

from typing import NoReturn

from pluralengine.constants import (
    MAX_INTEGER_OPERAND,
    MAX_RULE_LENGTH,
    SAMPLE_ELLIPSES,
    SAMPLE_MARKER,
)
from pluralengine.diagnostics import ErrorTemplate, ParseErrorKind, RuleParseError
from pluralengine.enums import Operand, RelationOperator

from .ast import (
    AndCondition,
    Condition,
    RangeList,
    Relation,
    Rule,
    SampleList,
    SampleRange,
    ValueRange,
)
from .cursor import Cursor
from .lexer import Lexer, Token, TokenKind

__all__ = ["parse_condition", "parse_rule"]

_ASCII_DIGITS: str = "0123456789"
_ASCII_LETTERS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_MAX_LITERAL_DIGITS: int = len(str(MAX_INTEGER_OPERAND))

_EXPECT_OPERATOR: tuple[str, ...] = ("'is'", "'in'", "'within'", "'='", "'!='")
_EXPECT_CONTINUATION: tuple[str, ...] = ("'and'", "'or'", "','")


def _check_length(source: str) -> None:
    if len(source) > MAX_RULE_LENGTH:
        diagnostic = ErrorTemplate.unexpected_token(
            source[:MAX_RULE_LENGTH], MAX_RULE_LENGTH, source[MAX_RULE_LENGTH]
        )
        raise RuleParseError(
            diagnostic,
            kind=ParseErrorKind.UNEXPECTED_TOKEN,
            position=MAX_RULE_LENGTH,
            source=source,
        )


class _ConditionParser:
    """Parser over the token stream of one condition."""

    __slots__ = ("_end", "_index", "_source", "_tokens")

    def __init__(self, source: str) -> None:
        lexer = Lexer(source)
        self._source = source
        self._tokens: tuple[Token, ...] = tuple(lexer)
        self._end = lexer.position
        self._index = 0

    @property
    def end(self) -> int:
        """Offset where the condition ends (sample marker or end of source)."""
        return self._end

    def parse(self) -> Condition:
        if not self._tokens:
            return Condition.always()

        groups = [self._and_condition()]
        while self._accept_word("or"):
            groups.append(self._and_condition())

        token = self._peek()
        if token is not None:
            raise self._unexpected(token, _EXPECT_CONTINUATION)
        return Condition(tuple(groups))

    # ------------------------------------------------------------------
    # Grammar productions
    # ------------------------------------------------------------------

    def _and_condition(self) -> AndCondition:
        relations = [self._relation()]
        while self._accept_word("and"):
            relations.append(self._relation())
        return AndCondition(tuple(relations))

    def _relation(self) -> Relation:
        operand, modulus = self._expr()
        negated = self._accept_word("not")
        token = self._next(_EXPECT_OPERATOR)

        match token.kind, token.text:
            case TokenKind.WORD, "is":
                if self._accept_word("not"):
                    if negated:
                        raise self._unexpected(self._tokens[self._index - 1], ("value",))
                    negated = True
                value = self._value(self._number_token())
                return Relation(
                    operand,
                    RelationOperator.IS,
                    (ValueRange.single(value),),
                    modulus,
                    negated,
                )
            case TokenKind.WORD, "in":
                operator = RelationOperator.IN
            case TokenKind.WORD, "within":
                operator = RelationOperator.WITHIN
            case (TokenKind.EQUALS | TokenKind.NOT_EQUALS), _:
                operator = RelationOperator.IN
                # "not !=" cancels out
                negated = negated != (token.kind is TokenKind.NOT_EQUALS)
            case _:
                raise self._unexpected(token, _EXPECT_OPERATOR)

        return Relation(operand, operator, self._range_list(), modulus, negated)

    def _expr(self) -> tuple[Operand, int | None]:
        token = self._next(("operand",))
        if token.kind is not TokenKind.WORD:
            raise self._unexpected(token, ("operand",))
        try:
            operand = Operand(token.text)
        except ValueError:
            diagnostic = ErrorTemplate.invalid_operand(self._source, token.position, token.text)
            raise RuleParseError(
                diagnostic,
                kind=ParseErrorKind.INVALID_OPERAND,
                position=token.position,
                source=self._source,
            ) from None

        if not (self._accept_word("mod") or self._accept(TokenKind.PERCENT)):
            return operand, None

        modulus_token = self._number_token()
        modulus = self._value(modulus_token)
        if modulus == 0:
            raise self._invalid_number(modulus_token, "modulus must be positive")
        return operand, modulus

    def _range_list(self) -> RangeList:
        items = [self._range_item()]
        while self._accept(TokenKind.COMMA):
            items.append(self._range_item())
        return tuple(items)

    def _range_item(self) -> ValueRange:
        lower = self._value(self._number_token())
        if not self._accept(TokenKind.RANGE):
            return ValueRange.single(lower)

        upper_token = self._number_token()
        upper = self._value(upper_token)
        if upper < lower:
            raise self._invalid_number(upper_token, "range upper bound is below its lower bound")
        return ValueRange(lower, upper)

    def _value(self, token: Token) -> int:
        # Length check first: int() refuses very long digit strings outright.
        digits = token.text.lstrip("0")
        if len(digits) > _MAX_LITERAL_DIGITS or int(token.text) > MAX_INTEGER_OPERAND:
            raise self._invalid_number(token, "literal exceeds 64-bit range")
        return int(token.text)

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Token | None:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _next(self, expected: tuple[str, ...]) -> Token:
        token = self._peek()
        if token is None:
            diagnostic = ErrorTemplate.unexpected_end(self._source, self._end, expected)
            raise RuleParseError(
                diagnostic,
                kind=ParseErrorKind.UNEXPECTED_END,
                position=self._end,
                source=self._source,
            )
        self._index += 1
        return token

    def _accept(self, kind: TokenKind) -> bool:
        token = self._peek()
        if token is not None and token.kind is kind:
            self._index += 1
            return True
        return False

    def _accept_word(self, word: str) -> bool:
        token = self._peek()
        if token is not None and token.kind is TokenKind.WORD and token.text == word:
            self._index += 1
            return True
        return False

    def _number_token(self) -> Token:
        token = self._next(("number",))
        if token.kind is not TokenKind.NUMBER:
            raise self._unexpected(token, ("number",))
        return token

    def _unexpected(self, token: Token, expected: tuple[str, ...]) -> RuleParseError:
        diagnostic = ErrorTemplate.unexpected_token(
            self._source, token.position, token.text, expected
        )
        return RuleParseError(
            diagnostic,
            kind=ParseErrorKind.UNEXPECTED_TOKEN,
            position=token.position,
            source=self._source,
        )

    def _invalid_number(self, token: Token, reason: str) -> RuleParseError:
        diagnostic = ErrorTemplate.invalid_number(
            self._source, token.position, token.text, reason
        )
        return RuleParseError(
            diagnostic,
            kind=ParseErrorKind.INVALID_NUMBER,
            position=token.position,
            source=self._source,
        )


class _SampleParser:
    """Validates the ``@integer`` / ``@decimal`` annotation of a rule."""

    __slots__ = ("_source",)

    def __init__(self, source: str) -> None:
        self._source = source

    def parse(self, start: int) -> tuple[SampleList | None, SampleList | None]:
        integer: SampleList | None = None
        decimal: SampleList | None = None
        cursor = Cursor(self._source, start)

        while True:
            cursor = cursor.skip_whitespace()
            if cursor.is_eof:
                return integer, decimal

            keyword, after = "", cursor
            if cursor.current == SAMPLE_MARKER:
                keyword, after = cursor.advance().take_while(_ASCII_LETTERS)
            if keyword == "integer" and integer is None and decimal is None:
                integer, cursor = self._sample_list(after)
            elif keyword == "decimal" and decimal is None:
                decimal, cursor = self._sample_list(after)
            else:
                found = f"{SAMPLE_MARKER}{keyword}" if keyword else cursor.current
                raise self._error(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    cursor.pos,
                    found,
                    ("'@integer'", "'@decimal'"),
                )

    def _sample_list(self, cursor: Cursor) -> tuple[SampleList, Cursor]:
        ranges: list[SampleRange] = []
        open_ended = False

        while True:
            cursor = cursor.skip_whitespace()
            ellipsis = self._ellipsis_at(cursor)
            if ellipsis is not None and ranges:
                cursor = cursor.advance(len(ellipsis))
                open_ended = True
                break

            lower, cursor = self._sample_value(cursor)
            upper = lower
            cursor = cursor.skip_whitespace()
            if not cursor.is_eof and cursor.current == "~":
                upper, cursor = self._sample_value(cursor.advance().skip_whitespace())
                cursor = cursor.skip_whitespace()
            ranges.append(SampleRange(lower, upper))

            if cursor.is_eof or cursor.current != ",":
                break
            cursor = cursor.advance()

        return SampleList(tuple(ranges), open_ended), cursor

    def _sample_value(self, cursor: Cursor) -> tuple[str, Cursor]:
        start = cursor
        digits, cursor = cursor.take_while(_ASCII_DIGITS)
        if not digits:
            self._fail_value(cursor)
        if cursor.peek() == ".":
            digits, cursor = cursor.advance().take_while(_ASCII_DIGITS)
            if not digits:
                self._fail_value(cursor)
        if cursor.peek() in ("c", "e"):
            digits, cursor = cursor.advance().take_while(_ASCII_DIGITS)
            if not digits:
                self._fail_value(cursor)
        return start.source[start.pos : cursor.pos], cursor

    def _fail_value(self, cursor: Cursor) -> NoReturn:
        if cursor.is_eof:
            raise self._error(ParseErrorKind.UNEXPECTED_END, cursor.pos, "", ("sample value",))
        raise self._error(
            ParseErrorKind.UNEXPECTED_TOKEN, cursor.pos, cursor.current, ("sample value",)
        )

    @staticmethod
    def _ellipsis_at(cursor: Cursor) -> str | None:
        for ellipsis in SAMPLE_ELLIPSES:
            if cursor.source.startswith(ellipsis, cursor.pos):
                return ellipsis
        return None

    def _error(
        self,
        kind: ParseErrorKind,
        position: int,
        found: str,
        expected: tuple[str, ...],
    ) -> RuleParseError:
        if kind is ParseErrorKind.UNEXPECTED_END:
            diagnostic = ErrorTemplate.unexpected_end(self._source, position, expected)
        else:
            diagnostic = ErrorTemplate.unexpected_token(self._source, position, found, expected)
        return RuleParseError(diagnostic, kind=kind, position=position, source=self._source)


def parse_condition(source: str) -> Condition:
    """Parse the condition of a rule string.

    The sample annotation (from ``@`` on) is ignored without validation.

    Args:
        source: Rule string, e.g. ``"n % 10 = 1 and n % 100 != 11"``

    Returns:
        Parsed Condition; the always-true empty Condition for empty input

    Raises:
        RuleParseError: If the condition is malformed

    Example:
        >>> condition = parse_condition("i = 1 and v = 0 @integer 1")
        >>> str(condition)
        'i = 1 and v = 0'
    """
    _check_length(source)
    return _ConditionParser(source).parse()


def parse_rule(source: str) -> Rule:
    """Parse a complete rule string: condition and sample annotation.

    Args:
        source: Rule string as found in CLDR data

    Returns:
        Rule with the parsed condition and sample lists

    Raises:
        RuleParseError: If the condition or the samples are malformed

    Example:
        >>> rule = parse_rule("i = 1 and v = 0 @integer 1")
        >>> rule.integer_samples
        SampleList(ranges=(SampleRange(lower='1', upper='1'),), open_ended=False)
    """
    _check_length(source)
    parser = _ConditionParser(source)
    condition = parser.parse()
    integer_samples, decimal_samples = _SampleParser(source).parse(parser.end)
    return Rule(condition, integer_samples, decimal_samples)
