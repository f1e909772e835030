"""Plural rule syntax: tokenizer, parser, condition tree and serializer.

Exports:
    parse_rule: Parse a rule string (condition plus samples)
    parse_condition: Parse only the condition of a rule string
    serialize_condition: Condition tree back to rule text
    tokenize / Lexer: Token stream of a condition

Python 3.13+. Zero external dependencies.
"""

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
from .lexer import Lexer, Token, TokenKind, tokenize
from .parser import parse_condition, parse_rule
from .serializer import serialize_condition, serialize_rule

__all__ = [
    "AndCondition",
    "Condition",
    "Lexer",
    "RangeList",
    "Relation",
    "Rule",
    "SampleList",
    "SampleRange",
    "Token",
    "TokenKind",
    "ValueRange",
    "parse_condition",
    "parse_rule",
    "serialize_condition",
    "serialize_rule",
    "tokenize",
]
