"""Enumerations for pluralengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"
    """Mandatory default category, matching whatever no explicit rule matches."""


class PluralRuleType(StrEnum):
    """Kind of plural rules.

    StrEnum provides automatic string conversion: str(PluralRuleType.CARDINAL) == "cardinal"
    """

    CARDINAL = "cardinal"
    """Quantity agreement: 1 book, 2 books"""

    ORDINAL = "ordinal"
    """Ranking agreement: 1st, 2nd, 3rd"""


class Operand(StrEnum):
    """Operand names usable inside a plural rule condition."""

    N = "n"
    """Absolute value of the source number"""

    I = "i"  # noqa: E741
    """Integer digits of n"""

    V = "v"
    """Number of visible fraction digits, with trailing zeros"""

    W = "w"
    """Number of visible fraction digits, without trailing zeros"""

    F = "f"
    """Visible fraction digits, with trailing zeros, as an integer"""

    T = "t"
    """Visible fraction digits, without trailing zeros, as an integer"""

    C = "c"
    """Compact decimal exponent"""

    E = "e"
    """Synonym for c, kept for older CLDR rule data"""


class RelationOperator(StrEnum):
    """Membership test of a relation.

    ``=`` parses as IN and ``!=`` as negated IN.
    """

    IS = "is"
    """Exact equality with a single literal"""

    IN = "in"
    """Exact integer membership in a range list"""

    WITHIN = "within"
    """Interval membership; also matches non-integer values inside a range"""


# Evaluation order of explicit categories; OTHER is implicit and last.
CANONICAL_CATEGORY_ORDER: tuple[PluralCategory, ...] = (
    PluralCategory.ZERO,
    PluralCategory.ONE,
    PluralCategory.TWO,
    PluralCategory.FEW,
    PluralCategory.MANY,
)


__all__ = [
    "CANONICAL_CATEGORY_ORDER",
    "Operand",
    "PluralCategory",
    "PluralRuleType",
    "RelationOperator",
]
