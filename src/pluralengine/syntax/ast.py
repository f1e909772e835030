"""Condition tree of a plural rule.

All nodes are frozen dataclasses: a parsed condition is a value that can be
shared between threads and engines without copying.

Structure:
    Rule -> Condition -> AndCondition -> Relation -> ValueRange

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from pluralengine.enums import Operand, RelationOperator

__all__ = [
    "AndCondition",
    "Condition",
    "RangeList",
    "Relation",
    "Rule",
    "SampleList",
    "SampleRange",
    "ValueRange",
]


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Inclusive integer range; a bare literal has lower == upper."""

    lower: int
    upper: int

    def __post_init__(self) -> None:
        if self.lower < 0:
            msg = f"ValueRange lower must be >= 0, got {self.lower}"
            raise ValueError(msg)
        if self.upper < self.lower:
            msg = f"ValueRange upper ({self.upper}) must be >= lower ({self.lower})"
            raise ValueError(msg)

    @classmethod
    def single(cls, value: int) -> ValueRange:
        """Range holding exactly one literal."""
        return cls(value, value)

    @property
    def is_single(self) -> bool:
        return self.lower == self.upper


RangeList: TypeAlias = tuple[ValueRange, ...]


@dataclass(frozen=True, slots=True)
class Relation:
    """One boolean test of an operand against a range list.

    Attributes:
        operand: Operand to read
        operator: IS, IN (also ``=``) or WITHIN
        range_list: Literals and inclusive ranges, in source order
        modulus: Divisor applied to the operand before the test
        negated: True for ``not``, ``is not`` and ``!=``
    """

    operand: Operand
    operator: RelationOperator
    range_list: RangeList
    modulus: int | None = None
    negated: bool = False

    def __post_init__(self) -> None:
        """Reject relations that have no rule-string spelling."""
        if not self.range_list:
            msg = "Relation range_list must not be empty"
            raise ValueError(msg)
        if self.operator is RelationOperator.IS and (
            len(self.range_list) != 1 or not self.range_list[0].is_single
        ):
            msg = f"IS relation takes exactly one literal, got {self.range_list!r}"
            raise ValueError(msg)
        if self.modulus is not None and self.modulus <= 0:
            msg = f"Relation modulus must be positive, got {self.modulus}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class AndCondition:
    """Conjunction of relations; true iff every relation is true."""

    relations: tuple[Relation, ...]


@dataclass(frozen=True, slots=True)
class Condition:
    """Disjunction of AND-groups.

    The empty condition is the always-true marker used for the implicit
    ``other`` category.
    """

    conditions: tuple[AndCondition, ...] = ()

    @classmethod
    def always(cls) -> Condition:
        """The always-true empty condition."""
        return cls(())

    @property
    def is_always_true(self) -> bool:
        return not self.conditions

    def __str__(self) -> str:
        from .serializer import serialize_condition  # noqa: PLC0415 - circular

        return serialize_condition(self)


@dataclass(frozen=True, slots=True)
class SampleRange:
    """Sample value or ``lower~upper`` sample range, kept as source text.

    Text is kept verbatim because sample precision is significant:
    ``1.0`` and ``1.00`` are different samples.
    """

    lower: str
    upper: str

    @property
    def is_single(self) -> bool:
        return self.lower == self.upper


@dataclass(frozen=True, slots=True)
class SampleList:
    """Sample annotation for ``@integer`` or ``@decimal``.

    Attributes:
        ranges: Sample values and ranges in source order
        open_ended: True when the list ends with an ellipsis
    """

    ranges: tuple[SampleRange, ...]
    open_ended: bool = False


@dataclass(frozen=True, slots=True)
class Rule:
    """Parsed rule string: its condition plus informative samples.

    Samples never influence evaluation.
    """

    condition: Condition
    integer_samples: SampleList | None = None
    decimal_samples: SampleList | None = None
