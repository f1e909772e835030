"""Evaluation of plural rule conditions against operands.

A Condition is true iff at least one AND-group is true; an AND-group is
true iff all of its relations are true; the empty Condition is always true.

Relation semantics:
    1. Read the operand value.
    2. Apply the modulus, if any, as a remainder that keeps the fractional
       part of n (``2.5 % 2 == 0.5``).
    3. IS / IN match only integral values lying on a literal or inside a
       range. WITHIN matches any value between a range's bounds, so
       ``n within 0..2`` is true for 1.5 while ``n in 0..2`` is not.
    4. Negate the result for ``not``, ``is not`` and ``!=``.

Evaluation never raises: operands are validated at construction, the
parser rejects a zero modulus, and every operator kind is matched here.

Python 3.13+. Zero external dependencies.
"""

from decimal import Context, Decimal

from pluralengine.enums import RelationOperator
from pluralengine.syntax.ast import AndCondition, Condition, RangeList, Relation

from .operands import PluralOperands

__all__ = ["evaluate", "evaluate_relation"]

# Remainders of in-range n need up to 38 significant digits; the default
# context keeps 28.
_ARITHMETIC_CONTEXT = Context(prec=64)


def _is_integral(value: Decimal | int) -> bool:
    if isinstance(value, int):
        return True
    return value == value.to_integral_value()


def _in_range_list(value: Decimal | int, range_list: RangeList) -> bool:
    if not _is_integral(value):
        return False
    return any(item.lower <= value <= item.upper for item in range_list)


def _within_range_list(value: Decimal | int, range_list: RangeList) -> bool:
    return any(item.lower <= value <= item.upper for item in range_list)


def evaluate_relation(relation: Relation, operands: PluralOperands) -> bool:
    """Evaluate a single relation.

    Args:
        relation: Parsed relation
        operands: Operands of the number being classified

    Returns:
        True if the relation holds
    """
    value = operands.get(relation.operand)
    if relation.modulus is not None:
        # Operands are non-negative, so remainder is a true modulus for both
        # int and Decimal and keeps the fraction of n.
        if isinstance(value, Decimal):
            value = _ARITHMETIC_CONTEXT.remainder(value, relation.modulus)
        else:
            value %= relation.modulus

    match relation.operator:
        case RelationOperator.IS | RelationOperator.IN:
            matched = _in_range_list(value, relation.range_list)
        case RelationOperator.WITHIN:
            matched = _within_range_list(value, relation.range_list)

    return matched != relation.negated


def _evaluate_and(and_condition: AndCondition, operands: PluralOperands) -> bool:
    return all(evaluate_relation(r, operands) for r in and_condition.relations)


def evaluate(condition: Condition, operands: PluralOperands) -> bool:
    """Evaluate a condition.

    Args:
        condition: Parsed condition; the empty condition is always true
        operands: Operands of the number being classified

    Returns:
        True if the condition holds

    Example:
        >>> evaluate(parse_condition("i = 1 and v = 0"), PluralOperands.from_string("1"))
        True
        >>> evaluate(parse_condition("i = 1 and v = 0"), PluralOperands.from_string("1.0"))
        False
    """
    if condition.is_always_true:
        return True
    return any(_evaluate_and(c, operands) for c in condition.conditions)
