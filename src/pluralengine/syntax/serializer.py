"""Serializer for plural rule condition trees.

Converts a Condition back into rule text. The output uses the modern CLDR
spelling (``=``, ``!=``, ``%``) for IN relations and keeps IS and WITHIN
relations as written, so that parsing the output yields an equal tree:

    parse_condition(serialize_condition(c)) == c

Python 3.13+. Zero external dependencies.
"""

from pluralengine.enums import RelationOperator

from .ast import AndCondition, Condition, RangeList, Relation, Rule, SampleList

__all__ = ["serialize_condition", "serialize_rule"]


def _serialize_range_list(range_list: RangeList) -> str:
    return ",".join(
        str(item.lower) if item.is_single else f"{item.lower}..{item.upper}"
        for item in range_list
    )


def _serialize_relation(relation: Relation) -> str:
    expr = relation.operand.value
    if relation.modulus is not None:
        expr = f"{expr} % {relation.modulus}"

    match relation.operator:
        case RelationOperator.IS:
            keyword = "is not" if relation.negated else "is"
        case RelationOperator.IN:
            keyword = "!=" if relation.negated else "="
        case RelationOperator.WITHIN:
            keyword = "not within" if relation.negated else "within"

    return f"{expr} {keyword} {_serialize_range_list(relation.range_list)}"


def _serialize_and_condition(and_condition: AndCondition) -> str:
    return " and ".join(_serialize_relation(r) for r in and_condition.relations)


def serialize_condition(condition: Condition) -> str:
    """Serialize a condition to rule text.

    Args:
        condition: Condition to serialize

    Returns:
        Rule text; empty string for the always-true condition

    Example:
        >>> serialize_condition(parse_condition("n mod 10 in 2..4 and n mod 100 not in 12..14"))
        'n % 10 = 2..4 and n % 100 != 12..14'
    """
    return " or ".join(_serialize_and_condition(c) for c in condition.conditions)


def _serialize_samples(keyword: str, samples: SampleList) -> str:
    items = [r.lower if r.is_single else f"{r.lower}~{r.upper}" for r in samples.ranges]
    if samples.open_ended:
        items.append("…")
    return f"@{keyword} {', '.join(items)}"


def serialize_rule(rule: Rule) -> str:
    """Serialize a rule, including its sample annotation, to CLDR text."""
    parts = [serialize_condition(rule.condition)] if not rule.condition.is_always_true else []
    if rule.integer_samples is not None:
        parts.append(_serialize_samples("integer", rule.integer_samples))
    if rule.decimal_samples is not None:
        parts.append(_serialize_samples("decimal", rule.decimal_samples))
    return " ".join(parts)
