"""Hypothesis strategies for pluralengine property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules.

Usage:
    from tests.strategies import conditions, decimal_strings
    from tests.strategies.plural import relations, range_lists
"""

from .plural import (
    and_conditions,
    conditions,
    decimal_strings,
    moduli,
    non_operand_words,
    operands,
    range_lists,
    relations,
    value_ranges,
)

__all__ = [
    "and_conditions",
    "conditions",
    "decimal_strings",
    "moduli",
    "non_operand_words",
    "operands",
    "range_lists",
    "relations",
    "value_ranges",
]
