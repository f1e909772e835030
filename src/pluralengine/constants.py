"""Shared constants for pluralengine.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: Bounds on rule strings and numeric operands
- Cache limits: Memory bounds for the engine cache
- Grammar: Keywords and markers of the CLDR plural rule syntax

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_RULE_LENGTH",
    "MAX_INTEGER_OPERAND",
    "MAX_FRACTION_DIGITS",
    "MAX_COMPACT_EXPONENT",
    # Cache limits
    "DEFAULT_ENGINE_CACHE_SIZE",
    # Grammar
    "SAMPLE_MARKER",
    "SAMPLE_ELLIPSES",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum rule string length in characters.
# The longest CLDR rule (Breton "few") is well under 200 characters; anything
# approaching this bound is malformed or adversarial.
MAX_RULE_LENGTH: int = 4096

# Largest integer accepted for the i operand and for rule literals.
# Matches the unsigned 64-bit range used by CLDR reference implementations.
MAX_INTEGER_OPERAND: int = 2**64 - 1

# Maximum visible fraction digits (v operand).
# f and t must stay representable as unsigned 64-bit integers.
MAX_FRACTION_DIGITS: int = 18

# Maximum compact/scientific exponent (c and e operands).
MAX_COMPACT_EXPONENT: int = 21

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached PluralRules engines.
# Two rule types per locale; 256 covers 128 locales with both rule types.
DEFAULT_ENGINE_CACHE_SIZE: int = 256

# ============================================================================
# GRAMMAR
# ============================================================================

# Everything from this character on is a sample annotation.
SAMPLE_MARKER: str = "@"

# Open-ended sample list terminators (Unicode ellipsis and its ASCII form).
SAMPLE_ELLIPSES: tuple[str, ...] = ("…", "...")
