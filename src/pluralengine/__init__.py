"""pluralengine - CLDR plural rule classification.

Parses Unicode CLDR plural rule strings, derives plural operands from
numbers with exact precision, and selects the plural category (zero, one,
two, few, many, other) of a number for a locale.

Public API:
    PluralRules - Immutable engine for one locale and rule type
    PluralOperands - Operands n, i, v, w, f, t, c/e of a number
    select_plural_category - One-call classification with cached engines
    parse_rule / parse_condition - Rule string to condition tree
    serialize_condition - Condition tree to rule string
    evaluate - Condition tree against operands

Exceptions:
    PluralEngineError - Base exception class
    RuleParseError - Malformed rule string
    OperandError - Numeric input without usable precision or out of range
    LocaleNotFoundError - No rule data for a locale
    EngineBuildError - Rule set rejected as a whole

Submodules:
    pluralengine.syntax - Lexer, parser, condition tree, serializer
    pluralengine.runtime - Operands, evaluator, engine, providers, cache
    pluralengine.diagnostics - Error types and structured diagnostics
"""

from .diagnostics import (
    EngineBuildError,
    LocaleNotFoundError,
    OperandError,
    PluralEngineError,
    RuleParseError,
)
from .enums import PluralCategory, PluralRuleType
from .runtime import (
    PluralOperands,
    PluralRules,
    StaticRuleProvider,
    evaluate,
    select_plural_category,
)
from .syntax import Condition, parse_condition, parse_rule, serialize_condition

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("pluralengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# CLDR plural rule syntax conformance
__spec_url__ = "https://www.unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules"

__all__ = [
    "Condition",
    "EngineBuildError",
    "LocaleNotFoundError",
    "OperandError",
    "PluralCategory",
    "PluralEngineError",
    "PluralOperands",
    "PluralRuleType",
    "PluralRules",
    "RuleParseError",
    "StaticRuleProvider",
    "__spec_url__",
    "__version__",
    "evaluate",
    "parse_condition",
    "parse_rule",
    "select_plural_category",
    "serialize_condition",
]
