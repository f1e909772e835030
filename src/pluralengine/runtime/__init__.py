"""Runtime: operands, evaluation, engines, providers and caching.

Python 3.13+. Uses Babel for CLDR data.
"""

from .cache import EngineCache
from .cache_config import CacheConfig
from .evaluator import evaluate, evaluate_relation
from .operands import PluralOperands
from .plural_rules import PluralRules, RuleSet, select_plural_category
from .providers import (
    BabelRuleProvider,
    RuleProvider,
    StaticRuleProvider,
    get_default_provider,
    lookup_with_fallback,
)

__all__ = [
    "BabelRuleProvider",
    "CacheConfig",
    "EngineCache",
    "PluralOperands",
    "PluralRules",
    "RuleProvider",
    "RuleSet",
    "StaticRuleProvider",
    "evaluate",
    "evaluate_relation",
    "get_default_provider",
    "lookup_with_fallback",
    "select_plural_category",
]
