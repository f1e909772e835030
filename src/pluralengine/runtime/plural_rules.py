"""CLDR plural rules engine.

Assembles the parsed rules of one locale and rule type into an immutable
PluralRules engine and selects the plural category of numbers.

Construction is the only fallible phase: every supplied rule string is
parsed up front, and a single malformed rule fails the whole build with
EngineBuildError. A built engine never changes and can be shared freely
between threads; select() is total and always returns a category.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html

Python 3.13+. Uses Babel for CLDR data (via the default provider).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from pluralengine.constants import SAMPLE_MARKER
from pluralengine.diagnostics import (
    EngineBuildError,
    ErrorTemplate,
    ParseErrorKind,
    RuleParseError,
)
from pluralengine.enums import CANONICAL_CATEGORY_ORDER, PluralCategory, PluralRuleType
from pluralengine.locale_utils import normalize_locale
from pluralengine.syntax import Condition, Rule, parse_rule

from .cache import EngineCache
from .evaluator import evaluate
from .operands import PluralOperands
from .providers import RuleProvider, get_default_provider, lookup_with_fallback

__all__ = ["PluralRules", "RuleSet", "select_plural_category"]

logger = logging.getLogger(__name__)

_ALWAYS = Rule(Condition.always())

_default_cache = EngineCache()


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Parsed rules of one locale and rule type, in canonical category order.

    Only categories with an explicit rule are present, plus ``other``, which
    is always present and always true.

    Attributes:
        rules: Read-only mapping of category to parsed rule
    """

    rules: Mapping[PluralCategory, Rule]

    def condition(self, category: PluralCategory) -> Condition | None:
        """Condition of a category, or None if the category never matches."""
        if category is PluralCategory.OTHER:
            return _ALWAYS.condition
        rule = self.rules.get(category)
        return rule.condition if rule is not None else None


def _empty_condition_error(source: str) -> RuleParseError:
    """Error for an explicit category whose rule has no condition."""
    marker = source.find(SAMPLE_MARKER)
    position = marker if marker >= 0 else len(source)
    return RuleParseError(
        ErrorTemplate.unexpected_end(source, position, ("relation",)),
        kind=ParseErrorKind.UNEXPECTED_END,
        position=position,
        source=source,
    )


def _unknown_category_error(name: str) -> RuleParseError:
    expected = tuple(f"'{c.value}'" for c in PluralCategory)
    return RuleParseError(
        ErrorTemplate.unexpected_token(name, 0, name, expected),
        kind=ParseErrorKind.UNEXPECTED_TOKEN,
        position=0,
        source=name,
    )


@dataclass(frozen=True, slots=True)
class PluralRules:
    """Plural category selector for one locale and rule type.

    Build with from_rules() (explicit rule strings) or create() (provider
    lookup, cached). Instances are immutable.

    Examples:
        >>> rules = PluralRules.from_rules("en", "cardinal", {"one": "i = 1 and v = 0"})
        >>> rules.select_number("1")
        <PluralCategory.ONE: 'one'>
        >>> rules.select_number("1.0")
        <PluralCategory.OTHER: 'other'>

        >>> ordinal = PluralRules.create("en", PluralRuleType.ORDINAL)
        >>> ordinal.select_number(23)
        <PluralCategory.FEW: 'few'>

    Thread Safety:
        Immutable; share one instance across any number of threads.
    """

    locale_code: str
    rule_type: PluralRuleType
    rule_set: RuleSet

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rules(
        cls,
        locale_code: str,
        rule_type: PluralRuleType | str,
        rules: Mapping[str, str],
    ) -> PluralRules:
        """Build an engine from rule strings.

        Args:
            locale_code: Locale the rules belong to (informational)
            rule_type: Cardinal or ordinal
            rules: Rule string by category name; missing categories never
                match, ``other`` matches whatever nothing else does

        Returns:
            Built engine

        Raises:
            EngineBuildError: If any rule string fails to parse, names an
                unknown category, or has an empty condition for a category
                other than ``other``
            ValueError: If rule_type is not a known rule type
            TypeError: If a rule value is not a string
        """
        rule_type = PluralRuleType(rule_type)
        parsed: dict[PluralCategory, Rule] = {}
        errors: dict[str, RuleParseError] = {}

        for name, source in rules.items():
            if not isinstance(source, str):
                msg = f"Rule for category {name!r} must be a string, got {type(source).__name__}"
                raise TypeError(msg)
            try:
                category = PluralCategory(name)
            except ValueError:
                errors[str(name)] = _unknown_category_error(str(name))
                continue
            try:
                rule = parse_rule(source)
            except RuleParseError as e:
                errors[category.value] = e
                continue
            if rule.condition.is_always_true and category is not PluralCategory.OTHER:
                errors[category.value] = _empty_condition_error(source)
                continue
            parsed[category] = rule

        if errors:
            logger.debug(
                "Rejected %s plural rules for '%s': %s",
                rule_type,
                locale_code,
                ", ".join(errors),
            )
            raise EngineBuildError(locale_code, rule_type, errors)

        ordered = {c: parsed[c] for c in CANONICAL_CATEGORY_ORDER if c in parsed}
        ordered[PluralCategory.OTHER] = parsed.get(PluralCategory.OTHER, _ALWAYS)
        return cls(locale_code, rule_type, RuleSet(MappingProxyType(ordered)))

    @classmethod
    def create(
        cls,
        locale_code: str,
        rule_type: PluralRuleType | str = PluralRuleType.CARDINAL,
        *,
        provider: RuleProvider | None = None,
        cache: EngineCache | None = None,
    ) -> PluralRules:
        """Get the engine for a locale, building it once per provider.

        Args:
            locale_code: BCP-47 or POSIX locale code
            rule_type: Cardinal (default) or ordinal
            provider: Rule data source (default: Babel CLDR data)
            cache: Engine cache (default: process-wide cache)

        Returns:
            Cached or freshly built engine

        Raises:
            LocaleNotFoundError: If no rules exist for the locale or a parent
            EngineBuildError: If the provider's rules are malformed
        """
        rule_type = PluralRuleType(rule_type)
        provider = provider if provider is not None else get_default_provider()
        cache = cache if cache is not None else _default_cache
        normalized = normalize_locale(locale_code)

        def build() -> PluralRules:
            resolved, rules = lookup_with_fallback(provider, normalized, rule_type)
            engine = cls.from_rules(normalized, rule_type, rules)
            logger.debug(
                "Built %s plural rules for '%s' from '%s' (%s)",
                rule_type,
                normalized,
                resolved,
                ", ".join(engine.categories),
            )
            return engine

        return cache.get_or_build((provider, normalized, rule_type), build)

    @staticmethod
    def clear_cache() -> None:
        """Clear the process-wide engine cache."""
        _default_cache.clear()

    @staticmethod
    def cache_info() -> dict[str, object]:
        """Statistics of the process-wide engine cache."""
        return dict(_default_cache.cache_info())

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @property
    def categories(self) -> tuple[PluralCategory, ...]:
        """Categories this engine can return, in canonical order."""
        return tuple(self.rule_set.rules)

    def select(self, operands: PluralOperands) -> PluralCategory:
        """Select the plural category for operands.

        Explicit categories are tried in the order zero, one, two, few, many;
        the first whose condition holds wins. Otherwise ``other``.

        Never raises.
        """
        for category in CANONICAL_CATEGORY_ORDER:
            rule = self.rule_set.rules.get(category)
            if rule is not None and evaluate(rule.condition, operands):
                return category
        return PluralCategory.OTHER

    def select_number(
        self,
        value: str | int | float | Decimal,
        fraction_digits: int | None = None,
    ) -> PluralCategory:
        """Derive operands from a number and select its category.

        Args:
            value: Decimal string, int, Decimal, or float with fraction_digits
            fraction_digits: Explicit visible fraction digit count

        Raises:
            OperandError: If operands cannot be derived from the input
        """
        return self.select(PluralOperands.create(value, fraction_digits))


def select_plural_category(
    value: str | int | float | Decimal,
    locale_code: str,
    rule_type: PluralRuleType | str = PluralRuleType.CARDINAL,
    *,
    fraction_digits: int | None = None,
    provider: RuleProvider | None = None,
) -> PluralCategory:
    """Select CLDR plural category for a number.

    Convenience entry point: resolves (and caches) the engine for the
    locale, derives operands and selects.

    Args:
        value: Number to categorize, with explicit precision (see PluralOperands)
        locale_code: Locale code (e.g., "lv_LV", "en-US", "ar")
        rule_type: Cardinal (default) or ordinal
        fraction_digits: Visible fraction digits when value is not a string
        provider: Rule data source (default: Babel CLDR data)

    Returns:
        Plural category

    Raises:
        LocaleNotFoundError: If no rules exist for the locale
        EngineBuildError: If the locale's rules are malformed
        OperandError: If operands cannot be derived from value

    Examples:
        >>> select_plural_category(0, "lv_LV")
        <PluralCategory.ZERO: 'zero'>
        >>> select_plural_category("1.0", "en")
        <PluralCategory.OTHER: 'other'>
        >>> select_plural_category(2, "en", "ordinal")
        <PluralCategory.TWO: 'two'>
    """
    rules = PluralRules.create(locale_code, rule_type, provider=provider)
    return rules.select_number(value, fraction_digits)
