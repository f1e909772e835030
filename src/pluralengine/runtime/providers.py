"""Rule data providers.

A provider maps (locale, rule type) to the raw CLDR rule strings of each
category. The engine treats this data as opaque text and parses it itself.

Providers:
    BabelRuleProvider: CLDR data shipped with Babel (default)
    StaticRuleProvider: In-memory rule tables (tests, custom locales)

Locale fallback is a thin retry loop (lookup_with_fallback) over
locale_fallback_chain(); it never touches the parser or evaluator.

Python 3.13+. Uses Babel for CLDR data.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol

from pluralengine.diagnostics import LocaleNotFoundError
from pluralengine.enums import PluralRuleType
from pluralengine.locale_utils import get_babel_locale, locale_fallback_chain, normalize_locale

__all__ = [
    "BabelRuleProvider",
    "RuleProvider",
    "StaticRuleProvider",
    "get_default_provider",
    "lookup_with_fallback",
]

logger = logging.getLogger(__name__)


class RuleProvider(Protocol):
    """Source of plural rule strings.

    Implementations must be safe to call from several threads and must
    return the same data for the same arguments; built engines are cached
    per provider instance.
    """

    def lookup(self, locale_code: str, rule_type: PluralRuleType) -> Mapping[str, str]:
        """Rule strings by category name for one locale and rule type.

        Categories without a string (always including ``other``) may be
        omitted.

        Raises:
            LocaleNotFoundError: If the provider has no data for the locale
        """
        ...  # pragma: no cover  # Protocol stub - not executable


class BabelRuleProvider:
    """Rule strings from Babel's CLDR locale data.

    Babel resolves parent locales itself ("en_US" inherits "en"), so the
    fallback loop rarely needs to retry for this provider.

    Example:
        >>> BabelRuleProvider().lookup("en", PluralRuleType.CARDINAL)
        {'one': 'i is 1 and v is 0'}
    """

    def lookup(self, locale_code: str, rule_type: PluralRuleType) -> Mapping[str, str]:
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        try:
            locale = get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            raise LocaleNotFoundError(locale_code, rule_type) from e

        match PluralRuleType(rule_type):
            case PluralRuleType.CARDINAL:
                plural_rule = locale.plural_form
            case PluralRuleType.ORDINAL:
                plural_rule = locale.ordinal_form

        return dict(plural_rule.rules)

    def __repr__(self) -> str:
        return "BabelRuleProvider()"


class StaticRuleProvider:
    """Rule strings from an in-memory table.

    Locale keys are normalized (``en-US`` and ``en_US`` are the same key)
    and compared case-insensitively. Lookups are exact; use
    lookup_with_fallback() for parent-locale retries.

    Example:
        >>> provider = StaticRuleProvider({
        ...     "en": {"cardinal": {"one": "i = 1 and v = 0 @integer 1"}},
        ... })
        >>> provider.lookup("EN", PluralRuleType.CARDINAL)
        mappingproxy({'one': 'i = 1 and v = 0 @integer 1'})
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        data: Mapping[str, Mapping[str, Mapping[str, str]]],
    ) -> None:
        table: dict[tuple[str, PluralRuleType], Mapping[str, str]] = {}
        for locale_code, by_type in data.items():
            for rule_type, rules in by_type.items():
                key = (normalize_locale(locale_code).casefold(), PluralRuleType(rule_type))
                table[key] = MappingProxyType(dict(rules))
        self._data: Mapping[tuple[str, PluralRuleType], Mapping[str, str]] = MappingProxyType(
            table
        )

    def lookup(self, locale_code: str, rule_type: PluralRuleType) -> Mapping[str, str]:
        key = (normalize_locale(locale_code).casefold(), PluralRuleType(rule_type))
        rules = self._data.get(key)
        if rules is None:
            raise LocaleNotFoundError(locale_code, rule_type)
        return rules

    def __repr__(self) -> str:
        return f"StaticRuleProvider(<{len(self._data)} rule sets>)"


_DEFAULT_PROVIDER = BabelRuleProvider()


def get_default_provider() -> RuleProvider:
    """The process-wide Babel-backed provider."""
    return _DEFAULT_PROVIDER


def lookup_with_fallback(
    provider: RuleProvider,
    locale_code: str,
    rule_type: PluralRuleType,
) -> tuple[str, Mapping[str, str]]:
    """Look up rules, retrying with less specific locales.

    Args:
        provider: Rule data source
        locale_code: Requested locale
        rule_type: Requested rule type

    Returns:
        Tuple of (locale that supplied the rules, rule strings by category)

    Raises:
        LocaleNotFoundError: If no candidate locale has rules
    """
    for candidate in locale_fallback_chain(locale_code):
        try:
            rules = provider.lookup(candidate, rule_type)
        except LocaleNotFoundError:
            logger.debug("No %s rules for '%s' in %r", rule_type, candidate, provider)
            continue
        if candidate != normalize_locale(locale_code):
            logger.warning(
                "No %s plural rules for '%s'; using rules of '%s'",
                rule_type,
                locale_code,
                candidate,
            )
        return candidate, rules

    raise LocaleNotFoundError(locale_code, rule_type)
