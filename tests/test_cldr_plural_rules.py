"""Tests for select_plural_category against Babel's CLDR data.

Covers representative locales across language families, both rule types,
and locale code handling (BCP-47, POSIX, case, fallback).

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pluralengine import (
    LocaleNotFoundError,
    PluralCategory,
    PluralRules,
    PluralRuleType,
    select_plural_category,
)
from pluralengine.diagnostics import DiagnosticCode
from pluralengine.runtime import BabelRuleProvider

# Test locale set - representative sample of supported locales
TEST_LOCALES: frozenset[str] = frozenset({
    "en", "zh", "hi", "es", "fr", "ar", "bn", "pt", "ru", "ja",
    "de", "ko", "vi", "tr", "it", "th", "pl", "uk", "lv", "cy",
})


class TestSelectPluralCategory:
    """Locale routing of the one-call API."""

    def test_latvian_locale_routes_to_latvian_rules(self) -> None:
        """A territory-qualified code uses its language's rules."""
        assert select_plural_category(0, "lv_LV") is PluralCategory.ZERO

    def test_english_locale_routes_to_english_rules(self) -> None:
        """en_US resolves to English cardinal rules."""
        assert select_plural_category(1, "en_US") is PluralCategory.ONE

    def test_polish_locale_routes_to_polish_rules(self) -> None:
        """pl_PL resolves to Polish cardinal rules."""
        assert select_plural_category(2, "pl_PL") is PluralCategory.FEW

    def test_locale_case_insensitive(self) -> None:
        """Locale code case does not matter."""
        assert select_plural_category(0, "LV_LV") is PluralCategory.ZERO
        assert select_plural_category(0, "lv_lv") is PluralCategory.ZERO

    def test_bcp47_hyphen_format_supported(self) -> None:
        """Hyphenated BCP-47 codes work like POSIX codes."""
        assert select_plural_category(1, "en-US") is PluralCategory.ONE
        assert select_plural_category(0, "lv-LV") is PluralCategory.ZERO

    def test_unknown_locale_raises(self) -> None:
        """A locale Babel does not know is an error, not 'other'."""
        with pytest.raises(LocaleNotFoundError) as exc_info:
            select_plural_category(1, "xx")

        assert exc_info.value.locale_code == "xx"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LOCALE_NOT_FOUND

    @pytest.mark.parametrize("locale", ["unknown_UNKNOWN", "not a locale!", ""])
    def test_malformed_locale_raises(self, locale: str) -> None:
        """Syntactically invalid and empty codes are not found either."""
        with pytest.raises(LocaleNotFoundError):
            select_plural_category(1, locale)


class TestLatvianPluralRule:
    """Latvian: zero, one, other; fraction digits take part."""

    @pytest.mark.parametrize("n", [0, 10, 11, 15, 19, 20, 30, 100, 111, 1011])
    def test_zero(self, n: int) -> None:
        """Latvian 'zero' covers n % 10 = 0 and the teens."""
        assert select_plural_category(n, "lv") is PluralCategory.ZERO

    @pytest.mark.parametrize("n", [1, 21, 31, 101, 1001])
    def test_one(self, n: int) -> None:
        """Latvian 'one' ends in 1 but not 11."""
        assert select_plural_category(n, "lv") is PluralCategory.ONE

    @pytest.mark.parametrize("n", [2, 9, 22, 29, 102])
    def test_other(self, n: int) -> None:
        """Everything else is 'other'."""
        assert select_plural_category(n, "lv") is PluralCategory.OTHER

    def test_decimals(self) -> None:
        """Latvian fraction digits decide the category of decimals."""
        assert select_plural_category("0.1", "lv") is PluralCategory.ONE
        assert select_plural_category("0.2", "lv") is PluralCategory.OTHER
        assert select_plural_category("10.0", "lv") is PluralCategory.ZERO


class TestSlavicPluralRules:
    """Russian and Polish: one, few, many, other."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (1, PluralCategory.ONE),
            (21, PluralCategory.ONE),
            (2, PluralCategory.FEW),
            (24, PluralCategory.FEW),
            (0, PluralCategory.MANY),
            (5, PluralCategory.MANY),
            (11, PluralCategory.MANY),
            (12, PluralCategory.MANY),
            (111, PluralCategory.MANY),
        ],
    )
    def test_russian_integers(self, n: int, expected: PluralCategory) -> None:
        """Russian integer endings map to one/few/many."""
        assert select_plural_category(n, "ru") is expected

    def test_russian_decimals_are_other(self) -> None:
        """Russian numbers with visible fraction digits are 'other'."""
        assert select_plural_category("1.5", "ru") is PluralCategory.OTHER
        assert select_plural_category("2.0", "ru") is PluralCategory.OTHER

    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (1, PluralCategory.ONE),
            (2, PluralCategory.FEW),
            (22, PluralCategory.FEW),
            (12, PluralCategory.MANY),
            (5, PluralCategory.MANY),
            (21, PluralCategory.MANY),
        ],
    )
    def test_polish(self, n: int, expected: PluralCategory) -> None:
        """Polish 'one' is exactly 1; 21 is 'many'."""
        assert select_plural_category(n, "pl") is expected


class TestArabicPluralRule:
    """Arabic uses all six categories."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (0, PluralCategory.ZERO),
            (1, PluralCategory.ONE),
            (2, PluralCategory.TWO),
            (3, PluralCategory.FEW),
            (10, PluralCategory.FEW),
            (103, PluralCategory.FEW),
            (11, PluralCategory.MANY),
            (99, PluralCategory.MANY),
            (100, PluralCategory.OTHER),
            (102, PluralCategory.OTHER),
        ],
    )
    def test_categories(self, n: int, expected: PluralCategory) -> None:
        """Arabic integers span zero through other."""
        assert select_plural_category(n, "ar") is expected

    def test_all_categories_present(self) -> None:
        """The Arabic engine defines all six categories."""
        rules = PluralRules.create("ar")
        assert rules.categories == tuple(PluralCategory)


class TestOtherOnlyLocales:
    """East Asian locales have a single category."""

    @given(n=st.integers(min_value=0, max_value=10**9))
    def test_japanese_always_other(self, n: int) -> None:
        """Japanese has no plural distinctions."""
        assert select_plural_category(n, "ja") is PluralCategory.OTHER

    def test_engine_has_only_other(self) -> None:
        """The Chinese engine defines only 'other'."""
        assert PluralRules.create("zh").categories == (PluralCategory.OTHER,)


class TestEnglishRules:
    """English cardinal precision sensitivity and ordinals."""

    def test_cardinal_precision(self) -> None:
        """Visible fraction digits move 1 out of 'one'."""
        assert select_plural_category("1", "en") is PluralCategory.ONE
        assert select_plural_category("1.0", "en") is PluralCategory.OTHER
        assert select_plural_category(Decimal("1.00"), "en") is PluralCategory.OTHER
        assert select_plural_category(1.0, "en", fraction_digits=0) is PluralCategory.ONE

    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (1, PluralCategory.ONE),
            (2, PluralCategory.TWO),
            (3, PluralCategory.FEW),
            (4, PluralCategory.OTHER),
            (11, PluralCategory.OTHER),
            (12, PluralCategory.OTHER),
            (13, PluralCategory.OTHER),
            (21, PluralCategory.ONE),
            (102, PluralCategory.TWO),
        ],
    )
    def test_ordinal(self, n: int, expected: PluralCategory) -> None:
        """English ordinal suffix categories."""
        assert select_plural_category(n, "en", PluralRuleType.ORDINAL) is expected


class TestFrenchCompactRule:
    """French 'many' depends on the compact exponent operand."""

    def test_million(self) -> None:
        """A million, written out or compact, is French 'many'."""
        assert select_plural_category(1_000_000, "fr") is PluralCategory.MANY
        assert select_plural_category("1c6", "fr") is PluralCategory.MANY

    def test_small_numbers(self) -> None:
        """French 'one' covers 0 to 1.99."""
        assert select_plural_category("1.5", "fr") is PluralCategory.ONE
        assert select_plural_category(2, "fr") is PluralCategory.OTHER


class TestBabelProvider:
    """Every bundled locale's rules parse and select."""

    @pytest.mark.parametrize("locale", sorted(TEST_LOCALES))
    @pytest.mark.parametrize("rule_type", list(PluralRuleType))
    def test_rules_build(self, locale: str, rule_type: PluralRuleType) -> None:
        """Bundled CLDR rules parse and select for common locales."""
        rules = PluralRules.create(locale, rule_type)

        assert rules.categories[-1] is PluralCategory.OTHER
        for n in range(0, 200):
            assert rules.select_number(n) in rules.categories

    def test_lookup_returns_rule_strings(self) -> None:
        """The provider returns Babel's rule strings by category."""
        rules = BabelRuleProvider().lookup("en", PluralRuleType.CARDINAL)
        assert set(rules) == {"one"}

    def test_lookup_unknown_locale(self) -> None:
        """The provider raises for locales Babel lacks."""
        with pytest.raises(LocaleNotFoundError):
            BabelRuleProvider().lookup("xx", PluralRuleType.ORDINAL)
