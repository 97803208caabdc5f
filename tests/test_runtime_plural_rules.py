"""Tests for plural_rules.py - CLDR plural category selection using Babel.

Coverage:
    - Representative locales across language families
    - Undetermined and unknown locales use the one/other rule
    - Decimal and float quantities
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from i18nres.constants import PLURAL_CATEGORIES
from i18nres.runtime.plural_rules import select_plural_category

LOCALE_CODES = st.sampled_from(["en", "en_US", "de_DE", "lv", "pl", "ru_RU", "ar", "ja", "und"])


class TestSelectPluralCategory:
    """Category selection per locale."""

    @pytest.mark.parametrize(
        ("n", "locale", "expected"),
        [
            (1, "en", "one"),
            (2, "en", "other"),
            (0, "en_US", "other"),
            (1, "de-DE", "one"),
            (1, "ru_RU", "one"),
            (3, "ru_RU", "few"),
            (5, "ru_RU", "many"),
            (21, "ru", "one"),
            (0, "lv", "zero"),
            (2, "pl", "few"),
            (5, "pl", "many"),
            (0, "ar", "zero"),
            (2, "ar", "two"),
            (1, "ja", "other"),
        ],
    )
    def test_cldr_rules(self, n: int, locale: str, expected: str) -> None:
        assert select_plural_category(n, locale) == expected

    def test_decimal_quantity(self) -> None:
        assert select_plural_category(Decimal("1.5"), "en") == "other"
        assert select_plural_category(1.0, "de") == "one"

    @pytest.mark.parametrize("locale", ["und", ""])
    def test_undetermined_uses_one_other(self, locale: str) -> None:
        assert select_plural_category(1, locale) == "one"
        assert select_plural_category(-1, locale) == "one"
        assert select_plural_category(0, locale) == "other"
        assert select_plural_category(2, locale) == "other"

    @pytest.mark.parametrize("locale", ["xx_XX", "not a locale", "de_123"])
    def test_unknown_locale_falls_back(self, locale: str) -> None:
        assert select_plural_category(1, locale) == "one"
        assert select_plural_category(7, locale) == "other"


class TestPluralProperties:
    """Properties over quantities and locales."""

    @given(n=st.integers(min_value=-10_000, max_value=10_000), locale=LOCALE_CODES)
    def test_category_is_cldr(self, n: int, locale: str) -> None:
        category = select_plural_category(n, locale)
        event(f"category={category}")
        assert category in PLURAL_CATEGORIES

    @given(n=st.integers(min_value=0, max_value=10_000))
    def test_japanese_has_only_other(self, n: int) -> None:
        assert select_plural_category(n, "ja") == "other"
