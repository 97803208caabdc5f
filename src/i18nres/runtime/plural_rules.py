"""CLDR plural category selection using Babel.

Plural values are keyed by CLDR category. This module maps a quantity to
the category of a locale so the matching plural form can be rendered.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
from decimal import Decimal

from babel.core import UnknownLocaleError

from i18nres.constants import UNDETERMINED_LOCALE
from i18nres.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]

logger = logging.getLogger(__name__)


def select_plural_category(n: int | float | Decimal, locale: str) -> str:
    """Select the CLDR plural category of n for a locale.

    Resources without a locale suffix are "und"; Babel would resolve that
    tag to English through likely subtags, so it takes the English-like
    one/other rule directly. Unknown locales take the same rule.

    Args:
        n: Quantity to categorize
        locale: Locale code (e.g., "lv_LV", "en-US", "und")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(2, "und")
        'other'
    """
    if not locale or locale == UNDETERMINED_LOCALE:
        return _fallback(n)

    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        logger.debug("No CLDR plural rules for '%s', using one/other", locale)
        return _fallback(n)

    return locale_obj.plural_form(n)


def _fallback(n: int | float | Decimal) -> str:
    return "one" if abs(n) == 1 else "other"
