"""Enumerations for i18nres type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Dialect(StrEnum):
    """Printf specifier dialect.

    StrEnum provides automatic string conversion: str(Dialect.BRACKET) == "bracket"
    """

    BRACKET = "bracket"
    """Internal dialect with bracketed indices: %[2]d"""

    DOLLAR = "dollar"
    """External (Android/Java) dialect with dollar-terminated indices: %2$d"""


class ValueKind(StrEnum):
    """Variant of a translatable value.

    StrEnum provides automatic string conversion: str(ValueKind.SIMPLE) == "simple"
    """

    SIMPLE = "simple"
    """A single text: <string name="x">Hello</string>"""

    ARRAY = "array"
    """An ordered list of texts: <string-array name="x">"""

    PLURAL = "plural"
    """CLDR quantity-keyed texts: <plurals name="x">"""


class FindingKind(StrEnum):
    """Kind of cross-locale consistency finding.

    StrEnum provides automatic string conversion:
    str(FindingKind.MISSING_VALUE) == "missing-value"
    """

    MISSING_VALUE = "missing-value"
    TYPE_MISMATCH = "type-mismatch"
    FORMAT_SPECIFIER_COUNT_MISMATCH = "format-specifier-count-mismatch"
    UNEXPECTED_SPECIFIER_COUNT = "unexpected-specifier-count"
    VERB_CONFLICT = "verb-conflict"
    ARRAY_COUNT_MISMATCH = "array-count-mismatch"
    OTHER_MISSING = "other-missing"


__all__ = [
    "Dialect",
    "FindingKind",
    "ValueKind",
]
