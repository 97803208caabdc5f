"""Translatable value model.

A Value is one translatable entry of a locale. The variant set is closed:

    SimpleValue  <string>        one text
    ArrayValue   <string-array>  ordered texts, never interpolated
    PluralValue  <plurals>       CLDR category slots, "other" is the fallback

Every variant exposes the same rendering contract (text, text_array,
quantity_text), so lookup code never needs to know which variant it holds.
The validator, in contrast, dispatches on the concrete variant with a match
statement.

Values are immutable. Updating a translation means constructing a new value
and putting it into the ResourceTable under the same key.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal

from i18nres.constants import PLURAL_CATEGORIES
from i18nres.enums import ValueKind

from .formatting import format_text
from .plural_rules import select_plural_category

__all__ = [
    "ArrayValue",
    "PluralValue",
    "SimpleValue",
    "Value",
]


@dataclass(frozen=True, slots=True)
class SimpleValue:
    """A single text.

    Attributes:
        locale: Locale tag of the owning table
        id: Key, unique within the locale
        source: The text in the internal (bracket) dialect

    Example:
        >>> SimpleValue("en", "greeting", "hello %s").text("nick")
        'hello nick'
    """

    locale: str
    id: str
    source: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.SIMPLE

    def text(self, *args: object) -> str:
        """Render the text with positional arguments.

        Raises:
            FormatArityError: If the text expects more arguments
            FormatArgumentError: If an argument does not fit its verb
        """
        return format_text(self.source, args)

    def text_array(self) -> list[str]:
        return [self.source]

    def quantity_text(self, quantity: int | float | Decimal, *args: object) -> str:
        """Same as text(); quantity is ignored."""
        return self.text(*args)

    def example_text(self) -> str:
        return self.source

    def with_locale(self, locale: str) -> SimpleValue:
        return replace(self, locale=locale)


@dataclass(frozen=True, slots=True)
class ArrayValue:
    """An ordered sequence of texts.

    Items are stored as a tuple; text_array() returns a fresh list so callers
    cannot mutate the stored items.
    """

    locale: str
    id: str
    items: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def kind(self) -> ValueKind:
        return ValueKind.ARRAY

    def text(self, *args: object) -> str:
        """Render the first item, or return "" for an empty array."""
        if not self.items:
            return ""
        return format_text(self.items[0], args)

    def text_array(self) -> list[str]:
        return list(self.items)

    def quantity_text(self, quantity: int | float | Decimal, *args: object) -> str:
        return self.text(*args)

    def example_text(self) -> str:
        return self.items[0] if self.items else ""

    def with_locale(self, locale: str) -> ArrayValue:
        return replace(self, locale=locale)


@dataclass(frozen=True, slots=True)
class PluralValue:
    """Texts keyed by CLDR plural category.

    The set of populated slots differs per language. "other" is mandatory:
    an empty slot selected by the plural rules renders "other" instead.
    Construction does not reject an empty "other"; the validator reports it
    as OtherMissing so an import never fails halfway.

    Example:
        >>> cats = PluralValue("en", "cats", one="%d cat", other="%d cats")
        >>> cats.quantity_text(1, 1)
        '1 cat'
        >>> cats.quantity_text(2, 2)
        '2 cats'
    """

    locale: str
    id: str
    zero: str = ""
    one: str = ""
    two: str = ""
    few: str = ""
    many: str = ""
    other: str = ""

    @property
    def kind(self) -> ValueKind:
        return ValueKind.PLURAL

    def forms(self) -> dict[str, str]:
        """Return populated slots in CLDR category order."""
        forms: dict[str, str] = {}
        for category in PLURAL_CATEGORIES:
            text = getattr(self, category)
            if text:
                forms[category] = text
        return forms

    def with_form(self, category: str, text: str) -> PluralValue:
        """Return a copy with one slot replaced.

        Raises:
            ValueError: If category is not a CLDR plural category
        """
        if category not in PLURAL_CATEGORIES:
            msg = f"Unknown plural category '{category}', expected one of {PLURAL_CATEGORIES}"
            raise ValueError(msg)
        return replace(self, **{category: text})

    def text(self, *args: object) -> str:
        """Render the "other" form."""
        return format_text(self.other, args)

    def text_array(self) -> list[str]:
        return [self.other]

    def quantity_text(self, quantity: int | float | Decimal, *args: object) -> str:
        """Render the form selected by the locale's plural rules for quantity.

        The quantity only selects the form. To print it, pass it again as an
        argument.
        """
        category = select_plural_category(quantity, self.locale)
        return format_text(getattr(self, category) or self.other, args)

    def example_text(self) -> str:
        return self.other

    def with_locale(self, locale: str) -> PluralValue:
        return replace(self, locale=locale)


type Value = SimpleValue | ArrayValue | PluralValue
"""Closed union of translatable value variants."""
