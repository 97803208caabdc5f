"""Android strings.xml importer.

Supported elements:

    <resources>
        <string name="hello">Hello %1$s</string>
        <string-array name="days"><item>Mon</item><item>Tue</item></string-array>
        <plurals name="cats">
            <item quantity="one">%d cat</item>
            <item quantity="other">%d cats</item>
        </plurals>
    </resources>

Texts are decoded (surrounding double quotes removed, \\@ \\? \\' \\" unescaped)
and indexed specifiers are converted from %1$s to the internal %[1]s dialect.
Elements marked translatable="false" are skipped. A quantity that is not a
CLDR category is stored as "other". Resource references (@string/x) are kept
as literal text.

Python 3.13+.
"""

from __future__ import annotations

import logging
from xml.etree import ElementTree

from i18nres.constants import PLURAL_CATEGORIES
from i18nres.diagnostics import ErrorTemplate, ResourceImportError
from i18nres.enums import Dialect
from i18nres.runtime.table import ResourceTable
from i18nres.runtime.values import ArrayValue, PluralValue, SimpleValue, Value
from i18nres.syntax import convert_dialect

__all__ = ["AndroidImporter", "decode_android_text"]

logger = logging.getLogger(__name__)

_ESCAPES = (("\\@", "@"), ("\\?", "?"), ("\\'", "'"), ('\\"', '"'))


def decode_android_text(text: str) -> str:
    """Unescape an Android string and convert it to the internal dialect.

    Example:
        >>> decode_android_text('"hello %%1$s %s %2$d %13$s"')
        'hello %%1$s %s %[2]d %[13]s'
    """
    if len(text) <= 1:
        return text

    if text[0] == '"' and text[-1] == '"':
        text = text[1:-1]

    for escaped, plain in _ESCAPES:
        text = text.replace(escaped, plain)

    return convert_dialect(text, Dialect.DOLLAR, Dialect.BRACKET)


class AndroidImporter:
    """Imports the Android string resource format.

    Example:
        >>> table = ResourceTable("de_DE")
        >>> xml = '<resources><string name="a">b</string></resources>'
        >>> AndroidImporter().import_into(table, xml)
        1
    """

    __slots__ = ()

    def import_into(
        self, table: ResourceTable, source: str | bytes, source_name: str = "<memory>"
    ) -> int:
        """Parse an Android resource document into table.

        All values are written under one exclusive lock, so readers see
        either none or all of them.

        Args:
            table: Destination table
            source: XML document
            source_name: Name used in diagnostics

        Returns:
            Number of imported values

        Raises:
            ResourceImportError: If source is not a well-formed <resources> document
        """
        values = self.parse(source, table.locale, source_name=source_name)
        return table.update(values)

    def parse(
        self, source: str | bytes, locale: str, *, source_name: str = "<memory>"
    ) -> list[Value]:
        """Parse an Android resource document into values without storing them.

        Raises:
            ResourceImportError: If source is not a well-formed <resources> document
        """
        try:
            root = ElementTree.fromstring(source)
        except ElementTree.ParseError as e:
            logger.error("Failed to parse %s: %s", source_name, e)
            raise ResourceImportError(
                ErrorTemplate.import_failed(source_name, str(e)), source_name=source_name
            ) from e

        if root.tag != "resources":
            reason = f"expected root element <resources>, got <{root.tag}>"
            logger.error("Failed to import %s: %s", source_name, reason)
            raise ResourceImportError(
                ErrorTemplate.import_failed(source_name, reason), source_name=source_name
            )

        values: list[Value] = []
        for element in root:
            name = element.get("name")
            if not name:
                continue
            if element.get("translatable", "true").lower() == "false":
                logger.debug("Skipping untranslatable %s '%s'", element.tag, name)
                continue

            match element.tag:
                case "string":
                    values.append(SimpleValue(locale, name, _element_text(element)))
                case "string-array":
                    items = tuple(_element_text(item) for item in element.iter("item"))
                    values.append(ArrayValue(locale, name, items))
                case "plurals":
                    values.append(_parse_plurals(element, locale, name))
                case _:
                    logger.debug("Ignoring unsupported element <%s name='%s'>", element.tag, name)

        logger.debug("Parsed %d value(s) from %s", len(values), source_name)
        return values


def _parse_plurals(element: ElementTree.Element, locale: str, name: str) -> PluralValue:
    value = PluralValue(locale, name)
    for item in element.iter("item"):
        category = item.get("quantity", "other").lower()
        if category not in PLURAL_CATEGORIES:
            logger.warning("Unknown plural quantity '%s' in %s, stored as 'other'", category, name)
            category = "other"
        value = value.with_form(category, _element_text(item))
    return value


def _element_text(element: ElementTree.Element) -> str:
    return decode_android_text("".join(element.itertext()))
