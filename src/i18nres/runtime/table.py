"""Locale-scoped resource storage.

A ResourceTable maps keys to Values for exactly one locale. It is owned by
a LocaleRegistry, populated by importers and read by lookups and the
consistency validator.

Thread safety:
    Lookups and validation take the shared lock; put/update take the
    exclusive lock. Values are immutable, so a replacement is atomic: a
    reader sees either the old or the new value, never a mix.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable, Mapping
from contextlib import contextmanager
from decimal import Decimal
from types import MappingProxyType

from i18nres.diagnostics import ErrorTemplate, TextNotFoundError

from .rwlock import RWLock
from .values import Value

__all__ = ["ResourceTable"]

logger = logging.getLogger(__name__)


class ResourceTable:
    """Mapping from key to Value for one locale.

    Attributes:
        locale: Canonical locale tag of every value in this table

    Example:
        >>> table = ResourceTable("en")
        >>> table.put(SimpleValue("en", "hello", "Hello %s"))
        >>> table.text("hello", "nick")
        'Hello nick'
    """

    __slots__ = ("_lock", "_values", "locale")

    def __init__(self, locale: str) -> None:
        self.locale = locale
        self._values: dict[str, Value] = {}
        self._lock = RWLock()

    def __repr__(self) -> str:
        return f"ResourceTable(locale={self.locale!r}, keys={len(self)})"

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._values)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._values

    def keys(self) -> list[str]:
        """Return all keys, sorted."""
        with self._lock.read():
            return sorted(self._values)

    def value(self, key: str) -> Value | None:
        with self._lock.read():
            return self._values.get(key)

    def put(self, value: Value) -> None:
        """Insert or replace one value.

        A value bound to another locale is rebound to this table's locale.
        """
        if value.locale != self.locale:
            value = value.with_locale(self.locale)
        with self._lock.write():
            replaced = value.id in self._values
            self._values[value.id] = value
        if replaced:
            logger.warning("Replacing already translated value %s.%s", self.locale, value.id)
        else:
            logger.debug("Registered %s value %s.%s", value.kind, self.locale, value.id)

    def update(self, values: Iterable[Value]) -> int:
        """Insert or replace many values under one exclusive lock.

        Readers observe either none or all of the new values.

        Returns:
            Number of values written
        """
        rebound = [v if v.locale == self.locale else v.with_locale(self.locale) for v in values]
        with self._lock.write():
            replaced = [v.id for v in rebound if v.id in self._values]
            self._values.update((v.id, v) for v in rebound)
        for key in replaced:
            logger.warning("Replacing already translated value %s.%s", self.locale, key)
        logger.info("Imported %d value(s) into %s", len(rebound), self.locale)
        return len(rebound)

    @contextmanager
    def reading(self) -> Generator[Mapping[str, Value]]:
        """Hold the shared lock and expose a read-only view of all values.

        The view must not escape the with block.

        Example:
            >>> with table.reading() as values:
            ...     ids = sorted(values)
        """
        with self._lock.read():
            yield MappingProxyType(self._values)

    def text(self, key: str, *args: object) -> str:
        """Render a value with arguments.

        Raises:
            TextNotFoundError: If key is absent
            FormatArityError: If an argument the text references is missing
        """
        return self._require(key).text(*args)

    def text_array(self, key: str) -> list[str]:
        """Return all texts of a value.

        Raises:
            TextNotFoundError: If key is absent
        """
        return self._require(key).text_array()

    def quantity_text(self, key: str, quantity: int | float | Decimal, *args: object) -> str:
        """Render the plural form matching quantity.

        Raises:
            TextNotFoundError: If key is absent
            FormatArityError: If an argument the text references is missing
        """
        return self._require(key).quantity_text(quantity, *args)

    def _require(self, key: str) -> Value:
        value = self.value(key)
        if value is None:
            raise TextNotFoundError(
                ErrorTemplate.text_not_found(key, self.locale), key=key, locale=self.locale
            )
        return value
