"""Locale registry: the explicit owner of all resource tables.

LocaleRegistry replaces a process-wide global. Whoever composes the system
(service, build script, test) constructs one, imports resources into it and
passes it to lookup and validation code.

Key behaviors:
- One ResourceTable per canonical locale tag, created on first reference
- Translation priority is the order in which tables were configured, until
  set_translation_priority() reorders (and evicts) them
- match() picks the best table for a list of requested locales and never
  fails once at least one table exists

Thread Safety:
    The table collection is guarded by an RWLock: match/tables/locales are
    readers, configure/set_translation_priority/clear are writers. Each table
    guards its own values.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, Self

from babel.core import negotiate_locale

from i18nres.diagnostics import (
    ErrorTemplate,
    RegistryStateError,
    ResourceImportError,
    ValidationResult,
)
from i18nres.locale_utils import (
    canonicalize_locale,
    get_system_locale,
    guess_locale_from_filename,
    language_of,
)
from i18nres.runtime.rwlock import RWLock
from i18nres.runtime.table import ResourceTable
from i18nres.validation import validate_tables

if TYPE_CHECKING:
    from collections.abc import Iterable

    from i18nres.importers import Importer
    from i18nres.runtime.values import Value

__all__ = ["LocaleRegistry"]

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """All resource tables of one application.

    Example:
        >>> registry = LocaleRegistry()
        >>> registry.import_value(SimpleValue("en", "hello", "Hello %s"))
        >>> registry.import_value(SimpleValue("de-DE", "hello", "Hallo %s"))
        >>> registry.match("de-AT", "en").text("hello", "Anna")
        'Hallo Anna'
        >>> registry.validate().is_valid
        True
    """

    __slots__ = ("_lock", "_priority", "_tables")

    def __init__(self) -> None:
        self._tables: dict[str, ResourceTable] = {}
        # Canonical tags in translation priority order; the first is the default
        self._priority: list[str] = []
        self._lock = RWLock()

    def __repr__(self) -> str:
        return f"LocaleRegistry(priority={self.priority!r})"

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._tables)

    def __contains__(self, locale: object) -> bool:
        if not isinstance(locale, str):
            return False
        tag = canonicalize_locale(locale)
        with self._lock.read():
            return tag in self._tables

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.clear()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def configure(self, locale: str) -> ResourceTable:
        """Return the table of a locale, creating it on first reference.

        A new table is appended to the translation priority, so the first
        configured locale is the default fallback.

        Args:
            locale: Locale tag in any spelling ("de-DE", "de_de", "")

        Returns:
            The table for the canonical form of locale
        """
        tag = canonicalize_locale(locale)
        with self._lock.read():
            table = self._tables.get(tag)
        if table is not None:
            return table

        with self._lock.write():
            # Another thread may have created it between the two locks
            table = self._tables.get(tag)
            if table is None:
                table = ResourceTable(tag)
                self._tables[tag] = table
                self._priority.append(tag)
                logger.debug("Configured locale %s (priority %d)", tag, len(self._priority))
        return table

    def set_translation_priority(self, locales: Iterable[str]) -> None:
        """Reorder tables by priority and evict every table not named.

        Unknown locales are ignored: this never creates a table.

        Args:
            locales: Locale tags, most preferred first
        """
        wanted = dict.fromkeys(canonicalize_locale(locale) for locale in locales)
        with self._lock.write():
            priority = [tag for tag in wanted if tag in self._tables]
            evicted = [tag for tag in self._priority if tag not in wanted]
            for tag in evicted:
                del self._tables[tag]
            self._priority = priority

        if evicted:
            logger.info("Evicted locale(s) %s by translation priority", ", ".join(evicted))

    @property
    def priority(self) -> tuple[str, ...]:
        """Canonical locale tags in translation priority order."""
        with self._lock.read():
            return tuple(self._priority)

    def locales(self) -> list[str]:
        """Return all configured locale tags, sorted."""
        with self._lock.read():
            return sorted(self._tables)

    def tables(self) -> tuple[ResourceTable, ...]:
        """Return all tables in translation priority order."""
        with self._lock.read():
            return tuple(self._tables[tag] for tag in self._priority)

    def table(self, locale: str) -> ResourceTable | None:
        """Return the table of exactly this locale, or None."""
        tag = canonicalize_locale(locale)
        with self._lock.read():
            return self._tables.get(tag)

    def clear(self) -> None:
        """Drop every table."""
        with self._lock.write():
            count = len(self._tables)
            self._tables.clear()
            self._priority.clear()
        if count:
            logger.debug("Cleared %d locale table(s)", count)

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_value(self, value: Value) -> None:
        """Put one value into the table of its locale.

        Replacing an existing key logs a warning.
        """
        self.configure(value.locale).put(value)

    def import_source(
        self,
        importer: Importer,
        locale: str,
        source: str | bytes,
        *,
        source_name: str = "<memory>",
    ) -> int:
        """Parse a resource document into the table of locale.

        Returns:
            Number of imported values

        Raises:
            ResourceImportError: If the importer cannot parse source
        """
        table = self.configure(locale)
        return importer.import_into(table, source, source_name)

    def import_file(self, importer: Importer, path: str | os.PathLike[str]) -> int:
        """Import a resource file, guessing its locale from the file name.

        "strings-de-DE.xml" goes into de_DE; "strings.xml" (or a name with
        no recognizable tag) goes into the undetermined locale.

        Returns:
            Number of imported values

        Raises:
            ResourceImportError: If the file cannot be read or parsed
        """
        file_path = Path(path)
        try:
            data = file_path.read_bytes()
        except OSError as e:
            logger.error("Cannot open resource file %s: %s", file_path, e)
            raise ResourceImportError(
                ErrorTemplate.import_failed(str(file_path), str(e)), source_name=str(file_path)
            ) from e

        locale = guess_locale_from_filename(file_path)
        count = self.import_source(importer, locale, data, source_name=str(file_path))
        logger.info("Imported %d value(s) from %s", count, file_path)
        return count

    # ------------------------------------------------------------------
    # Resolution and validation
    # ------------------------------------------------------------------

    def match(self, *locales: str) -> ResourceTable:
        """Return the best table for the requested locales.

        Each requested tag is tried in order, and for one tag:
            1. A table with exactly that tag
            2. Babel negotiation (case-insensitive, aliases, language-only tags)
            3. A table with the same language, in priority order
        If no requested tag matches, the table with the highest translation
        priority is returned.

        Args:
            *locales: Requested locale tags, most preferred first. Without
                arguments the system locale is requested.

        Returns:
            Best-matching table

        Raises:
            RegistryStateError: If no table is configured
        """
        requested = [canonicalize_locale(locale) for locale in locales or (get_system_locale(),)]

        with self._lock.read():
            if not self._priority:
                raise RegistryStateError(ErrorTemplate.registry_not_configured())

            for wanted in requested:
                table = self._match_one(wanted)
                if table is not None:
                    return table

            default = self._priority[0]
            logger.debug("No table matches %s, using %s", requested, default)
            return self._tables[default]

    def _match_one(self, wanted: str) -> ResourceTable | None:
        """Resolve one canonical tag. Caller holds the read lock."""
        table = self._tables.get(wanted)
        if table is not None:
            return table

        negotiated = negotiate_locale([wanted], self._priority, sep="_")
        if negotiated is not None:
            by_lower = {tag.lower(): tag for tag in self._priority}
            tag = by_lower.get(negotiated.lower())
            if tag is not None:
                return self._tables[tag]

        language = language_of(wanted)
        for tag in self._priority:
            if language_of(tag) == language:
                return self._tables[tag]
        return None

    def validate(self) -> ValidationResult:
        """Validate all tables against each other.

        See i18nres.validation.validate_tables.
        """
        return validate_tables(self.tables())
