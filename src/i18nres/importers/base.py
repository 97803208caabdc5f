"""Importer protocol.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from i18nres.runtime.table import ResourceTable

__all__ = ["Importer"]


@runtime_checkable
class Importer(Protocol):
    """Protocol for parsing a resource format into a ResourceTable.

    This is a Protocol (structural typing) rather than ABC so that custom
    formats only need to provide import_into().

    Example:
        >>> class LinesImporter:
        ...     def import_into(self, table, source, source_name="<memory>"):
        ...         text = source.decode() if isinstance(source, bytes) else source
        ...         values = [
        ...             SimpleValue(table.locale, key, value)
        ...             for key, _, value in (line.partition("=") for line in text.splitlines())
        ...         ]
        ...         return table.update(values)
    """

    def import_into(
        self, table: ResourceTable, source: str | bytes, source_name: str = "<memory>"
    ) -> int:
        """Parse source and put every value into table.

        Args:
            table: Destination table; values are bound to its locale
            source: Raw resource document
            source_name: Name used in diagnostics, usually the file name

        Returns:
            Number of imported values

        Raises:
            ResourceImportError: If source cannot be parsed
        """
        ...
