"""Runtime: values, resource tables, formatting and plural selection.

Exports:
    SimpleValue, ArrayValue, PluralValue: Translatable value variants
    ResourceTable: Thread-safe per-locale key -> Value mapping
    format_text: Printf substitution by argument slot
    select_plural_category: CLDR plural category via Babel
    RWLock: Readers-writer lock used by ResourceTable

Python 3.13+.
"""

from .formatting import format_text
from .plural_rules import select_plural_category
from .rwlock import RWLock
from .table import ResourceTable
from .values import ArrayValue, PluralValue, SimpleValue, Value

__all__ = [
    "ArrayValue",
    "PluralValue",
    "RWLock",
    "ResourceTable",
    "SimpleValue",
    "Value",
    "format_text",
    "select_plural_category",
]
