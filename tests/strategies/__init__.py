"""Hypothesis strategies for i18nres property-based testing.

Strategies are organized by domain:

- printf: Specifiers, texts with escapes, argument reordering
- resources: Locale tags, resource keys, consistent multi-locale value sets

Usage:
    from tests.strategies import printf_texts, consistent_resource_sets
"""

from .printf import (
    VERBS,
    literal_chunks,
    printf_flags,
    printf_specifiers,
    printf_texts,
    render_index,
    reordered_texts,
    verb_sequences,
)
from .resources import (
    LOCALE_POOL,
    consistent_resource_sets,
    locale_tags,
    resource_keys,
)

__all__ = [
    "LOCALE_POOL",
    "VERBS",
    "consistent_resource_sets",
    "literal_chunks",
    "locale_tags",
    "printf_flags",
    "printf_specifiers",
    "printf_texts",
    "render_index",
    "reordered_texts",
    "resource_keys",
    "verb_sequences",
]
