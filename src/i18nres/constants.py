"""Shared constants for i18nres.

Centralized configuration constants used across the syntax, runtime and
validation packages. Placing them here avoids circular imports and gives a
single source of truth.

Constants are grouped by domain:
- Cache limits: Memory bounds for locale and parse caches
- Locale defaults: Undetermined locale tag and CLDR plural categories
- Grammar limits: Bounds on explicit argument indices
- Code generation: File naming for scanned resources and generated accessors

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "PARSE_CACHE_SIZE",
    # Locale defaults
    "UNDETERMINED_LOCALE",
    "PLURAL_CATEGORIES",
    # Grammar limits
    "MAX_EXPLICIT_INDEX",
    # Code generation
    "STRINGS_PREFIX",
    "STRINGS_SUFFIX",
    "GENERATED_FILENAME",
    # Diagnostics
    "SANITIZE_MAX_CONTENT_LENGTH",
]

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Locale tags arrive from request headers and user input. The amount of
# distinct tags is expected to be small, but an attacker can flood the cache
# with garbage tags, so it is bounded.
MAX_LOCALE_CACHE_SIZE: int = 1000

# Parsed specifier lists keyed by (text, dialect). Validation parses every
# string once per locale pair, so the cache pays for itself quickly.
PARSE_CACHE_SIZE: int = 4096

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# BCP-47 "undetermined" tag. Used for resource files without a locale suffix.
UNDETERMINED_LOCALE: str = "und"

# CLDR plural categories in canonical order.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# ============================================================================
# GRAMMAR LIMITS
# ============================================================================

# Explicit indices beyond a signed 32-bit integer are malformed and the
# specifier is treated as positional.
MAX_EXPLICIT_INDEX: int = 2**31 - 1

# ============================================================================
# CODE GENERATION
# ============================================================================

STRINGS_PREFIX: str = "strings"
STRINGS_SUFFIX: str = ".xml"
GENERATED_FILENAME: str = "strings_gen.py"

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Translated text embedded in diagnostics is truncated to this length when
# sanitization is requested.
SANITIZE_MAX_CONTENT_LENGTH: int = 100
