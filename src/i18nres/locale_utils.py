"""Locale utilities for tag canonicalization and detection.

Centralizes locale handling used throughout the codebase. All locale codes
are canonicalized once at the system boundary (registry, plural rules) so
that table keys, cache keys and lookups agree on one spelling.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
import re
from pathlib import PurePath
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from i18nres.constants import (
    MAX_LOCALE_CACHE_SIZE,
    STRINGS_PREFIX,
    STRINGS_SUFFIX,
    UNDETERMINED_LOCALE,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "canonicalize_locale",
    "get_babel_locale",
    "get_system_locale",
    "guess_locale_from_filename",
    "language_of",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Matches "de-DE", "de_DE" or a bare two-letter language followed by a dot.
_FILENAME_LOCALE = re.compile(r"[a-z]{2}[_-][A-Z]{2}|[a-z]{2}\.")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def canonicalize_locale(locale_code: str) -> str:
    """Canonicalize an untrusted locale code into one POSIX spelling.

    Known locales are round-tripped through Babel so that "de-de", "de_DE"
    and "de-DE" all become "de_DE". Unknown but well-formed codes keep their
    normalized spelling, so "de-123" stays "de_123" and can still match by
    language. Empty codes and "und" map to the undetermined locale.

    The cache is bounded by MAX_LOCALE_CACHE_SIZE so that a flood of garbage
    tags cannot grow memory without limit.

    Args:
        locale_code: Locale code from any source

    Returns:
        Canonical locale code

    Example:
        >>> canonicalize_locale("de-de")
        'de_DE'
        >>> canonicalize_locale("")
        'und'
    """
    normalized = normalize_locale(locale_code.strip())
    if not normalized or normalized.lower() in (UNDETERMINED_LOCALE, "root"):
        return UNDETERMINED_LOCALE

    try:
        return str(get_babel_locale(normalized))
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Locale '%s' unknown to CLDR, keeping as-is: %s", locale_code, e)
        return normalized


def language_of(locale_code: str) -> str:
    """Return the lowercase language subtag of a locale code.

    Example:
        >>> language_of("de_DE")
        'de'
        >>> language_of("pt-BR")
        'pt'
    """
    return normalize_locale(locale_code).split("_", 1)[0].lower()


def get_system_locale() -> str:
    """Detect system locale from environment variables.

    Detection order: LC_ALL, LC_MESSAGES, LANG. Encoding suffixes such as
    ".UTF-8" are stripped and "C"/"POSIX" pseudo-locales are ignored.

    Returns:
        Detected locale code in POSIX format, or "und" if not determinable.

    Example:
        >>> os.environ["LANG"] = "de_DE.UTF-8"
        >>> get_system_locale()
        'de_DE'
    """
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            return normalize_locale(value.split(".")[0])
    return UNDETERMINED_LOCALE


def guess_locale_from_filename(path: str | os.PathLike[str]) -> str:
    """Guess the locale encoded in a resource file name.

    A supported file name looks like "strings-de-DE.xml". The plain
    "strings.xml" is the undetermined default locale. The returned code keeps
    the separator found in the file name.

    Args:
        path: File name or path

    Returns:
        Locale code, "und" for the default file, or "" if nothing was found

    Example:
        >>> guess_locale_from_filename("res/strings-de-DE.xml")
        'de-DE'
        >>> guess_locale_from_filename("bla-en.xml")
        'en'
    """
    name = PurePath(path).name
    if name.lower() == STRINGS_PREFIX + STRINGS_SUFFIX:
        return UNDETERMINED_LOCALE

    match = _FILENAME_LOCALE.search(name)
    if match is None:
        return ""
    return match.group(0).removesuffix(".")
