"""i18nres exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.
Consistency findings are not exceptions: they are collected as values into a
ValidationResult. ConsistencyError only exists for callers that want to turn
a failed validation into control flow.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "ConsistencyError",
    "FormatArgumentError",
    "FormatArityError",
    "I18nError",
    "RegistryStateError",
    "ResourceImportError",
    "TextNotFoundError",
]


class I18nError(Exception):
    """Base exception for all i18nres errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TextNotFoundError(I18nError):
    """Requested key is absent in the resolved resource table.

    Attributes:
        key: The key that was looked up
        locale: Locale of the table that was searched
    """

    def __init__(self, message: str | Diagnostic, *, key: str, locale: str) -> None:
        super().__init__(message)
        self.key = key
        self.locale = locale


class FormatArityError(I18nError):
    """A text expects more arguments than were supplied.

    Attributes:
        expected: Number of specifiers in the text
        supplied: Number of arguments passed
    """

    def __init__(self, message: str | Diagnostic, *, expected: int, supplied: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.supplied = supplied


class FormatArgumentError(I18nError):
    """An argument cannot be converted by the specifier's verb.

    Example: passing "abc" to a %d specifier.
    """


class ResourceImportError(I18nError):
    """A resource source could not be read or parsed.

    Attributes:
        source_name: Human-readable name of the failing source
    """

    def __init__(self, message: str | Diagnostic, *, source_name: str = "") -> None:
        super().__init__(message)
        self.source_name = source_name


class RegistryStateError(I18nError):
    """The registry was asked to resolve a locale before any table exists."""


class ConsistencyError(I18nError):
    """Validation produced findings and the caller asked for fail-fast.

    Attributes:
        result: The complete ValidationResult with every finding
    """

    def __init__(self, message: str | Diagnostic, *, result: ValidationResult) -> None:
        super().__init__(message)
        self.result = result
