"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing texts)
        2000-2999: Formatting errors (argument substitution failures)
        3000-3999: Import and registry errors
        5000-5999: Consistency findings (cross-locale validation)
    """

    # Lookup errors (1000-1999)
    TEXT_NOT_FOUND = 1001

    # Formatting errors (2000-2999)
    FORMAT_ARITY_MISMATCH = 2001
    FORMAT_ARGUMENT_INVALID = 2002

    # Import and registry errors (3000-3999)
    IMPORT_FAILED = 3001
    REGISTRY_NOT_CONFIGURED = 3002

    # Consistency findings (5000-5999)
    MISSING_VALUE = 5001
    TYPE_MISMATCH = 5002
    FORMAT_SPECIFIER_COUNT_MISMATCH = 5003
    UNEXPECTED_SPECIFIER_COUNT = 5004
    VERB_CONFLICT = 5005
    ARRAY_COUNT_MISMATCH = 5006
    OTHER_MISSING = 5007
    CONSISTENCY_FAILED = 5100


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale the diagnostic refers to (if any)
        key: Resource key the diagnostic refers to (if any)
        text: Offending translated text (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    key: str | None = None
    text: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[TEXT_NOT_FOUND]: Text 'hello' not found in locale 'de_DE'
              --> de_DE.hello
              = help: Check that the key is defined in every imported resource

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
