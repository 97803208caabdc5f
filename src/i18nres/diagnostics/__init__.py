"""Diagnostic system for i18nres.

Provides structured error diagnostics with codes and hints, the exception
hierarchy for lookups, formatting and imports, and the consistency finding
types aggregated by the validator.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConsistencyError,
    FormatArgumentError,
    FormatArityError,
    I18nError,
    RegistryStateError,
    ResourceImportError,
    TextNotFoundError,
)
from .findings import (
    ArrayCountMismatch,
    Finding,
    FormatSpecifierCountMismatch,
    MissingValue,
    OtherMissing,
    TypeMismatch,
    UnexpectedSpecifierCount,
    VerbConflict,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "ArrayCountMismatch",
    "ConsistencyError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "Finding",
    "FormatArgumentError",
    "FormatArityError",
    "FormatSpecifierCountMismatch",
    "I18nError",
    "MissingValue",
    "OtherMissing",
    "OutputFormat",
    "RegistryStateError",
    "ResourceImportError",
    "TextNotFoundError",
    "TypeMismatch",
    "UnexpectedSpecifierCount",
    "ValidationResult",
    "VerbConflict",
]
