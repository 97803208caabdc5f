"""i18nres - Multilingual text resources with cross-locale consistency validation.

Imports platform string resources, stores them per locale, resolves the best
locale for a request and verifies that every translation of a key takes the
same printf arguments as every other translation.

Public API:
    LocaleRegistry - Owner of all locale tables; import, match, validate
    ResourceTable - Thread-safe key -> Value mapping of one locale
    SimpleValue, ArrayValue, PluralValue - Translatable value variants
    AndroidImporter - Android strings.xml importer
    validate_tables - Pairwise consistency validation of tables
    parse_printf - Tokenize a text into canonically ordered specifiers
    format_text - Printf substitution by argument slot
    Dialect - Specifier dialect (BRACKET %[1]s, DOLLAR %1$s)

Exceptions:
    I18nError - Base exception class
    TextNotFoundError - Key absent in the resolved table
    FormatArityError - Fewer arguments than the text references
    ConsistencyError - Raised on request for a failed validation

Submodules:
    i18nres.diagnostics - Finding types, ValidationResult, diagnostic formatting
    i18nres.codegen - Typed accessor generation (generate_accessors, bundle)
    i18nres.locale_utils - Locale canonicalization and detection
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    ConsistencyError,
    FormatArgumentError,
    FormatArityError,
    I18nError,
    RegistryStateError,
    ResourceImportError,
    TextNotFoundError,
    ValidationResult,
)
from .enums import Dialect
from .importers import AndroidImporter
from .registry import LocaleRegistry
from .runtime import ArrayValue, PluralValue, ResourceTable, SimpleValue, Value, format_text
from .syntax import parse_printf
from .validation import validate_tables

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("i18nres")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AndroidImporter",
    "ArrayValue",
    "ConsistencyError",
    "Dialect",
    "FormatArgumentError",
    "FormatArityError",
    "I18nError",
    "LocaleRegistry",
    "PluralValue",
    "RegistryStateError",
    "ResourceImportError",
    "ResourceTable",
    "SimpleValue",
    "TextNotFoundError",
    "ValidationResult",
    "Value",
    "__version__",
    "format_text",
    "parse_printf",
    "validate_tables",
]
