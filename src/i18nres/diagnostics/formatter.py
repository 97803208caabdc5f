"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from i18nres.constants import SANITIZE_MAX_CONTENT_LENGTH

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Translated texts come from third parties (translators, vendors); control
# characters are escaped so they cannot forge log lines.
_CONTROL_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x1b": "\\x1b"})


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate translated text to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.text_not_found("hello", "de_DE")))
        TEXT_NOT_FOUND: Text 'hello' not found in locale 'de_DE'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = SANITIZE_MAX_CONTENT_LENGTH

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by newlines."""
        separator = "\n\n" if self.output_format == OutputFormat.RUST else "\n"
        return separator.join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: ValidationResult) -> str:
        """Format a ValidationResult with a summary line and every finding.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        if result.is_valid:
            return f"Validation passed: {len(result.locales)} locale(s), no findings"

        parts = [
            f"Validation failed: {result.finding_count} finding(s) "
            f"across {len(result.locales)} locale(s)"
        ]
        parts.extend(
            f"  {self.format(finding.to_diagnostic())}" for finding in result.findings
        )
        return "\n".join(parts)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[VERB_CONFLICT]: The value en.size has at index 0 the verb 'd' ...
              --> de_DE.size
              = text: 'Größe %s'
              = help: Reorder arguments with explicit indices instead of changing verbs
        """
        severity = diagnostic.severity
        if self.color:
            ansi = "1;31" if severity == "error" else "1;33"
            severity_str = f"\033[{ansi}m{severity}\033[0m"
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {self._clean(diagnostic.message)}"]

        if diagnostic.locale and diagnostic.key:
            parts.append(f"  --> {diagnostic.locale}.{diagnostic.key}")
        elif diagnostic.key:
            parts.append(f"  --> {diagnostic.key}")

        if diagnostic.text is not None:
            parts.append(f"  = text: {self._maybe_sanitize(diagnostic.text)!r}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            MISSING_VALUE: de_DE is missing 'hello' (defined in en)
        """
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "TEXT_NOT_FOUND", "code_value": 1001, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.locale:
            data["locale"] = diagnostic.locale

        if diagnostic.key:
            data["key"] = diagnostic.key

        if diagnostic.text is not None:
            data["text"] = self._maybe_sanitize(diagnostic.text)

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        return self._maybe_sanitize(text).translate(_CONTROL_ESCAPES)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
