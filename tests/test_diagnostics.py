"""Tests for diagnostics: templates, formatter, findings and ValidationResult.

Tests verify:
- Exceptions carry structured diagnostics and format in compiler style
- Rust, simple and JSON output formats
- Control characters in translated text are escaped, long text sanitized
- Findings expose kind, key and a diagnostic
- ValidationResult aggregation and fail-fast conversion
"""

from __future__ import annotations

import json

import pytest

from i18nres.diagnostics import (
    ConsistencyError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    I18nError,
    MissingValue,
    OtherMissing,
    OutputFormat,
    TextNotFoundError,
    ValidationResult,
)
from i18nres.enums import FindingKind
from i18nres.runtime import PluralValue, SimpleValue


class TestExceptions:
    """Exception hierarchy."""

    def test_plain_message(self) -> None:
        error = I18nError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        error = TextNotFoundError(
            ErrorTemplate.text_not_found("hello", "de_DE"), key="hello", locale="de_DE"
        )

        assert isinstance(error, I18nError)
        assert str(error).startswith("error[TEXT_NOT_FOUND]: Text 'hello' not found")
        assert "--> de_DE.hello" in str(error)


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust(self) -> None:
        diagnostic = ErrorTemplate.unexpected_specifier_count("items", "en", 1, 0, "%d item")

        output = DiagnosticFormatter().format(diagnostic)

        assert output.splitlines() == [
            "error[UNEXPECTED_SPECIFIER_COUNT]: The value en.items has 1 format specifiers "
            "but expected are 0",
            "  --> en.items",
            "  = text: '%d item'",
            "  = help: String array items are not interpolated; "
            "use %% for a literal percent sign",
        ]

    def test_simple(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(ErrorTemplate.missing_value("a", "en", "de")) == (
            "MISSING_VALUE: de is missing 'a' (defined in en)"
        )

    def test_json(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(ErrorTemplate.text_not_found("a", "en")))

        assert data["code"] == "TEXT_NOT_FOUND"
        assert data["code_value"] == DiagnosticCode.TEXT_NOT_FOUND.value
        assert data["locale"] == "en"
        assert data["key"] == "a"
        assert "text" not in data

    def test_color(self) -> None:
        formatter = DiagnosticFormatter(color=True)
        output = formatter.format(Diagnostic(code=DiagnosticCode.IMPORT_FAILED, message="x"))

        assert output.startswith("\033[1;31merror\033[0m[IMPORT_FAILED]")

    def test_control_characters_escaped(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.IMPORT_FAILED, message="bad\nline")

        assert DiagnosticFormatter().format(diagnostic) == "error[IMPORT_FAILED]: bad\\nline"

    def test_sanitize_truncates_text(self) -> None:
        formatter = DiagnosticFormatter(sanitize=True, max_content_length=5)
        diagnostic = ErrorTemplate.format_arity_mismatch("0123456789", 2, 1)

        assert "  = text: '01234...'" in formatter.format(diagnostic)

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.registry_not_configured(),
            ErrorTemplate.other_missing("a", "en"),
        ]

        assert len(formatter.format_all(diagnostics).splitlines()) == 2


class TestFindings:
    """Finding records."""

    def test_missing_value(self) -> None:
        finding = MissingValue(value=SimpleValue("en", "hello", "hi"), missing_in="de")

        assert finding.kind == FindingKind.MISSING_VALUE
        assert finding.key == "hello"
        assert finding.to_diagnostic().code == DiagnosticCode.MISSING_VALUE
        assert str(finding) == "de is missing 'hello' (defined in en)"

    def test_findings_are_immutable(self) -> None:
        finding = OtherMissing(value=PluralValue("en", "cats"))

        with pytest.raises(AttributeError):
            finding.value = PluralValue("de", "cats")  # type: ignore[misc]


class TestValidationResult:
    """Aggregate result."""

    def _result(self) -> ValidationResult:
        return ValidationResult(
            findings=(
                MissingValue(value=SimpleValue("en", "a", "a"), missing_in="de"),
                OtherMissing(value=PluralValue("de", "cats")),
            ),
            locales=("en", "de"),
        )

    def test_valid(self) -> None:
        result = ValidationResult.valid(("en",))

        assert result.is_valid
        assert len(result) == 0
        result.raise_for_findings()
        assert result.format() == "Validation passed: 1 locale(s), no findings"

    def test_of_kind(self) -> None:
        result = self._result()

        assert [f.kind for f in result] == [FindingKind.MISSING_VALUE, FindingKind.OTHER_MISSING]
        assert len(result.of_kind(FindingKind.OTHER_MISSING)) == 1
        assert result.of_kind(FindingKind.VERB_CONFLICT) == ()

    def test_format(self) -> None:
        lines = self._result().format().splitlines()

        assert lines == [
            "Validation failed: 2 finding(s) across 2 locale(s)",
            "  MISSING_VALUE: de is missing 'a' (defined in en)",
            "  OTHER_MISSING: the plural 'other' must not be empty of de.cats",
        ]

    def test_raise_for_findings(self) -> None:
        result = self._result()

        with pytest.raises(ConsistencyError) as exc_info:
            result.raise_for_findings()

        assert exc_info.value.result is result
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONSISTENCY_FAILED
