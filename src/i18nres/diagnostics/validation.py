"""Aggregate result of cross-locale consistency validation.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import ConsistencyError
from .templates import ErrorTemplate

if TYPE_CHECKING:
    from i18nres.enums import FindingKind

    from .findings import Finding

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Ordered, immutable list of every consistency finding.

    An empty result is equivalent to success. The result never stops at the
    first problem: it reflects the complete cross product of all locales.

    Attributes:
        findings: Findings in discovery order
        locales: Locales that took part in the validation

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.finding_count
        0
    """

    findings: tuple[Finding, ...]
    locales: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if no finding was recorded."""
        return len(self.findings) == 0

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    def __len__(self) -> int:
        return len(self.findings)

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.findings)

    def of_kind(self, kind: FindingKind) -> tuple[Finding, ...]:
        """Return findings of one kind, preserving order.

        Args:
            kind: Finding kind to select

        Returns:
            Tuple of matching findings (possibly empty)
        """
        return tuple(f for f in self.findings if f.kind == kind)

    def raise_for_findings(self) -> None:
        """Raise ConsistencyError if any finding was recorded.

        Raises:
            ConsistencyError: Carrying this result
        """
        if self.findings:
            raise ConsistencyError(
                ErrorTemplate.consistency_failed(len(self.findings), len(self.locales)),
                result=self,
            )

    @staticmethod
    def valid(locales: tuple[str, ...] = ()) -> ValidationResult:
        """Create a result with no findings."""
        return ValidationResult(findings=(), locales=locales)

    def format(self, *, sanitize: bool = False) -> str:
        """Format result as human-readable text, one finding per line.

        Args:
            sanitize: If True, truncate translated text embedded in messages

        Returns:
            Formatted summary and findings
        """
        from .formatter import DiagnosticFormatter, OutputFormat  # noqa: PLC0415 - circular

        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=sanitize)
        return formatter.format_validation_result(self)
