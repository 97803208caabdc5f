"""Cross-locale consistency findings.

One immutable record type per finding kind. Findings are values, not
exceptions: the validator collects every one of them and wraps them in a
ValidationResult so a caller sees all inconsistencies in one pass.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from i18nres.enums import FindingKind

from .codes import Diagnostic
from .templates import ErrorTemplate

if TYPE_CHECKING:
    from i18nres.runtime.values import Value
    from i18nres.syntax.printf import FormatSpecifier

__all__ = [
    "ArrayCountMismatch",
    "Finding",
    "FormatSpecifierCountMismatch",
    "MissingValue",
    "OtherMissing",
    "TypeMismatch",
    "UnexpectedSpecifierCount",
    "VerbConflict",
]


@dataclass(frozen=True, slots=True)
class MissingValue:
    """Key present in one locale, absent in another.

    Attributes:
        value: The existing value (carries key and defining locale)
        missing_in: Locale that lacks the key
    """

    kind: ClassVar[FindingKind] = FindingKind.MISSING_VALUE

    value: Value
    missing_in: str

    @property
    def key(self) -> str:
        return self.value.id

    def to_diagnostic(self) -> Diagnostic:
        return ErrorTemplate.missing_value(self.value.id, self.value.locale, self.missing_in)

    def __str__(self) -> str:
        return self.to_diagnostic().message


@dataclass(frozen=True, slots=True)
class TypeMismatch:
    """Same key holds different Value variants across locales."""

    kind: ClassVar[FindingKind] = FindingKind.TYPE_MISMATCH

    value0: Value
    value1: Value

    @property
    def key(self) -> str:
        return self.value0.id

    def to_diagnostic(self) -> Diagnostic:
        return ErrorTemplate.type_mismatch(
            self.value0.id,
            self.value0.locale,
            self.value0.kind,
            self.value1.locale,
            self.value1.kind,
        )

    def __str__(self) -> str:
        return self.to_diagnostic().message


@dataclass(frozen=True, slots=True)
class FormatSpecifierCountMismatch:
    """Two locale variants of one text differ in placeholder count.

    Attributes:
        value0: Value from the first locale
        specifiers0: Specifiers parsed from the compared text of value0
        value1: Value from the second locale
        specifiers1: Specifiers parsed from the compared text of value1
    """

    kind: ClassVar[FindingKind] = FindingKind.FORMAT_SPECIFIER_COUNT_MISMATCH

    value0: Value
    specifiers0: tuple[FormatSpecifier, ...]
    value1: Value
    specifiers1: tuple[FormatSpecifier, ...]

    @property
    def key(self) -> str:
        return self.value0.id

    def to_diagnostic(self) -> Diagnostic:
        return ErrorTemplate.specifier_count_mismatch(
            self.value0.id,
            self.value0.locale,
            len(self.specifiers0),
            self.value1.locale,
            len(self.specifiers1),
        )

    def __str__(self) -> str:
        return self.to_diagnostic().message


@dataclass(frozen=True, slots=True)
class UnexpectedSpecifierCount:
    """A text expected to carry a fixed number of specifiers does not.

    String array items must carry zero specifiers.
    """

    kind: ClassVar[FindingKind] = FindingKind.UNEXPECTED_SPECIFIER_COUNT

    value: Value
    found: int
    expected: int
    text: str

    @property
    def key(self) -> str:
        return self.value.id

    def to_diagnostic(self) -> Diagnostic:
        return ErrorTemplate.unexpected_specifier_count(
            self.value.id, self.value.locale, self.found, self.expected, self.text
        )

    def __str__(self) -> str:
        return self.to_diagnostic().message


@dataclass(frozen=True, slots=True)
class VerbConflict:
    """The same canonical argument index uses different verbs."""

    kind: ClassVar[FindingKind] = FindingKind.VERB_CONFLICT

    value0: Value
    specifier0: FormatSpecifier
    value1: Value
    specifier1: FormatSpecifier

    @property
    def key(self) -> str:
        return self.value0.id

    def to_diagnostic(self) -> Diagnostic:
        return ErrorTemplate.verb_conflict(
            self.value0.id,
            self.specifier0.argument_index,
            self.value0.locale,
            self.specifier0.verb,
            self.value1.locale,
            self.specifier1.verb,
        )

    def __str__(self) -> str:
        return self.to_diagnostic().message


@dataclass(frozen=True, slots=True)
class ArrayCountMismatch:
    """Array values differ in element count across locales."""

    kind: ClassVar[FindingKind] = FindingKind.ARRAY_COUNT_MISMATCH

    value0: Value
    count0: int
    value1: Value
    count1: int

    @property
    def key(self) -> str:
        return self.value0.id

    def to_diagnostic(self) -> Diagnostic:
        return ErrorTemplate.array_count_mismatch(
            self.value0.id, self.value0.locale, self.count0, self.value1.locale, self.count1
        )

    def __str__(self) -> str:
        return self.to_diagnostic().message


@dataclass(frozen=True, slots=True)
class OtherMissing:
    """A plural value with an empty mandatory 'other' form."""

    kind: ClassVar[FindingKind] = FindingKind.OTHER_MISSING

    value: Value

    @property
    def key(self) -> str:
        return self.value.id

    def to_diagnostic(self) -> Diagnostic:
        return ErrorTemplate.other_missing(self.value.id, self.value.locale)

    def __str__(self) -> str:
        return self.to_diagnostic().message


type Finding = (
    MissingValue
    | TypeMismatch
    | FormatSpecifierCountMismatch
    | UnexpectedSpecifierCount
    | VerbConflict
    | ArrayCountMismatch
    | OtherMissing
)
"""Closed union of every consistency finding kind."""
