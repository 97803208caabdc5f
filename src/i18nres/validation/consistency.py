"""Cross-locale consistency validation.

Checks that every translation of a key can replace every other translation
of the same key: same value variant, same number of printf arguments and
the same verb per canonical argument index.

Architecture:
    - validate_tables(): Entry point, walks every unordered table pair once
    - _compare_tables(): All keys of one pair, under both tables' read locks
    - _compare_values(): Dispatch on the value variant
    - _compare_specifiers(): Specifier list comparison shared by all variants

Findings are collected, never raised. The whole cross product is always
processed so a caller sees every inconsistency in one pass.

Locking:
    Each pair holds the read locks of its two tables only. A table may
    change between two pairs; validation is meant to run after loading.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from itertools import combinations

from i18nres.diagnostics import (
    ArrayCountMismatch,
    Finding,
    FormatSpecifierCountMismatch,
    MissingValue,
    OtherMissing,
    TypeMismatch,
    UnexpectedSpecifierCount,
    ValidationResult,
    VerbConflict,
)
from i18nres.runtime.table import ResourceTable
from i18nres.runtime.values import ArrayValue, PluralValue, SimpleValue, Value
from i18nres.syntax import parse_printf

__all__ = ["validate_tables"]

logger = logging.getLogger(__name__)


def validate_tables(tables: Iterable[ResourceTable]) -> ValidationResult:
    """Validate the consistency of all locale tables against each other.

    Checks per unordered pair of distinct tables (r0, r1), keys in sorted
    order:
        - every key exists in both tables (MissingValue)
        - both values are the same variant (TypeMismatch)
        - simple texts have matching specifier lists
        - plurals have a non-empty "other" in both locales (OtherMissing) and
          every populated form matches every populated form of the other locale
        - arrays have equal length (ArrayCountMismatch) and items carry no
          specifiers at all (UnexpectedSpecifierCount)

    Missing keys are reported in both directions: a key only r1 defines
    yields MissingValue(missing_in=r0) as well, so a key added to a later
    locale is not lost.

    Every check is pairwise. A single table is never compared, so e.g. a
    plural with an empty "other" in a one-locale set is not reported.

    Args:
        tables: Resource tables; the same table passed twice is compared once

    Returns:
        ValidationResult with findings in discovery order

    Example:
        >>> en, de = ResourceTable("en"), ResourceTable("de")
        >>> en.put(SimpleValue("en", "hello", "hello %s"))
        >>> de.put(SimpleValue("de", "hello", "hallo %s %d"))
        >>> validate_tables([en, de]).finding_count
        1
    """
    unique = list(dict.fromkeys(tables))
    locales = tuple(t.locale for t in unique)

    findings: list[Finding] = []
    for r0, r1 in combinations(unique, 2):
        findings.extend(_compare_tables(r0, r1))

    if findings:
        logger.info(
            "Validation found %d finding(s) across %d locale(s)", len(findings), len(unique)
        )
    else:
        logger.info("Validation passed for %d locale(s)", len(unique))

    return ValidationResult(findings=tuple(findings), locales=locales)


def _compare_tables(r0: ResourceTable, r1: ResourceTable) -> list[Finding]:
    findings: list[Finding] = []
    with r0.reading() as values0, r1.reading() as values1:
        for key in sorted(values0):
            v0 = values0[key]
            v1 = values1.get(key)
            if v1 is None:
                findings.append(MissingValue(value=v0, missing_in=r1.locale))
                continue
            finding = _compare_values(v0, v1)
            if finding is not None:
                findings.append(finding)

        findings.extend(_missing_in(values1, values0, r0.locale))
    return findings


def _missing_in(
    present: Mapping[str, Value], absent: Mapping[str, Value], locale: str
) -> list[Finding]:
    return [
        MissingValue(value=present[key], missing_in=locale)
        for key in sorted(present)
        if key not in absent
    ]


def _compare_values(v0: Value, v1: Value) -> Finding | None:
    match v0, v1:
        case SimpleValue(), SimpleValue():
            return _compare_specifiers(v0, v0.source, v1, v1.source)

        case PluralValue(), PluralValue():
            if not v0.other:
                return OtherMissing(value=v0)
            if not v1.other:
                return OtherMissing(value=v1)
            for text0 in v0.forms().values():
                for text1 in v1.forms().values():
                    finding = _compare_specifiers(v0, text0, v1, text1)
                    if finding is not None:
                        return finding
            return None

        case ArrayValue(), ArrayValue():
            if len(v0.items) != len(v1.items):
                return ArrayCountMismatch(
                    value0=v0, count0=len(v0.items), value1=v1, count1=len(v1.items)
                )
            for text0, text1 in zip(v0.items, v1.items, strict=True):
                finding = _compare_specifiers(v0, text0, v1, text1, expected=0)
                if finding is not None:
                    return finding
            return None

        case _:
            return TypeMismatch(value0=v0, value1=v1)


def _compare_specifiers(
    v0: Value, text0: str, v1: Value, text1: str, expected: int | None = None
) -> Finding | None:
    """Compare the specifier lists of two texts.

    Args:
        v0: Value owning text0
        text0: Text from the first locale
        v1: Value owning text1
        text1: Text from the second locale
        expected: Required specifier count, or None if any count is allowed

    Returns:
        The first finding, or None if both texts are interchangeable
    """
    specs0 = parse_printf(text0)
    specs1 = parse_printf(text1)

    if len(specs0) != len(specs1):
        return FormatSpecifierCountMismatch(
            value0=v0, specifiers0=specs0, value1=v1, specifiers1=specs1
        )

    if expected is not None and len(specs0) != expected:
        return UnexpectedSpecifierCount(
            value=v0, found=len(specs0), expected=expected, text=text0
        )

    for spec0, spec1 in zip(specs0, specs1, strict=True):
        if spec0.verb != spec1.verb:
            return VerbConflict(value0=v0, specifier0=spec0, value1=v1, specifier1=spec1)
    return None
