"""Performance benchmarks for i18nres.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in specifier parsing, formatting and validation.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
