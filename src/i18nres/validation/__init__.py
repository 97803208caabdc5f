"""Cross-locale consistency validation.

Exports:
    validate_tables: Pairwise structural comparison of resource tables

Python 3.13+.
"""

from .consistency import validate_tables

__all__ = ["validate_tables"]
