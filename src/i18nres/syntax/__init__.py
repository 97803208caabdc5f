"""Placeholder syntax for translated texts.

Exports:
    parse_printf: Tokenize a text into canonically ordered specifiers
    convert_dialect: Rewrite indexed specifiers between dialects
    FormatSpecifier: One placeholder occurrence
    SpecifierGrammar: Dialect-specific scanner shared by parser and renderer
    Dialect: BRACKET (%[2]d) or DOLLAR (%2$d)

Python 3.13+. Zero external dependencies.
"""

from i18nres.enums import Dialect

from .printf import (
    FormatSpecifier,
    SpecifierGrammar,
    convert_dialect,
    get_grammar,
    parse_printf,
)

__all__ = [
    "Dialect",
    "FormatSpecifier",
    "SpecifierGrammar",
    "convert_dialect",
    "get_grammar",
    "parse_printf",
]
