"""Printf format specifier parsing.

Tokenizes translated texts into ordered lists of printf-style placeholders
and canonicalizes positional and explicitly indexed references into one
comparable argument order.

Grammar (shared by every dialect):

    escape    := "%%"
    specifier := "%" [index | "(" name ")"] ["+"] ["0" | "'" char] ["-"]
                 [width] ["." precision] verb
    verb      := one of b c d e f i o s u x X

Only the index syntax differs between dialects:

    BRACKET (internal):          %[2]d
    DOLLAR  (Android/Java):      %2$d

A parenthesised name or a non-numeric, zero or out-of-range index is a
malformed explicit index. Such specifiers are treated as positional.

Canonicalization:
    1. Every match (escapes excluded) gets parse_index 0, 1, 2, ...
    2. The sort key is the explicit index if present, else parse_index
    3. Specifiers are stably sorted by that key (ties keep parse order)
    4. argument_index is re-enumerated 0..n-1 in sorted order

    >>> [s.verb for s in parse_printf("%3$s %21$b %1$d", Dialect.DOLLAR)]
    ['d', 's', 'b']

argument_index only makes texts comparable. Rendering uses argument_slot,
the zero-based position in the argument list, assigned in text order:
    - an explicit index n selects slot n - 1
    - a positional specifier takes the slot after the previous specifier
      (slot 0 for the first one)

    >>> [s.argument_slot for s in parse_printf("%[1]s meets %[1]s")]
    [0, 0]

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field
from typing import Final

from i18nres.constants import MAX_EXPLICIT_INDEX, PARSE_CACHE_SIZE
from i18nres.enums import Dialect

__all__ = [
    "FormatSpecifier",
    "SpecifierGrammar",
    "convert_dialect",
    "get_grammar",
    "parse_printf",
]

_BODY: Final = (
    r"(?P<body>"
    r"(?P<sign>\+)?"
    r"(?P<pad>0|'[^$])?"
    r"(?P<left>-)?"
    r"(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<verb>[b-fiosuxX])"
    r")"
)

_NAMED_SLOT: Final = r"\((?P<name>[^)]+)\)"


@dataclass(frozen=True, slots=True)
class SpecifierGrammar:
    """One placeholder dialect.

    Attributes:
        dialect: Dialect this grammar implements
        pattern: Compiled scanner; group "escape" marks %%, groups "index",
            "name" and "body" split a specifier
        index_template: str.format template rendering an explicit index
    """

    dialect: Dialect
    pattern: re.Pattern[str]
    index_template: str

    def render_index(self, index: int) -> str:
        """Render an explicit index in this dialect's notation."""
        return self.index_template.format(index)


def _compile(index_syntax: str) -> re.Pattern[str]:
    return re.compile(
        r"(?P<escape>%%)|%(?:" + index_syntax + "|" + _NAMED_SLOT + ")?" + _BODY
    )


_GRAMMARS: Final[dict[Dialect, SpecifierGrammar]] = {
    Dialect.BRACKET: SpecifierGrammar(
        dialect=Dialect.BRACKET,
        pattern=_compile(r"\[(?P<index>[^\]%]*)\]"),
        index_template="[{}]",
    ),
    Dialect.DOLLAR: SpecifierGrammar(
        dialect=Dialect.DOLLAR,
        pattern=_compile(r"(?P<index>\d+)\$"),
        index_template="{}$",
    ),
}


def get_grammar(dialect: Dialect | str) -> SpecifierGrammar:
    """Return the grammar for a dialect.

    Raises:
        ValueError: If the dialect is unknown
    """
    return _GRAMMARS[Dialect(dialect)]


def _explicit_index(raw: str | None) -> int | None:
    """Parse an explicit index, returning None when absent or malformed."""
    if raw is None or not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    if value < 1 or value > MAX_EXPLICIT_INDEX:
        return None
    return value


@dataclass(frozen=True, slots=True)
class FormatSpecifier:
    """One placeholder occurrence within a message text.

    Offsets are Python character offsets into ``source`` (half-open).
    ``argument_index`` is the canonical index assigned by parse_printf and
    never changes afterwards.

    Attributes:
        source: The complete text this specifier was parsed from
        start: Offset of the introducing "%"
        end: Offset one past the verb
        argument_index: Canonical zero-based argument position
        parse_index: Order of appearance in the text (escapes excluded)
        argument_slot: Zero-based position of the rendered argument
        dialect: Dialect the text was parsed with
    """

    source: str = field(repr=False)
    start: int
    end: int
    argument_index: int
    parse_index: int
    argument_slot: int = 0
    dialect: Dialect = Dialect.BRACKET

    def __post_init__(self) -> None:
        """Validate span invariants.

        Raises:
            ValueError: If the span is empty, negative or exceeds the source
        """
        if not 0 <= self.start < self.end <= len(self.source):
            msg = (
                f"FormatSpecifier span [{self.start}, {self.end}) is invalid "
                f"for source of length {len(self.source)}"
            )
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.text

    @property
    def text(self) -> str:
        """The entire specifier, e.g. "%[2]10.3f"."""
        return self.source[self.start : self.end]

    @property
    def verb(self) -> str:
        """The single conversion character, not the entire directive."""
        return self.source[self.end - 1]

    @property
    def explicit_index(self) -> int | None:
        """The 1-based index declared in the text, or None if positional."""
        return _explicit_index(self._match().group("index"))

    @property
    def is_indexed(self) -> bool:
        return self.explicit_index is not None

    def to_dialect(self, dialect: Dialect | str) -> str:
        """Render this specifier in another dialect.

        Flags, width and precision are preserved. Positional specifiers are
        returned unchanged.

        Example:
            >>> parse_printf("%2$d", Dialect.DOLLAR)[0].to_dialect(Dialect.BRACKET)
            '%[2]d'
        """
        target = get_grammar(dialect)
        if target.dialect == self.dialect:
            return self.text
        match = self._match()
        explicit = _explicit_index(match.group("index"))
        if explicit is None:
            return self.text
        return "%" + target.render_index(explicit) + match.group("body")

    def _match(self) -> re.Match[str]:
        match = _GRAMMARS[self.dialect].pattern.fullmatch(self.text)
        if match is None:  # pragma: no cover - spans only come from the same grammar
            msg = f"'{self.text}' is not a {self.dialect} specifier"
            raise ValueError(msg)
        return match


def parse_printf(
    text: str, dialect: Dialect | str = Dialect.BRACKET
) -> tuple[FormatSpecifier, ...]:
    """Return all format specifiers of text in canonical argument order.

    Never raises for malformed input: unknown syntax is literal text and
    malformed explicit indices are positional. A text without specifiers
    yields an empty tuple.

    Results are cached because validation parses each text once per locale
    pair.

    Args:
        text: Message text to scan
        dialect: Placeholder dialect of the text

    Returns:
        Specifiers sorted by canonical argument_index

    Example:
        >>> [str(s) for s in parse_printf("%%b = '%b'")]
        ['%b']
    """
    return _parse_cached(text, Dialect(dialect))


@functools.lru_cache(maxsize=PARSE_CACHE_SIZE)
def _parse_cached(text: str, dialect: Dialect) -> tuple[FormatSpecifier, ...]:
    grammar = _GRAMMARS[dialect]

    # (sort key, parse index, slot, start, end)
    found: list[tuple[int, int, int, int, int]] = []
    parse_index = 0
    next_slot = 0
    for match in grammar.pattern.finditer(text):
        if match.group("escape") is not None:
            continue
        explicit = _explicit_index(match.group("index"))
        sort_key = parse_index if explicit is None else explicit
        slot = next_slot if explicit is None else explicit - 1
        found.append((sort_key, parse_index, slot, match.start(), match.end()))
        parse_index += 1
        next_slot = slot + 1

    found.sort(key=lambda item: (item[0], item[1]))

    return tuple(
        FormatSpecifier(
            source=text,
            start=start,
            end=end,
            argument_index=canonical,
            parse_index=parsed,
            argument_slot=slot,
            dialect=dialect,
        )
        for canonical, (_, parsed, slot, start, end) in enumerate(found)
    )


def convert_dialect(
    text: str,
    source: Dialect | str = Dialect.DOLLAR,
    target: Dialect | str = Dialect.BRACKET,
) -> str:
    """Rewrite every explicitly indexed specifier from one dialect to another.

    Escapes, positional specifiers and literal text are left untouched.

    Example:
        >>> convert_dialect("hello %%1$s %s %2$d %13$s")
        'hello %%1$s %s %[2]d %[13]s'
    """
    source_grammar = get_grammar(source)
    target_grammar = get_grammar(target)
    if source_grammar is target_grammar:
        return text

    def _rewrite(match: re.Match[str]) -> str:
        if match.group("escape") is not None:
            return match.group(0)
        explicit = _explicit_index(match.group("index"))
        if explicit is None:
            return match.group(0)
        return "%" + target_grammar.render_index(explicit) + match.group("body")

    return source_grammar.pattern.sub(_rewrite, text)
