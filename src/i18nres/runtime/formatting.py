"""Printf-style substitution primitive.

Renders a translated text with positional arguments. Each specifier reads
the argument at its argument_slot (see i18nres.syntax.printf): an explicit
index n reads args[n - 1], a positional specifier reads the argument after
the one its predecessor read. A text written as "%[2]s owns %[1]d cats"
and one written as "%d cats belong to %s" both take (count, name), and
"%[1]s meets %[1]s" takes a single argument.

Verbs:
    s        str(); precision truncates
    d i u    integer
    f e      fixed / exponent notation (default precision 6)
    x X o b  hex / octal / binary; x and X hex-encode str arguments
    c        character from code point

Flags:
    +        force sign on numbers
    -        left-justify (pads with spaces)
    0 / 'c   pad character for right-justification

Python 3.13+.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Sequence
from decimal import Decimal
from numbers import Real

from i18nres.diagnostics import ErrorTemplate, FormatArgumentError, FormatArityError
from i18nres.enums import Dialect
from i18nres.syntax import get_grammar, parse_printf

__all__ = ["format_text"]

_INTEGER_VERBS = frozenset("diu")
_RADIX_VERBS = frozenset("xXob")
_FLOAT_VERBS = frozenset("fe")
_DEFAULT_FLOAT_PRECISION = 6


def format_text(
    template: str,
    args: Sequence[object] = (),
    dialect: Dialect | str = Dialect.BRACKET,
) -> str:
    """Substitute args into template by argument slot.

    Surplus and unreferenced arguments are ignored. "%%" renders as "%".

    Args:
        template: Text containing printf specifiers
        args: Positional arguments
        dialect: Placeholder dialect of template

    Returns:
        Rendered text

    Raises:
        FormatArityError: If the highest referenced slot has no argument
        FormatArgumentError: If an argument does not fit its verb

    Example:
        >>> format_text("%[2]s has %[1]d cats", (3, "nick"))
        'nick has 3 cats'
    """
    if "%" not in template:
        return template

    specifiers = parse_printf(template, dialect)
    required = max((spec.argument_slot for spec in specifiers), default=-1) + 1
    if len(args) < required:
        raise FormatArityError(
            ErrorTemplate.format_arity_mismatch(template, required, len(args)),
            expected=required,
            supplied=len(args),
        )

    slots = {spec.start: spec.argument_slot for spec in specifiers}

    def _substitute(match: re.Match[str]) -> str:
        if match.group("escape") is not None:
            return "%"
        return _convert(match, args[slots[match.start()]])

    return get_grammar(dialect).pattern.sub(_substitute, template)


def _convert(match: re.Match[str], argument: object) -> str:
    verb = match.group("verb")
    sign = "+" if match.group("sign") else ""
    precision_text = match.group("precision")
    precision = int(precision_text) if precision_text is not None else None

    if verb == "s":
        body = str(argument)
        if precision is not None:
            body = body[:precision]
    elif verb in _INTEGER_VERBS:
        body = format(_as_int(argument, match), sign + "d")
    elif verb in _FLOAT_VERBS:
        digits = _DEFAULT_FLOAT_PRECISION if precision is None else precision
        body = format(_as_real(argument, match), f"{sign}.{digits}{verb}")
    elif verb in _RADIX_VERBS:
        if isinstance(argument, str) and verb in "xX":
            body = argument.encode("utf-8").hex()
            body = body.upper() if verb == "X" else body
        else:
            body = format(_as_int(argument, match), sign + verb)
    else:
        try:
            body = chr(_as_int(argument, match))
        except (ValueError, OverflowError):
            raise FormatArgumentError(
                ErrorTemplate.format_argument_invalid(match.group(0), argument)
            ) from None

    return _pad(body, match)


def _pad(body: str, match: re.Match[str]) -> str:
    width_text = match.group("width")
    width = int(width_text) if width_text else 0
    if len(body) >= width:
        return body

    if match.group("left"):
        return body.ljust(width)

    pad = match.group("pad")
    fill = pad[-1] if pad else " "
    # Zero padding of signed numbers goes between sign and digits
    if fill == "0" and match.group("verb") not in "sc" and body[:1] in "+-":
        return body[0] + body[1:].rjust(width - 1, "0")
    return body.rjust(width, fill)


def _as_int(argument: object, match: re.Match[str]) -> int:
    try:
        return operator.index(argument)  # type: ignore[arg-type]
    except TypeError:
        raise FormatArgumentError(
            ErrorTemplate.format_argument_invalid(match.group(0), argument)
        ) from None


def _as_real(argument: object, match: re.Match[str]) -> Real | Decimal:
    if isinstance(argument, (Real, Decimal)):
        return argument
    raise FormatArgumentError(ErrorTemplate.format_argument_invalid(match.group(0), argument))
