"""Typed accessor generation.

Turns validated resource tables into a Python module that (a) re-creates
every value without parsing XML at runtime and (b) exposes one typed method
per key, so a typo in a key or a wrong argument count shows up in an IDE or
type checker instead of at runtime.

Generated module layout:

    def import_values(registry): ...          # every value of every locale
    def load(registry=None) -> LocaleRegistry # fresh or given registry, filled
    class Resources:
        def __init__(self, registry, *locales)
        def hello(self, str0: str) -> str
        def cats(self, quantity: int, num0: int) -> str
        def days(self) -> list[str]
        def func_map(self) -> dict[str, Callable[..., object]]

Accessors never raise on lookup or formatting problems: they return
"MISS!<key>: <error>" so a broken translation is visible in the UI.

Python 3.13+.
"""

from __future__ import annotations

import keyword
import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path

from i18nres.constants import GENERATED_FILENAME, STRINGS_PREFIX, STRINGS_SUFFIX
from i18nres.importers import AndroidImporter
from i18nres.locale_utils import canonicalize_locale, guess_locale_from_filename
from i18nres.registry import LocaleRegistry
from i18nres.runtime.table import ResourceTable
from i18nres.runtime.values import ArrayValue, PluralValue, SimpleValue, Value
from i18nres.syntax import FormatSpecifier, parse_printf
from i18nres.validation import validate_tables

__all__ = ["accessor_name", "bundle", "generate_accessors"]

logger = logging.getLogger(__name__)

_HEADER = (
    "# Code generated by i18nres; DO NOT EDIT.",
    '"""Typed accessors for translated resources."""',
    "",
    "from __future__ import annotations",
    "",
    "from collections.abc import Callable",
    "",
    "from i18nres import ArrayValue, I18nError, LocaleRegistry, PluralValue, SimpleValue",
)

# verb -> (parameter prefix, annotation)
_PARAMETER_TYPES: dict[str, tuple[str, str]] = {
    "d": ("num", "int"),
    "f": ("fl", "float"),
    "s": ("str", "str"),
}
_DEFAULT_PARAMETER = ("val", "object")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_NON_IDENTIFIER = re.compile(r"\W+")


def accessor_name(key: str) -> str:
    """Convert a resource key into a snake_case method name.

    Example:
        >>> accessor_name("appName")
        'app_name'
        >>> accessor_name("x-days.short")
        'x_days_short'
        >>> accessor_name("class")
        'class_'
    """
    name = _CAMEL_BOUNDARY.sub("_", key)
    name = _NON_IDENTIFIER.sub("_", name).strip("_").lower() or "value"
    if name[0].isdigit():
        name = "_" + name
    if keyword.iskeyword(name) or name in ("func_map", "import_values", "load"):
        name += "_"
    return name


def generate_accessors(
    tables: Iterable[ResourceTable],
    *,
    class_name: str = "Resources",
    sources: Mapping[str, str] | None = None,
) -> str:
    """Generate the Python source of a typed accessor module.

    The tables are validated first: accessors are typed after one locale's
    specifiers, which is only sound if all locales agree.

    Args:
        tables: Tables to embed, in translation priority order
        class_name: Name of the generated accessor class
        sources: Optional locale -> file name mapping, emitted as comments

    Returns:
        Module source code

    Raises:
        ConsistencyError: If validation reports any finding
    """
    table_list = list(dict.fromkeys(tables))
    validate_tables(table_list).raise_for_findings()

    sources = sources or {}
    lines = list(_HEADER)
    lines += ["", "", "def import_values(registry: LocaleRegistry) -> None:"]
    lines.append('    """Import every translated value into registry."""')

    # Later tables win, so accessors are typed after the last locale
    values: dict[str, Value] = {}
    for table in table_list:
        lines.append("")
        lines.append(f"    # from {sources.get(table.locale, table.locale)}")
        with table.reading() as table_values:
            for key in sorted(table_values):
                value = table_values[key]
                lines.append(f"    registry.import_value({_constructor(value)})")
                values[key] = value

    lines += [
        "",
        "",
        "def load(registry: LocaleRegistry | None = None) -> LocaleRegistry:",
        '    """Return registry (or a new one) with every translated value imported."""',
        "    registry = registry if registry is not None else LocaleRegistry()",
        "    import_values(registry)",
        "    return registry",
        "",
        "",
        f"class {class_name}:",
        '    """Typed access to the translated texts of one matched locale."""',
        "",
        '    __slots__ = ("_table",)',
        "",
        "    def __init__(self, registry: LocaleRegistry, *locales: str) -> None:",
        "        self._table = registry.match(*locales)",
    ]

    names: dict[str, str] = {}
    for key in sorted(values):
        name = _unique(accessor_name(key), names.values())
        names[key] = name
        lines.append("")
        lines += _accessor(name, values[key])

    lines += [
        "",
        "    def func_map(self) -> dict[str, Callable[..., object]]:",
        '        """Return every accessor by key, e.g. for template engines."""',
        "        return {",
    ]
    lines += [f"            {key!r}: self.{name}," for key, name in names.items()]
    lines += ["        }", ""]

    logger.debug("Generated %d accessor(s) for %d locale(s)", len(names), len(table_list))
    return "\n".join(lines)


def bundle(directory: str | Path, *, class_name: str = "Resources") -> list[Path]:
    """Generate an accessor module for every directory holding strings*.xml files.

    Each directory is imported into its own registry; "strings.xml" (the
    undetermined default) is imported first so it becomes the fallback.
    The module is written next to the resource files as strings_gen.py.

    Args:
        directory: Root of the tree to scan
        class_name: Name of the generated accessor class

    Returns:
        Paths of written modules, sorted

    Raises:
        ResourceImportError: If a resource file cannot be parsed
        ConsistencyError: If the resources of a directory are inconsistent
    """
    groups: dict[Path, list[Path]] = {}
    for path in sorted(Path(directory).rglob(f"{STRINGS_PREFIX}*{STRINGS_SUFFIX}")):
        if path.is_file():
            groups.setdefault(path.parent, []).append(path)

    importer = AndroidImporter()
    written: list[Path] = []
    for folder, files in sorted(groups.items()):
        files.sort(key=lambda p: (p.name != STRINGS_PREFIX + STRINGS_SUFFIX, p.name))
        with LocaleRegistry() as registry:
            sources: dict[str, str] = {}
            for path in files:
                registry.import_file(importer, path)
                locale = canonicalize_locale(guess_locale_from_filename(path))
                sources.setdefault(locale, path.name)
            code = generate_accessors(registry.tables(), class_name=class_name, sources=sources)

        target = folder / GENERATED_FILENAME
        target.write_text(code, encoding="utf-8")
        logger.info("Wrote %s (%d resource file(s))", target, len(files))
        written.append(target)

    return written


def _constructor(value: Value) -> str:
    match value:
        case SimpleValue(locale=locale, id=key, source=source):
            return f"SimpleValue({locale!r}, {key!r}, {source!r})"
        case ArrayValue(locale=locale, id=key, items=items):
            return f"ArrayValue({locale!r}, {key!r}, {items!r})"
        case PluralValue(locale=locale, id=key):
            forms = "".join(f", {category}={text!r}" for category, text in value.forms().items())
            return f"PluralValue({locale!r}, {key!r}{forms})"


def _parameters(specifiers: tuple[FormatSpecifier, ...]) -> list[tuple[str, str]]:
    # One parameter per argument slot; a repeated slot is typed by its first use
    verbs: dict[int, str] = {}
    for spec in sorted(specifiers, key=lambda s: s.parse_index):
        verbs.setdefault(spec.argument_slot, spec.verb)

    parameters = []
    for slot in range(max(verbs, default=-1) + 1):
        prefix, annotation = _PARAMETER_TYPES.get(verbs.get(slot, ""), _DEFAULT_PARAMETER)
        parameters.append((f"{prefix}{slot}", annotation))
    return parameters


def _accessor(name: str, value: Value) -> list[str]:
    miss = f"MISS!{value.id}: "
    doc = f"    # Returns a translated text for {value.example_text()!r}"

    if isinstance(value, ArrayValue):
        return [
            doc,
            f"    def {name}(self) -> list[str]:",
            "        try:",
            f"            return self._table.text_array({value.id!r})",
            "        except I18nError as e:",
            f"            return [{miss!r} + str(e)]",
        ]

    parameters = _parameters(parse_printf(value.example_text()))
    signature = "".join(f", {param}: {annotation}" for param, annotation in parameters)
    arguments = "".join(f", {param}" for param, _ in parameters)

    if isinstance(value, PluralValue):
        signature = ", quantity: int" + signature
        call = f"self._table.quantity_text({value.id!r}, quantity{arguments})"
    else:
        call = f"self._table.text({value.id!r}{arguments})"

    return [
        doc,
        f"    def {name}(self{signature}) -> str:",
        "        try:",
        f"            return {call}",
        "        except I18nError as e:",
        f"            return {miss!r} + str(e)",
    ]


def _unique(name: str, taken: Iterable[str]) -> str:
    used = set(taken)
    candidate = name
    suffix = 2
    while candidate in used:
        candidate = f"{name}_{suffix}"
        suffix += 1
    return candidate
