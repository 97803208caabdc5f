"""Quickstart example for i18nres.

This example demonstrates importing Android string resources, looking up
texts for a requested locale and validating that all translations agree.

Note: Examples print validation results instead of raising. In production,
call raise_for_findings() before generating accessors or shipping resources.
"""

import tempfile
from pathlib import Path

from i18nres import AndroidImporter, LocaleRegistry, SimpleValue
from i18nres.codegen import bundle

DEFAULT = """<resources>
    <string name="greeting">Hello %1$s!</string>
    <string name="owner">%2$s owns %1$d cats</string>
    <plurals name="cats">
        <item quantity="one">%d cat</item>
        <item quantity="other">%d cats</item>
    </plurals>
</resources>
"""

GERMAN = """<resources>
    <string name="greeting">Hallo %1$s!</string>
    <string name="owner">%2$s besitzt %1$d Katzen</string>
    <plurals name="cats">
        <item quantity="one">%d Katze</item>
        <item quantity="other">%d Katzen</item>
    </plurals>
</resources>
"""

# Example 1: Import and lookup
print("=" * 50)
print("Example 1: Import and Lookup")
print("=" * 50)

registry = LocaleRegistry()
importer = AndroidImporter()
registry.import_source(importer, "und", DEFAULT, source_name="strings.xml")
registry.import_source(importer, "de-DE", GERMAN, source_name="strings-de-DE.xml")

texts = registry.match("de-AT", "en")
print(texts.text("greeting", "Anna"))
# Output: Hallo Anna!

print(texts.text("owner", 3, "Anna"))
# Output: Anna besitzt 3 Katzen

# Example 2: Plurals
print("\n" + "=" * 50)
print("Example 2: Plurals")
print("=" * 50)

for count in (1, 2):
    print(registry.match("fr").quantity_text("cats", count, count))
# Output: 1 cat
# Output: 2 cats

# Example 3: Consistency validation
print("\n" + "=" * 50)
print("Example 3: Consistency Validation")
print("=" * 50)

print(registry.validate().format())
# Output: Validation passed: 2 locale(s), no findings

registry.import_value(SimpleValue("de-DE", "greeting", "Hallo %[1]d!"))
print(registry.validate().format())
# Output: Validation failed: 1 finding(s) across 2 locale(s)
#           VERB_CONFLICT: The value und.greeting has at index 0 the verb 's' ...

# Example 4: Typed accessors
print("\n" + "=" * 50)
print("Example 4: Typed Accessors")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    res = Path(tmp) / "res"
    res.mkdir()
    (res / "strings.xml").write_text(DEFAULT, encoding="utf-8")
    (res / "strings-de-DE.xml").write_text(GERMAN, encoding="utf-8")

    for path in bundle(tmp):
        print(f"Wrote {path.name}:")
        print("\n".join(path.read_text(encoding="utf-8").splitlines()[:12]))
