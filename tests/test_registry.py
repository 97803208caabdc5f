"""Tests for LocaleRegistry.

Tests verify:
- Tables are created once per canonical locale tag
- Translation priority ordering and eviction
- Best-match resolution order and the empty-registry error
- File import with locale guessed from the file name
- Validation over every configured table
- Scoped teardown as a context manager
"""

from __future__ import annotations

import shutil
import threading
from pathlib import Path

import pytest

from i18nres import (
    AndroidImporter,
    LocaleRegistry,
    RegistryStateError,
    ResourceImportError,
    SimpleValue,
)
from i18nres.diagnostics import DiagnosticCode
from i18nres.enums import FindingKind


def _registry_with(*locales: str) -> LocaleRegistry:
    registry = LocaleRegistry()
    for locale in locales:
        registry.import_value(SimpleValue(locale, "name", f"name-{locale}"))
    return registry


class TestConfigure:
    """Table creation and canonical tags."""

    def test_configure_canonicalizes(self, registry: LocaleRegistry) -> None:
        table = registry.configure("de-de")

        assert table.locale == "de_DE"
        assert registry.configure("de_DE") is table
        assert registry.configure("de-DE") is table
        assert len(registry) == 1
        assert "de-de" in registry
        assert 42 not in registry

    def test_empty_tag_is_undetermined(self, registry: LocaleRegistry) -> None:
        assert registry.configure("").locale == "und"

    def test_priority_is_configuration_order(self, registry: LocaleRegistry) -> None:
        for locale in ("en", "de-DE", "fr_FR"):
            registry.configure(locale)

        assert registry.priority == ("en", "de_DE", "fr_FR")
        assert registry.locales() == ["de_DE", "en", "fr_FR"]
        assert [t.locale for t in registry.tables()] == ["en", "de_DE", "fr_FR"]
        assert repr(registry) == "LocaleRegistry(priority=('en', 'de_DE', 'fr_FR'))"

    def test_table_lookup_does_not_create(self, registry: LocaleRegistry) -> None:
        assert registry.table("en") is None
        assert len(registry) == 0

    def test_concurrent_configure_creates_one_table(self, registry: LocaleRegistry) -> None:
        tables = []
        barrier = threading.Barrier(8, timeout=5.0)

        def worker() -> None:
            barrier.wait()
            tables.append(registry.configure("pl-PL"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(t) for t in tables}) == 1
        assert registry.priority == ("pl_PL",)

    def test_import_value_rebinds_to_canonical_locale(self, registry: LocaleRegistry) -> None:
        registry.import_value(SimpleValue("de-de", "hello", "Hallo"))

        value = registry.configure("de_DE").value("hello")
        assert value is not None
        assert value.locale == "de_DE"


class TestTranslationPriority:
    """Reordering and eviction."""

    def test_reorder_and_evict(self) -> None:
        registry = _registry_with("en", "de_DE", "fr_FR")

        registry.set_translation_priority(["de-DE", "en", "xx"])

        assert registry.priority == ("de_DE", "en")
        assert registry.table("fr_FR") is None
        assert registry.table("xx") is None
        assert registry.match("fr").locale == "de_DE"


class TestMatch:
    """Best-match resolution."""

    def test_exact(self) -> None:
        registry = _registry_with("en", "de_DE")

        assert registry.match("de-DE").locale == "de_DE"

    def test_first_requested_tag_wins(self) -> None:
        """A same-language match for the first tag beats an exact later tag."""
        registry = _registry_with("en", "de_DE")

        assert registry.match("de-AT", "en").locale == "de_DE"

    def test_language_only_request(self) -> None:
        registry = _registry_with("en", "de_DE")

        assert registry.match("de").locale == "de_DE"

    def test_case_insensitive(self) -> None:
        registry = _registry_with("en", "pt_BR")

        assert registry.match("PT-br").locale == "pt_BR"

    def test_default_is_highest_priority(self) -> None:
        registry = _registry_with("en", "de_DE")

        assert registry.match("ja", "fr").locale == "en"

    def test_system_locale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LC_ALL", raising=False)
        monkeypatch.delenv("LC_MESSAGES", raising=False)
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        registry = _registry_with("en", "de_DE")

        assert registry.match().locale == "de_DE"

    def test_empty_registry(self, registry: LocaleRegistry) -> None:
        with pytest.raises(RegistryStateError) as exc_info:
            registry.match("en")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.REGISTRY_NOT_CONFIGURED


class TestImportFile:
    """Android files from disk."""

    def test_fixture_set(self, registry: LocaleRegistry, fixtures_dir: Path) -> None:
        importer = AndroidImporter()
        assert registry.import_file(importer, fixtures_dir / "res" / "strings.xml") == 6
        assert registry.import_file(importer, fixtures_dir / "res" / "strings-de-DE.xml") == 6

        assert registry.priority == ("und", "de_DE")
        assert registry.validate().is_valid

        default = registry.match("en")
        german = registry.match("de")
        assert default.locale == "und"
        assert default.text("owner_with_cats", 3, "Anna") == "Anna owns 3 cats"
        assert german.text("owner_with_cats", 3, "Anna") == "Anna besitzt 3 Katzen"
        assert default.quantity_text("cats_count", 1, 1) == "1 cat"
        assert german.quantity_text("cats_count", 2, 2) == "2 Katzen"
        assert german.text_array("planets") == ["Merkur", "Venus", "Erde"]
        assert "api_key" not in default

    def test_inconsistent_translation(self, registry: LocaleRegistry, fixtures_dir: Path) -> None:
        importer = AndroidImporter()
        registry.import_file(importer, fixtures_dir / "res" / "strings.xml")
        registry.import_source(
            importer,
            "de-DE",
            '<resources><string name="hello_user">Hallo %1$d</string></resources>',
            source_name="inline",
        )

        result = registry.validate()

        assert not result.is_valid
        assert len(result.of_kind(FindingKind.VERB_CONFLICT)) == 1
        assert len(result.of_kind(FindingKind.MISSING_VALUE)) == 5

    def test_missing_file(self, registry: LocaleRegistry, tmp_path: Path) -> None:
        with pytest.raises(ResourceImportError) as exc_info:
            registry.import_file(AndroidImporter(), tmp_path / "strings-en.xml")

        assert exc_info.value.source_name.endswith("strings-en.xml")

    def test_broken_file(self, registry: LocaleRegistry, fixtures_dir: Path) -> None:
        with pytest.raises(ResourceImportError):
            registry.import_file(AndroidImporter(), fixtures_dir / "broken" / "strings-fr-FR.xml")

    def test_reimport_replaces(self, registry: LocaleRegistry, tmp_path: Path) -> None:
        path = tmp_path / "strings.xml"
        path.write_text('<resources><string name="a">one</string></resources>', encoding="utf-8")
        registry.import_file(AndroidImporter(), path)
        path.write_text('<resources><string name="a">two</string></resources>', encoding="utf-8")
        registry.import_file(AndroidImporter(), path)

        assert registry.match().text("a") == "two"

    def test_copied_fixture_directory(
        self, registry: LocaleRegistry, fixtures_dir: Path, tmp_path: Path
    ) -> None:
        shutil.copytree(fixtures_dir / "res", tmp_path / "res")

        for path in sorted((tmp_path / "res").glob("strings*.xml")):
            registry.import_file(AndroidImporter(), path)

        assert registry.locales() == ["de_DE", "und"]


class TestLifecycle:
    """Scoped construction and teardown."""

    def test_context_manager_clears(self) -> None:
        with LocaleRegistry() as registry:
            registry.configure("en")
            assert len(registry) == 1

        assert len(registry) == 0
        assert registry.priority == ()

    def test_clear(self) -> None:
        registry = _registry_with("en", "de")
        registry.clear()

        with pytest.raises(RegistryStateError):
            registry.match("en")
