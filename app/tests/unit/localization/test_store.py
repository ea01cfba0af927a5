"""Tests for localization.store module."""

import json
from unittest.mock import patch

import pytest

from localization import LocaleError, TranslationStore
from tests.factories.localization import (
    make_translations,
    write_json,
    write_po,
    write_properties,
)


@pytest.fixture
def store(tmp_path):
    return TranslationStore(tmp_path)


@pytest.mark.unit
class TestLoadTranslationFile:
    """Tests for TranslationStore.load_translation_file()."""

    def test_loads_properties(self, store, tmp_path):
        write_properties(tmp_path, "en_US", {"hello": "Hello"})
        assert store.load_translation_file("en_US") is True
        assert store.translations["en_US"] == {"hello": "Hello"}

    def test_loads_nested_json(self, store, tmp_path):
        write_json(tmp_path, "es_ES", {"menu": {"file": "Archivo"}})
        assert store.load_translation_file("es_ES") is True
        assert store.translations["es_ES"] == {"menu.file": "Archivo"}

    def test_loads_po(self, store, tmp_path):
        write_po(tmp_path, "fr_FR", {"hello": "Bonjour"})
        assert store.load_translation_file("fr_FR") is True
        assert store.translations["fr_FR"] == {"hello": "Bonjour"}

    def test_loads_txt(self, store, tmp_path):
        (tmp_path / "de_DE.txt").write_text("hello=Hallo\n", encoding="utf-8")
        assert store.load_translation_file("de_DE") is True
        assert store.translations["de_DE"] == {"hello": "Hallo"}

    def test_json_has_priority(self, store, tmp_path):
        write_json(tmp_path, "es_ES", {"source": "json"})
        write_properties(tmp_path, "es_ES", {"source": "properties"})
        store.load_translation_file("es_ES")
        assert store.translations["es_ES"] == {"source": "json"}

    def test_unusable_file_falls_through_to_next_format(self, store, tmp_path):
        (tmp_path / "es_ES.json").write_text('{"broken": ', encoding="utf-8")
        write_po(tmp_path, "es_ES", {"source": "po"})
        assert store.load_translation_file("es_ES") is True
        assert store.translations["es_ES"] == {"source": "po"}

    def test_json_file_with_properties_content(self, store, tmp_path):
        (tmp_path / "es_ES.json").write_text("hello=Hola\n", encoding="utf-8")
        assert store.load_translation_file("es_ES") is True
        assert store.translations["es_ES"] == {"hello": "Hola"}

    def test_utf8_bom_is_ignored(self, store, tmp_path):
        (tmp_path / "es_ES.properties").write_bytes(
            "\ufeffhola=Hola\n".encode("utf-8")
        )
        store.load_translation_file("es_ES")
        assert store.translations["es_ES"] == {"hola": "Hola"}

    def test_undecodable_file_is_skipped(self, store, tmp_path):
        (tmp_path / "es_ES.json").write_bytes(b"\xff\xfe\xfa")
        write_properties(tmp_path, "es_ES", {"ok": "yes"})
        assert store.load_translation_file("es_ES") is True
        assert store.translations["es_ES"] == {"ok": "yes"}

    def test_no_file(self, store):
        assert store.load_translation_file("es_ES") is False
        assert "es_ES" not in store.translations

    def test_empty_file_is_unsuccessful(self, store, tmp_path):
        (tmp_path / "es_ES.properties").write_text("# nothing\n", encoding="utf-8")
        assert store.load_translation_file("es_ES") is False


@pytest.mark.unit
class TestAddLanguage:
    """Tests for TranslationStore.add_language()."""

    def test_unsupported_language(self, store):
        with pytest.raises(LocaleError, match="Language not supported: xx_XX"):
            store.add_language("xx_XX")

    def test_missing_file_registers_empty_map(self, store):
        assert store.add_language("es_ES") == {}
        assert store.has_language("es_ES")

    def test_idempotent(self, store, tmp_path):
        write_properties(tmp_path, "en_US", {"hello": "Hello"})
        first = store.add_language("en_US")

        with patch.object(store, "load_translation_file") as mock_load:
            second = store.add_language("en_US")

        mock_load.assert_not_called()
        assert first is second

    def test_returns_live_map(self, store):
        entries = store.add_language("es_ES")
        entries["hola"] = "Hola"
        assert store.get_language("es_ES") == {"hola": "Hola"}

    def test_set_translation_loads_language(self, store):
        store.set_translation("fr_FR", "hello", "Bonjour")
        assert store.translations["fr_FR"] == {"hello": "Bonjour"}


@pytest.mark.unit
class TestReload:
    """Tests for TranslationStore.reload()."""

    def test_reload_reads_changes(self, store, tmp_path):
        write_properties(tmp_path, "en_US", {"hello": "Hello"})
        store.add_language("en_US")
        write_properties(tmp_path, "en_US", {"hello": "Hi"})

        assert store.reload() == 1
        assert store.translations["en_US"] == {"hello": "Hi"}

    def test_reload_drops_in_memory_additions(self, store, tmp_path):
        write_properties(tmp_path, "en_US", {"hello": "Hello"})
        store.add_language("en_US")
        store.set_translation("en_US", "extra", "Extra")

        store.reload()
        assert "extra" not in store.translations["en_US"]

    def test_deleted_file_reverts_to_empty_map(self, store, tmp_path):
        path = write_properties(tmp_path, "en_US", {"hello": "Hello"})
        store.add_language("en_US")
        store.add_language("es_ES")
        path.unlink()

        assert store.reload() == 0
        assert store.translations == {"en_US": {}, "es_ES": {}}


@pytest.mark.unit
class TestSave:
    """Tests for TranslationStore.save()."""

    def test_unloaded_language(self, store):
        assert store.save("es_ES") is False

    def test_new_file_defaults_to_json(self, store, tmp_path):
        store.set_translation("es_ES", "hola", "Hola")
        assert store.save("es_ES") is True

        data = json.loads((tmp_path / "es_ES.json").read_text(encoding="utf-8"))
        assert data["hola"] == "Hola"
        assert data["_metadata"]["language"] == "es_ES"

    @pytest.mark.parametrize(
        "hint,filename", [(".po", "es_ES.po"), ("properties", "es_ES.properties")]
    )
    def test_format_hint(self, store, tmp_path, hint, filename):
        store.set_translation("es_ES", "hola", "Hola")
        assert store.save("es_ES", hint) is True
        assert (tmp_path / filename).is_file()
        assert not (tmp_path / "es_ES.json").exists()

    def test_unknown_hint_writes_properties(self, store, tmp_path):
        store.set_translation("es_ES", "hola", "Hola")
        assert store.save("es_ES", ".yaml") is True
        assert "hola=Hola" in (tmp_path / "es_ES.properties").read_text(
            encoding="utf-8"
        )

    def test_existing_file_format_preserved(self, store, tmp_path):
        write_po(tmp_path, "es_ES", {"hola": "Hola"})
        store.add_language("es_ES")
        store.set_translation("es_ES", "adios", "Adiós")

        assert store.save("es_ES", ".json") is True
        assert not (tmp_path / "es_ES.json").exists()
        assert 'msgid "adios"' in (tmp_path / "es_ES.po").read_text(encoding="utf-8")

    def test_write_failure_returns_false(self, store):
        store.set_translation("es_ES", "hola", "Hola")
        with patch("builtins.open", side_effect=PermissionError("read-only")):
            assert store.save("es_ES") is False


@pytest.mark.unit
class TestDiagnostics:
    """Tests for TranslationStore.stats() and missing()."""

    def test_stats(self, store, tmp_path):
        write_properties(tmp_path, "en_US", make_translations())
        store.add_language("en_US")
        store.add_language("es_ES")
        assert store.stats() == {"en_US": 5, "es_ES": 0}

    def test_missing(self, store):
        for key in ("b", "a", "c"):
            store.set_translation("en_US", key, key.upper())
        store.set_translation("es_ES", "b", "B")
        assert store.missing("es_ES", "en_US") == ["a", "c"]

    def test_missing_unloaded_language(self, store):
        store.set_translation("en_US", "a", "A")
        assert store.missing("es_ES", "en_US") == []
        assert store.missing("en_US", "fr_FR") == []
