"""Tests for catalogue storage."""

import pytest
from pathlib import Path

from symbolpicker_mcp.parser.catalogue import Catalogue
from symbolpicker_mcp.storage.catalogue_store import CatalogueStore, default_catalogue


class TestCatalogueStore:
    def test_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "catalogues"
        CatalogueStore(str(target))
        assert target.is_dir()

    def test_directory_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SYMBOLPICKER_CATALOGUE_DIR", str(tmp_path / "env-dir"))
        store = CatalogueStore()
        assert store.base_path == tmp_path / "env-dir"

    def test_list_includes_bundled(self, catalogue_dir):
        store = CatalogueStore(catalogue_dir)
        assert {"name": "SFSymbols", "source": "bundled"} in store.list_catalogues()

    def test_list_includes_user(self, populated_dir):
        store = CatalogueStore(populated_dir)
        assert {"name": "custom", "source": "user"} in store.list_catalogues()

    def test_user_shadows_bundled(self, catalogue_dir):
        (Path(catalogue_dir) / "SFSymbols.txt").write_text("## Mine\nx\n", encoding="utf-8")
        store = CatalogueStore(catalogue_dir)
        entries = [c for c in store.list_catalogues() if c["name"] == "SFSymbols"]
        assert entries == [{"name": "SFSymbols", "source": "user"}]
        assert store.load("SFSymbols").sections == (("Mine", ("x",)),)

    def test_invalid_user_names_not_listed(self, catalogue_dir):
        (Path(catalogue_dir) / "my icons.txt").write_text("## A\nx\n", encoding="utf-8")
        (Path(catalogue_dir) / ".hidden.txt").write_text("## A\nx\n", encoding="utf-8")
        store = CatalogueStore(catalogue_dir)
        names = [c["name"] for c in store.list_catalogues()]
        assert "my icons" not in names
        assert ".hidden" not in names
        assert store.exists("my icons") is False
        assert store.exists(".hidden") is False

    def test_unreadable_user_file_does_not_fall_back_to_bundled(self, catalogue_dir):
        (Path(catalogue_dir) / "SFSymbols.txt").write_bytes(b"## Mine\n\xff\xfe")
        store = CatalogueStore(catalogue_dir)
        assert {"name": "SFSymbols", "source": "user"} in store.list_catalogues()
        cat = store.load("SFSymbols")
        assert cat.identifiers == ()
        assert cat.sections == ()

    def test_missing_user_file_falls_back_to_bundled(self, catalogue_dir):
        cat = CatalogueStore(catalogue_dir).load("SFSymbols")
        assert "Shapes" in cat.section_names

    def test_load_user(self, populated_dir):
        cat = CatalogueStore(populated_dir).load("custom")
        assert cat.name == "custom"
        assert cat.section_names == ["", "Shapes", "Arrows"]

    def test_load_with_display_name(self, populated_dir):
        cat = CatalogueStore(populated_dir).load("custom.txt", name="Custom Icons")
        assert cat.name == "Custom Icons"

    def test_load_missing_is_empty(self, catalogue_dir):
        cat = CatalogueStore(catalogue_dir).load("nonexistent")
        assert cat.identifiers == ()
        assert cat.sections == ()

    def test_exists(self, populated_dir):
        store = CatalogueStore(populated_dir)
        assert store.exists("custom") is True
        assert store.exists("custom.txt") is True
        assert store.exists("SFSymbols") is True
        assert store.exists("nonexistent") is False

    def test_save_and_delete(self, catalogue_dir):
        store = CatalogueStore(catalogue_dir)
        path = store.save_text("fresh", "## A\r\nx\r\n")
        assert path.read_text(encoding="utf-8") == "## A\nx\n"
        assert store.delete("fresh") is True
        assert store.exists("fresh") is False

    def test_save_invalid_name(self, catalogue_dir):
        with pytest.raises(ValueError):
            CatalogueStore(catalogue_dir).save_text("../escape", "x")

    def test_delete_bundled_refused(self, catalogue_dir):
        assert CatalogueStore(catalogue_dir).delete("SFSymbols") is False

    def test_delete_missing(self, catalogue_dir):
        assert CatalogueStore(catalogue_dir).delete("nope") is False


class TestDefaultCatalogue:
    def test_loaded_from_bundle(self):
        cat = default_catalogue()
        assert isinstance(cat, Catalogue)
        assert cat.name == "Symbols"
        assert "Shapes" in cat.section_names
        assert "square" in cat.get_section("Shapes").identifiers

    def test_parsed_once(self):
        assert default_catalogue() is default_catalogue()

    def test_every_section_non_empty(self):
        for section in default_catalogue().sections:
            assert section.identifiers
