"""Tests for island_i18n.i18n.loader module."""

import pytest

from island_i18n.i18n import YAMLTranslationLoader


@pytest.mark.unit
class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_missing_directory(self, tmp_path):
        """YAMLTranslationLoader() raises ValueError for a missing directory."""
        with pytest.raises(ValueError):
            YAMLTranslationLoader(tmp_path / "missing")

    def test_load_single_file(self, temp_translations_dir):
        loader = YAMLTranslationLoader(temp_translations_dir)
        assert loader.load("ja") == {"common": {"title": "こんにちは"}}

    def test_load_merges_namespaced_files(self, temp_translations_dir):
        """load() merges <locale>.yml and <namespace>.<locale>.yml files."""
        loader = YAMLTranslationLoader(temp_translations_dir)
        table = loader.load("en")
        assert table["common"] == {"title": "Hello", "retry": "Try again"}
        assert table["errors"] == {"not_found": "{path} not found"}

    def test_load_unknown_locale(self, temp_translations_dir):
        loader = YAMLTranslationLoader(temp_translations_dir)
        with pytest.raises(FileNotFoundError):
            loader.load("fr")

    def test_load_invalid_yaml(self, tmp_path):
        (tmp_path / "ja.yml").write_text("common: [unclosed", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)
        with pytest.raises(ValueError):
            loader.load("ja")

    def test_non_mapping_file_is_skipped(self, tmp_path):
        (tmp_path / "ja.yml").write_text("- a\n- b\n", encoding="utf-8")
        (tmp_path / "extra.ja.yaml").write_text("title: Hi\n", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)
        assert loader.load("ja") == {"title": "Hi"}

    def test_load_all_discovers_locales(self, temp_translations_dir):
        loader = YAMLTranslationLoader(temp_translations_dir)
        assert set(loader.load_all()) == {"ja", "en"}

    def test_load_all_given_locales(self, temp_translations_dir):
        loader = YAMLTranslationLoader(temp_translations_dir)
        assert list(loader.load_all(["en"])) == ["en"]

    def test_load_all_empty_directory(self, tmp_path):
        loader = YAMLTranslationLoader(tmp_path)
        with pytest.raises(ValueError):
            loader.load_all()

    def test_cache(self, temp_translations_dir):
        """load() returns the cached table until the cache is cleared."""
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=True)
        first = loader.load("ja")
        assert loader.load("ja") is first

        loader.clear_cache()
        assert loader.load("ja") is not first

    def test_without_cache(self, temp_translations_dir):
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=False)
        assert loader.load("ja") is not loader.load("ja")
        assert loader.cache == {}
