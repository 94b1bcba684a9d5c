"""Feature-level fixtures for i18n tests."""

import pytest
import yaml

from island_i18n.i18n import define_i18n


@pytest.fixture
def translations():
    """Translation tables for Japanese and English."""
    return {
        "ja": {
            "common": {"title": "こんにちは", "items": "{count}件"},
        },
        "en": {
            "common": {"title": "Hello", "items": "{count} items"},
        },
    }


@pytest.fixture
def i18n(translations):
    """I18n instance with ja as default locale."""
    return define_i18n(
        locales=["ja", "en"],
        default_locale="ja",
        translations=translations,
    )


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a directory of YAML translation files.

    Layout:
    - ja.yml
    - en.yml
    - errors.en.yml
    """
    with open(tmp_path / "ja.yml", "w", encoding="utf-8") as f:
        yaml.dump({"common": {"title": "こんにちは"}}, f, allow_unicode=True)

    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"common": {"title": "Hello"}}, f)

    with open(tmp_path / "errors.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "common": {"retry": "Try again"},
                "errors": {"not_found": "{path} not found"},
            },
            f,
        )

    return tmp_path


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,ja;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "*;q=0.8,ja;q=0.5",
        "invalid_quality": "en;q=invalid,ja;q=0.1",
    }
