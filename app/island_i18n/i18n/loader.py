"""Translation table loading from YAML files.

Defines the loader contract and a YAML implementation producing one nested
dict per locale, ready to pass to ``define_i18n``.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from island_i18n.logging import get_module_logger

logger = get_module_logger()

YAML_SUFFIXES = (".yml", ".yaml")


class TranslationLoader(ABC):
    """Abstract base for translation loaders."""

    @abstractmethod
    def load(self, locale: str) -> Dict[str, Any]:
        """Load the translation table for a locale.

        Raises:
            FileNotFoundError: If no translation files exist for the locale.
            ValueError: If a translation file cannot be parsed.
        """

    @abstractmethod
    def load_all(
        self, locales: Optional[Iterable[str]] = None
    ) -> Dict[str, Dict[str, Any]]:
        """Load the translation tables for several locales."""


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Expects ``<locale>.yml`` and/or ``<namespace>.<locale>.yml`` files in the
    translations directory (``.yaml`` is accepted too). All files of a locale
    are merged into a single table, one level deep: namespaces present in
    several files have their keys combined.

    Attributes:
        translations_dir: Directory containing the YAML files.
        cache: Loaded tables by locale, when caching is enabled.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Directory with YAML translation files.
            use_cache: Whether to keep loaded tables in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, Any]] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files_for(self, locale: str) -> list:
        files = []
        for path in self.translations_dir.iterdir():
            if path.suffix in YAML_SUFFIXES and self._locale_of(path) == locale:
                files.append(path)
        return sorted(files)

    @staticmethod
    def _locale_of(path: Path) -> str:
        # "common.en-US.yml" -> "en-US", "ja.yml" -> "ja"
        return path.stem.split(".")[-1]

    def load(self, locale: str) -> Dict[str, Any]:
        """Load and merge all YAML files for a locale.

        Args:
            locale: Locale code as used in the file names.

        Returns:
            Translation table for the locale.

        Raises:
            FileNotFoundError: If no YAML files exist for the locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            return self.cache[locale]

        yaml_files = self._files_for(locale)
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        table: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data:
                self._merge_yaml_data(table, data, yaml_file)

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
            key_count=len(table),
        )

        if self.use_cache:
            self.cache[locale] = table

        return table

    def load_all(
        self, locales: Optional[Iterable[str]] = None
    ) -> Dict[str, Dict[str, Any]]:
        """Load translation tables for the given locales.

        Args:
            locales: Locales to load. Defaults to every locale found in the
                directory's file names.

        Returns:
            Dict mapping each locale to its translation table.

        Raises:
            FileNotFoundError: If one of the requested locales has no files.
            ValueError: If no translation files are found at all.
        """
        if locales is None:
            locales = sorted(
                {
                    self._locale_of(path)
                    for path in self.translations_dir.iterdir()
                    if path.suffix in YAML_SUFFIXES
                }
            )
            if not locales:
                raise ValueError(
                    f"No translation files found in {self.translations_dir}"
                )

        return {locale: self.load(locale) for locale in locales}

    def _merge_yaml_data(
        self,
        table: Dict[str, Any],
        data: Any,
        source_file: Path,
    ) -> None:
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for key, value in data.items():
            if isinstance(value, dict) and isinstance(table.get(key), dict):
                table[key].update(value)
            else:
                table[key] = value

    def clear_cache(self) -> None:
        """Clear all cached translation tables."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
