"""Translation loading interface and implementations.

Defines the contract for loading translations and provides a YAML loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping

import structlog
import yaml

from localekit.i18n.models import Locale, PluralCategory, TranslationCatalog

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders."""

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a specific locale.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for all available locales."""


def flatten_messages(messages: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten a nested YAML namespace into translation keys.

    A mapping whose keys are all plural category names becomes
    ``key:<category>`` entries; any other mapping nests with dots.

    Example:
        {"nbDays": {"one": "%s day", "other": "%s days"}}
        -> {"nbDays:one": "%s day", "nbDays:other": "%s days"}
    """
    flat: Dict[str, str] = {}
    categories = PluralCategory.names()
    for key, value in messages.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            if value and all(str(k) in categories for k in value):
                for category, template in value.items():
                    flat[f"{full_key}:{category}"] = str(template)
            else:
                flat.update(flatten_messages(value, prefix=f"{full_key}."))
        elif value is not None:
            flat[full_key] = str(value)
    return flat


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Expects files named ``<domain>.<locale>.yml`` in the translations
    directory. Each file maps namespaces to messages:

        site:
          play: Play
          nbGames:
            one: "%s game"
            other: "%s games"

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded catalogs (locale -> catalog) when caching is enabled.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a locale from YAML files.

        Merges all ``*.<locale>.yml`` files into a single catalog.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.info("loaded_from_cache", locale=locale.tag)
            return self.cache[locale]

        catalog = TranslationCatalog(
            locale=locale,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        yaml_files = sorted(self.translations_dir.glob(f"*.{locale.tag}.yml"))

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.tag} in {self.translations_dir}"
            )

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data:
                self._merge_yaml_data(catalog, data, yaml_file)

        logger.info(
            "loaded_translations",
            locale=locale.tag,
            file_count=len(yaml_files),
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for every locale found in file names.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "site.en-US.yml" -> "en-US"
            parts = yaml_file.stem.split(".")
            if len(parts) >= 2:
                try:
                    locales_found.add(Locale.from_string(parts[-1]))
                except ValueError:
                    logger.warning("skipped_translation_file", file=str(yaml_file))

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {locale: self.load(locale) for locale in locales_found}

    def _merge_yaml_data(
        self,
        catalog: TranslationCatalog,
        data: Any,
        source_file: Path,
    ) -> None:
        """Merge parsed YAML data into catalog."""
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for namespace, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_namespace_format",
                    namespace=namespace,
                    expected="dict",
                )
                continue

            if namespace not in catalog.messages:
                catalog.messages[namespace] = {}

            catalog.messages[namespace].update(flatten_messages(messages))

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
