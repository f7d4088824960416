"""Factory functions for creating i18n components."""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

import structlog

from localekit.configuration import Settings
from localekit.configuration import settings as default_settings
from localekit.i18n.loader import YAMLTranslationLoader
from localekit.i18n.models import Locale, TranslationDictionary
from localekit.i18n.plurals import QuantityClassifier
from localekit.i18n.environment import LocaleEnvironment
from localekit.i18n.service import LocalizationService
from localekit.i18n.timeago import RelativeTimeFormatter
from localekit.i18n.translator import Translator

logger = structlog.get_logger()

TIMEAGO_NAMESPACE = "timeago"


def create_translator(
    dictionary: Union[TranslationDictionary, Mapping[str, Any]],
    classifier: Optional[QuantityClassifier] = None,
) -> Translator:
    """Create a Translator bound to a dictionary.

    Args:
        dictionary: Key to template mapping. Plain mappings are wrapped in an
            immutable TranslationDictionary.
        classifier: Quantity classifier (default: English one/other rule).

    Returns:
        Translator: Configured translator instance

    Usage:
        trans = create_translator({"hello": "Hello %s"})
        trans("hello", "world")
    """
    if not isinstance(dictionary, TranslationDictionary):
        dictionary = TranslationDictionary(dictionary)
    return Translator(dictionary, classifier=classifier)


def create_localization(
    settings: Optional[Settings] = None,
    translations_dir: Optional[Path] = None,
    environment: Optional[LocaleEnvironment] = None,
) -> LocalizationService:
    """Create a LocalizationService from configuration.

    Loads the catalog for the configured locale, binds the main translator
    to the configured namespace and the relative time formatter to the
    ``timeago`` namespace.

    Args:
        settings: Settings instance (default: module singleton).
        translations_dir: Override for I18N_TRANSLATIONS_DIR.
        environment: Override for the locale environment (default: I18N_LOCALE).

    Returns:
        LocalizationService: Ready-to-use service.

    Raises:
        ValueError: If no translations directory is configured or it does not exist.
        FileNotFoundError: If no translation files exist for the locale.
    """
    settings = settings or default_settings
    i18n = settings.i18n
    environment = environment or LocaleEnvironment(lang=i18n.locale)

    directory = translations_dir or i18n.translations_dir
    if directory is None:
        raise ValueError("No translations directory configured (I18N_TRANSLATIONS_DIR)")

    loader = YAMLTranslationLoader(Path(directory), use_cache=i18n.use_cache)
    catalog = loader.load(Locale.from_string(environment.lang))
    classifier = environment.classifier()

    trans = create_translator(catalog.dictionary(i18n.namespace), classifier)
    timeago_trans = create_translator(
        catalog.dictionary(TIMEAGO_NAMESPACE), classifier
    )
    formatter = RelativeTimeFormatter.from_translator(
        timeago_trans, environment=environment
    )

    logger.info(
        "localization_created",
        locale=environment.lang,
        display_locale=environment.display_locale,
        namespace=i18n.namespace,
        key_count=len(trans.dictionary),
    )
    return LocalizationService(trans, formatter)
