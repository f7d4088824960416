"""i18n system - key lookup, pluralization and relative time.

Main components:
- models: TranslationDictionary, LiteralEntry/FormatterEntry, Locale, TranslationCatalog
- placeholders: string and segment-list substitution of %s / %N$s markers
- plurals: default quantity classifiers
- translator: Translator with plain, plural, no-arg and structured lookups
- timeago: bucket-table relative time formatting
- environment: LocaleEnvironment (display locale, plural rule)
- loader: YAMLTranslationLoader
"""

from localekit.i18n.environment import LocaleEnvironment
from localekit.i18n.factory import create_localization, create_translator
from localekit.i18n.loader import TranslationLoader, YAMLTranslationLoader
from localekit.i18n.models import (
    FormatterEntry,
    LiteralEntry,
    Locale,
    PluralCategory,
    TemplateEntry,
    TranslationCatalog,
    TranslationDictionary,
)
from localekit.i18n.plurals import QuantityClassifier, plural_rule_for
from localekit.i18n.service import LocalizationService
from localekit.i18n.timeago import RelativeTimeFormatter, format_ago, to_date
from localekit.i18n.translator import Translator

__all__ = [
    "FormatterEntry",
    "LiteralEntry",
    "Locale",
    "PluralCategory",
    "TemplateEntry",
    "TranslationCatalog",
    "TranslationDictionary",
    "QuantityClassifier",
    "plural_rule_for",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "RelativeTimeFormatter",
    "format_ago",
    "to_date",
    "LocaleEnvironment",
    "LocalizationService",
    "create_translator",
    "create_localization",
]
