"""Translation service for resolving keys and substituting arguments.

A missing key is never an error: every lookup falls back to echoing the
key, so an incomplete dictionary degrades visibly without breaking
rendering.
"""

from typing import Any, List, Optional

from localekit.i18n.models import PluralCategory, TranslationDictionary
from localekit.i18n.placeholders import Segment, format_segments, format_string
from localekit.i18n.plurals import Number, QuantityClassifier, english_rule
from localekit.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Looks up templates in an immutable dictionary and formats them.

    The instance is callable: ``trans("key", arg)`` is ``trans.translate``.

    Attributes:
        dictionary: TranslationDictionary the translator is bound to.
        classifier: QuantityClassifier used for pluralized lookups.
    """

    def __init__(
        self,
        dictionary: TranslationDictionary,
        classifier: Optional[QuantityClassifier] = None,
    ):
        """Initialize Translator.

        Args:
            dictionary: Key to template mapping. Never mutated.
            classifier: Maps a count to a plural category name
                (default: English one/other rule).
        """
        self.dictionary = dictionary
        self.classifier = classifier or english_rule

    def __call__(self, key: str, *args: Any) -> str:
        return self.translate(key, *args)

    def translate(self, key: str, *args: Any) -> str:
        """Translate a key, substituting positional arguments.

        Args:
            key: Translation key.
            *args: Values for ``%s`` / ``%N$s`` markers.

        Returns:
            Formatted template, or the key itself when absent.
        """
        template = self.dictionary.get_template(key)
        if template is None:
            logger.debug("translation_not_found", key=key)
            return key
        return format_string(template, args)

    def plural(self, key: str, count: Number, *args: Any) -> str:
        """Translate a pluralized key.

        The count only selects the template. Pass it again in ``args`` if
        the template displays it, or use ``plural_same``.

        Args:
            key: Base key; variants are stored as ``key:<category>``.
            count: Quantity driving grammatical number.
            *args: Values for placeholder markers.

        Returns:
            Formatted template, or the key itself when no variant resolves.
        """
        template = self.resolve_plural(key, count)
        if template is None:
            return key
        return format_string(template, args)

    def plural_same(self, key: str, count: Number, *args: Any) -> str:
        """Translate a pluralized key, displaying ``count`` as the first argument."""
        return self.plural(key, count, count, *args)

    def noarg(self, key: str) -> str:
        """Look up a key without scanning for placeholders."""
        return self.dictionary.get_template(key) or key

    def structured(self, key: str, *args: Any) -> List[Segment]:
        """Translate a key into a segment list.

        Arguments are inserted as-is rather than stringified.

        Returns:
            Literal substrings interleaved with argument values, or
            ``[key]`` when the key is absent.
        """
        template = self.dictionary.get_template(key)
        if template is None:
            logger.debug("translation_not_found", key=key)
            return [key]
        return format_segments(template, args)

    def structured_plural(self, key: str, count: Number, *args: Any) -> List[Segment]:
        """Pluralized variant of ``structured``; ``[key]`` when nothing resolves."""
        template = self.resolve_plural(key, count)
        if template is None:
            return [key]
        return format_segments(template, args)

    def resolve_plural(self, key: str, count: Number) -> Optional[str]:
        """Resolve the template for a pluralized key.

        Fallback order, first hit wins:
        1. ``key:<category of count>``
        2. ``key:other``
        3. ``key``
        4. ``key:one``

        Args:
            key: Base key.
            count: Quantity passed to the classifier.

        Returns:
            The resolved template, or None if every candidate is absent.
        """
        category = self.classifier(count)
        candidates = (
            TranslationDictionary.plural_key(key, category),
            TranslationDictionary.plural_key(key, PluralCategory.OTHER.value),
            key,
            TranslationDictionary.plural_key(key, PluralCategory.ONE.value),
        )
        for candidate in candidates:
            template = self.dictionary.get_template(candidate)
            if template is not None:
                return template
        logger.debug("plural_translation_not_found", key=key, category=category)
        return None
