"""The display locale environment injected into formatters."""

from dataclasses import dataclass

from localekit.i18n.plurals import QuantityClassifier, plural_rule_for

# Gregorian calendar is forced for Arabic by displaying through ar-LY.
ARABIC_GREGORIAN_LOCALE = "ar-ly"


@dataclass(frozen=True)
class LocaleEnvironment:
    """The active display locale, passed explicitly to formatters.

    Attributes:
        lang: Locale tag of the page/user (e.g., "en-US", "ar-SA").
    """

    lang: str = "en-US"

    @property
    def display_locale(self) -> str:
        """Locale used for date rendering.

        Tags starting with ``ar-`` are remapped to ``ar-ly`` so dates are
        shown with the Gregorian calendar rather than the Islamic one.
        """
        if self.lang.startswith("ar-"):
            return ARABIC_GREGORIAN_LOCALE
        return self.lang

    @property
    def language(self) -> str:
        return self.lang.replace("_", "-").split("-")[0].lower()

    def classifier(self) -> QuantityClassifier:
        """Plural rule for this environment's language."""
        return plural_rule_for(self.language)
