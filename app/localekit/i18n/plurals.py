"""Quantity classifiers mapping a count to a plural category.

The Translator treats the classifier as an opaque collaborator. This
module ships CLDR-style cardinal rules for a handful of languages so the
library is usable without an external plural-rules service.
"""

from typing import Callable, Dict, Protocol, Union

from localekit.i18n.models import PluralCategory

Number = Union[int, float]

ONE = PluralCategory.ONE.value
TWO = PluralCategory.TWO.value
FEW = PluralCategory.FEW.value
MANY = PluralCategory.MANY.value
ZERO = PluralCategory.ZERO.value
OTHER = PluralCategory.OTHER.value


class QuantityClassifier(Protocol):
    """Maps a count to the active locale's plural category name."""

    def __call__(self, count: Number) -> str: ...


def _integer(n: Number):
    """Return n as an int when it is integral, else None."""
    if isinstance(n, int):
        return abs(n)
    if float(n).is_integer():
        return abs(int(n))
    return None


def english_rule(n: Number) -> str:
    """one for exactly 1, other otherwise."""
    return ONE if _integer(n) == 1 else OTHER


def french_rule(n: Number) -> str:
    """one for 0 <= n < 2, other otherwise."""
    return ONE if 0 <= abs(n) < 2 else OTHER


def east_slavic_rule(n: Number) -> str:
    """Russian/Ukrainian: one (21, 31...), few (2-4, 22-24...), many."""
    i = _integer(n)
    if i is None:
        return OTHER
    if i % 10 == 1 and i % 100 != 11:
        return ONE
    if 2 <= i % 10 <= 4 and not 12 <= i % 100 <= 14:
        return FEW
    return MANY


def polish_rule(n: Number) -> str:
    i = _integer(n)
    if i is None:
        return OTHER
    if i == 1:
        return ONE
    if 2 <= i % 10 <= 4 and not 12 <= i % 100 <= 14:
        return FEW
    return MANY


def czech_rule(n: Number) -> str:
    i = _integer(n)
    if i is None:
        return MANY
    if i == 1:
        return ONE
    if 2 <= i <= 4:
        return FEW
    return OTHER


def arabic_rule(n: Number) -> str:
    """Arabic has six forms: zero, one, two, few, many, other."""
    i = _integer(n)
    if i is None:
        return OTHER
    if i == 0:
        return ZERO
    if i == 1:
        return ONE
    if i == 2:
        return TWO
    if 3 <= i % 100 <= 10:
        return FEW
    if 11 <= i % 100 <= 99:
        return MANY
    return OTHER


def invariant_rule(n: Number) -> str:
    """Languages without grammatical number."""
    return OTHER


RULES: Dict[str, Callable[[Number], str]] = {
    "en": english_rule,
    "de": english_rule,
    "es": english_rule,
    "it": english_rule,
    "nl": english_rule,
    "pt": english_rule,
    "sv": english_rule,
    "fr": french_rule,
    "ru": east_slavic_rule,
    "uk": east_slavic_rule,
    "pl": polish_rule,
    "cs": czech_rule,
    "sk": czech_rule,
    "ar": arabic_rule,
    "ja": invariant_rule,
    "ko": invariant_rule,
    "tr": invariant_rule,
    "vi": invariant_rule,
    "zh": invariant_rule,
}


def plural_rule_for(language: str) -> QuantityClassifier:
    """Return the plural rule for a language code.

    Args:
        language: Language code or full tag (e.g., "ru", "pt-BR").

    Returns:
        Classifier function; unknown languages get the English rule.
    """
    code = (language or "").replace("_", "-").split("-")[0].lower()
    return RULES.get(code, english_rule)
