"""Translation models for the i18n system.

Defines the immutable dictionary a Translator is bound to, the template
entry variants it stores, and the locale/catalog containers used when
loading translations.
"""

import re
from collections import abc
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Union


class PluralCategory(str, Enum):
    """Grammatical number classes a quantity classifier may return."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @classmethod
    def names(cls) -> frozenset:
        """Return the set of category names as plain strings."""
        return frozenset(c.value for c in cls)


@dataclass(frozen=True)
class LiteralEntry:
    """A static template string, possibly containing placeholders."""

    text: str


@dataclass(frozen=True)
class FormatterEntry:
    """A pre-bound formatting function taking a single number."""

    fn: Callable[[int], str]

    def __call__(self, n: int) -> str:
        return self.fn(n)


TemplateEntry = Union[LiteralEntry, FormatterEntry]


def to_entry(value: Any) -> TemplateEntry:
    """Wrap a raw dictionary value into a TemplateEntry.

    Args:
        value: A string, a callable, or an existing entry.

    Returns:
        LiteralEntry for strings, FormatterEntry for callables.

    Raises:
        TypeError: If the value is neither a string nor callable.
    """
    if isinstance(value, (LiteralEntry, FormatterEntry)):
        return value
    if isinstance(value, str):
        return LiteralEntry(value)
    if callable(value):
        return FormatterEntry(value)
    raise TypeError(f"Unsupported template value: {value!r}")


class TranslationDictionary(abc.Mapping):
    """Immutable mapping from translation key to TemplateEntry.

    Lookups never mutate the underlying data. Absence of a key is a normal
    state; callers fall back to the key itself.
    """

    def __init__(self, entries: Optional[Mapping[str, Any]] = None):
        self._entries = MappingProxyType(
            {str(k): to_entry(v) for k, v in (entries or {}).items()}
        )

    def __getitem__(self, key: str) -> TemplateEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TranslationDictionary({len(self)} entries)"

    def get_template(self, key: str) -> Optional[str]:
        """Return the literal template for key, or None.

        Empty templates and formatter entries are treated as absent.

        Args:
            key: Translation key.

        Returns:
            Template string, or None if there is no usable literal.
        """
        match self._entries.get(key):
            case LiteralEntry(text=text) if text:
                return text
            case _:
                return None

    @staticmethod
    def plural_key(key: str, category: str) -> str:
        """Build the suffixed key of a pluralized entry (e.g. "x:one")."""
        if isinstance(category, Enum):
            category = category.value
        return f"{key}:{category}"


_LOCALE_PATTERN = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$")


@dataclass(frozen=True)
class Locale:
    """A BCP 47 language tag (e.g., en-US, fr-FR, ar-SA).

    Attributes:
        tag: The tag as supplied, with underscores normalized to hyphens.
    """

    tag: str

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse and validate a locale string.

        Args:
            locale_str: Locale string (e.g., "en-US", "pt_BR").

        Returns:
            Locale instance.

        Raises:
            ValueError: If the string is not a well-formed language tag.
        """
        normalized = (locale_str or "").strip().replace("_", "-")
        if not _LOCALE_PATTERN.match(normalized):
            raise ValueError(f"Unsupported locale: {locale_str}")
        return cls(normalized)

    @property
    def language(self) -> str:
        """Language part of the tag, lower-cased (e.g., "en" from "en-US")."""
        return self.tag.split("-")[0].lower()

    @property
    def region(self) -> str:
        """Region part of the tag (e.g., "US" from "en-US"), or ""."""
        parts = self.tag.split("-")
        return parts[1] if len(parts) > 1 else ""

    def __str__(self) -> str:
        return self.tag


@dataclass
class TranslationCatalog:
    """Container for translations in a specific locale.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Nested dict {namespace: {key: template}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: Locale
    messages: Dict[str, Dict[str, str]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_namespace(self, namespace: str) -> Dict[str, str]:
        """Get all messages for a namespace, or an empty dict."""
        return self.messages.get(namespace, {})

    def dictionary(self, namespace: str) -> TranslationDictionary:
        """Build an immutable TranslationDictionary for one namespace."""
        return TranslationDictionary(self.get_namespace(namespace))

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Later entries override earlier ones.

        Args:
            other: TranslationCatalog to merge.
        """
        for namespace, messages in other.messages.items():
            if namespace not in self.messages:
                self.messages[namespace] = {}
            self.messages[namespace].update(messages)
