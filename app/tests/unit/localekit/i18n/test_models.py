"""Tests for localekit.i18n.models module."""

import pytest

from localekit.i18n import (
    FormatterEntry,
    LiteralEntry,
    Locale,
    PluralCategory,
    TranslationDictionary,
)
from tests.factories.i18n import make_translation_catalog


@pytest.mark.unit
class TestTranslationDictionary:
    """Tests for TranslationDictionary."""

    def test_wraps_strings_as_literals(self):
        dictionary = TranslationDictionary({"play": "Play"})
        assert dictionary["play"] == LiteralEntry("Play")

    def test_wraps_callables_as_formatters(self):
        dictionary = TranslationDictionary({"nbDays": lambda n: f"{n} days"})
        entry = dictionary["nbDays"]
        assert isinstance(entry, FormatterEntry)
        assert entry(3) == "3 days"

    def test_rejects_unsupported_values(self):
        with pytest.raises(TypeError):
            TranslationDictionary({"bad": 42})

    def test_is_immutable(self):
        """Entries cannot be assigned after construction."""
        dictionary = TranslationDictionary({"play": "Play"})
        with pytest.raises(TypeError):
            dictionary["play"] = "Stop"

    def test_source_mapping_changes_do_not_leak(self):
        source = {"play": "Play"}
        dictionary = TranslationDictionary(source)
        source["play"] = "Stop"
        assert dictionary.get_template("play") == "Play"

    def test_get_template_missing(self):
        assert TranslationDictionary({}).get_template("nope") is None

    def test_get_template_empty_is_absent(self):
        assert TranslationDictionary({"empty": ""}).get_template("empty") is None

    def test_get_template_ignores_formatters(self):
        dictionary = TranslationDictionary({"fmt": lambda n: str(n)})
        assert dictionary.get_template("fmt") is None

    def test_plural_key(self):
        assert TranslationDictionary.plural_key("x", "one") == "x:one"

    def test_plural_key_accepts_enum(self):
        assert TranslationDictionary.plural_key("x", PluralCategory.FEW) == "x:few"

    def test_mapping_protocol(self):
        dictionary = TranslationDictionary({"a": "A", "b": "B"})
        assert len(dictionary) == 2
        assert set(dictionary) == {"a", "b"}
        assert "a" in dictionary


@pytest.mark.unit
class TestLocale:
    """Tests for Locale."""

    def test_from_string(self):
        locale = Locale.from_string("en-US")
        assert locale.tag == "en-US"
        assert locale.language == "en"
        assert locale.region == "US"

    def test_from_string_normalizes_underscore(self):
        assert Locale.from_string("pt_BR").tag == "pt-BR"

    def test_language_only(self):
        locale = Locale.from_string("fr")
        assert locale.language == "fr"
        assert locale.region == ""

    @pytest.mark.parametrize("value", ["", "english", "e", "en--US", "12-34"])
    def test_from_string_invalid(self, value):
        with pytest.raises(ValueError):
            Locale.from_string(value)

    def test_str(self):
        assert str(Locale.from_string("ar-SA")) == "ar-SA"


@pytest.mark.unit
class TestTranslationCatalog:
    """Tests for TranslationCatalog."""

    def test_dictionary_for_namespace(self):
        catalog = make_translation_catalog()
        dictionary = catalog.dictionary("site")
        assert dictionary.get_template("play") == "Play"

    def test_dictionary_for_unknown_namespace_is_empty(self):
        catalog = make_translation_catalog()
        assert len(catalog.dictionary("unknown")) == 0

    def test_merge_overrides(self):
        base = make_translation_catalog(messages={"site": {"play": "Play", "a": "A"}})
        other = make_translation_catalog(
            messages={"site": {"play": "Start"}, "extra": {"b": "B"}}
        )
        base.merge(other)
        assert base.messages["site"] == {"play": "Start", "a": "A"}
        assert base.messages["extra"] == {"b": "B"}


@pytest.mark.unit
def test_plural_category_names():
    assert PluralCategory.names() == {"zero", "one", "two", "few", "many", "other"}
