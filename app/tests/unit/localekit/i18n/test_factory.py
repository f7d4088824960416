"""Tests for localekit.i18n.factory and localekit.i18n.service modules."""

from datetime import timedelta
from unittest.mock import Mock

import pytest

from localekit.configuration import I18nSettings, Settings
from localekit.i18n import LocaleEnvironment, LocalizationService, create_localization


def make_settings(translations_dir=None, locale="en-US", namespace="site"):
    i18n = I18nSettings(
        I18N_LOCALE=locale,
        I18N_TRANSLATIONS_DIR=str(translations_dir) if translations_dir else None,
        I18N_NAMESPACE=namespace,
    )
    return Settings(i18n=i18n)


@pytest.mark.unit
class TestCreateLocalization:
    """Tests for create_localization()."""

    def test_requires_translations_dir(self):
        with pytest.raises(ValueError):
            create_localization(settings=make_settings())

    def test_missing_locale_files(self, temp_translations_dir):
        settings = make_settings(temp_translations_dir, locale="de-DE")
        with pytest.raises(FileNotFoundError):
            create_localization(settings=settings)

    def test_builds_service(self, temp_translations_dir):
        service = create_localization(settings=make_settings(temp_translations_dir))
        assert isinstance(service, LocalizationService)
        assert service.trans("play") == "Play"
        assert service.trans("greeting", "Ana") == "Hello Ana"
        assert service.trans.plural_same("nbGames", 2) == "2 games"
        assert service.trans.noarg("menu.settings") == "Settings"

    def test_timeago_namespace(self, temp_translations_dir):
        service = create_localization(settings=make_settings(temp_translations_dir))
        assert service.format_ago(0) == "right now"
        assert service.format_ago(-30) == "in 30 seconds"
        assert service.format_ago(3 * 86400) == "3 days ago"

    def test_missing_timeago_label_degrades_to_key(self, temp_translations_dir):
        service = create_localization(settings=make_settings(temp_translations_dir))
        assert service.format_ago(-3600) == "inNbHours"

    def test_locale_plural_rules(self, temp_translations_dir):
        settings = make_settings(temp_translations_dir, locale="ru-RU")
        service = create_localization(settings=settings)
        assert service.trans.plural_same("nbGames", 3) == "3 партии"
        assert service.trans.plural_same("nbGames", 5) == "5 партий"

    def test_french_zero_is_singular(self, temp_translations_dir):
        settings = make_settings(temp_translations_dir, locale="fr-FR")
        service = create_localization(settings=settings)
        assert service.trans.plural_same("nbGames", 0) == "0 partie"

    def test_translations_dir_override(self, temp_translations_dir):
        service = create_localization(
            settings=make_settings(), translations_dir=temp_translations_dir
        )
        assert service.trans("play") == "Play"

    def test_environment_override(self, temp_translations_dir):
        service = create_localization(
            settings=make_settings(temp_translations_dir),
            environment=LocaleEnvironment(lang="fr-FR"),
        )
        assert service.trans("play") == "Jouer"
        assert service.display_locale == "fr-FR"


@pytest.mark.unit
class TestLocalizationService:
    """Tests for LocalizationService delegation."""

    def test_delegates_to_formatter(self):
        trans = Mock()
        relative_time = Mock()
        relative_time.format_ago.return_value = "1 hour ago"
        relative_time.timeago.return_value = "2 days ago"
        relative_time.display_locale = "ar-ly"

        service = LocalizationService(trans, relative_time)

        assert service.trans is trans
        assert service.relative_time is relative_time
        assert service.format_ago(3600) == "1 hour ago"
        assert service.timeago("2024-01-01") == "2 days ago"
        assert service.display_locale == "ar-ly"
        relative_time.format_ago.assert_called_once_with(3600)

    def test_timeago_with_real_formatter(self, temp_translations_dir, fixed_clock):
        service = create_localization(settings=make_settings(temp_translations_dir))
        service.relative_time.clock = fixed_clock
        assert service.timeago(fixed_clock() - timedelta(minutes=1)) == "1 minute ago"
