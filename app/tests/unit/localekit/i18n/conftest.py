"""Fixtures for localekit i18n tests."""

from datetime import datetime, timezone

import pytest
import yaml

from localekit.i18n import LocaleEnvironment, create_translator
from tests.factories.i18n import (
    SITE_MESSAGES,
    TIMEAGO_MESSAGES,
    make_unit_labels,
)

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def trans():
    """Translator over the sample site dictionary, English plural rule."""
    return create_translator(SITE_MESSAGES)


@pytest.fixture
def timeago_trans():
    """Translator over the sample timeago dictionary."""
    return create_translator(TIMEAGO_MESSAGES)


@pytest.fixture
def unit_labels():
    return make_unit_labels()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def english_environment():
    return LocaleEnvironment(lang="en-US")


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a directory with sample YAML translation files.

    - site.en-US.yml
    - timeago.en-US.yml
    - site.fr-FR.yml
    - site.ru-RU.yml
    """
    en_us_site = {
        "site": {
            "play": "Play",
            "greeting": "Hello %s",
            "nbGames": {"one": "%s game", "other": "%s games"},
            "menu": {"settings": "Settings"},
        }
    }
    with open(tmp_path / "site.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_site, f)

    en_us_timeago = {
        "timeago": {
            "rightNow": "right now",
            "justNow": "just now",
            "inNbSeconds": {"one": "in %s second", "other": "in %s seconds"},
            "nbMinutesAgo": {"one": "%s minute ago", "other": "%s minutes ago"},
            "nbHoursAgo": {"one": "%s hour ago", "other": "%s hours ago"},
            "nbDaysAgo": {"one": "%s day ago", "other": "%s days ago"},
            "inNbDays": {"one": "in %s day", "other": "in %s days"},
        }
    }
    with open(tmp_path / "timeago.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_timeago, f)

    fr_fr_site = {
        "site": {
            "play": "Jouer",
            "nbGames": {"one": "%s partie", "other": "%s parties"},
        }
    }
    with open(tmp_path / "site.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_fr_site, f, allow_unicode=True)

    ru_ru_site = {
        "site": {
            "nbGames": {
                "one": "%s партия",
                "few": "%s партии",
                "many": "%s партий",
                "other": "%s партии",
            },
        }
    }
    with open(tmp_path / "site.ru-RU.yml", "w", encoding="utf-8") as f:
        yaml.dump(ru_ru_site, f, allow_unicode=True)

    return tmp_path
