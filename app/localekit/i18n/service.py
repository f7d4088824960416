"""Localization service for dependency injection.

Bundles a Translator and a RelativeTimeFormatter bound to the same
locale behind one object that can be passed around or mocked.
"""

from localekit.i18n.timeago import DateLike, RelativeTimeFormatter
from localekit.i18n.translator import Translator


class LocalizationService:
    """Thin facade over a Translator and a RelativeTimeFormatter.

    Usage:
        service = create_localization()
        service.trans("play")
        service.trans.plural_same("nbGames", 3)
        service.timeago("2024-01-01T00:00:00Z")
    """

    def __init__(self, trans: Translator, relative_time: RelativeTimeFormatter):
        self._trans = trans
        self._relative_time = relative_time

    @property
    def trans(self) -> Translator:
        return self._trans

    @property
    def relative_time(self) -> RelativeTimeFormatter:
        return self._relative_time

    @property
    def display_locale(self) -> str:
        return self._relative_time.display_locale

    def format_ago(self, seconds: float) -> str:
        return self._relative_time.format_ago(seconds)

    def timeago(self, value: DateLike) -> str:
        return self._relative_time.timeago(value)
