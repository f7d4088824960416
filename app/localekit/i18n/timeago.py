"""Relative time formatting ("5 minutes ago", "in 2 days").

A duration in seconds is classified against a fixed bucket table scanned
largest unit first. This is meant for coarse UI labels; it never combines
units ("1 year 2 months").
"""

import math
from datetime import datetime, timezone
from typing import Callable, Mapping, NamedTuple, Optional, Union

from localekit.i18n.models import FormatterEntry, LiteralEntry, TemplateEntry
from localekit.i18n.environment import LocaleEnvironment
from localekit.i18n.translator import Translator
from localekit.logging import get_module_logger

logger = get_module_logger()

DateLike = Union[datetime, int, float, str]

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
YEAR = 365 * DAY
MONTH = YEAR / 12


class TimeUnitBucket(NamedTuple):
    """One row of the bucket table.

    A bucket matches when ``abs(seconds) >= divisor * at_least`` and it has
    a label for the requested direction.
    """

    past: Optional[str]
    future: str
    divisor: float
    at_least: int

    def label(self, future: bool) -> Optional[str]:
        return self.future if future else self.past


AGO_UNITS = (
    TimeUnitBucket("nbYearsAgo", "inNbYears", YEAR, 1),
    TimeUnitBucket("nbMonthsAgo", "inNbMonths", MONTH, 1),
    TimeUnitBucket("nbWeeksAgo", "inNbWeeks", WEEK, 1),
    TimeUnitBucket("nbDaysAgo", "inNbDays", DAY, 2),
    TimeUnitBucket("nbHoursAgo", "inNbHours", HOUR, 1),
    TimeUnitBucket("nbMinutesAgo", "inNbMinutes", MINUTE, 1),
    TimeUnitBucket(None, "inNbSeconds", 1, 9),
    TimeUnitBucket("rightNow", "justNow", 1, 0),
)

# Labels rendered without a number
NOW_LABELS = frozenset({"rightNow", "justNow"})


def select_bucket(seconds: float) -> TimeUnitBucket:
    """Return the first bucket satisfied by a signed duration.

    Negative durations are in the future. The last bucket always matches.
    """
    abs_seconds = abs(seconds)
    future = seconds < 0
    for unit in AGO_UNITS:
        if abs_seconds >= unit.divisor * unit.at_least and unit.label(future):
            return unit
    return AGO_UNITS[-1]


def format_ago(seconds: float, labels: Mapping[str, TemplateEntry]) -> str:
    """Format a signed duration in seconds as a relative time label.

    Args:
        seconds: Elapsed seconds; positive is past, negative is future.
        labels: Unit label entries keyed by bucket label
            (e.g., "nbHoursAgo", "justNow").

    Returns:
        The literal label, or the formatter applied to the whole number of
        units. A missing label degrades to its key.
    """
    unit = select_bucket(seconds)
    key = unit.label(seconds < 0)
    match labels.get(key):
        case LiteralEntry(text=text):
            return text
        case FormatterEntry() as formatter:
            return formatter(math.floor(abs(seconds) / unit.divisor))
        case _:
            logger.debug("timeago_label_not_found", key=key)
            return key


def timeago_labels(trans: Translator) -> dict:
    """Build unit label entries from a translator.

    The "now" labels are literal lookups; every other label is bound to
    ``trans.plural_same`` so the count drives both plural form and display.
    """
    labels = {}
    for unit in AGO_UNITS:
        for key in (unit.past, unit.future):
            if key is None:
                continue
            if key in NOW_LABELS:
                labels[key] = LiteralEntry(trans.noarg(key))
            else:
                labels[key] = FormatterEntry(
                    lambda n, key=key: trans.plural_same(key, n)
                )
    return labels


def to_date(value: DateLike) -> datetime:
    """Convert a datetime, epoch milliseconds or ISO 8601 string to a datetime.

    Numeric strings may carry a fraction or an exponent ("1.5e12").
    Naive values are assumed to be UTC.

    Raises:
        ValueError: If a string is neither numeric nor ISO 8601, or a
            number is not finite.
        TypeError: If the value is not a datetime, number or string.
    """
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        result = _from_millis(value)
    elif isinstance(value, str):
        text = value.strip()
        try:
            millis = float(text)
        except ValueError:
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            result = datetime.fromisoformat(text)
        else:
            result = _from_millis(millis)
    else:
        raise TypeError(f"Unsupported date value: {value!r}")
    if result.tzinfo is None:
        result = result.replace(tzinfo=timezone.utc)
    return result


def _from_millis(millis: float) -> datetime:
    if not math.isfinite(millis):
        raise ValueError(f"Invalid epoch milliseconds: {millis!r}")
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RelativeTimeFormatter:
    """Formats durations and dates relative to now.

    Attributes:
        labels: Unit label entries used by ``format_ago``.
        environment: LocaleEnvironment the labels belong to.
        clock: Callable returning the current aware datetime.
    """

    def __init__(
        self,
        labels: Mapping[str, TemplateEntry],
        environment: Optional[LocaleEnvironment] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.labels = labels
        self.environment = environment or LocaleEnvironment()
        self.clock = clock or _utcnow

    @classmethod
    def from_translator(
        cls,
        trans: Translator,
        environment: Optional[LocaleEnvironment] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> "RelativeTimeFormatter":
        """Create a formatter whose labels come from a translator."""
        return cls(timeago_labels(trans), environment=environment, clock=clock)

    @property
    def display_locale(self) -> str:
        return self.environment.display_locale

    def format_ago(self, seconds: float) -> str:
        return format_ago(seconds, self.labels)

    def timeago(self, value: DateLike) -> str:
        """Format how long ago (or how far ahead) a date is."""
        elapsed = self.clock() - to_date(value)
        return self.format_ago(elapsed.total_seconds())
