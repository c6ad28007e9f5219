"""
Standard-library datetime engine for DateIO.

Instants are plain ``datetime.datetime`` values. Calendar arithmetic goes
through dateutil's relativedelta so month and year steps clamp the day of
month (Jan 31 + 1 month == Feb 29 in a leap year).

Classes:
    DatetimeEngine: DateEngine implementation over datetime/relativedelta
"""

from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from dateio.core.constants import Unit, DEFAULT_LOCALE
from dateio.core.engine.base import DateEngine, UnitLike
from dateio.utils.error_utils import DateIOError


class _InvalidDate:
    """Sentinel for input that could not be turned into a datetime."""

    __slots__ = ()

    def __bool__(self):
        return False

    def __repr__(self):
        return "INVALID_DATE"


INVALID_DATE = _InvalidDate()

# Fields reset when truncating to the start of a unit
_TRUNCATE = {
    Unit.YEAR: {"month": 1, "day": 1, "hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Unit.MONTH: {"day": 1, "hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Unit.DAY: {"hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Unit.HOUR: {"minute": 0, "second": 0, "microsecond": 0},
    Unit.MINUTE: {"second": 0, "microsecond": 0},
    Unit.SECOND: {"microsecond": 0},
}


class DatetimeEngine(DateEngine):
    """
    Date engine backed by ``datetime.datetime``.

    Patterns are strftime/strptime directives. Month and weekday names come
    from the C library, so the locale only steers week boundaries.
    """

    name = "datetime"
    # Whole years that every unit boundary and calendar grid can reach
    min_year = datetime.min.year + 1
    max_year = datetime.max.year - 1

    @property
    def invalid(self) -> Any:
        return INVALID_DATE

    def construct(self, value: Any) -> Any:
        if value is None or value is INVALID_DATE:
            return self.invalid

        if isinstance(value, datetime):
            try:
                return self._bounded(datetime(
                    value.year,
                    value.month,
                    value.day,
                    value.hour,
                    value.minute,
                    value.second,
                    value.microsecond,
                    tzinfo=value.tzinfo,
                ))
            except (TypeError, ValueError):
                # NaT-like values expose NaN fields
                return self.invalid

        if isinstance(value, date):
            return self._bounded(datetime.combine(value, time()))

        if isinstance(value, str):
            text = value.strip()
            if not text:
                return self.invalid
            try:
                return self._bounded(date_parser.isoparse(text))
            except (ValueError, OverflowError):
                return self.invalid

        return self.invalid

    def is_instant(self, value: Any) -> bool:
        return type(value) is datetime and self.min_year <= value.year <= self.max_year

    def parse_strict(self, text: str, pattern: str) -> Any:
        try:
            parsed = datetime.strptime(text, pattern)
        except (TypeError, ValueError):
            return self.invalid

        # strptime tolerates missing zero padding; require an exact match
        if self.format_pattern(parsed, pattern) != text:
            return self.invalid
        if not self.min_year <= parsed.year <= self.max_year:
            return self.invalid
        return self._wrap(parsed)

    def clone(self, instant: Any) -> Any:
        return instant.replace()

    def add(self, instant: Any, count: int, unit: UnitLike) -> Any:
        unit = Unit(unit)
        return instant + relativedelta(**{unit.plural: count})

    def start_of(self, instant: Any, unit: UnitLike, locale: str = DEFAULT_LOCALE) -> Any:
        unit = Unit(unit)
        if unit is Unit.WEEK:
            day = self.start_of(instant, Unit.DAY)
            offset = (day.weekday() - self.first_weekday(locale)) % 7
            return self.add(day, -offset, Unit.DAY)
        return instant.replace(**_TRUNCATE[unit])

    def end_of(self, instant: Any, unit: UnitLike, locale: str = DEFAULT_LOCALE) -> Any:
        start = self.start_of(instant, unit, locale)
        return self.add(start, 1, unit) - timedelta(microseconds=1)

    def get(self, instant: Any, unit: UnitLike) -> int:
        unit = Unit(unit)
        if unit is Unit.WEEK:
            return instant.isocalendar()[1]
        return getattr(instant, unit.value)

    def set(self, instant: Any, unit: UnitLike, value: int) -> Any:
        unit = Unit(unit)
        if unit is Unit.WEEK:
            raise DateIOError("Week is not a settable field", {"value": value})
        # Absolute relativedelta fields clamp the day of month
        return instant + relativedelta(**{unit.value: value})

    def compare(self, a: Any, b: Any, unit: Optional[UnitLike] = None, locale: str = DEFAULT_LOCALE) -> int:
        if unit is not None:
            a = self.start_of(a, unit, locale)
            b = self.start_of(b, unit, locale)
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def diff(self, a: Any, b: Any) -> float:
        return (a - b).total_seconds() * 1000

    def format_pattern(self, instant: Any, pattern: str, locale: str = DEFAULT_LOCALE) -> str:
        return instant.strftime(pattern)

    def _wrap(self, parsed: datetime) -> Any:
        """Convert a strptime result into this engine's instant type."""
        return parsed

    def _bounded(self, instant: Any) -> Any:
        """Invalid marker for instants outside the enumerable year range."""
        if self.min_year <= instant.year <= self.max_year:
            return instant
        return self.invalid
