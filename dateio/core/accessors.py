"""
Field accessors and derived helpers for DateIO.

Thin, engine-agnostic wrappers over the engine primitives: construction,
unit boundaries, month stepping, field getters/setters and the helpers a
picker needs (merging a date with a time, weekday headers, meridiem text).
Every function returns a new instant; inputs are never modified.
"""

from typing import Any, List

from dateio.core.config import DateIOConfig
from dateio.core.constants import Unit, MERIDIEM_TEXT
from dateio.utils.error_utils import DateIOError, error_handler


@error_handler
def date(config: DateIOConfig, value: Any = None) -> Any:
    """
    Construct an instant through the configured engine.

    Returns:
        None for None, otherwise an instant or the engine's invalid marker
    """
    if value is None:
        return None
    return config.engine.construct(value)


def start_of_day(config: DateIOConfig, date: Any) -> Any:
    return config.engine.start_of(date, Unit.DAY, config.locale)


def end_of_day(config: DateIOConfig, date: Any) -> Any:
    return config.engine.end_of(date, Unit.DAY, config.locale)


def start_of_month(config: DateIOConfig, date: Any) -> Any:
    return config.engine.start_of(date, Unit.MONTH, config.locale)


def end_of_month(config: DateIOConfig, date: Any) -> Any:
    return config.engine.end_of(date, Unit.MONTH, config.locale)


def get_next_month(config: DateIOConfig, date: Any) -> Any:
    return config.engine.add(date, 1, Unit.MONTH)


def get_previous_month(config: DateIOConfig, date: Any) -> Any:
    return config.engine.add(date, -1, Unit.MONTH)


def add_days(config: DateIOConfig, date: Any, count: int) -> Any:
    """Shift date by count days; negative counts move backwards."""
    return config.engine.add(date, count, Unit.DAY)


def get_hours(config: DateIOConfig, date: Any) -> int:
    return config.engine.get(date, Unit.HOUR)


@error_handler
def set_hours(config: DateIOConfig, date: Any, count: int) -> Any:
    return config.engine.set(date, Unit.HOUR, count)


def get_minutes(config: DateIOConfig, date: Any) -> int:
    return config.engine.get(date, Unit.MINUTE)


@error_handler
def set_minutes(config: DateIOConfig, date: Any, count: int) -> Any:
    return config.engine.set(date, Unit.MINUTE, count)


def get_seconds(config: DateIOConfig, date: Any) -> int:
    return config.engine.get(date, Unit.SECOND)


@error_handler
def set_seconds(config: DateIOConfig, date: Any, count: int) -> Any:
    return config.engine.set(date, Unit.SECOND, count)


def get_month(config: DateIOConfig, date: Any) -> int:
    """Month number, January == 1."""
    return config.engine.get(date, Unit.MONTH)


@error_handler
def set_month(config: DateIOConfig, date: Any, month: int) -> Any:
    """Replace the month (January == 1), clamping the day of month."""
    return config.engine.set(date, Unit.MONTH, month)


def get_year(config: DateIOConfig, date: Any) -> int:
    return config.engine.get(date, Unit.YEAR)


@error_handler
def set_year(config: DateIOConfig, date: Any, year: int) -> Any:
    return config.engine.set(date, Unit.YEAR, year)


@error_handler
def merge_date_and_time(config: DateIOConfig, date: Any, time: Any) -> Any:
    """
    Combine the calendar day of date with the hour and minute of time.

    Hour is applied before minute; seconds and below are kept from date.
    """
    with_hours = set_hours(config, date, get_hours(config, time))
    return set_minutes(config, with_hours, get_minutes(config, time))


def get_weekdays(config: DateIOConfig) -> List[str]:
    """Short weekday names starting on the locale's first day of week."""
    return config.engine.short_weekdays(config.locale, adjust_to_locale_start=True)


def get_meridiem_text(ampm: str) -> str:
    """
    Display text for a meridiem.

    Raises:
        DateIOError: If ampm is neither "am" nor "pm"
    """
    try:
        return MERIDIEM_TEXT[ampm]
    except KeyError:
        raise DateIOError(f"Unknown meridiem '{ampm}', expected 'am' or 'pm'", {"ampm": ampm}) from None
