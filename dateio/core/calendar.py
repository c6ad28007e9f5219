"""
Calendar grid and range generators for DateIO.

These build the structures a calendar picker renders:

- get_week_array: the month as whole weeks, padded with days of the
  neighbouring months so every week holds seven days
- get_month_array: the twelve months of the year containing a date
- get_year_range: one entry per year between two dates

Week boundaries follow the config's locale (Sunday-first for en-US,
Monday-first for en-GB, ...).
"""

import logging
from typing import Any, List

from dateio.core.accessors import get_next_month
from dateio.core.config import DateIOConfig
from dateio.core.constants import Unit
from dateio.utils.error_utils import error_handler

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


@error_handler
def get_week_array(config: DateIOConfig, date: Any) -> List[List[Any]]:
    """
    Build the week grid for the month containing date.

    The walk starts at the locale start of the week holding the 1st and runs
    day by day while before the locale end of the week holding the month's
    last day. That bound is the final microsecond of the last week, so its
    last day is emitted and nothing after it.

    Args:
        config: DateIO configuration (engine and locale)
        date: Any instant inside the target month

    Returns:
        list: Weeks in chronological order, each a list of seven start-of-day instants

    Examples:
        February 2024 with Sunday-first weeks spans Sun Jan 28 to Sat Mar 2
        (5 weeks, 35 days).
    """
    engine = config.engine
    locale = config.locale

    start = engine.start_of(engine.start_of(date, Unit.MONTH, locale), Unit.WEEK, locale)
    end = engine.end_of(engine.end_of(date, Unit.MONTH, locale), Unit.WEEK, locale)

    nested_weeks: List[List[Any]] = []
    count = 0
    current = start
    while engine.compare(current, end) < 0:
        week_number = count // DAYS_PER_WEEK
        if week_number == len(nested_weeks):
            nested_weeks.append([])
        nested_weeks[week_number].append(current)

        current = engine.add(current, 1, Unit.DAY)
        count += 1

    logger.debug(f"Week array for {date}: {len(nested_weeks)} weeks from {start}")
    return nested_weeks


@error_handler
def get_month_array(config: DateIOConfig, date: Any) -> List[Any]:
    """
    First day of every month in the year containing date, January first.

    Always twelve entries, whatever month date falls in.
    """
    first_month = config.engine.start_of(date, Unit.YEAR, config.locale)
    month_array = [first_month]

    while len(month_array) < MONTHS_PER_YEAR:
        prev_month = month_array[-1]
        month_array.append(get_next_month(config, prev_month))

    return month_array


@error_handler
def get_year_range(config: DateIOConfig, start: Any, end: Any) -> List[Any]:
    """
    Start of each year from start's year through end's year.

    Args:
        config: DateIO configuration
        start: Instant in the first year
        end: Instant in the last year

    Returns:
        list: Start-of-year instants in ascending order; empty if start's
        year is after end's year
    """
    engine = config.engine
    start_date = engine.start_of(start, Unit.YEAR, config.locale)
    end_date = engine.end_of(end, Unit.YEAR, config.locale)
    years = []

    current = start_date
    while engine.compare(current, end_date) < 0:
        years.append(current)
        current = engine.add(current, 1, Unit.YEAR)

    if not years:
        logger.debug(f"Empty year range: {start} is after {end}")
    return years
