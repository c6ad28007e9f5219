"""
Calendar API endpoints.

Serves the structures a picker frontend renders: the week grid of a month,
the months of a year, a range of years and the weekday header row.
"""

from fastapi import APIRouter, Depends, Query

from dateio.api.dependencies import get_config, to_instant
from dateio.api.schemas import (
    DateEntry,
    MonthArrayResponse,
    WeekArrayResponse,
    WeekdaysResponse,
    YearRangeResponse,
)
from dateio.core import accessors, calendar, formatting
from dateio.core.config import DateIOConfig
from dateio.core.constants import FormatKey

router = APIRouter()

ISO_DATE = "%Y-%m-%d"


def _entry(config: DateIOConfig, instant, label_key: FormatKey) -> DateEntry:
    return DateEntry(
        value=formatting.format_by_string(config, instant, ISO_DATE),
        label=formatting.format(config, instant, label_key),
    )


@router.get("/weeks", response_model=WeekArrayResponse)
def week_array(
    date: str = Query(..., description="Any date inside the target month"),
    config: DateIOConfig = Depends(get_config),
):
    """Week grid for the month containing date."""
    instant = to_instant(config, date)
    weeks = calendar.get_week_array(config, instant)
    return WeekArrayResponse(
        month=formatting.format_by_string(config, instant, "%Y-%m"),
        locale=config.locale,
        weekdays=accessors.get_weekdays(config),
        weeks=[[formatting.format_by_string(config, day, ISO_DATE) for day in week] for week in weeks],
    )


@router.get("/months", response_model=MonthArrayResponse)
def month_array(
    date: str = Query(..., description="Any date inside the target year"),
    config: DateIOConfig = Depends(get_config),
):
    """First day of each month in the year containing date."""
    instant = to_instant(config, date)
    months = calendar.get_month_array(config, instant)
    return MonthArrayResponse(
        year=accessors.get_year(config, instant),
        months=[_entry(config, month, FormatKey.MONTH) for month in months],
    )


@router.get("/years", response_model=YearRangeResponse)
def year_range(
    start: str = Query(..., description="Date in the first year"),
    end: str = Query(..., description="Date in the last year"),
    config: DateIOConfig = Depends(get_config),
):
    """Start of each year from start through end; empty if start is later."""
    years = calendar.get_year_range(
        config,
        to_instant(config, start, "start"),
        to_instant(config, end, "end"),
    )
    return YearRangeResponse(years=[_entry(config, year, FormatKey.YEAR) for year in years])


@router.get("/weekdays", response_model=WeekdaysResponse)
def weekdays(config: DateIOConfig = Depends(get_config)):
    """Weekday header row for the requested locale."""
    return WeekdaysResponse(locale=config.locale, weekdays=accessors.get_weekdays(config))
