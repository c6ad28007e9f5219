"""
Core modules for DateIO.

This package contains the constants, the engine capability interface, the
configuration record and the calendar, comparison and formatting functions.
"""

from dateio.core.constants import (
    Unit,
    FormatKey,
    DEFAULT_FORMATS,
    LOCALIZED_FORMATS,
    DEFAULT_LOCALE,
    DEFAULT_ENGINE,
    INVALID_DATE_TEXT,
)
from dateio.core.engine import DateEngine, DatetimeEngine, PandasEngine, INVALID_DATE, get_engine
from dateio.core.formats import build_format_table
from dateio.core.config import DateIOConfig
from dateio.core.calendar import get_week_array, get_month_array, get_year_range
from dateio.core.adapter import DateUtils

__all__ = [
    "Unit",
    "FormatKey",
    "DEFAULT_FORMATS",
    "LOCALIZED_FORMATS",
    "DEFAULT_LOCALE",
    "DEFAULT_ENGINE",
    "INVALID_DATE_TEXT",
    "DateEngine",
    "DatetimeEngine",
    "PandasEngine",
    "INVALID_DATE",
    "get_engine",
    "build_format_table",
    "DateIOConfig",
    "get_week_array",
    "get_month_array",
    "get_year_range",
    "DateUtils",
]
