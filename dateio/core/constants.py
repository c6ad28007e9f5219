"""
Core constants and enumerations for DateIO.

This module defines the calendar units, the fixed set of semantic format
keys with their default and localized pattern tables, and the week-start
regions used for locale-aware week boundaries.
"""

from enum import Enum


class Unit(str, Enum):
    """Calendar granularities used for arithmetic, truncation and comparison."""
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def plural(self) -> str:
        """Keyword name for relative arithmetic (``relativedelta(months=...)``)."""
        return f"{self.value}s"


class FormatKey(str, Enum):
    """
    Semantic format names.

    The set is fixed: format tables always carry a pattern for every member
    and cannot be extended with new keys.
    """
    FULL_DATE = "full_date"
    NORMAL_DATE = "normal_date"
    SHORT_DATE = "short_date"
    MONTH_AND_DATE = "month_and_date"
    DAY_OF_MONTH = "day_of_month"
    YEAR = "year"
    MONTH = "month"
    MONTH_SHORT = "month_short"
    MONTH_AND_YEAR = "month_and_year"
    MINUTES = "minutes"
    HOURS_12H = "hours_12h"
    HOURS_24H = "hours_24h"
    SECONDS = "seconds"
    FULL_TIME_12H = "full_time_12h"
    FULL_TIME_24H = "full_time_24h"
    FULL_DATE_TIME_12H = "full_date_time_12h"
    FULL_DATE_TIME_24H = "full_date_time_24h"
    KEYBOARD_DATE = "keyboard_date"
    KEYBOARD_DATE_TIME_12H = "keyboard_date_time_12h"
    KEYBOARD_DATE_TIME_24H = "keyboard_date_time_24h"


# Explicit patterns (strftime directives understood by the shipped engines)
DEFAULT_FORMATS = {
    FormatKey.FULL_DATE: "%Y, %B %d",
    FormatKey.NORMAL_DATE: "%a, %b %d",
    FormatKey.SHORT_DATE: "%b %d",
    FormatKey.MONTH_AND_DATE: "%B %d",
    FormatKey.DAY_OF_MONTH: "%d",
    FormatKey.YEAR: "%Y",
    FormatKey.MONTH: "%B",
    FormatKey.MONTH_SHORT: "%b",
    FormatKey.MONTH_AND_YEAR: "%B %Y",
    FormatKey.MINUTES: "%M",
    FormatKey.HOURS_12H: "%I",
    FormatKey.HOURS_24H: "%H",
    FormatKey.SECONDS: "%S",
    FormatKey.FULL_TIME_12H: "%I:%M %p",
    FormatKey.FULL_TIME_24H: "%H:%M",
    FormatKey.FULL_DATE_TIME_12H: "%Y, %b %d %I:%M %p",
    FormatKey.FULL_DATE_TIME_24H: "%Y, %b %d %H:%M",
    FormatKey.KEYBOARD_DATE: "%Y/%m/%d",
    FormatKey.KEYBOARD_DATE_TIME_12H: "%Y/%m/%d %I:%M %p",
    FormatKey.KEYBOARD_DATE_TIME_24H: "%Y/%m/%d %H:%M",
}

# Locale-driven overlay applied on top of DEFAULT_FORMATS
LOCALIZED_FORMATS = {
    FormatKey.FULL_TIME_12H: "%X",
    FormatKey.FULL_TIME_24H: "%X",
    FormatKey.KEYBOARD_DATE: "%x",
    FormatKey.KEYBOARD_DATE_TIME_12H: "%x %X",
    FormatKey.KEYBOARD_DATE_TIME_24H: "%x %X",
}

DEFAULT_LOCALE = "en-US"
DEFAULT_ENGINE = "pandas"

# Rendering of an invalid instant
INVALID_DATE_TEXT = "Invalid Date"

# Weekday numbering follows datetime.weekday(): Monday == 0
MONDAY = 0
SATURDAY = 5
SUNDAY = 6

SUNDAY_FIRST_REGIONS = frozenset(
    ["US", "CA", "MX", "BR", "JP", "KR", "IL", "IN", "PH", "TW", "HK", "ZA"]
)
SATURDAY_FIRST_REGIONS = frozenset(
    ["AE", "AF", "BH", "DJ", "DZ", "EG", "IQ", "IR", "JO", "KW", "LY", "OM", "QA", "SD", "SY"]
)

# Region assumed for a bare language tag
LANGUAGE_DEFAULT_REGIONS = {
    "en": "US",
    "ja": "JP",
    "he": "IL",
    "ko": "KR",
    "ar": "EG",
}

MERIDIEM_TEXT = {
    "am": "AM",
    "pm": "PM",
}
