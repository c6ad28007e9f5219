"""
Caller facade for DateIO.

DateUtils binds one DateIOConfig and exposes every calendar operation under a
stable name, so UI code can hold a single object without knowing which date
engine sits underneath. It carries no state besides the frozen config.

Classes:
    DateUtils: Facade over the calendar, comparison and formatting functions
"""

from typing import Any, List, Optional, Union

from dateio.core import accessors, calendar, comparison, formatting
from dateio.core.config import DateIOConfig
from dateio.core.constants import FormatKey
from dateio.core.engine import DateEngine
from dateio.core.formats import FormatTable


class DateUtils:
    """
    Date operations bound to one configuration.

    Usage:
        utils = DateUtils(locale="en-GB")
        weeks = utils.get_week_array(utils.date("2024-02-10"))

    Attributes:
        config: The frozen DateIOConfig every call is routed through
    """

    def __init__(
        self,
        config: Optional[DateIOConfig] = None,
        *,
        locale: Optional[str] = None,
        engine: Union[str, DateEngine, None] = None,
        formats: Optional[dict] = None,
        use_localized_formats: bool = False,
    ):
        if config is None:
            options = {"use_localized_formats": use_localized_formats, "format_overrides": formats or {}}
            if locale is not None:
                options["locale"] = locale
            if engine is not None:
                options["engine"] = engine
            config = DateIOConfig(**options)
        self.config = config

    @property
    def locale(self) -> str:
        return self.config.locale

    @property
    def engine(self) -> DateEngine:
        return self.config.engine

    @property
    def formats(self) -> FormatTable:
        return self.config.formats

    # Construction, parsing and validity

    def date(self, value: Any = None) -> Any:
        return accessors.date(self.config, value)

    def parse(self, value: str, format_string: str) -> Any:
        return comparison.parse(self.config, value, format_string)

    def is_valid(self, value: Any) -> bool:
        return comparison.is_valid(self.config, value)

    def is_null(self, value: Any) -> bool:
        return comparison.is_null(value)

    # Comparison

    def get_diff(self, date: Any, comparing: Any) -> float:
        return comparison.get_diff(self.config, date, comparing)

    def is_equal(self, value: Any, comparing: Any) -> bool:
        return comparison.is_equal(self.config, value, comparing)

    def is_after(self, date: Any, value: Any) -> bool:
        return comparison.is_after(self.config, date, value)

    def is_before(self, date: Any, value: Any) -> bool:
        return comparison.is_before(self.config, date, value)

    def is_after_day(self, date: Any, value: Any) -> bool:
        return comparison.is_after_day(self.config, date, value)

    def is_before_day(self, date: Any, value: Any) -> bool:
        return comparison.is_before_day(self.config, date, value)

    def is_after_year(self, date: Any, value: Any) -> bool:
        return comparison.is_after_year(self.config, date, value)

    def is_before_year(self, date: Any, value: Any) -> bool:
        return comparison.is_before_year(self.config, date, value)

    def is_same_day(self, date: Any, comparing: Any) -> bool:
        return comparison.is_same_day(self.config, date, comparing)

    def is_same_month(self, date: Any, comparing: Any) -> bool:
        return comparison.is_same_month(self.config, date, comparing)

    def is_same_year(self, date: Any, comparing: Any) -> bool:
        return comparison.is_same_year(self.config, date, comparing)

    def is_same_hour(self, date: Any, comparing: Any) -> bool:
        return comparison.is_same_hour(self.config, date, comparing)

    # Boundaries and arithmetic

    def start_of_day(self, date: Any) -> Any:
        return accessors.start_of_day(self.config, date)

    def end_of_day(self, date: Any) -> Any:
        return accessors.end_of_day(self.config, date)

    def start_of_month(self, date: Any) -> Any:
        return accessors.start_of_month(self.config, date)

    def end_of_month(self, date: Any) -> Any:
        return accessors.end_of_month(self.config, date)

    def get_next_month(self, date: Any) -> Any:
        return accessors.get_next_month(self.config, date)

    def get_previous_month(self, date: Any) -> Any:
        return accessors.get_previous_month(self.config, date)

    def add_days(self, date: Any, count: int) -> Any:
        return accessors.add_days(self.config, date, count)

    # Fields

    def get_hours(self, date: Any) -> int:
        return accessors.get_hours(self.config, date)

    def set_hours(self, date: Any, count: int) -> Any:
        return accessors.set_hours(self.config, date, count)

    def get_minutes(self, date: Any) -> int:
        return accessors.get_minutes(self.config, date)

    def set_minutes(self, date: Any, count: int) -> Any:
        return accessors.set_minutes(self.config, date, count)

    def get_seconds(self, date: Any) -> int:
        return accessors.get_seconds(self.config, date)

    def set_seconds(self, date: Any, count: int) -> Any:
        return accessors.set_seconds(self.config, date, count)

    def get_month(self, date: Any) -> int:
        return accessors.get_month(self.config, date)

    def set_month(self, date: Any, month: int) -> Any:
        return accessors.set_month(self.config, date, month)

    def get_year(self, date: Any) -> int:
        return accessors.get_year(self.config, date)

    def set_year(self, date: Any, year: int) -> Any:
        return accessors.set_year(self.config, date, year)

    def merge_date_and_time(self, date: Any, time: Any) -> Any:
        return accessors.merge_date_and_time(self.config, date, time)

    def get_weekdays(self) -> List[str]:
        return accessors.get_weekdays(self.config)

    def get_meridiem_text(self, ampm: str) -> str:
        return accessors.get_meridiem_text(ampm)

    # Formatting

    def format(self, date: Any, format_key: Union[FormatKey, str]) -> str:
        return formatting.format(self.config, date, format_key)

    def format_by_string(self, date: Any, format_string: str) -> str:
        return formatting.format_by_string(self.config, date, format_string)

    def format_number(self, number_to_format: str) -> str:
        return formatting.format_number(number_to_format)

    # Calendar generators

    def get_week_array(self, date: Any) -> List[List[Any]]:
        return calendar.get_week_array(self.config, date)

    def get_month_array(self, date: Any) -> List[Any]:
        return calendar.get_month_array(self.config, date)

    def get_year_range(self, start: Any, end: Any) -> List[Any]:
        return calendar.get_year_range(self.config, start, end)

    def __repr__(self) -> str:
        return f"DateUtils(locale={self.locale!r}, engine={self.engine!r})"
