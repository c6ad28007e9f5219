"""
Date engine capability interface for DateIO.

Every calendar operation in DateIO is expressed through the small set of
primitives declared here. A concrete engine wraps one date library and is
selected once, when a DateIOConfig is built.

Classes:
    DateEngine: Abstract base class for date engines
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Union

from dateio.core.constants import (
    Unit,
    DEFAULT_LOCALE,
    LANGUAGE_DEFAULT_REGIONS,
    SATURDAY_FIRST_REGIONS,
    SUNDAY_FIRST_REGIONS,
    MONDAY,
    SATURDAY,
    SUNDAY,
)

# 2024-01-01 fell on a Monday
REFERENCE_MONDAY = "2024-01-01"

UnitLike = Union[Unit, str]


class DateEngine(ABC):
    """
    Primitive date operations required by the calendar layer.

    Instants handed out by an engine are immutable values: every derived
    instant is a new object and never aliases its source. Locale is passed
    explicitly to the primitives that depend on it.

    Attributes:
        name: Registered engine name
    """

    name: str = ""

    @property
    @abstractmethod
    def invalid(self) -> Any:
        """Marker returned when input cannot be turned into an instant."""

    @abstractmethod
    def construct(self, value: Any) -> Any:
        """
        Build an instant from arbitrary input.

        Args:
            value: Text, date, datetime or an existing instant

        Returns:
            Instant, or the engine's invalid marker if the input is unusable
        """

    @abstractmethod
    def is_instant(self, value: Any) -> bool:
        """True iff value is already a real (valid) instant of this engine."""

    @abstractmethod
    def parse_strict(self, text: str, pattern: str) -> Any:
        """Parse text that must match pattern exactly, or return the invalid marker."""

    @abstractmethod
    def clone(self, instant: Any) -> Any:
        """Return an independent copy of instant."""

    @abstractmethod
    def add(self, instant: Any, count: int, unit: UnitLike) -> Any:
        """Shift instant by a signed count of unit."""

    @abstractmethod
    def start_of(self, instant: Any, unit: UnitLike, locale: str = DEFAULT_LOCALE) -> Any:
        """Truncate instant to the beginning of unit (locale-aware for weeks)."""

    @abstractmethod
    def end_of(self, instant: Any, unit: UnitLike, locale: str = DEFAULT_LOCALE) -> Any:
        """Last representable moment of the unit containing instant."""

    @abstractmethod
    def get(self, instant: Any, unit: UnitLike) -> int:
        """Read a calendar field. Months are 1-based."""

    @abstractmethod
    def set(self, instant: Any, unit: UnitLike, value: int) -> Any:
        """Return a copy of instant with one calendar field replaced."""

    @abstractmethod
    def compare(self, a: Any, b: Any, unit: Optional[UnitLike] = None, locale: str = DEFAULT_LOCALE) -> int:
        """Return -1, 0 or 1 comparing a to b, truncating both to unit first."""

    @abstractmethod
    def diff(self, a: Any, b: Any) -> float:
        """Milliseconds elapsed from b to a."""

    @abstractmethod
    def format_pattern(self, instant: Any, pattern: str, locale: str = DEFAULT_LOCALE) -> str:
        """Render instant with an engine pattern."""

    def is_valid(self, value: Any) -> bool:
        """True iff the engine accepts value as a real instant."""
        if value is None:
            return False
        if self.is_instant(value):
            return True
        return self.is_instant(self.construct(value))

    def first_weekday(self, locale: str = DEFAULT_LOCALE) -> int:
        """
        First day of the week for a locale tag.

        Args:
            locale: BCP 47 style tag ("en-US", "de_DE", "ar")

        Returns:
            int: Weekday number, Monday == 0 through Sunday == 6
        """
        region = locale_region(locale)
        if region in SUNDAY_FIRST_REGIONS:
            return SUNDAY
        if region in SATURDAY_FIRST_REGIONS:
            return SATURDAY
        return MONDAY

    def short_weekdays(self, locale: str = DEFAULT_LOCALE, adjust_to_locale_start: bool = True) -> List[str]:
        """
        Short weekday names.

        Args:
            locale: Locale tag used to pick the first day of the week
            adjust_to_locale_start: If False, names start on Sunday

        Returns:
            list: Seven abbreviated weekday names
        """
        monday = self.construct(REFERENCE_MONDAY)
        names = [self.format_pattern(self.add(monday, offset, Unit.DAY), "%a", locale) for offset in range(7)]
        start = self.first_weekday(locale) if adjust_to_locale_start else SUNDAY
        return names[start:] + names[:start]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def locale_region(locale: str) -> Optional[str]:
    """
    Extract the region subtag of a locale tag.

    A bare language falls back to LANGUAGE_DEFAULT_REGIONS.

    Examples:
        >>> locale_region("en-GB")
        'GB'
        >>> locale_region("zh_Hant_TW")
        'TW'
        >>> locale_region("en")
        'US'
    """
    parts = locale.replace("_", "-").split("-")
    for part in parts[1:]:
        if len(part) == 2 and part.isalpha():
            return part.upper()
    return LANGUAGE_DEFAULT_REGIONS.get(parts[0].lower())
