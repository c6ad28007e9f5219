"""
Pandas engine for DateIO.

Instants are ``pandas.Timestamp`` values and ``pandas.NaT`` marks input that
could not be parsed. Calendar steps use ``pd.DateOffset`` so tz-aware instants
keep their wall-clock time across DST changes; clock units fall back to the
relativedelta rules of the datetime engine.

Classes:
    PandasEngine: DateEngine implementation over pandas.Timestamp
"""

from datetime import datetime
from typing import Any

import pandas as pd

from dateio.core.constants import Unit, DEFAULT_LOCALE
from dateio.core.engine.base import UnitLike
from dateio.core.engine.datetime_engine import DatetimeEngine

_CALENDAR_UNITS = (Unit.YEAR, Unit.MONTH, Unit.WEEK, Unit.DAY)


class PandasEngine(DatetimeEngine):
    """
    Date engine backed by ``pandas.Timestamp``.

    Lenient construction goes through ``pd.to_datetime(..., errors="coerce")``;
    strict parsing keeps the exact-match strptime rule of DatetimeEngine.
    """

    name = "pandas"
    min_year = pd.Timestamp.min.year + 1
    max_year = pd.Timestamp.max.year - 1

    @property
    def invalid(self) -> Any:
        return pd.NaT

    def construct(self, value: Any) -> Any:
        if value is None:
            return self.invalid
        if isinstance(value, pd.Timestamp):
            return self._bounded(value)
        if isinstance(value, str) and not value.strip():
            return self.invalid

        try:
            result = pd.to_datetime(value, errors="coerce")
        except (TypeError, ValueError, OverflowError):
            return self.invalid

        # Sequences come back as an index; only scalars are instants
        if not isinstance(result, pd.Timestamp):
            return self.invalid
        return self._bounded(result)

    def is_instant(self, value: Any) -> bool:
        return isinstance(value, pd.Timestamp) and self.min_year <= value.year <= self.max_year

    def clone(self, instant: Any) -> Any:
        return pd.Timestamp(instant)

    def add(self, instant: Any, count: int, unit: UnitLike) -> Any:
        unit = Unit(unit)
        if unit in _CALENDAR_UNITS:
            return instant + pd.DateOffset(**{unit.plural: count})
        return super().add(instant, count, unit)

    def start_of(self, instant: Any, unit: UnitLike, locale: str = DEFAULT_LOCALE) -> Any:
        return super().start_of(instant, unit, locale).replace(nanosecond=0)

    def _wrap(self, parsed: datetime) -> Any:
        return pd.Timestamp(parsed)
