"""
Comparison and normalization layer for DateIO.

Null-safety, equality, ordering and same-unit predicates built on the engine
primitives. Ordering and same-unit checks truncate both sides to the start
of the unit before comparing, so a day, month or year behaves as a discrete
bucket rather than a continuous interval.

None is the "no value" marker. Predicates never raise for None or for an
engine's invalid marker; they return False (is_equal(None, None) is the one
True case). Failures inside the engine itself propagate unchanged.
"""

import math
from typing import Any, Optional

from dateio.core.config import DateIOConfig
from dateio.core.constants import Unit
from dateio.utils.error_utils import error_handler


def _coerce(config: DateIOConfig, value: Any) -> Any:
    engine = config.engine
    return value if engine.is_instant(value) else engine.construct(value)


def _compare(config: DateIOConfig, a: Any, b: Any, unit: Optional[Unit] = None) -> Optional[int]:
    """Engine comparison, or None when either side is missing or invalid."""
    if a is None or b is None:
        return None

    engine = config.engine
    a = _coerce(config, a)
    b = _coerce(config, b)
    if not (engine.is_instant(a) and engine.is_instant(b)):
        return None
    return engine.compare(a, b, unit, config.locale)


def is_valid(config: DateIOConfig, value: Any) -> bool:
    """True iff the engine accepts value as a real instant."""
    return config.engine.is_valid(value)


def is_null(value: Any) -> bool:
    """True iff value is the no-value marker. Epoch zero is not null."""
    return value is None


@error_handler
def parse(config: DateIOConfig, value: str, pattern: str) -> Any:
    """
    Strictly parse text with an engine pattern.

    Args:
        config: DateIO configuration
        value: Text to parse
        pattern: Engine pattern the text must match exactly

    Returns:
        None for empty text, otherwise an instant or the engine's invalid marker
    """
    if value == "":
        return None
    return config.engine.parse_strict(value, pattern)


@error_handler
def is_equal(config: DateIOConfig, value: Any, comparing: Any) -> bool:
    """Same instant. Two Nones are equal; None never equals a real value."""
    if value is None and comparing is None:
        return True
    return _compare(config, value, comparing) == 0


@error_handler
def is_before(config: DateIOConfig, date: Any, value: Any) -> bool:
    return _compare(config, date, value) == -1


@error_handler
def is_after(config: DateIOConfig, date: Any, value: Any) -> bool:
    return _compare(config, date, value) == 1


@error_handler
def is_before_day(config: DateIOConfig, date: Any, value: Any) -> bool:
    return _compare(config, date, value, Unit.DAY) == -1


@error_handler
def is_after_day(config: DateIOConfig, date: Any, value: Any) -> bool:
    return _compare(config, date, value, Unit.DAY) == 1


@error_handler
def is_before_year(config: DateIOConfig, date: Any, value: Any) -> bool:
    return _compare(config, date, value, Unit.YEAR) == -1


@error_handler
def is_after_year(config: DateIOConfig, date: Any, value: Any) -> bool:
    return _compare(config, date, value, Unit.YEAR) == 1


@error_handler
def is_same_day(config: DateIOConfig, date: Any, comparing: Any) -> bool:
    return _compare(config, date, comparing, Unit.DAY) == 0


@error_handler
def is_same_month(config: DateIOConfig, date: Any, comparing: Any) -> bool:
    return _compare(config, date, comparing, Unit.MONTH) == 0


@error_handler
def is_same_year(config: DateIOConfig, date: Any, comparing: Any) -> bool:
    return _compare(config, date, comparing, Unit.YEAR) == 0


@error_handler
def is_same_hour(config: DateIOConfig, date: Any, comparing: Any) -> bool:
    return _compare(config, date, comparing, Unit.HOUR) == 0


@error_handler
def get_diff(config: DateIOConfig, date: Any, comparing: Any) -> float:
    """
    Milliseconds from comparing to date.

    comparing may be text; it is constructed through the engine. Returns NaN
    when either side is missing or invalid.
    """
    if date is None or comparing is None:
        return math.nan

    engine = config.engine
    date = _coerce(config, date)
    comparing = _coerce(config, comparing)
    if not (engine.is_instant(date) and engine.is_instant(comparing)):
        return math.nan
    return engine.diff(date, comparing)
