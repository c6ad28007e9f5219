"""
Formatting operations for DateIO.

Formatting renders with the config's locale passed to the engine. Instants
are immutable values, so the caller's instant is never touched and one
instant can be formatted concurrently under different configs.
"""

from typing import Any, Union

from dateio.core.config import DateIOConfig
from dateio.core.constants import FormatKey, INVALID_DATE_TEXT
from dateio.core.formats import to_format_key
from dateio.utils.error_utils import error_handler


@error_handler
def format(config: DateIOConfig, date: Any, format_key: Union[FormatKey, str]) -> str:
    """
    Render date with the pattern stored under format_key.

    Raises:
        DateIOError: If format_key is not a FormatKey
    """
    return format_by_string(config, date, config.formats[to_format_key(format_key)])


@error_handler
def format_by_string(config: DateIOConfig, date: Any, format_string: str) -> str:
    """
    Render date with an explicit engine pattern.

    Returns:
        str: Rendered text; "" for None and INVALID_DATE_TEXT for an invalid instant
    """
    if date is None:
        return ""

    engine = config.engine
    if not engine.is_instant(date):
        date = engine.construct(date)
        if not engine.is_instant(date):
            return INVALID_DATE_TEXT
    return engine.format_pattern(date, format_string, config.locale)


def format_number(number_to_format: str) -> str:
    """Numeral-system hook; digits are returned unchanged."""
    return number_to_format
