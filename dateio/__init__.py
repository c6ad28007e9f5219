"""
DateIO - date abstraction layer for calendar UI components

Uniform calendar arithmetic, comparison and formatting with:
- Pluggable date engines (pandas, datetime)
- Locale-aware week grids, month arrays and year ranges
- Fixed semantic format tables with localized presets
"""

from dateio.core import DateIOConfig, DateUtils, FormatKey, Unit
from dateio.utils import DateIOError

__all__ = ["DateIOConfig", "DateUtils", "DateIOError", "FormatKey", "Unit"]

__version__ = "1.0.0"
__author__ = "DateIO Contributors"
