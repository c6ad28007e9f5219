"""
Format table construction for DateIO.

A format table maps every FormatKey to a pattern string. Tables are built by
layering three mappings in order: the default patterns, the optional
localized overlay, and caller overrides.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Union

from dateio.core.constants import FormatKey, DEFAULT_FORMATS, LOCALIZED_FORMATS
from dateio.utils.error_utils import DateIOError

FormatTable = Mapping[FormatKey, str]


def to_format_key(key: Union[FormatKey, str]) -> FormatKey:
    """
    Coerce a key name to a FormatKey.

    Raises:
        DateIOError: If key is not one of the fixed format keys
    """
    try:
        return FormatKey(key)
    except ValueError:
        raise DateIOError(
            f"Unknown format key '{key}'. Valid keys: {', '.join(k.value for k in FormatKey)}",
            {"key": key},
        ) from None


def build_format_table(
    use_localized_formats: bool = False,
    overrides: Optional[Mapping[Union[FormatKey, str], str]] = None,
) -> FormatTable:
    """
    Build a read-only format table.

    Args:
        use_localized_formats: Apply LOCALIZED_FORMATS over the defaults
        overrides: Per-key patterns applied last

    Returns:
        MappingProxyType: Table with a pattern for every FormatKey

    Raises:
        DateIOError: If an override names an unknown key

    Examples:
        >>> table = build_format_table(overrides={"year": "%y"})
        >>> table[FormatKey.YEAR]
        '%y'
    """
    layers = [
        DEFAULT_FORMATS,
        LOCALIZED_FORMATS if use_localized_formats else {},
        {to_format_key(key): pattern for key, pattern in (overrides or {}).items()},
    ]

    table = {}
    for layer in layers:
        table.update(layer)
    return MappingProxyType(table)
