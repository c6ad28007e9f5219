"""
DateIO Engine Package.

This package contains the date engine capability interface and one
implementation per supported date library.

Modules:
    base: DateEngine abstract base class
    datetime_engine: Engine over datetime + dateutil.relativedelta
    pandas_engine: Engine over pandas.Timestamp
"""

from typing import Union

from dateio.core.engine.base import DateEngine, locale_region
from dateio.core.engine.datetime_engine import DatetimeEngine, INVALID_DATE
from dateio.core.engine.pandas_engine import PandasEngine
from dateio.utils.error_utils import DateIOError

ENGINES = {
    PandasEngine.name: PandasEngine,
    DatetimeEngine.name: DatetimeEngine,
}


def get_engine(engine: Union[str, DateEngine]) -> DateEngine:
    """
    Resolve an engine instance from a registered name.

    Args:
        engine: Engine name ("pandas", "datetime") or a DateEngine instance

    Returns:
        DateEngine: Engine instance

    Raises:
        DateIOError: If the name is not registered
    """
    if isinstance(engine, DateEngine):
        return engine

    engine_cls = ENGINES.get(str(engine).strip().lower())
    if engine_cls is None:
        raise DateIOError(
            f"Unknown date engine '{engine}'. Supported engines: {', '.join(sorted(ENGINES))}",
            {"engine": engine},
        )
    return engine_cls()


__all__ = [
    "DateEngine",
    "DatetimeEngine",
    "PandasEngine",
    "INVALID_DATE",
    "ENGINES",
    "get_engine",
    "locale_region",
]
