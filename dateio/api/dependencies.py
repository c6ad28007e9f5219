"""
Shared FastAPI dependencies for the DateIO API.

Provides the per-request DateIOConfig (environment defaults overridden by
query parameters) and conversion of date query values into instants.
"""

from functools import lru_cache
from typing import Any, Optional

from fastapi import HTTPException, Query, status

from dateio.core import accessors, comparison
from dateio.core.config import DateIOConfig
from dateio.utils.error_utils import DateIOError


@lru_cache(maxsize=1)
def get_base_config() -> DateIOConfig:
    """Environment-derived defaults, built once per process."""
    return DateIOConfig.from_env()


def get_config(
    locale: Optional[str] = Query(None, description="Locale tag, e.g. en-US or de-DE"),
    engine: Optional[str] = Query(None, description="Date engine: pandas or datetime"),
    localized: Optional[bool] = Query(None, description="Use localized format presets"),
) -> DateIOConfig:
    """Request config: base config with any query overrides applied."""
    changes = {}
    if localized is not None:
        changes["use_localized_formats"] = localized
    if locale is not None:
        changes["locale"] = locale
    if engine is not None:
        changes["engine"] = engine

    try:
        return get_base_config().replace(**changes)
    except (ValueError, DateIOError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


def to_instant(config: DateIOConfig, value: str, field: str = "date") -> Any:
    """Construct an instant from a request value or fail with 422."""
    instant = accessors.date(config, value)
    if not comparison.is_valid(config, instant):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid {field}: '{value}'",
        )
    return instant
