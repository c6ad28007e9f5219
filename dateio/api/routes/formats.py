"""
Format and parse API endpoints.

Exposes the effective format table, rendering by semantic key or pattern,
and strict parsing.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from dateio.api.dependencies import get_config, to_instant
from dateio.api.schemas import (
    FormatTableResponse,
    ParseRequest,
    ParseResponse,
    RenderRequest,
    RenderResponse,
)
from dateio.core import comparison, formatting
from dateio.core.config import DateIOConfig
from dateio.utils.error_utils import DateIOError

router = APIRouter()


@router.get("", response_model=FormatTableResponse)
def format_table(config: DateIOConfig = Depends(get_config)):
    """Effective format table for the requested preset."""
    return FormatTableResponse(
        localized=config.use_localized_formats,
        formats={key.value: pattern for key, pattern in config.formats.items()},
    )


@router.post("/render", response_model=RenderResponse)
def render(request: RenderRequest, config: DateIOConfig = Depends(get_config)):
    """Format a date with a semantic key or an explicit pattern."""
    changes = {
        "use_localized_formats": request.use_localized_formats or config.use_localized_formats,
        "format_overrides": request.overrides,
    }
    if request.locale is not None:
        changes["locale"] = request.locale
    try:
        config = config.replace(**changes)
    except (ValueError, DateIOError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    instant = to_instant(config, request.date)
    if request.key is not None:
        text = formatting.format(config, instant, request.key)
    else:
        text = formatting.format_by_string(config, instant, request.pattern)
    return RenderResponse(text=text)


@router.post("/parse", response_model=ParseResponse)
def parse(request: ParseRequest, config: DateIOConfig = Depends(get_config)):
    """Strictly parse text; empty text yields a null value rather than an error."""
    result = comparison.parse(config, request.text, request.pattern)
    valid = comparison.is_valid(config, result)
    return ParseResponse(
        value=result.isoformat() if valid else None,
        is_null=comparison.is_null(result),
        is_valid=valid,
    )
