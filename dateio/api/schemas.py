"""
Pydantic schemas for API request/response validation.

These schemas provide:
- Input validation for API requests
- Response serialization
- OpenAPI documentation generation
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dateio.core.constants import FormatKey


# ======================
# Base Schemas
# ======================


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=True,
    )


class DateEntry(BaseSchema):
    """An instant rendered for a picker cell."""

    value: str = Field(..., description="ISO date (YYYY-MM-DD)")
    label: str = Field(..., description="Display text")


# ======================
# Calendar Schemas
# ======================


class WeekArrayResponse(BaseSchema):
    """Month grid padded to whole weeks."""

    month: str = Field(..., description="Target month (YYYY-MM)")
    locale: str
    weekdays: List[str] = Field(..., description="Short weekday headers in grid order")
    weeks: List[List[str]] = Field(..., description="Weeks of seven ISO dates")


class MonthArrayResponse(BaseSchema):
    """The twelve months of a year."""

    year: int
    months: List[DateEntry]


class YearRangeResponse(BaseSchema):
    """Years between two dates, inclusive."""

    years: List[DateEntry]


class WeekdaysResponse(BaseSchema):
    """Short weekday names starting on the locale's first day."""

    locale: str
    weekdays: List[str]


# ======================
# Format Schemas
# ======================


class FormatTableResponse(BaseSchema):
    """Effective format table."""

    localized: bool
    formats: Dict[str, str]


class RenderRequest(BaseSchema):
    """Format a date by semantic key or by explicit pattern."""

    date: str = Field(..., description="Date to render (ISO 8601)")
    key: Optional[FormatKey] = Field(None, description="Semantic format key")
    pattern: Optional[str] = Field(None, description="Explicit engine pattern")
    locale: Optional[str] = None
    use_localized_formats: bool = False
    overrides: Dict[FormatKey, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_key_or_pattern(self):
        if (self.key is None) == (self.pattern is None):
            raise ValueError("Provide exactly one of 'key' or 'pattern'")
        return self


class RenderResponse(BaseSchema):
    text: str


class ParseRequest(BaseSchema):
    """Strictly parse text with an engine pattern."""

    text: str
    pattern: str = Field(..., min_length=1)


class ParseResponse(BaseSchema):
    value: Optional[str] = Field(None, description="Parsed instant (ISO 8601) when valid")
    is_null: bool
    is_valid: bool
