"""
Configuration record for DateIO.

Every calendar operation takes a DateIOConfig as its first argument instead of
reading hidden instance state. A config bundles the locale, the date engine
and the format table built from the format options; it is frozen once built.
"""

import os
import re
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from dateio.core.constants import FormatKey, DEFAULT_ENGINE, DEFAULT_LOCALE
from dateio.core.engine import DateEngine, PandasEngine, get_engine
from dateio.core.formats import FormatTable, build_format_table

_LOCALE_TAG = re.compile(r"[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*")


class DateIOConfig(BaseModel):
    """
    Immutable configuration shared by the calendar functions.

    Attributes:
        locale: Locale tag ("en-US", "de-DE"); underscores are normalized to hyphens
        engine: DateEngine instance, or a registered engine name
        use_localized_formats: Use locale-driven patterns for time and keyboard formats
        format_overrides: Per-key patterns applied over the presets
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    locale: str = DEFAULT_LOCALE
    engine: DateEngine = Field(default_factory=PandasEngine)
    use_localized_formats: bool = False
    format_overrides: Dict[FormatKey, str] = Field(default_factory=dict)

    _formats: FormatTable = PrivateAttr()

    @field_validator("locale")
    @classmethod
    def normalize_locale(cls, value: str) -> str:
        tag = value.strip().replace("_", "-")
        if not _LOCALE_TAG.fullmatch(tag):
            raise ValueError(f"Invalid locale tag '{value}'")
        return tag

    @field_validator("engine", mode="before")
    @classmethod
    def resolve_engine(cls, value: Any) -> DateEngine:
        return get_engine(value)

    def model_post_init(self, __context: Any) -> None:
        self._formats = build_format_table(self.use_localized_formats, self.format_overrides)

    @property
    def formats(self) -> FormatTable:
        """Read-only format table (defaults, localized overlay, overrides)."""
        return self._formats

    def replace(self, **changes: Any) -> "DateIOConfig":
        """Return a new config with some options changed."""
        values = {
            "locale": self.locale,
            "engine": self.engine,
            "use_localized_formats": self.use_localized_formats,
            "format_overrides": dict(self.format_overrides),
        }
        values.update(changes)
        return type(self)(**values)

    @classmethod
    def from_env(cls, **overrides: Any) -> "DateIOConfig":
        """
        Build a config from environment variables.

        Reads DATEIO_LOCALE, DATEIO_ENGINE and DATEIO_USE_LOCALIZED_FORMATS,
        after loading a .env file if present. Keyword arguments win over the
        environment.
        """
        load_dotenv()
        settings = {
            "locale": os.getenv("DATEIO_LOCALE", DEFAULT_LOCALE),
            "engine": os.getenv("DATEIO_ENGINE", DEFAULT_ENGINE),
            "use_localized_formats": os.getenv("DATEIO_USE_LOCALIZED_FORMATS", "false").lower() == "true",
        }
        settings.update(overrides)
        return cls(**settings)
