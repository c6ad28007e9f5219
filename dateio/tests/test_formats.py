"""
Test suite for format tables and formatting in DateIO.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest

from dateio.core import formatting
from dateio.core.config import DateIOConfig
from dateio.core.constants import FormatKey, DEFAULT_FORMATS, LOCALIZED_FORMATS, INVALID_DATE_TEXT
from dateio.core.formats import build_format_table, to_format_key
from dateio.utils.error_utils import DateIOError


class TestFormatTable:
    """Layered format table construction."""

    def test_default_table_covers_every_key(self):
        table = build_format_table()

        assert set(table) == set(FormatKey)
        assert len(table) == 20
        assert table[FormatKey.KEYBOARD_DATE] == "%Y/%m/%d"

    def test_localized_overlay_replaces_time_and_keyboard_patterns(self):
        table = build_format_table(use_localized_formats=True)

        for key, pattern in LOCALIZED_FORMATS.items():
            assert table[key] == pattern
        assert table[FormatKey.FULL_DATE] == DEFAULT_FORMATS[FormatKey.FULL_DATE]
        assert len(LOCALIZED_FORMATS) == 5

    def test_overrides_win_over_presets(self):
        table = build_format_table(
            use_localized_formats=True,
            overrides={"keyboard_date": "%d.%m.%Y", FormatKey.YEAR: "%y"},
        )

        assert table[FormatKey.KEYBOARD_DATE] == "%d.%m.%Y"
        assert table[FormatKey.YEAR] == "%y"
        assert table[FormatKey.FULL_TIME_12H] == "%X"

    def test_unknown_override_key(self):
        with pytest.raises(DateIOError):
            build_format_table(overrides={"fortnight": "%W"})

    def test_table_is_read_only(self):
        table = build_format_table()

        with pytest.raises(TypeError):
            table[FormatKey.YEAR] = "%y"

    def test_defaults_are_not_shared(self):
        build_format_table(overrides={"year": "%y"})

        assert build_format_table()[FormatKey.YEAR] == "%Y"

    def test_to_format_key(self):
        assert to_format_key("month_and_year") is FormatKey.MONTH_AND_YEAR
        with pytest.raises(DateIOError):
            to_format_key("monthAndYear")


class TestFormatting:
    """Rendering by key and by pattern."""

    def test_format_by_key(self, us_config, make_date):
        instant = make_date("2024-07-05T14:30:00")

        assert formatting.format(us_config, instant, FormatKey.KEYBOARD_DATE) == "2024/07/05"
        assert formatting.format(us_config, instant, "full_time_24h") == "14:30"
        assert formatting.format(us_config, instant, "full_time_12h") == "02:30 PM"
        assert formatting.format(us_config, instant, "month_and_year") == "July 2024"
        assert formatting.format(us_config, instant, "normal_date") == "Fri, Jul 05"

    def test_format_uses_overrides(self, engine_name, make_date):
        config = DateIOConfig(engine=engine_name, format_overrides={"keyboard_date": "%d.%m.%Y"})

        assert formatting.format(config, make_date("2024-07-05"), "keyboard_date") == "05.07.2024"

    def test_format_unknown_key(self, us_config, make_date):
        with pytest.raises(DateIOError):
            formatting.format(us_config, make_date("2024-07-05"), "fortnight")

    def test_format_by_string(self, us_config, make_date):
        assert formatting.format_by_string(us_config, make_date("2024-07-05"), "%d/%m/%Y") == "05/07/2024"

    def test_null_and_invalid_rendering(self, us_config):
        assert formatting.format_by_string(us_config, None, "%Y") == ""
        assert formatting.format_by_string(us_config, us_config.engine.invalid, "%Y") == INVALID_DATE_TEXT

    def test_format_number_is_passthrough(self):
        assert formatting.format_number("2024") == "2024"
        assert formatting.format_number("07") == "07"


class TestFormattingSideEffects:
    """Formatting never changes the instant it renders."""

    def test_instant_unchanged(self, us_config, gb_config, make_date):
        instant = make_date("2024-07-05T14:30:00")
        before = instant.isoformat()

        formatting.format_by_string(gb_config, instant, "%c")
        formatting.format(us_config, instant, FormatKey.FULL_DATE_TIME_12H)

        assert instant.isoformat() == before
        assert instant.tzinfo is None

    def test_concurrent_formatting_of_shared_instant(self, engine_name, make_date):
        instant = make_date("2024-07-05T14:30:00")
        configs = [
            DateIOConfig(locale=locale, engine=engine_name)
            for locale in ("en-US", "en-GB", "de-DE", "ar-EG", "ja-JP")
        ]

        def render(index):
            config = configs[index % len(configs)]
            return config.locale, formatting.format(config, instant, FormatKey.KEYBOARD_DATE_TIME_24H)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(render, range(200)))

        assert {text for _, text in results} == {"2024/07/05 14:30"}
        assert instant == datetime(2024, 7, 5, 14, 30)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
