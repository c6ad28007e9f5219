"""
Test suite for field accessors and derived helpers in DateIO.
"""

from datetime import datetime

import pytest

from dateio.core import accessors
from dateio.core.adapter import DateUtils
from dateio.core.config import DateIOConfig
from dateio.core.constants import FormatKey
from dateio.core.engine import DatetimeEngine
from dateio.utils.error_utils import DateIOError


class TestConstructionHelpers:

    def test_date_none_is_null(self, us_config):
        assert accessors.date(us_config, None) is None
        assert accessors.date(us_config) is None

    def test_date_constructs(self, us_config):
        assert accessors.date(us_config, "2024-07-15T08:00:00") == datetime(2024, 7, 15, 8)


class TestBoundaries:

    def test_day_and_month_boundaries(self, us_config, make_date):
        instant = make_date("2024-02-10T08:15:00")

        assert accessors.start_of_day(us_config, instant) == datetime(2024, 2, 10)
        assert accessors.end_of_day(us_config, instant) == datetime(2024, 2, 10, 23, 59, 59, 999999)
        assert accessors.start_of_month(us_config, instant) == datetime(2024, 2, 1)
        assert accessors.end_of_month(us_config, instant) == datetime(2024, 2, 29, 23, 59, 59, 999999)

    def test_month_stepping(self, us_config, make_date):
        instant = make_date("2024-01-31")

        assert accessors.get_next_month(us_config, instant) == datetime(2024, 2, 29)
        assert accessors.get_previous_month(us_config, instant) == datetime(2023, 12, 31)

    def test_add_days(self, us_config, make_date):
        instant = make_date("2024-12-30")

        assert accessors.add_days(us_config, instant, 3) == datetime(2025, 1, 2)
        assert accessors.add_days(us_config, instant, -30) == datetime(2024, 11, 30)


class TestFields:

    def test_getters(self, us_config, make_date):
        instant = make_date("2024-07-15T14:30:45")

        assert accessors.get_hours(us_config, instant) == 14
        assert accessors.get_minutes(us_config, instant) == 30
        assert accessors.get_seconds(us_config, instant) == 45
        assert accessors.get_month(us_config, instant) == 7
        assert accessors.get_year(us_config, instant) == 2024

    def test_setters_return_new_instants(self, us_config, make_date):
        instant = make_date("2024-07-15T14:30:45")

        assert accessors.set_hours(us_config, instant, 9) == datetime(2024, 7, 15, 9, 30, 45)
        assert accessors.set_minutes(us_config, instant, 5) == datetime(2024, 7, 15, 14, 5, 45)
        assert accessors.set_seconds(us_config, instant, 0) == datetime(2024, 7, 15, 14, 30)
        assert accessors.set_month(us_config, instant, 1) == datetime(2024, 1, 15, 14, 30, 45)
        assert accessors.set_year(us_config, instant, 2020) == datetime(2020, 7, 15, 14, 30, 45)
        assert instant == datetime(2024, 7, 15, 14, 30, 45)

    def test_set_year_from_leap_day_clamps(self, us_config, make_date):
        assert accessors.set_year(us_config, make_date("2024-02-29"), 2023) == datetime(2023, 2, 28)

    def test_invalid_hour_propagates(self, us_config, make_date):
        with pytest.raises(ValueError):
            accessors.set_hours(us_config, make_date("2024-07-15"), 24)


class TestDerivedHelpers:

    def test_merge_date_and_time(self, us_config, make_date):
        day = make_date("2024-07-15T00:00:12")
        time = make_date("1999-01-01T18:45:59")

        assert accessors.merge_date_and_time(us_config, day, time) == datetime(2024, 7, 15, 18, 45, 12)

    def test_get_weekdays_follows_locale(self, us_config, gb_config):
        assert accessors.get_weekdays(us_config)[0] == "Sun"
        assert accessors.get_weekdays(gb_config)[0] == "Mon"
        assert sorted(accessors.get_weekdays(us_config)) == sorted(accessors.get_weekdays(gb_config))

    def test_meridiem_text(self):
        assert accessors.get_meridiem_text("am") == "AM"
        assert accessors.get_meridiem_text("pm") == "PM"
        with pytest.raises(DateIOError):
            accessors.get_meridiem_text("noon")


class TestDateUtilsFacade:
    """The bound facade routes through its config."""

    def test_keyword_construction(self):
        utils = DateUtils(locale="en_GB", engine="datetime", formats={"year": "%y"})

        assert utils.locale == "en-GB"
        assert isinstance(utils.engine, DatetimeEngine)
        assert utils.formats[FormatKey.YEAR] == "%y"

    def test_explicit_config(self):
        config = DateIOConfig(locale="ar-EG")
        assert DateUtils(config).config is config

    def test_calendar_round_trip(self, engine_name):
        utils = DateUtils(locale="en-US", engine=engine_name)
        reference = utils.date("2024-02-10")

        weeks = utils.get_week_array(reference)
        months = utils.get_month_array(reference)
        years = utils.get_year_range(utils.date("2020-06-01"), utils.date("2022-03-01"))

        assert utils.format(weeks[0][0], "keyboard_date") == "2024/01/28"
        assert utils.is_same_month(months[1], reference)
        assert [utils.get_year(year) for year in years] == [2020, 2021, 2022]
        assert utils.get_weekdays()[0] == "Sun"

    def test_null_handling(self, engine_name):
        utils = DateUtils(engine=engine_name)

        assert utils.is_null(utils.date(None))
        assert utils.parse("", "%Y") is None
        assert utils.is_equal(None, None)
        assert not utils.is_valid(utils.parse("nope", "%Y"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
