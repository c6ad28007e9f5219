"""
Shared fixtures for the DateIO test suite.

Most behaviour is engine-independent, so the config fixtures run every test
once per registered engine.
"""

import pytest

from dateio.core.config import DateIOConfig
from dateio.core.engine import ENGINES


@pytest.fixture(params=sorted(ENGINES))
def engine_name(request):
    return request.param


@pytest.fixture
def us_config(engine_name):
    """Sunday-first weeks."""
    return DateIOConfig(locale="en-US", engine=engine_name)


@pytest.fixture
def gb_config(engine_name):
    """Monday-first weeks."""
    return DateIOConfig(locale="en-GB", engine=engine_name)


@pytest.fixture
def make_date(us_config):
    """Build an instant of the active engine from ISO text."""

    def _make(text):
        return us_config.engine.construct(text)

    return _make
