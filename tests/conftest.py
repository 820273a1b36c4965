"""Shared fixtures for habitgrid tests."""

from collections.abc import Iterator
from zoneinfo import ZoneInfo

import pytest

from habitgrid import const
from habitgrid.utils import dt_utils
from habitgrid.utils.dt_utils import HabitCalendar
from tests.helpers.builders import TEST_CALENDAR


@pytest.fixture
def calendar() -> HabitCalendar:
    """Sunday-start calendar in UTC."""
    return TEST_CALENDAR


@pytest.fixture
def monday_calendar() -> HabitCalendar:
    """Monday-start calendar in UTC."""
    return HabitCalendar(first_weekday=const.WEEKDAY_MONDAY, time_zone=ZoneInfo("UTC"))


@pytest.fixture
def restore_default_timezone() -> Iterator[None]:
    """Put the process-wide default zone back after a test changes it."""
    original = dt_utils.get_default_timezone()
    yield
    dt_utils.set_default_timezone(original)
