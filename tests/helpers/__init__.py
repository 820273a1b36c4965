"""Test helpers for habitgrid tests.

This module re-exports the builders for convenient imports:

    from tests.helpers import make_config, make_history, days_from
"""

from tests.helpers.builders import (
    DEFAULT_HABIT_START,
    TEST_CALENDAR,
    days_back,
    days_from,
    make_config,
    make_history,
    merge_histories,
)

__all__ = [
    "DEFAULT_HABIT_START",
    "TEST_CALENDAR",
    "days_back",
    "days_from",
    "make_config",
    "make_history",
    "merge_histories",
]
