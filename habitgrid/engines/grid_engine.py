"""Grid Engine - Date layout of the contribution grid and month pages.

The contribution grid is a trailing window of whole weeks (52 by default)
whose last column is the week containing today. Column `i`, row `j` is the
day `grid_start + 7*i + j`. Month labels sit above the column holding the
month's first day; months that start before the grid are not labelled.

Month pages show six full weeks (42 days) starting at the week containing the
1st, and can be paged back up to 24 months from the current month.

ARCHITECTURE: Pure logic engine. All methods are static.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import dt_add_months, dt_add_weeks, dt_days_between
from ..utils.math_utils import clamp

if TYPE_CHECKING:
    from ..utils.dt_utils import HabitCalendar


class GridEngine:
    """Pure date-layout helpers for the habit grid.

    All methods are static - no instance state.
    """

    @staticmethod
    def grid_start_date(
        today: date,
        calendar: HabitCalendar,
        number_of_weeks: int = const.GRID_NUMBER_OF_WEEKS,
    ) -> date:
        """Return the first day of column 0.

        The window ends with the week containing `today`, so the start is that
        week's first day moved back `number_of_weeks - 1` weeks.
        """
        return dt_add_weeks(calendar.start_of_week(today), -(number_of_weeks - 1))

    @staticmethod
    def grid_end_date(
        grid_start: date, number_of_weeks: int = const.GRID_NUMBER_OF_WEEKS
    ) -> date:
        """Return the last day of the last column."""
        return grid_start + timedelta(
            days=(number_of_weeks * const.DAYS_IN_WEEK) - 1
        )

    @staticmethod
    def week_start(grid_start: date, week_index: int) -> date:
        """Return the first day of column `week_index`."""
        return grid_start + timedelta(days=week_index * const.DAYS_IN_WEEK)

    @staticmethod
    def cell_date(grid_start: date, week_index: int, day_index: int) -> date:
        """Return the day drawn at (`week_index`, `day_index`)."""
        return grid_start + timedelta(
            days=(week_index * const.DAYS_IN_WEEK) + day_index
        )

    @staticmethod
    def week_dates(grid_start: date, week_index: int) -> list[date]:
        """Return the seven days of column `week_index`."""
        return [
            GridEngine.cell_date(grid_start, week_index, day_index)
            for day_index in range(const.DAYS_IN_WEEK)
        ]

    @staticmethod
    def grid_month_starts(
        grid_start: date, number_of_weeks: int = const.GRID_NUMBER_OF_WEEKS
    ) -> list[date]:
        """Return the 1st of every month that begins inside the grid window."""
        grid_end = GridEngine.grid_end_date(grid_start, number_of_weeks)
        current = grid_start.replace(day=1)
        if current < grid_start:
            current = dt_add_months(current, 1)

        month_starts: list[date] = []
        while current <= grid_end:
            month_starts.append(current)
            current = dt_add_months(current, 1)
        return month_starts

    @staticmethod
    def month_label_week_index(
        grid_start: date,
        month_start: date,
        number_of_weeks: int = const.GRID_NUMBER_OF_WEEKS,
    ) -> int:
        """Return the column a month label is drawn above (clamped to the grid)."""
        day_offset = dt_days_between(grid_start, month_start)
        return int(clamp(day_offset // const.DAYS_IN_WEEK, 0, number_of_weeks - 1))

    @staticmethod
    def month_page_start(
        today: date, calendar: HabitCalendar, month_offset: int = 0
    ) -> date:
        """Return the 1st of the month `month_offset` months from today's month.

        Offsets are limited to the past: from -MONTH_PAGE_MAX_PAST_MONTHS to 0.
        """
        offset = int(clamp(month_offset, -const.MONTH_PAGE_MAX_PAST_MONTHS, 0))
        return dt_add_months(calendar.start_of_month(today), offset)

    @staticmethod
    def month_page_dates(month_start: date, calendar: HabitCalendar) -> list[date]:
        """Return the 42 days of a month page, from the week containing the 1st."""
        first_week_start = calendar.start_of_week(calendar.start_of_month(month_start))
        return [
            first_week_start + timedelta(days=offset)
            for offset in range(const.MONTH_PAGE_DAY_COUNT)
        ]
