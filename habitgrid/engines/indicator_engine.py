"""Goal Indicator Engine - Which grid weeks and months light up.

A week or month "qualifies" for the grid's goal marker through one of several
alternative conditions, checked in a fixed order:

1. goal_met  - the streak goal period matches and the period meets the goal
2. all_days  - every day on/after the habit start meets its per-day target
               (months: daily goals only)
3. all_weeks - (months, weekly goals only) every active week segment that
               overlaps the month meets the goal on its own

Quit habits are judged only once a period is over: future violations could
still turn a week or month in progress into a failure.

ARCHITECTURE: Pure logic engine. The instance holds only immutable inputs.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta
from typing import TYPE_CHECKING

from .. import const
from .goal_engine import GoalEngine, PeriodTotals

if TYPE_CHECKING:
    from ..data_builders import HabitConfig
    from ..type_defs import CompletionHistory
    from ..utils.dt_utils import HabitCalendar


class GoalIndicatorEngine:
    """Evaluates goal indicators for the weeks and months of a habit grid.

    Example:
        engine = GoalIndicatorEngine(config, history, grid_start, today, calendar)
        engine.week_qualifies(51)            # current week column
        engine.month_qualification(date(2026, 1, 1))   # "all_weeks" or None
    """

    def __init__(
        self,
        config: HabitConfig,
        history: CompletionHistory,
        grid_start_date: date,
        today: date,
        calendar: HabitCalendar,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Resolved habit configuration
            history: Day → count mapping
            grid_start_date: First day of week column 0
            today: Evaluation day (nothing after it has happened yet)
            calendar: Week start and zone configuration
        """
        self._config = config
        self._history = history
        self._grid_start_date = grid_start_date
        self._today = today
        self._calendar = calendar

    # ────────────────────────────────────────────────────────────────
    # Weeks
    # ────────────────────────────────────────────────────────────────

    def week_start(self, week_index: int) -> date:
        """Return the first day of grid column `week_index`."""
        return self._grid_start_date + timedelta(
            days=week_index * const.DAYS_IN_WEEK
        )

    def week_qualification(self, week_index: int) -> str | None:
        """Return why a grid week qualifies, or None if it does not.

        Args:
            week_index: Column index relative to the grid start date

        Returns:
            const.QUALIFY_REASON_GOAL_MET, const.QUALIFY_REASON_ALL_DAYS or None
        """
        week_start = self.week_start(week_index)
        week_end = week_start + timedelta(days=const.DAYS_IN_WEEK - 1)

        if self._config.is_quit and not (
            week_end < self._today and week_start >= self._config.habit_start_date
        ):
            return None

        checks: tuple[tuple[str, Callable[[date], bool]], ...] = (
            (const.QUALIFY_REASON_GOAL_MET, self._week_meets_goal),
            (const.QUALIFY_REASON_ALL_DAYS, self._week_all_days_satisfied),
        )
        return self._first_passing(checks, week_start)

    def week_qualifies(self, week_index: int) -> bool:
        """Return True if grid week `week_index` gets a goal marker."""
        return self.week_qualification(week_index) is not None

    def _week_meets_goal(self, week_start: date) -> bool:
        if self._config.streak_goal_period != const.STREAK_PERIOD_WEEK:
            return False
        totals = GoalEngine.period_totals(
            week_start,
            const.DAYS_IN_WEEK,
            self._history,
            self._config.daily_target,
            self._config.habit_start_date,
            self._today,
        )
        return self._meets_goal(totals)

    def _week_all_days_satisfied(self, week_start: date) -> bool:
        return self._all_days_satisfied(week_start, const.DAYS_IN_WEEK)

    # ────────────────────────────────────────────────────────────────
    # Months
    # ────────────────────────────────────────────────────────────────

    def month_qualification(self, month_start: date) -> str | None:
        """Return why a month qualifies, or None if it does not.

        Args:
            month_start: Any day of the month (normalized to the 1st)

        Returns:
            const.QUALIFY_REASON_* tag of the first passing condition, or None
        """
        month_start = self._calendar.start_of_month(month_start)

        if self._config.is_quit and not (
            self._calendar.end_of_month(month_start) < self._today
        ):
            return None

        checks: tuple[tuple[str, Callable[[date], bool]], ...] = (
            (const.QUALIFY_REASON_GOAL_MET, self._month_meets_goal),
            (const.QUALIFY_REASON_ALL_DAYS, self._month_all_days_satisfied),
            (const.QUALIFY_REASON_ALL_WEEKS, self._month_all_weeks_meet_goal),
        )
        return self._first_passing(checks, month_start)

    def month_qualifies(self, month_start: date) -> bool:
        """Return True if the month containing `month_start` gets a goal marker."""
        return self.month_qualification(month_start) is not None

    def _month_meets_goal(self, month_start: date) -> bool:
        if self._config.streak_goal_period != const.STREAK_PERIOD_MONTH:
            return False
        totals = GoalEngine.period_totals(
            month_start,
            self._calendar.days_in_month(month_start),
            self._history,
            self._config.daily_target,
            self._config.habit_start_date,
            self._today,
        )
        return self._meets_goal(totals)

    def _month_all_days_satisfied(self, month_start: date) -> bool:
        """Only daily goals can light a month through its days."""
        if self._config.streak_goal_period != const.STREAK_PERIOD_DAY:
            return False
        return self._all_days_satisfied(
            month_start, self._calendar.days_in_month(month_start)
        )

    def _month_all_weeks_meet_goal(self, month_start: date) -> bool:
        """Every week segment overlapping the month must meet the goal.

        Segments are clipped to the month. A segment with no day on/after the
        habit start is skipped; a month with no active segment fails.
        """
        if self._config.streak_goal_period != const.STREAK_PERIOD_WEEK:
            return False

        month_end = self._calendar.end_of_month(month_start)
        week_start = self._calendar.start_of_week(month_start)
        has_active_week = False

        while week_start <= month_end:
            week_end = week_start + timedelta(days=const.DAYS_IN_WEEK - 1)
            segment_start = max(week_start, month_start)
            segment_end = min(week_end, month_end)
            length = (segment_end - segment_start).days + 1

            totals = GoalEngine.period_totals_including_future(
                segment_start,
                length,
                self._history,
                self._config.daily_target,
                self._config.habit_start_date,
            )
            if totals.eligible_day_count > 0:
                has_active_week = True
                if not self._meets_goal(totals):
                    return False

            week_start += timedelta(days=const.DAYS_IN_WEEK)

        return has_active_week

    # ────────────────────────────────────────────────────────────────
    # Shared helpers
    # ────────────────────────────────────────────────────────────────

    @staticmethod
    def _first_passing(
        checks: tuple[tuple[str, Callable[[date], bool]], ...], period_start: date
    ) -> str | None:
        for reason, check in checks:
            if check(period_start):
                const.LOGGER.debug(
                    "GoalIndicatorEngine: period %s qualifies (%s)",
                    period_start,
                    reason,
                )
                return reason
        return None

    def _all_days_satisfied(self, start: date, length_in_days: int) -> bool:
        """Every day on/after the habit start meets its per-day target.

        Future days are included: a day that has not happened yet has a count
        of 0, which fails a build target. A range entirely before the habit
        start never qualifies.
        """
        has_active_day = False

        for offset in range(length_in_days):
            day = start + timedelta(days=offset)
            if day < self._config.habit_start_date:
                continue
            has_active_day = True
            if not GoalEngine.day_meets_target(
                self._history.get(day, 0),
                self._config.daily_target,
                self._config.habit_type,
            ):
                return False

        return has_active_day

    def _meets_goal(self, totals: PeriodTotals) -> bool:
        return GoalEngine.meets_goal(
            totals,
            self._config.streak_goal_value,
            self._config.streak_goal_basis,
            self._config.habit_type,
        )
