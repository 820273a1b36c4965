"""Streak Engine - Consecutive satisfied days, weeks or months.

Daily streaks walk backward from today one day at a time. Weekly and monthly
streaks count only closed periods: the walk starts at the period before the
current one, so a week or month still in progress never breaks (or extends)
the count here. The subtitle engine decides separately whether the current
period already adds to what is shown.

ARCHITECTURE: Pure logic engine. The instance holds only immutable inputs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import dt_add_months
from .goal_engine import GoalEngine, PeriodTotals

if TYPE_CHECKING:
    from ..data_builders import HabitConfig
    from ..type_defs import CompletionHistory
    from ..utils.dt_utils import HabitCalendar


@dataclass(frozen=True, slots=True)
class Streak:
    """A run of consecutive satisfied periods.

    Attributes:
        count: Number of consecutive periods (always > 0)
        period: const.STREAK_PERIOD_DAY, _WEEK or _MONTH
    """

    count: int
    period: str


class StreakEngine:
    """Computes the current streak for a habit's goal period.

    Example:
        engine = StreakEngine(config, history, today, calendar)
        streak = engine.current_streak()   # Streak(count=3, period="week") or None
    """

    def __init__(
        self,
        config: HabitConfig,
        history: CompletionHistory,
        today: date,
        calendar: HabitCalendar,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Resolved habit configuration
            history: Day → count mapping
            today: Evaluation day
            calendar: Week start and zone configuration
        """
        self._config = config
        self._history = history
        self._today = today
        self._calendar = calendar

    def current_streak(self) -> Streak | None:
        """Return the current streak for the habit's goal period, or None."""
        calculators: dict[str, Callable[[], int]] = {
            const.STREAK_PERIOD_DAY: self._daily_streak,
            const.STREAK_PERIOD_WEEK: self._weekly_streak,
            const.STREAK_PERIOD_MONTH: self._monthly_streak,
        }
        period = self._config.streak_goal_period
        count = calculators[period]()

        const.LOGGER.debug(
            "StreakEngine: %s streak=%d (today=%s)", period, count, self._today
        )
        if count <= 0:
            return None
        return Streak(count=count, period=period)

    # ────────────────────────────────────────────────────────────────
    # Current period
    # ────────────────────────────────────────────────────────────────

    def current_period_bounds(self) -> tuple[date, int]:
        """Return (start, length_in_days) of the period containing today."""
        period = self._config.streak_goal_period
        if period == const.STREAK_PERIOD_WEEK:
            return self._calendar.start_of_week(self._today), const.DAYS_IN_WEEK
        if period == const.STREAK_PERIOD_MONTH:
            month_start = self._calendar.start_of_month(self._today)
            return month_start, self._calendar.days_in_month(month_start)
        return self._today, 1

    def current_period_totals(self) -> PeriodTotals:
        """Return totals for the current period, up to and including today."""
        start, length = self.current_period_bounds()
        return self._totals(start, length)

    def current_period_meets_goal(self) -> bool:
        """Return True if the period in progress already meets the goal."""
        return self._meets_goal(self.current_period_totals())

    # ────────────────────────────────────────────────────────────────
    # Walks
    # ────────────────────────────────────────────────────────────────

    def _daily_streak(self) -> int:
        streak = 0
        day = self._today

        while day >= self._config.habit_start_date:
            if not GoalEngine.day_meets_target(
                self._history.get(day, 0),
                self._config.daily_target,
                self._config.habit_type,
            ):
                break
            streak += 1
            day -= timedelta(days=1)

        return streak

    def _weekly_streak(self) -> int:
        streak = 0
        week_start = self._calendar.start_of_week(self._today) - timedelta(
            days=const.DAYS_IN_WEEK
        )

        while week_start >= self._config.habit_start_date:
            if not self._meets_goal(self._totals(week_start, const.DAYS_IN_WEEK)):
                break
            streak += 1
            week_start -= timedelta(days=const.DAYS_IN_WEEK)

        return streak

    def _monthly_streak(self) -> int:
        streak = 0
        month_start = dt_add_months(self._calendar.start_of_month(self._today), -1)

        while month_start >= self._config.habit_start_date:
            totals = self._totals(
                month_start, self._calendar.days_in_month(month_start)
            )
            if not self._meets_goal(totals):
                break
            streak += 1
            month_start = dt_add_months(month_start, -1)

        return streak

    # ────────────────────────────────────────────────────────────────
    # Shared helpers
    # ────────────────────────────────────────────────────────────────

    def _totals(self, start: date, length_in_days: int) -> PeriodTotals:
        return GoalEngine.period_totals(
            start,
            length_in_days,
            self._history,
            self._config.daily_target,
            self._config.habit_start_date,
            self._today,
        )

    def _meets_goal(self, totals: PeriodTotals) -> bool:
        return GoalEngine.meets_goal(
            totals,
            self._config.streak_goal_value,
            self._config.streak_goal_basis,
            self._config.habit_type,
        )
