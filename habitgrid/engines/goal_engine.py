"""Goal Engine - Period totals and the goal satisfaction rule.

This engine provides the shared building blocks every other engine uses:
- Period totals over an inclusive day range (with or without the today cut-off)
- Per-day target checks with build/quit inversion
- The "does this period meet the streak goal" rule

ARCHITECTURE: This is a pure logic engine. All functions are static methods
that operate on passed-in data; nothing here reads the clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

from .. import const

if TYPE_CHECKING:
    from ..type_defs import CompletionHistory


# =============================================================================
# PERIOD TOTALS DATA STRUCTURE
# =============================================================================


@dataclass(frozen=True, slots=True)
class PeriodTotals:
    """Aggregated activity for one contiguous day range.

    Attributes:
        active_day_count: Days with a count above zero
        days_meeting_daily_target: Days with count >= daily target
        total_value: Sum of all counts in the range
        eligible_day_count: Days that were looked at (inside the habit's
            lifetime, and not in the future unless future days are included)
    """

    active_day_count: int = 0
    days_meeting_daily_target: int = 0
    total_value: int = 0
    eligible_day_count: int = 0


# =============================================================================
# GOAL ENGINE
# =============================================================================


class GoalEngine:
    """Pure logic engine for period aggregation and goal checks.

    All methods are static - no instance state.
    """

    @staticmethod
    def _totals(
        start: date,
        length_in_days: int,
        history: CompletionHistory,
        daily_target: int,
        habit_start_date: date,
        today: date | None,
    ) -> PeriodTotals:
        """Aggregate a day range, skipping days outside [habit start, today]."""
        active_days = 0
        met_days = 0
        total = 0
        eligible = 0

        for offset in range(length_in_days):
            day = start + timedelta(days=offset)
            if day < habit_start_date:
                continue
            if today is not None and day > today:
                continue
            eligible += 1
            count = history.get(day, 0)
            if count > 0:
                active_days += 1
            if count >= daily_target:
                met_days += 1
            total += count

        return PeriodTotals(
            active_day_count=active_days,
            days_meeting_daily_target=met_days,
            total_value=total,
            eligible_day_count=eligible,
        )

    @staticmethod
    def period_totals(
        start: date,
        length_in_days: int,
        history: CompletionHistory,
        daily_target: int,
        habit_start_date: date,
        today: date,
    ) -> PeriodTotals:
        """Aggregate completions for `length_in_days` days from `start`.

        Days before the habit start and days after `today` are skipped: they
        never count toward "met".

        Args:
            start: First day of the range
            length_in_days: Number of days in the range
            history: Day → count mapping (absent day means 0)
            daily_target: Per-day target used for days_meeting_daily_target
            habit_start_date: First day of the habit's lifetime
            today: Last day that may count

        Returns:
            PeriodTotals for the range
        """
        return GoalEngine._totals(
            start, length_in_days, history, daily_target, habit_start_date, today
        )

    @staticmethod
    def period_totals_including_future(
        start: date,
        length_in_days: int,
        history: CompletionHistory,
        daily_target: int,
        habit_start_date: date,
    ) -> PeriodTotals:
        """Aggregate completions like period_totals, without the today cut-off.

        eligible_day_count is then the number of days on/after the habit start
        regardless of completion, which tells whether the range is "active".
        """
        return GoalEngine._totals(
            start, length_in_days, history, daily_target, habit_start_date, None
        )

    @staticmethod
    def day_meets_target(count: int, daily_target: int, habit_type: str) -> bool:
        """Check one day against the per-day target.

        Build: count >= target. Quit: count <= target (at the limit is fine).
        """
        if habit_type == const.HABIT_TYPE_QUIT:
            return count <= daily_target
        return count >= daily_target

    @staticmethod
    def is_day_complete(count: int, daily_target: int, habit_type: str) -> bool:
        """Check whether a day shows as "done".

        Build: count >= target. Quit: no violations at all.
        """
        if habit_type == const.HABIT_TYPE_QUIT:
            return count == 0
        return count >= daily_target

    @staticmethod
    def meets_goal(
        totals: PeriodTotals,
        streak_goal_value: int,
        streak_goal_basis: str,
        habit_type: str,
    ) -> bool:
        """Decide whether a period's totals satisfy the streak goal.

        Build (higher is better):
            day basis   → days meeting the daily target >= goal
            value basis → total value >= goal
        Quit (lower is better):
            day basis   → days with any violation <= limit
            value basis → total violations <= limit

        Args:
            totals: Aggregated period activity
            streak_goal_value: Goal (build) or limit (quit)
            streak_goal_basis: const.GOAL_BASIS_DAY or const.GOAL_BASIS_VALUE
            habit_type: const.HABIT_TYPE_BUILD or const.HABIT_TYPE_QUIT

        Returns:
            True if the period meets the goal
        """
        if habit_type == const.HABIT_TYPE_QUIT:
            if streak_goal_basis == const.GOAL_BASIS_DAY:
                return totals.active_day_count <= streak_goal_value
            return totals.total_value <= streak_goal_value

        if streak_goal_basis == const.GOAL_BASIS_DAY:
            return totals.days_meeting_daily_target >= streak_goal_value
        return totals.total_value >= streak_goal_value

    @staticmethod
    def remaining_toward_goal(
        totals: PeriodTotals,
        streak_goal_value: int,
        streak_goal_basis: str,
    ) -> int:
        """Return how many units a build habit still needs this period (>= 0)."""
        if streak_goal_basis == const.GOAL_BASIS_DAY:
            achieved = totals.days_meeting_daily_target
        else:
            achieved = totals.total_value
        return max(0, streak_goal_value - achieved)
