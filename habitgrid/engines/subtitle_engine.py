"""Subtitle Engine - The one-line summary under a habit's name.

A subtitle has two parts: the goal text ("8 a day", "Max 3 a day",
"5 days a week") and an optional secondary text picked by priority from
today's count and the streak:

1. Quit habit over today's limit     → "Failed today" / "2 over limit"  (violation)
2. Non-binary build habit unfinished → "5 left today"                  (normal)
3. Binary build habit unfinished     → nothing
4. Current streak                    → "6 day streak" / "1 week streak" (streak)
5. Build habit with a week/month goal, today done → "90 left this week" (normal)

ARCHITECTURE: Pure formatting over GoalEngine and StreakEngine results.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from .. import const
from .goal_engine import GoalEngine
from .streak_engine import Streak, StreakEngine

if TYPE_CHECKING:
    from ..data_builders import HabitConfig
    from ..type_defs import CompletionHistory
    from ..utils.dt_utils import HabitCalendar


@dataclass(frozen=True, slots=True)
class HabitSubtitle:
    """Composed subtitle for one habit.

    Attributes:
        goal_text: Always present ("8 a day")
        secondary_text: Optional second part ("5 left today")
        secondary_style: const.SUBTITLE_STYLE_* for the second part
    """

    goal_text: str
    secondary_text: str | None = None
    secondary_style: str = const.SUBTITLE_STYLE_NORMAL

    @property
    def has_secondary(self) -> bool:
        """Return True when a secondary text is shown."""
        return self.secondary_text is not None


class SubtitleEngine:
    """Composes the goal text and secondary text for a habit.

    Example:
        subtitle = SubtitleEngine(config, history, today, calendar).calculate()
        subtitle.goal_text        # "1 a day"
        subtitle.secondary_text   # "5 day streak"
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
        self._streaks = StreakEngine(config, history, today, calendar)

    def calculate(self) -> HabitSubtitle:
        """Return the full subtitle."""
        goal = self.goal_text()
        secondary = self.secondary()
        if secondary is None:
            return HabitSubtitle(goal_text=goal)
        text, style = secondary
        return HabitSubtitle(goal_text=goal, secondary_text=text, secondary_style=style)

    # ────────────────────────────────────────────────────────────────
    # Goal text
    # ────────────────────────────────────────────────────────────────

    def goal_text(self) -> str:
        """Return the goal text, prefixed with "Max " for quit habits."""
        config = self._config
        prefix = const.SUBTITLE_PREFIX_QUIT if config.is_quit else ""

        if not config.has_larger_goal:
            return const.SUBTITLE_FORMAT_GOAL_DAILY.format(
                prefix=prefix, value=config.daily_target
            )

        if config.streak_goal_basis == const.GOAL_BASIS_DAY:
            text_format = const.SUBTITLE_FORMAT_GOAL_DAY_BASIS
        else:
            text_format = const.SUBTITLE_FORMAT_GOAL_VALUE_BASIS
        return text_format.format(
            prefix=prefix,
            value=config.streak_goal_value,
            period=config.streak_goal_period,
        )

    # ────────────────────────────────────────────────────────────────
    # Secondary text
    # ────────────────────────────────────────────────────────────────

    def secondary(self) -> tuple[str, str] | None:
        """Return (text, style) for the secondary part, or None."""
        config = self._config
        today_count = self._history.get(self._today, 0)
        today_complete = GoalEngine.is_day_complete(
            today_count, config.daily_target, config.habit_type
        )

        # Priority 1: quit habit over today's limit
        if config.is_quit and today_count > config.daily_target:
            if config.is_binary:
                return const.SUBTITLE_FAILED_TODAY, const.SUBTITLE_STYLE_VIOLATION
            over = today_count - config.daily_target
            return (
                const.SUBTITLE_FORMAT_OVER_LIMIT.format(over=over),
                const.SUBTITLE_STYLE_VIOLATION,
            )

        # Priority 2 and 3: build habit not done yet today
        if not config.is_quit and not today_complete:
            if config.is_binary:
                return None
            left = config.daily_target - today_count
            return (
                const.SUBTITLE_FORMAT_LEFT_TODAY.format(left=left),
                const.SUBTITLE_STYLE_NORMAL,
            )

        # Priority 4: streak
        streak = self.displayed_streak()
        if streak is not None:
            return (
                const.SUBTITLE_FORMAT_STREAK.format(
                    count=streak.count, period=streak.period
                ),
                const.SUBTITLE_STYLE_STREAK,
            )

        # Priority 5: what is left of a week/month goal (today is done here)
        if not config.is_quit and config.has_larger_goal:
            left = self.left_this_period()
            if left:
                return (
                    const.SUBTITLE_FORMAT_LEFT_THIS_PERIOD.format(
                        left=left, period=config.streak_goal_period
                    ),
                    const.SUBTITLE_STYLE_NORMAL,
                )

        return None

    def displayed_streak(self) -> Streak | None:
        """Return the streak as shown to the user, or None.

        Day streaks shorter than two days are hidden. For build habits with a
        week/month goal, the current period counts once it meets the goal.
        """
        config = self._config
        streak = self._streaks.current_streak()

        if config.streak_goal_period == const.STREAK_PERIOD_DAY:
            if streak is None or streak.count < const.SUBTITLE_MIN_DISPLAYED_DAY_STREAK:
                return None
            return streak

        if not config.is_quit and self._streaks.current_period_meets_goal():
            closed = streak.count if streak is not None else 0
            return Streak(count=closed + 1, period=config.streak_goal_period)

        return streak

    def left_this_period(self) -> int | None:
        """Return units left to reach the week/month goal, or None for daily goals."""
        config = self._config
        if not config.has_larger_goal:
            return None
        return GoalEngine.remaining_toward_goal(
            self._streaks.current_period_totals(),
            config.streak_goal_value,
            config.streak_goal_basis,
        )
