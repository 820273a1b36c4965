"""Unit tests for SubtitleEngine - goal text and secondary text.

All dates use a Sunday-start UTC calendar. January 15, 2026 is a Thursday in
the week of Sunday January 11.

Test Categories:
- Goal text for every period and basis, build and quit
- "left today" for build habits
- Violations for quit habits
- Streak display (day/week/month, current period bonus)
- "left this week/month"
"""

from __future__ import annotations

from datetime import date

from habitgrid import const
from habitgrid.data_builders import HabitConfig
from habitgrid.engines.subtitle_engine import HabitSubtitle, SubtitleEngine
from habitgrid.type_defs import CompletionHistory
from tests.helpers import (
    TEST_CALENDAR,
    days_back,
    days_from,
    make_config,
    make_history,
    merge_histories,
)

JAN_15 = date(2026, 1, 15)
CURRENT_WEEK_START = date(2026, 1, 11)

# =============================================================================
# Helper Functions
# =============================================================================


def make_engine(
    config: HabitConfig,
    history: CompletionHistory | None = None,
    today: date = JAN_15,
) -> SubtitleEngine:
    """Create a SubtitleEngine with the test calendar."""
    return SubtitleEngine(config, history or make_history(), today, TEST_CALENDAR)


def calculate(
    config: HabitConfig,
    history: CompletionHistory | None = None,
    today: date = JAN_15,
) -> HabitSubtitle:
    """Compose the full subtitle."""
    return make_engine(config, history, today).calculate()


def weekly_config(habit_start_date: date) -> HabitConfig:
    """Three days a week, build."""
    return make_config(
        streak_goal_period=const.STREAK_PERIOD_WEEK,
        streak_goal_value=3,
        streak_goal_type=const.GOAL_BASIS_DAY,
        habit_start_date=habit_start_date,
    )


def monthly_config(habit_start_date: date) -> HabitConfig:
    """Ten days a month, build."""
    return make_config(
        streak_goal_period=const.STREAK_PERIOD_MONTH,
        streak_goal_value=10,
        streak_goal_type=const.GOAL_BASIS_DAY,
        habit_start_date=habit_start_date,
    )


# =============================================================================
# Test: Goal text
# =============================================================================


class TestGoalText:
    """Tests for SubtitleEngine.goal_text()."""

    def test_build_daily(self) -> None:
        """Daily build goal."""
        config = make_config(completions_per_day=8)

        assert make_engine(config).goal_text() == "8 a day"
        assert calculate(config).goal_text == "8 a day"

    def test_build_weekly_day_basis(self) -> None:
        """Weekly goal counted in days."""
        config = make_config(
            streak_goal_period=const.STREAK_PERIOD_WEEK,
            streak_goal_value=5,
            streak_goal_type=const.GOAL_BASIS_DAY,
        )
        assert make_engine(config).goal_text() == "5 days a week"

    def test_build_weekly_value_basis(self) -> None:
        """Weekly goal counted in total value."""
        config = make_config(
            completions_per_day=60,
            streak_goal_period=const.STREAK_PERIOD_WEEK,
            streak_goal_value=150,
        )
        assert make_engine(config).goal_text() == "150 a week"

    def test_build_monthly_day_basis(self) -> None:
        """Monthly goal counted in days."""
        config = make_config(
            streak_goal_period=const.STREAK_PERIOD_MONTH,
            streak_goal_value=20,
            streak_goal_type=const.GOAL_BASIS_DAY,
        )
        assert make_engine(config).goal_text() == "20 days a month"

    def test_build_monthly_value_basis(self) -> None:
        """Monthly goal counted in total value."""
        config = make_config(
            completions_per_day=30,
            streak_goal_period=const.STREAK_PERIOD_MONTH,
            streak_goal_value=500,
        )
        assert make_engine(config).goal_text() == "500 a month"

    def test_quit_daily(self) -> None:
        """Quit habits are prefixed with "Max"."""
        config = make_config(completions_per_day=3, habit_type=const.HABIT_TYPE_QUIT)
        assert make_engine(config).goal_text() == "Max 3 a day"

    def test_quit_weekly_value_basis(self) -> None:
        """Quit weekly limit."""
        config = make_config(
            completions_per_day=3,
            habit_type=const.HABIT_TYPE_QUIT,
            streak_goal_period=const.STREAK_PERIOD_WEEK,
            streak_goal_value=10,
        )
        assert make_engine(config).goal_text() == "Max 10 a week"


# =============================================================================
# Test: Left today
# =============================================================================


class TestLeftToday:
    """Build habits that are not done yet today."""

    def test_non_binary_build_incomplete(self) -> None:
        """Shows how many completions are still missing today."""
        config = make_config(completions_per_day=8)
        subtitle = calculate(config, make_history([JAN_15], count=3))

        assert subtitle.secondary_text == "5 left today"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_NORMAL

    def test_binary_build_incomplete(self) -> None:
        """Binary habits show only the goal text until done."""
        subtitle = calculate(make_config(completions_per_day=1))

        assert subtitle.goal_text == "1 a day"
        assert subtitle.secondary_text is None
        assert subtitle.has_secondary is False

    def test_build_complete(self) -> None:
        """Nothing is left once today's target is reached."""
        config = make_config(completions_per_day=8)
        subtitle = calculate(config, make_history([JAN_15], count=8))

        assert subtitle.secondary_text is None or (
            "left today" not in subtitle.secondary_text
        )

    def test_incomplete_today_hides_streak(self) -> None:
        """An unfinished day takes priority over an existing streak."""
        config = make_config(completions_per_day=2, is_binary=False)
        history = merge_histories(
            make_history(days_back(date(2026, 1, 14), 5), count=2),
            make_history([JAN_15], count=1),
        )

        assert calculate(config, history).secondary_text == "1 left today"

    def test_directly_built_config_shows_left_today(self) -> None:
        """A HabitConfig built without the builder still counts down."""
        config = HabitConfig(habit_start_date=date(2026, 1, 1), daily_target=8)
        subtitle = calculate(config, make_history([JAN_15], count=3))

        assert subtitle.goal_text == "8 a day"
        assert subtitle.secondary_text == "5 left today"


# =============================================================================
# Test: Violations
# =============================================================================


class TestViolations:
    """Quit habits over today's limit."""

    def test_quit_binary_over_limit(self) -> None:
        """Binary quit habits just fail the day."""
        config = make_config(completions_per_day=1, habit_type=const.HABIT_TYPE_QUIT)
        subtitle = calculate(config, make_history([JAN_15], count=2))

        assert subtitle.secondary_text == "Failed today"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_VIOLATION

    def test_quit_non_binary_over_limit(self) -> None:
        """Non-binary quit habits show how far over the limit they are."""
        config = make_config(completions_per_day=3, habit_type=const.HABIT_TYPE_QUIT)
        subtitle = calculate(config, make_history([JAN_15], count=5))

        assert subtitle.secondary_text == "2 over limit"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_VIOLATION

    def test_quit_under_limit(self) -> None:
        """Staying within the limit is never a violation."""
        config = make_config(completions_per_day=3, habit_type=const.HABIT_TYPE_QUIT)
        subtitle = calculate(config, make_history([JAN_15], count=2))

        assert subtitle.secondary_style != const.SUBTITLE_STYLE_VIOLATION
        assert subtitle.secondary_text is not None
        assert "over limit" not in subtitle.secondary_text
        assert "Failed" not in subtitle.secondary_text

    def test_quit_at_limit_counts_toward_day_streak(self) -> None:
        """A day at the limit keeps the streak going (Jan 1-15)."""
        config = make_config(completions_per_day=3, habit_type=const.HABIT_TYPE_QUIT)
        subtitle = calculate(config, make_history([JAN_15], count=3))

        assert subtitle.secondary_text == "15 day streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK


# =============================================================================
# Test: Streaks
# =============================================================================


class TestStreakDisplay:
    """Streak text and the current-period bonus."""

    def test_daily_consecutive(self) -> None:
        """Six days in a row including today."""
        today = date(2026, 1, 10)
        subtitle = calculate(make_config(), make_history(days_back(today, 6)), today)

        assert subtitle.secondary_text == "6 day streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK

    def test_daily_one_day_not_shown(self) -> None:
        """A one-day streak is hidden."""
        today = date(2026, 1, 10)
        subtitle = calculate(make_config(), make_history([today]), today)

        assert subtitle.secondary_text is None

    def test_daily_goal_shows_day_streak_not_week_streak(self) -> None:
        """A full week on a daily goal is still a day streak."""
        today = date(2026, 1, 17)
        history = make_history(days_from(CURRENT_WEEK_START, 7))
        subtitle = calculate(make_config(), history, today)

        assert subtitle.secondary_text == "7 day streak"
        assert "week" not in subtitle.secondary_text

    def test_weekly_consecutive(self) -> None:
        """Three previous weeks each met the goal."""
        history = merge_histories(
            make_history(days_from(date(2026, 1, 4), 3)),
            make_history(days_from(date(2025, 12, 28), 3)),
            make_history(days_from(date(2025, 12, 21), 3)),
            make_history([JAN_15]),
        )
        subtitle = calculate(weekly_config(date(2025, 12, 1)), history)

        assert subtitle.secondary_text == "3 week streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK

    def test_weekly_one_week_shown(self) -> None:
        """Week streaks of one are shown, unlike day streaks."""
        history = merge_histories(
            make_history(days_from(date(2026, 1, 4), 3)),
            make_history([JAN_15]),
        )
        subtitle = calculate(weekly_config(date(2025, 12, 1)), history)

        assert subtitle.secondary_text == "1 week streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK

    def test_weekly_current_week_meets_goal(self) -> None:
        """The current week counts once it meets the goal."""
        history = merge_histories(
            make_history(days_from(CURRENT_WEEK_START, 2)),
            make_history([JAN_15]),
        )
        subtitle = calculate(weekly_config(date(2026, 1, 1)), history)

        assert subtitle.secondary_text == "1 week streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK

    def test_weekly_current_week_plus_previous_weeks(self) -> None:
        """Closed weeks plus the current week."""
        history = merge_histories(
            make_history(days_from(CURRENT_WEEK_START, 2)),
            make_history([JAN_15]),
            make_history(days_from(date(2026, 1, 4), 3)),
            make_history(days_from(date(2025, 12, 28), 3)),
        )
        subtitle = calculate(weekly_config(date(2025, 12, 1)), history)

        assert subtitle.secondary_text == "3 week streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK

    def test_monthly_consecutive(self) -> None:
        """November and December met the goal; January has not yet."""
        history = merge_histories(
            make_history(days_from(date(2025, 11, 1), 10)),
            make_history(days_from(date(2025, 12, 1), 10)),
            make_history([JAN_15]),
        )
        subtitle = calculate(monthly_config(date(2025, 10, 1)), history)

        assert subtitle.secondary_text == "2 month streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK

    def test_monthly_current_month_meets_goal(self) -> None:
        """The current month counts once it meets the goal."""
        history = merge_histories(
            make_history(days_from(date(2026, 1, 1), 9)),
            make_history([JAN_15]),
        )
        subtitle = calculate(monthly_config(date(2026, 1, 1)), history)

        assert subtitle.secondary_text == "1 month streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK

    def test_monthly_current_month_plus_previous_months(self) -> None:
        """Closed months plus the current month."""
        history = merge_histories(
            make_history(days_from(date(2026, 1, 1), 9)),
            make_history([JAN_15]),
            make_history(days_from(date(2025, 12, 1), 10)),
            make_history(days_from(date(2025, 11, 1), 10)),
        )
        subtitle = calculate(monthly_config(date(2025, 10, 1)), history)

        assert subtitle.secondary_text == "3 month streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK

    def test_broken_chain_counts_from_today(self) -> None:
        """Only the unbroken run ending today counts."""
        today = date(2026, 1, 10)
        history = make_history(
            [today, date(2026, 1, 9), date(2026, 1, 8), date(2026, 1, 6)]
        )
        subtitle = calculate(make_config(), history, today)

        assert subtitle.secondary_text == "3 day streak"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_STREAK

    def test_quit_week_in_progress_adds_nothing(self) -> None:
        """Quit habits only show closed weeks."""
        config = make_config(
            habit_type=const.HABIT_TYPE_QUIT,
            streak_goal_period=const.STREAK_PERIOD_WEEK,
            streak_goal_value=2,
            habit_start_date=date(2025, 12, 28),
        )
        subtitle = calculate(config)

        assert subtitle.secondary_text == "2 week streak"


# =============================================================================
# Test: Left this period
# =============================================================================


class TestLeftThisPeriod:
    """What remains of a week/month goal once today is done."""

    def test_weekly_no_streak(self) -> None:
        """150 a week with 60 done today."""
        config = make_config(
            completions_per_day=60,
            streak_goal_period=const.STREAK_PERIOD_WEEK,
            streak_goal_value=150,
        )
        subtitle = calculate(config, make_history([JAN_15], count=60))

        assert subtitle.secondary_text == "90 left this week"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_NORMAL

    def test_monthly_no_streak(self) -> None:
        """500 a month with 250 done over five days."""
        config = make_config(
            completions_per_day=30,
            streak_goal_period=const.STREAK_PERIOD_MONTH,
            streak_goal_value=500,
        )
        subtitle = calculate(config, make_history(days_back(JAN_15, 5), count=50))

        assert subtitle.secondary_text == "250 left this month"
        assert subtitle.secondary_style == const.SUBTITLE_STYLE_NORMAL

    def test_daily_no_larger_goal(self) -> None:
        """Daily goals have no period remainder."""
        config = make_config(completions_per_day=8)
        engine = make_engine(config, make_history([JAN_15], count=8))

        assert engine.calculate().secondary_text is None
        assert engine.left_this_period() is None


# =============================================================================
# Test: Full subtitle
# =============================================================================


class TestFullSubtitle:
    """Goal text and secondary text together."""

    def test_build_with_streak(self) -> None:
        """Build habit with a five-day streak."""
        today = date(2026, 1, 10)
        subtitle = calculate(make_config(), make_history(days_back(today, 5)), today)

        assert subtitle == HabitSubtitle(
            goal_text="1 a day",
            secondary_text="5 day streak",
            secondary_style=const.SUBTITLE_STYLE_STREAK,
        )

    def test_quit_violation(self) -> None:
        """Quit habit over its limit."""
        config = make_config(completions_per_day=3, habit_type=const.HABIT_TYPE_QUIT)
        subtitle = calculate(config, make_history([JAN_15], count=5))

        assert subtitle == HabitSubtitle(
            goal_text="Max 3 a day",
            secondary_text="2 over limit",
            secondary_style=const.SUBTITLE_STYLE_VIOLATION,
        )
