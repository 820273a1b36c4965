"""Functional entry points for hosts of the habitgrid engine.

Every function takes fully built, immutable inputs (HabitConfig,
CompletionHistory, an explicit `today` and HabitCalendar) and returns a value.
Nothing here reads the clock or keeps state between calls.

Usage:
    calendar = HabitCalendar(time_zone=ZoneInfo("Europe/Berlin"))
    history = build_completion_history(rows, calendar)
    config = build_habit_config(habit_row, calendar, history)
    today = calendar.today()

    compose_subtitle(config, history, today, calendar).secondary_text
    build_grid_snapshot(config, history, today, calendar)
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from . import const
from .engines.day_cell_engine import DayCellEngine, DayCellState
from .engines.grid_engine import GridEngine
from .engines.indicator_engine import GoalIndicatorEngine
from .engines.streak_engine import Streak, StreakEngine
from .engines.subtitle_engine import HabitSubtitle, SubtitleEngine

if TYPE_CHECKING:
    from .data_builders import HabitConfig
    from .type_defs import CompletionHistory, GridMonth, GridSnapshot, GridWeek
    from .utils.dt_utils import HabitCalendar


def evaluate_week(
    config: HabitConfig,
    history: CompletionHistory,
    grid_start_date: date,
    week_index: int,
    today: date,
    calendar: HabitCalendar,
) -> bool:
    """Return True if grid week `week_index` gets a goal marker."""
    engine = GoalIndicatorEngine(config, history, grid_start_date, today, calendar)
    return engine.week_qualifies(week_index)


def evaluate_month(
    config: HabitConfig,
    history: CompletionHistory,
    grid_start_date: date,
    month_start: date,
    today: date,
    calendar: HabitCalendar,
) -> bool:
    """Return True if the month starting at `month_start` gets a goal marker."""
    engine = GoalIndicatorEngine(config, history, grid_start_date, today, calendar)
    return engine.month_qualifies(month_start)


def current_streak(
    config: HabitConfig,
    history: CompletionHistory,
    today: date,
    calendar: HabitCalendar,
) -> Streak | None:
    """Return the raw current streak (closed periods only for week/month goals)."""
    return StreakEngine(config, history, today, calendar).current_streak()


def compose_subtitle(
    config: HabitConfig,
    history: CompletionHistory,
    today: date,
    calendar: HabitCalendar,
) -> HabitSubtitle:
    """Return the goal text and secondary text for a habit."""
    return SubtitleEngine(config, history, today, calendar).calculate()


def day_cell_state(
    day: date, count: int, config: HabitConfig, today: date
) -> DayCellState:
    """Return the visual state of one day for a habit."""
    return DayCellEngine.classify(
        day,
        count,
        config.daily_target,
        config.habit_type,
        config.habit_start_date,
        today,
    )


def build_grid_snapshot(
    config: HabitConfig,
    history: CompletionHistory,
    today: date,
    calendar: HabitCalendar,
    number_of_weeks: int = const.GRID_NUMBER_OF_WEEKS,
) -> GridSnapshot:
    """Evaluate a whole contribution grid against one `today` and history.

    Args:
        config: Resolved habit configuration
        history: Day → count mapping
        today: Evaluation day (last column contains it)
        calendar: Week start and zone configuration
        number_of_weeks: Number of grid columns

    Returns:
        GridSnapshot with every week column (cell states and indicator) and
        every labelled month (indicator and label column)
    """
    grid_start = GridEngine.grid_start_date(today, calendar, number_of_weeks)
    indicators = GoalIndicatorEngine(config, history, grid_start, today, calendar)

    weeks: list[GridWeek] = []
    for week_index in range(number_of_weeks):
        reason = indicators.week_qualification(week_index)
        weeks.append(
            {
                const.GRID_KEY_WEEK_INDEX: week_index,
                const.GRID_KEY_WEEK_START: GridEngine.week_start(
                    grid_start, week_index
                ),
                const.GRID_KEY_QUALIFIES: reason is not None,
                const.GRID_KEY_REASON: reason,
                const.GRID_KEY_DAYS: [
                    day_cell_state(day, history.get(day, 0), config, today)
                    for day in GridEngine.week_dates(grid_start, week_index)
                ],
            }
        )

    months: list[GridMonth] = []
    for month_start in GridEngine.grid_month_starts(grid_start, number_of_weeks):
        reason = indicators.month_qualification(month_start)
        months.append(
            {
                const.GRID_KEY_MONTH_START: month_start,
                const.GRID_KEY_LABEL_WEEK_INDEX: GridEngine.month_label_week_index(
                    grid_start, month_start, number_of_weeks
                ),
                const.GRID_KEY_QUALIFIES: reason is not None,
                const.GRID_KEY_REASON: reason,
            }
        )

    const.LOGGER.debug(
        "Grid snapshot for %s: %d/%d weeks and %d/%d months qualify",
        today,
        sum(1 for week in weeks if week[const.GRID_KEY_QUALIFIES]),
        len(weeks),
        sum(1 for month in months if month[const.GRID_KEY_QUALIFIES]),
        len(months),
    )

    return {
        const.GRID_KEY_START_DATE: grid_start,
        const.GRID_KEY_END_DATE: GridEngine.grid_end_date(grid_start, number_of_weeks),
        const.GRID_KEY_WEEKS: weeks,
        const.GRID_KEY_MONTHS: months,
    }
