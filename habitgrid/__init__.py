"""habitgrid - goal and streak evaluation for a habit tracker.

Given a habit's configuration and a sparse day → count history, computes
which grid weeks/months meet their goal, the current streak, the subtitle
text and the visual state of every day. Pure computation: no I/O, no clock
reads, no mutable state.
"""

from .data_builders import (
    EntityValidationError,
    HabitConfig,
    build_completion_history,
    build_habit_config,
    make_habit_config,
)
from .engines import DayCellState, HabitSubtitle, PeriodTotals, Streak
from .evaluation import (
    build_grid_snapshot,
    compose_subtitle,
    current_streak,
    day_cell_state,
    evaluate_month,
    evaluate_week,
)
from .utils.dt_utils import HabitCalendar

__all__ = [
    "DayCellState",
    "EntityValidationError",
    "HabitCalendar",
    "HabitConfig",
    "HabitSubtitle",
    "PeriodTotals",
    "Streak",
    "build_completion_history",
    "build_grid_snapshot",
    "build_habit_config",
    "compose_subtitle",
    "current_streak",
    "day_cell_state",
    "evaluate_month",
    "evaluate_week",
    "make_habit_config",
]
