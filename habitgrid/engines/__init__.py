"""Engine modules for habitgrid.

Contains specialized computation engines:
- goal_engine: Period totals and the goal satisfaction rule
- indicator_engine: Week/month goal indicators for the grid
- streak_engine: Current day/week/month streak
- subtitle_engine: Goal text and secondary text composition
- day_cell_engine: Per-day visual state
- grid_engine: Grid and month page date layout
"""

# Use relative imports within package to avoid mypy module resolution issues
from .day_cell_engine import DayCellEngine, DayCellState
from .goal_engine import GoalEngine, PeriodTotals
from .grid_engine import GridEngine
from .indicator_engine import GoalIndicatorEngine
from .streak_engine import Streak, StreakEngine
from .subtitle_engine import HabitSubtitle, SubtitleEngine

__all__ = [
    "DayCellEngine",
    "DayCellState",
    "GoalEngine",
    "GoalIndicatorEngine",
    "GridEngine",
    "HabitSubtitle",
    "PeriodTotals",
    "Streak",
    "StreakEngine",
    "SubtitleEngine",
]
