"""Type definitions for habitgrid data structures.

TypedDict is used for the raw records the host application hands to the
builders (habit and completion rows) and for the grid snapshot returned to it.
Evaluated values (HabitConfig, PeriodTotals, Streak, DayCellState, ...) are
frozen dataclasses defined next to the code that produces them.

IMPORTANT: This file must NOT import from engines or data_builders to avoid
circular dependencies. Only import from typing and the standard library.

NOTE: TypedDict is STATIC ANALYSIS ONLY. Runtime validation of records is done
by the voluptuous schemas in data_builders.py.
"""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

ISODate = str  # ISO 8601 date string (no time) "2026-01-18"
DayInput = date | datetime | ISODate
CompletionHistory = Mapping[date, int]


# =============================================================================
# Raw Records (host application input)
# =============================================================================


class HabitData(TypedDict):
    """Raw habit record as persisted by the host application.

    Only the fields the engine needs are listed; extra keys (name, icon,
    color, ...) are accepted and ignored by the builder.
    """

    habit_start_date: NotRequired[DayInput | None]
    created_at: NotRequired[DayInput | None]  # Legacy start date fallback
    completions_per_day: NotRequired[int]
    habit_type: NotRequired[str | None]
    is_binary: NotRequired[bool | None]
    streak_goal_period: NotRequired[str | None]
    streak_goal_value: NotRequired[int | None]
    streak_goal_type: NotRequired[str | None]


class CompletionRecord(TypedDict):
    """One persisted completion row (one day, one count)."""

    date: DayInput
    count: NotRequired[int]


# =============================================================================
# Grid Snapshot (engine output)
# =============================================================================


class GridWeek(TypedDict):
    """One column of the contribution grid."""

    week_index: int
    week_start: date
    qualifies: bool
    reason: str | None
    days: list[Any]  # list[DayCellState]


class GridMonth(TypedDict):
    """One month label of the contribution grid."""

    month_start: date
    label_week_index: int
    qualifies: bool
    reason: str | None


class GridSnapshot(TypedDict):
    """Everything one grid render pass needs, computed for a single `today`."""

    grid_start_date: date
    grid_end_date: date
    weeks: list[GridWeek]
    months: list[GridMonth]
