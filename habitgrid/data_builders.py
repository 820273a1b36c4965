"""Data builders for habitgrid evaluation inputs.

Turns raw host records (habit rows and completion rows) into the immutable
values every engine consumes:

- HabitConfig: resolved habit configuration, defaults applied once here
- CompletionHistory: read-only calendar day → count mapping

Validation is the SINGLE SOURCE OF TRUTH for input shape: the engines assume
pre-validated values and never re-check them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import voluptuous as vol

from . import const
from .utils.math_utils import clamp_count

if TYPE_CHECKING:
    from .type_defs import CompletionHistory, CompletionRecord, HabitData
    from .utils.dt_utils import HabitCalendar


# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class EntityValidationError(Exception):
    """Validation error with field-specific information.

    Raised when a habit or completion record cannot be turned into engine
    input. The field attribute names the record key that failed so the host
    can point the user at it.

    Attributes:
        field: The DATA_* constant identifying the record key that failed
        message: Human-readable description of the failure

    Example:
        raise EntityValidationError(
            field=const.DATA_HABIT_TYPE,
            message="value must be one of ('build', 'quit')",
        )
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize EntityValidationError.

        Args:
            field: The DATA_* constant for the key that failed validation
            message: Description of the failure
        """
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


# ==============================================================================
# SCHEMAS
# ==============================================================================


def _day_like(value: Any) -> Any:
    """Accept date, datetime or non-empty strings; parsing happens later."""
    if isinstance(value, (date, str)) and value != "":
        return value
    raise vol.Invalid("expected a date, datetime or ISO date string")


def _count(value: Any) -> int:
    """Accept integer counts (bool is rejected even though it is an int)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise vol.Invalid("expected an integer count")
    return value


HABIT_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(const.DATA_HABIT_START_DATE): vol.Any(None, _day_like),
        vol.Optional(const.DATA_HABIT_CREATED_AT): vol.Any(None, _day_like),
        vol.Optional(
            const.DATA_HABIT_COMPLETIONS_PER_DAY,
            default=const.DEFAULT_COMPLETIONS_PER_DAY,
        ): vol.All(_count, vol.Clamp(min=1)),
        vol.Optional(
            const.DATA_HABIT_TYPE, default=const.DEFAULT_HABIT_TYPE
        ): vol.Any(None, vol.In(const.HABIT_TYPE_OPTIONS)),
        vol.Optional(const.DATA_HABIT_IS_BINARY): vol.Any(None, bool),
        vol.Optional(
            const.DATA_HABIT_STREAK_GOAL_PERIOD,
            default=const.DEFAULT_STREAK_GOAL_PERIOD,
        ): vol.Any(None, vol.In(const.STREAK_PERIOD_OPTIONS)),
        vol.Optional(const.DATA_HABIT_STREAK_GOAL_VALUE): vol.Any(
            None, vol.All(_count, vol.Clamp(min=1))
        ),
        vol.Optional(
            const.DATA_HABIT_STREAK_GOAL_TYPE,
            default=const.DEFAULT_STREAK_GOAL_TYPE,
        ): vol.Any(None, vol.In(const.GOAL_BASIS_OPTIONS)),
    },
    extra=vol.REMOVE_EXTRA,
)

COMPLETION_RECORD_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_COMPLETION_DATE): _day_like,
        vol.Optional(const.DATA_COMPLETION_COUNT, default=1): _count,
    },
    extra=vol.REMOVE_EXTRA,
)


def _validate(schema: vol.Schema, data: Mapping[str, Any]) -> dict[str, Any]:
    """Run a schema and translate voluptuous errors to EntityValidationError."""
    try:
        return schema(dict(data))
    except vol.Invalid as err:
        field = str(err.path[0]) if err.path else "record"
        raise EntityValidationError(field=field, message=err.msg) from err


# ==============================================================================
# HABIT CONFIG
# ==============================================================================


@dataclass(frozen=True, slots=True)
class HabitConfig:
    """Resolved, immutable habit configuration.

    Attributes:
        habit_start_date: First day that counts (calendar-day truncated)
        daily_target: Completions (build) or allowed violations (quit) per day
        habit_type: const.HABIT_TYPE_BUILD or const.HABIT_TYPE_QUIT
        streak_goal_period: const.STREAK_PERIOD_* value
        streak_goal_value: Goal (build) or limit (quit) for one period;
            defaults to daily_target
        streak_goal_basis: const.GOAL_BASIS_DAY or const.GOAL_BASIS_VALUE
        is_binary: Completion is a yes/no toggle; defaults to daily_target == 1
    """

    habit_start_date: date
    daily_target: int = const.DEFAULT_COMPLETIONS_PER_DAY
    habit_type: str = const.DEFAULT_HABIT_TYPE
    streak_goal_period: str = const.DEFAULT_STREAK_GOAL_PERIOD
    streak_goal_value: int | None = None
    streak_goal_basis: str = const.DEFAULT_STREAK_GOAL_TYPE
    is_binary: bool | None = None

    def __post_init__(self) -> None:
        """Resolve the defaults that depend on the daily target."""
        if self.streak_goal_value is None:
            object.__setattr__(self, "streak_goal_value", self.daily_target)
        if self.is_binary is None:
            object.__setattr__(self, "is_binary", self.daily_target == 1)

    @property
    def is_quit(self) -> bool:
        """Return True for quit (lower-is-better) habits."""
        return self.habit_type == const.HABIT_TYPE_QUIT

    @property
    def has_larger_goal(self) -> bool:
        """Return True when the streak goal spans a week or a month."""
        return self.streak_goal_period != const.STREAK_PERIOD_DAY


def build_habit_config(
    data: HabitData | Mapping[str, Any],
    calendar: HabitCalendar,
    history: CompletionHistory | None = None,
) -> HabitConfig:
    """Build a HabitConfig from a raw habit record.

    Defaults are resolved here, once:
    - completions_per_day defaults to 1 and is clamped to >= 1
    - streak_goal_value defaults to completions_per_day, clamped to >= 1
    - habit_type/streak_goal_period/streak_goal_type fall back to their defaults
      when missing or None (legacy records)
    - is_binary defaults to completions_per_day == 1
    - habit_start_date falls back to created_at

    When `history` is given, the start date moves back to the earliest day with
    a positive count, so a completion recorded before the habit start is never
    silently ignored.

    Args:
        data: Raw habit record
        calendar: Calendar used to truncate datetimes to days
        history: Optional completion history for start date extension

    Returns:
        Immutable HabitConfig

    Raises:
        EntityValidationError: If the record is malformed or has no start date
    """
    validated = _validate(HABIT_CONFIG_SCHEMA, data)

    raw_start = validated.get(const.DATA_HABIT_START_DATE) or validated.get(
        const.DATA_HABIT_CREATED_AT
    )
    start_date = calendar.parse_day(raw_start)
    if start_date is None:
        raise EntityValidationError(
            field=const.DATA_HABIT_START_DATE,
            message=f"missing or unparsable start date: {raw_start!r}",
        )

    if history:
        active_days = [day for day, count in history.items() if count > 0]
        if active_days and min(active_days) < start_date:
            const.LOGGER.debug(
                "Habit start date %s moved back to earliest completion %s",
                start_date,
                min(active_days),
            )
            start_date = min(active_days)

    daily_target: int = validated[const.DATA_HABIT_COMPLETIONS_PER_DAY]
    goal_value = validated.get(const.DATA_HABIT_STREAK_GOAL_VALUE)
    is_binary = validated.get(const.DATA_HABIT_IS_BINARY)

    return HabitConfig(
        habit_start_date=start_date,
        daily_target=daily_target,
        habit_type=validated[const.DATA_HABIT_TYPE] or const.DEFAULT_HABIT_TYPE,
        streak_goal_period=validated[const.DATA_HABIT_STREAK_GOAL_PERIOD]
        or const.DEFAULT_STREAK_GOAL_PERIOD,
        streak_goal_value=goal_value,
        streak_goal_basis=validated[const.DATA_HABIT_STREAK_GOAL_TYPE]
        or const.DEFAULT_STREAK_GOAL_TYPE,
        is_binary=is_binary,
    )


# ==============================================================================
# COMPLETION HISTORY
# ==============================================================================


def build_completion_history(
    records: Iterable[CompletionRecord | Mapping[str, Any]],
    calendar: HabitCalendar,
) -> CompletionHistory:
    """Flatten completion records into a read-only day → count mapping.

    - Dates are truncated to the calendar's local day
    - Negative counts are clamped to 0
    - Zero counts are dropped (absent day means 0)
    - A repeated day keeps the last record

    Args:
        records: Persisted completion rows
        calendar: Calendar used to truncate datetimes to days

    Returns:
        Read-only mapping of calendar day to count

    Raises:
        EntityValidationError: If a record is malformed
    """
    history: dict[date, int] = {}

    for record in records:
        validated = _validate(COMPLETION_RECORD_SCHEMA, record)
        day = calendar.parse_day(validated[const.DATA_COMPLETION_DATE])
        if day is None:
            raise EntityValidationError(
                field=const.DATA_COMPLETION_DATE,
                message=(
                    "unparsable completion date: "
                    f"{validated[const.DATA_COMPLETION_DATE]!r}"
                ),
            )

        count = clamp_count(validated[const.DATA_COMPLETION_COUNT])
        if day in history:
            const.LOGGER.debug(
                "Duplicate completion for %s: %s replaced by %s",
                day,
                history[day],
                count,
            )
        if count > 0:
            history[day] = count
        else:
            history.pop(day, None)

    return MappingProxyType(history)


def make_habit_config(
    habit_start_date: date | datetime,
    calendar: HabitCalendar,
    **options: Any,
) -> HabitConfig:
    """Build a HabitConfig from keyword options (record keys as kwargs).

    Convenience wrapper around build_habit_config for hosts that do not keep
    a raw record around.

    Example:
        make_habit_config(
            date(2026, 1, 1),
            calendar,
            completions_per_day=8,
            streak_goal_period=const.STREAK_PERIOD_WEEK,
        )
    """
    return build_habit_config(
        {const.DATA_HABIT_START_DATE: habit_start_date, **options}, calendar
    )
