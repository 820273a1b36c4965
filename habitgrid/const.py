"""Constants for the habitgrid engine.

This file centralizes record keys, defaults, habit/goal enumerations, display
formats and grid dimensions for consistency across the package.
"""

import logging
from typing import Final

# Logger
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Habit Types (polarity)
# ------------------------------------------------------------------------------------------------
HABIT_TYPE_BUILD = "build"
HABIT_TYPE_QUIT = "quit"

HABIT_TYPE_OPTIONS: Final = (HABIT_TYPE_BUILD, HABIT_TYPE_QUIT)

# ------------------------------------------------------------------------------------------------
# Streak Goal Periods
# ------------------------------------------------------------------------------------------------
STREAK_PERIOD_DAY = "day"
STREAK_PERIOD_WEEK = "week"
STREAK_PERIOD_MONTH = "month"

STREAK_PERIOD_OPTIONS: Final = (
    STREAK_PERIOD_DAY,
    STREAK_PERIOD_WEEK,
    STREAK_PERIOD_MONTH,
)

# ------------------------------------------------------------------------------------------------
# Streak Goal Basis
# ------------------------------------------------------------------------------------------------
GOAL_BASIS_DAY = "day_basis"
GOAL_BASIS_VALUE = "value_basis"

GOAL_BASIS_OPTIONS: Final = (GOAL_BASIS_DAY, GOAL_BASIS_VALUE)

# ------------------------------------------------------------------------------------------------
# Goal Indicator Qualification Reasons
# ------------------------------------------------------------------------------------------------
QUALIFY_REASON_GOAL_MET = "goal_met"
QUALIFY_REASON_ALL_DAYS = "all_days"
QUALIFY_REASON_ALL_WEEKS = "all_weeks"

# ------------------------------------------------------------------------------------------------
# Day Cell States
# ------------------------------------------------------------------------------------------------
DAY_STATE_INACTIVE = "inactive"
DAY_STATE_FAILED = "failed"
DAY_STATE_PARTIAL = "partial"
DAY_STATE_COMPLETED = "completed"

# Display intensity per state (0.0 - 1.0)
OPACITY_INACTIVE: Final = 0.1
OPACITY_FAILED: Final = 0.25
OPACITY_PARTIAL_MIN: Final = 0.4
OPACITY_PARTIAL_MAX: Final = 0.85
OPACITY_COMPLETED: Final = 1.0

# ------------------------------------------------------------------------------------------------
# Subtitle Styles
# ------------------------------------------------------------------------------------------------
SUBTITLE_STYLE_NORMAL = "normal"
SUBTITLE_STYLE_VIOLATION = "violation"
SUBTITLE_STYLE_STREAK = "streak"

# ------------------------------------------------------------------------------------------------
# Subtitle Formats
# ------------------------------------------------------------------------------------------------
SUBTITLE_PREFIX_QUIT = "Max "
SUBTITLE_FORMAT_GOAL_DAILY = "{prefix}{value} a day"
SUBTITLE_FORMAT_GOAL_DAY_BASIS = "{prefix}{value} days a {period}"
SUBTITLE_FORMAT_GOAL_VALUE_BASIS = "{prefix}{value} a {period}"
SUBTITLE_FAILED_TODAY = "Failed today"
SUBTITLE_FORMAT_OVER_LIMIT = "{over} over limit"
SUBTITLE_FORMAT_LEFT_TODAY = "{left} left today"
SUBTITLE_FORMAT_STREAK = "{count} {period} streak"
SUBTITLE_FORMAT_LEFT_THIS_PERIOD = "{left} left this {period}"

# Day streaks shorter than this are not displayed
SUBTITLE_MIN_DISPLAYED_DAY_STREAK: Final = 2

# ------------------------------------------------------------------------------------------------
# Habit Record Keys
# ------------------------------------------------------------------------------------------------
DATA_HABIT_START_DATE = "habit_start_date"
DATA_HABIT_CREATED_AT = "created_at"
DATA_HABIT_COMPLETIONS_PER_DAY = "completions_per_day"
DATA_HABIT_TYPE = "habit_type"
DATA_HABIT_IS_BINARY = "is_binary"
DATA_HABIT_STREAK_GOAL_PERIOD = "streak_goal_period"
DATA_HABIT_STREAK_GOAL_VALUE = "streak_goal_value"
DATA_HABIT_STREAK_GOAL_TYPE = "streak_goal_type"

# Completion Record Keys
DATA_COMPLETION_DATE = "date"
DATA_COMPLETION_COUNT = "count"

# ------------------------------------------------------------------------------------------------
# Defaults
# ------------------------------------------------------------------------------------------------
DEFAULT_COMPLETIONS_PER_DAY: Final = 1
DEFAULT_HABIT_TYPE = HABIT_TYPE_BUILD
DEFAULT_STREAK_GOAL_PERIOD = STREAK_PERIOD_DAY
DEFAULT_STREAK_GOAL_TYPE = GOAL_BASIS_VALUE

# Python weekday numbering: 0=Monday ... 6=Sunday
WEEKDAY_MONDAY: Final = 0
WEEKDAY_SUNDAY: Final = 6

# ------------------------------------------------------------------------------------------------
# Grid Layout
# ------------------------------------------------------------------------------------------------
DAYS_IN_WEEK: Final = 7
GRID_NUMBER_OF_WEEKS: Final = 52
MONTH_PAGE_DAY_COUNT: Final = 42
MONTH_PAGE_MAX_PAST_MONTHS: Final = 24

# Grid snapshot keys
GRID_KEY_START_DATE = "grid_start_date"
GRID_KEY_END_DATE = "grid_end_date"
GRID_KEY_WEEKS = "weeks"
GRID_KEY_MONTHS = "months"
GRID_KEY_WEEK_INDEX = "week_index"
GRID_KEY_WEEK_START = "week_start"
GRID_KEY_QUALIFIES = "qualifies"
GRID_KEY_REASON = "reason"
GRID_KEY_DAYS = "days"
GRID_KEY_MONTH_START = "month_start"
GRID_KEY_LABEL_WEEK_INDEX = "label_week_index"
