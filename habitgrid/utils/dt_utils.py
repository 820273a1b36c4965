# File: utils/dt_utils.py
"""Date and time utilities for habitgrid.

Pure Python date functions. Every engine computation works on calendar days
(`datetime.date`) that have already been truncated in the habit's time zone;
the helpers here do that truncation and the week/month arithmetic on top of it.

Uses standard library: datetime, zoneinfo, calendar, plus dateutil.

Functions:
    - set_default_timezone / get_default_timezone: Process-wide default zone
    - dt_now_utc / dt_today_local: Wall clock access (host side only)
    - as_local: Convert an aware datetime to a local zone
    - dt_start_of_day: Truncate a date/datetime to its local calendar day
    - dt_parse_day: Normalize date/datetime/ISO string input to a calendar day
    - dt_start_of_week / dt_start_of_month / dt_end_of_month: Period bounds
    - dt_days_in_month: Number of days in a month
    - dt_add_days / dt_add_weeks / dt_add_months: Calendar arithmetic
    - dt_days_between: Whole days from one date to another

Classes:
    - HabitCalendar: First weekday + time zone bound to the helpers above
"""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
import logging
from zoneinfo import ZoneInfo

# Third-party date utilities
from dateutil.relativedelta import relativedelta

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# These mirror const.py values but are defined locally for purity.
# ==============================================================================

# Default timezone - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

# Python weekday numbering: 0=Monday ... 6=Sunday
WEEKDAY_SUNDAY = 6
DAYS_IN_WEEK = 7


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the default timezone for all dt_utils functions.

    Call this once during host setup to configure the user's timezone.

    Args:
        tz: ZoneInfo object representing the default timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Get the current default timezone.

    Returns:
        The configured default timezone (ZoneInfo object)
    """
    return DEFAULT_TIME_ZONE


# ==============================================================================
# Current Date/Time Functions
# ==============================================================================


def dt_now_utc() -> datetime:
    """Return the current datetime in UTC (timezone-aware).

    Returns:
        Current UTC datetime.
    """
    return datetime.now(UTC)


def dt_today_local(tz: ZoneInfo | None = None) -> date:
    """Return today's date in local timezone as a `datetime.date`.

    Engines never call this; hosts use it to pick the `today` they pass in.

    Args:
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        Today's date in the specified timezone.
    """
    return as_local(dt_now_utc(), tz).date()


def as_local(dt_obj: datetime, tz: ZoneInfo | None = None) -> datetime:
    """Convert a datetime to local timezone.

    Args:
        dt_obj: Datetime object (naive values are treated as UTC)
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        Datetime in local timezone
    """
    tz_info = tz or DEFAULT_TIME_ZONE
    if dt_obj.tzinfo is None:
        # Assume it's in UTC if naive
        dt_obj = dt_obj.replace(tzinfo=UTC)
    return dt_obj.astimezone(tz_info)


# ==============================================================================
# Day Normalization
# ==============================================================================


def dt_start_of_day(value: date | datetime, tz: ZoneInfo | None = None) -> date:
    """Truncate a date or datetime to its calendar day in local timezone.

    Args:
        value: A `date` (returned unchanged) or `datetime` (converted first)
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        The local calendar day containing `value`.
    """
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return as_local(value, tz).date()
    return value


def dt_parse_day(
    value: str | date | datetime | None, tz: ZoneInfo | None = None
) -> date | None:
    """Normalize a date-like input to a local calendar day.

    Accepts:
    - `date` / `datetime` objects
    - "2026-01-18" (ISO date)
    - "2026-01-18T22:30:00+00:00" (ISO datetime, converted to local zone)

    Args:
        value: Input to normalize, or None
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        The local calendar day, or None if the input is empty or unparsable.
    """
    if value is None:
        return None
    if isinstance(value, date):
        return dt_start_of_day(value, tz)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return dt_start_of_day(datetime.fromisoformat(text), tz)
    except ValueError:
        _LOGGER.debug("Unparsable day value: %s", value)
        return None


# ==============================================================================
# Period Bounds
# ==============================================================================


def dt_start_of_week(day: date, first_weekday: int = WEEKDAY_SUNDAY) -> date:
    """Return the first day of the week containing `day`.

    Args:
        day: Any calendar day
        first_weekday: Week start (0=Monday ... 6=Sunday)

    Returns:
        The week's first day (on or before `day`).
    """
    offset = (day.weekday() - first_weekday) % DAYS_IN_WEEK
    return day - timedelta(days=offset)


def dt_start_of_month(day: date) -> date:
    """Return the first day of the month containing `day`."""
    return day.replace(day=1)


def dt_days_in_month(day: date) -> int:
    """Return the number of days in the month containing `day`."""
    return monthrange(day.year, day.month)[1]


def dt_end_of_month(day: date) -> date:
    """Return the last day of the month containing `day`."""
    return day.replace(day=dt_days_in_month(day))


# ==============================================================================
# Calendar Arithmetic
# ==============================================================================


def dt_add_days(day: date, days: int) -> date:
    """Add (or subtract) whole days."""
    return day + timedelta(days=days)


def dt_add_weeks(day: date, weeks: int) -> date:
    """Add (or subtract) whole weeks."""
    return day + timedelta(weeks=weeks)


def dt_add_months(day: date, months: int) -> date:
    """Add (or subtract) months, clamping to the end of shorter months.

    Uses relativedelta so Jan 31 + 1 month = Feb 28 (not skipped).
    """
    return day + relativedelta(months=months)


def dt_days_between(start: date, end: date) -> int:
    """Return the number of days from `start` to `end` (negative if earlier)."""
    return (end - start).days


# ==============================================================================
# Calendar Configuration
# ==============================================================================


@dataclass(frozen=True, slots=True)
class HabitCalendar:
    """Calendar configuration every evaluation is anchored to.

    Attributes:
        first_weekday: Week start in Python numbering (0=Monday ... 6=Sunday)
        time_zone: Zone used to truncate datetimes to calendar days
    """

    first_weekday: int = WEEKDAY_SUNDAY
    time_zone: ZoneInfo = field(default_factory=get_default_timezone)

    def __post_init__(self) -> None:
        """Reject week starts outside the 0-6 weekday range."""
        if not 0 <= self.first_weekday <= 6:
            raise ValueError(
                f"first_weekday must be between 0 and 6, got {self.first_weekday}"
            )

    def today(self) -> date:
        """Return today's date in this calendar's zone (host side only)."""
        return dt_today_local(self.time_zone)

    def start_of_day(self, value: date | datetime) -> date:
        """Truncate a date/datetime to a calendar day in this zone."""
        return dt_start_of_day(value, self.time_zone)

    def parse_day(self, value: str | date | datetime | None) -> date | None:
        """Normalize date-like input to a calendar day in this zone."""
        return dt_parse_day(value, self.time_zone)

    def start_of_week(self, day: date) -> date:
        """Return the first day of the week containing `day`."""
        return dt_start_of_week(day, self.first_weekday)

    def end_of_week(self, day: date) -> date:
        """Return the last day of the week containing `day`."""
        return dt_add_days(self.start_of_week(day), DAYS_IN_WEEK - 1)

    def start_of_month(self, day: date) -> date:
        """Return the first day of the month containing `day`."""
        return dt_start_of_month(day)

    def end_of_month(self, day: date) -> date:
        """Return the last day of the month containing `day`."""
        return dt_end_of_month(day)

    def days_in_month(self, day: date) -> int:
        """Return the number of days in the month containing `day`."""
        return dt_days_in_month(day)
