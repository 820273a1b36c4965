"""Day Cell Engine - Visual state of one grid cell.

States, from dimmest to brightest:
- inactive:  before the habit started, or in the future
- failed:    build habit with nothing done / quit habit over the limit
- partial:   some progress (carries a 0.0-1.0 progress value)
- completed: build target reached / quit habit with zero violations
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .. import const
from ..utils.math_utils import interpolate, progress_ratio

_STATE_OPACITY: dict[str, float] = {
    const.DAY_STATE_INACTIVE: const.OPACITY_INACTIVE,
    const.DAY_STATE_FAILED: const.OPACITY_FAILED,
    const.DAY_STATE_COMPLETED: const.OPACITY_COMPLETED,
}


@dataclass(frozen=True, slots=True)
class DayCellState:
    """Classified state of one day.

    Attributes:
        state: const.DAY_STATE_* value
        progress: 0.0-1.0 for partial days, None otherwise
    """

    state: str
    progress: float | None = None

    @property
    def opacity(self) -> float:
        """Display intensity; partial days scale between the partial bounds."""
        if self.state == const.DAY_STATE_PARTIAL:
            return interpolate(
                const.OPACITY_PARTIAL_MIN,
                const.OPACITY_PARTIAL_MAX,
                self.progress or 0.0,
            )
        return _STATE_OPACITY[self.state]


INACTIVE = DayCellState(const.DAY_STATE_INACTIVE)
FAILED = DayCellState(const.DAY_STATE_FAILED)
COMPLETED = DayCellState(const.DAY_STATE_COMPLETED)


class DayCellEngine:
    """Pure logic engine for day cell classification.

    All methods are static - no instance state.
    """

    @staticmethod
    def classify(
        day: date,
        count: int,
        daily_target: int,
        habit_type: str,
        habit_start_date: date,
        today: date,
    ) -> DayCellState:
        """Classify a single day.

        Args:
            day: The day being drawn
            count: Completions (build) or violations (quit) on that day
            daily_target: Per-day target (build) or limit (quit)
            habit_type: const.HABIT_TYPE_BUILD or const.HABIT_TYPE_QUIT
            habit_start_date: First day of the habit's lifetime
            today: Evaluation day

        Returns:
            DayCellState for the day
        """
        if day < habit_start_date or day > today:
            return INACTIVE

        if habit_type == const.HABIT_TYPE_QUIT:
            if count == 0:
                return COMPLETED
            if count > daily_target:
                return FAILED
            if count == daily_target:
                return DayCellState(const.DAY_STATE_PARTIAL, 0.0)
            # Fewer violations = closer to completed
            return DayCellState(
                const.DAY_STATE_PARTIAL, 1.0 - progress_ratio(count, daily_target)
            )

        if count == 0:
            return FAILED
        if count >= daily_target:
            return COMPLETED
        return DayCellState(const.DAY_STATE_PARTIAL, progress_ratio(count, daily_target))
