"""Streak Engine - Day-by-day streak state machine.

Rebuilds a habit's full streak timeline from its configuration and its
sparse progress history. Nothing is stored: every call folds over the days
from the habit's start date through the evaluation date, carrying the
previous day's `Streak | None` forward.

Per-day transitions:
- No progress and no carried streak: stays without a streak (None).
- Bad habit whose interval progress exceeds its limit: hard break (None).
- Unscheduled day: carries the streak forward, length unchanged.
- Scheduled day whose goal is met, or still reachable with the scheduled
  days left in the interval: length + 1.
- Scheduled day that can no longer reach the goal: break (None), except on
  the evaluation date itself, where the streak is held "at risk" with its
  length unchanged.

ARCHITECTURE: Pure logic, no I/O. `through_date` is always passed in by the
caller; the engine never reads the clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from .. import const
from ..habit_helpers import (
    get_goal_interval,
    get_habit_label,
    get_recording_type,
    is_good_habit,
)
from ..utils.dt_utils import (
    dt_add_days,
    dt_days_between,
    dt_iter_days,
    dt_parse_date,
)
from ..utils.math_utils import round_progress
from .interval_engine import IntervalEngine
from .schedule_engine import ScheduleEngine

if TYPE_CHECKING:
    from ..type_defs import DateInput, HabitData, ProgressEventData


# =============================================================================
# STREAK DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class Streak:
    """Streak state after one day's progress.

    Attributes:
        goal_progress: Target for the interval containing this day
                       (pro-rated for a partial first interval)
        total_interval_progress: Progress summed over the interval up to this day
        total_progress: Progress summed over the whole active streak
        is_goal_complete: Whether the interval-to-date progress meets the goal
        previous_length: Streak length before this day (0 if none)
        new_length: Streak length including this day
    """

    goal_progress: float
    total_interval_progress: float
    total_progress: float
    is_goal_complete: bool
    previous_length: int
    new_length: int


@dataclass(frozen=True)
class DayStatistics:
    """Progress and streak state for one calendar day.

    Attributes:
        date: The calendar day
        day_progress: Progress logged on this day (duplicates summed)
        streak: Streak after this day, or None when there is no active streak
    """

    date: date
    day_progress: float
    streak: Streak | None

    @property
    def date_iso(self) -> str:
        """Normalized YYYY-MM-DD string for this day."""
        return self.date.isoformat()


# =============================================================================
# STREAK ENGINE
# =============================================================================


class StreakEngine:
    """Day-by-day streak calculation for a single habit.

    The habit and its events are indexed once in the constructor; each call
    to `calculate_day_statistics()` rebuilds the timeline from scratch, so
    identical inputs always produce identical output.

    Example:
        engine = StreakEngine(habit, progress_events)
        stats = engine.calculate_day_statistics(date(2026, 3, 1))
        stats[-1].streak.new_length  # → 5
    """

    def __init__(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
    ) -> None:
        """Initialize the streak engine.

        Args:
            habit: HabitData dictionary (not mutated).
            progress_events: Events for any habits; other habits are ignored.
        """
        # Normalize enum fields once so unknown values only warn once per scan
        self._habit: HabitData = {
            **habit,
            const.DATA_HABIT_GOAL_INTERVAL: get_goal_interval(habit),
            const.DATA_HABIT_RECORDING_TYPE: get_recording_type(habit),
        }
        self._goal_interval = self._habit[const.DATA_HABIT_GOAL_INTERVAL]
        self._recording_type = self._habit[const.DATA_HABIT_RECORDING_TYPE]
        self._is_good_habit = is_good_habit(habit)
        self._schedule = ScheduleEngine(self._habit)
        self._progress_by_date = IntervalEngine.get_progress_by_date(
            habit, progress_events
        )

    @property
    def schedule(self) -> ScheduleEngine:
        """Schedule engine for this habit."""
        return self._schedule

    @property
    def recording_type(self) -> str:
        """Normalized RECORDING_TYPE_* value for this habit."""
        return self._recording_type

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def calculate_day_statistics(self, through_date: DateInput) -> list[DayStatistics]:
        """Build statistics for every day from the start date through `through_date`.

        Args:
            through_date: Evaluation date ("today" for live views).

        Returns:
            One DayStatistics per calendar day, oldest first. Empty when
            `through_date` is before the habit's start date.

        Note:
            Ranges longer than const.MAX_SCAN_DAYS are truncated to the most
            recent MAX_SCAN_DAYS days.
        """
        end_date = dt_parse_date(through_date)
        start_date = self._schedule.start_date

        if end_date < start_date:
            return []

        if dt_days_between(start_date, end_date) + 1 > const.MAX_SCAN_DAYS:
            truncated_start = dt_add_days(end_date, -(const.MAX_SCAN_DAYS - 1))
            const.LOGGER.warning(
                "StreakEngine: Scan range for habit '%s' exceeds %d days, "
                "starting at %s instead of %s",
                get_habit_label(self._habit),
                const.MAX_SCAN_DAYS,
                truncated_start,
                start_date,
            )
            start_date = truncated_start

        statistics: list[DayStatistics] = []
        previous_streak: Streak | None = None

        for day in dt_iter_days(start_date, end_date):
            day_progress = self._progress_by_date.get(day, 0)
            streak = self._calculate_next_day_streak(
                day,
                day_progress,
                previous_streak,
                is_evaluation_date=day == end_date,
            )
            statistics.append(
                DayStatistics(date=day, day_progress=day_progress, streak=streak)
            )
            previous_streak = streak

        const.LOGGER.debug(
            "StreakEngine: Scanned %d days for habit '%s' through %s (length=%s)",
            len(statistics),
            get_habit_label(self._habit),
            end_date,
            previous_streak.new_length if previous_streak else 0,
        )
        return statistics

    def get_remaining_scheduled_days(self, day: DateInput) -> int:
        """Count scheduled days after `day` through the end of its interval."""
        check_date = dt_parse_date(day)
        _, interval_end = IntervalEngine.get_interval_bounds(self._habit, check_date)
        return self._schedule.count_scheduled_days(check_date, interval_end)

    def get_remaining_progress(self, streak: Streak) -> float:
        """Return the progress still missing to meet the streak's interval goal."""
        return IntervalEngine.get_remaining_progress(
            self._habit, streak.total_interval_progress, streak.goal_progress
        )

    @staticmethod
    def can_continue(
        recording_type: str,
        day_progress: float,
        is_goal_complete: bool,
        remaining_progress: float,
        remaining_scheduled_days: int,
    ) -> bool:
        """Return True if the goal is met or still reachable in this interval.

        YES_NO habits can log at most 1 per day, so they need at least as
        many scheduled days as the progress still missing. COUNT and VALUE
        habits are optimistic: one scheduled day left is enough.

        Args:
            recording_type: RECORDING_TYPE_* value
            day_progress: Progress logged on the day being judged
            is_goal_complete: Whether the interval goal is already met
            remaining_progress: Progress still missing (0 for bad habits)
            remaining_scheduled_days: Scheduled days left after this day
        """
        if is_goal_complete:
            return True

        if recording_type == const.RECORDING_TYPE_YES_NO:
            return remaining_scheduled_days >= remaining_progress

        if day_progress > 0:
            return remaining_scheduled_days >= 1 or remaining_progress == 0

        return remaining_scheduled_days >= 1 and remaining_progress > 0

    # =========================================================================
    # DAY TRANSITION
    # =========================================================================

    def _calculate_next_day_streak(
        self,
        day: date,
        day_progress: float,
        previous_streak: Streak | None,
        is_evaluation_date: bool,
    ) -> Streak | None:
        """Calculate the streak state for `day` given the previous day's state."""
        # Streaks always start from a day with progress
        if day_progress == 0 and previous_streak is None:
            return None

        interval_start, interval_end = IntervalEngine.get_interval_bounds(
            self._habit, day
        )
        goal_progress = IntervalEngine.get_pro_rated_goal(self._habit, day)
        total_interval_progress = self._get_total_interval_progress(
            day, day_progress, interval_start, previous_streak
        )
        is_goal_complete = IntervalEngine.is_goal_met(
            self._habit, total_interval_progress, goal_progress
        )

        # Exceeding a limit breaks the streak no matter what
        if not self._is_good_habit and total_interval_progress > goal_progress:
            return None

        previous_length = previous_streak.new_length if previous_streak else 0

        if not self._schedule.is_scheduled(day):
            new_length = previous_length
        elif self.can_continue(
            self._recording_type,
            day_progress,
            is_goal_complete,
            IntervalEngine.get_remaining_progress(
                self._habit, total_interval_progress, goal_progress
            ),
            self._schedule.count_scheduled_days(day, interval_end),
        ):
            new_length = previous_length + 1
        elif is_evaluation_date:
            # Today is not over yet: at risk, not broken
            new_length = previous_length
        else:
            return None

        previous_total = previous_streak.total_progress if previous_streak else 0

        return Streak(
            goal_progress=goal_progress,
            total_interval_progress=total_interval_progress,
            total_progress=round_progress(previous_total + day_progress),
            is_goal_complete=is_goal_complete,
            previous_length=previous_length,
            new_length=new_length,
        )

    def _get_total_interval_progress(
        self,
        day: date,
        day_progress: float,
        interval_start: date,
        previous_streak: Streak | None,
    ) -> float:
        """Return progress summed from the interval start through `day`.

        Weekly and monthly totals are always re-summed from the per-day map,
        so out-of-order or edited events can never leave a stale total.
        """
        if self._goal_interval in const.MULTI_DAY_GOAL_INTERVALS:
            return IntervalEngine.sum_progress_in_range(
                self._progress_by_date, interval_start, day
            )

        previous_interval_start, _ = IntervalEngine.get_interval_bounds(
            self._habit, dt_add_days(day, -1)
        )
        if previous_streak is None or previous_interval_start != interval_start:
            return day_progress

        return round_progress(previous_streak.total_interval_progress + day_progress)


# =============================================================================
# Module-level convenience functions
# =============================================================================


def calculate_day_statistics(
    habit: HabitData,
    progress_events: Iterable[ProgressEventData],
    through_date: DateInput,
) -> list[DayStatistics]:
    """Return day-by-day statistics for `habit` through `through_date`.

    Thin wrapper around StreakEngine for one-off calculations.
    """
    return StreakEngine(habit, progress_events).calculate_day_statistics(through_date)
