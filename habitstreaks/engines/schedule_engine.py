"""Schedule Engine for habitstreaks.

Decides whether a calendar day is a "scheduled" day for a habit. Every other
engine builds on this predicate: only scheduled days can advance or break a
streak, and look-ahead feasibility counts scheduled days left in an interval.

Rules, applied in order (first failing rule wins):
1. Days before the habit's start date are not scheduled.
2. A DATE end condition stops scheduling after the end date.
3. A non-empty weekday list restricts scheduling to those weekdays.
4. CUSTOM habits with a positive cadence are scheduled every Nth day
   counted from the start date.
5. Everything else is scheduled.

IMPORTANT: This module must NOT import from the streak or statistics engines
to avoid circular imports. Only import from const.py, habit_helpers.py and
utils.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING

from .. import const
from ..habit_helpers import (
    get_custom_interval_days,
    get_end_date,
    get_goal_interval,
    get_scheduled_days_of_week,
    get_start_date,
)
from ..utils.dt_utils import (
    dt_add_days,
    dt_days_between,
    dt_iter_days,
    dt_parse_date,
    dt_weekday_index,
)

if TYPE_CHECKING:
    from ..type_defs import DateInput, HabitData


class ScheduleEngine:
    """Scheduling predicate for a single habit.

    The habit's configuration is parsed once in the constructor, so repeated
    checks during a day-by-day scan stay cheap. The engine holds no mutable
    state: `is_scheduled()` always returns the same answer for the same day.

    Example:
        engine = ScheduleEngine(habit)
        engine.is_scheduled(date(2026, 2, 23))  # → True
        engine.count_scheduled_days(date(2026, 2, 23), date(2026, 3, 1))  # → 6
    """

    def __init__(self, habit: HabitData) -> None:
        """Initialize the schedule engine for a habit.

        Args:
            habit: HabitData dictionary.

        Note:
            Invalid cadence values (<=0) are ignored.
            Invalid weekday entries (outside 0-6) are filtered out.
        """
        self._habit = habit
        self._start_date = get_start_date(habit)
        self._end_date = get_end_date(habit)
        self._days_of_week = get_scheduled_days_of_week(habit)
        self._custom_interval_days = (
            get_custom_interval_days(habit)
            if get_goal_interval(habit) == const.GOAL_INTERVAL_CUSTOM
            else None
        )

    @property
    def start_date(self) -> date:
        """First day the habit can be scheduled."""
        return self._start_date

    @property
    def end_date(self) -> date | None:
        """Last schedulable day for DATE end conditions, else None."""
        return self._end_date

    def is_scheduled(self, day: DateInput) -> bool:
        """Return True if the habit is scheduled on `day`."""
        check_date = dt_parse_date(day)

        if check_date < self._start_date:
            return False

        if self._end_date is not None and check_date > self._end_date:
            return False

        if self._days_of_week and dt_weekday_index(check_date) not in self._days_of_week:
            return False

        if self._custom_interval_days:
            days_since_start = dt_days_between(self._start_date, check_date)
            if days_since_start < 0 or days_since_start % self._custom_interval_days:
                return False

        return True

    def count_scheduled_days(self, after: date, through: date) -> int:
        """Count scheduled days strictly after `after`, up to `through` inclusive.

        Used for look-ahead: "how many chances are left in this interval?"

        Examples:
            Daily habit, after=Wed, through=Sun → 4 (Thu..Sun)
            Single-day interval (after == through) → 0
        """
        return sum(
            1
            for day in dt_iter_days(dt_add_days(after, 1), through)
            if self.is_scheduled(day)
        )

    def get_scheduled_dates(self, start: DateInput, end: DateInput) -> list[date]:
        """Return every scheduled day in `[start, end]` inclusive."""
        return [
            day
            for day in dt_iter_days(dt_parse_date(start), dt_parse_date(end))
            if self.is_scheduled(day)
        ]


# =============================================================================
# Module-level convenience functions
# =============================================================================


def is_scheduled_for_date(habit: HabitData, day: DateInput) -> bool:
    """Return True if `habit` is scheduled on `day`.

    Thin wrapper around ScheduleEngine for one-off checks.
    """
    return ScheduleEngine(habit).is_scheduled(day)


def get_habits_for_date(
    habits: Iterable[HabitData],
    day: DateInput,
) -> list[HabitData]:
    """Return the habits scheduled on `day`, preserving input order."""
    check_date = dt_parse_date(day)
    return [habit for habit in habits if is_scheduled_for_date(habit, check_date)]
