"""Interval Engine - Goal windows, progress aggregation and pro-rated goals.

This engine provides stateless, pure Python functions for:
- Interval bounds (single day, Monday-start week, calendar month)
- Grouping progress events per day (duplicates summed, never overwritten)
- Summing progress inside an interval
- Pro-rating the goal of a habit's first, possibly partial, interval
- Good/bad goal comparisons

ARCHITECTURE: All methods are static and operate on passed-in data.
Aggregation width depends only on the goal interval: CUSTOM habits use a
single-day window like DAILY ones (CUSTOM only changes which days are
scheduled).
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date
from typing import TYPE_CHECKING

from .. import const
from ..habit_helpers import (
    get_events_for_habit,
    get_goal_interval,
    get_goal_target,
    get_start_date,
    is_good_habit,
)
from ..utils.dt_utils import (
    dt_days_between,
    dt_iter_days,
    dt_month_end,
    dt_month_start,
    dt_parse_date,
    dt_week_end,
    dt_week_start,
)
from ..utils.math_utils import ceil_progress, round_progress, sum_progress

if TYPE_CHECKING:
    from ..type_defs import DateInput, HabitData, ProgressEventData


class IntervalEngine:
    """Pure logic engine for interval aggregation.

    All methods are static - no instance state.
    """

    # =========================================================================
    # INTERVAL BOUNDS
    # =========================================================================

    @staticmethod
    def get_interval_bounds(habit: HabitData, day: DateInput) -> tuple[date, date]:
        """Return the (start, end) days of the goal interval containing `day`.

        Examples:
            WEEKLY, Thu 2026-02-26 → (Mon 2026-02-23, Sun 2026-03-01)
            MONTHLY, 2026-02-14 → (2026-02-01, 2026-02-28)
            DAILY or CUSTOM, 2026-02-14 → (2026-02-14, 2026-02-14)
        """
        check_date = dt_parse_date(day)
        interval = get_goal_interval(habit)

        if interval == const.GOAL_INTERVAL_WEEKLY:
            return (
                dt_week_start(check_date, const.DEFAULT_WEEK_START_DAY),
                dt_week_end(check_date, const.DEFAULT_WEEK_START_DAY),
            )
        if interval == const.GOAL_INTERVAL_MONTHLY:
            return dt_month_start(check_date), dt_month_end(check_date)
        return check_date, check_date

    # =========================================================================
    # PROGRESS AGGREGATION
    # =========================================================================

    @staticmethod
    def get_progress_by_date(
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
    ) -> dict[date, float]:
        """Group this habit's events by day, summing duplicates.

        Events for other habits are ignored. Days without events are absent
        from the result.

        Raises:
            ValueError: If an event carries a malformed date string.
        """
        values_by_date: defaultdict[date, list[float]] = defaultdict(list)
        for event in get_events_for_habit(habit, progress_events):
            event_date = dt_parse_date(event[const.DATA_PROGRESS_DATE])
            values_by_date[event_date].append(event.get(const.DATA_PROGRESS_VALUE, 0))

        return {day: sum_progress(values) for day, values in values_by_date.items()}

    @staticmethod
    def sum_progress_in_range(
        progress_by_date: Mapping[date, float],
        start: date,
        end: date,
    ) -> float:
        """Sum per-day progress for every day in `[start, end]` inclusive."""
        return sum_progress(progress_by_date.get(day, 0) for day in dt_iter_days(start, end))

    @staticmethod
    def get_progress_on_date(
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        day: DateInput,
    ) -> float:
        """Return the summed progress logged on a single day."""
        progress_by_date = IntervalEngine.get_progress_by_date(habit, progress_events)
        return progress_by_date.get(dt_parse_date(day), 0)

    @staticmethod
    def get_interval_progress(
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        day: DateInput,
    ) -> float:
        """Return the progress summed over the whole interval containing `day`.

        Weekly habits sum the entire week, monthly habits the entire month,
        daily and custom habits just that day.
        """
        start, end = IntervalEngine.get_interval_bounds(habit, day)
        progress_by_date = IntervalEngine.get_progress_by_date(habit, progress_events)
        return IntervalEngine.sum_progress_in_range(progress_by_date, start, end)

    # =========================================================================
    # GOALS
    # =========================================================================

    @staticmethod
    def get_pro_rated_goal(habit: HabitData, day: DateInput) -> float:
        """Return the goal target for the interval containing `day`.

        Weekly and monthly habits that start mid-interval get a proportional
        goal for that first interval, rounded up:

            ceil(goal_target * available_days / full_interval_days)

        where available_days counts from the start date through the interval
        end. The result is at least 1 when goal_target > 0. Later intervals,
        and daily/custom habits, use goal_target unscaled.

        Example:
            Weekly target 3, habit starts Friday (3 days left):
            ceil(3 * 3 / 7) = ceil(1.29) = 2
        """
        base_target = get_goal_target(habit)

        if get_goal_interval(habit) not in const.MULTI_DAY_GOAL_INTERVALS:
            return base_target

        start_date = get_start_date(habit)
        interval_start, interval_end = IntervalEngine.get_interval_bounds(habit, day)

        if not interval_start <= start_date <= interval_end:
            return base_target

        full_interval_days = dt_days_between(interval_start, interval_end) + 1
        available_days = dt_days_between(start_date, interval_end) + 1
        pro_rated = ceil_progress(base_target * available_days / full_interval_days)

        if base_target > 0:
            return max(1, pro_rated)
        return pro_rated

    @staticmethod
    def is_goal_met(habit: HabitData, progress: float, goal: float) -> bool:
        """Compare progress against a goal.

        Good habits need at least `goal`; bad (limit) habits must stay at or
        below it.
        """
        if is_good_habit(habit):
            return progress >= goal
        return progress <= goal

    @staticmethod
    def get_remaining_progress(habit: HabitData, progress: float, goal: float) -> float:
        """Return how much progress is still missing to meet `goal`.

        Always 0 for bad habits: a limit is never "remaining".
        """
        if not is_good_habit(habit):
            return 0
        return round_progress(max(0, goal - progress))

    @staticmethod
    def is_complete_on_date(
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        day: DateInput,
    ) -> bool:
        """Return True if the interval containing `day` meets the raw goal.

        Uses the unscaled goal_target, not the pro-rated one.
        """
        progress = IntervalEngine.get_interval_progress(habit, progress_events, day)
        return IntervalEngine.is_goal_met(habit, progress, get_goal_target(habit))
