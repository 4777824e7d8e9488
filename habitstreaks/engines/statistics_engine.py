"""Statistics Engine - Derived habit queries built on the streak timeline.

This engine answers the questions the UI asks about a habit:
- Current streak and the progress accumulated in it
- Best streak ever reached
- Whether today's streak is secure or at risk
- Whether a day gets an implicit "covered by look-ahead" checkmark
- Lifetime totals (completed days, total value)
- End conditions and interval completion percentage

Design Principles:
    - Stateless: operates on the habit and events passed in
    - Explicit clock: every query that depends on "today" takes it as an
      argument; the engine never reads the current date itself
    - Derived: nothing is cached, everything is recomputed from the inputs
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .. import const
from ..habit_helpers import (
    get_end_condition_target,
    get_end_date,
    get_events_for_habit,
    get_goal_target,
    get_habit_label,
    get_start_date,
)
from ..utils.dt_utils import dt_parse_date
from ..utils.math_utils import calculate_percentage, clamp, sum_progress
from .interval_engine import IntervalEngine
from .streak_engine import DayStatistics, StreakEngine

if TYPE_CHECKING:
    from ..type_defs import DateInput, HabitData, ProgressEventData


class StatisticsEngine:
    """Derived streak and progress queries for a single habit.

    All methods are stateless - they operate on data structures passed as
    arguments and rebuild the streak timeline on every call.

    Example:
        stats = StatisticsEngine()
        today = date(2026, 3, 1)

        stats.current_streak(habit, events, today)  # → 5
        stats.is_streak_secure(habit, events, today)  # → False (at risk)
    """

    # ────────────────────────────────────────────────────────────────
    # Streak Queries
    # ────────────────────────────────────────────────────────────────

    def current_streak(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        today: DateInput,
    ) -> int:
        """Return the length of the active streak as of `today`.

        When today has no progress yet, the length before today is reported:
        an unfinished day never breaks the streak on its own.

        Args:
            habit: HabitData dictionary.
            progress_events: Progress events (other habits are ignored).
            today: The caller's current date.

        Returns:
            Streak length in days, 0 when there is no active streak.
        """
        statistics = StreakEngine(habit, progress_events).calculate_day_statistics(
            today
        )
        if not statistics:
            return 0
        return self._reported_length(statistics[-1])

    def current_streak_progress(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        today: DateInput,
    ) -> float:
        """Return the progress summed over the active streak (the streak counter)."""
        statistics = StreakEngine(habit, progress_events).calculate_day_statistics(
            today
        )
        if not statistics or statistics[-1].streak is None:
            return 0
        return statistics[-1].streak.total_progress

    def best_streak(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        today: DateInput,
    ) -> int:
        """Return the longest streak length reached on any day through `today`."""
        statistics = StreakEngine(habit, progress_events).calculate_day_statistics(
            today
        )
        return max(
            (stat.streak.new_length for stat in statistics if stat.streak),
            default=0,
        )

    def is_streak_secure(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        today: DateInput,
    ) -> bool:
        """Return True if the streak survives even if nothing more is logged today.

        A streak is secure when there is an active streak and:
        - today is not scheduled, OR
        - today's interval goal is already complete, OR
        - enough scheduled days remain in the interval to close the gap.
        """
        engine = StreakEngine(habit, progress_events)
        statistics = engine.calculate_day_statistics(today)
        if not statistics:
            return False

        today_stats = statistics[-1]
        streak = today_stats.streak
        if streak is None or self._reported_length(today_stats) <= 0:
            return False

        if not engine.schedule.is_scheduled(today_stats.date):
            return True

        if streak.is_goal_complete:
            return True

        return StreakEngine.can_continue(
            engine.recording_type,
            today_stats.day_progress,
            streak.is_goal_complete,
            engine.get_remaining_progress(streak),
            engine.get_remaining_scheduled_days(today_stats.date),
        )

    def should_show_checkmark(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        check_date: DateInput,
        today: DateInput,
    ) -> bool:
        """Return True if a day without progress was still counted in the streak.

        Such days are covered by look-ahead (for example a weekly goal that
        was already met) and render an implicit checkmark.
        """
        check_day = dt_parse_date(check_date)
        today_day = dt_parse_date(today)

        if check_day < get_start_date(habit) or check_day > today_day:
            return False

        statistics = StreakEngine(habit, progress_events).calculate_day_statistics(
            today_day
        )
        day_stats = next((stat for stat in statistics if stat.date == check_day), None)

        if day_stats is None or day_stats.streak is None:
            return False

        return (
            day_stats.day_progress == 0
            and day_stats.streak.new_length == day_stats.streak.previous_length + 1
        )

    # ────────────────────────────────────────────────────────────────
    # Totals
    # ────────────────────────────────────────────────────────────────

    def total_completed_days(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
    ) -> int:
        """Count logged days whose interval meets the (unscaled) goal target.

        Duplicate events on the same day count once.
        """
        progress_by_date = IntervalEngine.get_progress_by_date(habit, progress_events)
        goal_target = get_goal_target(habit)

        completed = 0
        for day in progress_by_date:
            start, end = IntervalEngine.get_interval_bounds(habit, day)
            interval_progress = IntervalEngine.sum_progress_in_range(
                progress_by_date, start, end
            )
            if IntervalEngine.is_goal_met(habit, interval_progress, goal_target):
                completed += 1
        return completed

    def total_value(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
    ) -> float:
        """Return the sum of every progress value logged for the habit."""
        return sum_progress(
            event.get(const.DATA_PROGRESS_VALUE, 0)
            for event in get_events_for_habit(habit, progress_events)
        )

    # ────────────────────────────────────────────────────────────────
    # End Conditions & Display
    # ────────────────────────────────────────────────────────────────

    def has_reached_end_condition(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        today: DateInput,
    ) -> bool:
        """Return True if the habit's end condition is satisfied as of `today`.

        End conditions:
        - DATE: today is after the end date
        - TOTAL_DAYS: completed days reached the target
        - TOTAL_VALUE: total logged value reached the target
        - STREAK: current streak reached the target
        """
        end_type = habit.get(const.DATA_HABIT_END_CONDITION_TYPE)
        end_value = habit.get(const.DATA_HABIT_END_CONDITION_VALUE)
        if not end_type or end_value is None or end_value == "":
            return False

        if end_type not in const.END_CONDITION_OPTIONS:
            const.LOGGER.warning(
                "Unknown end condition '%s' for habit '%s'",
                end_type,
                get_habit_label(habit),
            )
            return False

        events = list(progress_events)

        if end_type == const.END_CONDITION_DATE:
            end_date = get_end_date(habit)
            return end_date is not None and dt_parse_date(today) > end_date

        target = get_end_condition_target(habit)
        if target is None:
            return False

        if end_type == const.END_CONDITION_TOTAL_DAYS:
            return self.total_completed_days(habit, events) >= target
        if end_type == const.END_CONDITION_TOTAL_VALUE:
            return self.total_value(habit, events) >= target
        return self.current_streak(habit, events, today) >= target

    def interval_completion_percentage(
        self,
        habit: HabitData,
        progress_events: Iterable[ProgressEventData],
        day: DateInput,
    ) -> float:
        """Return interval progress as a percentage (0-100) of the pro-rated goal.

        For bad habits this is the share of the limit already used.
        """
        progress = IntervalEngine.get_interval_progress(habit, progress_events, day)
        goal = IntervalEngine.get_pro_rated_goal(habit, day)
        return clamp(calculate_percentage(progress, goal), 0.0, 100.0)

    # ────────────────────────────────────────────────────────────────
    # Helpers
    # ────────────────────────────────────────────────────────────────

    @staticmethod
    def _reported_length(day_stats: DayStatistics) -> int:
        """Return the streak length to display for the evaluation day."""
        if day_stats.streak is None:
            return 0
        if day_stats.day_progress > 0:
            return day_stats.streak.new_length
        return day_stats.streak.previous_length
