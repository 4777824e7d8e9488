# File: habit_helpers.py
"""Habit helper functions and shared logic.

Field accessors that apply defaults and coerce loosely-typed storage values,
so the engines never repeat `.get()` fallbacks. Unknown enum strings are
coerced to defaults with a warning instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING

from . import const
from .utils.dt_utils import dt_parse_date

if TYPE_CHECKING:
    from .type_defs import HabitData, ProgressEventData


# -------- Identity --------
def get_habit_id(habit: HabitData) -> str:
    """Return the habit identifier."""
    return habit[const.DATA_HABIT_ID]


def get_habit_label(habit: HabitData) -> str:
    """Return a label for log messages (name if set, else id)."""
    return str(habit.get(const.DATA_HABIT_NAME) or habit.get(const.DATA_HABIT_ID))


# -------- Goal Configuration --------
def is_good_habit(habit: HabitData) -> bool:
    """Return True for "reach at least" habits, False for limit habits."""
    return bool(habit.get(const.DATA_HABIT_IS_GOOD_HABIT, True))


def get_goal_interval(habit: HabitData) -> str:
    """Return the habit's GOAL_INTERVAL_* value, defaulting to DAILY."""
    interval = habit.get(const.DATA_HABIT_GOAL_INTERVAL) or const.DEFAULT_GOAL_INTERVAL
    if interval not in const.GOAL_INTERVAL_OPTIONS:
        const.LOGGER.warning(
            "Unknown goal interval '%s' for habit '%s', using %s",
            interval,
            get_habit_label(habit),
            const.DEFAULT_GOAL_INTERVAL,
        )
        return const.DEFAULT_GOAL_INTERVAL
    return interval


def get_recording_type(habit: HabitData) -> str:
    """Return the habit's RECORDING_TYPE_* value, defaulting to COUNT."""
    recording_type = (
        habit.get(const.DATA_HABIT_RECORDING_TYPE) or const.DEFAULT_RECORDING_TYPE
    )
    if recording_type not in const.RECORDING_TYPE_OPTIONS:
        const.LOGGER.warning(
            "Unknown recording type '%s' for habit '%s', using %s",
            recording_type,
            get_habit_label(habit),
            const.DEFAULT_RECORDING_TYPE,
        )
        return const.DEFAULT_RECORDING_TYPE
    return recording_type


def get_goal_target(habit: HabitData) -> float:
    """Return the raw goal for one interval (default 1 when absent or None)."""
    target = habit.get(const.DATA_HABIT_GOAL_TARGET)
    if target is None:
        return const.DEFAULT_GOAL_TARGET
    return target


def get_custom_interval_days(habit: HabitData) -> int | None:
    """Return the CUSTOM cadence in days, or None when unset or not positive."""
    interval_days = habit.get(const.DATA_HABIT_CUSTOM_INTERVAL_DAYS)
    if not interval_days or interval_days <= 0:
        return None
    return int(interval_days)


# -------- Scheduling Fields --------
def get_start_date(habit: HabitData) -> date:
    """Return the first day the habit can be scheduled."""
    return dt_parse_date(habit[const.DATA_HABIT_START_DATE])


def get_scheduled_days_of_week(habit: HabitData) -> frozenset[int]:
    """Return the weekday filter (0=Sun..6=Sat). Empty means every day.

    Entries outside 0-6 are dropped.
    """
    raw_days = habit.get(const.DATA_HABIT_SCHEDULED_DAYS_OF_WEEK) or []
    return frozenset(int(day) for day in raw_days if 0 <= int(day) <= 6)


def get_end_date(habit: HabitData) -> date | None:
    """Return the last schedulable day for DATE end conditions, else None."""
    if habit.get(const.DATA_HABIT_END_CONDITION_TYPE) != const.END_CONDITION_DATE:
        return None
    end_value = habit.get(const.DATA_HABIT_END_CONDITION_VALUE)
    if not end_value:
        return None
    return dt_parse_date(end_value)


def get_end_condition_target(habit: HabitData) -> float | None:
    """Return the numeric target of a value-based end condition, else None."""
    end_value = habit.get(const.DATA_HABIT_END_CONDITION_VALUE)
    if end_value is None or end_value == "":
        return None
    return float(end_value)


# -------- Progress Events --------
def get_events_for_habit(
    habit: HabitData,
    progress_events: Iterable[ProgressEventData],
) -> list[ProgressEventData]:
    """Return only the events logged for this habit."""
    habit_id = get_habit_id(habit)
    return [
        event
        for event in progress_events
        if event.get(const.DATA_PROGRESS_HABIT_ID) == habit_id
    ]
