"""Shared fixtures and builders for habitstreaks tests.

All tests use fixed calendar dates. Reference week (February 2026):

    Mon 02-02  Tue 02-03  Wed 02-04  Thu 02-05  Fri 02-06  Sat 02-07  Sun 02-08
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from typing import Any

import pytest

from habitstreaks import const
from habitstreaks.engines.statistics_engine import StatisticsEngine
from habitstreaks.type_defs import HabitData, ProgressEventData

HABIT_ID = "habit-1"
OTHER_HABIT_ID = "habit-2"

# Monday of the reference week
WEEK_START = date(2026, 2, 2)


# =============================================================================
# Builders
# =============================================================================


def make_day(offset: int) -> date:
    """Return the reference Monday shifted by `offset` days."""
    return WEEK_START + timedelta(days=offset)


def make_habit(
    goal_interval: str = const.GOAL_INTERVAL_DAILY,
    recording_type: str = const.RECORDING_TYPE_YES_NO,
    is_good_habit: bool = True,
    start_date: date | str = WEEK_START,
    goal_target: float | None = 1,
    **extra: Any,
) -> HabitData:
    """Create a HabitData dictionary for testing.

    Args:
        goal_interval: GOAL_INTERVAL_* constant
        recording_type: RECORDING_TYPE_* constant
        is_good_habit: False for limit habits
        start_date: First schedulable day
        goal_target: Raw goal for one interval
        **extra: Any other HabitData keys (scheduled_days_of_week, ...)

    Returns:
        HabitData TypedDict
    """
    habit: HabitData = {
        "id": HABIT_ID,
        "name": "Test Habit",
        "is_good_habit": is_good_habit,
        "recording_type": recording_type,
        "goal_interval": goal_interval,
        "start_date": start_date,
        "goal_target": goal_target,
    }
    habit.update(extra)  # type: ignore[typeddict-item]
    return habit


def make_event(
    day: date | str,
    value: float = 1,
    habit_id: str = HABIT_ID,
) -> ProgressEventData:
    """Create a single ProgressEventData."""
    return {"habit_id": habit_id, "date": day, "value": value}


def make_events(
    days: Iterable[date | str],
    value: float = 1,
    habit_id: str = HABIT_ID,
) -> list[ProgressEventData]:
    """Create one event per day, all with the same value."""
    return [make_event(day, value, habit_id) for day in days]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def stats() -> StatisticsEngine:
    """Return a StatisticsEngine instance."""
    return StatisticsEngine()


@pytest.fixture
def daily_habit() -> HabitData:
    """Daily yes/no habit starting on the reference Monday."""
    return make_habit()


@pytest.fixture
def weekly_habit() -> HabitData:
    """Weekly count habit, target 3, starting on the reference Monday."""
    return make_habit(
        goal_interval=const.GOAL_INTERVAL_WEEKLY,
        recording_type=const.RECORDING_TYPE_COUNT,
        goal_target=3,
    )
