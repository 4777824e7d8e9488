"""Habit streak and interval-statistics engine.

Rebuilds a habit's day-by-day progress, interval aggregation, goal completion
and streak length from its definition and its logged progress events. The
engine performs no I/O: callers load habits and events, read the clock, and
pass everything in.

Usage:
    from habitstreaks import StatisticsEngine, calculate_day_statistics

    stats = StatisticsEngine()
    stats.current_streak(habit, events, today)
"""

from .engines import (
    DayStatistics,
    IntervalEngine,
    ScheduleEngine,
    StatisticsEngine,
    Streak,
    StreakEngine,
    calculate_day_statistics,
    get_habits_for_date,
    is_scheduled_for_date,
)

__all__ = [
    "DayStatistics",
    "IntervalEngine",
    "ScheduleEngine",
    "StatisticsEngine",
    "Streak",
    "StreakEngine",
    "calculate_day_statistics",
    "get_habits_for_date",
    "is_scheduled_for_date",
]
