"""Engine modules for habitstreaks.

Contains specialized computation engines, leaf-first:
- schedule_engine: Whether a day is scheduled for a habit
- interval_engine: Goal windows, progress aggregation, pro-rated goals
- streak_engine: Day-by-day streak state machine
- statistics_engine: Derived queries (current/best streak, security, totals)
"""

# Use relative imports within package to avoid mypy module resolution issues
from .interval_engine import IntervalEngine
from .schedule_engine import ScheduleEngine, get_habits_for_date, is_scheduled_for_date
from .statistics_engine import StatisticsEngine
from .streak_engine import DayStatistics, Streak, StreakEngine, calculate_day_statistics

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
