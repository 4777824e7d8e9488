# File: const.py
"""Constants for the habitstreaks engine.

This file centralizes enum values, field defaults, safety limits and display
formats so the engines and utilities share a single source of truth.
"""

import logging

# ------------------------------------------------------------------------------------------------
# General
# ------------------------------------------------------------------------------------------------
# Logger
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Data Keys
# ------------------------------------------------------------------------------------------------
# Habit
DATA_HABIT_CUSTOM_INTERVAL_DAYS = "custom_interval_days"
DATA_HABIT_END_CONDITION_TYPE = "end_condition_type"
DATA_HABIT_END_CONDITION_VALUE = "end_condition_value"
DATA_HABIT_GOAL_INTERVAL = "goal_interval"
DATA_HABIT_GOAL_TARGET = "goal_target"
DATA_HABIT_ID = "id"
DATA_HABIT_IS_GOOD_HABIT = "is_good_habit"
DATA_HABIT_NAME = "name"
DATA_HABIT_RECORDING_TYPE = "recording_type"
DATA_HABIT_SCHEDULED_DAYS_OF_WEEK = "scheduled_days_of_week"
DATA_HABIT_START_DATE = "start_date"

# Progress Events
DATA_PROGRESS_DATE = "date"
DATA_PROGRESS_HABIT_ID = "habit_id"
DATA_PROGRESS_ID = "id"
DATA_PROGRESS_NOTE = "note"
DATA_PROGRESS_VALUE = "value"

# ------------------------------------------------------------------------------------------------
# Recording Types
# ------------------------------------------------------------------------------------------------
RECORDING_TYPE_COUNT = "COUNT"
RECORDING_TYPE_VALUE = "VALUE"
RECORDING_TYPE_YES_NO = "YES_NO"

RECORDING_TYPE_OPTIONS = [
    RECORDING_TYPE_YES_NO,
    RECORDING_TYPE_COUNT,
    RECORDING_TYPE_VALUE,
]

# ------------------------------------------------------------------------------------------------
# Goal Intervals
# ------------------------------------------------------------------------------------------------
GOAL_INTERVAL_CUSTOM = "CUSTOM"
GOAL_INTERVAL_DAILY = "DAILY"
GOAL_INTERVAL_MONTHLY = "MONTHLY"
GOAL_INTERVAL_WEEKLY = "WEEKLY"

GOAL_INTERVAL_OPTIONS = [
    GOAL_INTERVAL_DAILY,
    GOAL_INTERVAL_WEEKLY,
    GOAL_INTERVAL_MONTHLY,
    GOAL_INTERVAL_CUSTOM,
]

# Intervals that aggregate over more than one day (pro-rated, re-summed)
MULTI_DAY_GOAL_INTERVALS = frozenset({GOAL_INTERVAL_WEEKLY, GOAL_INTERVAL_MONTHLY})

# ------------------------------------------------------------------------------------------------
# End Conditions
# ------------------------------------------------------------------------------------------------
END_CONDITION_DATE = "DATE"
END_CONDITION_STREAK = "STREAK"
END_CONDITION_TOTAL_DAYS = "TOTAL_DAYS"
END_CONDITION_TOTAL_VALUE = "TOTAL_VALUE"

END_CONDITION_OPTIONS = [
    END_CONDITION_DATE,
    END_CONDITION_TOTAL_DAYS,
    END_CONDITION_TOTAL_VALUE,
    END_CONDITION_STREAK,
]

# ------------------------------------------------------------------------------------------------
# Weekdays (0=Sunday, 6=Saturday)
# ------------------------------------------------------------------------------------------------
WEEKDAY_SUNDAY = 0
WEEKDAY_MONDAY = 1
WEEKDAY_TUESDAY = 2
WEEKDAY_WEDNESDAY = 3
WEEKDAY_THURSDAY = 4
WEEKDAY_FRIDAY = 5
WEEKDAY_SATURDAY = 6

# ------------------------------------------------------------------------------------------------
# Date Formats
# ------------------------------------------------------------------------------------------------
DATE_FORMAT_ISO = "iso"
DATE_FORMAT_LONG = "long"
DATE_FORMAT_SHORT = "short"

# ------------------------------------------------------------------------------------------------
# Defaults
# ------------------------------------------------------------------------------------------------
DEFAULT_GOAL_TARGET = 1
DEFAULT_RECORDING_TYPE = RECORDING_TYPE_COUNT
DEFAULT_GOAL_INTERVAL = GOAL_INTERVAL_DAILY

# Weekly intervals start on Monday
DEFAULT_WEEK_START_DAY = WEEKDAY_MONDAY

# Calendar grids always start on Sunday
CALENDAR_GRID_WEEK_START_DAY = WEEKDAY_SUNDAY

# 6 weeks * 7 days
CALENDAR_GRID_DAYS = 42

# Safety limit for the day-by-day scan (~10 years)
MAX_SCAN_DAYS = 3660

# Float precision for progress sums
DATA_FLOAT_PRECISION = 4
