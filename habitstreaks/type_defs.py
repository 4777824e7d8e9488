"""Type definitions for habitstreaks input records.

Habits and progress events arrive from storage collaborators as plain
dictionaries. TypedDict documents their fixed keys for static analysis only;
the engines still read optional fields with `.get()` defaults because
TypedDict does NOT enforce types at runtime.

Dates are accepted either as `datetime.date` objects or as ISO strings
("2026-01-18" or "2026-01-18T00:00:00.000Z"). Only the date part is used.

IMPORTANT: This file must NOT import from the engines to avoid circular
dependencies. Only import from typing (type machinery) and datetime.
"""

from datetime import date
from typing import NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

HabitId = str  # Opaque identifier
ISODate = str  # ISO 8601 date string (no time) "2026-01-18"
DateInput = date | ISODate  # Anything dt_parse_date() accepts


# =============================================================================
# Habit Definition
# =============================================================================


class HabitData(TypedDict):
    """Type definition for a habit.

    Required keys describe how the habit is scheduled and measured. Optional
    keys fall back to const.DEFAULT_* values when absent or None.
    """

    id: HabitId
    is_good_habit: bool
    recording_type: str  # RECORDING_TYPE_* constant
    goal_interval: str  # GOAL_INTERVAL_* constant
    start_date: DateInput
    name: NotRequired[str]
    goal_target: NotRequired[float | None]  # Default: 1
    custom_interval_days: NotRequired[int | None]  # Only used by CUSTOM
    scheduled_days_of_week: NotRequired[list[int]]  # 0=Sun..6=Sat, empty = every day
    end_condition_type: NotRequired[str | None]  # END_CONDITION_* constant
    end_condition_value: NotRequired[str | None]  # Date string or numeric value


# =============================================================================
# Progress Events
# =============================================================================


class ProgressEventData(TypedDict):
    """Type definition for a single logged progress value.

    Multiple events on the same date for the same habit are summed.
    """

    habit_id: HabitId
    date: DateInput
    value: float  # 1 for a yes/no completion
    id: NotRequired[str]
    note: NotRequired[str | None]


# =============================================================================
# Collection Type Aliases
# =============================================================================

HabitsCollection = list[HabitData]
ProgressEventsCollection = list[ProgressEventData]
