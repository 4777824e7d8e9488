# File: utils/dt_utils.py
"""Calendar arithmetic for habitstreaks.

Pure Python date functions. Every value here is a timezone-naive calendar day
(`datetime.date`): two values are the "same day" iff their normalized
YYYY-MM-DD strings match. Uses standard library datetime/zoneinfo and dateutil.

Weekday indices follow the habit model: 0=Sunday .. 6=Saturday. Note that
this differs from `date.weekday()` (0=Monday) and from dateutil's weekday
objects; conversions happen only inside this module.

Functions:
    - set_default_timezone / get_default_timezone: Collaborator clock config
    - dt_today_local: Today's date in the configured timezone
    - dt_parse_date: Normalize date/datetime/ISO string to `datetime.date`
    - dt_normalize: Normalized YYYY-MM-DD string
    - dt_add_days / dt_days_between: Whole-day arithmetic
    - dt_weekday_index: Sunday-based weekday index
    - dt_week_start / dt_week_end: Week bounds for a configurable start day
    - dt_month_start / dt_month_end: Calendar month bounds
    - dt_iter_days: Inclusive day range iterator
    - dt_dates_in_month / dt_calendar_grid: Month listings for UI rendering
    - dt_is_same_day: Day equality across input types
    - dt_format_date: Display formatting (short, long, iso)
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime, timedelta
import logging
from zoneinfo import ZoneInfo

# Third-party date utilities
from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta
from dateutil.rrule import DAILY, rrule

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# These mirror const.py values but are defined locally for purity.
# ==============================================================================

# Default timezone for the collaborator clock - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

# Monday-start weeks for interval aggregation
DEFAULT_WEEK_START_DAY = 1

# Sunday-first calendar grids, 6 rows of 7 days
CALENDAR_GRID_WEEK_START_DAY = 0
CALENDAR_GRID_DAYS = 42

# Display formats
DATE_FORMAT_ISO = "iso"
DATE_FORMAT_LONG = "long"
DATE_FORMAT_SHORT = "short"

# dateutil weekday objects indexed by Sunday-based weekday index
_RELATIVEDELTA_WEEKDAYS = (SU, MO, TU, WE, TH, FR, SA)


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the default timezone used by dt_today_local().

    Call this once during application setup with the user's timezone.

    Args:
        tz: ZoneInfo object representing the default timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Get the current default timezone.

    Returns:
        The configured default timezone (ZoneInfo object)
    """
    return DEFAULT_TIME_ZONE


def dt_today_local(tz: ZoneInfo | None = None) -> date:
    """Return today's date in local timezone as a `datetime.date`.

    The engines never call this: callers read the clock here and pass the
    result in as `today` / `through_date`.

    Args:
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        Today's date in the specified timezone.
    """
    tz_info = tz or DEFAULT_TIME_ZONE
    return datetime.now(tz_info).date()


# ==============================================================================
# Parsing & Normalization
# ==============================================================================


def dt_parse_date(value: date | datetime | str) -> date:
    """Normalize a date-like input into a `datetime.date`.

    Accepts:
    - `datetime.date` (returned unchanged)
    - `datetime.datetime` (its wall-clock date; tzinfo is ignored)
    - "2026-02-23" or "2026-02-23T00:00:00.000Z" (only the date part is used)

    Args:
        value: Date, datetime or ISO string

    Returns:
        The calendar day.

    Raises:
        ValueError: If a string is not an ISO date.
        TypeError: If the value is not a date, datetime or string.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        date_part = value.strip().split("T", 1)[0]
        try:
            return date.fromisoformat(date_part)
        except ValueError as err:
            raise ValueError(f"Invalid date string: {value!r}") from err
    raise TypeError(f"Unsupported date value: {value!r} ({type(value).__name__})")


def dt_normalize(value: date | datetime | str) -> str:
    """Return the normalized YYYY-MM-DD string for a date-like input."""
    return dt_parse_date(value).isoformat()


# ==============================================================================
# Day Arithmetic
# ==============================================================================


def dt_add_days(day: date, days: int) -> date:
    """Return `day` shifted by `days` whole days (negative moves back)."""
    return day + timedelta(days=days)


def dt_days_between(start: date | str, end: date | str) -> int:
    """Return `end - start` in whole days.

    Examples:
        dt_days_between(date(2026, 1, 1), date(2026, 1, 8)) → 7
        dt_days_between("2026-01-08", "2026-01-01") → -7
    """
    return (dt_parse_date(end) - dt_parse_date(start)).days


def dt_weekday_index(day: date) -> int:
    """Return the weekday index with 0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def dt_iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from `start` through `end` inclusive.

    Yields nothing when `end` is before `start`.
    """
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


# ==============================================================================
# Period Boundaries
# ==============================================================================


def dt_week_start(day: date, week_start_day: int = DEFAULT_WEEK_START_DAY) -> date:
    """Return the first day of the week containing `day`.

    Args:
        day: Any day in the week
        week_start_day: Weekday the week starts on (0=Sunday, 1=Monday, ...)

    Returns:
        The most recent `week_start_day` on or before `day`.

    Example:
        dt_week_start(date(2026, 2, 26)) → date(2026, 2, 23)  # Thu → Mon
    """
    anchor = _RELATIVEDELTA_WEEKDAYS[week_start_day % 7]
    return day + relativedelta(weekday=anchor(-1))


def dt_week_end(day: date, week_start_day: int = DEFAULT_WEEK_START_DAY) -> date:
    """Return the last day of the week containing `day`."""
    return dt_week_start(day, week_start_day) + timedelta(days=6)


def dt_month_start(day: date) -> date:
    """Return the first day of the month containing `day`."""
    return day + relativedelta(day=1)


def dt_month_end(day: date) -> date:
    """Return the last day of the month containing `day`.

    relativedelta clamps day=31 to the month length (Feb → 28/29).
    """
    return day + relativedelta(day=31)


# ==============================================================================
# Month Listings
# ==============================================================================


def dt_dates_in_month(year: int, month: int) -> list[date]:
    """Return every day of a month.

    Args:
        year: Four-digit year
        month: Month number, 1-12

    Returns:
        Days 1..N of the month in order.
    """
    first = date(year, month, 1)
    last = dt_month_end(first)
    return [
        occurrence.date()
        for occurrence in rrule(
            DAILY,
            dtstart=datetime.combine(first, datetime.min.time()),
            until=datetime.combine(last, datetime.min.time()),
        )
    ]


def dt_calendar_grid(year: int, month: int) -> list[date]:
    """Return the fixed 42-cell calendar grid for a month.

    The grid starts on the Sunday on or before the 1st and is padded with
    days from the adjacent months so it always spans six full weeks.

    Args:
        year: Four-digit year
        month: Month number, 1-12

    Returns:
        42 consecutive days.

    Example:
        dt_calendar_grid(2026, 2)[0] → date(2026, 2, 1)  # Feb 1 2026 is a Sunday
    """
    first = date(year, month, 1)
    grid_start = dt_week_start(first, CALENDAR_GRID_WEEK_START_DAY)
    return [
        occurrence.date()
        for occurrence in rrule(
            DAILY,
            dtstart=datetime.combine(grid_start, datetime.min.time()),
            count=CALENDAR_GRID_DAYS,
        )
    ]


# ==============================================================================
# Comparison & Formatting
# ==============================================================================


def dt_is_same_day(first: date | datetime | str, second: date | datetime | str) -> bool:
    """Return True when both inputs normalize to the same YYYY-MM-DD string."""
    return dt_normalize(first) == dt_normalize(second)


def dt_format_date(
    value: date | datetime | str,
    style: str = DATE_FORMAT_SHORT,
) -> str:
    """Format a day for display (English labels).

    Args:
        value: Date-like input
        style: DATE_FORMAT_SHORT, DATE_FORMAT_LONG or DATE_FORMAT_ISO

    Returns:
        Formatted string. Unknown styles fall back to the short format.

    Examples:
        dt_format_date("2026-02-23") → "Feb 23"
        dt_format_date("2026-02-23", "long") → "Monday, February 23, 2026"
        dt_format_date("2026-02-23", "iso") → "2026-02-23"
    """
    day = dt_parse_date(value)

    if style == DATE_FORMAT_ISO:
        return day.isoformat()
    if style == DATE_FORMAT_LONG:
        return f"{day:%A}, {day:%B} {day.day}, {day.year}"
    if style != DATE_FORMAT_SHORT:
        _LOGGER.debug("dt_format_date: Unknown style '%s', using short", style)
    return f"{day:%b} {day.day}"
