"""Tests for dt_utils calendar arithmetic.

Tests cover:
- Parsing and normalization (date, datetime, ISO strings, malformed input)
- Day arithmetic and weekday indices
- Week and month boundaries
- Month listings and the 42-cell calendar grid
- Formatting and the collaborator clock
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from habitstreaks.utils import dt_utils
from habitstreaks.utils.dt_utils import (
    dt_add_days,
    dt_calendar_grid,
    dt_dates_in_month,
    dt_days_between,
    dt_format_date,
    dt_is_same_day,
    dt_iter_days,
    dt_month_end,
    dt_month_start,
    dt_normalize,
    dt_parse_date,
    dt_today_local,
    dt_week_end,
    dt_week_start,
    dt_weekday_index,
)


@pytest.fixture
def restore_timezone() -> Iterator[None]:
    """Restore the default timezone after a test changes it."""
    original = dt_utils.get_default_timezone()
    yield
    dt_utils.set_default_timezone(original)


class TestParseDate:
    """Tests for dt_parse_date and dt_normalize."""

    def test_date_is_returned_unchanged(self) -> None:
        """A date object should pass straight through."""
        assert dt_parse_date(date(2026, 2, 23)) == date(2026, 2, 23)

    def test_datetime_uses_wall_clock_date(self) -> None:
        """A datetime should collapse to its own calendar date."""
        value = datetime(2026, 2, 23, 23, 30, tzinfo=UTC)
        assert dt_parse_date(value) == date(2026, 2, 23)

    def test_iso_date_string(self) -> None:
        """Plain ISO dates should parse."""
        assert dt_parse_date("2026-02-23") == date(2026, 2, 23)

    def test_iso_datetime_string_keeps_date_part(self) -> None:
        """Only the date part of an ISO datetime string is used."""
        assert dt_parse_date("2026-02-23T00:00:00.000Z") == date(2026, 2, 23)

    def test_malformed_string_raises(self) -> None:
        """Malformed strings fail fast."""
        with pytest.raises(ValueError, match="Invalid date string"):
            dt_parse_date("2026-13-45")

    def test_unsupported_type_raises(self) -> None:
        """Non-date values are rejected."""
        with pytest.raises(TypeError):
            dt_parse_date(20260223)  # type: ignore[arg-type]

    def test_normalize(self) -> None:
        """Normalized form is YYYY-MM-DD."""
        assert dt_normalize("2026-02-03T12:00:00Z") == "2026-02-03"
        assert dt_normalize(date(2026, 2, 3)) == "2026-02-03"


class TestDayArithmetic:
    """Tests for day arithmetic helpers."""

    def test_add_days_forward_and_back(self) -> None:
        """Adding days should cross month boundaries."""
        assert dt_add_days(date(2026, 1, 30), 3) == date(2026, 2, 2)
        assert dt_add_days(date(2026, 3, 1), -1) == date(2026, 2, 28)

    def test_days_between(self) -> None:
        """days_between is end minus start in whole days."""
        assert dt_days_between(date(2026, 1, 1), date(2026, 1, 8)) == 7
        assert dt_days_between("2026-01-08", "2026-01-01") == -7
        assert dt_days_between("2026-01-01", "2026-01-01T23:59:00Z") == 0

    def test_weekday_index_is_sunday_based(self) -> None:
        """0=Sunday through 6=Saturday."""
        assert dt_weekday_index(date(2026, 2, 1)) == 0  # Sunday
        assert dt_weekday_index(date(2026, 2, 2)) == 1  # Monday
        assert dt_weekday_index(date(2026, 2, 7)) == 6  # Saturday

    def test_iter_days_inclusive(self) -> None:
        """Iteration includes both ends."""
        days = list(dt_iter_days(date(2026, 2, 27), date(2026, 3, 2)))
        assert days == [
            date(2026, 2, 27),
            date(2026, 2, 28),
            date(2026, 3, 1),
            date(2026, 3, 2),
        ]

    def test_iter_days_empty_when_reversed(self) -> None:
        """No days when end is before start."""
        assert list(dt_iter_days(date(2026, 3, 2), date(2026, 3, 1))) == []


class TestPeriodBoundaries:
    """Tests for week and month bounds."""

    def test_week_start_monday_default(self) -> None:
        """Default weeks start on Monday."""
        assert dt_week_start(date(2026, 2, 26)) == date(2026, 2, 23)  # Thu
        assert dt_week_start(date(2026, 2, 23)) == date(2026, 2, 23)  # Mon
        assert dt_week_start(date(2026, 3, 1)) == date(2026, 2, 23)  # Sun

    def test_week_start_sunday(self) -> None:
        """Sunday-start weeks anchor on the previous Sunday."""
        assert dt_week_start(date(2026, 2, 26), 0) == date(2026, 2, 22)
        assert dt_week_start(date(2026, 2, 22), 0) == date(2026, 2, 22)

    def test_week_end(self) -> None:
        """Week end is six days after week start."""
        assert dt_week_end(date(2026, 2, 26)) == date(2026, 3, 1)
        assert dt_week_end(date(2026, 2, 26), 0) == date(2026, 2, 28)

    def test_week_crosses_year_boundary(self) -> None:
        """Dec 31 2025 (Wed) belongs to the week starting Mon Dec 29."""
        assert dt_week_start(date(2025, 12, 31)) == date(2025, 12, 29)
        assert dt_week_end(date(2025, 12, 31)) == date(2026, 1, 4)

    def test_month_bounds(self) -> None:
        """Month bounds clamp to the month length."""
        assert dt_month_start(date(2026, 2, 14)) == date(2026, 2, 1)
        assert dt_month_end(date(2026, 2, 14)) == date(2026, 2, 28)
        assert dt_month_end(date(2024, 2, 10)) == date(2024, 2, 29)
        assert dt_month_end(date(2025, 12, 31)) == date(2025, 12, 31)


class TestMonthListings:
    """Tests for dt_dates_in_month and dt_calendar_grid."""

    def test_dates_in_month(self) -> None:
        """Every day of the month, in order."""
        days = dt_dates_in_month(2026, 2)
        assert len(days) == 28
        assert days[0] == date(2026, 2, 1)
        assert days[-1] == date(2026, 2, 28)

    def test_dates_in_leap_february(self) -> None:
        """Leap years include Feb 29."""
        assert dt_dates_in_month(2024, 2)[-1] == date(2024, 2, 29)

    def test_grid_month_starting_on_sunday(self) -> None:
        """February 2026 starts on Sunday, so no leading padding."""
        grid = dt_calendar_grid(2026, 2)
        assert len(grid) == 42
        assert grid[0] == date(2026, 2, 1)
        assert grid[-1] == date(2026, 3, 14)

    def test_grid_pads_with_previous_month(self) -> None:
        """January 2026 starts on Thursday: pad back to Sunday Dec 28."""
        grid = dt_calendar_grid(2026, 1)
        assert len(grid) == 42
        assert grid[0] == date(2025, 12, 28)
        assert grid[4] == date(2026, 1, 1)
        assert grid[-1] == date(2026, 2, 7)

    def test_grid_rows_start_on_sunday(self) -> None:
        """Every row of the grid starts on a Sunday."""
        grid = dt_calendar_grid(2026, 5)
        assert all(dt_weekday_index(grid[row * 7]) == 0 for row in range(6))


class TestComparisonAndFormatting:
    """Tests for dt_is_same_day and dt_format_date."""

    def test_same_day_across_types(self) -> None:
        """Same calendar day regardless of representation."""
        assert dt_is_same_day(date(2026, 2, 23), "2026-02-23T10:00:00Z")
        assert not dt_is_same_day("2026-02-23", "2026-02-24")

    def test_format_short(self) -> None:
        """Short format is month abbreviation and day."""
        assert dt_format_date("2026-02-03") == "Feb 3"

    def test_format_long(self) -> None:
        """Long format spells out weekday and month."""
        assert dt_format_date("2026-02-23", "long") == "Monday, February 23, 2026"

    def test_format_iso(self) -> None:
        """ISO format is the normalized date."""
        assert dt_format_date(date(2026, 2, 23), "iso") == "2026-02-23"

    def test_unknown_style_falls_back_to_short(self) -> None:
        """Unknown styles use the short format."""
        assert dt_format_date("2026-02-23", "fancy") == "Feb 23"


class TestClock:
    """Tests for the collaborator clock helpers."""

    def test_today_local_returns_date(self) -> None:
        """dt_today_local returns a plain date."""
        today = dt_today_local(ZoneInfo("UTC"))
        assert isinstance(today, date)
        assert not isinstance(today, datetime)

    @pytest.mark.usefixtures("restore_timezone")
    def test_set_default_timezone(self) -> None:
        """The default timezone can be configured."""
        berlin = ZoneInfo("Europe/Berlin")
        dt_utils.set_default_timezone(berlin)
        assert dt_utils.get_default_timezone() is berlin
