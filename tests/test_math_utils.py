"""Tests for math_utils progress arithmetic."""

from __future__ import annotations

from habitstreaks.utils.math_utils import (
    calculate_percentage,
    ceil_progress,
    clamp,
    round_progress,
    sum_progress,
)


class TestRoundProgress:
    """Tests for round_progress."""

    def test_removes_float_noise(self) -> None:
        """0.1 + 0.2 rounds to 0.3."""
        assert round_progress(0.1 + 0.2) == 0.3

    def test_integral_values_become_int(self) -> None:
        """Whole numbers come back as int."""
        result = round_progress(3.0)
        assert result == 3
        assert isinstance(result, int)

    def test_keeps_fraction(self) -> None:
        """Real fractions are preserved."""
        assert round_progress(7.25) == 7.25


class TestSumProgress:
    """Tests for sum_progress."""

    def test_no_drift(self) -> None:
        """Repeated decimal additions stay exact at the configured precision."""
        assert sum_progress([0.1] * 10) == 1
        assert sum_progress([0.1, 0.2]) == 0.3

    def test_empty(self) -> None:
        """Summing nothing is 0."""
        assert sum_progress([]) == 0

    def test_generator_input(self) -> None:
        """Any iterable is accepted."""
        assert sum_progress(value for value in (1, 2, 3)) == 6


class TestCeilProgress:
    """Tests for ceil_progress."""

    def test_rounds_up(self) -> None:
        """Fractions round up."""
        assert ceil_progress(3 * 3 / 7) == 2
        assert ceil_progress(1 / 7) == 1

    def test_tolerates_float_noise(self) -> None:
        """Values a hair above an integer do not jump to the next one."""
        assert ceil_progress(7 * 2 / 7) == 2
        assert ceil_progress(2.00000000001) == 2


class TestPercentageAndClamp:
    """Tests for calculate_percentage and clamp."""

    def test_percentage(self) -> None:
        """Percentages are rounded to two places."""
        assert calculate_percentage(50, 100) == 50.0
        assert calculate_percentage(1, 3) == 33.33

    def test_percentage_zero_target(self) -> None:
        """A zero target never divides."""
        assert calculate_percentage(5, 0) == 0.0

    def test_clamp(self) -> None:
        """Values are bounded on both sides."""
        assert clamp(150, 0, 100) == 100
        assert clamp(-10, 0, 100) == 0
        assert clamp(42, 0, 100) == 42
