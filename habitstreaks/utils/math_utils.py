# File: utils/math_utils.py
"""Math and calculation utilities for habitstreaks.

Pure Python math functions for progress values.

Functions:
    - round_progress: Consistent rounding to configured precision
    - sum_progress: Drift-free summation of progress values
    - ceil_progress: Round up while tolerating float noise
    - calculate_percentage: Progress percentage calculations
    - clamp: Bound a value to a range
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
import math

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# ==============================================================================

# Default float precision for progress rounding
DATA_FLOAT_PRECISION = 4


# ==============================================================================
# Progress Arithmetic Functions
# ==============================================================================


def round_progress(value: float, precision: int = DATA_FLOAT_PRECISION) -> float:
    """Round a progress value to the configured precision.

    Integral results are returned as plain ints so COUNT and YES_NO habits
    keep integer totals.

    Examples:
        round_progress(0.1 + 0.2) → 0.3
        round_progress(3.0) → 3
        round_progress(7.25) → 7.25
    """
    rounded = round(value, precision)
    if float(rounded).is_integer():
        return int(rounded)
    return rounded


def sum_progress(
    values: Iterable[float],
    precision: int = DATA_FLOAT_PRECISION,
) -> float:
    """Sum progress values without accumulating float error.

    Examples:
        sum_progress([0.1, 0.2]) → 0.3
        sum_progress([1, 1, 1]) → 3
        sum_progress([]) → 0
    """
    return round_progress(math.fsum(values), precision)


def ceil_progress(value: float, precision: int = DATA_FLOAT_PRECISION) -> int:
    """Round a value up to the next integer.

    The value is rounded to `precision` first so float noise such as
    2.0000000001 does not bump the result to 3.

    Examples:
        ceil_progress(7 * 2 / 7) → 2
        ceil_progress(3 * 3 / 7) → 2
    """
    return math.ceil(round(value, precision))


def calculate_percentage(
    current: float,
    target: float,
    precision: int = 2,
) -> float:
    """Calculate progress percentage with proper rounding.

    Returns:
        Percentage with proper rounding, or 0.0 if target is 0

    Examples:
        calculate_percentage(50, 100) → 50.0
        calculate_percentage(1, 3) → 33.33
        calculate_percentage(5, 0) → 0.0  # Division by zero protection
    """
    if target <= 0:
        return 0.0
    return round((current / target) * 100, precision)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Examples:
        clamp(150, 0, 100) → 100
        clamp(-10, 0, 100) → 0
    """
    return max(min_val, min(value, max_val))
