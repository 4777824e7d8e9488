# File: utils/__init__.py
"""Pure Python utilities for habitstreaks.

Submodules:
    - dt_utils: Calendar arithmetic, date parsing, calendar grids
    - math_utils: Progress rounding, summation, percentages

Usage:
    from . import dt_utils
    from .math_utils import sum_progress
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
