"""Range checks for year, month and day inputs. Pure, never raise."""

import math
from numbers import Real

MIN_YEAR = 1900
MAX_YEAR = 2100


def _is_number(value: object) -> bool:
    # bool is a Real subclass but never a valid calendar number
    return isinstance(value, Real) and not isinstance(value, bool) and not math.isnan(value)


def is_valid_year(year: object) -> bool:
    """Return True for a 4-digit year between 1900 and 2100 inclusive."""
    if not _is_number(year) or not math.isfinite(year) or year != int(year):
        return False
    y = int(year)
    return len(str(y)) == 4 and MIN_YEAR <= y <= MAX_YEAR


def is_valid_month(month: object) -> bool:
    """Return True for a month number between 1 and 12 inclusive.

    Fractional values in range pass; callers truncate them.
    """
    return _is_number(month) and 1 <= month <= 12


def is_valid_day(day: object) -> bool:
    """Return True for a day number between 1 and 31 inclusive.

    The bound does not depend on the month: day 31 passes even for a
    30-day month, and the formatter rolls it over into the next month.
    """
    return _is_number(day) and 1 <= day <= 31
