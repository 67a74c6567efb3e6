"""Pure per-month calculations: day counts and formatted day lists."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, timedelta

from date_format import format_date, pick_locale
from locales import DEFAULT_LOCALE
from validation import is_valid_month, is_valid_year


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def _last_day(year: int, month: int) -> int:
    # "Day 0" of the following month is the last day of this one
    y, m = next_month(year, month)
    return (date(y, m, 1) - timedelta(days=1)).day


def get_days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month, leap years included."""
    if not is_valid_year(year) or not is_valid_month(month):
        raise ValueError(
            "Invalid year or month. Year must be between 1900 and 2100, "
            "and month must be between 1 and 12."
        )
    return _last_day(int(year), int(month))


def list_days_in_month(
    year: int,
    month: int,
    locale: str | None = None,
    options: Mapping[str, str] | None = None,
    host_locale: str = DEFAULT_LOCALE,
) -> list[str]:
    """Return one formatted date string per day of the month, in day order.

    ``locale`` and ``host_locale`` are resolved once for the whole month,
    then every day goes through :func:`date_format.format_date` with
    ``options``.
    """
    if not is_valid_month(month):
        raise ValueError(f"Invalid month: {month}. The month must be an integer between 1 and 12.")
    if not is_valid_year(year):
        raise ValueError(
            f"Invalid year: {year}. The year must be a valid year between 1900 and 2100."
        )

    key = pick_locale(locale, host_locale)
    count = _last_day(int(year), int(month))
    return [
        format_date(month, day, year, key, options)
        for day in range(1, count + 1)
    ]
