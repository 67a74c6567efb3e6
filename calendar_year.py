"""Whole-year calendar: day counts and formatted days for all 12 months."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from calendar_logic import get_days_in_month, list_days_in_month
from date_format import pick_locale
from locales import month_names
from settings import default_settings
from validation import MAX_YEAR, MIN_YEAR, is_valid_year

logger = logging.getLogger(__name__)


def get_calendar_year(year: int, locale: str | None = None, settings: Mapping | None = None) -> dict:
    """Return ``{month_name: {"count": n, "collection": [...]}}`` for a year.

    Keys are the lowercased month names of ``locale`` in calendar order.
    ``locale`` resolves like a formatting tag, so "en" means "en-US".
    The day strings are formatted for the settings' ``host_locale`` with
    its ``date_options``.

    An invalid year is not raised: the result is ``{"error": {"body": msg}}``
    instead, so callers check for the ``"error"`` key. A locale with no
    month names raises ``LookupError``.
    """
    merged = default_settings()
    if settings is not None:
        merged.update(settings)
    settings = merged

    if not is_valid_year(year):
        logger.warning("Rejected calendar year %r", year)
        return {
            "error": {
                "body": (
                    "The argument passed to `get_calendar_year('YYYY')` must be a valid year "
                    f"between {MIN_YEAR} and {MAX_YEAR}. You passed {year}."
                ),
            },
        }

    preferred = locale or settings["default_locale"]
    names = month_names(preferred)
    host = pick_locale(None, settings["host_locale"])

    result: dict[str, dict] = {}
    for month, name in enumerate(names, start=1):
        result[name.lower()] = {
            "count": get_days_in_month(year, month),
            "collection": list_days_in_month(
                year, month,
                options=settings["date_options"],
                host_locale=host,
            ),
        }
    logger.debug("Built calendar year %s for locale %s", year, preferred)
    return result
