"""Locale-aware rendering of single calendar dates."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, timedelta

from locales import DEFAULT_LOCALE, LOCALES, resolve_locale
from validation import is_valid_day, is_valid_month, is_valid_year

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS: dict[str, str] = {"year": "numeric", "month": "2-digit", "day": "2-digit"}

_OPTION_VALUES: dict[str, tuple[str, ...]] = {
    "weekday": ("short", "long"),
    "year": ("numeric", "2-digit"),
    "month": ("numeric", "2-digit", "short", "long"),
    "day": ("numeric", "2-digit"),
}


def format_date(
    month: int,
    day: int,
    year: int,
    locale: str | None = None,
    options: Mapping[str, str] | None = None,
    host_locale: str = DEFAULT_LOCALE,
) -> str:
    """Format a date for a locale.

    ``locale=None`` formats for ``host_locale``. ``options`` picks the
    fields and their style (see ``_OPTION_VALUES``); ``None`` means
    ``DEFAULT_OPTIONS``.

    The day is only checked against 1-31, so a day past the end of the
    month rolls over: ``format_date(4, 31, 2023)`` is May 1st.
    """
    if not is_valid_month(month):
        raise ValueError("Invalid month. Month must be between 1 and 12.")
    if not is_valid_year(year):
        raise ValueError("Invalid year. Year must be between 1900 and 2100.")
    if not is_valid_day(day):
        raise ValueError("Invalid day. The day must be between 1 and 31.")
    key = pick_locale(locale, host_locale)

    # Fractional parts are truncated
    d = date(int(year), int(month), 1) + timedelta(days=int(day) - 1)
    fields = _check_options(DEFAULT_OPTIONS if options is None else options)
    return _render(d, LOCALES[key], fields)


def pick_locale(locale: str | None, host_locale: str = DEFAULT_LOCALE) -> str:
    """Return the LOCALES key to format with.

    ``None`` means ``host_locale``. A tag that resolves to nothing falls
    back to ``host_locale`` (or the default locale) with a warning.
    """
    if locale is not None and not isinstance(locale, str):
        raise TypeError("Invalid locale. The locale must be a string.")
    if locale is None:
        locale = host_locale
    key = resolve_locale(locale)
    if key is not None:
        return key
    fallback = resolve_locale(host_locale) or DEFAULT_LOCALE
    logger.warning("Unsupported locale %r, formatting as %s", locale, fallback)
    return fallback


def _check_options(options: Mapping[str, str]) -> dict[str, str]:
    if not isinstance(options, Mapping):
        raise TypeError("Invalid options. The options must be a mapping.")
    for key, value in options.items():
        allowed = _OPTION_VALUES.get(key)
        if allowed is None:
            raise ValueError(f"Invalid option: {key!r}.")
        if value not in allowed:
            raise ValueError(
                f"Invalid value {value!r} for option {key!r}. Expected one of {', '.join(allowed)}."
            )
    fields = dict(options)
    if not any(k in fields for k in ("weekday", "year", "month", "day")):
        fields.update(year="numeric", month="numeric", day="numeric")
    return fields


def _render(d: date, names: dict, fields: dict[str, str]) -> str:
    parts: dict[str, str] = {}
    if "year" in fields:
        parts["year"] = str(d.year) if fields["year"] == "numeric" else f"{d.year % 100:02d}"
    if "day" in fields:
        parts["day"] = str(d.day) if fields["day"] == "numeric" else f"{d.day:02d}"

    textual = fields.get("month") in ("short", "long")
    if "month" in fields:
        style = fields["month"]
        if style == "long":
            parts["month"] = names["months"][d.month - 1]
        elif style == "short":
            parts["month"] = names["months_short"][d.month - 1]
        else:
            parts["month"] = str(d.month) if style == "numeric" else f"{d.month:02d}"

    if textual and len(parts) == 3:
        body = names["text"].format(**parts)
    elif textual and set(parts) == {"month", "day"}:
        body = names["month_day"].format(**parts)
    elif textual and set(parts) == {"month", "year"}:
        body = names["month_year"].format(**parts)
    else:
        sep = " " if textual else "/"
        body = sep.join(parts[f] for f in names["order"] if f in parts)

    if "weekday" not in fields:
        return body
    table = names["weekdays"] if fields["weekday"] == "long" else names["weekdays_short"]
    weekday = table[d.weekday()]
    return f"{weekday}, {body}" if body else weekday
