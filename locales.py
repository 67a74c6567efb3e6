"""Month and weekday names for the supported locales."""

from __future__ import annotations

# --- name tables ------------------------------------------------------------

_EN_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
_EN_MONTHS_SHORT = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]
_EN_WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
_EN_WEEKDAYS_SHORT = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

_ES_MONTHS = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]
_ES_MONTHS_SHORT = [
    "ene", "feb", "mar", "abr", "may", "jun",
    "jul", "ago", "sept", "oct", "nov", "dic",
]
_ES_WEEKDAYS = ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"]
_ES_WEEKDAYS_SHORT = ["lun", "mar", "mié", "jue", "vie", "sáb", "dom"]


# --- locale registry: id -> names + layout ----------------------------------
#
# "order" is the field order of all-numeric dates. Once the month is spelled
# out, "text" lays out day, month and year, "month_day" and "month_year" the
# two-field dates.

LOCALES: dict[str, dict] = {
    "en-US": {
        "months": _EN_MONTHS,
        "months_short": _EN_MONTHS_SHORT,
        "weekdays": _EN_WEEKDAYS,
        "weekdays_short": _EN_WEEKDAYS_SHORT,
        "order": ("month", "day", "year"),
        "text": "{month} {day}, {year}",
        "month_day": "{month} {day}",
        "month_year": "{month} {year}",
    },
    "en-GB": {
        "months": _EN_MONTHS,
        "months_short": _EN_MONTHS_SHORT,
        "weekdays": _EN_WEEKDAYS,
        "weekdays_short": _EN_WEEKDAYS_SHORT,
        "order": ("day", "month", "year"),
        "text": "{day} {month} {year}",
        "month_day": "{day} {month}",
        "month_year": "{month} {year}",
    },
    "es": {
        "months": _ES_MONTHS,
        "months_short": _ES_MONTHS_SHORT,
        "weekdays": _ES_WEEKDAYS,
        "weekdays_short": _ES_WEEKDAYS_SHORT,
        "order": ("day", "month", "year"),
        "text": "{day} de {month} de {year}",
        "month_day": "{day} de {month}",
        "month_year": "{month} de {year}",
    },
}

DEFAULT_LOCALE = "en-US"

# Bare language subtags map to one regional table
_LANGUAGE_DEFAULTS = {
    "en": "en-US",
    "es": "es",
}


def month_names(locale: str) -> list[str]:
    """Return the 12 month names of a locale, January first.

    Tags resolve like they do for formatting, so "es-MX" gives Spanish.
    """
    key = resolve_locale(locale) if isinstance(locale, str) else None
    if key is None:
        raise LookupError(f"Locale not found: {locale}")
    return list(LOCALES[key]["months"])


def resolve_locale(tag: str) -> str | None:
    """Map a locale tag onto a LOCALES key, or None if nothing matches.

    Exact keys win; otherwise the language subtag decides, so "es-MX"
    uses "es" and "en" uses "en-US".
    """
    if tag in LOCALES:
        return tag
    for key in LOCALES:
        if key.lower() == tag.lower():
            return key
    language = tag.replace("_", "-").split("-", 1)[0].lower()
    return _LANGUAGE_DEFAULTS.get(language)
