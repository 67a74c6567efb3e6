from __future__ import annotations

import copy
import logging

import pytest

from calendar_year import get_calendar_year

ENGLISH = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]


def test_calendar_year_english():
    result = get_calendar_year(1999)
    assert list(result) == ENGLISH
    assert result["january"]["count"] == 31
    assert result["february"]["count"] == 28
    for entry in result.values():
        assert entry["count"] == len(entry["collection"])


def test_calendar_year_collection_contents():
    result = get_calendar_year(2024)
    assert result["february"]["collection"][0] == "02/01/2024"
    assert result["february"]["collection"][-1] == "02/29/2024"


def test_calendar_year_spanish():
    result = get_calendar_year(2000, "es")
    assert list(result)[0] == "enero"
    assert list(result)[-1] == "diciembre"
    assert result["enero"]["count"] == 31
    assert result["febrero"]["count"] == 29
    # day strings follow the host locale, not the month-name locale
    assert result["enero"]["collection"][30] == "01/31/2000"


def test_invalid_year_returns_error_result(caplog):
    with caplog.at_level(logging.WARNING, logger="calendar_year"):
        result = get_calendar_year(1800)
    assert list(result) == ["error"]
    assert "1800" in result["error"]["body"]
    assert "between 1900 and 2100" in result["error"]["body"]
    assert "1800" in caplog.text


@pytest.mark.parametrize("year", [2101, "1999", None, 1999.5])
def test_invalid_year_never_raises(year):
    result = get_calendar_year(year)
    assert str(year) in result["error"]["body"]


def test_unknown_locale_raises():
    with pytest.raises(LookupError, match="Locale not found: fr"):
        get_calendar_year(2000, "fr")


def test_empty_locale_uses_default():
    assert list(get_calendar_year(2000, "")) == ENGLISH


def test_settings_drive_defaults():
    settings = {"default_locale": "es", "host_locale": "es"}
    result = get_calendar_year(2000, settings=settings)
    assert "enero" in result
    assert result["enero"]["collection"][30] == "31/01/2000"


def test_settings_date_options():
    settings = {"date_options": {"year": "numeric", "month": "long", "day": "numeric"}}
    result = get_calendar_year(1999, settings=settings)
    assert result["january"]["collection"][30] == "January 31, 1999"


def test_calendar_year_is_idempotent():
    first = get_calendar_year(2024, "es")
    snapshot = copy.deepcopy(first)
    first["enero"]["collection"].clear()
    assert get_calendar_year(2024, "es") == snapshot


def test_unknown_host_locale_warns_once(caplog):
    with caplog.at_level(logging.WARNING):
        result = get_calendar_year(1999, settings={"host_locale": "xx"})
    assert result["january"]["collection"][0] == "01/01/1999"
    warnings = [r for r in caplog.records if "Unsupported locale" in r.getMessage()]
    assert len(warnings) == 1


@pytest.mark.parametrize("locale, first", [("en", "january"), ("es-MX", "enero"), ("EN-gb", "january")])
def test_locale_tags_resolve_like_formatting(locale, first):
    assert list(get_calendar_year(2000, locale))[0] == first
