# tests/test_formatter.py

from unittest.mock import Mock

import pytest

import caljalali
from caljalali import MappingLocale, MappingPreferences, MissingTranslation
from caljalali.core.types import GregorianDateArray
from caljalali.engines.formatter import format_timestamp, jalali_day_of_year, timestamp_to_date_array


def test_literal_scenario(locale, utc_ts):
    t = utc_ts(2023, 3, 21, 12)  # 1402-01-01
    assert format_timestamp(t, "%Y/%m/%d", 0, False, True, locale=locale) == "1402/01/01"


def test_fix_day_drops_only_day_padding(locale, utc_ts):
    t = utc_ts(2023, 3, 25, 12)  # 1402-01-05
    assert format_timestamp(t, "%Y/%m/%d", 0, True, True, locale=locale) == "1402/01/5"
    assert format_timestamp(t, "%Y/%m/%d", 0, False, True, locale=locale) == "1402/01/05"


def test_names_and_short_year(locale, utc_ts):
    t = utc_ts(2023, 3, 21, 12)
    out = format_timestamp(t, "%a %A %b %B %y", 0, True, True, locale=locale)
    assert out == "Tuesday Tuesday Farvardin Farvardin 02"


@pytest.mark.parametrize("hour,expected", [(0, "AM am"), (11, "AM am"), (12, "PM pm"), (23, "PM pm")])
def test_am_pm(hour, expected, locale, utc_ts):
    t = utc_ts(2023, 3, 21, hour)
    assert format_timestamp(t, "%p %P", 0, True, True, locale=locale) == expected


def test_residual_tokens_use_gregorian_clock(locale, utc_ts):
    t = utc_ts(2023, 3, 20, 22, 0)
    out = format_timestamp(t, "%Y/%m/%d %H:%M", 3.5, False, True, locale=locale)
    assert out == "1402/01/01 01:30"


def test_empty_template_uses_locale_default(locale, utc_ts):
    t = utc_ts(2023, 3, 21, 12)
    assert format_timestamp(t, "", 0, True, True, locale=locale) == "Tuesday, 1 Farvardin 1402, 12:00 PM"


def test_site_nofixday_forces_padding(locale, utc_ts):
    t = utc_ts(2023, 3, 25, 12)
    site = MappingPreferences({"nofixday": True})
    assert format_timestamp(t, "%d", 0, True, True, locale=locale, site=site) == "05"


def test_missing_translation_is_fatal(utc_ts):
    strings = {"am": "am", "am_caps": "AM", "pm_caps": "PM"}
    with pytest.raises(MissingTranslation):
        format_timestamp(utc_ts(2023, 3, 21), "%Y", 0, locale=MappingLocale(strings))


def test_delegates_to_service(locale):
    service = Mock()
    service.timestamp_to_date_array.return_value = GregorianDateArray(
        year=2024, month=3, day=20, hour=8, minute=15, second=0, weekday_index=3, yday=80,
    )
    service.format.return_value = "rendered"

    out = format_timestamp(1000, "%d %B %H", "tz", False, True, locale=locale, service=service)

    assert out == "rendered"
    service.timestamp_to_date_array.assert_called_once_with(1000, "tz")
    service.format.assert_called_once_with(1000, "01 Farvardin %H", "tz", False, True)


def test_timestamp_to_date_array(locale, utc_ts):
    jd = timestamp_to_date_array(utc_ts(2025, 3, 20, 12, 30), 0, locale)
    assert (jd.year, jd.month, jd.day) == (1403, 12, 30)
    assert (jd.hour, jd.minute) == (12, 30)
    assert jd.yday == 366
    assert jd.month_name == "Esfand"
    assert jd.weekday_index == 4
    assert jd.weekday_name == "Thursday"


def test_jalali_day_of_year():
    assert jalali_day_of_year(1, 1) == 1
    assert jalali_day_of_year(7, 1) == 187
    assert jalali_day_of_year(12, 29) == 365


def test_format_alias():
    assert caljalali.format is format_timestamp
