# tests/test_gregorian.py

from datetime import timedelta, timezone

from caljalali.engines.gregorian import StdlibGregorianService


def test_unix_epoch(service):
    g = service.timestamp_to_date_array(0, 99)
    assert (g.year, g.month, g.day, g.hour, g.minute) == (1970, 1, 1, 0, 0)
    assert g.weekday_index == 4  # Thursday
    assert g.yday == 1


def test_numeric_offsets(service, utc_ts):
    t = utc_ts(2023, 3, 20, 22, 0)
    g = service.timestamp_to_date_array(t, 3.5)
    assert (g.year, g.month, g.day, g.hour, g.minute) == (2023, 3, 21, 1, 30)
    assert service.timestamp_to_date_array(t, "3.5") == g
    assert service.timestamp_to_date_array(t, -5).day == 20


def test_tzinfo_and_default(utc_ts):
    tz = timezone(timedelta(hours=-8))
    svc = StdlibGregorianService(default_tz=tz)
    t = utc_ts(2023, 3, 21, 4, 0)
    assert svc.timestamp_to_date_array(t).day == 20
    assert svc.timestamp_to_date_array(t, None).day == 20
    assert svc.timestamp_to_date_array(t, "99").day == 20
    assert svc.timestamp_to_date_array(t, timezone.utc).day == 21


def test_format_fix_day_and_hour(service, utc_ts):
    t = utc_ts(2023, 3, 5, 9, 7)
    assert service.format(t, "%d %I:%M", 0, False, False) == "05 09:07"
    assert service.format(t, "%d %I:%M", 0, True, True) == "5 9:07"
    assert service.format(utc_ts(2023, 3, 5, 0, 0), "%I", 0, True, True) == "12"
