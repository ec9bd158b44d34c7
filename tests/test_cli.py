# tests/test_cli.py

import pytest

from caljalali.cli import main


def test_to_jalali(capsys):
    assert main(["to-jalali", "2023-03-21"]) == 0
    assert capsys.readouterr().out.strip() == "1402-01-01"


def test_bare_date_shorthand(capsys):
    assert main(["2024-03-20"]) == 0
    assert capsys.readouterr().out.strip() == "1403-01-01"


def test_to_gregorian_with_weekday(capsys):
    assert main(["to-gregorian", "1403-12-30", "--weekday"]) == 0
    assert capsys.readouterr().out.strip() == "2025-03-20 4"


@pytest.mark.parametrize("argv", [["to-gregorian", "1402-12-30"], ["to-jalali", "2023-02-30"], ["to-jalali", "x-y-z"]])
def test_invalid_dates_exit(argv):
    with pytest.raises(SystemExit):
        main(argv)


def test_leap_years(capsys):
    assert main(["leap-years", "--start-year", "1400", "--end-year", "1410"]) == 0
    out = capsys.readouterr().out
    assert "1403  pos=28  nowruz=2024-03-20" in out
    assert "1408" in out
    assert "2 leap years in 11 years" in out


def test_new_years(capsys):
    assert main(["new-years", "--from-year", "1402", "--to-year", "1404"]) == 0
    out = capsys.readouterr().out
    for d in ("2023-03-21", "2024-03-20", "2025-03-21"):
        assert d in out


def test_month_grid(capsys):
    assert main(["month", "1403", "1"]) == 0
    out = capsys.readouterr().out
    assert "Jalali month  1403-01" in out
    assert out.splitlines()[1].startswith("Sa")


def test_round_trip_diag(capsys):
    assert main(["diag", "round-trip", "--N", "500"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
