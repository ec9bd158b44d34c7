# tests/test_metadata.py

import pytest

from caljalali.engines import metadata as md


def test_month_tables():
    assert md.GREGORIAN_MONTH_LENGTHS == (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    assert md.JALALI_MONTH_LENGTHS == (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
    assert sum(md.JALALI_MONTH_LENGTHS) == 365


@pytest.mark.parametrize(
    "year,expected",
    [
        (1375, True),
        (1379, True),
        (1399, True),
        (1402, False),
        (1403, True),
        (1404, False),
        (1407, False),
        (1408, True),
    ],
)
def test_leap_year_samples(year, expected):
    assert md.is_jalali_leap_year(year) is expected


def test_eight_leap_years_per_cycle():
    for start in range(1200, 1500):
        assert sum(md.is_jalali_leap_year(y) for y in range(start, start + 33)) == 8


def test_leap_rule_for_negative_years():
    # Normalised modulo keeps the rule periodic below zero.
    for y in range(-100, 100):
        assert md.is_jalali_leap_year(y) == md.is_jalali_leap_year(y + 33)


def test_month_lengths():
    assert [md.days_in_jalali_month(1402, m) for m in range(1, 13)] == list(md.JALALI_MONTH_LENGTHS)
    assert md.days_in_jalali_month(1403, 12) == 30
    assert md.days_in_jalali_month(1402, 12) == 29
    assert md.days_in_jalali_month(1403, 7) == 30


def test_year_lengths_in_supported_range():
    for y in range(md.MIN_YEAR, md.MAX_YEAR + 1):
        total = sum(md.days_in_jalali_month(y, m) for m in range(1, 13))
        assert total == (366 if md.is_jalali_leap_year(y) else 365)


def test_gregorian_leap_years():
    assert md.is_gregorian_leap_year(2000)
    assert md.is_gregorian_leap_year(2024)
    assert not md.is_gregorian_leap_year(1900)
    assert not md.is_gregorian_leap_year(2023)
