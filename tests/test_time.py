# tests/test_time.py

import random
from datetime import date

import pytest

from orthocal.core.errors import YearParseError, YearRangeError
from orthocal.core.types import FORMATS
from orthocal.core.time import (
    MIN_CJDN,
    from_cjdn,
    from_jdn,
    gregorian_to_cjdn,
    is_leap_year,
    julian_to_cjdn,
    milankovic_to_cjdn,
    month_length,
    parse_year,
    to_cjdn,
    to_jdn,
    weekday,
)


def test_parse_year_accepts_ints_and_digit_strings():
    assert parse_year(2024) == 2024
    assert parse_year("2024") == 2024
    assert parse_year(" 1700 ") == 1700
    # years are not bounded above
    assert parse_year("123456789012345678901234567890") == 123456789012345678901234567890


@pytest.mark.parametrize("bad", ["abc", "20x4", "", "1.5", True])
def test_parse_year_rejects_garbage(bad):
    with pytest.raises(YearParseError):
        parse_year(bad)


@pytest.mark.parametrize("low", [1, 0, -5, "1"])
def test_parse_year_rejects_years_below_minimum(low):
    with pytest.raises(YearRangeError):
        parse_year(low)


def test_leap_years_by_calendar():
    assert is_leap_year(1900, "J")
    assert not is_leap_year(1900, "G")
    assert not is_leap_year(1900, "M")
    assert is_leap_year(2000, "G")
    assert is_leap_year(2000, "M")
    assert not is_leap_year(2023, "J")
    # Milankovic and Gregorian part ways in 2800 and 2900
    assert is_leap_year(2800, "G")
    assert not is_leap_year(2800, "M")
    assert not is_leap_year(2900, "G")
    assert is_leap_year(2900, "M")


def test_month_length():
    assert month_length(1, False) == 31
    assert month_length(4, False) == 30
    assert month_length(2, False) == 28
    assert month_length(2, True) == 29
    assert month_length(13, True) == 0


def test_known_day_numbers():
    # 2000-01-01 (Gregorian) is JDN 2451545
    assert gregorian_to_cjdn(2000, 1, 1) == 2451545
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert from_jdn(2451545) == date(2000, 1, 1)


def test_julian_is_thirteen_days_behind_in_this_century():
    assert julian_to_cjdn(2024, 4, 22) == gregorian_to_cjdn(2024, 5, 5)
    assert from_cjdn(to_cjdn(2024, 5, 5, "G"), "J") == (2024, 4, 22)


def test_milankovic_matches_gregorian_in_this_century():
    for y, m, d in [(2024, 3, 1), (2000, 2, 29), (2099, 12, 31)]:
        assert milankovic_to_cjdn(y, m, d) == gregorian_to_cjdn(y, m, d)


def test_weekday_sunday_is_zero():
    assert weekday(2451545) == 6  # Saturday 2000-01-01
    assert weekday(gregorian_to_cjdn(2024, 5, 5)) == 0


def test_min_cjdn_is_in_year_two():
    assert from_cjdn(MIN_CJDN, "G") == (2, 1, 1)


def test_unknown_format_rejected():
    with pytest.raises(ValueError):
        to_cjdn(2024, 1, 1, "X")


def _random_ymd(fmt, lo=2, hi=10**6):
    y = random.randint(lo, hi)
    m = random.randint(1, 12)
    d = random.randint(1, month_length(m, is_leap_year(y, fmt)))
    return y, m, d


@pytest.mark.parametrize("fmt", FORMATS)
def test_day_number_round_trip(fmt):
    """(y, m, d) -> cjdn -> (y, m, d) in each calendar, years up to 10^6."""
    random.seed(42)
    for _ in range(2000):
        ymd = _random_ymd(fmt)
        assert from_cjdn(to_cjdn(*ymd, fmt), fmt) == ymd


@pytest.mark.parametrize("other", ["G", "M"])
def test_cross_calendar_round_trip(other):
    """Julian -> Gregorian/Milankovic -> Julian returns the same day."""
    random.seed(42)
    for _ in range(2000):
        ymd = _random_ymd("J", lo=100)
        j = to_cjdn(*ymd, "J")
        there = from_cjdn(j, other)
        assert to_cjdn(*there, other) == j
        assert from_cjdn(to_cjdn(*there, other), "J") == ymd

        back = _random_ymd(other, lo=100)
        j = to_cjdn(*back, other)
        assert from_cjdn(to_cjdn(*from_cjdn(j, "J"), "J"), other) == back


def test_leap_year_parses_its_year():
    assert is_leap_year("2024", "G")
    with pytest.raises(YearParseError):
        is_leap_year("20x4", "G")
