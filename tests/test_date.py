# tests/test_date.py

from datetime import date

import pytest

from orthocal.core.date import Date
from orthocal.core.errors import EmptyDateError, InvalidDateError, YearParseError
from orthocal.core.time import MIN_CJDN


def test_one_day_in_three_calendars():
    d = Date(2024, 4, 22)
    assert d.ymd("J") == (2024, 4, 22)
    assert d.ymd("G") == (2024, 5, 5)
    assert d.ymd("M") == (2024, 5, 5)
    assert d.weekday() == 0
    assert d == Date(2024, 5, 5, "G")
    assert d == Date("2024", 4, 22)


def test_accessors_return_ints():
    d = Date(2023, 12, 25)
    assert d.year("G") == 2024
    assert d.month("G") == 1
    assert d.day("G") == 7
    assert isinstance(d.year(), int)


def test_invalid_dates_raise():
    with pytest.raises(InvalidDateError):
        Date(2023, 2, 29)
    with pytest.raises(InvalidDateError):
        Date(2024, 13, 1)
    with pytest.raises(InvalidDateError):
        Date(2024, 4, 31, "G")


def test_year_is_parsed_before_month_is_checked():
    with pytest.raises(YearParseError):
        Date("abc", 13, 1)
    assert not Date.check("abc", 13, 1)


def test_check_never_raises():
    assert Date.check(2024, 2, 29)
    assert not Date.check(2023, 2, 29)
    assert not Date.check(1900, 2, 29, "G")
    assert Date.check(1900, 2, 29, "J")
    assert not Date.check("abc", 1, 1)
    assert not Date.check(1, 1, 1)
    # Julian 2-01-01 is still Gregorian year 1
    assert not Date.check(2, 1, 1)


def test_empty_date():
    d = Date()
    assert not d
    assert d.empty
    assert str(d) == ""
    assert repr(d) == "Date()"
    with pytest.raises(EmptyDateError):
        d.cjdn()
    with pytest.raises(EmptyDateError):
        d.ymd("G")
    assert not d.inc_by_days(1)


def test_reset_keeps_state_on_failure():
    d = Date(2024, 1, 1)
    assert not d.reset(2023, 2, 29)
    assert d == Date(2024, 1, 1)
    assert not d.reset("x", 1, 1)
    assert d.reset(2024, 1, 20, "G")
    assert d.ymd("J") == (2024, 1, 7)


def test_day_arithmetic():
    assert Date(2023, 1, 1).inc_by_days(365) == Date(2024, 1, 1)
    assert Date(2024, 3, 1).dec_by_days(1) == Date(2024, 2, 29)
    assert Date(2024, 3, 1, "G").dec_by_days(1) == Date(2024, 2, 29, "G")
    d = Date(2024, 4, 22)
    assert d.inc_by_days(7).weekday() == d.weekday()
    assert d.inc_by_days(-3) == d.dec_by_days(3)


def test_arithmetic_below_range_gives_empty():
    low = Date.from_cjdn(MIN_CJDN + 10)
    assert not low.dec_by_days(100000)
    with pytest.raises(InvalidDateError):
        Date.from_cjdn(MIN_CJDN - 1)


def test_ordering_and_hashing():
    a, b, c = Date(2024, 1, 1), Date(2024, 1, 2), Date(2023, 12, 31)
    assert sorted([a, b, c]) == [c, a, b]
    assert Date() < c
    assert len({a, Date(2024, 1, 14, "G")}) == 1


def test_pydate_interop():
    d = Date(2024, 4, 22)
    assert d.to_pydate() == date(2024, 5, 5)
    assert Date.from_date(date(2024, 5, 5)) == d
    assert d.is_leap_year()
    assert not Date(1900, 3, 14, "G").is_leap_year("G")
