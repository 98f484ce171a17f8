# tests/test_calendar.py

import pytest

from orthocal.core.date import Date
from orthocal.core.engine import YearCache
from orthocal.core.errors import IndentConfigError, ScheduleError
from orthocal.core.types import IndentOptions
from orthocal.engines.calendar import OrthodoxCalendar, _required
from orthocal.engines.orthyear import OrthYear
from orthocal.properties import tags as T


@pytest.fixture
def cal():
    return OrthodoxCalendar()


# --- options

def test_default_options(cal):
    weeks, apostol = cal.get_options()
    assert len(weeks) == 17
    assert weeks[0] == 33
    assert apostol is False


def test_setters_validate_week_numbers(cal):
    before = cal.options
    assert not cal.set_winter_indent_weeks_1(0)
    assert not cal.set_winter_indent_weeks_1(34)
    assert not cal.set_spring_indent_weeks(10, 34)
    assert cal.options is before

    assert cal.set_winter_indent_weeks_2(30, 31)
    assert cal.set_winter_indent_weeks_5(1, 2, 3, 4, 5)
    assert cal.set_spring_indent_weeks(12, 13)
    cal.set_spring_indent_apostol(True)
    weeks, apostol = cal.get_options()
    assert weeks[1:3] == [30, 31]
    assert weeks[10:15] == [1, 2, 3, 4, 5]
    assert weeks[15:] == [12, 13]
    assert apostol is True


def test_indent_options_validation():
    with pytest.raises(IndentConfigError):
        IndentOptions(winter_1=(0,))
    with pytest.raises(IndentConfigError):
        IndentOptions(winter_2=(1,))
    with pytest.raises(IndentConfigError):
        IndentOptions.from_list([1] * 16)
    opts = IndentOptions()
    assert IndentOptions.from_list(opts.as_list()) == opts
    assert opts.winter(6) == ()


# --- cache

def test_year_cache_reuses_and_rebuilds_on_option_change(cal):
    a = cal.year(2024)
    assert cal.year("2024") is a
    assert cal.cache_info()["hits"] == 1
    cal.set_spring_indent_apostol(True)
    b = cal.year(2024)
    assert b is not a
    assert cal.cache_info()["size"] == 2
    cal.clear_cache()
    assert cal.cache_info()["size"] == 0


def test_cache_clears_when_full():
    cal = OrthodoxCalendar(cache_size=2)
    cal.year(2020)
    cal.year(2021)
    assert cal.cache_info()["size"] == 2
    cal.year(2022)
    assert cal.cache_info()["size"] == 1


def test_year_cache_rejects_zero_capacity():
    with pytest.raises(ValueError):
        YearCache(capacity=0)


# --- year queries

def test_pascha_queries(cal):
    assert cal.julian_pascha(2024) == (4, 22)
    assert cal.pascha(2024) == Date(2024, 4, 22)
    assert cal.pascha(2024, "G").ymd("G") == (2024, 5, 5)
    assert cal.pascha(2024, "M").ymd("M") == (2024, 5, 5)


def test_apostol_post_length(cal):
    # All Saints on Jun 17 (Julian) in 2024: Jun 18..28
    assert cal.apostol_post_length(2024) == 11


def test_missing_required_day_raises_schedule_error():
    assert issubclass(ScheduleError, LookupError)
    assert _required(OrthYear(2024), T.pasha) == (4, 22)
    with pytest.raises(ScheduleError):
        _required(OrthYear(2024), 999999)


def test_indents_match_year(cal):
    oy = cal.year(2024)
    assert cal.winter_indent(2024) == oy.winter_indent
    assert cal.spring_indent(2024) == oy.spring_indent


# --- date queries

def test_date_queries(cal):
    pascha = Date(2024, 4, 22)
    assert cal.date_glas(pascha) == -1
    assert cal.date_n50(pascha) == -1
    assert T.pasha in cal.date_properties(pascha)
    assert cal.is_date_of(pascha, T.pasha)
    assert not cal.is_date_of(pascha, T.m12d25)
    assert cal.date_gospel(pascha).book_name == "john"
    assert cal.date_apostol(pascha)
    assert not cal.resurrect_gospel(pascha.inc_by_days(1))
    assert cal.date_properties(Date()) == []


# --- searches

def test_search_by_julian_and_gregorian_year(cal):
    assert cal.get_date_with(2024, T.m12d25) == Date(2024, 12, 25)
    # Julian Dec 25 2023 is Gregorian Jan 7 2024
    assert cal.get_date_with(2024, T.m12d25, "G") == Date(2023, 12, 25)
    assert cal.get_alldates_with(2024, T.m12d25, "G") == [Date(2023, 12, 25)]


def test_search_misses(cal):
    assert cal.get_date_with(2024, 999999) is None
    assert cal.get_alldates_with(2024, 999999) == []
    assert cal.get_date_inperiod_with(Date(2024, 1, 1), Date(2024, 1, 31), T.pasha) is None


def test_period_across_year_boundary(cal):
    d1, d2 = Date(2023, 12, 20), Date(2024, 1, 10)
    want = [Date(2023, 12, 25), Date(2024, 1, 6)]
    assert cal.get_alldates_inperiod_withanyof(d1, d2, [T.m12d25, T.m1d6]) == want
    assert cal.get_alldates_inperiod_withanyof(d2, d1, [T.m1d6, T.m12d25]) == want
    assert cal.get_date_inperiod_with(d1, d2, T.m1d6) == Date(2024, 1, 6)
    assert cal.get_alldates_inperiod_with(d1, d2, T.m12d25) == [Date(2023, 12, 25)]


def test_period_bounds_are_inclusive(cal):
    d = Date(2024, 4, 22)
    assert cal.get_date_inperiod_with(d, d, T.pasha) == d


def test_any_and_all_of(cal):
    assert cal.get_date_withanyof(2024, [999999, T.m1d6]) == Date(2024, 1, 6)
    assert cal.get_date_withallof(2024, [T.m12d25, T.dvana10_nep_prazd]) == Date(2024, 12, 25)
    assert cal.get_date_withallof(2024, [T.m12d25, T.pasha]) is None
    found = cal.get_alldates_withanyof(2024, [T.m12d25, T.m1d6])
    assert found == [Date(2024, 1, 6), Date(2024, 12, 25)]
    found = cal.get_alldates_withanyof(2024, [T.m12d25, T.m1d6], "G")
    assert found == [Date(2023, 12, 25), Date(2024, 1, 6)]


def test_descriptions(cal):
    text = cal.get_description_for_date(Date(2024, 4, 22))
    assert text.startswith("22 Апреля 2024 г.")
    text = cal.get_description_for_dates([Date(2024, 4, 22), Date(), Date(2024, 12, 25)], "%JD.%JQ", " | ")
    assert text.startswith("22.04 ")
    assert " | 25.12 " in text
