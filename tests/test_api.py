# tests/test_api.py

from datetime import date

import pytest

import orthocal
from orthocal.core.types import IndentOptions
from orthocal.properties import tags as T


def test_default_calendar_is_ready():
    assert isinstance(orthocal.get_calendar(), orthocal.OrthodoxCalendar)


def test_pascha():
    assert orthocal.julian_pascha(2024) == (4, 22)
    assert orthocal.pascha(2024, "G").to_pydate() == date(2024, 5, 5)


def test_day_info_accepts_python_dates():
    info = orthocal.day_info(date(2024, 5, 5))
    assert info.date == orthocal.Date(2024, 4, 22)
    assert info.weekday == 0
    assert info.glas == -1
    assert T.pasha in info.properties
    assert info.gospel.book_name == "john"


def test_find_by_tag_name_or_number():
    assert orthocal.find(2024, "pasha") == orthocal.Date(2024, 4, 22)
    assert orthocal.find(2024, T.pasha) == orthocal.Date(2024, 4, 22)
    assert orthocal.find_all(2024, "m12d25") == [orthocal.Date(2024, 12, 25)]
    with pytest.raises(KeyError):
        orthocal.find(2024, "no_such_tag")


def test_find_between_gregorian_dates():
    found = orthocal.find_between(date(2024, 1, 1), date(2024, 1, 31), ["m1d6", "m12d25"])
    assert [d.ymd("G") for d in found] == [(2024, 1, 7), (2024, 1, 19)]


def test_describe():
    assert orthocal.describe(date(2024, 5, 5), "%GD.%GQ").startswith("05.05 ")


def test_set_options_replaces_default_calendar():
    old = orthocal.get_calendar()
    try:
        orthocal.set_options(IndentOptions(apostol=True))
        assert orthocal.get_calendar() is not old
        assert orthocal.get_calendar().options.apostol is True
    finally:
        orthocal.api.set_calendar(old)
