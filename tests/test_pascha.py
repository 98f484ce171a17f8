# tests/test_pascha.py

import pytest

from orthocal.core.errors import YearRangeError
from orthocal.engines.pascha import gauss_pascha, julian_pascha, pascha_date


@pytest.mark.parametrize(
    "year, julian, gregorian",
    [
        (2023, (4, 3), (2023, 4, 16)),
        (2024, (4, 22), (2024, 5, 5)),
        (2025, (4, 7), (2025, 4, 20)),
    ],
)
def test_known_paschas(year, julian, gregorian):
    assert julian_pascha(year) == julian
    assert pascha_date(year).ymd("G") == gregorian


def test_pascha_is_a_sunday_in_the_paschal_window():
    for y in range(2, 10001):
        m, d = gauss_pascha(y)
        assert (3, 22) <= (m, d) <= (4, 25)
        assert pascha_date(y).weekday() == 0


def test_string_year_and_range():
    assert julian_pascha("2024") == (4, 22)
    with pytest.raises(YearRangeError):
        julian_pascha(1)
