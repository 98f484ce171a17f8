# tests/test_orthyear.py

import pytest

from orthocal.core.errors import YearRangeError
from orthocal.core.types import IndentOptions
from orthocal.engines.orthyear import OrthYear, _next_glas
from orthocal.engines.readings import APOSTOL_TABLE_1, GOSPEL_TABLE_1, RESURRECT_GOSPELS, resurrect_gospel_for, table_1
from orthocal.properties import tags as T


@pytest.fixture(scope="module")
def y2024():
    return OrthYear(2024)


def test_paschal_chain(y2024):
    assert y2024.date_with(T.pasha) == (4, 22)
    assert y2024.date_with(T.ned8_popashe) == (6, 10)
    assert y2024.date_with(T.ned1_po50) == (6, 17)
    assert y2024.date_with(T.vel_post_d1n1) == (3, 5)
    assert y2024.date_with(T.vel_post_d6n6) == (4, 14)
    assert y2024.date_with(T.vel_post_d0n7) == (4, 15)
    assert y2024.weekday(4, 22) == 0
    assert y2024.weekday(4, 14) == 6


def test_fixed_feasts_and_classes(y2024):
    assert y2024.has(12, 25, T.m12d25)
    assert y2024.has(12, 25, T.dvana10_nep_prazd)
    assert len(y2024.all_dates_with(T.dvana10_per_prazd)) == 3
    assert len(y2024.all_dates_with(T.dvana10_nep_prazd)) == 9
    assert y2024.date_with(T.sretenie) == (2, 2)


def test_fasts(y2024):
    assert y2024.has(12, 1, T.post_rojd)
    assert not y2024.has(12, 25, T.post_rojd)
    assert y2024.has(8, 1, T.post_usp)
    assert not y2024.has(8, 15, T.post_usp)
    assert y2024.has(6, 18, T.post_petr)
    assert not y2024.has(6, 29, T.post_petr)
    assert y2024.has(3, 10, T.post_vel)


def test_glas_cycle(y2024):
    """Tone is -1 from Lazarus Saturday through All Saints, then 8, 1, 2, ..."""
    assert y2024.glas(4, 14) == -1
    assert y2024.glas(6, 17) == -1
    assert 1 <= y2024.glas(4, 13) <= 8
    assert y2024.glas(6, 18) == 8
    assert y2024.glas(6, 23) == 8
    assert y2024.glas(6, 24) == 1
    assert y2024.glas(7, 1) == 2


def test_n50(y2024):
    assert y2024.n50(6, 10) == 0
    assert y2024.n50(6, 11) == 1
    assert y2024.n50(6, 17) == 1
    assert y2024.n50(3, 10) == -1
    assert y2024.n50(4, 22) == -1


def test_every_day_has_glas_and_n50_in_range(y2024):
    for m in range(1, 13):
        for d in range(1, 29):
            assert y2024.glas(m, d) in (-1, 1, 2, 3, 4, 5, 6, 7, 8)
            assert y2024.n50(m, d) >= -1


def test_readings(y2024):
    g = y2024.gospel(4, 22)
    assert g.book_name == "john"
    assert g.zach == 1
    assert y2024.gospel(6, 10) == table_1(GOSPEL_TABLE_1, 0, 0)
    assert y2024.apostol(4, 22)


def test_resurrect_gospel(y2024):
    assert not y2024.resurrect_gospel(6, 18)
    assert y2024.resurrect_gospel(6, 24) == RESURRECT_GOSPELS[1]
    assert resurrect_gospel_for(12) == RESURRECT_GOSPELS[0]
    assert resurrect_gospel_for(22) == RESURRECT_GOSPELS[10]
    assert not resurrect_gospel_for(0)


def test_missing_days_are_total(y2024):
    assert y2024.glas(2, 30) == -1
    assert y2024.weekday(13, 1) == -1
    assert y2024.properties(2, 31) == ()
    assert not y2024.gospel(2, 31)
    assert y2024.date_with(999999) is None
    assert y2024.all_dates_with(999999) == ()


def test_searches(y2024):
    assert y2024.date_with_any_of([999999, T.pasha]) == (4, 22)
    assert y2024.date_with_all_of([T.m12d25, T.dvana10_nep_prazd]) == (12, 25)
    assert y2024.date_with_all_of([T.m12d25, T.pasha]) is None
    assert y2024.date_with_all_of([]) is None
    assert set(y2024.all_dates_with_any_of([T.m1d6, T.m12d25])) == {(1, 6), (12, 25)}


def test_indention_ranges():
    for y in range(2000, 2040):
        oy = OrthYear(y)
        assert -5 <= oy.winter_indent <= 0
        assert -2 <= oy.spring_indent <= 3


def test_options_are_kept():
    opts = IndentOptions(spring=(12, 13), apostol=True)
    oy = OrthYear(2024, opts)
    assert oy.options is opts
    assert oy.year == 2024


def test_early_years_build():
    oy = OrthYear(2)
    assert oy.date_with(T.pasha) is not None
    with pytest.raises(YearRangeError):
        OrthYear(1)


def test_st_george_leaves_holy_week():
    """Apr 23 inside Holy Week or on Pascha moves to Bright Monday."""
    assert OrthYear(2024).date_with(T.georgia_pob) == (4, 23)
    oy = OrthYear(2040)
    assert oy.date_with(T.pasha) == (4, 23)
    assert oy.date_with(T.georgia_pob) == (4, 24)


def test_meeting_afterfeast(y2024):
    """Meeting on Feb 2 outside the Triodion: six afterfeast days, leave-taking Feb 9."""
    assert y2024.date_with(T.sub_myasopust) == (2, 25)
    assert y2024.date_with(T.sretenie_otdanie) == (2, 9)
    assert y2024.date_with(T.sretenie_predpr) == (2, 1)
    for k in range(6):
        assert y2024.date_with(T.sretenie_poprazd1 + k) == (2, 3 + k)


@pytest.fixture(scope="module")
def span():
    return {y: OrthYear(y) for y in range(1990, 2061)}


def test_glas_and_n50_carry_into_january(span):
    for y in range(1990, 2060):
        old, new = span[y], span[y + 1]
        sunday, monday = new.weekday(1, 1) == 0, new.weekday(1, 1) == 1
        g = old.glas(12, 31)
        assert new.glas(1, 1) == (_next_glas(g) if sunday else g)
        assert new.n50(1, 1) == old.n50(12, 31) + (1 if monday else 0)


def test_sunday_tones_after_all_saints(span):
    for y, oy in span.items():
        m, d = oy.date_with(T.ned1_po50)
        sundays = [(mm, dd) for mm in range(m, 13) for dd in range(1, 32)
                   if (mm, dd) > (m, d) and oy.weekday(mm, dd) == 0]
        assert [oy.glas(*sd) for sd in sundays] == [k % 8 + 1 for k in range(len(sundays))]


def test_twelve_great_feasts_every_year(span):
    for oy in span.values():
        assert len(oy.all_dates_with(T.dvana10_per_prazd)) == 3
        assert len(oy.all_dates_with(T.dvana10_nep_prazd)) == 9


def test_winter_indention_readings(y2024):
    """Five weeks between Theophany and the Publican: Jan 9 .. Feb 11 reuse configured weeks."""
    assert y2024.winter_indent == -5
    assert y2024.gospel(1, 10) == table_1(GOSPEL_TABLE_1, 30, 2)
    assert y2024.gospel(1, 15) == table_1(GOSPEL_TABLE_1, 30, 0)
    assert y2024.gospel(1, 16) == table_1(GOSPEL_TABLE_1, 31, 1)
    assert y2024.gospel(1, 24) == table_1(GOSPEL_TABLE_1, 17, 2)
    assert y2024.gospel(2, 12) == table_1(GOSPEL_TABLE_1, 33, 0)

    oy = OrthYear(2024, IndentOptions(winter_5=(1, 2, 3, 4, 5)))
    assert oy.gospel(1, 10) == table_1(GOSPEL_TABLE_1, 1, 2)
    assert oy.gospel(1, 16) == table_1(GOSPEL_TABLE_1, 2, 1)
    # Sundays keep their own substitutes
    assert oy.gospel(1, 15) == y2024.gospel(1, 15)


def test_apostol_follows_autumn_indention_only_when_asked(y2024):
    assert y2024.spring_indent == 3
    assert y2024.date_with(T.ned_po14sent) == (9, 16)
    assert y2024.n50(9, 18) == 15
    assert y2024.apostol(9, 18) == table_1(APOSTOL_TABLE_1, 15, 2)
    assert y2024.gospel(9, 18) == table_1(GOSPEL_TABLE_1, 18, 2)

    oy = OrthYear(2024, IndentOptions(apostol=True))
    assert oy.apostol(9, 18) == table_1(APOSTOL_TABLE_1, 18, 2)
    assert oy.apostol(9, 18) != y2024.apostol(9, 18)
    assert oy.gospel(9, 18) == y2024.gospel(9, 18)
