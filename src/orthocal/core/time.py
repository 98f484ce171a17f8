"""
orthocal.core.time
------------------
Exact conversions between (year, month, day) in the Julian, Milankovic
(Revised Julian) and Gregorian calendars and the chronological Julian
day number (CJDN).

All three systems share one closed-form scheme (after R. H. van Gent /
Dr. L. Strous); only the cycle constants differ. Years are Python ints,
so the range is unbounded.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Tuple, Union

from .arith import fdiv, pdivmod, pmod
from .errors import YearParseError, YearRangeError
from .types import GREGORIAN, JULIAN, MILANKOVIC, CalendarFormat, check_format

MIN_YEAR = 2
MIN_CJDN = 1721791  # 1 January of year 2, Gregorian

YearLike = Union[int, str]

_YEAR_RE = re.compile(r"^\s*[+-]?\d+\s*$")


def parse_year(value: YearLike) -> int:
    """Read a year given as an int or a decimal digit string."""
    if isinstance(value, bool):
        raise YearParseError(f"cannot convert {value!r} to a year")
    if isinstance(value, int):
        y = value
    else:
        s = str(value)
        if not _YEAR_RE.match(s):
            raise YearParseError(f"cannot convert string '{value}' to a number")
        y = int(s)
    if y < MIN_YEAR:
        raise YearRangeError(f"year '{value}' is below the minimum {MIN_YEAR}")
    return y


# ---------------------------------------------------------
# Leap years and month lengths
# ---------------------------------------------------------

def is_leap_year(year: YearLike, fmt: CalendarFormat = JULIAN) -> bool:
    y = parse_year(year)
    fmt = check_format(fmt)
    if fmt == GREGORIAN:
        return y % 400 == 0 or (y % 100 != 0 and y % 4 == 0)
    if fmt == JULIAN:
        return y % 4 == 0
    # Milankovic: centuries are leap when century mod 9 is 2 or 6
    if y % 4 == 0 and y % 100 == 0:
        return pmod(fdiv(y, 100), 9) in (2, 6)
    return y % 4 == 0


def month_length(month: int, leap: bool) -> int:
    """Days in a month; 0 for a month outside 1..12."""
    if month in (1, 3, 5, 7, 8, 10, 12):
        return 31
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if leap else 28
    return 0


# ---------------------------------------------------------
# (y, m, d) -> CJDN
# ---------------------------------------------------------

def gregorian_to_cjdn(y: int, m: int, d: int) -> int:
    c0 = fdiv(m - 3, 12)
    x1 = m - 12 * c0 - 3
    x4 = y + c0
    x3, x2 = pdivmod(x4, 100)
    return d + 1721119 + fdiv(146097 * x3, 4) + fdiv(36525 * x2, 100) + fdiv(153 * x1 + 2, 5)


def julian_to_cjdn(y: int, m: int, d: int) -> int:
    c0 = fdiv(m - 3, 12)
    j1 = fdiv(1461 * (y + c0), 4)
    j2 = fdiv(153 * m - 1836 * c0 - 457, 5)
    return j1 + j2 + d + 1721117


def milankovic_to_cjdn(y: int, m: int, d: int) -> int:
    c0 = fdiv(m - 3, 12)
    x4 = y + c0
    x3 = fdiv(x4, 100)
    x2 = pmod(x4, 100)
    x1 = m - 12 * c0 - 3
    return d + 1721119 + fdiv(328718 * x3 + 6, 9) + fdiv(36525 * x2, 100) + fdiv(153 * x1 + 2, 5)


# ---------------------------------------------------------
# CJDN -> (y, m, d)
# ---------------------------------------------------------

def cjdn_to_gregorian(j: int) -> Tuple[int, int, int]:
    x3, r3 = pdivmod(4 * j - 6884477, 146097)
    x2, r2 = pdivmod(100 * fdiv(r3, 4) + 99, 36525)
    x1, r1 = pdivmod(5 * fdiv(r2, 100) + 2, 153)
    c0 = fdiv(x1 + 2, 12)
    d = fdiv(r1, 5) + 1
    m = x1 - 12 * c0 + 3
    y = 100 * x3 + x2 + c0
    return y, m, d


def cjdn_to_julian(j: int) -> Tuple[int, int, int]:
    y2 = j - 1721118
    k2 = 4 * y2 + 3
    k1 = 5 * fdiv(pmod(k2, 1461), 4) + 2
    x1 = fdiv(k1, 153)
    c0 = fdiv(x1 + 2, 12)
    y = fdiv(k2, 1461) + c0
    m = x1 - 12 * c0 + 3
    d = fdiv(pmod(k1, 153), 5) + 1
    return y, m, d


def cjdn_to_milankovic(j: int) -> Tuple[int, int, int]:
    k3 = 9 * (j - 1721120) + 2
    x3 = fdiv(k3, 328718)
    k2 = 100 * fdiv(pmod(k3, 328718), 9) + 99
    x2 = fdiv(k2, 36525)
    k1 = fdiv(pmod(k2, 36525), 100) * 5 + 2
    x1 = fdiv(k1, 153)
    c0 = fdiv(x1 + 2, 12)
    y = 100 * x3 + x2 + c0
    m = x1 - 12 * c0 + 3
    d = fdiv(pmod(k1, 153), 5) + 1
    return y, m, d


_TO = {
    JULIAN: julian_to_cjdn,
    MILANKOVIC: milankovic_to_cjdn,
    GREGORIAN: gregorian_to_cjdn,
}

_FROM = {
    JULIAN: cjdn_to_julian,
    MILANKOVIC: cjdn_to_milankovic,
    GREGORIAN: cjdn_to_gregorian,
}


def to_cjdn(year: YearLike, month: int, day: int, fmt: CalendarFormat = JULIAN) -> int:
    """
    Day number of (year, month, day). Components are not validated;
    callers check month/day ranges first.
    """
    return _TO[check_format(fmt)](int(year), month, day)


def from_cjdn(cjdn: int, fmt: CalendarFormat = JULIAN) -> Tuple[int, int, int]:
    return _FROM[check_format(fmt)](cjdn)


def weekday(cjdn: int) -> int:
    """Day of week, 0=Sun..6=Sat."""
    return pmod(cjdn + 1, 7)


def to_jdn(d: date) -> int:
    """Day number of a datetime.date (proleptic Gregorian)."""
    return gregorian_to_cjdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    y, m, d = cjdn_to_gregorian(jdn)
    return date(y, m, d)
