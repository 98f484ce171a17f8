"""
orthocal.core.date
------------------
A day expressed simultaneously in the Julian, Milankovic and Gregorian
calendars.

A ``Date`` wraps one CJDN together with the (year, month, day) triple of
each calendar. ``Date()`` is the empty date: it is falsy, sorts before
every valid date and is what day arithmetic returns when it leaves the
supported range.
"""

from __future__ import annotations

from datetime import date as _pydate
from functools import total_ordering
from typing import Dict, Optional, Tuple

from .errors import EmptyDateError, InvalidDateError, YearParseError, YearRangeError
from .time import (
    MIN_CJDN,
    MIN_YEAR,
    YearLike,
    from_cjdn,
    is_leap_year,
    month_length,
    parse_year,
    to_cjdn,
    to_jdn,
    weekday,
)
from .types import FORMATS, JULIAN, CalendarFormat, check_format

DEFAULT_FORMAT = "%Jd %JM %JY г."

_EMPTY_CJDN = -1

Triple = Tuple[int, int, int]


def _components(year: YearLike, month: int, day: int, fmt: CalendarFormat) -> Optional[Tuple[int, Dict[str, Triple]]]:
    """CJDN and per-calendar triples, or None when the date is not valid."""
    fmt = check_format(fmt)
    y = parse_year(year)
    if not (1 <= month <= 12):
        return None
    if not (1 <= day <= month_length(month, is_leap_year(y, fmt))):
        return None
    j = to_cjdn(y, month, day, fmt)
    return _triples(j)


def _triples(j: int) -> Optional[Tuple[int, Dict[str, Triple]]]:
    if j < MIN_CJDN:
        return None
    ymd = {f: from_cjdn(j, f) for f in FORMATS}
    if any(t[0] < MIN_YEAR for t in ymd.values()):
        return None
    return j, ymd


@total_ordering
class Date:
    __slots__ = ("_cjdn", "_ymd")

    def __init__(self, year: Optional[YearLike] = None, month: int = 1, day: int = 1,
                 fmt: CalendarFormat = JULIAN):
        self._cjdn: int = _EMPTY_CJDN
        self._ymd: Dict[str, Triple] = {}
        if year is None:
            return
        res = _components(year, month, day, fmt)
        if res is None:
            raise InvalidDateError(f"invalid date '{year}.{month}.{day}' ({fmt})")
        self._cjdn, self._ymd = res

    # ---------------------------------------------------------
    # Construction helpers
    # ---------------------------------------------------------

    @classmethod
    def from_cjdn(cls, cjdn: int) -> "Date":
        d = cls()
        if not d.reset_cjdn(cjdn):
            raise InvalidDateError(f"day number {cjdn} is out of the supported range")
        return d

    @classmethod
    def from_date(cls, d: _pydate) -> "Date":
        """Build from a datetime.date (proleptic Gregorian)."""
        return cls.from_cjdn(to_jdn(d))

    @staticmethod
    def check(year: YearLike, month: int, day: int, fmt: CalendarFormat = JULIAN) -> bool:
        """True if (year, month, day) names a valid date; never raises for bad input."""
        try:
            return _components(year, month, day, fmt) is not None
        except (YearParseError, YearRangeError):
            return False

    def reset(self, year: YearLike, month: int, day: int, fmt: CalendarFormat = JULIAN) -> bool:
        """Replace the whole state; on failure the date is left untouched."""
        try:
            res = _components(year, month, day, fmt)
        except (YearParseError, YearRangeError):
            return False
        if res is None:
            return False
        self._cjdn, self._ymd = res
        return True

    def reset_cjdn(self, cjdn: int) -> bool:
        res = _triples(cjdn)
        if res is None:
            return False
        self._cjdn, self._ymd = res
        return True

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    def __bool__(self) -> bool:
        return self._cjdn != _EMPTY_CJDN

    @property
    def empty(self) -> bool:
        return not self

    def _need(self) -> None:
        if not self:
            raise EmptyDateError("operation requires a valid date")

    def cjdn(self) -> int:
        self._need()
        return self._cjdn

    def ymd(self, fmt: CalendarFormat = JULIAN) -> Triple:
        self._need()
        return self._ymd[check_format(fmt)]

    def year(self, fmt: CalendarFormat = JULIAN) -> int:
        return self.ymd(fmt)[0]

    def month(self, fmt: CalendarFormat = JULIAN) -> int:
        return self.ymd(fmt)[1]

    def day(self, fmt: CalendarFormat = JULIAN) -> int:
        return self.ymd(fmt)[2]

    def weekday(self) -> int:
        """0=Sun..6=Sat."""
        return weekday(self.cjdn())

    def is_leap_year(self, fmt: CalendarFormat = JULIAN) -> bool:
        return is_leap_year(self.year(fmt), fmt)

    def to_pydate(self) -> _pydate:
        """Gregorian datetime.date; raises ValueError past year 9999."""
        y, m, d = self.ymd("G")
        return _pydate(y, m, d)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def inc_by_days(self, days: int) -> "Date":
        """New date ``days`` later, or the empty date if out of range."""
        if not self:
            return Date()
        out = Date()
        out.reset_cjdn(self._cjdn + days)
        return out

    def dec_by_days(self, days: int) -> "Date":
        return self.inc_by_days(-days)

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._cjdn == other._cjdn

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._cjdn < other._cjdn

    def __hash__(self) -> int:
        return hash(self._cjdn)

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def format(self, fmt: str = DEFAULT_FORMAT) -> str:
        from ..format import format_date
        return format_date(self, fmt)

    def __str__(self) -> str:
        return self.format() if self else ""

    def __repr__(self) -> str:
        if not self:
            return "Date()"
        y, m, d = self.ymd(JULIAN)
        return f"Date({y}, {m}, {d}, 'J')"
