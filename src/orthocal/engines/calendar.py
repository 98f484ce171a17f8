"""
orthocal.engines.calendar
-------------------------
``OrthodoxCalendar``: the public query surface over built years.

Built ``OrthYear`` objects are cached per (year, indention options).
Changing the options does not drop cached years; the old entries just
stop matching. The cache is cleared wholesale when it reaches capacity.

Queries by year take a Julian year. Queries by ``Date`` use the date's
Julian (month, day). Period queries walk every Julian year that
overlaps the period and keep matches inside it, bounds included.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..core.date import DEFAULT_FORMAT, Date
from ..core.engine import YearCache
from ..core.errors import IndentConfigError, ScheduleError
from ..core.time import YearLike, parse_year
from ..core.types import JULIAN, CalendarFormat, IndentOptions, Reading, ShortDate, check_format
from ..format import describe, join_descriptions
from ..properties import tags as T
from .orthyear import OrthYear

log = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 10000


def _required(oy: OrthYear, tag: int) -> ShortDate:
    sd = oy.date_with(tag)
    if sd is None:
        raise ScheduleError(f"year {oy.year}: no day tagged {T.tag_name(tag) or tag}")
    return sd


def _to_date(y: int, sd: Optional[ShortDate]) -> Optional[Date]:
    """Julian (month, day) of year y as a Date; None below the supported range."""
    if sd is None or not Date.check(y, sd[0], sd[1]):
        return None
    return Date(y, sd[0], sd[1])


class OrthodoxCalendar:
    def __init__(self, options: Optional[IndentOptions] = None, *, cache_size: int = DEFAULT_CACHE_SIZE):
        self._options = options if options is not None else IndentOptions()
        self._cache: YearCache[OrthYear] = YearCache(capacity=cache_size)

    def __repr__(self) -> str:
        return f"OrthodoxCalendar(options={self._options!r}, cached={len(self._cache)})"

    # ---------------------------------------------------------
    # Configuration
    # ---------------------------------------------------------

    @property
    def options(self) -> IndentOptions:
        return self._options

    def _update(self, **kwargs) -> bool:
        try:
            new = self._options.tweak(**kwargs)
        except IndentConfigError as e:
            log.debug("rejected indention options %s: %s", kwargs, e)
            return False
        self._options = new
        return True

    def set_winter_indent_weeks_1(self, w1: int) -> bool:
        return self._update(winter_1=(w1,))

    def set_winter_indent_weeks_2(self, w1: int, w2: int) -> bool:
        return self._update(winter_2=(w1, w2))

    def set_winter_indent_weeks_3(self, w1: int, w2: int, w3: int) -> bool:
        return self._update(winter_3=(w1, w2, w3))

    def set_winter_indent_weeks_4(self, w1: int, w2: int, w3: int, w4: int) -> bool:
        return self._update(winter_4=(w1, w2, w3, w4))

    def set_winter_indent_weeks_5(self, w1: int, w2: int, w3: int, w4: int, w5: int) -> bool:
        return self._update(winter_5=(w1, w2, w3, w4, w5))

    def set_spring_indent_weeks(self, w1: int, w2: int) -> bool:
        return self._update(spring=(w1, w2))

    def set_spring_indent_apostol(self, flag: bool) -> None:
        self._update(apostol=bool(flag))

    def get_options(self) -> Tuple[List[int], bool]:
        return self._options.as_list(), self._options.apostol

    # ---------------------------------------------------------
    # Cache
    # ---------------------------------------------------------

    def year(self, year: YearLike) -> OrthYear:
        """Built year for the current options, from the cache when possible."""
        y = parse_year(year)
        key = f"{y}|{self._options.key()}"
        oy = self._cache.get(key)
        if oy is None:
            log.debug("building year %s", y)
            oy = OrthYear(y, self._options)
            self._cache.put(key, oy)
        return oy

    def cache_info(self) -> dict:
        return self._cache.info()

    def clear_cache(self) -> None:
        self._cache.clear()

    # ---------------------------------------------------------
    # Year queries
    # ---------------------------------------------------------

    def julian_pascha(self, year: YearLike) -> ShortDate:
        return _required(self.year(year), T.pasha)

    def pascha(self, year: YearLike, fmt: CalendarFormat = JULIAN) -> Optional[Date]:
        return self.get_date_with(year, T.pasha, fmt)

    def winter_indent(self, year: YearLike) -> int:
        return self.year(year).winter_indent

    def spring_indent(self, year: YearLike) -> int:
        return self.year(year).spring_indent

    def apostol_post_length(self, year: YearLike) -> int:
        """Days of the Apostles' fast: after All Saints, before Jun 29."""
        oy = self.year(year)
        sd = _required(oy, T.ned1_po50)
        start = Date(oy.year, sd[0], sd[1])
        end = Date(oy.year, 6, 29)
        return end.cjdn() - start.cjdn() - 1

    # ---------------------------------------------------------
    # Date queries
    # ---------------------------------------------------------

    def _at(self, d: Date) -> Tuple[OrthYear, int, int]:
        y, m, day = d.ymd(JULIAN)
        return self.year(y), m, day

    def date_glas(self, d: Date) -> int:
        oy, m, day = self._at(d)
        return oy.glas(m, day)

    def date_n50(self, d: Date) -> int:
        oy, m, day = self._at(d)
        return oy.n50(m, day)

    def date_properties(self, d: Date) -> List[int]:
        if not d:
            return []
        oy, m, day = self._at(d)
        return list(oy.properties(m, day))

    def date_apostol(self, d: Date) -> Reading:
        oy, m, day = self._at(d)
        return oy.apostol(m, day)

    def date_gospel(self, d: Date) -> Reading:
        oy, m, day = self._at(d)
        return oy.gospel(m, day)

    def resurrect_gospel(self, d: Date) -> Reading:
        oy, m, day = self._at(d)
        return oy.resurrect_gospel(m, day)

    def is_date_of(self, d: Date, tag: int) -> bool:
        oy, m, day = self._at(d)
        return oy.has(m, day, tag)

    # ---------------------------------------------------------
    # Searches
    # ---------------------------------------------------------

    @staticmethod
    def _span(year: YearLike, fmt: CalendarFormat) -> Tuple[Date, Date]:
        return Date(year, 1, 1, fmt), Date(year, 12, 31, fmt)

    def _first_in(self, d1: Date, d2: Date, pick: Callable[[OrthYear], Optional[ShortDate]]) -> Optional[Date]:
        lo, hi = min(d1, d2), max(d1, d2)
        for y in range(lo.year(JULIAN), hi.year(JULIAN) + 1):
            d = _to_date(y, pick(self.year(y)))
            if d is not None and lo <= d <= hi:
                return d
        return None

    def _all_in(self, d1: Date, d2: Date, pick: Callable[[OrthYear], Iterable[ShortDate]]) -> List[Date]:
        lo, hi = min(d1, d2), max(d1, d2)
        found = set()
        for y in range(lo.year(JULIAN), hi.year(JULIAN) + 1):
            for sd in pick(self.year(y)):
                d = _to_date(y, sd)
                if d is not None and lo <= d <= hi:
                    found.add(d)
        return sorted(found)

    def get_date_with(self, year: YearLike, tag: int, fmt: CalendarFormat = JULIAN) -> Optional[Date]:
        if check_format(fmt) == JULIAN:
            oy = self.year(year)
            return _to_date(oy.year, oy.date_with(tag))
        return self.get_date_inperiod_with(*self._span(year, fmt), tag)

    def get_date_inperiod_with(self, d1: Date, d2: Date, tag: int) -> Optional[Date]:
        return self._first_in(d1, d2, lambda oy: oy.date_with(tag))

    def get_alldates_with(self, year: YearLike, tag: int, fmt: CalendarFormat = JULIAN) -> List[Date]:
        if check_format(fmt) == JULIAN:
            oy = self.year(year)
            return sorted(d for d in (_to_date(oy.year, sd) for sd in oy.all_dates_with(tag)) if d)
        return self.get_alldates_inperiod_with(*self._span(year, fmt), tag)

    def get_alldates_inperiod_with(self, d1: Date, d2: Date, tag: int) -> List[Date]:
        return self._all_in(d1, d2, lambda oy: oy.all_dates_with(tag))

    def get_date_withanyof(self, year: YearLike, tags: Sequence[int],
                           fmt: CalendarFormat = JULIAN) -> Optional[Date]:
        if check_format(fmt) == JULIAN:
            oy = self.year(year)
            return _to_date(oy.year, oy.date_with_any_of(tags))
        return self.get_date_inperiod_withanyof(*self._span(year, fmt), tags)

    def get_date_inperiod_withanyof(self, d1: Date, d2: Date, tags: Sequence[int]) -> Optional[Date]:
        return self._first_in(d1, d2, lambda oy: oy.date_with_any_of(tags))

    def get_date_withallof(self, year: YearLike, tags: Sequence[int],
                           fmt: CalendarFormat = JULIAN) -> Optional[Date]:
        if check_format(fmt) == JULIAN:
            oy = self.year(year)
            return _to_date(oy.year, oy.date_with_all_of(tags))
        return self.get_date_inperiod_withallof(*self._span(year, fmt), tags)

    def get_date_inperiod_withallof(self, d1: Date, d2: Date, tags: Sequence[int]) -> Optional[Date]:
        return self._first_in(d1, d2, lambda oy: oy.date_with_all_of(tags))

    def get_alldates_withanyof(self, year: YearLike, tags: Sequence[int],
                               fmt: CalendarFormat = JULIAN) -> List[Date]:
        if check_format(fmt) == JULIAN:
            oy = self.year(year)
            found = {_to_date(oy.year, sd) for sd in oy.all_dates_with_any_of(tags)}
            return sorted(d for d in found if d)
        return self.get_alldates_inperiod_withanyof(*self._span(year, fmt), tags)

    def get_alldates_inperiod_withanyof(self, d1: Date, d2: Date, tags: Sequence[int]) -> List[Date]:
        return self._all_in(d1, d2, lambda oy: oy.all_dates_with_any_of(tags))

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def get_description_for_date(self, d: Date, fmt: str = DEFAULT_FORMAT) -> str:
        return describe(d, self.date_properties(d), fmt)

    def get_description_for_dates(self, dates: Iterable[Date], fmt: str = DEFAULT_FORMAT,
                                  separator: str = "\n") -> str:
        return join_descriptions((self.get_description_for_date(d, fmt) for d in dates), separator)
