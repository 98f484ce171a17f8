from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, Union

from .core.date import DEFAULT_FORMAT, Date
from .core.time import YearLike
from .core.types import JULIAN, CalendarFormat, DayInfo, IndentOptions, ShortDate
from .engines.calendar import OrthodoxCalendar
from .engines.orthyear import OrthYear
from .properties.tags import tag_by_name

DateLike = Union[Date, date]

_calendar: Optional[OrthodoxCalendar] = None


def set_calendar(cal: OrthodoxCalendar) -> None:
    global _calendar
    _calendar = cal


def _cal() -> OrthodoxCalendar:
    if _calendar is None:
        raise RuntimeError("Default calendar not initialized")
    return _calendar


def get_calendar() -> OrthodoxCalendar:
    return _cal()


def set_options(options: IndentOptions) -> None:
    """Replace the indention options of the default calendar."""
    set_calendar(OrthodoxCalendar(options, cache_size=_cal().cache_info()["capacity"]))


def _as_date(d: DateLike) -> Date:
    return d if isinstance(d, Date) else Date.from_date(d)


def _as_tag(tag: Union[int, str]) -> int:
    return tag if isinstance(tag, int) else tag_by_name(tag)


# ---------------------------------------------------------
# Year level
# ---------------------------------------------------------

def year(y: YearLike) -> OrthYear:
    return _cal().year(y)


def julian_pascha(y: YearLike) -> ShortDate:
    return _cal().julian_pascha(y)


def pascha(y: YearLike, fmt: CalendarFormat = JULIAN) -> Optional[Date]:
    return _cal().pascha(y, fmt)


# ---------------------------------------------------------
# Day level
# ---------------------------------------------------------

def day_info(d: DateLike) -> DayInfo:
    """Weekday, glas, n50, tags and readings of one day (``datetime.date`` is Gregorian)."""
    dd = _as_date(d)
    cal = _cal()
    oy = cal.year(dd.year(JULIAN))
    m, day = dd.month(JULIAN), dd.day(JULIAN)
    return DayInfo(
        date=dd,
        weekday=oy.weekday(m, day),
        glas=oy.glas(m, day),
        n50=oy.n50(m, day),
        properties=oy.properties(m, day),
        apostol=oy.apostol(m, day),
        gospel=oy.gospel(m, day),
        resurrect_gospel=oy.resurrect_gospel(m, day),
    )


def describe(d: DateLike, fmt: str = DEFAULT_FORMAT) -> str:
    return _cal().get_description_for_date(_as_date(d), fmt)


# ---------------------------------------------------------
# Searches
# ---------------------------------------------------------

def find(y: YearLike, tag: Union[int, str], fmt: CalendarFormat = JULIAN) -> Optional[Date]:
    """First date in the year carrying ``tag`` (a tag number or constant name)."""
    return _cal().get_date_with(y, _as_tag(tag), fmt)


def find_all(y: YearLike, tag: Union[int, str], fmt: CalendarFormat = JULIAN) -> List[Date]:
    return _cal().get_alldates_with(y, _as_tag(tag), fmt)


def find_between(d1: DateLike, d2: DateLike, tags: Sequence[Union[int, str]]) -> List[Date]:
    """Every date in [d1, d2] carrying any of ``tags``."""
    return _cal().get_alldates_inperiod_withanyof(_as_date(d1), _as_date(d2), [_as_tag(t) for t in tags])
