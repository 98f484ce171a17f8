"""
orthocal.format
---------------
Text rendering: the date format mini-language and day descriptions.

Directives are ``%`` followed by exactly two characters. The first
character selects the calendar (J, G, M) and the second the field:

    Y  year              y  last two digits of the year
    q  month number      Q  zero-padded month
    d  day               D  zero-padded day
    M  month, genitive   F  month, nominative    m  month, short

Plus ``%wd`` (weekday number, 0=Sunday), ``%WD`` (weekday name),
``%Wd`` (short weekday name) and ``%%`` (a literal percent sign).
Unknown directives are kept verbatim. A ``%`` with fewer than two
characters after it ends processing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

from .core.types import FORMATS
from .properties import tags as T
from .properties.titles import property_title

if TYPE_CHECKING:
    from .core.date import Date

MONTHS_GENITIVE = (
    "Января", "Февраля", "Марта", "Апреля", "Мая", "Июня",
    "Июля", "Августа", "Сентября", "Октября", "Ноября", "Декабря",
)
MONTHS_NOMINATIVE = (
    "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
    "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
)
MONTHS_SHORT = (
    "янв", "фев", "мар", "апр", "мая", "июн",
    "июл", "авг", "сен", "окт", "ноя", "дек",
)
WEEKDAYS = ("Воскресенье", "Понедельник", "Вторник", "Среда", "Четверг", "Пятница", "Суббота")
WEEKDAYS_SHORT = ("Вс", "Пн", "Вт", "Ср", "Чт", "Пт", "Сб")

# fast periods appended after the day's own titles
_FAST_TAGS = (T.post_petr, T.post_usp, T.post_rojd)


def _directive(d: "Date", code: str) -> str:
    if code == "wd":
        return str(d.weekday())
    if code == "WD":
        return WEEKDAYS[d.weekday()]
    if code == "Wd":
        return WEEKDAYS_SHORT[d.weekday()]

    fmt, field = code[0], code[1]
    if fmt not in FORMATS:
        return "%" + code
    if field == "Y":
        return str(d.year(fmt))
    if field == "y":
        s = str(d.year(fmt))
        return s if len(s) < 3 else s[-2:]
    if field == "q":
        return str(d.month(fmt))
    if field == "Q":
        return f"{d.month(fmt):02d}"
    if field == "d":
        return str(d.day(fmt))
    if field == "D":
        return f"{d.day(fmt):02d}"
    if field == "M":
        return MONTHS_GENITIVE[d.month(fmt) - 1]
    if field == "F":
        return MONTHS_NOMINATIVE[d.month(fmt) - 1]
    if field == "m":
        return MONTHS_SHORT[d.month(fmt) - 1]
    return "%" + code


def format_date(d: "Date", fmt: str) -> str:
    """Expand directives left to right in a single pass."""
    if len(fmt) < 3:
        return fmt
    out = fmt
    pos = 0
    while True:
        pos = out.find("%", pos)
        if pos < 0:
            return out
        if out[pos + 1:pos + 2] == "%":
            out = out[:pos] + out[pos + 1:]
            pos += 1
            continue
        if pos >= len(out) - 2:
            return out
        code = out[pos + 1:pos + 3]
        rep = _directive(d, code)
        out = out[:pos] + rep + out[pos + 3:]
        pos += len(rep)


def describe(d: "Date", properties: Sequence[int], fmt: str) -> str:
    """
    Formatted date followed by the titles of its day-level properties
    (tags below the feast-class range) and of the fasts it falls in.
    """
    if not d:
        return ""
    buf = ""
    for p in properties:
        if p < T.dvana10_per_prazd:
            buf += property_title(p) + " "
    for p in _FAST_TAGS:
        if p in properties:
            buf += property_title(p) + ". "
    return (d.format(fmt) + " " + buf).strip(" ")


def join_descriptions(items: Iterable[str], separator: str = "\n") -> str:
    return separator.join(s for s in items if s)
