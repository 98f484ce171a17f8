from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List, Literal, Sequence, Tuple

from .errors import IndentConfigError

# Calendar systems: Julian, Milankovic (Revised Julian), Gregorian.
CalendarFormat = Literal["J", "M", "G"]
JULIAN: CalendarFormat = "J"
MILANKOVIC: CalendarFormat = "M"
GREGORIAN: CalendarFormat = "G"
FORMATS: Tuple[CalendarFormat, ...] = (JULIAN, MILANKOVIC, GREGORIAN)

# (month, day) inside one Julian year
ShortDate = Tuple[int, int]

BOOKS = {
    1: "apostol",
    2: "matthew",
    3: "mark",
    4: "luke",
    5: "john",
}


def check_format(fmt: str) -> CalendarFormat:
    if fmt not in FORMATS:
        raise ValueError(f"Unknown calendar format '{fmt}'. Available: {list(FORMATS)}")
    return fmt  # type: ignore[return-value]


@dataclass(frozen=True)
class Reading:
    """
    Scripture reading: book in the low 4 bits of ``code``, pericope
    (zachalo) number in the remaining bits. ``code == 0`` means no reading.
    """
    code: int = 0
    comment: str = ""

    @property
    def book(self) -> int:
        return self.code & 0xF

    @property
    def zach(self) -> int:
        return self.code >> 4

    @property
    def book_name(self) -> str:
        return BOOKS.get(self.book, "")

    def __bool__(self) -> bool:
        return self.code != 0


EMPTY_READING = Reading()

_INDENT_MIN = 1
_INDENT_MAX = 33


def _check_weeks(name: str, weeks: Sequence[int], size: int) -> Tuple[int, ...]:
    if len(weeks) != size:
        raise IndentConfigError(f"{name} needs {size} week numbers, got {len(weeks)}")
    for w in weeks:
        if not (_INDENT_MIN <= int(w) <= _INDENT_MAX):
            raise IndentConfigError(f"{name}: week number {w} outside {_INDENT_MIN}..{_INDENT_MAX}")
    return tuple(int(w) for w in weeks)


@dataclass(frozen=True)
class IndentOptions:
    """
    Week numbers reused by the winter indention (one list per indention
    size 1..5), the two autumn indention weeks, and whether the Apostol
    follows the autumn indention.
    """
    winter_1: Tuple[int, ...] = (33,)
    winter_2: Tuple[int, ...] = (32, 33)
    winter_3: Tuple[int, ...] = (31, 32, 33)
    winter_4: Tuple[int, ...] = (30, 31, 32, 33)
    winter_5: Tuple[int, ...] = (30, 31, 17, 32, 33)
    spring: Tuple[int, ...] = (10, 11)
    apostol: bool = False

    def __post_init__(self) -> None:
        for k in range(1, 6):
            name = f"winter_{k}"
            object.__setattr__(self, name, _check_weeks(name, getattr(self, name), k))
        object.__setattr__(self, "spring", _check_weeks("spring", self.spring, 2))
        object.__setattr__(self, "apostol", bool(self.apostol))

    def winter(self, weeks: int) -> Tuple[int, ...]:
        """Configured week numbers for a winter indention of ``weeks`` weeks (1..5)."""
        if not (1 <= weeks <= 5):
            return ()
        return getattr(self, f"winter_{weeks}")

    def as_list(self) -> List[int]:
        """The 17 week numbers in canonical order."""
        out: List[int] = []
        for k in range(1, 6):
            out.extend(self.winter(k))
        out.extend(self.spring)
        return out

    @classmethod
    def from_list(cls, values: Sequence[int], apostol: bool = False) -> "IndentOptions":
        if len(values) != 17:
            raise IndentConfigError(f"Indention configuration needs 17 values, got {len(values)}")
        v = [int(x) for x in values]
        return cls(
            winter_1=tuple(v[0:1]),
            winter_2=tuple(v[1:3]),
            winter_3=tuple(v[3:6]),
            winter_4=tuple(v[6:10]),
            winter_5=tuple(v[10:15]),
            spring=tuple(v[15:17]),
            apostol=apostol,
        )

    def tweak(self, **kwargs) -> "IndentOptions":
        return replace(self, **kwargs)

    def key(self) -> str:
        return ",".join(str(x) for x in self.as_list()) + f"|{int(self.apostol)}"


@dataclass(frozen=True)
class DayInfo:
    """Everything known about one day; ``date`` is a ``core.date.Date``."""
    date: object
    weekday: int
    glas: int
    n50: int
    properties: Tuple[int, ...]
    apostol: Reading
    gospel: Reading
    resurrect_gospel: Reading
