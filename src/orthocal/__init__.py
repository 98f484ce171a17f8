"""orthocal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the default calendar on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    describe,
    find,
    find_all,
    find_between,
    get_calendar,
    julian_pascha,
    pascha,
    set_options,
    year,
)
from .core.date import Date
from .core.types import DayInfo, IndentOptions, Reading
from .engines.calendar import OrthodoxCalendar
from .engines.orthyear import OrthYear

__all__ = [
    "day_info",
    "describe",
    "find",
    "find_all",
    "find_between",
    "get_calendar",
    "julian_pascha",
    "pascha",
    "set_options",
    "year",
    "Date",
    "DayInfo",
    "IndentOptions",
    "Reading",
    "OrthodoxCalendar",
    "OrthYear",
]
