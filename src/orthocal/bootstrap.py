from __future__ import annotations
from typing import Optional

from orthocal.core.types import IndentOptions
from orthocal.engines.calendar import DEFAULT_CACHE_SIZE, OrthodoxCalendar


def build_calendar(options: Optional[IndentOptions] = None, *, cache_size: int = DEFAULT_CACHE_SIZE) -> OrthodoxCalendar:
    return OrthodoxCalendar(options if options is not None else IndentOptions(), cache_size=cache_size)
