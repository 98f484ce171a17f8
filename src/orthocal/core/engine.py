from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Optional, Protocol, Tuple, TypeVar

from .types import Reading, ShortDate

log = logging.getLogger(__name__)


class YearSchedule(Protocol):
    """Read surface of one built liturgical year (Julian month/day keys)."""
    year: int
    winter_indent: int
    spring_indent: int

    def glas(self, month: int, day: int) -> int: ...
    def n50(self, month: int, day: int) -> int: ...
    def weekday(self, month: int, day: int) -> int: ...
    def apostol(self, month: int, day: int) -> Reading: ...
    def gospel(self, month: int, day: int) -> Reading: ...
    def resurrect_gospel(self, month: int, day: int) -> Reading: ...
    def properties(self, month: int, day: int) -> Tuple[int, ...]: ...
    def date_with(self, tag: int) -> Optional[ShortDate]: ...
    def all_dates_with(self, tag: int) -> Tuple[ShortDate, ...]: ...


V = TypeVar("V")


@dataclass
class YearCache(Generic[V]):
    """
    Bounded map of built years. When full, it is cleared entirely before
    the next insert (no per-entry eviction).
    """
    capacity: int = 10000
    _items: Dict[str, V] = field(default_factory=dict)
    hits: int = 0
    misses: int = 0

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"cache capacity must be positive, got {self.capacity}")

    def get(self, key: str) -> Optional[V]:
        v = self._items.get(key)
        if v is None:
            self.misses += 1
        else:
            self.hits += 1
            log.debug("year cache hit: %s", key)
        return v

    def put(self, key: str, value: V) -> None:
        if len(self._items) >= self.capacity:
            log.debug("year cache full (%d entries), clearing", len(self._items))
            self._items.clear()
        self._items[key] = value

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def info(self) -> Dict[str, int]:
        return {
            "size": len(self._items),
            "capacity": self.capacity,
            "hits": self.hits,
            "misses": self.misses,
        }
