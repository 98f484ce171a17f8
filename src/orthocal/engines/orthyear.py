"""
orthocal.engines.orthyear
-------------------------
The liturgical year for one Julian year.

``OrthYear(year, options)`` computes, for every (month, day) of the
Julian year:

  - weekday (0=Sunday) anchored at that year's Pascha,
  - property tags (fixed feasts, the Paschal cycle, rule-placed Sundays
    and Saturdays, displaced feasts, feast classes, fasts),
  - glas (tone 1..8, -1 from Lazarus Saturday to All Saints),
  - n50, the week number after Pentecost (-1 during Lent),
  - the Liturgy Apostol and Gospel readings, including the winter and
    autumn indention ("otstupka") of the reading cycle.

All stepping stays inside the year: moving past Jan 1 or Dec 31 leaves
a date unchanged. The previous year only contributes its Pascha and
weekday map, which carry glas, n50 and the autumn indention across the
new year.

The built object is read-only; every query is total and reports
absence with -1, an empty ``Reading``, ``None`` or an empty tuple.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.errors import ScheduleError
from ..core.time import YearLike, month_length, parse_year
from ..core.types import EMPTY_READING, IndentOptions, Reading, ShortDate
from ..properties import tags as T
from .pascha import gauss_pascha
from .readings import (
    APOSTOL_TABLE_1,
    APOSTOL_TABLE_2,
    GOSPEL_TABLE_1,
    GOSPEL_TABLE_2,
    MATINS_OVERRIDES,
    resurrect_gospel_for,
    table_1,
)

log = logging.getLogger(__name__)

SUNDAY = 0
MONDAY = 1
SATURDAY = 6

# ---------------------------------------------------------
# Static rule tables
# ---------------------------------------------------------

_FIXED_RE = re.compile(r"^m(\d+)d(\d+)$")


def _fixed_tags() -> Tuple[Tuple[int, ShortDate], ...]:
    """m<month>d<day> tags sit on their own date every year."""
    out = []
    for name, tag in T.BY_NAME.items():
        m = _FIXED_RE.match(name)
        if m:
            out.append((tag, (int(m.group(1)), int(m.group(2)))))
    return tuple(sorted(out))


FIXED_TAGS = _fixed_tags()

SVYATKI_DATES: Tuple[ShortDate, ...] = (
    (1, 1), (1, 2), (1, 3), (1, 4),
    (12, 25), (12, 26), (12, 27), (12, 28), (12, 29), (12, 30), (12, 31),
)

# Extra tags riding on days of the Pascha..All Saints chain
PASCHAL_EXTRAS: Dict[int, Tuple[int, ...]] = {
    T.svetlaya2: (T.mari_icon_09, T.mari_icon_17, T.prep_dav_gar, T.hristodul),
    T.svetlaya3: (T.mari_icon_24, T.sobor_sinai_prep),
    T.svetlaya5: (T.mari_icon_06,),
    T.ned3_popashe: (T.iosif_arimaf, T.tamar_gruz),
    T.ned4_popashe: (T.tavif, T.pm_avraam_bolg),
    T.s4popashe_3: (T.mari_icon_04, T.mari_icon_14),
    T.s4popashe_6: (T.sobor_butov,),
    T.s6popashe_2: (T.mari_icon_07,),
    T.s6popashe_4: (T.much_fereidan,),
    T.ned7_popashe: (T.mari_icon_23, T.mari_icon_25),
    T.s7popashe_3: (T.dodo_gar,),
    T.s7popashe_4: (T.david_gar,),
    T.s1po50_1: (T.mari_icon_12, T.mari_icon_20),
    T.s1po50_4: (T.mari_icon_19,),
    T.ned1_po50: (T.mari_icon_22, T.mari_icon_10, T.mari_icon_05, T.mari_icon_16),
}

# Offsets from All Saints Sunday
AFTER_ALL_SAINTS: Tuple[Tuple[int, Tuple[int, ...]], ...] = (
    (4, (T.mari_icon_15,)),
    (5, (T.varlaam_hut, T.mari_icon_08, T.mari_icon_21)),
    (7, (T.ned2_po50, T.sobor_vsehsv_rus, T.sobor_afonpr)),
    (14, (T.ned3_po50, T.sobor_belorus, T.sobor_vologod, T.sobor_novgorod,
          T.sobor_pskov, T.sobor_piter, T.sobor_udmurt, T.sobor_volgograd)),
    (21, (T.ned4_po50, T.sobor_ppech_prep)),
)

LENT_EXTRAS: Dict[int, Tuple[int, ...]] = {
    T.vel_post_d6n1: (T.feodor_tir,),
    T.vel_post_d0n2: (T.mari_icon_11,),
    T.vel_post_d0n3: (T.grigor_palam, T.sobor_kpech_prep),
    T.vel_post_d0n5: (T.ioann_lestv,),
    T.vel_post_d6n5: (T.mari_icon_01, T.mari_icon_02),
    T.vel_post_d0n6: (T.mari_egipt,),
}

CHEESEFARE_EXTRAS: Dict[int, Tuple[int, ...]] = {
    T.sirnaya4: (T.shio_mg,),
    T.sirnaya6: (T.sobor_vseh_prep,),
}

SUNDAY_ON_OR_AFTER: Tuple[Tuple[ShortDate, Tuple[int, ...]], ...] = (
    ((8, 7), (T.sobor_valaam,)),
    ((6, 18), (T.mari_icon_13,)),
    ((8, 16), (T.mari_icon_18,)),
    ((9, 3), (T.sobor_kazahst,)),
    ((10, 18), (T.sobor_karel,)),
    ((1, 29), (T.sobor_perm,)),
    ((8, 26), (T.sobor_nnovgor,)),
    ((5, 19), (T.sobor_much_holm,)),
    ((6, 27), (T.much_lipsiisk,)),
    ((9, 7), (T.sobor_altai,)),
    ((6, 30), (T.sobor_tversk, T.prep_sokolovsk, T.arsen_tversk)),
)

SUNDAY_ON_OR_BEFORE: Tuple[Tuple[ShortDate, Tuple[int, ...]], ...] = (
    ((8, 25), (T.sobor_mosk,)),
    ((7, 27), (T.sobor_smolensk,)),
    ((9, 6), (T.petr_fevron_murom,)),
    ((9, 28), (T.sobor_kuban, T.sobor_ispan)),
    ((8, 31), (T.sobor_kuzbas,)),
)

# Falls on the nearest Sunday: Mon..Wed look back, Thu..Sat look ahead
NEAREST_SUNDAY: Tuple[Tuple[ShortDate, int], ...] = (
    ((8, 31), T.sobor_saratov),
    ((11, 10), T.sobor_alansk),
    ((9, 20), T.sobor_german),
    ((10, 11), T.sobor_otcev7sobora),
    ((11, 1), T.sobor_bessrebren),
    ((1, 25), T.sobor_novom_rus),
    ((7, 16), T.sobor_otcev_1_6sob),
)

DVANA10_PER: Tuple[int, ...] = (T.vel_post_d0n7, T.s6popashe_4, T.ned8_popashe)
DVANA10_NEP: Tuple[int, ...] = (
    T.m1d6, T.sretenie, T.m3d25, T.m8d6, T.m8d15, T.m9d8, T.m9d14, T.m11d21, T.m12d25,
)
VEL_PRAZD: Tuple[int, ...] = (T.m1d1, T.m6d24, T.m6d29, T.m8d29, T.m10d1)

# Substitute Sundays inside the winter indention, popped from the end
_WINTER_SUNDAYS: Dict[int, Tuple[int, ...]] = {
    1: (32,),
    2: (32, 31),
    3: (32, 31, 30),
    4: (32, 17, 31, 30),
}

# Typikon p.380: Saturday / Sunday after the Nativity by weekday of Dec 25
_SAT_AFTER_NATIVITY = {1: (12, 30), 2: (12, 29), 3: (12, 28), 4: (12, 27), 5: (12, 26)}
_SUN_AFTER_NATIVITY = {1: (12, 31), 2: (12, 30), 3: (12, 29), 4: (12, 28), 5: (12, 27)}
# ...and before Theophany by weekday of the previous Dec 25
_SAT_BEFORE_THEOPHANY = {2: (1, 5), 3: (1, 4), 4: (1, 3), 5: (1, 2)}
_SUN_BEFORE_THEOPHANY = {3: (1, 5), 4: (1, 4), 5: (1, 3), 6: (1, 2)}


def year_days(y: int) -> List[ShortDate]:
    """Every (month, day) of Julian year ``y`` in order."""
    leap = y % 4 == 0
    return [(m, d) for m in range(1, 13) for d in range(1, month_length(m, leap) + 1)]


def _next_glas(g: int) -> int:
    return 1 if g >= 8 else g + 1


@dataclass(frozen=True)
class DayRecord:
    weekday: int
    glas: int
    n50: int
    apostol: Reading
    gospel: Reading
    properties: Tuple[int, ...]


# ---------------------------------------------------------
# Weekday map for one year
# ---------------------------------------------------------

class _Calendar:
    """Ordered days of one Julian year with in-year stepping."""

    def __init__(self, y: int):
        self.days = year_days(y)
        self.pos: Dict[ShortDate, int] = {d: i for i, d in enumerate(self.days)}
        self.pascha = gauss_pascha(y)
        p = self.pos[self.pascha]
        self.dn: Dict[ShortDate, int] = {d: (i - p) % 7 for i, d in enumerate(self.days)}

    def weekday(self, d: Optional[ShortDate]) -> int:
        return self.dn.get(d, -1) if d is not None else -1

    def inc(self, d: ShortDate, n: int) -> ShortDate:
        """``n`` days later, or ``d`` itself if that leaves the year."""
        if n < 1 or d not in self.pos:
            return d
        j = self.pos[d] + n
        return self.days[j] if j < len(self.days) else d

    def dec(self, d: ShortDate, n: int) -> ShortDate:
        if n < 1 or d not in self.pos:
            return d
        j = self.pos[d] - n
        return self.days[j] if j >= 0 else d

    def find_weekday(self, start: ShortDate, weekday: int, forward: bool = True) -> Optional[ShortDate]:
        """First day from ``start`` (inclusive) with the given weekday."""
        d = start
        while True:
            if self.dn.get(d) == weekday:
                return d
            nxt = self.inc(d, 1) if forward else self.dec(d, 1)
            if nxt == d:
                return None
            d = nxt

    def weeks_between(self, a: ShortDate, b: ShortDate) -> int:
        return (self.pos[b] - self.pos[a]) // 7


# ---------------------------------------------------------
# Builder
# ---------------------------------------------------------

class _YearBuilder:
    def __init__(self, y: int, options: IndentOptions):
        self.y = y
        self.opts = options
        self.cur = _Calendar(y)
        self.prev = _Calendar(y - 1)
        self.props: Dict[ShortDate, Set[int]] = {d: set() for d in self.cur.days}
        self.where: Dict[int, List[ShortDate]] = {}
        self.glas: Dict[ShortDate, int] = {d: -1 for d in self.cur.days}
        self.n50: Dict[ShortDate, int] = {d: -1 for d in self.cur.days}
        self.gospel: Dict[ShortDate, Reading] = {d: EMPTY_READING for d in self.cur.days}
        self.apostol: Dict[ShortDate, Reading] = {d: EMPTY_READING for d in self.cur.days}
        self.winter_indent = 0
        self.spring_indent = 0

    # --- tag helpers

    def _tag(self, d: Optional[ShortDate], *tags: int) -> None:
        if d is None or d not in self.props:
            return
        s = self.props[d]
        for t in tags:
            if t not in s:
                s.add(t)
                self.where.setdefault(t, []).append(d)

    def _untag_everywhere(self, tag: int) -> None:
        for d in self.where.pop(tag, []):
            self.props[d].discard(tag)

    def _date(self, tag: int) -> Optional[ShortDate]:
        found = self.where.get(tag)
        return found[0] if found else None

    def _need(self, tag: int) -> ShortDate:
        d = self._date(tag)
        if d is None:
            raise ScheduleError(f"year {self.y}: no day tagged {T.tag_name(tag) or tag}")
        return d

    def _has(self, d: Optional[ShortDate], tag: int) -> bool:
        return d is not None and tag in self.props.get(d, ())

    def _tag_range(self, start: ShortDate, stop: ShortDate, tag: int) -> None:
        """Tag every day in [start, stop)."""
        d = start
        while d < stop:
            self._tag(d, tag)
            nxt = self.cur.inc(d, 1)
            if nxt == d:
                break
            d = nxt

    def _nearest_sunday(self, d: ShortDate) -> Optional[ShortDate]:
        w = self.cur.weekday(d)
        if w == SUNDAY:
            return d
        if 1 <= w <= 3:
            return self.cur.find_weekday(self.cur.dec(d, 1), SUNDAY, forward=False)
        if 4 <= w <= 6:
            return self.cur.find_weekday(self.cur.inc(d, 1), SUNDAY)
        return None

    # --- phases

    def build(self) -> "_YearBuilder":
        self._tag_fixed()
        self._tag_paschal_cycle()
        self._tag_sunday_rules()
        self._tag_exaltation_and_advent()
        self._tag_triodion()
        self._tag_nativity_theophany()
        self._tag_displaced()
        self._tag_feast_classes()
        self._assign_glas()
        self._assign_n50()
        self._assign_readings()
        return self

    def _tag_fixed(self) -> None:
        for tag, d in FIXED_TAGS:
            self._tag(d, tag)
        for d in SVYATKI_DATES:
            self._tag(d, T.full7_svyatki)
        self._tag_range((11, 15), (12, 25), T.post_rojd)
        self._tag_range((8, 1), (8, 15), T.post_usp)

    def _tag_paschal_cycle(self) -> None:
        dd = self.cur.pascha
        # pasha .. ned1_po50 are consecutive tag values on consecutive days
        for tag in range(T.pasha, T.ned1_po50 + 1):
            extra = PASCHAL_EXTRAS.get(tag, ())
            if tag <= T.svetlaya6:
                extra = (T.full7_pasha,) + extra
            elif T.ned8_popashe <= tag <= T.s1po50_6:
                extra = (T.full7_troica,) + extra
            self._tag(dd, tag, *extra)
            if tag != T.ned1_po50:
                dd = self.cur.inc(dd, 1)
        all_saints = dd
        self._tag_range(self.cur.inc(all_saints, 1), (6, 29), T.post_petr)
        for offset, tags in AFTER_ALL_SAINTS:
            self._tag(self.cur.inc(all_saints, offset), *tags)

    def _tag_sunday_rules(self) -> None:
        c = self.cur
        for start, tags in SUNDAY_ON_OR_AFTER:
            self._tag(c.find_weekday(start, SUNDAY), *tags)
        for start, tags in SUNDAY_ON_OR_BEFORE:
            self._tag(c.find_weekday(start, SUNDAY, forward=False), *tags)
        for start, tag in NEAREST_SUNDAY:
            self._tag(self._nearest_sunday(start), tag)

        self._tag((2, 29) if self.y % 4 == 0 else (2, 28), T.mari_icon_03)

        # Chelyabinsk: Sunday on/after Sep 27, unless that is the Protection (Oct 1)
        dd = c.find_weekday((9, 27), SUNDAY)
        if dd == (10, 1):
            dd = c.find_weekday((9, 26), SUNDAY, forward=False)
        self._tag(dd, T.sobor_chelyab)

    def _tag_exaltation_and_advent(self) -> None:
        c = self.cur
        self._tag(c.find_weekday((9, 13), SATURDAY, forward=False), T.sub_pered14sent)
        self._tag(c.find_weekday((9, 13), SUNDAY, forward=False), T.ned_pered14sent)
        self._tag(c.find_weekday((9, 15), SATURDAY), T.sub_po14sent)
        self._tag(c.find_weekday((9, 15), SUNDAY), T.ned_po14sent)

        # Demetrius Saturday never falls on Oct 22
        dd: Optional[ShortDate] = (10, 25)
        while dd is not None:
            dd = c.find_weekday(dd, SATURDAY, forward=False)
            if dd is None or dd[1] != 22:
                break
            dd = c.dec(dd, 1)
        self._tag(dd, T.sub_dmitry)

        before = c.find_weekday((12, 24), SUNDAY, forward=False)
        self._tag(before, T.ned_peredrojd)
        if before is not None:
            self._tag(c.find_weekday(c.dec(before, 1), SUNDAY, forward=False), T.ned_praotec)
        self._tag(c.find_weekday((12, 24), SATURDAY, forward=False), T.sub_peredrojd)

    def _tag_triodion(self) -> None:
        c = self.cur
        dd = c.dec(c.pascha, 70)
        self._tag(dd, T.ned_mitar_ifaris, T.full7_mitar)
        for k in range(1, 7):
            self._tag(c.inc(dd, k), T.full7_mitar)
        dd = c.inc(dd, 7)
        self._tag(dd, T.ned_obludnom)
        dd = c.inc(dd, 6)
        self._tag(dd, T.sub_myasopust)
        dd = c.inc(dd, 1)
        self._tag(dd, T.ned_myasopust)
        for tag in range(T.sirnaya1, T.ned_siropust + 1):
            dd = c.inc(dd, 1)
            self._tag(dd, tag, T.full7_sirn, *CHEESEFARE_EXTRAS.get(tag, ()))
        for tag in range(T.vel_post_d1n1, T.vel_post_d6n7 + 1):
            dd = c.inc(dd, 1)
            self._tag(dd, tag, T.post_vel, *LENT_EXTRAS.get(tag, ()))

    def _tag_nativity_theophany(self) -> None:
        c = self.cur
        i = c.weekday((12, 25))
        dd = _SAT_AFTER_NATIVITY.get(i, (12, 31))
        self._tag(dd, T.sub_porojdestve if c.weekday(dd) == SATURDAY else T.sub_porojdestve_r)
        dd = _SUN_AFTER_NATIVITY.get(i, (12, 26))
        if c.weekday(dd) == SUNDAY:
            self._tag(dd, T.ned_porojdestve, T.ned_prav_bogootec)
        else:
            self._tag(dd, T.ned_porojdestve_r, T.ned_prav_bogootec)
        if i in (0, 1):
            dd = (12, 30) if i == 1 else (12, 31)
            self._tag(dd, T.sub_peredbogoyav if c.weekday(dd) == SATURDAY else T.sub_peredbogoyav_r)

        i = self.prev.weekday((12, 25))
        if i not in (0, 1):
            dd = _SAT_BEFORE_THEOPHANY.get(i, (1, 1))
            self._tag(dd, T.sub_peredbogoyav if c.weekday(dd) == SATURDAY else T.sub_peredbogoyav_r)
        dd = _SUN_BEFORE_THEOPHANY.get(i, (1, 1))
        self._tag(dd, T.ned_peredbogoyav if c.weekday(dd) == SUNDAY else T.ned_peredbogoyav_r)

        self._tag(c.find_weekday((1, 7), SATURDAY), T.sub_pobogoyav, T.pahomii_kensk)
        self._tag(c.find_weekday((1, 7), SUNDAY), T.ned_pobogoyav)

    def _tag_displaced(self) -> None:
        c = self.cur
        meat_sat = self._date(T.sub_myasopust)
        nachalo_posta = self._date(T.vel_post_d1n1)

        # Three Hierarchs move off the Meatfare Saturday and Cheesefare Wed/Fri
        dd = (1, 30)
        if dd in (meat_sat, self._date(T.sirnaya3), self._date(T.sirnaya5)):
            dd = (1, 29)
        self._tag(dd, T.sobor_3sv)

        # Meeting of the Lord never enters Lent; it pushes Meatfare Saturday back a week
        sretenie = (2, 2)
        if nachalo_posta is not None and sretenie >= nachalo_posta:
            sretenie = c.dec(nachalo_posta, 1)
        self._tag(sretenie, T.sretenie)
        if sretenie == meat_sat:
            self._untag_everywhere(T.sub_myasopust)
            meat_sat = c.find_weekday(c.dec(sretenie, 1), SATURDAY, forward=False)
            self._tag(meat_sat, T.sub_myasopust)

        if sretenie != (2, 1):
            dd = (2, 1)
            if dd == meat_sat:
                dd = c.dec(dd, 1)
            self._tag(dd, T.sretenie_predpr)

        self._tag_meeting_afterfeast(sretenie)

        # First and second finding of the head of John the Baptist
        dd = (2, 24)
        if any(self._has(dd, t) for t in (T.sub_myasopust, T.sirnaya3, T.sirnaya5, T.vel_post_d1n1)):
            dd = (2, 23)
        if self._within(dd, T.vel_post_d2n1, T.vel_post_d5n1):
            dd = self._date(T.vel_post_d6n1)
        self._tag(dd, T.obret_gl_ioanna12)

        # Forty Martyrs of Sebaste
        dd = (3, 9)
        if self._has(dd, T.vel_post_d3n4):
            dd = (3, 8)
        if self._has(dd, T.vel_post_d4n5):
            dd = (3, 7)
        if self._has(dd, T.vel_post_d6n5):
            dd = (3, 10)
        if self._within(dd, T.vel_post_d1n1, T.vel_post_d5n1):
            dd = self._date(T.vel_post_d6n1)
        self._tag(dd, T.muchenik_40)

        # Annunciation forefeast and leave-taking
        holy_monday = self._date(T.vel_post_d1n7)
        if holy_monday is not None and (3, 25) < holy_monday:
            dd = (3, 24)
            if self._has(dd, T.vel_post_d6n6):
                dd = (3, 22)
            if self._has(dd, T.vel_post_d4n5):
                dd = (3, 23)
            if self._has(dd, T.vel_post_d2n5):
                dd = (3, 23)
            self._tag(dd, T.blag_predprazd)
        lazarus = self._date(T.vel_post_d6n6)
        if lazarus is not None and (3, 26) < lazarus:
            self._tag((3, 26), T.blag_otdanie)

        # St George moves out of Holy Week to Bright Monday
        dd = (4, 23)
        if holy_monday is not None and holy_monday <= dd <= c.pascha:
            dd = self._date(T.svetlaya1)
        self._tag(dd, T.georgia_pob)

        # Third finding of the head of John the Baptist
        dd = (5, 25)
        if dd in (self._date(T.s7popashe_6), self._date(T.ned1_po50)):
            dd = (5, 23)
        if self._has(dd, T.s1po50_1):
            dd = (5, 26)
        if self._has(dd, T.ned8_popashe):
            dd = (5, 22)
        self._tag(dd, T.obret_gl_ioanna3)

    def _within(self, d: Optional[ShortDate], lo_tag: int, hi_tag: int) -> bool:
        lo, hi = self._date(lo_tag), self._date(hi_tag)
        return d is not None and lo is not None and hi is not None and lo <= d <= hi

    def _tag_meeting_afterfeast(self, sretenie: ShortDate) -> None:
        c = self.cur
        d = self._date
        otdanie: Optional[ShortDate] = (2, 9)
        prodigal = d(T.ned_obludnom)
        if prodigal is not None:
            if prodigal <= sretenie <= c.inc(prodigal, 2):
                otdanie = c.inc(prodigal, 5)
            lo = c.inc(prodigal, 3)
            if lo <= sretenie <= c.inc(lo, 3):
                otdanie = d(T.sirnaya2)
        for lo_tag, hi_tag, target in (
            (T.ned_myasopust, T.sirnaya1, T.sirnaya4),
            (T.sirnaya2, T.sirnaya3, T.sirnaya6),
            (T.sirnaya4, T.sirnaya6, T.ned_siropust),
        ):
            if self._within(sretenie, lo_tag, hi_tag):
                otdanie = d(target)
        if not self._has(sretenie, T.ned_siropust) and otdanie is not None:
            if self._has(otdanie, T.sub_myasopust):
                otdanie = c.dec(otdanie, 1)
            self._tag(otdanie, T.sretenie_otdanie)

        # afterfeast days between the feast and its leave-taking, skipping Meatfare Saturday
        end = d(T.sretenie_otdanie)
        first = c.inc(sretenie, 1)
        if end is None or end == first:
            return
        t2 = first
        i = 1
        while True:
            if self._has(t2, T.sub_myasopust):
                t2 = c.inc(t2, 1)
                if t2 >= end:
                    break
            if i <= 6:
                self._tag(t2, T.sretenie_poprazd1 + i - 1)
            nxt = c.inc(t2, 1)
            i += 1
            if nxt == t2 or nxt >= end:
                break
            t2 = nxt

    def _tag_feast_classes(self) -> None:
        for tag in DVANA10_PER:
            self._tag(self._date(tag), T.dvana10_per_prazd)
        for tag in DVANA10_NEP:
            self._tag(self._date(tag), T.dvana10_nep_prazd)
        for tag in VEL_PRAZD:
            self._tag(self._date(tag), T.vel_prazd)

    # --- glas

    def _assign_glas(self) -> None:
        c = self.cur
        lazarus = self._need(T.vel_post_d6n6)
        all_saints = self._need(T.ned1_po50)
        for d in c.days[c.pos[lazarus]:c.pos[all_saints] + 1]:
            self.glas[d] = -1

        # from the Monday after All Saints: tone 8, then +1 every Sunday
        glas = 8
        for d in c.days[c.pos[all_saints] + 1:]:
            if c.dn[d] == SUNDAY:
                glas = _next_glas(glas)
            self.glas[d] = glas

        # carry the previous year's cycle to Jan 1
        p = self.prev
        prev_monday = p.inc(p.pascha, 57)
        glas = 8
        for d in p.days[p.pos[prev_monday] + 1:]:
            if p.dn[d] == SUNDAY:
                glas = _next_glas(glas)

        if c.dn[(1, 1)] == SUNDAY:
            glas = _next_glas(glas)
        for k, d in enumerate(c.days[:c.pos[lazarus]]):
            if k > 0 and c.dn[d] == SUNDAY:
                glas = _next_glas(glas)
            self.glas[d] = glas

    # --- n50

    def _assign_n50(self) -> None:
        c, p = self.cur, self.prev
        prev_pentecost = p.inc(p.pascha, 49)
        i = sum(1 for d in p.days[p.pos[prev_pentecost] + 1:] if p.dn[d] == MONDAY)
        if c.dn[(1, 1)] == MONDAY:
            i += 1

        nachalo_posta = self._need(T.vel_post_d1n1)
        pentecost = self._need(T.ned8_popashe)
        for k, d in enumerate(c.days):
            if k > 0 and c.dn[d] == MONDAY:
                i += 1
            if d < nachalo_posta:
                self.n50[d] = i
            elif d < pentecost:
                self.n50[d] = -1
            elif d == pentecost:
                self.n50[d] = 0
                i = 0
            else:
                self.n50[d] = i

    # --- readings

    def _assign_readings(self) -> None:
        c, p = self.cur, self.prev
        need = self._need
        publican = need(T.ned_mitar_ifaris)
        sun_after_theophany = need(T.ned_pobogoyav)
        sun_after_exaltation = need(T.ned_po14sent)
        pentecost = need(T.ned8_popashe)
        mf7 = c.inc(publican, 7)
        mf14 = c.inc(publican, 14)
        mf21 = c.inc(publican, 21)
        dd1 = c.dec(sun_after_exaltation, 14)
        dd2 = c.dec(sun_after_exaltation, 7)
        kdn = c.dn[(1, 6)]

        # autumn indention carried over from last year
        prev_exalt = p.find_weekday((9, 15), SUNDAY)
        if prev_exalt is None:
            raise ScheduleError(f"year {self.y - 1}: no Sunday after Sep 14")
        sn = 17 - p.weeks_between(p.inc(p.pascha, 49), prev_exalt)
        osen = 17 - self.n50[sun_after_exaltation]

        zimn = 0
        if not (publican == sun_after_theophany and kdn not in (0, 1)):
            if kdn in (0, 1):
                zimn -= 1
            if publican != sun_after_theophany:
                zimn -= c.weeks_between(sun_after_theophany, publican)

        series_start: Optional[ShortDate] = None
        if zimn != 0:
            series_start = (1, 7) if kdn in (0, 1) else c.inc(sun_after_theophany, 1)
        weeks = list(reversed(self.opts.winter(-zimn)))
        sundays = list(_WINTER_SUNDAYS.get(-zimn - 1, ()))
        spring = self.opts.spring

        self.winter_indent = zimn
        self.spring_indent = osen
        log.debug("year %s: winter indent %d, autumn indent %d (previous %d)", self.y, zimn, osen, sn)

        # the Apostol ignores last year's autumn indention and follows this
        # year's only when configured to
        for table1, table2, reading, shift, autumn in (
            (GOSPEL_TABLE_1, GOSPEL_TABLE_2, self.gospel, sn, True),
            (APOSTOL_TABLE_1, APOSTOL_TABLE_2, self.apostol, 0, self.opts.apostol),
        ):
            v, w = list(weeks), list(sundays)
            for t1 in c.days:
                j = c.dn[t1]
                n50 = self.n50[t1]
                if (zimn != 0 and t1 < series_start) or (zimn == 0 and t1 < publican):
                    reading[t1] = table_1(table1, n50 + shift, j)
                if zimn != 0 and series_start <= t1 < publican:
                    if j == SUNDAY:
                        if w:
                            reading[t1] = table_1(table1, w.pop(), j)
                        if v:
                            v.pop()
                    elif v:
                        reading[t1] = table_1(table1, v[-1], j)
                if t1 == publican:
                    reading[t1] = table_1(table1, 33, j)
                elif publican < t1 <= mf7:
                    reading[t1] = table_1(table1, 34, j)
                elif mf7 < t1 <= mf14:
                    reading[t1] = table_1(table1, 35, j)
                elif mf14 < t1 <= mf21:
                    reading[t1] = table_1(table1, 36, j)
                elif mf21 < t1 < pentecost:
                    reading[t1] = self._by_tag(table2, t1)
                if t1 >= pentecost:
                    if not autumn:
                        reading[t1] = table_1(table1, n50, j)
                    else:
                        reading[t1] = self._autumn(
                            table1, t1, n50, j, osen, spring, dd1, dd2, sun_after_exaltation)

    def _by_tag(self, table: Dict[int, Reading], t1: ShortDate) -> Reading:
        for tag in sorted(self.props[t1]):
            if tag in table:
                return table[tag]
        return EMPTY_READING

    @staticmethod
    def _autumn(table1, t1: ShortDate, n50: int, j: int, osen: int, spring: Sequence[int],
                dd1: ShortDate, dd2: ShortDate, exalt: ShortDate) -> Reading:
        if t1 <= dd1 or (t1 <= exalt and osen >= 0):
            return table_1(table1, n50, j)
        if t1 <= dd2:
            return table_1(table1, spring[0] if osen == -2 else n50, j)
        if t1 <= exalt:
            return table_1(table1, spring[1], j)
        return table_1(table1, n50 + osen, j)


# ---------------------------------------------------------
# Public read-only year
# ---------------------------------------------------------

class OrthYear:
    """
    One built Julian year. Construction fails with ``YearParseError`` /
    ``YearRangeError`` for a bad year; ``options`` are validated by
    ``IndentOptions`` itself.
    """

    def __init__(self, year: YearLike, options: Optional[IndentOptions] = None):
        y = parse_year(year)
        opts = options if options is not None else IndentOptions()
        b = _YearBuilder(y, opts).build()
        self.year = y
        self.options = opts
        self._winter = b.winter_indent
        self._spring = b.spring_indent
        self._days: Dict[ShortDate, DayRecord] = {
            d: DayRecord(
                weekday=b.cur.dn[d],
                glas=b.glas[d],
                n50=b.n50[d],
                apostol=b.apostol[d],
                gospel=b.gospel[d],
                properties=tuple(sorted(b.props[d])),
            )
            for d in b.cur.days
        }
        self._where: Dict[int, Tuple[ShortDate, ...]] = {k: tuple(v) for k, v in b.where.items() if v}
        log.debug("built OrthYear %s (%d tags placed)", y, len(self._where))

    def __repr__(self) -> str:
        return f"OrthYear({self.year}, winter_indent={self._winter}, spring_indent={self._spring})"

    # ---------------------------------------------------------
    # Indention
    # ---------------------------------------------------------

    @property
    def winter_indent(self) -> int:
        """Winter indention in weeks, -5..0."""
        return self._winter

    @property
    def spring_indent(self) -> int:
        """Autumn indention after the Sunday after the Exaltation, -2..3."""
        return self._spring

    # ---------------------------------------------------------
    # Point lookups
    # ---------------------------------------------------------

    def day(self, month: int, day: int) -> Optional[DayRecord]:
        return self._days.get((month, day))

    def glas(self, month: int, day: int) -> int:
        r = self.day(month, day)
        return r.glas if r else -1

    def n50(self, month: int, day: int) -> int:
        r = self.day(month, day)
        return r.n50 if r else -1

    def weekday(self, month: int, day: int) -> int:
        r = self.day(month, day)
        return r.weekday if r else -1

    def apostol(self, month: int, day: int) -> Reading:
        r = self.day(month, day)
        return r.apostol if r else EMPTY_READING

    def gospel(self, month: int, day: int) -> Reading:
        r = self.day(month, day)
        return r.gospel if r else EMPTY_READING

    def resurrect_gospel(self, month: int, day: int) -> Reading:
        """Sunday Matins gospel; empty on weekdays."""
        r = self.day(month, day)
        if r is None or r.weekday != SUNDAY:
            return EMPTY_READING
        for tag, reading in MATINS_OVERRIDES:
            if tag in r.properties:
                return reading
        return resurrect_gospel_for(r.n50)

    def properties(self, month: int, day: int) -> Tuple[int, ...]:
        r = self.day(month, day)
        return r.properties if r else ()

    def has(self, month: int, day: int, tag: int) -> bool:
        return tag in self.properties(month, day)

    # ---------------------------------------------------------
    # Tag searches
    # ---------------------------------------------------------

    def date_with(self, tag: int) -> Optional[ShortDate]:
        found = self._where.get(tag)
        return found[0] if found else None

    def all_dates_with(self, tag: int) -> Tuple[ShortDate, ...]:
        return self._where.get(tag, ())

    def date_with_any_of(self, tags: Iterable[int]) -> Optional[ShortDate]:
        for t in tags:
            d = self.date_with(t)
            if d is not None:
                return d
        return None

    def date_with_all_of(self, tags: Sequence[int]) -> Optional[ShortDate]:
        if not tags:
            return None
        for d in self.all_dates_with(tags[0]):
            if all(self.has(d[0], d[1], t) for t in tags):
                return d
        return None

    def all_dates_with_any_of(self, tags: Iterable[int]) -> Tuple[ShortDate, ...]:
        out: List[ShortDate] = []
        for t in tags:
            out.extend(self.all_dates_with(t))
        return tuple(out)
