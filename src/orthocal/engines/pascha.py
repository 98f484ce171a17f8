"""
orthocal.engines.pascha
-----------------------
Orthodox Pascha (Easter) by the Julian computus.

The Gauss formula gives the Julian calendar date of Pascha. Pascha is
always between March 22 and April 25 (Julian).
"""

from __future__ import annotations

import logging

from ..core.date import Date
from ..core.time import YearLike, parse_year
from ..core.types import JULIAN, ShortDate

log = logging.getLogger(__name__)


def gauss_pascha(y: int) -> ShortDate:
    """Gauss congruences on an already validated year."""
    a = y % 19
    b = y % 4
    c = y % 7
    d = (19 * a + 15) % 30
    e = (2 * b + 4 * c + 6 * d + 6) % 7
    p = 22 + d + e
    if p > 31:
        return 4, d + e - 9
    return 3, p


def julian_pascha(year: YearLike) -> ShortDate:
    """(month, day) of Pascha in the Julian calendar."""
    return gauss_pascha(parse_year(year))


def pascha_date(year: YearLike) -> Date:
    """Pascha as a full ``Date``; read it in any calendar via ``Date.ymd``."""
    y = parse_year(year)
    m, d = gauss_pascha(y)
    out = Date(y, m, d, JULIAN)
    log.debug("pascha %s: julian %02d-%02d, gregorian %s", y, m, d, out.ymd("G"))
    return out
