"""
orthocal.core.arith
-------------------
Integer division helpers shared by all calendar arithmetic.

Python ints are arbitrary precision and ``//`` already floors, but every
formula goes through these names so the division mode is explicit.
"""

from __future__ import annotations

from typing import Tuple


def fdiv(a: int, b: int) -> int:
    """Floor quotient: rounds toward negative infinity."""
    return a // b


def pmod(a: int, b: int) -> int:
    """Remainder in 0..|b|-1 regardless of the signs of a and b."""
    return a % abs(b)


def pdivmod(a: int, b: int) -> Tuple[int, int]:
    """
    Quotient and non-negative remainder with a == q*b + r, 0 <= r < |b|.

    For b > 0 this is floor division. For b < 0 the quotient is adjusted
    so the remainder stays non-negative.
    """
    r = pmod(a, b)
    return (a - r) // b, r
