# tests/test_arith.py

from orthocal.core.arith import fdiv, pdivmod, pmod


def test_fdiv_floors_toward_negative_infinity():
    assert fdiv(7, 2) == 3
    assert fdiv(-7, 2) == -4
    assert fdiv(-6, 3) == -2


def test_pmod_is_never_negative():
    assert pmod(-7, 3) == 2
    assert pmod(7, -3) == 1
    assert pmod(-7, -3) == 2
    assert pmod(0, 5) == 0


def test_pdivmod_identity():
    for a in (-100, -7, -1, 0, 1, 7, 100):
        for b in (-7, -3, 3, 7):
            q, r = pdivmod(a, b)
            assert 0 <= r < abs(b)
            assert q * b + r == a
