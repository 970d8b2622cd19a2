"""Tests for magnitude long division."""

import pytest

from core import rng
from core.digits import DIGIT_MASK, from_int, to_int
from core.division import divmod_magnitudes, divmod_small
from core.errors import DivisionByZero


def check(a, b):
    q, r = divmod_magnitudes(from_int(a), from_int(b))
    assert (to_int(q), to_int(r)) == divmod(a, b)
    assert not q or q[0] != 0
    assert not r or r[0] != 0


def test_divisor_larger_than_dividend():
    check(5, 7)
    check(0, 7)
    check(2**64, 2**65)


def test_single_digit_divisor():
    check(1000, 7)
    check(2**200 + 13, 255)
    check(2**200, 1)


def test_divmod_small():
    q, r = divmod_small(from_int(12345), 10)
    assert (to_int(q), r) == (1234, 5)


def test_exact_division():
    check(2**300, 2**150)
    check((2**127 - 1) * (2**61 - 1), 2**61 - 1)


def test_unnormalized_divisors():
    # Small leading digits exercise the normalization shift.
    for b in (0x0101, 0x01FF, 0x010000, 0x01000001, 2**64 + 1):
        check(2**256 - 1, b)
        check(3**200, b)


def test_quotient_digit_corrections():
    # Leading digits that make the first estimate too large.
    base = DIGIT_MASK + 1
    check(base**4 - 1, base**2 - 1)
    check(base**6 - base**3, base**3 - 1)
    check(0x7FFF_FFFF_FFFF, 0x8001)
    check(0xFFFE_0000_0000, 0xFFFF_FFFF)


def test_random_against_native():
    rng.set_seed(21)
    for _ in range(200):
        a = rng.randbits(rng.randrange(1, 600))
        b = rng.randbits(rng.randrange(1, 300)) or 1
        check(a, b)


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        divmod_magnitudes([1, 2, 3], [])
