"""Tests for finite field arithmetic."""

import pytest

from core import rng
from core.errors import IncompatibleField, OutOfRange, UndefinedInverse
from core.field import FieldElement
from core.integer import Integer

P13 = 13
P127 = (1 << 127) - 1  # Mersenne prime 2^127 - 1


def F(v, p=P13):
    return FieldElement(v, p)


def test_add():
    assert F(3) + F(4) == F(7)


def test_add_wrap():
    assert F(P13 - 1) + F(2) == F(1)


def test_sub():
    assert F(10) - F(3) == F(7)


def test_sub_wrap():
    assert F(0) - F(1) == F(P13 - 1)


def test_mul():
    assert F(5) * F(7) == F(35 % P13)


def test_div():
    a, b = F(5), F(7)
    assert (a / b) * b == a


def test_inverse():
    a = FieldElement(42, P127)
    assert a * a.inverse() == FieldElement(1, P127)


def test_inverse_one():
    assert F(1).inverse() == F(1)


def test_pow():
    assert FieldElement(2, P127) ** 10 == FieldElement(1024, P127)


def test_neg():
    a = F(5)
    assert a + (-a) == F(0)
    assert -F(0) == F(0)


def test_scenario_gf13():
    a, b = F(7), F(12)
    assert a + b == F(6)
    assert a * b == F(6)
    assert a / b == F(6)
    # b^-1 by brute force
    b_inv = next(x for x in range(1, P13) if (12 * x) % P13 == 1)
    assert b.inverse() == F(b_inv)
    assert a / b == a * F(b_inv)


def test_division_matches_brute_force_inverse():
    for x in range(1, P13):
        inv = next(y for y in range(1, P13) if (x * y) % P13 == 1)
        assert F(1) / F(x) == F(inv)


def test_scalar_mul():
    assert F(7) * 3 == F(21 % P13)
    assert 3 * F(7) == F(21 % P13)
    assert F(7) * Integer(-1) == F(6)
    assert F(7) * (P13 * 1000 + 2) == F(1)


def test_closure():
    rng.set_seed(7)
    for _ in range(20):
        a = FieldElement.random_including_zero(P13)
        b = FieldElement.random(P13)
        for c in (a + b, a - b, a * b, a / b):
            assert 0 <= c.value < P13
            assert c.prime == P13


def test_fermat_round_trip():
    rng.set_seed(11)
    for v in range(1, P13):
        assert F(v).power(P13 - 1) == F(1)
    for _ in range(5):
        a = FieldElement.random(P127)
        assert a.power(P127 - 1) == FieldElement.one(P127)


def test_power_reduces_exponent():
    a = F(3)
    assert a.power(P13 - 1 + 5) == a.power(5)
    assert a.power(-1) == a.inverse()
    assert a.power(-2) == a.inverse() * a.inverse()


def test_power_of_zero():
    zero = F(0)
    assert zero.power(0) == F(1)
    assert zero.power(5) == F(0)
    assert zero.power(P13 - 1) == F(0)
    with pytest.raises(UndefinedInverse):
        zero.power(-1)


def test_out_of_range():
    with pytest.raises(OutOfRange):
        F(13)
    with pytest.raises(OutOfRange):
        F(-1)
    with pytest.raises(ValueError):
        F(100)


def test_incompatible_fields():
    with pytest.raises(IncompatibleField):
        FieldElement(1, 7) + FieldElement(1, 11)
    with pytest.raises(IncompatibleField):
        FieldElement(1, 7) - FieldElement(1, 11)
    with pytest.raises(IncompatibleField):
        FieldElement(1, 7) * FieldElement(1, 11)
    with pytest.raises(IncompatibleField):
        FieldElement(1, 7) / FieldElement(1, 11)


def test_divide_by_zero_element():
    with pytest.raises(UndefinedInverse):
        F(5) / F(0)
    with pytest.raises(ZeroDivisionError):
        F(0).inverse()


def test_equality_requires_same_prime():
    # Same residue in different fields is not equal.
    assert FieldElement(3, 7) != FieldElement(3, 11)
    assert FieldElement(3, 7) == FieldElement(3, 7)
    assert hash(FieldElement(3, 7)) == hash(FieldElement(3, 7))


def test_owns_its_integers():
    v = Integer(5)
    a = FieldElement(v, P13)
    v += 1
    assert a.value == 5


def test_handed_out_integers_are_copies():
    a = FieldElement(6, 7)
    v = a.value
    v += 5
    p = a.prime
    p -= 2
    assert a == FieldElement(6, 7)
    assert a.value == 6 and a.prime == 7


def test_repr():
    assert repr(F(7)) == "FieldElement_13(7)"


def test_random_nonzero():
    for _ in range(10):
        r = FieldElement.random(P127)
        assert r.value != 0


def test_zero_one():
    assert FieldElement.zero(P13).value == 0
    assert FieldElement.one(P13).value == 1
    assert FieldElement.zero(P13) + FieldElement.one(P13) == F(1)


def test_to_int():
    assert F(12).to_int() == 12


def test_bool():
    assert not bool(FieldElement.zero(P13))
    assert bool(FieldElement.one(P13))


def test_unsupported_operand():
    with pytest.raises(TypeError):
        F(1) + 1
    with pytest.raises(TypeError):
        F(1) * 1.5
