"""Finite field arithmetic over GF(p) for an arbitrary prime p."""

import operator

from core import rng
from core.errors import IncompatibleField, OutOfRange, UndefinedInverse
from core.integer import Integer, ipow


class FieldElement:
    """Element of the finite field GF(prime).

    `value` is an Integer in [0, prime). The prime is not checked for
    primality; division and exponent reduction assume it is prime.
    """

    __slots__ = ('_value', '_prime')

    def __init__(self, value, prime):
        value = Integer(value)
        prime = Integer(prime)
        if value < 0 or value >= prime:
            raise OutOfRange(f"{value} is out of range [0, {prime})")
        self._value = value
        self._prime = prime

    @property
    def value(self) -> Integer:
        """A copy of the residue; mutating it leaves the element unchanged."""
        return Integer(self._value)

    @property
    def prime(self) -> Integer:
        return Integer(self._prime)

    def _reduce(self, value: Integer) -> 'FieldElement':
        return FieldElement(value % self._prime, self._prime)

    def _check(self, other: 'FieldElement', verb: str):
        if self._prime != other._prime:
            raise IncompatibleField(
                f"cannot {verb} elements of GF({self._prime}) and GF({other._prime})")

    def __add__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check(other, "add")
        return self._reduce(self._value + other._value)

    def __sub__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check(other, "subtract")
        return self._reduce(self._value - other._value)

    def __mul__(self, other):
        if isinstance(other, FieldElement):
            self._check(other, "multiply")
            return self._reduce(self._value * other._value)
        try:
            scalar = Integer(operator.index(other))
        except TypeError:
            return NotImplemented
        return self._reduce(self._value * scalar)

    def __rmul__(self, other):
        if isinstance(other, FieldElement):
            return NotImplemented
        return self.__mul__(other)

    def __truediv__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check(other, "divide")
        if not other._value:
            raise UndefinedInverse(f"division by zero in GF({self._prime})")
        inverse = ipow(other._value, self._prime - 2, self._prime)
        return self._reduce(self._value * inverse)

    def __neg__(self):
        return self._reduce(-self._value)

    def power(self, exponent) -> 'FieldElement':
        """self ** exponent, with the exponent reduced modulo prime - 1.

        Negative exponents of a nonzero element give powers of its inverse.
        For zero: 0 ** 0 is 1, positive exponents give 0 and negative ones
        raise UndefinedInverse.
        """
        exponent = Integer(exponent)
        if not self._value:
            if exponent < 0:
                raise UndefinedInverse(f"zero has no inverse in GF({self._prime})")
            return FieldElement.zero(self._prime) if exponent else FieldElement.one(self._prime)
        n = exponent % (self._prime - 1)
        return FieldElement(ipow(self._value, n, self._prime), self._prime)

    def __pow__(self, exponent):
        if isinstance(exponent, FieldElement):
            exponent = exponent.value
        return self.power(exponent)

    def inverse(self) -> 'FieldElement':
        """Multiplicative inverse via Fermat's little theorem: a^{p-2} mod p."""
        if not self._value:
            raise UndefinedInverse(f"zero has no inverse in GF({self._prime})")
        return FieldElement(ipow(self._value, self._prime - 2, self._prime), self._prime)

    def __eq__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._value == other._value and self._prime == other._prime

    def __hash__(self):
        return hash((self._value, self._prime))

    def __repr__(self):
        return f"FieldElement_{self._prime}({self._value})"

    def __bool__(self):
        return bool(self._value)

    def to_int(self):
        return int(self._value)

    @staticmethod
    def random(prime) -> 'FieldElement':
        """Return a random non-zero element of GF(prime)."""
        prime = Integer(prime)
        return FieldElement(rng.randbelow(int(prime) - 1) + 1, prime)

    @staticmethod
    def random_including_zero(prime) -> 'FieldElement':
        """Return a random element of GF(prime) (may be zero)."""
        prime = Integer(prime)
        return FieldElement(rng.randbelow(int(prime)), prime)

    @staticmethod
    def zero(prime) -> 'FieldElement':
        return FieldElement(0, prime)

    @staticmethod
    def one(prime) -> 'FieldElement':
        return FieldElement(1, prime)
