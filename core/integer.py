"""Arbitrary-precision signed integers in sign-magnitude form.

Integer keeps a sign flag and a canonical magnitude (see core.digits).
Binary operators return new values; compound operators (+=, *=, ...)
overwrite the receiver and return it. Any object implementing __index__
(int, bool, numpy integers) is accepted wherever an Integer is expected.

Division follows Python's floor convention: the quotient is rounded toward
negative infinity and the remainder takes the sign of the divisor.
"""

import functools
import operator

from core.digits import (DIGIT_BITS, DIGIT_MASK, HIGH_BIT, add, bit_length, compare,
                         complement, from_int, shift_left, shift_right, sub, to_int, trim)
from core.division import divmod_magnitudes
from core.errors import DomainError
from core.multiply import multiply
from core.radix import parse, render

POSITIVE = False  # includes zero
NEGATIVE = True

_FORMAT_BASES = {'': 10, 'd': 10, 'x': 16, 'X': 16, 'o': 8, 'b': 2}


def _coerce(value):
    """Convert an operand to Integer, or NotImplemented if it is not integral."""
    if isinstance(value, Integer):
        return value
    try:
        return Integer(operator.index(value))
    except TypeError:
        return NotImplemented


def _coerced(method):
    @functools.wraps(method)
    def wrapper(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return method(self, other)
    return wrapper


def _inplace(method):
    def wrapper(self, other):
        result = method(self, other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)
    wrapper.__name__ = '__i' + method.__name__[2:]
    return wrapper


class Integer:
    """Signed integer of unbounded size.

    Hashable, but compound operators mutate in place: do not apply them to
    an Integer used as a dict key or set member.
    """

    __slots__ = ('_sign', '_digits')

    def __init__(self, value=0, base=None):
        if isinstance(value, (str, bytes, bytearray)):
            negative, digits = parse(value, 10 if base is None else operator.index(base))
            self._set(negative, digits)
        elif base is not None:
            raise TypeError("Integer() can't convert non-string with explicit base")
        elif isinstance(value, Integer):
            self._set(value._sign, list(value._digits))
        else:
            n = operator.index(value)
            self._set(n < 0, from_int(-n if n < 0 else n))

    def _set(self, negative, digits):
        self._digits = trim(digits)
        self._sign = NEGATIVE if negative and self._digits else POSITIVE
        return self

    def _assign(self, other):
        self._sign = other._sign
        self._digits = other._digits
        return self

    @classmethod
    def _new(cls, negative, digits):
        return cls.__new__(cls)._set(negative, digits)

    @classmethod
    def from_digits(cls, digits, sign=POSITIVE):
        """Build from raw digits (most significant first) and a sign."""
        digits = [operator.index(d) for d in digits]
        for d in digits:
            if not 0 <= d <= DIGIT_MASK:
                raise DomainError(f"digit {d} does not fit in {DIGIT_BITS} bits")
        return cls._new(sign, digits)

    @classmethod
    def from_iterable(cls, values, base):
        """Fold a sequence of base-`base` digits, most significant first."""
        base = cls(base)
        if base < 2:
            raise DomainError(f"cannot convert from base {base}")
        result = cls()
        for v in values:
            result = result * base + v
        return result

    @classmethod
    def from_bytes(cls, data):
        """Big-endian unsigned magnitude bytes."""
        return cls(bytes(data), 256)

    # --- Accessors ---

    @property
    def sign(self) -> bool:
        return self._sign

    def data(self) -> list[int]:
        """Copy of the internal digits, most significant first."""
        return list(self._digits)

    def bits(self) -> int:
        return bit_length(self._digits)

    def bytes(self) -> int:
        return (self.bits() + 7) // 8

    def digits(self) -> int:
        return len(self._digits)

    def bit(self, index) -> bool:
        """Bit `index` of the magnitude; 0 is the least significant."""
        index = operator.index(index)
        if index < 0:
            raise DomainError("bit index must be non-negative")
        whole, part = divmod(index, DIGIT_BITS)
        if whole >= len(self._digits):
            return False
        return bool((self._digits[-1 - whole] >> part) & 1)

    # --- Conversion ---

    def to_string(self, base=10, min_length=1) -> str:
        return render(self._digits, self._sign, operator.index(base), operator.index(min_length))

    def to_bytes(self, length=1):
        return self.to_string(256, length).encode('latin-1')

    def __int__(self):
        n = to_int(self._digits)
        return -n if self._sign else n

    __index__ = __int__

    def __float__(self):
        return float(int(self))

    def __bool__(self):
        return bool(self._digits)

    def __hash__(self):
        return hash(int(self))

    def __str__(self):
        return self.to_string(10)

    def __repr__(self):
        return f"Integer({self})"

    def __format__(self, format_spec):
        if format_spec not in _FORMAT_BASES:
            raise ValueError(f"unknown format code {format_spec!r} for Integer")
        text = self.to_string(_FORMAT_BASES[format_spec])
        return text.upper() if format_spec == 'X' else text

    def __copy__(self):
        return Integer(self)

    def __deepcopy__(self, memo):
        return Integer(self)

    # --- Comparison ---

    def _compare(self, other) -> int:
        if self._sign != other._sign:
            return -1 if self._sign else 1
        order = compare(self._digits, other._digits)
        return -order if self._sign else order

    @_coerced
    def __eq__(self, other):
        return self._sign == other._sign and self._digits == other._digits

    @_coerced
    def __lt__(self, other):
        return self._compare(other) < 0

    @_coerced
    def __le__(self, other):
        return self._compare(other) <= 0

    @_coerced
    def __gt__(self, other):
        return self._compare(other) > 0

    @_coerced
    def __ge__(self, other):
        return self._compare(other) >= 0

    # --- Unary ---

    def __neg__(self):
        return Integer._new(not self._sign, list(self._digits))

    def __pos__(self):
        return Integer(self)

    def __abs__(self):
        return Integer._new(POSITIVE, list(self._digits))

    def __invert__(self):
        return -(self + 1)

    def negate(self):
        """Flip the sign in place."""
        return self._set(not self._sign, self._digits)

    # --- Arithmetic ---

    @_coerced
    def __add__(self, other):
        return _add(self, other)

    @_coerced
    def __radd__(self, other):
        return _add(other, self)

    @_coerced
    def __sub__(self, other):
        return _add(self, -other)

    @_coerced
    def __rsub__(self, other):
        return _add(other, -self)

    @_coerced
    def __mul__(self, other):
        return _mul(self, other)

    @_coerced
    def __rmul__(self, other):
        return _mul(other, self)

    @_coerced
    def __divmod__(self, other):
        return _divmod(self, other)

    @_coerced
    def __rdivmod__(self, other):
        return _divmod(other, self)

    @_coerced
    def __floordiv__(self, other):
        return _divmod(self, other)[0]

    @_coerced
    def __rfloordiv__(self, other):
        return _divmod(other, self)[0]

    @_coerced
    def __mod__(self, other):
        return _divmod(self, other)[1]

    @_coerced
    def __rmod__(self, other):
        return _divmod(other, self)[1]

    def __pow__(self, exponent, modulus=None):
        exponent = _coerce(exponent)
        if exponent is NotImplemented:
            return NotImplemented
        if modulus is None:
            return ipow(self, exponent)
        modulus = _coerce(modulus)
        if modulus is NotImplemented:
            return NotImplemented
        return ipow(self, exponent, modulus)

    @_coerced
    def __rpow__(self, other):
        return ipow(other, self)

    # --- Bitwise ---

    def _register(self, width):
        if self._sign:
            return complement(self._digits, width)
        return [0] * (width - len(self._digits)) + self._digits

    def _bitwise(self, other, op):
        width = max(len(self._digits), len(other._digits)) + 1
        pattern = [op(x, y) for x, y in zip(self._register(width), other._register(width))]
        if pattern[0] & HIGH_BIT:
            return Integer._new(NEGATIVE, complement(pattern, width))
        return Integer._new(POSITIVE, pattern)

    @_coerced
    def __and__(self, other):
        return self._bitwise(other, operator.and_)

    @_coerced
    def __or__(self, other):
        return self._bitwise(other, operator.or_)

    @_coerced
    def __xor__(self, other):
        return self._bitwise(other, operator.xor)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    @_coerced
    def __lshift__(self, other):
        return Integer._new(self._sign, shift_left(self._digits, _shift_count(other)))

    @_coerced
    def __rlshift__(self, other):
        return other << self

    @_coerced
    def __rshift__(self, other):
        return Integer._new(self._sign, shift_right(self._digits, _shift_count(other)))

    @_coerced
    def __rrshift__(self, other):
        return other >> self

    def twos_complement(self, bits):
        """Unsigned `bits`-wide two's-complement pattern of this value."""
        bits = operator.index(bits)
        if bits <= 0:
            raise DomainError("two's complement width must be positive")
        width = max(len(self._digits), -(-bits // DIGIT_BITS)) + 1
        pattern = Integer._new(POSITIVE, self._register(width))
        return pattern & Integer().fill(bits)

    def fill(self, bits):
        """Overwrite in place with `bits` one bits, i.e. 2**bits - 1."""
        bits = operator.index(bits)
        if bits < 0:
            raise DomainError("fill width must be non-negative")
        return self._assign((Integer(1) << bits) - 1)

    # --- Compound assignment ---

    __iadd__ = _inplace(__add__)
    __isub__ = _inplace(__sub__)
    __imul__ = _inplace(__mul__)
    __ifloordiv__ = _inplace(__floordiv__)
    __imod__ = _inplace(__mod__)
    __ipow__ = _inplace(__pow__)
    __iand__ = _inplace(__and__)
    __ior__ = _inplace(__or__)
    __ixor__ = _inplace(__xor__)
    __ilshift__ = _inplace(__lshift__)
    __irshift__ = _inplace(__rshift__)


def _add(lhs: Integer, rhs: Integer) -> Integer:
    if lhs._sign == rhs._sign:
        return Integer._new(lhs._sign, add(lhs._digits, rhs._digits))
    order = compare(lhs._digits, rhs._digits)
    if order == 0:
        return Integer()
    if order > 0:
        return Integer._new(lhs._sign, sub(lhs._digits, rhs._digits))
    return Integer._new(rhs._sign, sub(rhs._digits, lhs._digits))


def _mul(lhs: Integer, rhs: Integer) -> Integer:
    return Integer._new(lhs._sign != rhs._sign, multiply(lhs._digits, rhs._digits))


def _divmod(lhs: Integer, rhs: Integer) -> tuple[Integer, Integer]:
    q, r = divmod_magnitudes(lhs._digits, rhs._digits)
    quotient = Integer._new(lhs._sign != rhs._sign, q)
    remainder = Integer._new(lhs._sign, r)
    if remainder and lhs._sign != rhs._sign:
        quotient = _add(quotient, Integer(-1))
        remainder = _add(remainder, rhs)
    return quotient, remainder


def _shift_count(count: Integer) -> int:
    if count < 0:
        raise DomainError("negative shift count")
    return int(count)


# --- Free functions ---

def ipow(base, exponent, modulus=None) -> Integer:
    """base ** exponent, optionally reduced modulo `modulus`.

    Square-and-multiply. A negative exponent yields 0 rather than an
    inverse. A zero modulus raises DomainError.
    """
    base = Integer(base)
    exponent = Integer(exponent)
    if modulus is not None:
        modulus = Integer(modulus)
        if not modulus:
            raise DomainError("modulus by 0")
    if exponent < 0:
        return Integer(0)

    result = Integer(1)
    if modulus is not None:
        base %= modulus
    while exponent:
        if exponent.bit(0):
            result *= base
            if modulus is not None:
                result %= modulus
        exponent >>= 1
        if exponent:
            base *= base
            if modulus is not None:
                base %= modulus
    if modulus is not None:
        result %= modulus
    return result


def ilog(value, base) -> Integer:
    """floor(log_base(value)) for value > 0 and base >= 2."""
    value = Integer(value)
    base = Integer(base)
    if base < 2 or value <= 0:
        raise DomainError("log is only defined for value > 0 and base >= 2")
    count = Integer(0)
    while value >= base:
        value //= base
        count += 1
    return count


def makebin(value, size=1) -> str:
    return Integer(value).to_string(2, size)


def makehex(value, size=1) -> str:
    return Integer(value).to_string(16, size)


def makeascii(value, size=1) -> str:
    return Integer(value).to_string(256, size)
