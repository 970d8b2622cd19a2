"""Digit-level kernels for unsigned magnitudes.

A magnitude is a list of DIGIT_BITS-wide unsigned digits, most significant
digit first. Canonical magnitudes carry no leading zero digits, so zero is
the empty list. Kernels accept canonical input and return canonical output
unless noted otherwise.
"""

DIGIT_BITS = 8
BASE = 1 << DIGIT_BITS
DIGIT_MASK = BASE - 1
HIGH_BIT = 1 << (DIGIT_BITS - 1)


def trim(digits: list[int]) -> list[int]:
    """Strip leading zero digits in place and return the same list."""
    i = 0
    while i < len(digits) and digits[i] == 0:
        i += 1
    if i:
        del digits[:i]
    return digits


def from_int(n: int) -> list[int]:
    """Split a non-negative native int into digits."""
    digits = []
    while n:
        digits.append(n & DIGIT_MASK)
        n >>= DIGIT_BITS
    digits.reverse()
    return digits


def to_int(digits: list[int]) -> int:
    """Fold digits back into a native int."""
    n = 0
    for d in digits:
        n = (n << DIGIT_BITS) | d
    return n


def compare(lhs: list[int], rhs: list[int]) -> int:
    """Three-way comparison of two magnitudes: -1, 0 or 1."""
    if len(lhs) != len(rhs):
        return -1 if len(lhs) < len(rhs) else 1
    if lhs == rhs:
        return 0
    return -1 if lhs < rhs else 1


def add(lhs: list[int], rhs: list[int]) -> list[int]:
    """Sum of two magnitudes with carry propagation.

    The result is as long as the longer operand, plus one digit on overflow.
    Leading zeros of the longer operand are preserved.
    """
    if len(lhs) < len(rhs):
        lhs, rhs = rhs, lhs
    offset = len(lhs) - len(rhs)
    result = [0] * len(lhs)
    carry = 0
    for i in range(len(lhs) - 1, -1, -1):
        s = lhs[i] + carry
        if i >= offset:
            s += rhs[i - offset]
        result[i] = s & DIGIT_MASK
        carry = s >> DIGIT_BITS
    if carry:
        result.insert(0, carry)
    return result


def sub(lhs: list[int], rhs: list[int]) -> list[int]:
    """Difference lhs - rhs of two magnitudes. Requires lhs >= rhs."""
    offset = len(lhs) - len(rhs)
    if offset < 0:
        raise ValueError("magnitude subtraction requires lhs >= rhs")
    result = [0] * len(lhs)
    borrow = 0
    for i in range(len(lhs) - 1, -1, -1):
        d = lhs[i] - borrow
        if i >= offset:
            d -= rhs[i - offset]
        if d < 0:
            d += BASE
            borrow = 1
        else:
            borrow = 0
        result[i] = d
    if borrow:
        raise ValueError("magnitude subtraction requires lhs >= rhs")
    return trim(result)


def mul_digit(digits: list[int], factor: int) -> list[int]:
    """Product of a magnitude and a small non-negative native int."""
    if not digits or not factor:
        return []
    result = [0] * len(digits)
    carry = 0
    for i in range(len(digits) - 1, -1, -1):
        t = digits[i] * factor + carry
        result[i] = t & DIGIT_MASK
        carry = t >> DIGIT_BITS
    head = []
    while carry:
        head.append(carry & DIGIT_MASK)
        carry >>= DIGIT_BITS
    head.reverse()
    return head + result


def shift_left(digits: list[int], count: int) -> list[int]:
    """Magnitude times 2**count."""
    if not digits:
        return []
    whole, part = divmod(count, DIGIT_BITS)
    shifted = mul_digit(digits, 1 << part) if part else list(digits)
    return shifted + [0] * whole


def shift_right(digits: list[int], count: int) -> list[int]:
    """Magnitude floor-divided by 2**count."""
    whole, part = divmod(count, DIGIT_BITS)
    if whole >= len(digits):
        return []
    kept = digits[:len(digits) - whole]
    if not part:
        return kept
    low_mask = (1 << part) - 1
    result = []
    carry = 0
    for d in kept:
        result.append(((carry << DIGIT_BITS) | d) >> part)
        carry = d & low_mask
    return trim(result)


def bit_length(digits: list[int]) -> int:
    """Number of bits in the magnitude; 0 for zero."""
    if not digits:
        return 0
    return (len(digits) - 1) * DIGIT_BITS + digits[0].bit_length()


def complement(digits: list[int], width: int) -> list[int]:
    """Two's complement of a magnitude inside a `width`-digit register.

    The result always has exactly `width` digits (it is not trimmed).
    """
    padded = [0] * (width - len(digits)) + list(digits)
    inverted = [d ^ DIGIT_MASK for d in padded]
    return add(inverted, [1])[-width:]
