"""Long division of magnitudes."""

from core.digits import DIGIT_BITS, compare, from_int, mul_digit, shift_left, shift_right, sub, trim
from core.errors import DivisionByZero


def divmod_small(digits: list[int], divisor: int) -> tuple[list[int], int]:
    """Divide a magnitude by a positive native int that fits in a digit or two."""
    quotient = []
    remainder = 0
    for d in digits:
        remainder = (remainder << DIGIT_BITS) | d
        quotient.append(remainder // divisor)
        remainder %= divisor
    return trim(quotient), remainder


def divmod_magnitudes(lhs: list[int], rhs: list[int]) -> tuple[list[int], list[int]]:
    """Quotient and remainder of two magnitudes, ignoring signs.

    Non-recursive schoolbook division: the divisor is normalized so its top
    digit has the high bit set, then one quotient digit is produced per
    dividend digit. Each digit is estimated from the two leading remainder
    digits and corrected downward until the trial product fits.
    """
    if not rhs:
        raise DivisionByZero("integer division or modulo by zero")
    if compare(lhs, rhs) < 0:
        return [], list(lhs)
    if len(rhs) == 1:
        q, r = divmod_small(lhs, rhs[0])
        return q, from_int(r)

    shift = DIGIT_BITS - rhs[0].bit_length()
    dividend = shift_left(lhs, shift)
    divisor = shift_left(rhs, shift)
    top = divisor[0]

    quotient = []
    remainder = []
    for d in dividend:
        remainder.append(d)
        trim(remainder)
        if compare(remainder, divisor) < 0:
            quotient.append(0)
            continue
        lead = remainder[0]
        if len(remainder) > len(divisor):
            lead = (lead << DIGIT_BITS) | remainder[1]
        q = min(lead // top, (1 << DIGIT_BITS) - 1)
        product = mul_digit(divisor, q)
        while compare(product, remainder) > 0:
            q -= 1
            product = sub(product, divisor)
        remainder = sub(remainder, product)
        quotient.append(q)

    return trim(quotient), shift_right(remainder, shift)
