"""Magnitude multiplication: schoolbook and FFT convolution.

Both paths take and return canonical magnitudes (most significant digit
first) and must agree digit for digit. `multiply` picks one by size.
"""

import numpy as np

from core.digits import DIGIT_BITS, DIGIT_MASK, trim

# Shorter operand length (in digits) at which multiply() switches to the FFT.
FFT_THRESHOLD = 64


def long_mult(lhs: list[int], rhs: list[int]) -> list[int]:
    """Schoolbook multiplication, O(len(lhs) * len(rhs))."""
    if not lhs or not rhs:
        return []
    a = lhs[::-1]
    b = rhs[::-1]
    acc = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if not x:
            continue
        carry = 0
        for j, y in enumerate(b):
            t = acc[i + j] + x * y + carry
            acc[i + j] = t & DIGIT_MASK
            carry = t >> DIGIT_BITS
        k = i + len(b)
        while carry:
            t = acc[k] + carry
            acc[k] = t & DIGIT_MASK
            carry = t >> DIGIT_BITS
            k += 1
    acc.reverse()
    return trim(acc)


def fft_convolve(lhs: list[int], rhs: list[int]) -> list[int]:
    """Linear convolution of two non-empty coefficient sequences.

    Coefficients are transformed with a real FFT padded to the next power
    of two, multiplied pointwise, transformed back and rounded to the
    nearest integer. Rounding (not truncation) absorbs the floating point
    error of the transform.
    """
    size = len(lhs) + len(rhs) - 1
    n = 1 << (size - 1).bit_length()
    fa = np.fft.rfft(np.asarray(lhs, dtype=np.float64), n)
    fb = np.fft.rfft(np.asarray(rhs, dtype=np.float64), n)
    coeffs = np.fft.irfft(fa * fb, n)[:size]
    return np.rint(coeffs).astype(np.int64).tolist()


def propagate_carries(coeffs: list[int]) -> list[int]:
    """Turn non-negative convolution coefficients (least significant first)
    into a canonical magnitude."""
    digits = []
    carry = 0
    for c in coeffs:
        carry += c
        digits.append(carry & DIGIT_MASK)
        carry >>= DIGIT_BITS
    while carry:
        digits.append(carry & DIGIT_MASK)
        carry >>= DIGIT_BITS
    digits.reverse()
    return trim(digits)


def fft_mult(lhs: list[int], rhs: list[int]) -> list[int]:
    """FFT-based multiplication via the convolution theorem."""
    if not lhs or not rhs:
        return []
    return propagate_carries(fft_convolve(lhs[::-1], rhs[::-1]))


def multiply(lhs: list[int], rhs: list[int]) -> list[int]:
    if min(len(lhs), len(rhs)) < FFT_THRESHOLD:
        return long_mult(lhs, rhs)
    return fft_mult(lhs, rhs)
