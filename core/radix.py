"""Base conversion between magnitudes and text.

Bases 2 to 16 use the characters 0-9a-f with an optional leading '-'.
Base 256 maps each character (or byte) to one unsigned digit value.
"""

from core.digits import add, from_int, mul_digit, trim
from core.division import divmod_small
from core.errors import DomainError

DIGIT_CHARS = "0123456789abcdef"
_CHAR_VALUES = {ch: i for i, ch in enumerate(DIGIT_CHARS)}
_CHAR_VALUES.update({ch.upper(): i for i, ch in enumerate(DIGIT_CHARS)})


def check_base(base: int) -> int:
    if base < 2:
        raise DomainError(f"cannot convert from base {base}")
    if 16 < base != 256:
        raise DomainError(f"unsupported base {base}; use 2-16 or 256")
    return base


def _fold(values, base: int) -> list[int]:
    digits = []
    for v in values:
        digits = add(mul_digit(digits, base), from_int(v))
    return trim(digits)


def parse(text, base: int = 10) -> tuple[bool, list[int]]:
    """Parse text in the given base. Returns (negative, magnitude)."""
    check_base(base)
    if base == 256:
        if isinstance(text, str):
            try:
                text = text.encode('latin-1')
            except UnicodeEncodeError as exc:
                raise DomainError("base 256 text must only hold characters below 256") from exc
        return False, _fold(bytes(text), 256)

    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode('ascii')
        except UnicodeDecodeError as exc:
            raise DomainError(f"base {base} text must be ASCII") from exc
    text = text.strip()
    negative = text.startswith('-')
    if negative or text.startswith('+'):
        text = text[1:]
    if not text:
        raise DomainError("empty string is not a number")

    values = []
    for ch in text:
        v = _CHAR_VALUES.get(ch)
        if v is None or v >= base:
            raise DomainError(f"{ch!r} is not a digit in base {base}")
        values.append(v)
    digits = _fold(values, base)
    return negative and bool(digits), digits


def render(digits: list[int], negative: bool, base: int = 10, min_length: int = 1) -> str:
    """Render a magnitude in the given base, left-padded to min_length.

    Base 256 output is the unsigned magnitude as a latin-1 string.
    """
    check_base(base)
    values = []
    while digits:
        digits, r = divmod_small(digits, base)
        values.append(r)
    values.extend([0] * (min_length - len(values)))
    values.reverse()

    if base == 256:
        return bytes(values).decode('latin-1')
    text = ''.join(DIGIT_CHARS[v] for v in values) or '0'
    return '-' + text if negative else text
