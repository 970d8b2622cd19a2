"""Tests for base conversion and string I/O."""

import pytest

from core import rng
from core.errors import DomainError
from core.integer import Integer, makeascii, makebin, makehex

BASES = list(range(2, 17)) + [256]


def test_decimal():
    assert str(Integer(0)) == "0"
    assert str(Integer(-12345)) == "-12345"
    assert repr(Integer(42)) == "Integer(42)"
    assert Integer("123456789012345678901234567890") == 123456789012345678901234567890
    assert Integer("-77") == -77
    assert Integer("  +15 ") == 15


def test_hex_and_binary():
    assert Integer("ff", 16) == 255
    assert Integer("FF", 16) == 255
    assert Integer("-101", 2) == -5
    assert Integer(255).to_string(16) == "ff"
    assert Integer(-5).to_string(2) == "-101"
    assert Integer(8).to_string(8) == "10"


def test_min_length_padding():
    assert Integer(5).to_string(2, 8) == "00000101"
    assert Integer(-5).to_string(10, 4) == "-0005"
    assert Integer(0).to_string(16, 4) == "0000"
    assert Integer(1).to_string(256, 3) == "\x00\x00\x01"


def test_base256():
    assert Integer("\x01\x00", 256) == 256
    assert Integer(b"\xff\xff", 256) == 65535
    assert Integer(65535).to_string(256) == "\xff\xff"
    assert Integer(0).to_string(256) == "\x00"
    # Base 256 output carries the magnitude only.
    assert Integer(-258).to_string(256) == "\x01\x02"


def test_bytes_round_trip():
    x = Integer(0xDEADBEEF)
    assert x.to_bytes() == b"\xde\xad\xbe\xef"
    assert x.to_bytes(6) == b"\x00\x00\xde\xad\xbe\xef"
    assert Integer.from_bytes(b"\xde\xad\xbe\xef") == x


def test_round_trip_all_bases():
    rng.set_seed(4)
    values = [0, 1, -1, 255, 256, -65536] + [rng.randbits(rng.randrange(1, 300)) for _ in range(10)]
    values += [-v for v in values[6:]]
    for v in values:
        x = Integer(v)
        for b in BASES:
            if b == 256 and v < 0:
                assert Integer(x.to_string(b), b) == abs(x)
                continue
            assert Integer(x.to_string(b), b) == x
            assert Integer(x.to_string(b, 40), b) == x


def test_matches_python_formatting():
    for v in (0, 7, -7, 2**100 + 3, -(3**80)):
        x = Integer(v)
        assert x.to_string(10) == str(v)
        assert x.to_string(16) == format(v, 'x')
        assert x.to_string(8) == format(v, 'o')
        assert x.to_string(2) == format(v, 'b')
        assert format(x, 'X') == format(v, 'X')
        assert f"{x}" == str(v)


def test_unknown_format_code():
    with pytest.raises(ValueError):
        format(Integer(5), '08d')


def test_invalid_bases():
    for base in (0, 1, -3, 17, 100, 255, 257):
        with pytest.raises(DomainError):
            Integer("1", base)
        with pytest.raises(DomainError):
            Integer(1).to_string(base)


def test_invalid_digits():
    for text, base in (("12a", 10), ("2", 2), ("g", 16), ("", 10), ("-", 10), ("1 2", 10)):
        with pytest.raises(DomainError):
            Integer(text, base)
    with pytest.raises(DomainError):
        Integer("Ā", 256)


def test_non_ascii_bytes_rejected():
    with pytest.raises(DomainError):
        Integer(b"\xff1", 10)
    with pytest.raises(DomainError):
        Integer(b"1\x80", 16)


def test_make_helpers():
    assert makebin(5) == "101"
    assert makebin(5, 8) == "00000101"
    assert makehex(0xABC) == "abc"
    assert makehex(Integer(0xABC), 6) == "000abc"
    assert makeascii(0x4142) == "AB"
    assert makeascii(0x41, 2) == "\x00A"
