"""Core primitives: big integers, prime-field elements, seedable RNG."""

from core.errors import (IntegerError, DomainError, DivisionByZero, OutOfRange,
                         IncompatibleField, UndefinedInverse)
from core.integer import Integer, POSITIVE, NEGATIVE, ipow, ilog, makebin, makehex, makeascii
from core.field import FieldElement
from core import rng
