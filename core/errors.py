"""Exceptions raised by the integer engine and the field layer."""


class IntegerError(ArithmeticError):
    """Base class for all errors raised by this package."""


class DomainError(IntegerError, ValueError):
    """Argument outside the domain of an operation (bad base, log of 0, ...)."""


class DivisionByZero(IntegerError, ZeroDivisionError):
    """Integer division or modulus by zero."""


class OutOfRange(IntegerError, ValueError):
    """Field element value outside [0, prime)."""


class IncompatibleField(IntegerError, ValueError):
    """Binary field operation on elements of different fields."""


class UndefinedInverse(DivisionByZero):
    """Inverse of the zero field element requested."""
