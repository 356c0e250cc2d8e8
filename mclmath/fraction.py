"""A normalised fraction of two integers."""

from mclmath.exceptions import DivideByZeroError
from mclmath.gcd import gcd


class Fraction:
    """A fraction kept in lowest terms with a positive denominator."""

    __hash__ = None

    def __init__(self, numerator=0, denominator=1):
        if denominator == 0:
            raise ValueError("Fraction: denominator cannot be zero.")
        self._numerator = int(numerator)
        self._denominator = int(denominator)
        self._normalise()

    def _normalise(self):
        if self._denominator == 0:
            raise DivideByZeroError("Fraction: division by zero.")
        if self._numerator == 0:
            self._denominator = 1
            return
        sign = -1 if (self._numerator < 0) != (self._denominator < 0) else 1
        num, den = abs(self._numerator), abs(self._denominator)
        common = gcd(num, den)
        self._numerator = sign * (num // common)
        self._denominator = den // common

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    @staticmethod
    def _coerce(other):
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Fraction(other, 1)
        return None

    def __int__(self):
        quotient = abs(self._numerator) // self._denominator
        return -quotient if self._numerator < 0 else quotient

    def __float__(self):
        return self._numerator / self._denominator

    def _set(self, numerator, denominator):
        self._numerator = numerator
        self._denominator = denominator
        self._normalise()
        return self

    def __iadd__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._set(
            self._numerator * rhs._denominator + rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = Fraction(self._numerator, self._denominator)
        result += rhs
        return result

    def __isub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._set(
            self._numerator * rhs._denominator - rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = Fraction(self._numerator, self._denominator)
        result -= rhs
        return result

    def __imul__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._set(
            self._numerator * rhs._numerator,
            self._denominator * rhs._denominator,
        )

    def __mul__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = Fraction(self._numerator, self._denominator)
        result *= rhs
        return result

    def __itruediv__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._numerator == 0:
            raise DivideByZeroError("Fraction: division by zero.")
        return self._set(
            self._numerator * rhs._denominator,
            self._denominator * rhs._numerator,
        )

    def __truediv__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = Fraction(self._numerator, self._denominator)
        result /= rhs
        return result

    def __eq__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return (self._numerator, self._denominator) == (rhs._numerator, rhs._denominator)

    def __repr__(self):
        return f"Fraction({self._numerator}, {self._denominator})"