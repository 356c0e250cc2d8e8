"""Reciprocal trigonometric functions."""

import math

from mclmath.exceptions import DivideByZeroError

_TWO_PI = 2 * math.pi
_HALF_PI = math.pi / 2


def cosec(a):
    """Return 1/sin(a) for an angle in radians."""
    value = math.sin(float(a))
    if value == 0:
        raise DivideByZeroError("Divide by zero in function cosec(a)")
    return 1 / value


def sec(a):
    """Return 1/cos(a) for an angle in radians."""
    value = math.cos(float(a))
    if value == 0:
        raise DivideByZeroError("Divide by zero in function sec(a)")
    return 1 / value


def _wrap(a):
    """Reduce an angle to the range [0, 2*pi)."""
    a = math.fmod(float(a), _TWO_PI)
    if a < 0:
        a += _TWO_PI
    return a


def cot(a):
    """Return 1/tan(a) for an angle in radians; zero at pi/2 and 3*pi/2."""
    a = _wrap(a)
    if a == _HALF_PI or a == _HALF_PI * 3:
        return 0.0
    value = math.tan(a)
    if value == 0:
        raise DivideByZeroError("Divide by zero in function cot(a)")
    return 1 / value