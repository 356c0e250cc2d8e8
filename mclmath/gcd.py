"""Greatest common divisor."""


def gcd(a, b):
    """Return the greatest common divisor of two non-zero integers.

    The result is always positive. Raises ValueError if either value is zero
    and TypeError if either is not an integer.
    """
    for value in (a, b):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("gcd requires integer arguments")
    if a == 0 or b == 0:
        raise ValueError("gcd: parameters cannot be zero")
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a