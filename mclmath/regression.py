"""Least-squares line fitting and quadratic roots."""

import math

from mclmath.exceptions import DivideByZeroError


def linear_regression(x, y):
    """Return ``(slope, intercept)`` of the least-squares line through the points.

    Raises ValueError if the sequences differ in length and DivideByZeroError
    if the line is undetermined (no points, or all x equal).
    """
    xs = [float(value) for value in x]
    ys = [float(value) for value in y]
    if len(xs) != len(ys):
        raise ValueError("x and y must have the same number of values")

    n = len(xs)
    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xx = sum(value * value for value in xs)
    sum_xy = sum(a * b for a, b in zip(xs, ys))

    denominator = n * sum_xx - sum_x * sum_x
    if n == 0 or denominator == 0:
        raise DivideByZeroError("linear_regression: the line is undetermined")

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = sum_y / n - slope / n * sum_x
    return slope, intercept


def solve_quadratic(a, b, c):
    """Return the two real roots of ``a*x**2 + b*x + c = 0``, smaller-sign root first.

    The first root uses the negative square root of the discriminant. Raises
    DivideByZeroError if ``a`` is zero and ValueError if the roots are complex.
    """
    if a == 0:
        raise DivideByZeroError("solve_quadratic: coefficient a cannot be zero")
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        raise ValueError("solve_quadratic: roots are complex")
    root_term = math.sqrt(discriminant)
    twice_a = a * 2
    return (-b - root_term) / twice_a, (-b + root_term) / twice_a