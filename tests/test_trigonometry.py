import math

import pytest

from mclmath.exceptions import DivideByZeroError
from mclmath.trigonometry import cosec, cot, sec

ANGLES = [0.3, 1.0, 2.0, -0.7, 4.5, 10.0]


@pytest.mark.parametrize("a", ANGLES)
def test_cosec_is_reciprocal_of_sin(a):
    assert cosec(a) * math.sin(a) == pytest.approx(1.0)


@pytest.mark.parametrize("a", ANGLES)
def test_sec_is_reciprocal_of_cos(a):
    assert sec(a) * math.cos(a) == pytest.approx(1.0)


@pytest.mark.parametrize("a", ANGLES)
def test_cot_is_reciprocal_of_tan(a):
    assert cot(a) * math.tan(a) == pytest.approx(1.0)


def test_cosec_zero_raises():
    with pytest.raises(DivideByZeroError):
        cosec(0)


def test_cot_zero_raises():
    with pytest.raises(DivideByZeroError):
        cot(0)


def test_cot_full_turn_raises():
    with pytest.raises(DivideByZeroError):
        cot(2 * math.pi)


def test_divide_error_is_zero_division():
    with pytest.raises(ZeroDivisionError):
        cosec(0.0)


def test_cot_defined_zero_points():
    assert cot(math.pi / 2) == 0
    assert cot(math.pi / 2 * 3) == 0


def test_sec_at_zero():
    assert sec(0) == 1.0


def test_cot_periodic():
    assert cot(1.0 + 2 * math.pi) == pytest.approx(cot(1.0))