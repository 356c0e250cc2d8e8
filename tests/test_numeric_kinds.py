import math

import pytest

from mclmath.numeric_kinds import (
    FLOAT32_MAX,
    NumericRangeError,
    NumericType,
    convert_value,
)

INTEGER_KINDS = [kind for kind in NumericType if kind.is_integer]


def test_uint8_limits():
    assert convert_value(255, NumericType.UINT8) == 255
    with pytest.raises(NumericRangeError):
        convert_value(256, NumericType.UINT8)


def test_int8_limits():
    assert convert_value(-128, NumericType.INT8) == -128
    with pytest.raises(NumericRangeError):
        convert_value(-129, NumericType.INT8)


@pytest.mark.parametrize("kind", INTEGER_KINDS)
def test_integer_bounds(kind):
    assert kind.contains(kind.minimum)
    assert kind.contains(kind.maximum)
    assert not kind.contains(kind.maximum + 1)
    assert not kind.contains(kind.minimum - 1)
    assert convert_value(kind.maximum, kind) == kind.maximum


@pytest.mark.parametrize("kind", [NumericType.UINT16, NumericType.UINT32, NumericType.UINT64])
def test_negative_to_unsigned_fails(kind):
    with pytest.raises(NumericRangeError):
        convert_value(-1, kind)


def test_float_truncates_towards_zero():
    assert convert_value(3.9, NumericType.INT8) == 3
    assert convert_value(-3.9, NumericType.INT16) == -3
    assert isinstance(convert_value(7.0, NumericType.UINT32), int)


def test_float_just_over_integer_range_fails():
    with pytest.raises(NumericRangeError):
        convert_value(127.5, NumericType.INT8)
    with pytest.raises(NumericRangeError):
        convert_value(-0.5, NumericType.UINT8)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
@pytest.mark.parametrize("kind", INTEGER_KINDS)
def test_non_finite_to_integer_fails(value, kind):
    with pytest.raises(NumericRangeError):
        convert_value(value, kind)


def test_single_precision_rounding_is_stable():
    once = convert_value(0.1, NumericType.FLOAT)
    assert once != 0.1
    assert convert_value(once, NumericType.FLOAT) == once
    assert convert_value(0.5, NumericType.FLOAT) == 0.5


def test_single_precision_range():
    assert convert_value(FLOAT32_MAX, NumericType.FLOAT) == FLOAT32_MAX
    with pytest.raises(NumericRangeError):
        convert_value(1e39, NumericType.FLOAT)
    with pytest.raises(NumericRangeError):
        convert_value(-math.inf, NumericType.FLOAT)


def test_double_keeps_value():
    result = convert_value(2**63 - 1, NumericType.DOUBLE)
    assert isinstance(result, float)
    assert result == float(2**63 - 1)
    assert convert_value(0.1, NumericType.DOUBLE) == 0.1


def test_nan_kept_by_float_kinds():
    assert math.isnan(convert_value(math.nan, NumericType.DOUBLE))
    assert math.isnan(convert_value(math.nan, NumericType.FLOAT))


@pytest.mark.parametrize("bad", [True, "3", None, 1 + 2j])
def test_non_real_rejected(bad):
    with pytest.raises(TypeError):
        convert_value(bad, NumericType.INT32)


def test_range_error_message_and_type():
    with pytest.raises(ValueError, match="NUMERIC: Value out of range."):
        convert_value(70000, NumericType.UINT16)


@pytest.mark.parametrize("value", [0, 1, 100, -100, 12.75, -12.75])
@pytest.mark.parametrize("kind", list(NumericType))
def test_conversion_is_idempotent(value, kind):
    if not kind.contains(value):
        with pytest.raises(NumericRangeError):
            convert_value(value, kind)
    else:
        once = convert_value(value, kind)
        assert convert_value(once, kind) == once