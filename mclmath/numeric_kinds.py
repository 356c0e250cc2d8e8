"""Fixed-width numeric kinds and range-checked conversion between them."""

import enum
import math
import numbers
import struct

#: Largest finite single-precision value.
FLOAT32_MAX = 3.4028234663852886e38


class NumericRangeError(ValueError):
    """Raised when a value does not fit in the requested numeric kind."""

    def __init__(self, message="NUMERIC: Value out of range."):
        super().__init__(message)


class NumericType(enum.Enum):
    """A storage kind: fixed-width integers and single or double floats."""

    UINT8 = ("uint8", 0, 2**8 - 1)
    UINT16 = ("uint16", 0, 2**16 - 1)
    UINT32 = ("uint32", 0, 2**32 - 1)
    UINT64 = ("uint64", 0, 2**64 - 1)
    INT8 = ("int8", -(2**7), 2**7 - 1)
    INT16 = ("int16", -(2**15), 2**15 - 1)
    INT32 = ("int32", -(2**31), 2**31 - 1)
    INT64 = ("int64", -(2**63), 2**63 - 1)
    FLOAT = ("float", -FLOAT32_MAX, FLOAT32_MAX)
    DOUBLE = ("double", -math.inf, math.inf)

    def __init__(self, label, minimum, maximum):
        self.label = label
        self.minimum = minimum
        self.maximum = maximum

    @property
    def is_integer(self):
        """True for the integer kinds."""
        return self not in (NumericType.FLOAT, NumericType.DOUBLE)

    def contains(self, value):
        """Return True if ``value`` can be converted to this kind without a range error."""
        _check_number(value)
        if math.isnan(value):
            return not self.is_integer
        if self is NumericType.DOUBLE:
            return _fits_double(value)
        return self.minimum <= value <= self.maximum


def _check_number(value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}")


def _fits_double(value):
    if isinstance(value, float):
        return True
    try:
        float(value)
    except OverflowError:
        return False
    return True


def convert_value(value, target):
    """Convert ``value`` to the kind ``target``.

    Integer kinds truncate towards zero; FLOAT rounds to single precision;
    DOUBLE gives a Python float. Raises NumericRangeError when the value lies
    outside the target's range and TypeError when it is not a real number.
    """
    if not target.contains(value):
        raise NumericRangeError()
    if target.is_integer:
        return value if isinstance(value, int) else math.trunc(value)
    result = float(value)
    if target is NumericType.FLOAT and math.isfinite(result):
        (result,) = struct.unpack("<f", struct.pack("<f", result))
    return result