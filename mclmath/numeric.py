"""A number that remembers the fixed-width kind it is stored as."""

import math

from mclmath.numeric_kinds import NumericRangeError, NumericType, convert_value


class Numeric:
    """A value stored as one of the NumericType kinds.

    Conversions to other kinds are range checked and raise NumericRangeError
    when the stored value does not fit. A Numeric made without a value holds
    nothing, and converting it raises ValueError.
    """

    __hash__ = None

    def __init__(self, value=None, kind=None):
        if value is None:
            if kind is not None:
                raise ValueError("NUMERIC: a kind needs a value.")
            self._kind = None
            self._value = None
            return
        if kind is None:
            kind = self._infer_kind(value)
        elif not isinstance(kind, NumericType):
            raise TypeError(f"kind must be a NumericType, got {type(kind).__name__}")
        self._value = convert_value(value, kind)
        self._kind = kind

    @staticmethod
    def _infer_kind(value):
        if isinstance(value, bool):
            raise TypeError("expected a real number, got bool")
        if isinstance(value, int):
            if NumericType.INT64.contains(value):
                return NumericType.INT64
            return NumericType.UINT64
        return NumericType.DOUBLE

    @property
    def kind(self):
        """The kind the value is stored as, or None when empty."""
        return self._kind

    @property
    def value(self):
        """The stored value, or None when empty."""
        return self._value

    def _require_value(self):
        if self._kind is None:
            raise ValueError("NUMERIC: no value stored.")

    def convert(self, kind):
        """Return the stored value converted to ``kind``, range checked."""
        self._require_value()
        return convert_value(self._value, kind)

    def __int__(self):
        self._require_value()
        if self._kind.is_integer:
            return self._value
        target = NumericType.INT64 if self._value < 0 else NumericType.UINT64
        return convert_value(self._value, target)

    def __float__(self):
        return self.convert(NumericType.DOUBLE)

    def __eq__(self, other):
        if not isinstance(other, Numeric):
            return NotImplemented
        if self._kind is None or other._kind is None:
            return self._kind is other._kind
        if isinstance(self._value, float) and math.isnan(self._value):
            return False
        return self._value == other._value

    def __repr__(self):
        if self._kind is None:
            return "Numeric()"
        return f"Numeric({self._value!r}, NumericType.{self._kind.name})"