"""Fixed-dimension numeric vectors."""

from numbers import Number

_MAX_DIMENSIONS = 255


class VectorN:
    """A vector with a fixed number of dimensions (0 to 255)."""

    __hash__ = None

    def __init__(self, dimensions, values=None):
        if not 0 <= dimensions <= _MAX_DIMENSIONS:
            raise ValueError(f"dimensions must be between 0 and {_MAX_DIMENSIONS}")
        self._dimensions = dimensions
        self._values = [0] * dimensions
        if values is not None:
            self.assign(*values)

    @property
    def dimensions(self):
        return self._dimensions

    def __len__(self):
        return self._dimensions

    def __iter__(self):
        return iter(self._values)

    def __getitem__(self, axis):
        return self._values[axis]

    def __setitem__(self, axis, value):
        self._values[axis] = value

    def assign(self, *args):
        """Replace all components; the number of values must match the dimensions."""
        if len(args) != self._dimensions:
            raise ValueError(
                f"expected {self._dimensions} values, got {len(args)}"
            )
        self._values = list(args)
        return self

    def _check(self, other):
        if not isinstance(other, VectorN):
            return False
        if other._dimensions != self._dimensions:
            raise ValueError("vectors must have the same dimensions")
        return True

    def __iadd__(self, other):
        if not self._check(other):
            return NotImplemented
        self._values = [a + b for a, b in zip(self._values, other._values)]
        return self

    def __add__(self, other):
        if not self._check(other):
            return NotImplemented
        return VectorN(self._dimensions, [a + b for a, b in zip(self._values, other._values)])

    def __isub__(self, other):
        if not self._check(other):
            return NotImplemented
        self._values = [a - b for a, b in zip(self._values, other._values)]
        return self

    def __sub__(self, other):
        if not self._check(other):
            return NotImplemented
        return VectorN(self._dimensions, [a - b for a, b in zip(self._values, other._values)])

    def __imul__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        self._values = [a * scalar for a in self._values]
        return self

    def __mul__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        return VectorN(self._dimensions, [a * scalar for a in self._values])

    def __eq__(self, other):
        if not isinstance(other, VectorN):
            return NotImplemented
        return self._dimensions == other._dimensions and self._values == other._values

    def __repr__(self):
        return f"VectorN({self._dimensions}, {self._values!r})"