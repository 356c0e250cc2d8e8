# mclmath

A small library of mathematical helpers in plain Python, with no
third-party dependencies.

## Modules

- `mclmath.fraction.Fraction(numerator=0, denominator=1)`: a fraction kept
  in lowest terms with a positive denominator. Supports `+`, `-`, `*`, `/`
  and their in-place forms with other fractions or integers, `==`, `int()`
  (truncates towards zero) and `float()`. The `numerator` and `denominator`
  properties are read-only. A zero denominator raises `ValueError`;
  dividing by a zero fraction raises `DivideByZeroError`.
- `mclmath.gcd.gcd(a, b)`: greatest common divisor of two non-zero integers,
  always positive. Zero raises `ValueError`, non-integers `TypeError`.
- `mclmath.trigonometry`: `cosec(a)`, `sec(a)` and `cot(a)` for angles in
  radians. They raise `mclmath.exceptions.DivideByZeroError` (a subclass of
  `ZeroDivisionError`) where the underlying sine, cosine or tangent is
  exactly zero. `cot` first wraps the angle into `[0, 2*pi)` and returns
  `0.0` at exactly `pi/2` and `3*pi/2`.
- `mclmath.vector.VectorN(dimensions, values=None)`: a vector of 0 to 255
  dimensions with indexing, `len()`, iteration, `assign(*values)`, `+`, `-`,
  multiplication by a scalar and their in-place forms. Mixing dimensions or
  assigning the wrong number of values raises `ValueError`.
- `mclmath.sorting.parallel_sort(data, max_threads=None)`: returns a new,
  stably sorted list; large inputs are split into halves sorted on separate
  threads and merged.
- `mclmath.statistics`:
  - `total(data, max_threads=None)`: the sum as a float, computed in chunks
    on worker threads (one per 1000 values, up to `max_threads`).
  - `median(data)`: the median as a float; `0.0` for empty data.
  - `percentile(data, p)`: `p` is a fraction in `[0, 1]`; the rank is
    `p * (n + 1)` with linear interpolation between ranks. Returns `0.0`
    when `p` is zero or the data is empty.
- `mclmath.regression`:
  - `linear_regression(x, y)`: `(slope, intercept)` of the least-squares
    line. Unequal lengths raise `ValueError`; no points or all-equal `x`
    raise `DivideByZeroError`.
  - `solve_quadratic(a, b, c)`: the two real roots, the one using the
    negative square root first. `a == 0` raises `DivideByZeroError`,
    complex roots raise `ValueError`.
- `mclmath.anderson_darling`: `anderson_darling(data, tests)` runs a
  one-sample Anderson-Darling test of `data` against each `GoodnessOfFit`
  record and fills in `statistic`, `critical_value`, `p_value` (normal
  only) and `h0`. Distributions come from `mclmath.definitions.PDF`:
  - `NORMAL` with parameters `[mean, stdev]`; `h0` is true unless the
    p-value is below the critical value.
  - `EXPONENTIAL` with `[rate]`, `WEIBULL` and `GAMMA` with
    `[shape, scale]`; `h0` is true unless the statistic exceeds the
    critical value. `GAMMA` is evaluated with the Weibull CDF.

  Empty data, an unsupported distribution, too few parameters or an
  `alpha` with no tabulated critical value raise `ValueError`.
  `CRITICAL_VALUES_SPECIFIED` holds critical values for a fully specified
  distribution.
- `mclmath.numeric_kinds`: the `NumericType` enum (`UINT8` … `UINT64`,
  `INT8` … `INT64`, `FLOAT`, `DOUBLE`) with `minimum`, `maximum`,
  `is_integer` and `contains(value)`, and `convert_value(value, target)`,
  which truncates towards zero for integer kinds, rounds to single
  precision for `FLOAT`, and raises `NumericRangeError` (a `ValueError`)
  when the value does not fit.
- `mclmath.numeric.Numeric(value=None, kind=None)`: a value stored as a
  `NumericType` (inferred as `INT64`, `UINT64` or `DOUBLE` when not given),
  with `kind`, `value`, `convert(kind)`, `int()` and `float()`. An empty
  `Numeric` raises `ValueError` on conversion.
- `mclmath.definitions.MAX_THREADS`: the default thread limit, the number
  of CPUs.

## Limits

- There is no command-line tool; this is a library only.
- `PDF.LOGNORMAL` and `PDF.CHI_SQUARE` exist in the enum but
  `anderson_darling` rejects them.
- Gamma critical values are tabulated only for shapes 1 to 4; other shapes
  raise `ValueError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from mclmath.fraction import Fraction
from mclmath.statistics import median, percentile
from mclmath.regression import linear_regression

half = Fraction(2, 4)                   # stored as 1/2
print(float(half + Fraction(1, 4)))     # 0.75

print(median([3, 1, 2]))                # 2.0
print(percentile([1, 2, 3, 4], 0.5))    # 2.5

slope, intercept = linear_regression([1, 2, 3], [2, 4, 6])
```

```python
from mclmath.anderson_darling import GoodnessOfFit, anderson_darling
from mclmath.definitions import PDF

tests = [GoodnessOfFit(PDF.NORMAL, [0.0, 1.0], 0.05)]
anderson_darling([-1.2, -0.4, 0.1, 0.3, 0.9, 1.5], tests)
print(tests[0].statistic, tests[0].h0)
```