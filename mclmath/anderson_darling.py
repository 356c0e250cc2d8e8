"""Anderson-Darling one-sample goodness-of-fit test."""

import math
from dataclasses import dataclass, field

from mclmath.definitions import PDF
from mclmath.sorting import parallel_sort

_NORMAL_A = {0.005: 1.1578, 0.01: 1.0348, 0.025: 0.8728, 0.05: 0.7514, 0.10: 0.6305, 0.20: 0.5091}
_NORMAL_B = {0.005: 1.063, 0.01: 1.013, 0.025: 0.881, 0.05: 0.795, 0.10: 0.750, 0.20: 0.756}
_NORMAL_D = {0.005: 1.34, 0.01: 0.93, 0.025: 0.94, 0.05: 0.89, 0.10: 0.80, 0.20: 0.39}

_WEIBULL = {0.01: 1.038, 0.025: 0.877, 0.05: 0.757, 0.10: 0.637, 0.25: 0.474}

_EXPONENTIAL = {
    0.0025: 2.534, 0.005: 2.244, 0.01: 1.959, 0.025: 1.591, 0.05: 1.321,
    0.10: 1.062, 0.15: 0.916, 0.20: 0.816, 0.25: 0.736,
}

#: Critical values for a fully specified distribution.
CRITICAL_VALUES_SPECIFIED = {
    0.001: 5.9671, 0.005: 4.4971, 0.01: 3.8784, 0.025: 3.0775,
    0.05: 2.4922, 0.1: 1.9330, 0.15: 1.6212, 0.25: 1.2479,
}

_GAMMA_1 = {0.005: 1.227, 0.01: 1.092, 0.025: 0.917, 0.05: 0.786, 0.10: 0.657, 0.25: 0.486}
_GAMMA_2 = {0.005: 1.190, 0.01: 1.062, 0.025: 0.894, 0.05: 0.768, 0.25: 0.486}
_GAMMA_3 = {0.005: 1.178, 0.01: 1.052, 0.025: 0.886, 0.05: 0.762, 0.10: 0.639, 0.25: 0.475}
_GAMMA_4 = {0.005: 1.173, 0.01: 1.048, 0.025: 0.833, 0.05: 0.759, 0.10: 0.637, 0.25: 0.473}
_EMPTY = {}

_REQUIRED_PARAMETERS = {
    PDF.NORMAL: (2, "Normal", "Two (2)"),
    PDF.EXPONENTIAL: (1, "Exponential", "One (1)"),
    PDF.WEIBULL: (2, "Weibull", "Two (2)"),
    PDF.GAMMA: (2, "Gamma", "Two (2)"),
}


@dataclass
class GoodnessOfFit:
    """One distribution to test, and the outcome of the test.

    Parameters: Normal ``[mean, stdev]``, Exponential ``[rate]``,
    Weibull and Gamma ``[shape, scale]``.
    """

    pdf: PDF
    parameters: list = field(default_factory=list)
    alpha: float = 0.05
    h0: bool = False
    statistic: float | None = None
    critical_value: float | None = None
    p_value: float | None = None


def _log(value):
    return math.log(value) if value > 0 else -math.inf


def _exp(value):
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _normal_cdf(mean, stdev):
    if stdev <= 0:
        raise ValueError("Normal distribution requires a positive standard deviation.")
    return lambda x: 0.5 * (1 + math.erf((x - mean) / (stdev * math.sqrt(2))))


def _exponential_cdf(rate):
    if rate <= 0:
        raise ValueError("Exponential distribution requires a positive rate.")
    return lambda x: 0.0 if x <= 0 else -math.expm1(-rate * x)


def _weibull_cdf(shape, scale):
    if shape <= 0 or scale <= 0:
        raise ValueError("Weibull distribution requires positive shape and scale.")
    return lambda x: 0.0 if x <= 0 else -math.expm1(-((x / scale) ** shape))


def _cdf_for(test):
    if test.pdf not in _REQUIRED_PARAMETERS:
        raise ValueError("Invalid PDF function")
    count, name, words = _REQUIRED_PARAMETERS[test.pdf]
    if len(test.parameters) < count:
        raise ValueError(f"Too few parameters for PDF:{name}. {words} required.")
    params = test.parameters
    if test.pdf is PDF.NORMAL:
        return _normal_cdf(params[0], params[1])
    if test.pdf is PDF.EXPONENTIAL:
        return _exponential_cdf(params[0])
    # Both Weibull and Gamma are evaluated with the Weibull CDF.
    return _weibull_cdf(params[0], params[1])


def _lookup(table, alpha):
    try:
        return table[alpha]
    except KeyError:
        raise ValueError("Invalid alpha value given") from None


def _gamma_table(shape):
    if shape == 1:
        return _GAMMA_1
    if shape == 2:
        return _GAMMA_2
    if shape == 3:
        return _GAMMA_3
    if shape == 4:
        return _GAMMA_4
    return _EMPTY


def _normal_p_value(ad):
    if ad <= 0.2:
        return 1 - _exp(-13.436 + 101.14 * ad - 223.73 * ad * ad)
    if ad <= 0.34:
        return 1 - _exp(-8.318 + 42.796 * ad - 59.938 * ad * ad)
    if ad <= 0.6:
        return _exp(0.9177 - 4.279 * ad - 1.38 * ad * ad)
    return _exp(1.2937 - 5.709 * ad + 0.0186 * ad * ad)


def _evaluate(test, ordered):
    cdf = _cdf_for(test)
    n = len(ordered)
    fx = [cdf(float(x)) for x in ordered]

    a = sum(
        (2 * i - 1) * (_log(fx[i - 1]) + _log(1 - fx[n - i]))
        for i in range(1, n + 1)
    )
    a = -n - a / n

    p_value = None
    if test.pdf is PDF.NORMAL:
        ad = a * (1 + 0.75 / n + 2.25 / (n * n))
        p_value = _normal_p_value(ad)
        alpha = test.alpha
        cv = _lookup(_NORMAL_A, alpha) * (
            1 - _NORMAL_B[alpha] / n - _NORMAL_D[alpha] / (n * n)
        )
        h0 = not p_value < cv
    else:
        if test.pdf is PDF.WEIBULL:
            ad = a * (1 + 0.2 / math.sqrt(n))
            cv = _lookup(_WEIBULL, test.alpha)
        elif test.pdf is PDF.EXPONENTIAL:
            ad = a * (1 + 0.6 / n)
            cv = _lookup(_EXPONENTIAL, test.alpha)
        else:
            shape = test.parameters[0]
            if shape < 2:
                ad = a * (1 + 0.6 / n)
            else:
                ad = a * (1 + (0.2 + 0.3 / shape) / n)
            cv = _lookup(_gamma_table(shape), test.alpha)
        h0 = not ad > cv

    test.statistic = ad
    test.critical_value = cv
    test.p_value = p_value
    test.h0 = h0


def anderson_darling(data, tests):
    """Run an Anderson-Darling test of ``data`` against each entry of ``tests``.

    Each GoodnessOfFit is updated in place with the statistic, the critical
    value for its ``alpha``, the p-value (normal only) and ``h0``: True when
    the hypothesis that the data follow the distribution is accepted. The
    list of tests is returned. Raises ValueError for empty data, an
    unsupported distribution, too few parameters or an unknown alpha.
    """
    ordered = parallel_sort(data)
    if not ordered:
        raise ValueError("anderson_darling: data cannot be empty")
    tests = list(tests)
    for test in tests:
        _evaluate(test, ordered)
    return tests