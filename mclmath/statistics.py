"""Sum, median and percentile of numeric data."""

import math
from concurrent.futures import ThreadPoolExecutor

from mclmath.definitions import MAX_THREADS
from mclmath.sorting import parallel_sort

_VALUES_PER_THREAD = 1000


def _partial_sum(chunk):
    return sum(chunk, 0.0)


def total(data, max_threads=None):
    """Return the sum of ``data`` as a float, summing chunks on worker threads.

    One thread is used per 1000 values, limited to ``max_threads``.
    """
    if max_threads is None:
        max_threads = MAX_THREADS
    if max_threads < 1:
        raise ValueError("max_threads must be at least 1")
    values = list(data)
    count = len(values)
    if count == 0:
        return 0.0

    threads = max(1, min(count // _VALUES_PER_THREAD, max_threads))
    step = count // threads
    bounds = [index * step for index in range(threads)] + [count]
    chunks = (values[begin:end] for begin, end in zip(bounds, bounds[1:]))
    with ThreadPoolExecutor(max_workers=threads) as pool:
        partials = list(pool.map(_partial_sum, chunks))
    return sum(partials, 0.0)


def median(data):
    """Return the median of ``data`` as a float; 0.0 for empty data."""
    values = list(data)
    count = len(values)
    if count == 0:
        return 0.0
    if count == 1:
        return float(values[0])
    if count == 2:
        return (float(values[0]) + float(values[1])) / 2
    ordered = parallel_sort(values)
    half = count // 2
    if count % 2 == 0:
        return (float(ordered[half - 1]) + float(ordered[half])) / 2
    return float(ordered[half])


def percentile(data, p):
    """Return the ``p`` percentile of ``data``, with ``p`` a fraction in [0, 1].

    The rank is ``p * (n + 1)``; between ranks the value is interpolated
    linearly. Returns 0.0 when ``p`` is zero or the data is empty.
    """
    if p == 0:
        return 0.0
    ordered = sorted(data)
    if not ordered:
        return 0.0

    last = len(ordered) - 1
    rank = float(p) * (len(ordered) + 1)
    lower = min(max(math.floor(rank) - 1, 0), last)
    upper = min(max(math.ceil(rank) - 1, 0), last)

    if lower == upper:
        return float(ordered[lower])
    fraction = rank - math.floor(rank)
    return float(ordered[lower] + fraction * (ordered[upper] - ordered[lower]))