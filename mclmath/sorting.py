"""Multi-threaded merge sort."""

import heapq
import threading

from mclmath.definitions import MAX_THREADS

_MIN_GRAIN = 256


def parallel_sort(data, max_threads=None):
    """Return a new sorted list of the items in ``data``.

    The input is split in halves that are sorted on separate threads and then
    merged. Runs shorter than ``max(256, len(data) // max_threads)`` are sorted
    directly. The sort is stable.
    """
    if max_threads is None:
        max_threads = MAX_THREADS
    if max_threads < 1:
        raise ValueError("max_threads must be at least 1")
    items = list(data)
    grain = max(_MIN_GRAIN, len(items) // max_threads)
    return _sort(items, grain)


def _sort(items, grain):
    if len(items) < grain:
        return sorted(items)

    middle = len(items) // 2
    outcome = {}

    def sort_left():
        try:
            outcome["left"] = _sort(items[:middle], grain)
        except BaseException as exc:  # re-raised in the calling thread
            outcome["error"] = exc

    worker = threading.Thread(target=sort_left)
    worker.start()
    try:
        right = _sort(items[middle:], grain)
    finally:
        worker.join()
    if "error" in outcome:
        raise outcome["error"]
    return list(heapq.merge(outcome["left"], right))