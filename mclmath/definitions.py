"""Shared definitions: probability distributions and runtime settings."""

import enum
import os

#: Upper bound on worker threads used by the parallel helpers.
MAX_THREADS: int = os.cpu_count() or 1


class PDF(enum.Enum):
    """Probability distribution functions known to the library."""

    NORMAL = enum.auto()
    LOGNORMAL = enum.auto()
    WEIBULL = enum.auto()
    EXPONENTIAL = enum.auto()
    GAMMA = enum.auto()
    CHI_SQUARE = enum.auto()