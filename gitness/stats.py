"""Mean / standard deviation helpers used for dynamic thresholds."""

from typing import Sequence

import numpy as np

from .errors import EmptyInputError


def mean(series: Sequence[float]) -> float:
    """Arithmetic mean. Raises EmptyInputError on an empty series."""
    if len(series) == 0:
        raise EmptyInputError("mean() of empty series")
    return float(np.mean(np.asarray(series, dtype=np.float64)))


def std_dev(series: Sequence[float]) -> float:
    """Population standard deviation (divide by N)."""
    if len(series) == 0:
        raise EmptyInputError("std_dev() of empty series")
    return float(np.std(np.asarray(series, dtype=np.float64), ddof=0))


def dynamic_threshold(series: Sequence[float], k: float, below: bool = False) -> float:
    """
    Threshold that tracks the live signal.

    Args:
        series: Buffered (optionally smoothed) values
        k: Number of standard deviations away from the mean
        below: True for trough detection (mean - k*std)

    Returns:
        mean + k*std, or mean - k*std when below is True
    """
    offset = k * std_dev(series)
    return mean(series) - offset if below else mean(series) + offset
