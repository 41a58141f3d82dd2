"""
Centered moving-average smoothing.

Each output point is the mean of the input over
[i - window // 2, i + window // 2], clipped to the series bounds,
so edge points average over a narrower window. No padding.
"""

from typing import List, Sequence

import numpy as np


def smooth(series: Sequence[float], window_size: int = 5) -> List[float]:
    """
    Smooth a series with a centered moving average.

    Args:
        series: Input values, oldest first
        window_size: Nominal window width in samples

    Returns:
        Series of the same length. If len(series) <= window_size the
        input is returned unchanged.
    """
    if len(series) <= window_size:
        return list(series)

    x = np.asarray(series, dtype=np.float64)
    n = len(x)
    half = window_size // 2
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        lo = max(0, i - half)
        hi = min(n, i + half + 1)
        out[i] = x[lo:hi].mean()
    return out.tolist()
