"""
Local-extremum feature detection.

Only strict local extrema count: an interior point must be strictly
greater (peak) or strictly less (trough) than both neighbors and beyond
the threshold. Plateaus and monotonic drift never qualify.
Series shorter than 3 samples have no interior point and yield
False / None.
"""

from typing import Optional, Sequence, Tuple


def has_peak(series: Sequence[float], threshold: float) -> bool:
    """
    True if some interior point is a strict local maximum above threshold.

    Args:
        series: Values, oldest first
        threshold: Peak must be strictly greater than this

    Returns:
        Whether a qualifying peak exists
    """
    for i in range(1, len(series) - 1):
        v = series[i]
        if v > series[i - 1] and v > series[i + 1] and v > threshold:
            return True
    return False


def trough_time(
    entries: Sequence[Tuple[float, float]],
    threshold: float
) -> Optional[float]:
    """
    Timestamp of the first strict local minimum below threshold.

    Args:
        entries: (value, timestamp) pairs, oldest first
        threshold: Trough must be strictly less than this

    Returns:
        Timestamp of the first qualifying trough scanning left to right,
        or None if there is none
    """
    for i in range(1, len(entries) - 1):
        v, t = entries[i]
        if v < entries[i - 1][0] and v < entries[i + 1][0] and v < threshold:
            return t
    return None


def has_trough(series: Sequence[float], threshold: float) -> bool:
    """Untimed variant of trough_time() for plain value series."""
    return trough_time([(v, 0.0) for v in series], threshold) is not None
