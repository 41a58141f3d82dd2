"""Temporal correlation between gravity peaks and the rotation trough."""

from typing import Sequence, Tuple


def peak_within_tolerance(
    entries: Sequence[Tuple[float, float]],
    threshold: float,
    reference_time: float,
    tolerance: float
) -> bool:
    """
    True if any buffered value exceeds threshold close to reference_time.

    Scans the whole buffer; the buffer is already bounded to the
    relevant window.

    Args:
        entries: (value, timestamp) pairs
        threshold: Value must be strictly greater than this
        reference_time: Timestamp of the rotation trough (seconds)
        tolerance: Max |timestamp - reference_time|, exclusive (seconds)
    """
    for value, t in entries:
        if value > threshold and abs(t - reference_time) < tolerance:
            return True
    return False
