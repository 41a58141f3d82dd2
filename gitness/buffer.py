"""Fixed-capacity sample buffer, one per sensor channel."""
from collections import deque
from typing import Deque, List, Tuple

from .models import Sample


class SampleBuffer:
    """
    Bounded FIFO of timestamped samples.

    When a push would exceed capacity the oldest sample is dropped.

    Usage:
        buf = SampleBuffer(capacity=100)
        buf.push(Sample(value=0.2, timestamp=t))
        values = buf.values()
    """

    def __init__(self, capacity: int = 100):
        self.capacity = capacity
        self._ring: Deque[Sample] = deque(maxlen=capacity)

    def push(self, sample: Sample) -> None:
        """Append a sample, evicting the oldest if full."""
        self._ring.append(sample)

    def values(self) -> List[float]:
        """Buffered values, oldest first."""
        return [s.value for s in self._ring]

    def timestamps(self) -> List[float]:
        return [s.timestamp for s in self._ring]

    def entries(self) -> List[Tuple[float, float]]:
        """Buffered (value, timestamp) pairs, oldest first."""
        return [(s.value, s.timestamp) for s in self._ring]

    def __len__(self) -> int:
        return len(self._ring)
