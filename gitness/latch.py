"""
Debounce latch for gesture counting.

Turns a per-sample "gesture condition holds" boolean into one count per
repetition. Two release policies are supported:

- TIMEOUT: the latch releases once the condition is false and more than
  `time_tolerance` seconds have passed since the last trigger.
- IMMEDIATE: the latch releases on the first sample where the condition
  is false.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)

EPOCH = 0.0


class LatchPolicy(Enum):
    TIMEOUT = "timeout"
    IMMEDIATE = "immediate"


class LatchState(Enum):
    IDLE = "IDLE"
    LATCHED = "LATCHED"


class GestureStateMachine:
    """
    Idle/Latched state machine with a rep counter.

    Usage:
        sm = GestureStateMachine(time_tolerance=0.5)
        if sm.update(condition, t):
            # rising edge: one more rep
            ...
    """

    def __init__(
        self,
        time_tolerance: float = 0.5,
        policy: LatchPolicy = LatchPolicy.TIMEOUT
    ):
        """
        Args:
            time_tolerance: Debounce time after a trigger (seconds)
            policy: Latch release policy
        """
        self.time_tolerance = time_tolerance
        self.policy = policy

        self.detected = False
        self.last_trigger_time = EPOCH
        self.count = 0

    @property
    def state(self) -> LatchState:
        return LatchState.LATCHED if self.detected else LatchState.IDLE

    def update(self, condition: bool, t: float) -> bool:
        """
        Feed the combined gesture condition for one detection cycle.

        Args:
            condition: True if all features were found this cycle
            t: Timestamp of the sample that triggered the cycle

        Returns:
            True on an Idle -> Latched transition (count was incremented)
        """
        if not self.detected:
            if condition:
                self.detected = True
                self.last_trigger_time = t
                self.count += 1
                return True
            return False

        if not condition and self._may_release(t):
            self.detected = False
            logger.debug("latch released at t=%.3f", t)
        return False

    def _may_release(self, t: float) -> bool:
        if self.policy is LatchPolicy.IMMEDIATE:
            return True
        return (t - self.last_trigger_time) > self.time_tolerance

    def reset(self):
        """Back to Idle with a zero count."""
        self.detected = False
        self.last_trigger_time = EPOCH
        self.count = 0
