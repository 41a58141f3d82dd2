"""
Lateral-raise rep counter.

GestureCounter owns the per-channel buffers and the debounce latch and
runs the detection pipeline once per incoming sample:

    ingest -> buffer -> (smooth) -> threshold -> detect -> correlate -> latch

A rep is the rotation-Y trough of the arm swing lining up in time with
a peak on each of the three gravity axes.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

from .buffer import SampleBuffer
from .config import ChannelThreshold, DetectionMode, GestureConfig
from .correlation import peak_within_tolerance
from .features import has_peak, has_trough, trough_time
from .latch import GestureStateMachine, LatchState
from .models import (
    GRAVITY_CHANNELS,
    Channel,
    DetectionEvent,
    GestureEvent,
    MotionSample,
    Sample,
)
from .smoothing import smooth
from .stats import dynamic_threshold

logger = logging.getLogger(__name__)

GestureCallback = Callable[[GestureEvent], None]
ResetCallback = Callable[[], None]


class GestureCounter:
    """
    Count lateral-raise reps from a live motion stream.

    Thread-safe: ingest() and reset() are serialized by one lock.
    Callbacks run after the lock is released, on the calling thread.

    Usage:
        counter = GestureCounter(GestureConfig())
        counter.on_gesture_detected(lambda ev: haptics.play())

        # In sensor callback (60 Hz):
        counter.ingest(MotionSample(t, rot_y, grav_x, grav_y, grav_z))
        print(counter.count)
    """

    def __init__(self, config: Optional[GestureConfig] = None):
        self.config = (config or GestureConfig()).validate()

        self.buffers: Dict[Channel, SampleBuffer] = {
            ch: SampleBuffer(self.config.window_size) for ch in Channel
        }
        self.latch = GestureStateMachine(
            time_tolerance=self.config.time_tolerance,
            policy=self.config.latch_policy,
        )
        self.last_detections: List[DetectionEvent] = []

        self._lock = threading.Lock()
        self._gesture_callbacks: List[GestureCallback] = []
        self._reset_callbacks: List[ResetCallback] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def count(self) -> int:
        return self.latch.count

    @property
    def state(self) -> LatchState:
        return self.latch.state

    def on_gesture_detected(self, callback: GestureCallback) -> None:
        """Register a callback invoked on every counted rep."""
        self._gesture_callbacks.append(callback)

    def on_reset(self, callback: ResetCallback) -> None:
        """Register a callback invoked after every reset()."""
        self._reset_callbacks.append(callback)

    def ingest(self, sample: MotionSample) -> Optional[GestureEvent]:
        """
        Process one multi-channel reading.

        Returns:
            The GestureEvent if this sample completed a rep, else None
        """
        with self._lock:
            for ch in Channel:
                self.buffers[ch].push(Sample(sample.value(ch), sample.timestamp))

            event = self._run_cycle(sample.timestamp)
        self._emit(event)
        return event

    def ingest_value(self, channel: Channel, value: float, timestamp: float) -> None:
        """
        Buffer a single-channel reading without running detection.

        For sources that deliver channels separately; follow with
        ingest() or evaluate() once the reading set is complete.
        """
        with self._lock:
            self.buffers[channel].push(Sample(value, timestamp))

    def evaluate(self, timestamp: float) -> Optional[GestureEvent]:
        """Run one detection cycle over the current buffers."""
        with self._lock:
            event = self._run_cycle(timestamp)
        self._emit(event)
        return event

    def reset(self) -> None:
        """Zero the count and release the latch. Buffers keep rolling."""
        with self._lock:
            self.latch.reset()
            self.last_detections = []
        logger.info("counter reset")
        for cb in list(self._reset_callbacks):
            cb()

    # ------------------------------------------------------------------
    # Detection
    # ------------------------------------------------------------------

    def _run_cycle(self, timestamp: float) -> Optional[GestureEvent]:
        # caller holds self._lock
        if self.config.mode is DetectionMode.RAW:
            detections = self._detect_raw()
        else:
            detections = self._detect_refined()
        self.last_detections = detections

        if self.latch.update(len(detections) == len(Channel), timestamp):
            return GestureEvent(self.latch.count, timestamp)
        return None

    def _emit(self, event: Optional[GestureEvent]) -> None:
        if event is None:
            return
        logger.debug("rep %d at t=%.3f", event.count, event.timestamp)
        for cb in list(self._gesture_callbacks):
            cb(event)

    def _detect_raw(self) -> List[DetectionEvent]:
        """Fixed thresholds; all features just have to be in the buffer."""
        rot = self.buffers[Channel.ROTATION_Y]
        if not has_trough(rot.values(), self.config.rotation_y.value):
            return []

        t = rot.timestamps()[-1]
        events = [DetectionEvent(Channel.ROTATION_Y, t)]
        for ch in GRAVITY_CHANNELS:
            if not has_peak(self.buffers[ch].values(), self.config.threshold_for(ch).value):
                return []
            events.append(DetectionEvent(ch, t))
        return events

    def _detect_refined(self) -> List[DetectionEvent]:
        """Smoothed series, dynamic thresholds, peaks anchored to trough time."""
        rot_entries = self._smoothed_entries(Channel.ROTATION_Y)
        rot_threshold = self._threshold(
            self.config.rotation_y, [v for v, _ in rot_entries], below=True
        )
        t_trough = trough_time(rot_entries, rot_threshold)
        if t_trough is None:
            return []

        events = [DetectionEvent(Channel.ROTATION_Y, t_trough)]
        for ch in GRAVITY_CHANNELS:
            entries = self._smoothed_entries(ch)
            threshold = self._threshold(
                self.config.threshold_for(ch), [v for v, _ in entries]
            )
            if not peak_within_tolerance(
                entries, threshold, t_trough, self.config.correlation_tolerance
            ):
                return []
            events.append(DetectionEvent(ch, t_trough))
        return events

    def _smoothed_entries(self, channel: Channel):
        buf = self.buffers[channel]
        values = smooth(buf.values(), self.config.smoothing_window)
        return list(zip(values, buf.timestamps()))

    @staticmethod
    def _threshold(params: ChannelThreshold, values: List[float], below: bool = False) -> float:
        if params.dynamic:
            return dynamic_threshold(values, params.k, below=below)
        return params.value
