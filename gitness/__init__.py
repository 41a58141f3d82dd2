"""
Gitness - lateral-raise rep counting from wrist motion data.

Consumes a 60 Hz stream of rotation rate (Y axis) and gravity vector
(X/Y/Z) readings and counts one rep per completed raise:

- SampleBuffer: bounded per-channel history
- smooth: centered moving average
- mean / std_dev: dynamic threshold statistics
- has_peak / trough_time: strict local-extremum detection
- peak_within_tolerance: gravity peak / rotation trough alignment
- GestureStateMachine: debounce latch + count
- GestureCounter: the facade that ties it together

Usage:
    from gitness import GestureCounter, GestureConfig, MotionSample

    counter = GestureCounter(GestureConfig())
    counter.on_gesture_detected(lambda ev: print("rep", ev.count))

    # In sensor callback:
    counter.ingest(MotionSample(t, rot_y, grav_x, grav_y, grav_z))
"""

from .errors import GestureError, EmptyInputError, ConfigError, RecordingError
from .models import Channel, Sample, MotionSample, DetectionEvent, GestureEvent
from .buffer import SampleBuffer
from .smoothing import smooth
from .stats import mean, std_dev, dynamic_threshold
from .features import has_peak, has_trough, trough_time
from .correlation import peak_within_tolerance
from .latch import GestureStateMachine, LatchPolicy, LatchState
from .config import GestureConfig, ChannelThreshold, DetectionMode
from .counter import GestureCounter
from .recording import load_recording, write_recording, resample, estimate_sample_rate

__all__ = [
    # Errors
    'GestureError',
    'EmptyInputError',
    'ConfigError',
    'RecordingError',

    # Models
    'Channel',
    'Sample',
    'MotionSample',
    'DetectionEvent',
    'GestureEvent',

    # Pipeline
    'SampleBuffer',
    'smooth',
    'mean',
    'std_dev',
    'dynamic_threshold',
    'has_peak',
    'has_trough',
    'trough_time',
    'peak_within_tolerance',
    'GestureStateMachine',
    'LatchPolicy',
    'LatchState',

    # Facade
    'GestureConfig',
    'ChannelThreshold',
    'DetectionMode',
    'GestureCounter',

    # Recordings
    'load_recording',
    'write_recording',
    'resample',
    'estimate_sample_rate',
]

__version__ = '1.0.0'
