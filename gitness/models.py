"""Sensor data models."""
from dataclasses import dataclass
from enum import Enum


class Channel(Enum):
    """Sensor channels consumed by the detector."""
    ROTATION_Y = "rot_y"   # rotation rate about Y (rad/s)
    GRAVITY_X = "grav_x"   # gravity vector X component (g)
    GRAVITY_Y = "grav_y"
    GRAVITY_Z = "grav_z"


GRAVITY_CHANNELS = (Channel.GRAVITY_X, Channel.GRAVITY_Y, Channel.GRAVITY_Z)


@dataclass(frozen=True)
class Sample:
    """Single-channel reading."""
    value: float
    timestamp: float  # seconds, monotonic clock


@dataclass(frozen=True)
class MotionSample:
    """One multi-channel reading as delivered by the motion API."""
    timestamp: float
    rotation_y: float
    gravity_x: float
    gravity_y: float
    gravity_z: float

    def value(self, channel: Channel) -> float:
        """Return the reading for a single channel."""
        if channel is Channel.ROTATION_Y:
            return self.rotation_y
        if channel is Channel.GRAVITY_X:
            return self.gravity_x
        if channel is Channel.GRAVITY_Y:
            return self.gravity_y
        return self.gravity_z

    def to_dict(self) -> dict:
        return {
            "t": self.timestamp,
            Channel.ROTATION_Y.value: self.rotation_y,
            Channel.GRAVITY_X.value: self.gravity_x,
            Channel.GRAVITY_Y.value: self.gravity_y,
            Channel.GRAVITY_Z.value: self.gravity_z,
        }


@dataclass(frozen=True)
class DetectionEvent:
    """A feature found on one channel during a detection cycle."""
    channel: Channel
    timestamp: float


@dataclass(frozen=True)
class GestureEvent:
    """Emitted once per counted repetition."""
    count: int
    timestamp: float
