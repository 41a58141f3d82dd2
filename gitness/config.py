"""
Detection configuration for Gitness.

All tunables live in one GestureConfig passed to the counter at
construction. Defaults match a wrist-worn motion sensor at 60 Hz.
"""

import os
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional

from .errors import ConfigError
from .latch import LatchPolicy
from .models import Channel


class DetectionMode(Enum):
    RAW = "raw"          # fixed thresholds, no smoothing, co-membership
    REFINED = "refined"  # smoothing, dynamic thresholds, time-anchored


@dataclass
class ChannelThreshold:
    """
    Threshold parameters for one channel.

    Fixed thresholds use `value`. Dynamic thresholds are recomputed every
    cycle as mean +/- k * std_dev of the buffered series.
    """
    value: float
    k: float = 1.0
    dynamic: bool = False


def _rotation_default() -> ChannelThreshold:
    return ChannelThreshold(value=-1.0, k=1.0, dynamic=True)


def _gravity_default() -> ChannelThreshold:
    return ChannelThreshold(value=0.3, k=1.0, dynamic=True)


@dataclass
class GestureConfig:
    window_size: int = 100
    smoothing_window: int = 5
    time_tolerance: float = 0.5         # debounce (seconds)
    correlation_tolerance: float = 0.5  # trough/peak alignment (seconds)
    mode: DetectionMode = DetectionMode.REFINED
    latch_policy: LatchPolicy = LatchPolicy.TIMEOUT
    sample_rate_hz: float = 60.0

    rotation_y: ChannelThreshold = field(default_factory=_rotation_default)
    gravity_x: ChannelThreshold = field(default_factory=_gravity_default)
    gravity_y: ChannelThreshold = field(default_factory=_gravity_default)
    gravity_z: ChannelThreshold = field(default_factory=_gravity_default)

    def threshold_for(self, channel: Channel) -> ChannelThreshold:
        return {
            Channel.ROTATION_Y: self.rotation_y,
            Channel.GRAVITY_X: self.gravity_x,
            Channel.GRAVITY_Y: self.gravity_y,
            Channel.GRAVITY_Z: self.gravity_z,
        }[channel]

    def validate(self) -> "GestureConfig":
        """Raise ConfigError on out-of-range values; return self."""
        if self.window_size < 3:
            raise ConfigError(f"window_size must be >= 3, got {self.window_size}")
        if self.smoothing_window < 1:
            raise ConfigError(f"smoothing_window must be >= 1, got {self.smoothing_window}")
        if self.time_tolerance < 0 or self.correlation_tolerance < 0:
            raise ConfigError("tolerances must be non-negative")
        if self.sample_rate_hz <= 0:
            raise ConfigError(f"sample_rate_hz must be positive, got {self.sample_rate_hz}")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GestureConfig":
        """
        Build a config from a JSON-style dict.

        Enum fields accept their string values ("raw", "timeout", ...).
        Threshold fields accept a number (fixed) or a dict with
        value/k/dynamic keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"unknown config keys: {sorted(unknown)}")

        kwargs: Dict[str, Any] = {}
        try:
            for key, raw in data.items():
                if key == "mode":
                    kwargs[key] = DetectionMode(raw)
                elif key == "latch_policy":
                    kwargs[key] = LatchPolicy(raw)
                elif key in ("window_size", "smoothing_window"):
                    kwargs[key] = int(raw)
                elif key in ("rotation_y", "gravity_x", "gravity_y", "gravity_z"):
                    kwargs[key] = _parse_threshold(raw)
                else:
                    kwargs[key] = float(raw)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"invalid config value: {e}") from e

        return cls(**kwargs).validate()

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "GestureConfig":
        """Read GITNESS_* overrides from the environment."""
        env = os.environ if environ is None else environ
        data: Dict[str, Any] = {}
        for name in ("window_size", "smoothing_window", "time_tolerance",
                     "correlation_tolerance", "mode", "latch_policy",
                     "sample_rate_hz"):
            raw = env.get(f"GITNESS_{name.upper()}", "").strip()
            if raw:
                data[name] = raw.lower() if name in ("mode", "latch_policy") else raw
        return cls.from_dict(data)


def _parse_threshold(raw: Any) -> ChannelThreshold:
    if isinstance(raw, dict):
        return ChannelThreshold(
            value=float(raw.get("value", 0.0)),
            k=float(raw.get("k", 1.0)),
            dynamic=bool(raw.get("dynamic", False)),
        )
    return ChannelThreshold(value=float(raw), dynamic=False)
