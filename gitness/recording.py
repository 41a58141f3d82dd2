"""
Recorded session loading for Gitness.

Sessions are stored one reading per row, either as JSON Lines
(the format the server logs) or CSV with a header row:

    t, rot_y, grav_x, grav_y, grav_z

Replaying a recording through GestureCounter gives the same count the
live stream would have produced.
"""

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np

from .errors import RecordingError
from .models import Channel, MotionSample


def _to_sample(row: Dict[str, Any], line_no: int) -> MotionSample:
    try:
        return MotionSample(
            timestamp=float(row["t"]),
            rotation_y=float(row[Channel.ROTATION_Y.value]),
            gravity_x=float(row[Channel.GRAVITY_X.value]),
            gravity_y=float(row[Channel.GRAVITY_Y.value]),
            gravity_z=float(row[Channel.GRAVITY_Z.value]),
        )
    except KeyError as e:
        raise RecordingError(f"line {line_no}: missing field {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise RecordingError(f"line {line_no}: non-numeric value ({e})") from e


def parse_sample(row: Dict[str, Any]) -> MotionSample:
    """Build a MotionSample from a single dict with t/rot_y/grav_* keys."""
    return _to_sample(row, 1)


def load_recording(path: Union[str, Path]) -> List[MotionSample]:
    """
    Load a recorded session.

    Args:
        path: .jsonl or .csv file

    Returns:
        Samples in file order

    Raises:
        RecordingError: unknown extension, bad JSON, missing or
                        non-numeric fields
    """
    path = Path(path)
    suffix = path.suffix.lower()
    samples: List[MotionSample] = []

    with open(path, "r", encoding="utf-8", newline="") as f:
        if suffix in (".jsonl", ".json"):
            for line_no, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    row = json.loads(line)
                except json.JSONDecodeError as e:
                    raise RecordingError(f"line {line_no}: invalid JSON ({e.msg})") from e
                if not isinstance(row, dict):
                    raise RecordingError(f"line {line_no}: expected an object")
                samples.append(_to_sample(row, line_no))
        elif suffix == ".csv":
            reader = csv.DictReader(f)
            # header is line 1
            for line_no, row in enumerate(reader, start=2):
                if not any(isinstance(v, str) and v.strip() for v in row.values()):
                    continue
                samples.append(_to_sample(row, line_no))
        else:
            raise RecordingError(f"unsupported recording format: {path.name}")

    return samples


def estimate_sample_rate(samples: List[MotionSample]) -> Optional[float]:
    """
    Estimate the sample rate from the median timestamp interval.

    Returns:
        Rate in Hz, or None for fewer than two samples or no forward time
    """
    if len(samples) < 2:
        return None
    dts = np.diff([s.timestamp for s in samples])
    dt = float(np.median(dts))
    if dt <= 0:
        return None
    return 1.0 / dt


def resample(samples: List[MotionSample], target_hz: float) -> List[MotionSample]:
    """
    Resample a recording onto a uniform grid using linear interpolation.

    The grid starts at the first timestamp. Recordings with fewer than
    two samples or zero duration are returned as a copy.

    Example:
        >>> uniform = resample(load_recording("set1.jsonl"), target_hz=60)
    """
    if len(samples) < 2:
        return list(samples)

    t = np.array([s.timestamp for s in samples], dtype=np.float64)
    duration = t[-1] - t[0]
    if duration <= 0:
        return list(samples)

    n = int(duration * target_hz) + 1
    grid = t[0] + np.arange(n) / target_hz

    columns = {
        ch: np.interp(grid, t, [s.value(ch) for s in samples]) for ch in Channel
    }
    return [
        MotionSample(
            timestamp=float(grid[i]),
            rotation_y=float(columns[Channel.ROTATION_Y][i]),
            gravity_x=float(columns[Channel.GRAVITY_X][i]),
            gravity_y=float(columns[Channel.GRAVITY_Y][i]),
            gravity_z=float(columns[Channel.GRAVITY_Z][i]),
        )
        for i in range(n)
    ]


def write_recording(path: Union[str, Path], samples: List[MotionSample]) -> None:
    """Write samples as JSON Lines."""
    with open(path, "w", encoding="utf-8") as f:
        for s in samples:
            f.write(json.dumps(s.to_dict()) + "\n")
