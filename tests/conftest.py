import math

import pytest

from gitness import MotionSample

RATE_HZ = 60.0


def raise_cycle(start_index=0, length=30, center=15, width=3.0,
                rot_amp=-2.0, grav_amps=(1.0, 0.8, 0.6), baseline=(0.0, 0.0, 0.0, 0.0)):
    """
    One synthetic lateral raise: a Gaussian dip on rotation-Y and
    coincident Gaussian bumps on the three gravity axes.
    """
    out = []
    for i in range(length):
        g = math.exp(-((i - center) / width) ** 2)
        out.append(MotionSample(
            timestamp=(start_index + i) / RATE_HZ,
            rotation_y=baseline[0] + rot_amp * g,
            gravity_x=baseline[1] + grav_amps[0] * g,
            gravity_y=baseline[2] + grav_amps[1] * g,
            gravity_z=baseline[3] + grav_amps[2] * g,
        ))
    return out


def flat(start_index, length, baseline=(0.0, 0.0, 0.0, 0.0)):
    """Arm at rest: constant readings."""
    return [
        MotionSample((start_index + i) / RATE_HZ, *baseline)
        for i in range(length)
    ]


@pytest.fixture
def cycle():
    return raise_cycle


@pytest.fixture
def rest():
    return flat
