"""Angular rate / RPM conversion and the rounding rule shared by the pipeline."""

import math


def rad_per_sec_to_rpm(omega: float) -> float:
    return omega * 60.0 / (2.0 * math.pi)


def rpm_to_rad_per_sec(rpm: float) -> float:
    return rpm * 2.0 * math.pi / 60.0


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (3500.5 -> 3501, -0.5 -> -1).

    Python's built-in round() and np.round use ties-to-even, which would put
    3500.5 in Idle instead of Climb.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
