"""Geometry helpers shared by the path generators and the input layer."""

import math
from typing import Tuple

# Arc commands are undefined when start and end coincide; a full turn is
# nudged just short of 360 degrees instead.
FULL_TURN_NUDGE = 359.999


def point_on_circle(
    center: float, radius: float, angle_rad: float
) -> Tuple[float, float]:
    """Return the point at ``angle_rad`` on the circle around ``(center, center)``."""
    return center + radius * math.cos(angle_rad), center + radius * math.sin(angle_rad)


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def clamp_angle_for_arc(deg: float) -> float:
    """Keep an arc span strictly inside one turn."""
    if deg >= 360:
        return FULL_TURN_NUDGE
    if deg <= -360:
        return -FULL_TURN_NUDGE
    return deg


def normalize_angle(deg: float) -> float:
    """Map ``deg`` into ``[0, 360)``."""
    angle = deg % 360.0
    # tiny negative inputs round up to exactly 360.0
    return 0.0 if angle >= 360.0 else angle


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


__all__ = [
    "FULL_TURN_NUDGE",
    "point_on_circle",
    "deg_to_rad",
    "rad_to_deg",
    "clamp_angle_for_arc",
    "normalize_angle",
    "clamp",
]
