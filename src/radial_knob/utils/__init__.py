"""Shared helpers for geometry and Qt rendering."""

from .geometry import (
    clamp,
    clamp_angle_for_arc,
    deg_to_rad,
    normalize_angle,
    point_on_circle,
    rad_to_deg,
)

__all__ = [
    "clamp",
    "clamp_angle_for_arc",
    "deg_to_rad",
    "normalize_angle",
    "point_on_circle",
    "rad_to_deg",
]
