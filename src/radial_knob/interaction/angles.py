"""Resolution of raw pointer angles into knob positions.

Angles are in degrees, 0 at the top of the knob and increasing clockwise.
A position's percentage is the fraction of ``angle_range`` travelled from
``angle_offset``.

Single-rotation knobs are memoryless: each sample maps the absolute
pointer angle to a percentage clamped to ``[0, 1]``. Multi-rotation knobs
integrate the angular delta between consecutive samples, so the
percentage keeps growing (or shrinking) past a full turn.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..models import Position
from ..utils.geometry import clamp, normalize_angle
from .values import snap_percentage

logger = logging.getLogger(__name__)

# Consecutive samples further apart than this are ambiguous in direction
# and are dropped rather than read as a near half-turn.
MAX_ANGLE_DELTA = 120.0


def calculate_percentage_from_mouse_angle(
    mouse_angle: float, angle_offset: float, angle_range: float
) -> float:
    """Return the percentage under an absolute pointer angle, clamped to [0, 1].

    The angle is measured relative to the middle of the configured range, so
    the dead zone of a partial range is split evenly between both ends.
    """
    rangle = ((mouse_angle - (angle_offset + angle_range * 0.5) + 900) % 360) - 180
    percentage = clamp(0.5 + rangle / angle_range, 0.0, 1.0)
    logger.debug(
        "percentage from angle=%s offset=%s range=%s -> %s",
        mouse_angle,
        angle_offset,
        angle_range,
        percentage,
    )
    return percentage


def normalize_angle_delta(delta: float) -> float:
    """Map an angular difference into ``(-180, 180]``."""
    delta = delta % 360.0
    return delta - 360.0 if delta > 180.0 else delta


def calculate_position_from_mouse_angle(
    mouse_angle: float,
    *,
    angle_offset: float,
    angle_range: float,
    multi_rotation: bool = False,
    previous_percentage: Optional[float] = None,
    previous_mouse_angle: Optional[float] = None,
) -> Position:
    """Resolve a pointer sample into a new :class:`Position`.

    Args:
        mouse_angle: Pointer angle in ``[0, 360)``.
        angle_offset: Angle of the 0% position.
        angle_range: Angular span mapped onto ``[0, 1]``.
        multi_rotation: Integrate deltas instead of reading absolute angles.
        previous_percentage: Percentage before this sample.
        previous_mouse_angle: Pointer angle of the previous sample of the
            same drag, or ``None`` on first contact.

    Returns:
        The resolved position. ``updated`` is False when a multi-rotation
        sample jumped too far from the previous one; the previous angle and
        percentage are returned unchanged in that case.
    """
    if previous_mouse_angle is None or previous_percentage is None:
        absolute = calculate_percentage_from_mouse_angle(
            mouse_angle, angle_offset, angle_range
        )
        if not multi_rotation or previous_percentage is None:
            return Position(True, mouse_angle, absolute)

        # keep the accumulated winding, move to the nearest matching turn
        delta = (absolute + 1 - (previous_percentage % 1)) % 1
        if delta > 0.5:
            delta -= 1
        logger.debug(
            "multi-rotation first contact absolute=%s delta=%s", absolute, delta
        )
        return Position(True, mouse_angle, previous_percentage + delta)

    if not multi_rotation:
        return Position(
            True,
            mouse_angle,
            calculate_percentage_from_mouse_angle(
                mouse_angle, angle_offset, angle_range
            ),
        )

    delta = normalize_angle_delta(mouse_angle - previous_mouse_angle)
    if abs(delta) >= MAX_ANGLE_DELTA:
        logger.debug(
            "rejected sample angle=%s previous=%s delta=%s",
            mouse_angle,
            previous_mouse_angle,
            delta,
        )
        return Position(False, previous_mouse_angle, previous_percentage)

    percentage = previous_percentage + delta / angle_range
    logger.debug(
        "multi-rotation angle=%s delta=%s -> percentage=%s",
        mouse_angle,
        delta,
        percentage,
    )
    return Position(True, mouse_angle, percentage)


def snap_position(
    position: Position,
    angle_offset: float,
    angle_range: float,
    steps: Optional[int],
) -> Position:
    """Snap ``position`` to ``steps`` positions and move its angle to match.

    Rejected positions and knobs without steps pass through untouched.
    """
    if not steps or not position.updated:
        return position

    percentage = snap_percentage(position.percentage, steps)
    mouse_angle = normalize_angle(angle_offset + angle_range * percentage)
    return Position(True, mouse_angle, percentage)


__all__ = [
    "MAX_ANGLE_DELTA",
    "calculate_percentage_from_mouse_angle",
    "calculate_position_from_mouse_angle",
    "normalize_angle_delta",
    "snap_position",
]
