"""Angle resolution, snapping and the interaction state machine."""

from .angles import (
    MAX_ANGLE_DELTA,
    calculate_percentage_from_mouse_angle,
    calculate_position_from_mouse_angle,
    snap_position,
)
from .controller import KnobController
from .events import (
    InteractiveHookEvent,
    InteractiveHookResult,
    KnobInputHandler,
    Modifiers,
    MousePosition,
    mouse_position,
    wheel_direction,
)
from .values import (
    get_percentage_from_value,
    get_value_from_percentage,
    snap_percentage,
)

__all__ = [
    "MAX_ANGLE_DELTA",
    "calculate_percentage_from_mouse_angle",
    "calculate_position_from_mouse_angle",
    "snap_position",
    "KnobController",
    "InteractiveHookEvent",
    "InteractiveHookResult",
    "KnobInputHandler",
    "Modifiers",
    "MousePosition",
    "mouse_position",
    "wheel_direction",
    "get_percentage_from_value",
    "get_value_from_percentage",
    "snap_percentage",
]
