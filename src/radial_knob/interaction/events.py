"""Translation of raw pointer, key and wheel input into controller calls.

Toolkit front ends report pointer coordinates in their own space; this
module turns them into the normalized angle the controller expects and
applies the read-only, wheel and interactive-hook policies.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable, Dict, Optional, Tuple

from ..utils.geometry import normalize_angle, rad_to_deg
from .controller import KnobController

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[str, int] = {
    "left": -1,
    "down": -1,
    "right": 1,
    "up": 1,
}


@dataclass(frozen=True)
class MousePosition:
    """Pointer location relative to the knob center, cartesian and polar."""

    mouse_x: float
    mouse_y: float
    mouse_radius: float
    mouse_angle: float


@dataclass(frozen=True)
class Modifiers:
    ctrl: bool = False
    alt: bool = False
    meta: bool = False
    shift: bool = False


@dataclass(frozen=True)
class InteractiveHookEvent:
    """What an interactive hook sees for each pointer sample."""

    modifiers: Modifiers
    position: MousePosition


@dataclass(frozen=True)
class InteractiveHookResult:
    read_only: bool = False
    steps: Optional[int] = None  # overrides the configured steps for the sample


InteractiveHook = Callable[[InteractiveHookEvent], InteractiveHookResult]


def mouse_position(
    center_x: float, center_y: float, client_x: float, client_y: float
) -> MousePosition:
    """Convert client coordinates into a position around ``(center_x, center_y)``.

    The angle is rotated so that 0 points up and grows clockwise on a
    y-down screen.
    """
    dx = client_x - center_x
    dy = client_y - center_y
    angle = normalize_angle(rad_to_deg(math.atan2(dy, dx)) + 90.0)
    return MousePosition(dx, dy, math.hypot(dx, dy), angle)


def wheel_direction(delta_x: float, delta_y: float) -> int:
    """Return +1, -1 or 0 for a wheel event's deltas."""
    if delta_x < 0 or delta_y > 0:
        return 1
    if delta_x > 0 or delta_y < 0:
        return -1
    return 0


class KnobInputHandler:
    """Applies input policies on top of a :class:`KnobController`.

    A front end calls :meth:`pointer_down`, :meth:`pointer_move` and
    :meth:`pointer_up` with coordinates in its own space, together with the
    knob center in that same space.
    """

    def __init__(
        self,
        controller: KnobController,
        interactive_hook: Optional[InteractiveHook] = None,
    ) -> None:
        self.controller = controller
        self.interactive_hook = interactive_hook

    @property
    def read_only(self) -> bool:
        return self.controller.config.read_only

    def _hook_result(
        self, position: MousePosition, modifiers: Optional[Modifiers]
    ) -> InteractiveHookResult:
        if self.interactive_hook is None:
            return InteractiveHookResult()
        result = self.interactive_hook(
            InteractiveHookEvent(modifiers or Modifiers(), position)
        )
        logger.debug("interactive hook result %s", result)
        return result

    def pointer_down(
        self,
        center: Tuple[float, float],
        x: float,
        y: float,
        modifiers: Optional[Modifiers] = None,
    ) -> bool:
        """Start a drag. Returns True when the controller accepted it."""
        if self.read_only:
            logger.debug("pointer down ignored, knob is read-only")
            return False
        position = mouse_position(center[0], center[1], x, y)
        result = self._hook_result(position, modifiers)
        if result.read_only:
            logger.debug("pointer down ignored, hook returned read-only")
            return False
        self.controller.start(position.mouse_angle, steps=result.steps)
        return True

    def pointer_move(
        self,
        center: Tuple[float, float],
        x: float,
        y: float,
        modifiers: Optional[Modifiers] = None,
    ) -> bool:
        if self.read_only or not self.controller.is_active:
            return False
        position = mouse_position(center[0], center[1], x, y)
        result = self._hook_result(position, modifiers)
        if result.read_only:
            logger.debug("pointer move ignored, hook returned read-only")
            return False
        self.controller.move(position.mouse_angle, steps=result.steps)
        return True

    def pointer_up(self) -> None:
        self.controller.end()

    def pointer_cancel(self) -> None:
        self.controller.cancel()

    def context_menu(self) -> bool:
        """Cancel a drag interrupted by a context menu request."""
        if not self.controller.is_active:
            return False
        self.controller.cancel()
        return True

    def key_press(self, key: str) -> bool:
        """Handle a key name (``left``, ``up``, ``escape`` ...).

        Returns True when the key was consumed.
        """
        key = key.lower()
        if key == "escape":
            return self.context_menu()
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        if self.read_only:
            logger.debug("key %s ignored, knob is read-only", key)
            return False
        self.controller.step(direction)
        return True

    def wheel(self, delta_x: float, delta_y: float) -> bool:
        if not self.controller.config.use_mouse_wheel or self.read_only:
            return False
        direction = wheel_direction(delta_x, delta_y)
        if not direction:
            return False
        self.controller.step(direction)
        return True


__all__ = [
    "KEY_DIRECTIONS",
    "InteractiveHook",
    "InteractiveHookEvent",
    "InteractiveHookResult",
    "KnobInputHandler",
    "Modifiers",
    "MousePosition",
    "mouse_position",
    "wheel_direction",
]
