"""Interaction state machine for a single knob.

The controller is the only writer of :class:`~radial_knob.models.KnobState`.
It moves between two states::

    Idle --start--> Active --move*--> (end | cancel) --> Idle

and accepts discrete ``step`` nudges while idle. Every transition runs to
completion synchronously and fires its callbacks before returning.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..models import KnobConfig, KnobSnapshot, KnobState, Position
from ..utils.geometry import clamp
from .angles import calculate_position_from_mouse_angle, snap_position
from .values import get_percentage_from_value, get_value_from_percentage

logger = logging.getLogger(__name__)

ValueCallback = Callable[[float], None]
EventCallback = Callable[[], None]


class KnobController:
    """Owns the state of one knob and applies input events to it."""

    def __init__(
        self,
        config: KnobConfig,
        *,
        on_change: Optional[ValueCallback] = None,
        on_interactive_change: Optional[ValueCallback] = None,
        on_start: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
    ) -> None:
        self.config = config
        self.on_change = on_change
        self.on_interactive_change = on_interactive_change
        self.on_start = on_start
        self.on_end = on_end

        initial = config.min if config.initial_value is None else config.initial_value
        self._state = KnobState(
            value=initial,
            percentage=get_percentage_from_value(config.min, config.max, initial),
        )
        logger.info("created knob controller config=%s value=%s", config, initial)

    # ----------------------------- Accessors ----------------------------------

    @property
    def value(self) -> Optional[float]:
        return self._state.value

    @property
    def percentage(self) -> Optional[float]:
        return self._state.percentage

    @property
    def mouse_angle(self) -> Optional[float]:
        return self._state.mouse_angle

    @property
    def is_active(self) -> bool:
        return self._state.is_active

    @property
    def start_value(self) -> Optional[float]:
        return self._state.start_value

    @property
    def start_percentage(self) -> Optional[float]:
        return self._state.start_percentage

    def snapshot(self) -> KnobSnapshot:
        """Return a read-only copy of the current state for renderers."""
        return KnobSnapshot(
            config=self.config,
            value=self._state.value,
            percentage=self._state.percentage,
            mouse_angle=self._state.mouse_angle,
            is_active=self._state.is_active,
        )

    # ---------------------------- Transitions ---------------------------------

    def start(self, mouse_angle: float, steps: Optional[int] = None) -> None:
        """Begin a drag at ``mouse_angle``.

        ``steps`` overrides the configured snapping for this sample. A second
        press during a drag keeps the position the drag started from.
        """
        restarted = self._state.is_active
        if restarted:
            logger.debug("start while active, restarting drag at %s", mouse_angle)

        position = calculate_position_from_mouse_angle(
            mouse_angle,
            angle_offset=self.config.angle_offset,
            angle_range=self.config.angle_range,
            multi_rotation=self.config.multi_rotation,
            previous_percentage=self._state.percentage,
            previous_mouse_angle=None,
        )
        value = self._apply(position, steps)

        state = self._state
        state.is_active = True
        if not restarted:
            state.start_value = state.value
            state.start_percentage = state.percentage
        logger.debug("start angle=%s value=%s", mouse_angle, value)

        if self.on_start is not None:
            self.on_start()
        self._notify(value, commit=self.config.tracking)

    def move(self, mouse_angle: float, steps: Optional[int] = None) -> None:
        """Continue the active drag; ignored while idle."""
        state = self._state
        if not state.is_active:
            logger.debug("move ignored, knob is not active")
            return

        position = calculate_position_from_mouse_angle(
            mouse_angle,
            angle_offset=self.config.angle_offset,
            angle_range=self.config.angle_range,
            multi_rotation=self.config.multi_rotation,
            previous_percentage=state.percentage,
            previous_mouse_angle=state.mouse_angle,
        )
        if not position.updated:
            return

        value = self._apply(position, steps)
        logger.debug("move angle=%s value=%s", mouse_angle, value)
        self._notify(value, commit=self.config.tracking)

    def end(self) -> None:
        """Finish the active drag, committing the value when not tracking."""
        state = self._state
        if not state.is_active:
            logger.debug("end ignored, knob is not active")
            return

        logger.debug("end value=%s tracking=%s", state.value, self.config.tracking)
        if not self.config.tracking and state.value is not None:
            if self.on_change is not None:
                self.on_change(state.value)
        self._finish()

    def cancel(self) -> None:
        """Abort the active drag and restore the value it started from."""
        state = self._state
        if not state.is_active:
            logger.debug("cancel ignored, knob is not active")
            return

        logger.debug("cancel reverting to value=%s", state.start_value)
        if state.start_value is not None:
            state.value = state.start_value
            state.percentage = state.start_percentage
            if self.config.tracking and self.on_change is not None:
                self.on_change(state.start_value)
        self._finish()

    def step(self, direction: int) -> None:
        """Nudge the value by one unit; always commits immediately."""
        if direction not in (-1, 1):
            raise ValueError(f"step direction must be -1 or +1, got {direction!r}")

        state = self._state
        if state.is_active:
            logger.debug("step ignored during a drag")
            return
        if state.value is None:
            logger.debug("step ignored, knob has no value")
            return

        value = clamp(state.value + direction, self.config.min, self.config.max)
        state.value = value
        state.percentage = get_percentage_from_value(
            self.config.min, self.config.max, value
        )
        logger.debug("step direction=%s value=%s", direction, value)
        self._notify(value, commit=True)

    def set_value(self, value: float) -> None:
        """Overwrite the value from outside (controlled mode).

        Ignored during a drag. No callbacks fire.
        """
        if self._state.is_active:
            logger.debug("external value %s ignored during a drag", value)
            return
        if not self.config.multi_rotation:
            value = clamp(value, self.config.min, self.config.max)
        self._state.value = value
        self._state.percentage = get_percentage_from_value(
            self.config.min, self.config.max, value
        )

    # ----------------------------- Internals ----------------------------------

    def _apply(self, position: Position, steps: Optional[int]) -> float:
        snapped = snap_position(
            position,
            self.config.angle_offset,
            self.config.angle_range,
            self.config.steps if steps is None else steps,
        )
        value = get_value_from_percentage(
            self.config.min, self.config.max, snapped.percentage
        )
        state = self._state
        state.mouse_angle = snapped.mouse_angle
        state.percentage = snapped.percentage
        state.value = value
        return value

    def _notify(self, value: float, commit: bool) -> None:
        if self.on_interactive_change is not None:
            self.on_interactive_change(value)
        if commit and self.on_change is not None:
            self.on_change(value)

    def _finish(self) -> None:
        state = self._state
        state.is_active = False
        state.start_value = None
        state.start_percentage = None
        if self.on_end is not None:
            self.on_end()


__all__ = ["KnobController", "ValueCallback", "EventCallback"]
