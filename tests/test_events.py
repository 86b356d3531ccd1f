from typing import List

import pytest

from radial_knob.interaction import KnobController, KnobInputHandler
from radial_knob.interaction.events import (
    InteractiveHookEvent,
    InteractiveHookResult,
    Modifiers,
    mouse_position,
    wheel_direction,
)
from radial_knob.models import KnobConfig

CENTER = (50.0, 50.0)


@pytest.mark.parametrize(
    ("x", "y", "angle"),
    (
        (50.0, 0.0, 0.0),  # top
        (100.0, 50.0, 90.0),  # right
        (50.0, 100.0, 180.0),  # bottom
        (0.0, 50.0, 270.0),  # left
    ),
)
def test_mouse_position_angle(x: float, y: float, angle: float) -> None:
    position = mouse_position(CENTER[0], CENTER[1], x, y)
    assert position.mouse_angle == pytest.approx(angle)
    assert position.mouse_radius == pytest.approx(50.0)


def test_mouse_position_offsets() -> None:
    position = mouse_position(10.0, 20.0, 13.0, 24.0)
    assert (position.mouse_x, position.mouse_y) == (3.0, 4.0)
    assert position.mouse_radius == pytest.approx(5.0)


@pytest.mark.parametrize(
    ("dx", "dy", "expected"),
    (
        (0, 10, 1),
        (-3, 0, 1),
        (0, -10, -1),
        (4, 0, -1),
        (0, 0, 0),
    ),
)
def test_wheel_direction(dx: float, dy: float, expected: int) -> None:
    assert wheel_direction(dx, dy) == expected


def _handler(**config) -> KnobInputHandler:
    return KnobInputHandler(KnobController(KnobConfig(**config)))


def test_pointer_drag_sequence() -> None:
    handler = _handler()
    assert handler.pointer_down(CENTER, 100.0, 50.0)
    assert handler.controller.value == pytest.approx(25.0)
    assert handler.pointer_move(CENTER, 50.0, 100.0)
    assert handler.controller.value == pytest.approx(50.0)
    handler.pointer_up()
    assert not handler.controller.is_active


def test_pointer_cancel_restores_value() -> None:
    handler = _handler()
    handler.pointer_down(CENTER, 100.0, 50.0)
    handler.pointer_move(CENTER, 50.0, 100.0)
    handler.pointer_cancel()
    assert handler.controller.value == pytest.approx(25.0)


def test_pointer_move_while_idle() -> None:
    handler = _handler(initial_value=10)
    assert not handler.pointer_move(CENTER, 50.0, 100.0)
    assert handler.controller.value == 10


def test_read_only_blocks_everything() -> None:
    handler = _handler(initial_value=10, read_only=True)
    assert not handler.pointer_down(CENTER, 100.0, 50.0)
    assert not handler.key_press("up")
    assert not handler.wheel(0, 1)
    assert handler.controller.value == 10
    assert not handler.controller.is_active


def test_hook_can_make_a_sample_read_only() -> None:
    seen: List[InteractiveHookEvent] = []

    def hook(event: InteractiveHookEvent) -> InteractiveHookResult:
        seen.append(event)
        return InteractiveHookResult(read_only=not event.modifiers.shift)

    handler = KnobInputHandler(KnobController(KnobConfig()), hook)
    assert not handler.pointer_down(CENTER, 100.0, 50.0)
    assert handler.pointer_down(CENTER, 100.0, 50.0, Modifiers(shift=True))
    assert handler.controller.is_active
    assert seen[-1].position.mouse_angle == pytest.approx(90.0)
    assert not handler.pointer_move(CENTER, 50.0, 100.0)
    assert handler.controller.value == pytest.approx(25.0)


def test_hook_steps_override_config() -> None:
    handler = KnobInputHandler(
        KnobController(KnobConfig()),
        lambda event: InteractiveHookResult(steps=3),
    )
    # 100 degrees snaps to the middle of three positions
    x, y = 50.0 + 50.0 * 0.984807753, 50.0 + 50.0 * 0.173648178
    handler.pointer_down(CENTER, x, y)
    assert handler.controller.value == pytest.approx(50.0)


def test_keys_step_the_value() -> None:
    handler = _handler(initial_value=40)
    assert handler.key_press("up")
    assert handler.key_press("Right")
    assert handler.controller.value == 42
    assert handler.key_press("down")
    assert handler.key_press("left")
    assert handler.controller.value == 40


def test_unknown_key_is_not_consumed() -> None:
    handler = _handler(initial_value=40)
    assert not handler.key_press("space")
    assert handler.controller.value == 40


def test_escape_cancels_drag() -> None:
    handler = _handler()
    assert not handler.key_press("escape")
    handler.pointer_down(CENTER, 100.0, 50.0)
    handler.pointer_move(CENTER, 50.0, 100.0)
    assert handler.key_press("escape")
    assert not handler.controller.is_active
    assert handler.controller.value == pytest.approx(25.0)


def test_context_menu_only_while_active() -> None:
    handler = _handler()
    assert not handler.context_menu()
    handler.pointer_down(CENTER, 100.0, 50.0)
    assert handler.context_menu()
    assert not handler.controller.is_active


def test_wheel_steps_the_value() -> None:
    handler = _handler(initial_value=40)
    assert handler.wheel(0, 1)
    assert handler.controller.value == 41
    assert handler.wheel(0, -1)
    assert handler.wheel(0, -1)
    assert handler.controller.value == 39
    assert not handler.wheel(0, 0)


def test_wheel_can_be_disabled() -> None:
    handler = _handler(initial_value=40, use_mouse_wheel=False)
    assert not handler.wheel(0, 1)
    assert handler.controller.value == 40
