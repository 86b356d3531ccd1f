import math

import pytest

from radial_knob.utils.geometry import (
    FULL_TURN_NUDGE,
    clamp,
    clamp_angle_for_arc,
    deg_to_rad,
    normalize_angle,
    point_on_circle,
    rad_to_deg,
)


@pytest.mark.parametrize(
    ("angle_deg", "expected"),
    (
        (0.0, (60.0, 50.0)),
        (90.0, (50.0, 60.0)),
        (180.0, (40.0, 50.0)),
        (-90.0, (50.0, 40.0)),
    ),
)
def test_point_on_circle(angle_deg: float, expected: tuple[float, float]) -> None:
    x, y = point_on_circle(50.0, 10.0, math.radians(angle_deg))
    assert x == pytest.approx(expected[0])
    assert y == pytest.approx(expected[1])


def test_degree_radian_conversion() -> None:
    assert deg_to_rad(180.0) == pytest.approx(math.pi)
    assert rad_to_deg(math.pi / 2) == pytest.approx(90.0)
    assert rad_to_deg(deg_to_rad(123.4)) == pytest.approx(123.4)


@pytest.mark.parametrize(
    ("deg", "expected"),
    (
        (360.0, FULL_TURN_NUDGE),
        (720.0, FULL_TURN_NUDGE),
        (-360.0, -FULL_TURN_NUDGE),
        (-500.0, -FULL_TURN_NUDGE),
        (359.0, 359.0),
        (-12.5, -12.5),
        (0.0, 0.0),
    ),
)
def test_clamp_angle_for_arc(deg: float, expected: float) -> None:
    assert clamp_angle_for_arc(deg) == expected


def test_full_turn_nudge_is_a_thousandth_of_a_degree() -> None:
    assert 360.0 - FULL_TURN_NUDGE == pytest.approx(0.001)


@pytest.mark.parametrize(
    ("deg", "expected"),
    ((0.0, 0.0), (360.0, 0.0), (-90.0, 270.0), (450.0, 90.0), (-1e-20, 0.0)),
)
def test_normalize_angle(deg: float, expected: float) -> None:
    assert normalize_angle(deg) == pytest.approx(expected)
    assert 0.0 <= normalize_angle(deg) < 360.0


def test_clamp() -> None:
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.5, 0.0, 1.0) == 0.5
