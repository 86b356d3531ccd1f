"""Renderable knob layers.

Each layer reads a :class:`~radial_knob.models.KnobSnapshot` and returns an
SVG fragment. Layers never touch controller state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Protocol
from xml.sax.saxutils import escape, quoteattr

from ..interaction.values import get_percentage_from_value
from ..models import KnobSnapshot
from ..utils.geometry import deg_to_rad, point_on_circle
from .arc import arc_path, resolve_arc_range
from .path import PathBuilder, format_number
from .spiral import spiral_path


class Layer(Protocol):
    """Anything that turns a snapshot into an SVG fragment."""

    def render(self, snapshot: KnobSnapshot) -> str:
        """Return the fragment, or an empty string to draw nothing."""


class Shape(Enum):
    RECT = "rect"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    CUSTOM = "custom"


@dataclass(frozen=True)
class MarkGeometry:
    """Frame of a pointer or tick, before rotation to its angle.

    The mark sits straight above the center, its outer edge ``radius`` away.
    """

    center: float
    radius: float
    width: float
    height: float
    angle: float  # degrees, 0 = top
    percentage: float
    active: bool = False


ShapePath = Callable[[MarkGeometry], str]


def _fill(color: Optional[str]) -> str:
    return f" fill={quoteattr(color)}" if color else ""


def render_mark(
    shape: Shape,
    geometry: MarkGeometry,
    color: Optional[str],
    path_fn: Optional[ShapePath] = None,
) -> str:
    """Render one pointer/tick shape rotated to ``geometry.angle``."""
    c = geometry.center
    fmt = format_number
    transform = f' transform="rotate({fmt(geometry.angle)} {fmt(c)} {fmt(c)})"'
    top = c - geometry.radius

    if shape is Shape.RECT:
        return (
            f'<rect x="{fmt(c - geometry.width / 2)}" y="{fmt(top)}" '
            f'width="{fmt(geometry.width)}" height="{fmt(geometry.height)}"'
            f"{_fill(color)}{transform}/>"
        )
    if shape is Shape.CIRCLE:
        r = geometry.width / 2
        return (
            f'<circle cx="{fmt(c)}" cy="{fmt(top + r)}" r="{fmt(r)}"'
            f"{_fill(color)}{transform}/>"
        )
    if shape is Shape.TRIANGLE:
        d = (
            PathBuilder()
            .move_to((c - geometry.width / 2, top))
            .line_to((c + geometry.width / 2, top))
            .line_to((c, top + geometry.height))
            .close()
            .build()
        )
        return f'<path d="{d}"{_fill(color)}{transform}/>'
    if shape is Shape.CUSTOM:
        if path_fn is None:
            raise ValueError("Shape.CUSTOM requires a path function")
        d = path_fn(geometry)
        if not d:
            return ""
        return f"<path d={quoteattr(d)}{_fill(color)}{transform}/>"
    raise ValueError(f"unknown shape {shape!r}")


def _angle_at(snapshot: KnobSnapshot, percentage: float) -> float:
    return snapshot.config.angle_offset + snapshot.config.angle_range * percentage


@dataclass(frozen=True)
class Arc:
    """Filled sector between two percentages.

    Missing bounds follow :func:`~radial_knob.render.arc.resolve_arc_range`.
    """

    arc_width: float
    radius: Optional[float] = None  # outer radius, defaults to the knob edge
    percentage_from: Optional[float] = None
    percentage_to: Optional[float] = None
    color: Optional[str] = None

    def path(self, snapshot: KnobSnapshot) -> str:
        p_from, p_to = resolve_arc_range(
            snapshot.percentage, self.percentage_from, self.percentage_to
        )
        config = snapshot.config
        return arc_path(
            p_from,
            p_to,
            config.angle_offset,
            config.angle_range,
            self.arc_width,
            snapshot.center if self.radius is None else self.radius,
            snapshot.center,
        )

    def render(self, snapshot: KnobSnapshot) -> str:
        d = self.path(snapshot)
        return f'<path d="{d}"{_fill(self.color)}/>' if d else ""


@dataclass(frozen=True)
class Range:
    """Sector between two values rather than percentages."""

    value_from: float
    value_to: float
    arc_width: float
    radius: Optional[float] = None
    color: Optional[str] = None

    def render(self, snapshot: KnobSnapshot) -> str:
        config = snapshot.config
        return Arc(
            arc_width=self.arc_width,
            radius=self.radius,
            percentage_from=get_percentage_from_value(
                config.min, config.max, self.value_from
            ),
            percentage_to=get_percentage_from_value(
                config.min, config.max, self.value_to
            ),
            color=self.color,
        ).render(snapshot)


@dataclass(frozen=True)
class Spiral:
    """Ribbon winding between two (percentage, radius) endpoints.

    A missing percentage is the current one; a missing radius renders
    nothing.
    """

    arc_width: float
    radius_from: Optional[float] = None
    radius_to: Optional[float] = None
    percentage_from: Optional[float] = None
    percentage_to: Optional[float] = None
    color: Optional[str] = None

    def path(self, snapshot: KnobSnapshot) -> str:
        p_from = (
            snapshot.percentage
            if self.percentage_from is None
            else self.percentage_from
        )
        p_to = snapshot.percentage if self.percentage_to is None else self.percentage_to
        config = snapshot.config
        return spiral_path(
            p_from,
            self.radius_from,
            p_to,
            self.radius_to,
            config.angle_offset,
            config.angle_range,
            self.arc_width,
            snapshot.center,
        )

    def render(self, snapshot: KnobSnapshot) -> str:
        d = self.path(snapshot)
        return f'<path d="{d}"{_fill(self.color)}/>' if d else ""


@dataclass(frozen=True)
class Pointer:
    """Mark showing the current (or a fixed) percentage."""

    width: float
    height: float
    radius: Optional[float] = None
    shape: Shape = Shape.RECT
    percentage: Optional[float] = None
    color: Optional[str] = None
    path_fn: Optional[ShapePath] = None

    def render(self, snapshot: KnobSnapshot) -> str:
        percentage = snapshot.percentage if self.percentage is None else self.percentage
        if percentage is None:
            return ""
        geometry = MarkGeometry(
            center=snapshot.center,
            radius=snapshot.center if self.radius is None else self.radius,
            width=self.width,
            height=self.height,
            angle=_angle_at(snapshot, percentage),
            percentage=percentage,
            active=True,
        )
        return render_mark(self.shape, geometry, self.color, self.path_fn)


@dataclass(frozen=True)
class Scale:
    """Evenly spaced ticks over the angle range.

    Ticks at or below the current percentage are drawn with
    ``active_color``. A full-circle range leaves out the closing tick,
    which would overlap the first one.
    """

    tick_count: int
    tick_width: float
    tick_height: float
    radius: Optional[float] = None
    shape: Shape = Shape.RECT
    color: Optional[str] = None
    active_color: Optional[str] = None
    path_fn: Optional[ShapePath] = None

    def tick_percentages(self, angle_range: float) -> List[float]:
        if self.tick_count <= 0:
            return []
        if self.tick_count == 1:
            return [0.0]
        divisions = self.tick_count if angle_range >= 360 else self.tick_count - 1
        return [i / divisions for i in range(self.tick_count)]

    @staticmethod
    def tick_count_for_steps(steps: int, angle_range: float) -> int:
        """Number of ticks that lands one tick on every snap position."""
        # on a full circle the last step coincides with the first
        return steps - 1 if angle_range >= 360 else steps

    def render(self, snapshot: KnobSnapshot) -> str:
        current = snapshot.percentage
        marks = []
        for percentage in self.tick_percentages(snapshot.config.angle_range):
            active = current is not None and percentage <= current + 1e-9
            geometry = MarkGeometry(
                center=snapshot.center,
                radius=snapshot.center if self.radius is None else self.radius,
                width=self.tick_width,
                height=self.tick_height,
                angle=_angle_at(snapshot, percentage),
                percentage=percentage,
                active=active,
            )
            color = self.active_color if active and self.active_color else self.color
            marks.append(render_mark(self.shape, geometry, color, self.path_fn))
        return "".join(marks)


@dataclass(frozen=True)
class Value:
    """Current value as centered text."""

    decimal_places: int = 0
    font_size: float = 16
    color: Optional[str] = None
    suffix: str = ""

    def text(self, snapshot: KnobSnapshot) -> str:
        if snapshot.value is None:
            return ""
        return f"{snapshot.value:.{self.decimal_places}f}{self.suffix}"

    def render(self, snapshot: KnobSnapshot) -> str:
        text = self.text(snapshot)
        if not text:
            return ""
        c = format_number(snapshot.center)
        return (
            f'<text x="{c}" y="{c}" font-size="{format_number(self.font_size)}" '
            f'text-anchor="middle" dominant-baseline="central"{_fill(self.color)}>'
            f"{escape(text)}</text>"
        )


@dataclass(frozen=True)
class Label:
    """Static text placed at a percentage around the knob."""

    label: str
    percentage: float
    radius: float
    font_size: float = 12
    color: Optional[str] = None

    def render(self, snapshot: KnobSnapshot) -> str:
        angle = _angle_at(snapshot, self.percentage) - 90
        x, y = point_on_circle(snapshot.center, self.radius, deg_to_rad(angle))
        return (
            f'<text x="{format_number(x)}" y="{format_number(y)}" '
            f'font-size="{format_number(self.font_size)}" text-anchor="middle" '
            f'dominant-baseline="central"{_fill(self.color)}>'
            f"{escape(self.label)}</text>"
        )


__all__ = [
    "Arc",
    "Label",
    "Layer",
    "MarkGeometry",
    "Pointer",
    "Range",
    "Scale",
    "Shape",
    "ShapePath",
    "Spiral",
    "Value",
    "render_mark",
]
