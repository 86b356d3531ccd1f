"""Ring-sector (annulus wedge) paths between two percentages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..utils.geometry import clamp_angle_for_arc, deg_to_rad, point_on_circle
from .path import PathBuilder, Point


@dataclass(frozen=True)
class ArcGeometry:
    """Boundary points and flags of one ring sector."""

    outer_start: Point
    outer_end: Point
    inner_end: Point
    inner_start: Point
    outer_radius: float
    inner_radius: float
    large_arc: int
    sweep: int


def resolve_arc_range(
    percentage: Optional[float],
    percentage_from: Optional[float] = None,
    percentage_to: Optional[float] = None,
) -> Tuple[Optional[float], Optional[float]]:
    """Fill in a partially specified ``(from, to)`` pair.

    A missing bound defaults to the current ``percentage``; with neither
    bound given the sector runs from 0 to the current percentage.
    """
    if percentage_from is not None and percentage_to is not None:
        return percentage_from, percentage_to
    if percentage_from is not None:
        return percentage_from, percentage
    if percentage_to is not None:
        return percentage, percentage_to
    return 0.0, percentage


def arc_geometry(
    percentage_from: float,
    percentage_to: float,
    angle_offset: float,
    angle_range: float,
    arc_width: float,
    outer_radius: float,
    center: float,
) -> ArcGeometry:
    """Compute the sector spanning ``percentage_from`` to ``percentage_to``.

    At most one turn is drawn: spans of a full turn or more are clamped just
    short of 360 degrees.
    """
    span = clamp_angle_for_arc(angle_range * (percentage_to - percentage_from))
    # 0 degrees is the top of the knob, the trigonometric 0 is to the right
    angle_from = angle_offset - 90 + angle_range * percentage_from
    angle_to = angle_from + span

    start_rad = deg_to_rad(angle_from)
    end_rad = deg_to_rad(angle_to)
    inner_radius = outer_radius - arc_width

    return ArcGeometry(
        outer_start=point_on_circle(center, outer_radius, start_rad),
        outer_end=point_on_circle(center, outer_radius, end_rad),
        inner_end=point_on_circle(center, inner_radius, end_rad),
        inner_start=point_on_circle(center, inner_radius, start_rad),
        outer_radius=outer_radius,
        inner_radius=inner_radius,
        large_arc=1 if abs(span) >= 180 else 0,
        sweep=1 if span >= 0 else 0,
    )


def arc_path(
    percentage_from: Optional[float],
    percentage_to: Optional[float],
    angle_offset: float,
    angle_range: float,
    arc_width: float,
    outer_radius: Optional[float],
    center: float,
) -> str:
    """Return closed path data for a ring sector, or ``""`` when unresolvable."""
    if percentage_from is None or percentage_to is None or outer_radius is None:
        return ""

    g = arc_geometry(
        percentage_from,
        percentage_to,
        angle_offset,
        angle_range,
        arc_width,
        outer_radius,
        center,
    )
    return (
        PathBuilder()
        .move_to(g.outer_start)
        .arc_to(g.outer_radius, g.large_arc, g.sweep, g.outer_end)
        .line_to(g.inner_end)
        .arc_to(g.inner_radius, g.large_arc, 1 - g.sweep, g.inner_start)
        .line_to(g.outer_start)
        .close()
        .build()
    )


__all__ = ["ArcGeometry", "arc_geometry", "arc_path", "resolve_arc_range"]
