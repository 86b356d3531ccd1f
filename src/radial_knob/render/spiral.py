"""Multi-turn ribbon paths whose radius changes along the sweep."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Optional

import numpy as np

from .path import PathBuilder


@dataclass(frozen=True)
class SpiralSamples:
    """Sampled boundary of a spiral ribbon, ordered by increasing angle."""

    outer: np.ndarray  # (nb + 1, 2) points
    inner: np.ndarray  # (nb + 1, 2) points
    outer_radii: np.ndarray
    inner_radii: np.ndarray
    segment_span: float  # degrees between consecutive samples


def segment_count(percentage_span: float) -> int:
    """Four segments per started turn, never fewer than one."""
    return max(1, int(math.ceil(percentage_span)) * 4)


def sample_spiral(
    percentage_from: float,
    radius_from: float,
    percentage_to: float,
    radius_to: float,
    angle_offset: float,
    angle_range: float,
    arc_width: float,
    center: float,
) -> SpiralSamples:
    """Sample a spiral ribbon between two (percentage, radius) endpoints.

    Endpoints are reordered so the sweep always runs towards the larger
    percentage. The span is not clamped: a spiral may wind several turns.
    """
    if percentage_from <= percentage_to:
        p_min, r_min, p_max, r_max = (
            percentage_from,
            radius_from,
            percentage_to,
            radius_to,
        )
    else:
        p_min, r_min, p_max, r_max = (
            percentage_to,
            radius_to,
            percentage_from,
            radius_from,
        )

    span = p_max - p_min
    nb = segment_count(span)
    t = np.linspace(0.0, 1.0, nb + 1)

    outer_radii = r_min + (r_max - r_min) * t
    inner_radii = outer_radii - arc_width
    angles = np.radians(angle_offset - 90 + angle_range * (p_min + span * t))
    cos_a = np.cos(angles)
    sin_a = np.sin(angles)

    outer = np.column_stack(
        (center + outer_radii * cos_a, center + outer_radii * sin_a)
    )
    inner = np.column_stack(
        (center + inner_radii * cos_a, center + inner_radii * sin_a)
    )
    return SpiralSamples(
        outer=outer,
        inner=inner,
        outer_radii=outer_radii,
        inner_radii=inner_radii,
        segment_span=angle_range * span / nb,
    )


def spiral_path(
    percentage_from: Optional[float],
    radius_from: Optional[float],
    percentage_to: Optional[float],
    radius_to: Optional[float],
    angle_offset: float,
    angle_range: float,
    arc_width: float,
    center: float,
) -> str:
    """Return closed path data for a spiral ribbon, or ``""`` when unresolvable."""
    if None in (percentage_from, radius_from, percentage_to, radius_to):
        return ""

    s = sample_spiral(
        percentage_from,  # type: ignore[arg-type]
        radius_from,  # type: ignore[arg-type]
        percentage_to,  # type: ignore[arg-type]
        radius_to,  # type: ignore[arg-type]
        angle_offset,
        angle_range,
        arc_width,
        center,
    )
    large_arc = 1 if s.segment_span >= 180 else 0
    last = len(s.outer) - 1

    path = PathBuilder().move_to(tuple(s.outer[0]))
    for i in range(1, last + 1):
        path.arc_to(float(s.outer_radii[i]), large_arc, 1, tuple(s.outer[i]))
    path.line_to(tuple(s.inner[last]))
    for i in range(last - 1, -1, -1):
        path.arc_to(float(s.inner_radii[i]), large_arc, 0, tuple(s.inner[i]))
    return path.close().build()


__all__ = ["SpiralSamples", "sample_spiral", "segment_count", "spiral_path"]
