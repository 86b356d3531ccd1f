"""Conversions between knob values and percentages, and step snapping."""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


def get_value_from_percentage(
    min_value: float, max_value: float, percentage: float
) -> float:
    """Map a fractional position onto ``[min_value, max_value]``.

    The percentage is not clamped: multi-rotation knobs carry positions
    outside ``[0, 1]`` and their values follow linearly.
    """
    return min_value + (max_value - min_value) * percentage


def get_percentage_from_value(
    min_value: float, max_value: float, value: float
) -> float:
    return (value - min_value) / (max_value - min_value)


def snap_percentage(percentage: float, steps: int) -> float:
    """Snap ``percentage`` to the nearest of ``steps`` evenly spaced positions.

    Both ends are included, so ``steps`` positions span ``steps - 1``
    intervals and 0 and 1 are always reachable exactly. Halves round up.
    """
    nb_intervals = steps - 1
    snapped = math.floor(percentage * nb_intervals + 0.5) / nb_intervals
    logger.debug(
        "snap_percentage percentage=%s steps=%s -> %s", percentage, steps, snapped
    )
    return snapped


__all__ = [
    "get_value_from_percentage",
    "get_percentage_from_value",
    "snap_percentage",
]
