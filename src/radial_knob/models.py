"""Dataclasses describing knob configuration and interaction state."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import json
import math
from typing import Any, Dict, Optional


class KnobConfigError(ValueError):
    """Raised when a :class:`KnobConfig` is constructed with invalid values."""


@dataclass(frozen=True)
class KnobConfig:
    """Immutable per-widget configuration."""

    min: float = 0.0
    max: float = 100.0
    initial_value: Optional[float] = None
    angle_offset: float = 0.0  # degrees, 0 = top, clockwise
    angle_range: float = 360.0  # degrees mapped onto [min, max]
    multi_rotation: bool = False
    steps: Optional[int] = None  # number of snap positions, endpoints included
    tracking: bool = True
    size: float = 100.0  # pixel diameter
    read_only: bool = False
    use_mouse_wheel: bool = True

    def __post_init__(self) -> None:
        for name in ("min", "max", "angle_offset", "angle_range", "size"):
            _require_finite(name, getattr(self, name))
        if self.initial_value is not None:
            _require_finite("initial_value", self.initial_value)

        if self.min >= self.max:
            raise KnobConfigError(
                f"min must be lower than max (got min={self.min}, max={self.max})"
            )
        if not 0 < self.angle_range <= 360:
            raise KnobConfigError(
                f"angle_range must be in (0, 360] degrees, got {self.angle_range}"
            )
        if self.size <= 0:
            raise KnobConfigError(f"size must be positive, got {self.size}")
        if self.steps is not None:
            if isinstance(self.steps, bool) or not isinstance(self.steps, int):
                raise KnobConfigError(f"steps must be an integer, got {self.steps!r}")
            if self.steps < 2:
                raise KnobConfigError(f"steps must be at least 2, got {self.steps}")
        if (
            self.initial_value is not None
            and not self.multi_rotation
            and not self.min <= self.initial_value <= self.max
        ):
            raise KnobConfigError(
                f"initial_value {self.initial_value} is outside "
                f"[{self.min}, {self.max}]"
            )

    @property
    def center(self) -> float:
        return self.size / 2.0

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "KnobConfig":
        data: Dict[str, Any] = json.loads(text)
        known = {f.name for f in fields(KnobConfig)}
        return KnobConfig(**{k: v for k, v in data.items() if k in known})


def _require_finite(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise KnobConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise KnobConfigError(f"{name} must be finite, got {value}")


@dataclass(frozen=True)
class Position:
    """Result of resolving a pointer angle against the previous state.

    ``updated`` is False when the sample must be discarded; ``mouse_angle``
    and ``percentage`` then carry the previous values unchanged.
    """

    updated: bool
    mouse_angle: float
    percentage: float


@dataclass
class KnobState:
    """Mutable interaction state, owned by a single controller."""

    value: Optional[float] = None
    percentage: Optional[float] = None
    mouse_angle: Optional[float] = None
    is_active: bool = False
    start_value: Optional[float] = None
    start_percentage: Optional[float] = None


@dataclass(frozen=True)
class KnobSnapshot:
    """Read-only view of a knob handed to renderers."""

    config: KnobConfig
    value: Optional[float]
    percentage: Optional[float]
    mouse_angle: Optional[float]
    is_active: bool

    @property
    def center(self) -> float:
        return self.config.center


__all__ = [
    "KnobConfig",
    "KnobConfigError",
    "KnobSnapshot",
    "KnobState",
    "Position",
]
