"""SVG path-data formatting.

Nothing here draws: commands are accumulated as text for whatever
renderer consumes the path description.
"""

from typing import List, Tuple

Point = Tuple[float, float]


def format_number(value: float, precision: int = 6) -> str:
    """Format ``value`` with at most ``precision`` decimals, trimming zeros."""
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_point(point: Point, precision: int = 6) -> str:
    return f"{format_number(point[0], precision)} {format_number(point[1], precision)}"


class PathBuilder:
    """Accumulates ``M``/``L``/``A``/``Z`` commands into path data."""

    def __init__(self, precision: int = 6) -> None:
        self.precision = precision
        self._commands: List[str] = []

    def move_to(self, point: Point) -> "PathBuilder":
        self._commands.append(f"M {format_point(point, self.precision)}")
        return self

    def line_to(self, point: Point) -> "PathBuilder":
        self._commands.append(f"L {format_point(point, self.precision)}")
        return self

    def arc_to(
        self, radius: float, large_arc: int, sweep: int, point: Point
    ) -> "PathBuilder":
        r = format_number(radius, self.precision)
        self._commands.append(
            f"A {r} {r} 0 {large_arc} {sweep} {format_point(point, self.precision)}"
        )
        return self

    def close(self) -> "PathBuilder":
        self._commands.append("Z")
        return self

    def build(self) -> str:
        return " ".join(self._commands)


__all__ = ["Point", "PathBuilder", "format_number", "format_point"]
