"""radial_knob: angle/value interaction and path geometry for radial controls."""

from __future__ import annotations

from ._version import get_version
from .interaction import KnobController, KnobInputHandler
from .models import KnobConfig, KnobConfigError, KnobSnapshot, Position
from .render import render_knob_svg

__version__ = get_version()


def main() -> None:
    """Entry point for ``python -m radial_knob`` and console scripts."""
    from .app import main as _main

    _main()


__all__ = [
    "main",
    "__version__",
    "get_version",
    "KnobConfig",
    "KnobConfigError",
    "KnobController",
    "KnobInputHandler",
    "KnobSnapshot",
    "Position",
    "render_knob_svg",
]
