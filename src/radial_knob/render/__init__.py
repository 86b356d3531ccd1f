"""Path generators and SVG layers for drawing knobs."""

from .arc import ArcGeometry, arc_geometry, arc_path, resolve_arc_range
from .layers import (
    Arc,
    Label,
    Layer,
    MarkGeometry,
    Pointer,
    Range,
    Scale,
    Shape,
    Spiral,
    Value,
)
from .spiral import sample_spiral, spiral_path
from .svg import render_knob_svg

__all__ = [
    "ArcGeometry",
    "arc_geometry",
    "arc_path",
    "resolve_arc_range",
    "Arc",
    "Label",
    "Layer",
    "MarkGeometry",
    "Pointer",
    "Range",
    "Scale",
    "Shape",
    "Spiral",
    "Value",
    "sample_spiral",
    "spiral_path",
    "render_knob_svg",
]
