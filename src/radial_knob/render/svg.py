"""Composition of knob layers into a standalone SVG document."""

from __future__ import annotations

from typing import Iterable

from ..models import KnobSnapshot
from .layers import Layer
from .path import format_number

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def render_knob_svg(snapshot: KnobSnapshot, layers: Iterable[Layer]) -> str:
    """Render ``layers`` in order (first is bottom-most) into a ``size`` square."""
    size = format_number(snapshot.config.size)
    body = "".join(layer.render(snapshot) for layer in layers)
    return (
        f'<svg xmlns="{SVG_NAMESPACE}" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}">{body}</svg>'
    )


__all__ = ["SVG_NAMESPACE", "render_knob_svg"]
