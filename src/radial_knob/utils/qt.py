"""Qt helper utilities."""

from PySide6 import QtCore, QtGui, QtSvg


def render_svg(painter: QtGui.QPainter, svg_text: str, target: QtCore.QRectF) -> bool:
    """Draw an SVG document into ``target``. Returns False if Qt rejects it."""
    renderer = QtSvg.QSvgRenderer(QtCore.QByteArray(svg_text.encode("utf-8")))
    if not renderer.isValid():
        return False
    renderer.render(painter, target)
    return True


__all__ = ["render_svg"]
