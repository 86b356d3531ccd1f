"""Qt front end: a knob widget driven by the interaction controller."""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from PySide6 import QtCore, QtGui, QtWidgets

from . import __version__ as APP_VERSION
from .interaction import KnobController, KnobInputHandler, Modifiers
from .interaction.events import InteractiveHook
from .models import KnobConfig, KnobSnapshot
from .render import Arc, Layer, Pointer, Scale, Shape, Spiral, Value, render_knob_svg
from .utils.qt import render_svg

LOG_LEVEL_ENV = "RADIAL_KNOB_LOG_LEVEL"

_KEY_NAMES: Dict[QtCore.Qt.Key, str] = {
    QtCore.Qt.Key.Key_Left: "left",
    QtCore.Qt.Key.Key_Right: "right",
    QtCore.Qt.Key.Key_Up: "up",
    QtCore.Qt.Key.Key_Down: "down",
    QtCore.Qt.Key.Key_Escape: "escape",
}


def default_layers(config: KnobConfig) -> List[Layer]:
    """Track, value arc, scale, pointer and value text sized to ``config``."""
    c = config.center
    arc_width = config.size * 0.1
    layers: List[Layer] = [
        Arc(
            arc_width=arc_width,
            percentage_from=0.0,
            percentage_to=1.0,
            color="#3a3f4b",
        ),
        Arc(arc_width=arc_width, color="#2fb6ff"),
    ]
    if config.multi_rotation:
        layers.append(
            Spiral(
                arc_width=arc_width * 0.4,
                radius_from=c * 0.45,
                radius_to=c - arc_width - 2,
                percentage_from=0.0,
                color="#ffb02f",
            )
        )
    tick_count = 12
    if config.steps:
        tick_count = Scale.tick_count_for_steps(config.steps, config.angle_range)
    layers += [
        Scale(
            tick_count=tick_count,
            tick_width=2,
            tick_height=arc_width * 0.6,
            radius=c - arc_width - 4,
            color="#6b7280",
            active_color="#e5e7eb",
        ),
        Pointer(
            width=arc_width * 0.6,
            height=c * 0.3,
            radius=c - arc_width - 6,
            shape=Shape.TRIANGLE,
            color="#ffffff",
        ),
        Value(font_size=config.size * 0.16, color="#e5e7eb"),
    ]
    return layers


# ------------------------------- Knob Widget ----------------------------------


class KnobWidget(QtWidgets.QWidget):
    valueChanged = QtCore.Signal(float)
    interactiveValueChanged = QtCore.Signal(float)
    started = QtCore.Signal()
    ended = QtCore.Signal()

    def __init__(
        self,
        config: KnobConfig,
        layers: Optional[Sequence[Layer]] = None,
        interactive_hook: Optional[InteractiveHook] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.controller = KnobController(
            config,
            on_change=self.valueChanged.emit,
            on_interactive_change=self._on_interactive_change,
            on_start=self.started.emit,
            on_end=self._on_end,
        )
        self.handler = KnobInputHandler(self.controller, interactive_hook)
        self._layers: List[Layer] = list(
            default_layers(config) if layers is None else layers
        )

        side = int(round(config.size))
        self.setFixedSize(side, side)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

    # ----------------------------- Properties ---------------------------------

    @property
    def config(self) -> KnobConfig:
        return self.controller.config

    def value(self) -> Optional[float]:
        return self.controller.value

    def setValue(self, value: float) -> None:
        self.controller.set_value(value)
        self.update()

    def set_layers(self, layers: Sequence[Layer]) -> None:
        self._layers = list(layers)
        self.update()

    def snapshot(self) -> KnobSnapshot:
        return self.controller.snapshot()

    def svg(self) -> str:
        return render_knob_svg(self.snapshot(), self._layers)

    # ----------------------------- Interaction --------------------------------

    def _on_interactive_change(self, value: float) -> None:
        self.interactiveValueChanged.emit(value)
        self.update()

    def _on_end(self) -> None:
        self.update()
        self.ended.emit()

    def _center(self) -> Tuple[float, float]:
        return self.width() / 2.0, self.height() / 2.0

    @staticmethod
    def _modifiers(e: QtGui.QInputEvent) -> Modifiers:
        mods = e.modifiers()
        return Modifiers(
            ctrl=bool(mods & QtCore.Qt.KeyboardModifier.ControlModifier),
            alt=bool(mods & QtCore.Qt.KeyboardModifier.AltModifier),
            meta=bool(mods & QtCore.Qt.KeyboardModifier.MetaModifier),
            shift=bool(mods & QtCore.Qt.KeyboardModifier.ShiftModifier),
        )

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            e.ignore()
            return
        pos = e.position()
        if self.handler.pointer_down(
            self._center(), pos.x(), pos.y(), self._modifiers(e)
        ):
            self.setFocus(QtCore.Qt.FocusReason.MouseFocusReason)
            e.accept()
        else:
            e.ignore()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent) -> None:
        pos = e.position()
        self.handler.pointer_move(self._center(), pos.x(), pos.y(), self._modifiers(e))
        e.accept()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self.handler.pointer_up()
        e.accept()

    def contextMenuEvent(self, e: QtGui.QContextMenuEvent) -> None:
        if self.handler.context_menu():
            e.accept()
        else:
            e.ignore()

    def keyPressEvent(self, e: QtGui.QKeyEvent) -> None:
        name = _KEY_NAMES.get(QtCore.Qt.Key(e.key()))
        if name is not None and self.handler.key_press(name):
            e.accept()
            return
        super().keyPressEvent(e)

    def wheelEvent(self, e: QtGui.QWheelEvent) -> None:
        delta = e.angleDelta()
        # Qt reports positive y for scrolling away from the user
        if self.handler.wheel(-delta.x(), -delta.y()):
            e.accept()
        else:
            e.ignore()

    # ----------------------------- Painting -----------------------------------

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        render_svg(painter, self.svg(), QtCore.QRectF(self.rect()))
        painter.end()


# ------------------------------- Demo Window ----------------------------------


class DemoWindow(QtWidgets.QWidget):
    """Two knobs side by side: a bounded one and a multi-rotation one."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"radial_knob {APP_VERSION}")

        self.volume = KnobWidget(
            KnobConfig(
                min=0,
                max=100,
                initial_value=40,
                angle_offset=220,
                angle_range=280,
                size=180,
            )
        )
        self.tuner = KnobWidget(
            KnobConfig(
                min=0,
                max=10,
                angle_range=360,
                multi_rotation=True,
                steps=25,
                tracking=False,
                size=180,
            )
        )

        self.volume_label = QtWidgets.QLabel()
        self.tuner_label = QtWidgets.QLabel()
        for label in (self.volume_label, self.tuner_label):
            label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)

        grid = QtWidgets.QGridLayout(self)
        grid.addWidget(self.volume, 0, 0)
        grid.addWidget(self.tuner, 0, 1)
        grid.addWidget(self.volume_label, 1, 0)
        grid.addWidget(self.tuner_label, 1, 1)

        self.volume.valueChanged.connect(
            lambda v: self.volume_label.setText(f"volume: {v:.0f}")
        )
        self.tuner.valueChanged.connect(
            lambda v: self.tuner_label.setText(f"tuner: {v:.2f}")
        )
        self.volume_label.setText(f"volume: {self.volume.value():.0f}")
        self.tuner_label.setText(f"tuner: {self.tuner.value():.2f}")


def main() -> None:
    level = os.environ.get(LOG_LEVEL_ENV)
    if level:
        logging.basicConfig(level=level.upper())

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("radial_knob")
    app.setApplicationVersion(APP_VERSION)

    window = DemoWindow()
    window.show()
    sys.exit(app.exec())
