# File: areawiz/ui/shape_selector.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Carrusel horizontal de figuras (click / rueda / arrastre) con snap al ítem más cercano.
# Notes: El ítem seleccionado queda centrado; los márgenes laterales dependen del ancho del viewport.

from __future__ import annotations

from PySide6.QtCore import QAbstractAnimation, QEasingCurve, QPropertyAnimation, Qt, QTimer, Signal
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QHBoxLayout,
    QScrollArea,
    QScroller,
    QToolButton,
    QWidget,
)

from areawiz.core.formulas import FORMULAS
from areawiz.core.shapes import SELECTABLE_SHAPES, SHAPE_SYMBOLS, ShapeKind, shape_index
from areawiz.utils.log import get_logger

log = get_logger(__name__)

ITEM_WIDTH = 96
ITEM_HEIGHT = 96

_STYLE = """
QToolButton {
    color: rgba(255, 255, 255, 128);
    background: transparent;
    border: none;
    font-size: 11px;
}
QToolButton:checked {
    color: white;
    font-weight: 700;
    font-size: 13px;
}
"""


def nearest_index(scroll_value: int, step: int, count: int) -> int:
    """Índice del ítem cuyo centro queda más cerca del centro del viewport."""
    if count <= 0 or step <= 0:
        return 0
    i = int(round(float(scroll_value) / float(step)))
    return max(0, min(count - 1, i))


class ShapeSelector(QScrollArea):
    shape_selected = Signal(object)  # ShapeKind

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFrameShape(QFrame.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setWidgetResizable(False)
        self.setFixedHeight(ITEM_HEIGHT + 16)

        self._current: ShapeKind = SELECTABLE_SHAPES[0]
        self._buttons: list[QToolButton] = []

        self._build_ui()

        # Debounce: cuando el scroll se detiene, snap + selección.
        self._snap_timer = QTimer(self)
        self._snap_timer.setSingleShot(True)
        self._snap_timer.setInterval(150)
        self._snap_timer.timeout.connect(self._snap_to_nearest)

        self._anim = QPropertyAnimation(self.horizontalScrollBar(), b"value", self)
        self._anim.setDuration(300)
        self._anim.setEasingCurve(QEasingCurve.OutCubic)

        self.horizontalScrollBar().valueChanged.connect(self._on_scrolled)

        # Arrastre tipo "swipe" con el mouse.
        QScroller.grabGesture(self.viewport(), QScroller.LeftMouseButtonGesture)

    def _build_ui(self) -> None:
        strip = QWidget(self)
        strip.setStyleSheet(_STYLE)
        self._strip_layout = QHBoxLayout(strip)
        self._strip_layout.setSpacing(0)
        self._strip_layout.setContentsMargins(0, 0, 0, 0)

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        for i, kind in enumerate(SELECTABLE_SHAPES):
            b = QToolButton(strip)
            b.setCheckable(True)
            b.setFixedSize(ITEM_WIDTH, ITEM_HEIGHT)
            b.setText(f"{SHAPE_SYMBOLS.get(kind, '?')}\n{FORMULAS[kind].display_name}")
            b.setToolTip(FORMULAS[kind].display_name)
            self._group.addButton(b, i)
            self._strip_layout.addWidget(b)
            self._buttons.append(b)
        self._buttons[0].setChecked(True)
        self._group.idClicked.connect(self._on_item_clicked)

        self.setWidget(strip)
        self._update_margins()

    # ---------------------------
    # Public API
    # ---------------------------
    def current_shape(self) -> ShapeKind:
        return self._current

    def set_current_shape(self, kind: ShapeKind, *, animate: bool = False, emit: bool = False) -> None:
        i = shape_index(kind)
        if i < 0:
            return
        self._scroll_to(i, animate=animate)
        self._apply_selection(i, emit=emit)

    # ---------------------------
    # Internals
    # ---------------------------
    def _update_margins(self) -> None:
        side = max(0, (self.viewport().width() - ITEM_WIDTH) // 2)
        self._strip_layout.setContentsMargins(side, 0, side, 0)
        strip = self.widget()
        if strip is not None:
            strip.adjustSize()
        QScroller.scroller(self.viewport()).setSnapPositionsX(
            [float(i * ITEM_WIDTH) for i in range(len(self._buttons))]
        )

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        if not hasattr(self, "_anim"):
            return
        self._update_margins()
        self._scroll_to(shape_index(self._current), animate=False)

    def wheelEvent(self, event) -> None:
        # Rueda = un ítem por muesca (cualquier eje).
        delta = event.angleDelta()
        d = delta.y() or delta.x()
        if d == 0:
            return
        i = shape_index(self._current) + (-1 if d > 0 else 1)
        i = max(0, min(len(self._buttons) - 1, i))
        self._scroll_to(i, animate=True)
        self._apply_selection(i, emit=True)
        event.accept()

    def _on_item_clicked(self, i: int) -> None:
        self._scroll_to(i, animate=True)
        self._apply_selection(i, emit=True)

    def _on_scrolled(self, _v: int) -> None:
        if self._anim.state() == QAbstractAnimation.Running:
            return
        self._snap_timer.start()

    def _snap_to_nearest(self) -> None:
        if not self.isVisible():
            return
        sb = self.horizontalScrollBar()
        i = nearest_index(sb.value(), ITEM_WIDTH, len(self._buttons))
        if sb.value() != i * ITEM_WIDTH:
            self._scroll_to(i, animate=True)
        self._apply_selection(i, emit=True)

    def _scroll_to(self, i: int, *, animate: bool) -> None:
        sb = self.horizontalScrollBar()
        target = int(i * ITEM_WIDTH)
        self._anim.stop()
        if animate and sb.value() != target:
            self._anim.setStartValue(sb.value())
            self._anim.setEndValue(target)
            self._anim.start()
        else:
            sb.setValue(target)

    def _apply_selection(self, i: int, *, emit: bool) -> None:
        kind = SELECTABLE_SHAPES[i]
        self._buttons[i].setChecked(True)
        if kind == self._current:
            return
        self._current = kind
        log.debug("Selector: %s", kind.value)
        if emit:
            self.shape_selected.emit(kind)
