# File: areawiz/ui/particle_view.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Lienzo de partículas: tick por QTimer -> MorphDriver -> build_frame -> QPainter.
# Notes: Toda la geometría sale de areawiz.geom.frame; acá solo se pinta.
from __future__ import annotations

from PySide6.QtCore import QElapsedTimer, QPointF, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from areawiz.core.animation import MorphDriver, build_intro_steps
from areawiz.core.settings import env_float, env_int
from areawiz.core.shapes import ShapeKind
from areawiz.core.version import (
    DEFAULT_FLOAT_PERIOD_MS,
    DEFAULT_FRAME_MS,
    DEFAULT_INTRO_MORPH_MS,
    DEFAULT_INTRO_STEP_MS,
    DEFAULT_MORPH_MS,
)
from areawiz.geom.frame import build_frame, should_repaint
from areawiz.geom.morph import DEFAULT_SCALE_FRACTION, MorphState
from areawiz.utils.log import get_logger

log = get_logger(__name__)

DEFAULT_DOT_RADIUS = 3.0
LINE_ALPHA = 0.15
LINE_WIDTH = 1.0


def driver_from_env() -> MorphDriver:
    """MorphDriver con duraciones leídas de env (AW_*), ya clampeadas."""
    steps = build_intro_steps(
        step_ms=env_int("AW_INTRO_STEP_MS", DEFAULT_INTRO_STEP_MS, min_value=50, max_value=10000),
        morph_ms=env_int("AW_INTRO_MORPH_MS", DEFAULT_INTRO_MORPH_MS, min_value=50, max_value=10000),
    )
    return MorphDriver(
        morph_ms=env_int("AW_MORPH_MS", DEFAULT_MORPH_MS, min_value=50, max_value=10000),
        float_period_ms=env_int("AW_FLOAT_PERIOD_MS", DEFAULT_FLOAT_PERIOD_MS, min_value=100, max_value=60000),
        intro_steps=steps,
    )


class ParticleView(QWidget):
    """Campo de partículas que se transforma entre contornos de figuras."""

    intro_finished = Signal()

    def __init__(self, driver: MorphDriver | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumHeight(160)

        self._driver = driver or driver_from_env()
        self._driver.on_intro_finished = self.intro_finished.emit

        self._color = QColor(255, 255, 255)
        self._dot_radius = env_float("AW_DOT_RADIUS", DEFAULT_DOT_RADIUS, min_value=0.5, max_value=20.0)
        self._scale_fraction = env_float("AW_SCALE_FRACTION", DEFAULT_SCALE_FRACTION, min_value=0.1, max_value=1.0)

        self._last_painted: MorphState | None = None
        self._clock = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setInterval(env_int("AW_FRAME_MS", DEFAULT_FRAME_MS, min_value=5, max_value=200))
        self._timer.timeout.connect(self._on_tick)

    # ---------------------------
    # Public API
    # ---------------------------
    @property
    def driver(self) -> MorphDriver:
        return self._driver

    def start(self, *, intro: bool = True, settle_on: ShapeKind | None = None) -> None:
        if intro:
            self._driver.start_intro()
        else:
            self._driver.skip_intro(settle_on)
        self._clock.start()
        self._timer.start()
        log.debug("ParticleView: timer %d ms", self._timer.interval())

    def stop(self) -> None:
        self._timer.stop()

    def select_shape(self, kind: ShapeKind) -> bool:
        changed = self._driver.select_shape(kind)
        if changed:
            self.update()
        return changed

    def set_particle_color(self, color: QColor | str) -> None:
        c = QColor(color)
        if not c.isValid():
            log.warning("Color de partícula inválido: %r", color)
            return
        self._color = c
        self.update()

    # ---------------------------
    # Qt
    # ---------------------------
    def _on_tick(self) -> None:
        dt = self._clock.restart() if self._clock.isValid() else 0
        state = self._driver.advance_frame(float(dt))
        if should_repaint(self._last_painted, state):
            self.update()

    def paintEvent(self, event) -> None:
        state = self._driver.state
        frame = build_frame(
            state,
            self._driver.start_points,
            self._driver.end_points,
            self.width(),
            self.height(),
            scale_fraction=self._scale_fraction,
        )

        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), Qt.black)

            line_color = QColor(self._color)
            line_color.setAlphaF(LINE_ALPHA)
            painter.setPen(QPen(line_color, LINE_WIDTH))
            for a, b in frame.lines:
                painter.drawLine(QPointF(*a), QPointF(*b))

            painter.setPen(Qt.NoPen)
            painter.setBrush(self._color)
            r = self._dot_radius
            for x, y in frame.dots:
                painter.drawEllipse(QPointF(x, y), r, r)
        finally:
            painter.end()
        self._last_painted = state

    def hideEvent(self, event) -> None:
        # Sin ventana visible no hay frames que pintar.
        self._timer.stop()
        super().hideEvent(event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if self._clock.isValid() and not self._timer.isActive():
            self._clock.restart()
            self._timer.start()
