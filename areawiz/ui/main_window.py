# File: areawiz/ui/main_window.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Ventana principal: partículas arriba, intro, y área de cálculo + carrusel abajo.
# Notes: La interacción queda oculta hasta que termina la intro.
from __future__ import annotations

import base64

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from areawiz.core.settings import AppSettings, env_bool
from areawiz.core.shapes import ShapeKind
from areawiz.core.version import APP_NAME, APP_VERSION
from areawiz.ui.calculator_panel import CalculatorPanel
from areawiz.ui.particle_view import ParticleView
from areawiz.ui.shape_selector import ShapeSelector
from areawiz.utils.log import get_logger

log = get_logger(__name__)

INTRO_CAPTION = "Initiating Area Wizard..."


class MainWindow(QMainWindow):
    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("{} v{}".format(APP_NAME, APP_VERSION))
        self.resize(420, 760)
        self.setStyleSheet("QMainWindow, QWidget { background: black; color: white; font-family: 'Courier'; }")

        self._settings = settings or AppSettings.load()

        self._build_ui()
        self._restore_ui_state()

        # intro_finished llega por señal (también al saltar la intro).
        if env_bool("AW_SKIP_INTRO", False):
            self._view.start(intro=False, settle_on=self._settings.last_shape)
        else:
            self._view.start(intro=True)

    def _build_ui(self) -> None:
        central = QWidget(self)
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 16)
        root.setSpacing(0)

        self._view = ParticleView(parent=central)
        self._view.set_particle_color(self._settings.particle_color)
        self._view.intro_finished.connect(self._on_intro_finished)
        root.addWidget(self._view, 6)

        self._caption = QLabel(INTRO_CAPTION, central)
        self._caption.setAlignment(Qt.AlignCenter)
        self._caption.setStyleSheet("color: rgba(255,255,255,178); font-size: 16px; font-weight: 700; letter-spacing: 2px;")
        root.addWidget(self._caption, 0)

        self._interaction = QWidget(central)
        il = QVBoxLayout(self._interaction)
        il.setContentsMargins(0, 0, 0, 0)
        il.setSpacing(8)

        self._panel = CalculatorPanel(self._interaction)
        il.addWidget(self._panel, 1)

        self._selector = ShapeSelector(self._interaction)
        self._selector.shape_selected.connect(self._on_shape_selected)
        il.addWidget(self._selector, 0)

        self._interaction.setVisible(False)
        root.addWidget(self._interaction, 5)

        self.setCentralWidget(central)

    # ---------------------------
    # Slots
    # ---------------------------
    def _on_intro_finished(self) -> None:
        kind = self._view.driver.end_kind
        if not kind.selectable:
            kind = self._settings.last_shape
        self._caption.setVisible(False)
        self._interaction.setVisible(True)
        self._selector.set_current_shape(kind, animate=False, emit=False)
        self._panel.set_shape(kind)
        log.info("Listo: %s", kind.value)

    def _on_shape_selected(self, kind: ShapeKind) -> None:
        if self._view.select_shape(kind):
            self._panel.set_shape(kind)

    # ----------------------------
    # UI state persistente
    # ----------------------------
    def _restore_ui_state(self) -> None:
        try:
            if self._settings.ui_main_geometry_b64:
                raw = base64.b64decode(self._settings.ui_main_geometry_b64.encode("ascii"), validate=False)
                self.restoreGeometry(raw)
        except Exception:
            # No romper arranque
            log.debug("No se pudo restaurar geometry", exc_info=True)

    def _persist_ui_state(self) -> None:
        try:
            self._settings.ui_main_geometry_b64 = base64.b64encode(bytes(self.saveGeometry())).decode("ascii")
        except Exception:
            log.debug("No se pudo capturar geometry", exc_info=True)
        current = self._panel.shape()
        if current is not None:
            self._settings.last_shape = current
        self._settings.save()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._view.stop()
        self._persist_ui_state()
        event.accept()
