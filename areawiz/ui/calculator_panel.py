# File: areawiz/ui/calculator_panel.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Campos numéricos por figura + botón CALC + resultado.
# Notes: Sin QDoubleValidator: el texto llega crudo y evaluate() decide missing/invalid.

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from areawiz.core.formulas import FORMULAS, AreaResult, evaluate
from areawiz.core.shapes import ShapeKind


class CalculatorPanel(QWidget):
    """Área de interacción: título, campos dinámicos y resultado."""

    calculated = Signal(object)  # AreaResult

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._kind: ShapeKind | None = None
        self._fields: list[QLineEdit] = []
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 8, 24, 8)
        root.setSpacing(12)

        self._title = QLabel("", self)
        self._title.setAlignment(Qt.AlignCenter)
        self._title.setStyleSheet("font-size: 22px; font-weight: 700; letter-spacing: 4px; color: rgba(255,255,255,138);")
        root.addWidget(self._title)

        row = QHBoxLayout()
        row.setSpacing(20)

        self._form_host = QWidget(self)
        self._form = QFormLayout(self._form_host)
        self._form.setContentsMargins(0, 0, 0, 0)
        row.addWidget(self._form_host, 2)

        side = QVBoxLayout()
        side.addStretch(1)
        self._result = QLabel("", self)
        self._result.setAlignment(Qt.AlignCenter)
        self._result.setStyleSheet("font-size: 22px; font-weight: 700; color: #18ffff;")
        side.addWidget(self._result)

        self._btn = QPushButton("CALC", self)
        self._btn.setMinimumHeight(44)
        self._btn.setStyleSheet(
            "QPushButton { background: white; color: black; font-weight: 700; border-radius: 22px; }"
        )
        self._btn.clicked.connect(self.calculate)
        side.addWidget(self._btn)
        row.addLayout(side, 1)

        root.addLayout(row)

    # ---------------------------
    # Public API
    # ---------------------------
    def shape(self) -> ShapeKind | None:
        return self._kind

    def field_labels(self) -> tuple[str, ...]:
        if self._kind is None:
            return ()
        return FORMULAS[self._kind].input_labels

    def texts(self) -> list[str]:
        return [f.text() for f in self._fields]

    def result_text(self) -> str:
        return self._result.text()

    def set_shape(self, kind: ShapeKind) -> None:
        """Reconstruye los campos para la figura y limpia el resultado."""
        formula = FORMULAS.get(kind)
        if formula is None:
            return
        self._kind = kind
        self._title.setText(formula.display_name)

        while self._form.rowCount():
            self._form.removeRow(0)
        self._fields = []
        for label in formula.input_labels:
            ed = QLineEdit(self._form_host)
            ed.setPlaceholderText(label)
            ed.setInputMethodHints(Qt.ImhFormattedNumbersOnly)
            ed.returnPressed.connect(self.calculate)
            self._form.addRow(label, ed)
            self._fields.append(ed)
        self._result.setText("")

    def calculate(self) -> AreaResult | None:
        if self._kind is None:
            return None
        res = evaluate(self._kind, self.texts())
        self._result.setText(res.text)
        self.calculated.emit(res)
        return res
