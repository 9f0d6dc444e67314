# File: areawiz/core/formulas.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Tabla de fórmulas (nombre, campos, área) + evaluación de inputs de texto.
# Notes: Sin Qt. Negativos/cero se calculan tal cual (no se validan).
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Sequence

from areawiz.core.shapes import SELECTABLE_SHAPES, ShapeKind
from areawiz.utils.errors import (
    AreaArityError,
    InvalidInputError,
    MissingInputError,
    UnknownShapeError,
)

ResultStatus = Literal["ok", "missing", "invalid"]

# Textos que reemplazan al resultado numérico.
MISSING_INPUT_TEXT = "Enter Value"
INVALID_INPUT_TEXT = "Invalid"


@dataclass(frozen=True)
class ShapeFormula:
    kind: ShapeKind
    display_name: str
    input_labels: tuple[str, ...]

    @property
    def arity(self) -> int:
        return len(self.input_labels)

    def area(self, values: Sequence[float]) -> float:
        if len(values) != self.arity:
            raise AreaArityError(
                f"{self.kind.value}: se esperaban {self.arity} valores, llegaron {len(values)}"
            )
        return _area(self.kind, [float(v) for v in values])


def _area(kind: ShapeKind, v: list[float]) -> float:
    if kind is ShapeKind.TRIANGLE:
        return 0.5 * v[0] * v[1]
    if kind is ShapeKind.RECTANGLE:
        return v[0] * v[1]
    if kind is ShapeKind.CIRCLE:
        return math.pi * v[0] * v[0]
    if kind is ShapeKind.TRAPEZOID:
        return 0.5 * (v[0] + v[1]) * v[2]
    if kind is ShapeKind.BOX:
        # Superficie: 2(lw + wh + hl)
        return 2.0 * (v[0] * v[1] + v[1] * v[2] + v[2] * v[0])
    if kind is ShapeKind.CYLINDER:
        return 2.0 * math.pi * v[0] * (v[0] + v[1])
    if kind is ShapeKind.CONE:
        r, h = v[0], v[1]
        s = math.sqrt(r * r + h * h)  # generatriz
        return math.pi * r * (r + s)
    raise UnknownShapeError(f"sin fórmula para {kind.value!r}")


def formula_for(kind: ShapeKind) -> ShapeFormula:
    """Fórmula de la figura (lookup por enum cerrado)."""
    if kind is ShapeKind.TRIANGLE:
        return ShapeFormula(kind, "TRIANGLE", ("Base", "Height"))
    if kind is ShapeKind.RECTANGLE:
        return ShapeFormula(kind, "RECTANGLE", ("Length", "Width"))
    if kind is ShapeKind.CIRCLE:
        return ShapeFormula(kind, "CIRCLE", ("Radius",))
    if kind is ShapeKind.TRAPEZOID:
        return ShapeFormula(kind, "TRAPEZOID", ("Base A", "Base B", "Height"))
    if kind is ShapeKind.BOX:
        return ShapeFormula(kind, "BOX (Surface Area)", ("Length", "Width", "Height"))
    if kind is ShapeKind.CYLINDER:
        return ShapeFormula(kind, "CYLINDER", ("Radius", "Height"))
    if kind is ShapeKind.CONE:
        return ShapeFormula(kind, "CONE", ("Radius", "Height"))
    raise UnknownShapeError(f"sin fórmula para {kind.value!r}")


# Construida una sola vez; solo lectura.
FORMULAS: dict[ShapeKind, ShapeFormula] = {k: formula_for(k) for k in SELECTABLE_SHAPES}


def compute_area(kind: ShapeKind, inputs: Sequence[float]) -> float:
    f = FORMULAS.get(kind)
    if f is None:
        raise UnknownShapeError(f"sin fórmula para {getattr(kind, 'value', kind)!r}")
    return f.area(inputs)


def parse_inputs(texts: Sequence[str], labels: Sequence[str] = ()) -> list[float]:
    """Convierte los textos de los campos en floats, en orden.

    - Campo vacío (o solo espacios) -> MissingInputError.
    - Texto no numérico -> InvalidInputError.
    El primer campo con problema decide el error.
    """
    values: list[float] = []
    for i, raw in enumerate(texts):
        label = labels[i] if i < len(labels) else ""
        s = (raw or "").strip()
        if not s:
            raise MissingInputError(i, label)
        try:
            v = float(s)
        except ValueError:
            raise InvalidInputError(i, label, s) from None
        if not math.isfinite(v):
            # "nan"/"inf" parsean en Python pero no son medidas.
            raise InvalidInputError(i, label, s)
        values.append(v)
    return values


def format_area(value: float) -> str:
    return f"{value:.2f}"


@dataclass(frozen=True)
class AreaResult:
    status: ResultStatus
    text: str
    value: float | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def evaluate(kind: ShapeKind, texts: Sequence[str]) -> AreaResult:
    """Calcula el área desde los textos de los campos (no lanza por input del usuario)."""
    formula = FORMULAS.get(kind)
    if formula is None:
        raise UnknownShapeError(f"sin fórmula para {getattr(kind, 'value', kind)!r}")
    try:
        values = parse_inputs(texts, formula.input_labels)
    except MissingInputError:
        return AreaResult("missing", MISSING_INPUT_TEXT)
    except InvalidInputError:
        return AreaResult("invalid", INVALID_INPUT_TEXT)
    area = formula.area(values)
    return AreaResult("ok", format_area(area), area)
