# File: areawiz/core/shapes.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Figuras soportadas (enum cerrado) + orden/símbolos del carrusel.
# Notes: 'loading' es una pseudo-figura: solo existe durante la intro.

from __future__ import annotations

from enum import Enum


class ShapeKind(str, Enum):
    """Figura activa.

    - loading: nube aleatoria (antes de la primera figura real)
    - triangle / rectangle / circle / trapezoid: figuras planas
    - box / cylinder / cone: sólidos (se calcula superficie)
    """

    LOADING = "loading"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TRAPEZOID = "trapezoid"
    BOX = "box"
    CYLINDER = "cylinder"
    CONE = "cone"

    @property
    def selectable(self) -> bool:
        return self is not ShapeKind.LOADING


# Orden del carrusel (el mismo que el enum, sin 'loading').
SELECTABLE_SHAPES: tuple[ShapeKind, ...] = tuple(k for k in ShapeKind if k.selectable)

SHAPE_SYMBOLS: dict[ShapeKind, str] = {
    ShapeKind.TRIANGLE: "△",
    ShapeKind.RECTANGLE: "▭",
    ShapeKind.CIRCLE: "○",
    ShapeKind.TRAPEZOID: "▽",
    ShapeKind.BOX: "▢",
    ShapeKind.CYLINDER: "◎",
    ShapeKind.CONE: "▲",
}


def coerce_shape_kind(v: object, default: ShapeKind = ShapeKind.TRIANGLE) -> ShapeKind:
    """Convierte str/ShapeKind en ShapeKind seleccionable (tolerante)."""
    if isinstance(v, ShapeKind):
        return v if v.selectable else default
    try:
        s = str(v or "").strip().lower()
        for k in SELECTABLE_SHAPES:
            if k.value == s:
                return k
    except Exception:
        pass
    return default


def shape_index(kind: ShapeKind) -> int:
    """Posición en el carrusel; -1 para 'loading'."""
    try:
        return SELECTABLE_SHAPES.index(kind)
    except ValueError:
        return -1
