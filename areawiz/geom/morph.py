"""Morph + idle-float interpolation between two PointSets.

- `interpolate` blends start[i] -> end[i] linearly by `progress` and adds a
  small sinusoidal drift driven by `float_phase` (0..1, one full turn).
- `ease_in_out` / `ping_pong` turn elapsed clocks into progress / phase.
- `RenderTransform` maps normalized coordinates onto device pixels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from areawiz.core.shapes import ShapeKind
from areawiz.geom.outline import Point, PointSet

# Amplitud del "respirar" (en unidades normalizadas).
FLOAT_AMPLITUDE = 0.008
FLOAT_STEP_X = 0.1
FLOAT_STEP_Y = 0.15

# Fracción del ancho disponible que ocupa la figura.
DEFAULT_SCALE_FRACTION = 0.7


@dataclass(frozen=True)
class MorphState:
    start_kind: ShapeKind
    end_kind: ShapeKind
    progress: float = 0.0
    # 0..1; el ángulo efectivo es float_phase * 2π
    float_phase: float = 0.0


def clamp01(v: float) -> float:
    if v < 0.0:
        return 0.0
    if v > 1.0:
        return 1.0
    return float(v)


def lerp_point(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def float_noise(index: int, float_phase: float) -> Point:
    """Desplazamiento de flotado para la partícula `index` (|dx|,|dy| <= 0.008)."""
    t = float_phase * 2.0 * math.pi
    return (
        FLOAT_AMPLITUDE * math.sin(t + index * FLOAT_STEP_X),
        FLOAT_AMPLITUDE * math.cos(t + index * FLOAT_STEP_Y),
    )


def interpolate(start: PointSet, end: PointSet, progress: float, float_phase: float, index: int) -> Point:
    x, y = lerp_point(start[index], end[index], progress)
    nx, ny = float_noise(index, float_phase)
    return (x + nx, y + ny)


def ease_in_out(t: float) -> float:
    """Cubic ease-in-out sobre [0,1] (t fuera de rango se recorta)."""
    t = clamp01(t)
    if t < 0.5:
        return 4.0 * t * t * t
    u = -2.0 * t + 2.0
    return 1.0 - (u * u * u) / 2.0


def ping_pong(elapsed_ms: float, period_ms: float) -> float:
    """Fase 0 -> 1 en `period_ms`, luego 1 -> 0, y así sucesivamente."""
    if period_ms <= 0:
        return 0.0
    cycles = max(0.0, float(elapsed_ms)) / float(period_ms)
    whole = int(cycles)
    frac = cycles - whole
    return 1.0 - frac if whole % 2 else frac


@dataclass(frozen=True)
class RenderTransform:
    scale: float
    offset_x: float
    offset_y: float

    @staticmethod
    def for_size(width: float, height: float, fraction: float = DEFAULT_SCALE_FRACTION) -> "RenderTransform":
        # Cuadrado de lado fraction*ancho, centrado en la región.
        scale = float(width) * float(fraction)
        return RenderTransform(
            scale=scale,
            offset_x=(float(width) - scale) / 2.0,
            offset_y=(float(height) - scale) / 2.0,
        )

    def to_screen(self, p: Point) -> Point:
        return (self.offset_x + p[0] * self.scale, self.offset_y + p[1] * self.scale)
