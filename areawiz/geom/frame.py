"""Per-frame particle geometry (dots + faint mesh lines), Qt-free.

The Qt widget only paints what `build_frame` returns, so the selection rules
(which lines exist, where each dot lands) are testable without a display.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from areawiz.core.shapes import ShapeKind
from areawiz.geom.morph import DEFAULT_SCALE_FRACTION, MorphState, RenderTransform, interpolate, lerp_point
from areawiz.geom.outline import Point, PointSet

# Umbral (normalizado) para unir i con i-1 en la malla.
MESH_PROXIMITY = 0.2

Segment = Tuple[Point, Point]


@dataclass
class ParticleFrame:
    width: float
    height: float
    dots: List[Point] = field(default_factory=list)
    lines: List[Segment] = field(default_factory=list)


def _distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def mesh_links(start_kind: ShapeKind, start: PointSet, threshold: float = MESH_PROXIMITY) -> List[int]:
    """Índices i (>0) que se unen con i-1.

    Se mide sobre el layout *origen*, no sobre la posición interpolada.
    La nube de 'loading' no tiene malla.
    """
    if start_kind is ShapeKind.LOADING:
        return []
    return [i for i in range(1, len(start)) if _distance(start[i], start[i - 1]) < threshold]


def build_frame(
    state: MorphState,
    start: PointSet,
    end: PointSet,
    width: float,
    height: float,
    *,
    scale_fraction: float = DEFAULT_SCALE_FRACTION,
) -> ParticleFrame:
    tf = RenderTransform.for_size(width, height, scale_fraction)
    frame = ParticleFrame(width=float(width), height=float(height))

    count = min(len(start), len(end))
    for i in range(count):
        frame.dots.append(tf.to_screen(interpolate(start, end, state.progress, state.float_phase, i)))

    for i in mesh_links(state.start_kind, start):
        if i >= count:
            break
        # El extremo previo va sin flotado (igual que la malla original).
        prev = lerp_point(start[i - 1], end[i - 1], state.progress)
        frame.lines.append((frame.dots[i], tf.to_screen(prev)))
    return frame


def should_repaint(prev: Optional[MorphState], cur: MorphState) -> bool:
    """Redibujar si cambió el morph o si está en reposo (0/1: sigue el flotado)."""
    if prev is None:
        return True
    if prev.progress != cur.progress or prev.start_kind != cur.start_kind or prev.end_kind != cur.end_kind:
        return True
    return cur.progress == 0.0 or cur.progress == 1.0
