"""Target point layouts (normalized [0,1] space) for every shape.

Each layout is a closed-form walk over a fixed polygon/ellipse; point i of
one shape always pairs with point i of the next, so the morph needs no
correspondence matching. Everything here is deterministic except the
'loading' cloud.

The output length is always PARTICLE_COUNT: short layouts repeat their last
point, long ones are truncated.
"""

from __future__ import annotations

import math
import random
from typing import Callable, List, Optional, Tuple

from areawiz.core.shapes import ShapeKind
from areawiz.core.version import PARTICLE_COUNT

Point = Tuple[float, float]
PointSet = List[Point]

# Esquinas / constantes (unidad normalizada)
RECT_CORNERS: tuple[Point, ...] = ((0.2, 0.2), (0.8, 0.2), (0.8, 0.8), (0.2, 0.8))
TRIANGLE_CORNERS: tuple[Point, ...] = ((0.5, 0.2), (0.8, 0.8), (0.2, 0.8))
TRAPEZOID_CORNERS: tuple[Point, ...] = ((0.35, 0.3), (0.65, 0.3), (0.8, 0.8), (0.2, 0.8))

CIRCLE_CENTER: Point = (0.5, 0.5)
CIRCLE_RADIUS = 0.35

CYLINDER_RX = 0.3
CYLINDER_RY = 0.05
CYLINDER_TOP_Y = 0.25
CYLINDER_BOTTOM_Y = 0.75
CYLINDER_ELLIPSE_PTS = 40
CYLINDER_SIDE_PTS = 20

CONE_ARC_BULGE = 0.05

BOX_FRONT: tuple[Point, ...] = ((0.25, 0.35), (0.65, 0.35), (0.65, 0.75), (0.25, 0.75))
BOX_DEPTH: Point = (0.15, -0.15)
BOX_EDGE_PTS = 10
BOX_CONNECTOR_PTS = 10


def _edge(a: Point, b: Point, n: int) -> PointSet:
    """n puntos de a hacia b (incluye a, excluye b)."""
    if n <= 0:
        return []
    ax, ay = a
    dx, dy = b[0] - ax, b[1] - ay
    return [(ax + dx * (i / n), ay + dy * (i / n)) for i in range(n)]


def _polygon(corners: tuple[Point, ...], per_edge: int) -> PointSet:
    pts: PointSet = []
    for i, a in enumerate(corners):
        b = corners[(i + 1) % len(corners)]
        pts.extend(_edge(a, b, per_edge))
    return pts


def _ellipse(cx: float, cy: float, rx: float, ry: float, n: int) -> PointSet:
    pts: PointSet = []
    for i in range(n):
        theta = (i / n) * 2.0 * math.pi
        pts.append((cx + rx * math.cos(theta), cy + ry * math.sin(theta)))
    return pts


def _loading(n: int, rng: Optional[random.Random]) -> PointSet:
    r = rng or random
    return [(r.random(), r.random()) for _ in range(n)]


def _circle(n: int) -> PointSet:
    cx, cy = CIRCLE_CENTER
    return _ellipse(cx, cy, CIRCLE_RADIUS, CIRCLE_RADIUS, n)


def _rectangle(n: int) -> PointSet:
    return _polygon(RECT_CORNERS, n // 4)


def _triangle(n: int) -> PointSet:
    return _polygon(TRIANGLE_CORNERS, n // 3)


def _trapezoid(n: int) -> PointSet:
    return _polygon(TRAPEZOID_CORNERS, n // 4)


def _cone(n: int) -> PointSet:
    side = n // 3
    apex, right, left = TRIANGLE_CORNERS
    pts = _edge(apex, right, side)
    # Base curva: media elipse de derecha a izquierda, abombada hacia abajo.
    width = right[0] - left[0]
    for i in range(side):
        theta = (i / side) * math.pi
        pts.append((
            right[0] - width * (1.0 - math.cos(theta)) / 2.0,
            right[1] + CONE_ARC_BULGE * math.sin(theta),
        ))
    pts.extend(_edge(left, apex, side))
    return pts


def _cylinder(n: int) -> PointSet:
    cx = 0.5
    pts = _ellipse(cx, CYLINDER_TOP_Y, CYLINDER_RX, CYLINDER_RY, CYLINDER_ELLIPSE_PTS)
    pts += _ellipse(cx, CYLINDER_BOTTOM_Y, CYLINDER_RX, CYLINDER_RY, CYLINDER_ELLIPSE_PTS)
    for x in (cx - CYLINDER_RX, cx + CYLINDER_RX):
        pts += _edge((x, CYLINDER_TOP_Y), (x, CYLINDER_BOTTOM_Y), CYLINDER_SIDE_PTS)
    return pts


def _box(n: int) -> PointSet:
    ox, oy = BOX_DEPTH
    back = tuple((x + ox, y + oy) for x, y in BOX_FRONT)
    pts = _polygon(BOX_FRONT, BOX_EDGE_PTS)
    pts += _polygon(back, BOX_EDGE_PTS)
    for corner, shifted in zip(BOX_FRONT, back):
        pts += _edge(corner, shifted, BOX_CONNECTOR_PTS)
    return pts


_LAYOUTS: dict[ShapeKind, Callable[[int], PointSet]] = {
    ShapeKind.CIRCLE: _circle,
    ShapeKind.RECTANGLE: _rectangle,
    ShapeKind.TRIANGLE: _triangle,
    ShapeKind.TRAPEZOID: _trapezoid,
    ShapeKind.CONE: _cone,
    ShapeKind.CYLINDER: _cylinder,
    ShapeKind.BOX: _box,
}


def fit_to_count(points: PointSet, n: int = PARTICLE_COUNT) -> PointSet:
    """Ajusta el largo a n: repite el último punto o trunca."""
    out = list(points[:n])
    if out:
        last = out[-1]
        out.extend([last] * (n - len(out)))
    return out


def generate_outline(
    kind: ShapeKind,
    *,
    n: int = PARTICLE_COUNT,
    rng: Optional[random.Random] = None,
) -> PointSet:
    """PointSet de exactamente n puntos para la figura.

    `rng` solo se usa para 'loading' (tests pueden fijar la semilla).
    """
    if kind is ShapeKind.LOADING:
        pts = _loading(n, rng)
    else:
        pts = _LAYOUTS[kind](n)
    return fit_to_count(pts, n)
