"""Geometry helpers.

This package is intentionally small and Qt-free: outline layouts,
morph/float interpolation and the per-frame dot/line geometry.
"""

from __future__ import annotations

from .outline import Point, PointSet, fit_to_count, generate_outline
from .morph import MorphState, RenderTransform, interpolate

__all__ = [
    "Point",
    "PointSet",
    "fit_to_count",
    "generate_outline",
    "MorphState",
    "RenderTransform",
    "interpolate",
]
