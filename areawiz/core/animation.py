# File: areawiz/core/animation.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Estado de animación (morph + flotado) y guion de la intro.
# Notes: Sin Qt. El widget llama advance_frame(dt_ms) en cada tick; nada más muta el estado.
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from areawiz.core.shapes import ShapeKind
from areawiz.core.version import (
    DEFAULT_FLOAT_PERIOD_MS,
    DEFAULT_INTRO_MORPH_MS,
    DEFAULT_INTRO_STEP_MS,
    DEFAULT_MORPH_MS,
)
from areawiz.geom.morph import MorphState, ease_in_out, ping_pong
from areawiz.geom.outline import PointSet, generate_outline
from areawiz.utils.log import get_logger

log = get_logger(__name__)

INTRO_SHAPES: tuple[ShapeKind, ...] = (
    ShapeKind.TRIANGLE,
    ShapeKind.CONE,
    ShapeKind.CYLINDER,
    ShapeKind.RECTANGLE,
    ShapeKind.CIRCLE,
)
# Figura en la que se asienta la intro (selección inicial).
INTRO_FINAL_SHAPE = ShapeKind.TRIANGLE


@dataclass(frozen=True)
class IntroStep:
    kind: ShapeKind
    hold_ms: int
    morph_ms: int
    final: bool = False


def build_intro_steps(
    shapes: Sequence[ShapeKind] = INTRO_SHAPES,
    *,
    final_kind: ShapeKind = INTRO_FINAL_SHAPE,
    step_ms: int = DEFAULT_INTRO_STEP_MS,
    morph_ms: int = DEFAULT_INTRO_MORPH_MS,
) -> tuple[IntroStep, ...]:
    steps = [IntroStep(k, int(step_ms), int(morph_ms)) for k in shapes]
    # El último paso dura lo que su morph: al terminar vuelve la duración normal.
    steps.append(IntroStep(final_kind, int(morph_ms), int(morph_ms), final=True))
    return tuple(steps)


class IntroSequence:
    """Máquina de pasos: índice + tiempo transcurrido en el paso actual."""

    def __init__(self, steps: Sequence[IntroStep]) -> None:
        if not steps:
            raise ValueError("la intro necesita al menos un paso")
        self._steps = tuple(steps)
        self._index = -1
        self._elapsed = 0.0

    @property
    def steps(self) -> tuple[IntroStep, ...]:
        return self._steps

    @property
    def started(self) -> bool:
        return self._index >= 0

    @property
    def finished(self) -> bool:
        return self._index >= len(self._steps)

    @property
    def current(self) -> Optional[IntroStep]:
        if 0 <= self._index < len(self._steps):
            return self._steps[self._index]
        return None

    def start(self) -> IntroStep:
        self._index = 0
        self._elapsed = 0.0
        return self._steps[0]

    def stop(self) -> None:
        self._index = len(self._steps)

    def advance(self, dt_ms: float) -> List[IntroStep]:
        """Avanza el reloj; devuelve los pasos que empiezan en este tick."""
        started: List[IntroStep] = []
        if not self.started or self.finished:
            return started
        self._elapsed += max(0.0, float(dt_ms))
        while not self.finished and self._elapsed >= self._steps[self._index].hold_ms:
            self._elapsed -= self._steps[self._index].hold_ms
            self._index += 1
            if not self.finished:
                started.append(self._steps[self._index])
        return started


class MorphDriver:
    """Dueño único del estado de animación.

    Transiciones:
    - select_shape(kind): el destino actual pasa a ser el origen y arranca un morph.
    - advance_frame(dt_ms): avanza morph, flotado e intro.
    """

    def __init__(
        self,
        *,
        morph_ms: int = DEFAULT_MORPH_MS,
        float_period_ms: int = DEFAULT_FLOAT_PERIOD_MS,
        intro_steps: Optional[Sequence[IntroStep]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._morph_ms = max(1, int(morph_ms))
        self._float_period_ms = max(1, int(float_period_ms))
        self._rng = rng

        self.start_kind = ShapeKind.LOADING
        self.end_kind = ShapeKind.LOADING
        self._end_points: PointSet = generate_outline(ShapeKind.LOADING, rng=rng)
        self._start_points: PointSet = self._end_points

        self._duration_ms = self._morph_ms
        self._morph_elapsed = 0.0
        self._morph_running = False
        self._raw_progress = 0.0
        self._float_elapsed = 0.0

        self._intro = IntroSequence(intro_steps or build_intro_steps())
        self._revealed = False

        self.on_intro_finished: Optional[Callable[[], None]] = None

    # ---------------------------
    # Lectura
    # ---------------------------
    @property
    def state(self) -> MorphState:
        return MorphState(
            start_kind=self.start_kind,
            end_kind=self.end_kind,
            progress=ease_in_out(self._raw_progress),
            float_phase=ping_pong(self._float_elapsed, self._float_period_ms),
        )

    @property
    def start_points(self) -> PointSet:
        return self._start_points

    @property
    def end_points(self) -> PointSet:
        return self._end_points

    @property
    def morphing(self) -> bool:
        return self._morph_running

    @property
    def intro_running(self) -> bool:
        return self._intro.started and not self._revealed

    @property
    def revealed(self) -> bool:
        """True cuando la intro ya entregó el control al usuario."""
        return self._revealed

    @property
    def morph_ms(self) -> int:
        return self._morph_ms

    # ---------------------------
    # Transiciones
    # ---------------------------
    def start_intro(self) -> None:
        if self._intro.started:
            return
        step = self._intro.start()
        log.debug("Intro: inicio (%d pasos)", len(self._intro.steps))
        self._run_step(step)

    def skip_intro(self, kind: Optional[ShapeKind] = None) -> None:
        """Salta directo al estado asentado (sin animar), en `kind` o la figura final de la intro."""
        final = kind if kind is not None and kind.selectable else self._intro.steps[-1].kind
        self._intro.stop()
        self._end_points = generate_outline(final, rng=self._rng)
        self._start_points = self._end_points
        self.start_kind = final
        self.end_kind = final
        self._morph_running = False
        self._raw_progress = 1.0
        self._reveal()

    def select_shape(self, kind: ShapeKind) -> bool:
        """Pide un morph hacia `kind`. Ignorado durante la intro o si ya es el destino."""
        if not self._revealed:
            return False
        if kind is ShapeKind.LOADING or kind == self.end_kind:
            return False
        log.debug("Morph %s -> %s", self.end_kind.value, kind.value)
        self._begin(kind, self._morph_ms)
        return True

    def advance_frame(self, dt_ms: float) -> MorphState:
        dt = max(0.0, float(dt_ms))
        self._float_elapsed += dt

        if self._morph_running:
            self._morph_elapsed += dt
            if self._morph_elapsed >= self._duration_ms:
                self._morph_elapsed = float(self._duration_ms)
                self._morph_running = False
            self._raw_progress = self._morph_elapsed / float(self._duration_ms)

        for step in self._intro.advance(dt):
            self._run_step(step)

        return self.state

    # ---------------------------
    # Internos
    # ---------------------------
    def _run_step(self, step: IntroStep) -> None:
        log.debug("Intro: paso %s (%d ms)", step.kind.value, step.morph_ms)
        self._begin(step.kind, step.morph_ms)
        if step.final:
            self._reveal()

    def _begin(self, kind: ShapeKind, duration_ms: int) -> None:
        self.start_kind = self.end_kind
        self._start_points = self._end_points
        self.end_kind = kind
        self._end_points = generate_outline(kind, rng=self._rng)
        self._duration_ms = max(1, int(duration_ms))
        self._morph_elapsed = 0.0
        self._raw_progress = 0.0
        self._morph_running = True

    def _reveal(self) -> None:
        if self._revealed:
            return
        self._revealed = True
        log.debug("Intro: terminada")
        cb = self.on_intro_finished
        if cb is not None:
            cb()
