"""Tests for the morph driver and the intro step machine."""

import random

import pytest

from areawiz.core.animation import (
    INTRO_SHAPES,
    IntroSequence,
    IntroStep,
    MorphDriver,
    build_intro_steps,
)
from areawiz.core.shapes import ShapeKind


@pytest.fixture
def driver():
    return MorphDriver(morph_ms=800, float_period_ms=3000, rng=random.Random(0))


class TestIntroSequence:
    def test_default_steps(self):
        steps = build_intro_steps()
        assert [s.kind for s in steps[:-1]] == list(INTRO_SHAPES)
        assert all(s.hold_ms == 560 and s.morph_ms == 500 for s in steps[:-1])
        assert steps[-1] == IntroStep(ShapeKind.TRIANGLE, 500, 500, final=True)

    def test_requires_steps(self):
        with pytest.raises(ValueError):
            IntroSequence([])

    def test_idle_until_started(self):
        seq = IntroSequence(build_intro_steps())
        assert seq.advance(10000) == []
        assert not seq.started

    def test_one_step_per_hold(self):
        seq = IntroSequence(build_intro_steps())
        assert seq.start().kind is ShapeKind.TRIANGLE
        assert seq.advance(559) == []
        assert [s.kind for s in seq.advance(1)] == [ShapeKind.CONE]

    def test_large_tick_spans_several_steps(self):
        seq = IntroSequence(build_intro_steps())
        seq.start()
        started = seq.advance(1200)
        assert [s.kind for s in started] == [ShapeKind.CONE, ShapeKind.CYLINDER]

    def test_finishes_after_final_step(self):
        seq = IntroSequence(build_intro_steps())
        seq.start()
        seq.advance(5 * 560 + 500)
        assert seq.finished
        assert seq.current is None


class TestMorphDriver:
    def test_initial_state(self, driver):
        s = driver.state
        assert s.start_kind is ShapeKind.LOADING
        assert s.end_kind is ShapeKind.LOADING
        assert s.progress == 0.0
        assert len(driver.start_points) == 120

    def test_selection_ignored_before_reveal(self, driver):
        assert not driver.select_shape(ShapeKind.CIRCLE)
        driver.start_intro()
        assert not driver.select_shape(ShapeKind.CIRCLE)

    def test_skip_intro_settles(self, driver):
        calls = []
        driver.on_intro_finished = lambda: calls.append(1)
        driver.skip_intro()
        s = driver.state
        assert driver.revealed
        assert s.start_kind is s.end_kind is ShapeKind.TRIANGLE
        assert s.progress == 1.0
        assert calls == [1]

    def test_skip_intro_to_given_shape(self, driver):
        driver.skip_intro(ShapeKind.CONE)
        assert driver.state.end_kind is ShapeKind.CONE

    def test_select_and_advance(self, driver):
        driver.skip_intro()
        old_end = driver.end_points
        assert driver.select_shape(ShapeKind.CIRCLE)
        assert driver.start_points is old_end
        s = driver.state
        assert (s.start_kind, s.end_kind, s.progress) == (ShapeKind.TRIANGLE, ShapeKind.CIRCLE, 0.0)

        assert driver.advance_frame(400).progress == pytest.approx(0.5)
        assert driver.morphing
        assert driver.advance_frame(400).progress == 1.0
        assert not driver.morphing
        # sigue en 1 aunque pase el tiempo
        assert driver.advance_frame(1000).progress == 1.0

    def test_same_shape_is_ignored(self, driver):
        driver.skip_intro()
        assert not driver.select_shape(ShapeKind.TRIANGLE)
        assert not driver.select_shape(ShapeKind.LOADING)

    def test_reselect_mid_morph_starts_from_previous_target(self, driver):
        driver.skip_intro()
        driver.select_shape(ShapeKind.CIRCLE)
        driver.advance_frame(200)
        driver.select_shape(ShapeKind.BOX)
        s = driver.state
        assert (s.start_kind, s.end_kind, s.progress) == (ShapeKind.CIRCLE, ShapeKind.BOX, 0.0)

    def test_float_phase_ping_pongs(self, driver):
        driver.skip_intro()
        assert driver.advance_frame(1500).float_phase == pytest.approx(0.5)
        assert driver.advance_frame(1500).float_phase == pytest.approx(1.0)
        assert driver.advance_frame(1500).float_phase == pytest.approx(0.5)

    def test_negative_dt_is_ignored(self, driver):
        driver.skip_intro()
        driver.select_shape(ShapeKind.CIRCLE)
        assert driver.advance_frame(-50).progress == 0.0


class TestIntroScript:
    def test_first_step_leaves_loading(self, driver):
        driver.start_intro()
        s = driver.state
        assert (s.start_kind, s.end_kind) == (ShapeKind.LOADING, ShapeKind.TRIANGLE)
        assert driver.intro_running
        # morph de intro: 500 ms
        assert driver.advance_frame(250).progress == pytest.approx(0.5)

    def test_walks_the_sequence_and_reveals(self, driver):
        calls = []
        driver.on_intro_finished = lambda: calls.append(driver.state.end_kind)
        driver.start_intro()

        seen = [driver.state.end_kind]
        for _ in range(5):
            driver.advance_frame(560)
            seen.append(driver.state.end_kind)

        assert seen == list(INTRO_SHAPES) + [ShapeKind.TRIANGLE]
        assert driver.state.start_kind is ShapeKind.CIRCLE
        assert driver.revealed
        assert not driver.intro_running
        assert calls == [ShapeKind.TRIANGLE]

        driver.advance_frame(500)
        assert driver.state.progress == 1.0
        # tras la intro: duración normal
        assert driver.select_shape(ShapeKind.BOX)
        assert driver.advance_frame(400).progress == pytest.approx(0.5)

    def test_start_intro_twice_is_noop(self, driver):
        driver.start_intro()
        driver.advance_frame(100)
        driver.start_intro()
        assert driver.state.end_kind is ShapeKind.TRIANGLE
        assert driver.state.progress > 0.0
