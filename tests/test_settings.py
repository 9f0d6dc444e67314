"""Tests for env helpers, project settings and user settings."""

import json

import pytest

from areawiz.core.settings import (
    DEFAULT_PARTICLE_COLOR,
    PROJECT_SETTINGS_FILENAME,
    AppSettings,
    apply_project_settings,
    env_bool,
    env_float,
    env_int,
    find_project_settings_path,
)
from areawiz.core.shapes import ShapeKind

_ENV_KEYS = (
    "AW_MORPH_MS",
    "AW_INTRO_MORPH_MS",
    "AW_INTRO_STEP_MS",
    "AW_FLOAT_PERIOD_MS",
    "AW_FRAME_MS",
    "AW_DOT_RADIUS",
    "AW_SCALE_FRACTION",
    "AW_SKIP_INTRO",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv("") registra el valor previo para restaurarlo al final.
    for k in _ENV_KEYS:
        monkeypatch.setenv(k, "")
    return monkeypatch


class TestEnvHelpers:
    def test_env_int(self, clean_env):
        assert env_int("AW_FRAME_MS", 16) == 16
        clean_env.setenv("AW_FRAME_MS", "1000")
        assert env_int("AW_FRAME_MS", 16, min_value=5, max_value=200) == 200
        clean_env.setenv("AW_FRAME_MS", "x")
        assert env_int("AW_FRAME_MS", 16) == 16

    def test_env_float(self, clean_env):
        clean_env.setenv("AW_DOT_RADIUS", "2.5")
        assert env_float("AW_DOT_RADIUS", 3.0) == 2.5
        clean_env.setenv("AW_DOT_RADIUS", "0")
        assert env_float("AW_DOT_RADIUS", 3.0, min_value=0.5) == 0.5
        clean_env.setenv("AW_DOT_RADIUS", "abc")
        assert env_float("AW_DOT_RADIUS", 3.0) == 3.0

    def test_env_bool(self, clean_env):
        assert env_bool("AW_SKIP_INTRO", True) is True
        clean_env.setenv("AW_SKIP_INTRO", "yes")
        assert env_bool("AW_SKIP_INTRO", False) is True
        clean_env.setenv("AW_SKIP_INTRO", "off")
        assert env_bool("AW_SKIP_INTRO", True) is False


class TestProjectSettings:
    def _write(self, root, data):
        p = root / PROJECT_SETTINGS_FILENAME
        p.write_text(json.dumps(data), encoding="utf-8")
        return p

    def test_found_from_subdir(self, tmp_path):
        p = self._write(tmp_path, {})
        sub = tmp_path / "a" / "b"
        sub.mkdir(parents=True)
        assert find_project_settings_path(sub) == p.resolve()

    def test_applies_valid_values(self, tmp_path, clean_env):
        import os

        self._write(tmp_path, {
            "animation": {"morph_ms": 1200, "frame_ms": 1000, "float_period_ms": "slow"},
            "render": {"scale_fraction": 0.5},
            "ui": {"skip_intro": True},
        })
        applied = apply_project_settings(tmp_path)
        assert applied == {
            "animation.morph_ms": 1200,
            "render.scale_fraction": 0.5,
            "ui.skip_intro": True,
        }
        assert os.environ["AW_MORPH_MS"] == "1200"
        assert os.environ["AW_SCALE_FRACTION"] == "0.5"
        assert os.environ["AW_SKIP_INTRO"] == "1"
        assert os.environ["AW_FRAME_MS"] == ""

    def test_env_wins_when_preferred(self, tmp_path, clean_env):
        import os

        self._write(tmp_path, {"animation": {"morph_ms": 1200}})
        clean_env.setenv("AW_MORPH_MS", "900")
        apply_project_settings(tmp_path, prefer_env=True)
        assert os.environ["AW_MORPH_MS"] == "900"
        apply_project_settings(tmp_path, prefer_env=False)
        assert os.environ["AW_MORPH_MS"] == "1200"

    def test_broken_json_is_ignored(self, tmp_path, clean_env):
        (tmp_path / PROJECT_SETTINGS_FILENAME).write_text("{nope", encoding="utf-8")
        assert apply_project_settings(tmp_path) == {}


class TestAppSettings:
    def test_missing_file_gives_defaults(self, tmp_path):
        s = AppSettings.load(tmp_path / "settings.json")
        assert s.particle_color == DEFAULT_PARTICLE_COLOR
        assert s.last_shape is ShapeKind.TRIANGLE

    def test_save_and_load(self, tmp_path):
        p = tmp_path / "cfg" / "settings.json"
        AppSettings(particle_color="#00FFCC", last_shape=ShapeKind.CONE, ui_main_geometry_b64="abc=").save(p)
        s = AppSettings.load(p)
        assert s.particle_color == "#00ffcc"
        assert s.last_shape is ShapeKind.CONE
        assert s.ui_main_geometry_b64 == "abc="

    def test_bad_values_are_coerced(self, tmp_path):
        p = tmp_path / "settings.json"
        p.write_text(json.dumps({"particle_color": "red", "last_shape": "loading"}), encoding="utf-8")
        s = AppSettings.load(p)
        assert s.particle_color == DEFAULT_PARTICLE_COLOR
        assert s.last_shape is ShapeKind.TRIANGLE

    def test_non_dict_json(self, tmp_path):
        p = tmp_path / "settings.json"
        p.write_text("[1, 2]", encoding="utf-8")
        assert AppSettings.load(p) == AppSettings()
