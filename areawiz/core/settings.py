# File: areawiz/core/settings.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Preferencias de usuario (JSON) + defaults por proyecto (areawiz_settings.json -> env).
# Notes: No depende de Qt; guarda en ~/.areawiz/settings.json (Windows/Linux/mac).
from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from areawiz.core.shapes import ShapeKind, coerce_shape_kind

log = logging.getLogger(__name__)


def settings_dir() -> Path:
    """Carpeta de settings del usuario (ruta explícita, sin QStandardPaths)."""
    return Path.home() / ".areawiz"


def settings_path() -> Path:
    return settings_dir() / "settings.json"


# ------------------------------
# Env helpers (tolerantes)
# ------------------------------
def env_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    try:
        raw = os.environ.get(name, "")
        v = int(str(raw).strip()) if str(raw).strip() != "" else int(default)
    except Exception:
        v = int(default)

    if min_value is not None:
        v = max(int(min_value), int(v))
    if max_value is not None:
        v = min(int(max_value), int(v))
    return int(v)


def env_float(name: str, default: float, *, min_value: float = -1e9, max_value: float = 1e9) -> float:
    try:
        v = float(os.getenv(name, str(default)).strip())
    except Exception:
        return float(default)
    if v < float(min_value):
        return float(min_value)
    if v > float(max_value):
        return float(max_value)
    return float(v)


def env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = str(raw).strip().lower()
    if s in ("1", "true", "yes", "y", "on"):
        return True
    if s in ("0", "false", "no", "n", "off"):
        return False
    return bool(default)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Defaults reproducibles por proyecto (no por usuario) sin tocar el código.
PROJECT_SETTINGS_FILENAME = "areawiz_settings.json"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca areawiz_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


# clave JSON -> (env var, min, max)
_NUMERIC_KEYS: tuple[tuple[str, str, float, float], ...] = (
    ("animation.morph_ms", "AW_MORPH_MS", 50, 10000),
    ("animation.intro_morph_ms", "AW_INTRO_MORPH_MS", 50, 10000),
    ("animation.intro_step_ms", "AW_INTRO_STEP_MS", 50, 10000),
    ("animation.float_period_ms", "AW_FLOAT_PERIOD_MS", 100, 60000),
    ("animation.frame_ms", "AW_FRAME_MS", 5, 200),
    ("render.dot_radius", "AW_DOT_RADIUS", 0.5, 20.0),
    ("render.scale_fraction", "AW_SCALE_FRACTION", 0.1, 1.0),
)


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga areawiz_settings.json (si existe) y lo vuelca en variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa.
    - Si `prefer_env=False`, el JSON pisa la env var.
    - Valores fuera de rango o de tipo incorrecto se ignoran.

    Devuelve un dict con los valores *aplicados desde JSON*.
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("%s: se esperaba un objeto JSON", p)
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    for path, env_name, lo, hi in _NUMERIC_KEYS:
        v = _deep_get(data, path)
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            continue
        if lo <= v <= hi:
            applied[path] = v
            _set_env(env_name, v)

    skip = _deep_get(data, "ui.skip_intro")
    if isinstance(skip, bool):
        applied["ui.skip_intro"] = skip
        _set_env("AW_SKIP_INTRO", "1" if skip else "0")

    if applied:
        _log.info("Project settings aplicados desde %s: %s", p, applied)
    return applied


# ------------------------------
# User settings
# ------------------------------
_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
DEFAULT_PARTICLE_COLOR = "#ffffff"


@dataclass
class AppSettings:
    """Preferencias persistentes del usuario."""

    particle_color: str = DEFAULT_PARTICLE_COLOR
    # Figura seleccionada al cerrar (solo se usa si se salta la intro).
    last_shape: ShapeKind = ShapeKind.TRIANGLE

    # Geometry del QMainWindow (base64, sin depender de Qt).
    ui_main_geometry_b64: str = ""

    @classmethod
    def load(cls, path: Path | None = None) -> "AppSettings":
        p = path or settings_path()
        try:
            if not p.exists():
                return cls()
            data = json.loads(p.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                return cls()
            out = cls()
            out.particle_color = _coerce_color(data.get("particle_color", out.particle_color))
            out.last_shape = coerce_shape_kind(data.get("last_shape", out.last_shape.value))
            out.ui_main_geometry_b64 = str(data.get("ui_main_geometry_b64", "") or "")
            return out
        except Exception:
            log.debug("No se pudieron cargar settings: %s", p, exc_info=True)
            return cls()

    def save(self, path: Path | None = None) -> None:
        p = path or settings_path()
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            payload: Dict[str, Any] = {
                "schema_version": 1,
                "particle_color": _coerce_color(self.particle_color),
                "last_shape": coerce_shape_kind(self.last_shape).value,
                "ui_main_geometry_b64": str(self.ui_main_geometry_b64 or ""),
            }
            p.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except Exception:
            log.debug("No se pudieron guardar settings", exc_info=True)


def _coerce_color(v: Any) -> str:
    s = str(v or "").strip()
    if _HEX_COLOR.match(s):
        return s.lower()
    return DEFAULT_PARTICLE_COLOR
