# File: areawiz/utils/log.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Logging centralizado (consola + archivo) y helpers.
# Notes: Idempotente; si no se puede abrir el archivo, queda solo consola.
from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False

LOG_FILENAME = "areawiz.log"


def setup_logging(log_dir: str | os.PathLike = "logs", level: int = logging.INFO) -> None:
    """Configura logging en consola + archivo.

    Nota:
        - No lanza excepción si no puede escribir el archivo; cae a consola.
        - AW_LOG_LEVEL (DEBUG/INFO/...) pisa el nivel recibido.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    raw_level = (os.environ.get("AW_LOG_LEVEL", "") or "").strip().upper()
    if raw_level:
        lvl = logging.getLevelName(raw_level)
        if isinstance(lvl, int):
            level = lvl

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Consola
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # Archivo
    try:
        d = Path(log_dir)
        d.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(d / LOG_FILENAME, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    except Exception as e:
        logging.getLogger(__name__).warning("No se pudo inicializar FileHandler: %s", e)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
