# File: areawiz/app.py
# Project: AreaWiz
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Entry-point de la aplicación.
# Notes: Primero logging y settings de proyecto (env), después Qt.
from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from areawiz.core.settings import apply_project_settings
from areawiz.core.version import APP_NAME, APP_VERSION
from areawiz.ui.main_window import MainWindow
from areawiz.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def main() -> int:
    setup_logging()
    # Defaults por proyecto (repo-local): areawiz_settings.json
    apply_project_settings(logger=log, prefer_env=True)
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    w = MainWindow()
    w.show()
    log.info("AreaWiz iniciado (v%s)", APP_VERSION)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
