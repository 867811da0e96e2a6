"""ipatalk preview entry point.

This script can be invoked directly (``python -m ipatalk.main``) or
via the ``ipatalk-preview`` console script.  It initialises the Qt
application, creates the preview window and starts the event loop.
"""

from __future__ import annotations

import sys

from PyQt6.QtWidgets import QApplication

from .config import get_app_config
from .gui.main_window import PreviewWindow
from .utils.debug_logger import configure_debug_logger


def main() -> None:
    config = get_app_config()
    if config.get("logging", "debug_log", default=False):
        configure_debug_logger(config.get("logging", "log_dir"))
    app = QApplication(sys.argv)
    window = PreviewWindow(config)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
