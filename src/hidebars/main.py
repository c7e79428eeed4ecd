"""hidebars GUI entrypoint."""

from __future__ import annotations

import sys

from PySide6 import QtWidgets

from hidebars.config import HideBarsSettings, load_settings
from hidebars.core.app import build_store
from hidebars.logging import configure_logging, get_logger
from hidebars.ui.shell import MainWindow


def main() -> None:
    settings: HideBarsSettings = load_settings()
    configure_logging(settings)
    logger = get_logger("main")

    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow(settings, build_store(settings))
    window.show()
    logger.info("hidebars demo ready")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
