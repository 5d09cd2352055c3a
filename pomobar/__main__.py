"""Allow running Pomobar as a module: python -m pomobar."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .app import PomobarWindow


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("POMOBAR_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()

    app = QApplication(sys.argv)
    app.setApplicationName("Pomobar")
    app.setOrganizationName("Pomobar")
    app.setQuitOnLastWindowClosed(False)

    window = PomobarWindow()
    window.show()
    logging.getLogger(__name__).info("Pomobar ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
