"""
Demo entry point — bootstraps QApplication and AppWindow.
"""
import sys

from PySide6.QtWidgets import QApplication

from pin_input.config.settings import settings
from pin_input.utils.logger import logger
from pin_input.ui.app_window import AppWindow


def main() -> int:
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} (PySide6 demo)")

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(settings.APP_NAME)
    app.setApplicationVersion(settings.APP_VERSION)

    window = AppWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
