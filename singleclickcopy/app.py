import logging
import sys

from PyQt5 import QtCore, QtWidgets

from .config import AppConfig
from .logging_ import setup_logging
from .main_window import MainWindow
from .state import AppState

logger = logging.getLogger(__name__)


def initialize_application(argv=None):
    """Return the running QApplication, creating it with high-DPI scaling."""
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication(argv if argv is not None else sys.argv)


def main(argv=None, config=None):
    config = config or AppConfig()
    setup_logging(config)
    app = initialize_application(argv)
    app.setApplicationName(config.app_name)

    state = AppState(config)
    load_error = state.startup()
    win = MainWindow(state)
    win.show()
    if load_error is not None:
        win.services.dialogs.show_warning_message(
            "Open file error",
            f"Could not load the saved list \"{state.default_path.name}\":\n{load_error}",
            parent=win)
    logger.info(f"{state.title} started with {len(state.item_list)} items")
    return app.exec_()
