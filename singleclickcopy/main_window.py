"""Main window: translates user gestures into ItemList operations.

Button, list and menu handlers perform one list operation, show a message
for any failure and then hand focus back to the text box.
"""

import functools
import logging
import os

from PyQt5 import QtCore, QtGui, QtWidgets

from .container import ServiceContainer
from .errors import (
    ClipboardError,
    DuplicateError,
    EmptyListError,
    EmptyTextError,
    ItemIndexError,
    LineBreakError,
    StorageError,
)

logger = logging.getLogger(__name__)


def refocus(handler):
    """Run 'handler', then always focus the text box, even on failure."""
    @functools.wraps(handler)
    def wrapper(self, *args):
        try:
            return handler(self)
        finally:
            self.item_edit.setFocus()
    return wrapper


class ClickCopyListWidget(QtWidgets.QListWidget):
    """List widget that reports every left click, including on empty space."""

    surfaceClicked = QtCore.pyqtSignal()

    def mouseReleaseEvent(self, event):
        super().mouseReleaseEvent(event)
        if event.button() == QtCore.Qt.LeftButton:
            self.surfaceClicked.emit()


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, state, services=None, parent=None):
        super().__init__(parent)
        self.state = state
        self.item_list = state.item_list
        self.services = services or ServiceContainer()
        self.setWindowTitle(state.config.app_name)
        self.setMinimumSize(300, 300)
        self.setWindowIcon(self.style().standardIcon(QtWidgets.QStyle.SP_FileDialogContentsView))
        self._build_ui()
        self._build_menus()
        self.refresh()
        self.item_edit.setFocus()

    def _build_ui(self):
        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)
        self.setCentralWidget(central)

        top_row = QtWidgets.QHBoxLayout()
        self.item_edit = QtWidgets.QLineEdit()
        self.item_edit.setPlaceholderText("Item text")
        self.item_edit.returnPressed.connect(self.on_add)
        self.add_button = QtWidgets.QPushButton("&Add")
        self.add_button.clicked.connect(self.on_add)
        self.edit_button = QtWidgets.QPushButton("&Edit")
        self.edit_button.clicked.connect(self.on_edit)
        top_row.addWidget(self.item_edit, 1)
        top_row.addWidget(self.add_button)
        top_row.addWidget(self.edit_button)
        layout.addLayout(top_row)

        self.list_widget = ClickCopyListWidget()
        self.list_widget.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.list_widget.currentRowChanged.connect(self.on_selection_changed)
        self.list_widget.surfaceClicked.connect(self.on_list_clicked)
        layout.addWidget(self.list_widget, 1)

        bottom_row = QtWidgets.QHBoxLayout()
        self.delete_button = QtWidgets.QPushButton("&Delete")
        self.delete_button.clicked.connect(self.on_delete)
        self.clear_button = QtWidgets.QPushButton("&Clear all")
        self.clear_button.clicked.connect(self.on_clear_all)
        bottom_row.addWidget(self.delete_button)
        bottom_row.addWidget(self.clear_button)
        layout.addLayout(bottom_row)

        self.status_label = QtWidgets.QLabel()
        self.statusBar().addWidget(self.status_label)

    def _build_menus(self):
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction("&New", self.on_new, QtGui.QKeySequence(QtGui.QKeySequence.New))
        file_menu.addAction("&Open...", self.on_open, QtGui.QKeySequence(QtGui.QKeySequence.Open))
        file_menu.addAction("Save &As...", self.on_save_as, QtGui.QKeySequence(QtGui.QKeySequence.SaveAs))
        file_menu.addSeparator()
        file_menu.addAction("E&xit", self.close)

        help_menu = self.menuBar().addMenu("&Help")
        help_menu.addAction("Headquarters @ Patreon", lambda: self.open_url(self.state.config.patreon_url))
        help_menu.addAction("Source code @ GitHub", lambda: self.open_url(self.state.config.source_url))
        help_menu.addAction("Original thread @ Reddit", lambda: self.open_url(self.state.config.thread_url))
        help_menu.addSeparator()
        help_menu.addAction("&About...", self.on_about)

    def selected_index(self):
        row = self.list_widget.currentRow()
        return row if row >= 0 else None

    def refresh(self, select_row=None):
        """Rebuild the list widget from the model and update the status bar."""
        self.list_widget.blockSignals(True)
        try:
            self.list_widget.clear()
            self.list_widget.addItems(self.item_list.items)
            if select_row is not None and 0 <= select_row < self.list_widget.count():
                self.list_widget.setCurrentRow(select_row)
        finally:
            self.list_widget.blockSignals(False)
        self.update_status()

    def update_status(self):
        self.status_label.setText(self.item_list.status_text())

    def show_info(self, title, text):
        self.services.dialogs.show_information_message(title, text, parent=self)

    @refocus
    def on_add(self):
        text = self.item_edit.text()
        try:
            self.item_list.add(text)
        except EmptyTextError:
            self.show_info("No item text", "Please add item text")
            return
        except LineBreakError:
            self.show_info("Single line", "Item text must be a single line")
            return
        except DuplicateError:
            self.services.dialogs.show_warning_message("Duplicate", "Item already exists", parent=self)
            return
        self.item_edit.clear()
        self.refresh()

    @refocus
    def on_edit(self):
        index = self.selected_index()
        try:
            self.item_list.edit(index, self.item_edit.text())
        except EmptyTextError:
            self.show_info("No item text", "Please add item text to edit")
            return
        except LineBreakError:
            self.show_info("Single line", "Item text must be a single line")
            return
        except ItemIndexError:
            self.show_info("Select item", "Please select an item to edit")
            return
        self.refresh(select_row=index)

    @refocus
    def on_delete(self):
        try:
            self.item_list.remove(self.selected_index())
        except ItemIndexError:
            self.show_info("Select item", "Please select an item to delete")
            return
        self.refresh()

    @refocus
    def on_clear_all(self):
        count = len(self.item_list)
        if count == 0:
            self.show_info("Empty", "No items to clear")
            return
        question = f"Would you like to clear {count} item{'s' if count > 1 else ''}?"
        if not self.services.dialogs.ask_yes_no("Clear all", question, parent=self):
            return
        self.item_list.clear()
        self.refresh()

    @refocus
    def on_list_clicked(self):
        try:
            text = self.item_list.copy(self.selected_index())
        except EmptyListError:
            self.show_info("No items", "Please add items to copy")
            return
        except ItemIndexError:
            self.show_info("Select item", "Please select an item to copy")
            return
        self.update_status()
        try:
            self.services.clipboard.copy_text(text)
        except ClipboardError as e:
            logger.warning(f"Clipboard copy failed: {e}")
            self.services.dialogs.show_critical_message("Clipboard error", str(e), parent=self)

    def on_selection_changed(self, row):
        if row >= 0:
            self.item_edit.setText(self.item_list[row])

    @refocus
    def on_new(self):
        self.item_list.clear()
        self.refresh()

    @refocus
    def on_open(self):
        path = self.services.dialogs.ask_open_path(self)
        if not path:
            return
        try:
            self.item_list.load(path)
        except StorageError as e:
            self.services.dialogs.show_critical_message(
                "Open file error",
                f"Error when opening \"{os.path.basename(path)}\":\n{e}",
                parent=self)
        finally:
            self.refresh()

    @refocus
    def on_save_as(self):
        path = self.services.dialogs.ask_save_path(self)
        if not path:
            return
        name = os.path.basename(path)
        try:
            count = self.item_list.save(path)
        except StorageError as e:
            self.services.dialogs.show_critical_message(
                "Save file error", f"Error when saving to \"{name}\":\n{e}", parent=self)
            return
        self.show_info("Items saved", f"Saved {count} items to \"{name}\"")

    @refocus
    def on_about(self):
        config = self.state.config
        text = (
            f"<b>{self.state.title}</b><br><br>"
            "CC0 1.0 Universal (CC0 1.0) - Public Domain Dedication<br>"
            "https://creativecommons.org/publicdomain/zero/1.0/legalcode<br><br>"
            f"Source code: {config.source_url}"
        )
        self.services.dialogs.show_about(f"About {config.app_name}", text, parent=self)

    def open_url(self, url):
        if not QtGui.QDesktopServices.openUrl(QtCore.QUrl(url)):
            logger.warning(f"Could not open {url}")

    def closeEvent(self, event):
        error = self.state.shutdown()
        if error is not None:
            self.services.dialogs.show_critical_message(
                "Save file error", f"Could not save the list on exit:\n{error}", parent=self)
        event.accept()
