from PyQt5 import QtWidgets

FILE_FILTER = "Text files (*.txt);;All files (*.*)"


def show_critical_message(title, text, parent=None):
    msg = QtWidgets.QMessageBox(parent)
    msg.setWindowTitle(title)
    msg.setText(text)
    msg.setIcon(QtWidgets.QMessageBox.Critical)
    return msg.exec_()


def show_warning_message(title, text, parent=None):
    msg = QtWidgets.QMessageBox(parent)
    msg.setWindowTitle(title)
    msg.setText(text)
    msg.setIcon(QtWidgets.QMessageBox.Warning)
    return msg.exec_()


def show_question_message(title, text, buttons=QtWidgets.QMessageBox.Yes | QtWidgets.QMessageBox.No, parent=None):
    msg = QtWidgets.QMessageBox(parent)
    msg.setWindowTitle(title)
    msg.setText(text)
    msg.setStandardButtons(buttons)
    msg.setDefaultButton(QtWidgets.QMessageBox.Yes)
    msg.setIcon(QtWidgets.QMessageBox.Question)
    return msg.exec_()


def ask_yes_no(title, text, parent=None):
    return show_question_message(title, text, parent=parent) == QtWidgets.QMessageBox.Yes


def show_information_message(title, text, parent=None):
    msg = QtWidgets.QMessageBox(parent)
    msg.setWindowTitle(title)
    msg.setText(text)
    msg.setIcon(QtWidgets.QMessageBox.Information)
    msg.exec_()


def show_about(title, text, parent=None):
    QtWidgets.QMessageBox.about(parent, title, text)


def ask_open_path(parent=None):
    """Return the chosen file, or None if the dialog was cancelled."""
    path, _ = QtWidgets.QFileDialog.getOpenFileName(parent, "Open list", "", FILE_FILTER)
    return path or None


def ask_save_path(parent=None):
    path, _ = QtWidgets.QFileDialog.getSaveFileName(parent, "Save list as", "", FILE_FILTER)
    return path or None
