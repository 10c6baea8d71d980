"""
Shared test fixtures.

Qt runs offscreen; the window gets fake clipboard and dialog services so no
real message box or file dialog ever opens.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from singleclickcopy.config import AppConfig
from singleclickcopy.errors import ClipboardError
from singleclickcopy.state import AppState


class FakeClipboard:
    def __init__(self):
        self.copied = []
        self.fail = False

    def copy_text(self, text):
        if self.fail:
            raise ClipboardError("Could not copy the item to the clipboard")
        self.copied.append(text)


class FakeDialogs:
    """Records every message and answers questions/file dialogs from presets."""

    def __init__(self):
        self.messages = []
        self.answer_yes = True
        self.open_path = None
        self.save_path = None

    def _record(self, kind, title, text):
        self.messages.append((kind, title, text))

    def show_information_message(self, title, text, parent=None):
        self._record("info", title, text)

    def show_warning_message(self, title, text, parent=None):
        self._record("warning", title, text)

    def show_critical_message(self, title, text, parent=None):
        self._record("critical", title, text)

    def ask_yes_no(self, title, text, parent=None):
        self._record("question", title, text)
        return self.answer_yes

    def show_about(self, title, text, parent=None):
        self._record("about", title, text)

    def ask_open_path(self, parent=None):
        return self.open_path

    def ask_save_path(self, parent=None):
        return self.save_path


@pytest.fixture
def config():
    return AppConfig(log_to_file=False)


@pytest.fixture
def app_state(config, tmp_path):
    return AppState(config, cwd=tmp_path)


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


@pytest.fixture
def fake_dialogs():
    return FakeDialogs()
