from dataclasses import dataclass

from . import clipboard as clipboard_mod
from . import dialogs as dialogs_mod


@dataclass
class ServiceContainer:
    clipboard: type = clipboard_mod
    dialogs: type = dialogs_mod
