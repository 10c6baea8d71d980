import logging
from typing import Optional

from . import __version__, storage
from .config import AppConfig
from .errors import StorageError
from .item_list import ItemList

logger = logging.getLogger(__name__)


class AppState:
    """Centralized application state management.

    Owns the item list, config and version, and the implicit load at
    startup / save at shutdown against the default list file. Open and
    Save As go through item_list directly and never touch default_path.
    """

    def __init__(self, config: Optional[AppConfig] = None, cwd=None):
        self.config = config or AppConfig()
        self.version = __version__
        self.item_list = ItemList()
        self.default_path = self.config.default_list_path(cwd)

    @property
    def title(self) -> str:
        return f"{self.config.app_name} {self.version}"

    def startup(self) -> Optional[StorageError]:
        if not self.default_path.exists():
            logger.info(f"No saved list at {self.default_path}, starting empty")
            return None
        try:
            self.item_list.load(self.default_path)
        except StorageError as e:
            logger.exception(f"⚠ Could not load saved list {self.default_path}: {e}")
            return e
        return None

    def shutdown(self) -> Optional[StorageError]:
        try:
            if len(self.item_list) > 0:
                self.item_list.save(self.default_path)
            elif storage.remove_file(self.default_path):
                logger.info(f"List is empty, removed {self.default_path}")
        except StorageError as e:
            logger.exception(f"⚠ Could not persist list to {self.default_path}: {e}")
            return e
        return None
