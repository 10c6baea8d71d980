"""Single Click Copy.

Keeps a small list of text snippets and copies the clicked one to the
clipboard. The list is restored from SingleClickCopyList.txt at startup and
written back on exit.
"""

__version__ = "1.0.0"

# Re-export the core model (avoid importing PyQt at package import time)
from .errors import (  # noqa: F401
    SingleClickCopyError,
    EmptyTextError,
    DuplicateError,
    ItemIndexError,
    EmptyListError,
    LineBreakError,
    StorageError,
    ClipboardError,
)
from .item_list import ItemList  # noqa: F401
