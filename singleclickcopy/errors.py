class SingleClickCopyError(Exception):
    """Base exception for Single Click Copy."""


class EmptyTextError(SingleClickCopyError):
    """Item text is empty or blank."""


class DuplicateError(SingleClickCopyError):
    """Item text already exists in the list."""


class LineBreakError(SingleClickCopyError):
    """Item text spans more than one line."""


class ItemIndexError(SingleClickCopyError, IndexError):
    """No item selected, or the index is out of range."""


class EmptyListError(SingleClickCopyError):
    """Operation needs at least one item in the list."""


class StorageError(SingleClickCopyError):
    """Reading or writing a list file failed."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class ClipboardError(SingleClickCopyError):
    """Clipboard operation failed."""
