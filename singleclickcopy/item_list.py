"""Ordered list of unique text items plus a copy counter.

This module has no Qt dependency. The window calls these operations and
turns the raised SingleClickCopyError subclasses into messages.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from . import storage
from .errors import DuplicateError, EmptyListError, ItemIndexError
from .validators import ItemValidator

logger = logging.getLogger(__name__)


class ItemList:
    """In-memory item collection with load/save to a line-oriented file."""

    def __init__(self, items=None):
        self._items: List[str] = []
        self.copy_count = 0
        for text in items or ():
            self.add(text)

    @property
    def items(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[self._check_index(index)]

    def __contains__(self, text) -> bool:
        return text in self._items

    def _check_index(self, index: Optional[int]) -> int:
        if index is None:
            raise ItemIndexError("No item selected")
        if not 0 <= index < len(self._items):
            raise ItemIndexError(f"Index {index} out of range for {len(self._items)} items")
        return index

    def add(self, text: str) -> None:
        ItemValidator.require(text)
        if text in self._items:
            raise DuplicateError(f"Item already exists: {text}")
        self._items.append(text)
        logger.debug(f"Added item #{len(self._items)}")

    def edit(self, index: Optional[int], new_text: str) -> None:
        # Uniqueness is deliberately not re-checked here, unlike add().
        ItemValidator.require(new_text)
        index = self._check_index(index)
        self._items[index] = new_text
        logger.debug(f"Edited item at index {index}")

    def remove(self, index: Optional[int]) -> str:
        index = self._check_index(index)
        removed = self._items.pop(index)
        logger.debug(f"Removed item at index {index}")
        return removed

    def clear(self) -> None:
        self._items.clear()

    def copy(self, index: Optional[int]) -> str:
        """Return the text at 'index' and count one copy.

        The caller puts the text on the clipboard. The counter is only
        incremented after a successful lookup.
        """
        if not self._items:
            raise EmptyListError("No items to copy")
        text = self._items[self._check_index(index)]
        self.copy_count += 1
        logger.debug(f"Copied item at index {index} (copy count {self.copy_count})")
        return text

    def load(self, path) -> int:
        """Append the non-blank, trimmed lines of 'path' to the list.

        Loaded lines are not deduplicated. If reading fails part way, the
        lines read so far stay in the list and StorageError propagates.
        """
        added = 0
        for line in storage.iter_lines(path):
            line = ItemValidator.normalize(line)
            if line:
                self._items.append(line)
                added += 1
        logger.info(f"Loaded {added} items from {path}")
        return added

    def save(self, path) -> int:
        count = storage.save_lines_atomic(self._items, path)
        logger.info(f"Saved {count} items to {path}")
        return count

    def status_summary(self) -> Tuple[int, int]:
        return len(self._items), self.copy_count

    def status_text(self) -> str:
        item_count, copy_count = self.status_summary()
        return f"Items in list: {item_count} / Copy count: {copy_count}"
