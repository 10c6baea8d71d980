from .errors import EmptyTextError, LineBreakError

LINE_BREAKS = ("\n", "\r")


class ItemValidator:
    """Centralized validation and normalization for item text.

    An item is a single line of text that is non-empty once leading and
    trailing whitespace is removed. The list file has no escaping, so line
    breaks are not allowed. Uniqueness is checked by the list itself.
    """

    @staticmethod
    def normalize(text: str) -> str:
        if not text:
            return ""
        return text.strip()

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return len(cls.normalize(text)) > 0

    @staticmethod
    def is_single_line(text: str) -> bool:
        return not any(ch in text for ch in LINE_BREAKS)

    @classmethod
    def require(cls, text: str) -> str:
        """Return 'text' unchanged, or raise if it is blank or multi-line."""
        if not cls.is_valid(text):
            raise EmptyTextError("Item text is empty")
        if not cls.is_single_line(text):
            raise LineBreakError("Item text must be a single line")
        return text
