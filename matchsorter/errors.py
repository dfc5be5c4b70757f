"""Error types raised at the edges of the match sorter.

Ranking itself is total and never raises; these errors describe caller
mistakes that cannot be turned into a ranking.
"""


class MatchSorterError(Exception):
    """Base exception for match sorter errors."""


class UnsupportedItemError(MatchSorterError, TypeError):
    """Raised when an item cannot be ranked without keys.

    Without keys an item must be a string or implement
    ``as_match_str()``.
    """

    def __init__(self, item: object, index: int) -> None:
        """Initialize the error.

        Args:
            item: Offending item.
            index: Position of the item in the input.
        """
        self.item_type = type(item).__name__
        self.index = index
        super().__init__(
            f"Item at index {index} of type {self.item_type} cannot be ranked "
            "without keys; pass keys or implement as_match_str()"
        )

    def to_dict(self) -> dict[str, str | int]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_class": type(self).__name__,
            "item_type": self.item_type,
            "index": self.index,
        }
