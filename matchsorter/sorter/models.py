"""Data models for the match sorter pipeline."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar, runtime_checkable

from matchsorter.keys import Key
from matchsorter.ranking import Ranking


T = TypeVar("T")


@runtime_checkable
class SupportsMatchStr(Protocol):
    """Item that can be ranked directly when no keys are configured."""

    def as_match_str(self) -> str:
        """Return the string to rank this item by."""
        ...


@dataclass(frozen=True)
class RankedItem(Generic[T]):
    """An input item together with its best ranking.

    Attributes:
        item: The original item.
        index: Position of the item in the input sequence.
        rank: Best ranking of the item.
        ranked_value: Value that produced rank.
        key_index: Flattened position of ranked_value across keys.
        key_threshold: Threshold of the winning key, if it set one.
    """

    item: T
    index: int
    rank: Ranking
    ranked_value: str
    key_index: int
    key_threshold: Ranking | None = None


BaseSort = Callable[[RankedItem[T], RankedItem[T]], int]
Sorter = Callable[[list[RankedItem[T]]], list[RankedItem[T]]]

DEFAULT_THRESHOLD = Ranking.matches(1.0)


@dataclass(frozen=True)
class MatchSorterOptions(Generic[T]):
    """Configuration for one match_sorter call.

    Attributes:
        keys: Extraction keys; empty means items are ranked as strings.
        threshold: Minimum ranking an item needs to be kept.
        keep_diacritics: Compare accented characters as-is.
        base_sort: Final tiebreak comparator returning <0, 0 or >0.
            Defaults to ordinal comparison of ranked values.
        sorter: Replaces the whole sort step when set; receives and
            returns the full list of kept items.
    """

    keys: Sequence[Key[T]] = field(default_factory=tuple)
    threshold: Ranking = DEFAULT_THRESHOLD
    keep_diacritics: bool = False
    base_sort: BaseSort[T] | None = field(default=None, repr=False)
    sorter: Sorter[T] | None = field(default=None, repr=False)

    def __repr__(self) -> str:
        return (
            f"MatchSorterOptions(keys=[{len(self.keys)} key(s)], "
            f"threshold={self.threshold!r}, "
            f"keep_diacritics={self.keep_diacritics}, "
            f"base_sort={'<fn>' if self.base_sort else None}, "
            f"sorter={'<fn>' if self.sorter else None})"
        )
