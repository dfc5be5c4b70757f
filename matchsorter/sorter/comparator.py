"""Three-level ordering of ranked items."""

from typing import TypeVar

from matchsorter.sorter.models import BaseSort, RankedItem


T = TypeVar("T")


def default_base_sort(a: RankedItem[T], b: RankedItem[T]) -> int:
    """Order by ranked value using ordinal (code point) comparison."""
    if a.ranked_value < b.ranked_value:
        return -1
    if a.ranked_value > b.ranked_value:
        return 1
    return 0


def sort_ranked_values(
    a: RankedItem[T],
    b: RankedItem[T],
    base_sort: BaseSort[T] = default_base_sort,
) -> int:
    """Compare two ranked items for output order.

    Higher rank first, then lower key index, then base_sort. Ranks that
    cannot be ordered compare as equal and fall through to the next
    level.

    Args:
        a: First ranked item.
        b: Second ranked item.
        base_sort: Tiebreak for equal rank and key index.

    Returns:
        Negative if a sorts first, positive if b sorts first, else 0.
    """
    by_rank = b.rank.compare(a.rank)
    if by_rank:
        return by_rank
    if a.key_index != b.key_index:
        return -1 if a.key_index < b.key_index else 1
    return base_sort(a, b)
