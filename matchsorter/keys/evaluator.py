"""Best-ranking selection across all values extracted by a list of keys."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from matchsorter.keys.key import Key
from matchsorter.ranking import (
    LowercaseBuffer,
    PreparedQuery,
    Ranking,
    get_match_ranking_prepared,
)


if TYPE_CHECKING:
    from matchsorter.sorter.models import MatchSorterOptions


T = TypeVar("T")


@dataclass(frozen=True)
class RankingInfo:
    """Best match of one item against one query.

    When nothing matched, rank is NO_MATCH and ranked_value/key_index
    hold sentinel values that callers must not rely on.

    Attributes:
        rank: Best ranking over all extracted values.
        ranked_value: Value that produced rank.
        key_index: Position of ranked_value in the flattened value list.
        key_threshold: Threshold of the key that produced rank.
    """

    rank: Ranking
    ranked_value: str
    key_index: int
    key_threshold: Ranking | None = None


NO_MATCH_INFO = RankingInfo(rank=Ranking.NO_MATCH, ranked_value="", key_index=0)


def get_item_values(item: T, key: Key[T]) -> list[str]:
    """Extract the candidate strings an item exposes through key."""
    return key.extract(item)


def get_highest_ranking_prepared(
    item: T,
    keys: Sequence[Key[T]],
    prepared_query: PreparedQuery,
    buffer: LowercaseBuffer,
) -> RankingInfo:
    """Rank every value of every key and keep the best one.

    Values are visited in key order, and in each key's own order. The
    best ranking is replaced only by a strictly better one, so on ties
    the earliest flattened position wins.

    Args:
        item: Item being ranked.
        keys: Keys to extract values with.
        prepared_query: Query prepared once for the whole batch.
        buffer: Scratch buffer for lowered candidates.

    Returns:
        RankingInfo of the best value, or NO_MATCH_INFO.
    """
    best = NO_MATCH_INFO
    position = 0

    for key in keys:
        for value in key.extract(item):
            rank = get_match_ranking_prepared(value, prepared_query, buffer)
            rank = key.apply_bounds(rank)

            if rank > best.rank:
                best = RankingInfo(
                    rank=rank,
                    ranked_value=value,
                    key_index=position,
                    key_threshold=key.threshold_value,
                )
            position += 1

    return best


def get_highest_ranking(
    item: T,
    keys: Sequence[Key[T]],
    query: str,
    options: "MatchSorterOptions[T]",
) -> RankingInfo:
    """Find the best ranking of item for query across keys.

    Args:
        item: Item being ranked.
        keys: Keys to extract values with.
        query: Search query.
        options: Options supplying keep_diacritics.

    Returns:
        RankingInfo of the best value.
    """
    prepared_query = PreparedQuery(query, options.keep_diacritics)
    return get_highest_ranking_prepared(
        item, keys, prepared_query, LowercaseBuffer.for_query(query)
    )
