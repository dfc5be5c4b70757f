"""Match sorter orchestrator: rank, filter, sort, project."""

import time
from collections.abc import Sequence
from functools import cmp_to_key
from typing import Generic, TypeVar

from matchsorter.errors import UnsupportedItemError
from matchsorter.keys import RankingInfo, get_highest_ranking_prepared
from matchsorter.observability import get_logger
from matchsorter.ranking import (
    LowercaseBuffer,
    PreparedQuery,
    Ranking,
    get_match_ranking,
    get_match_ranking_prepared,
)
from matchsorter.sorter.comparator import default_base_sort, sort_ranked_values
from matchsorter.sorter.metrics import MatchSorterMetrics
from matchsorter.sorter.models import MatchSorterOptions, RankedItem, SupportsMatchStr


logger = get_logger(__name__)

T = TypeVar("T")


def as_match_str(item: object, index: int = 0) -> str:
    """Return the string an item is ranked by when no keys are set.

    Args:
        item: A string or an object implementing as_match_str().
        index: Position of the item, used in the error message.

    Returns:
        String to rank.

    Raises:
        UnsupportedItemError: If the item offers no string form.
    """
    if isinstance(item, str):
        return item
    if isinstance(item, SupportsMatchStr):
        return item.as_match_str()
    raise UnsupportedItemError(item, index)


def rank_item(item: object, query: str, keep_diacritics: bool = False) -> Ranking:
    """Rank an item directly, without keys."""
    return get_match_ranking(as_match_str(item), query, keep_diacritics)


class MatchSorter(Generic[T]):
    """Ranks items against a query and returns them best first.

    Runs three phases per call:
        RANK_AND_FILTER -> SORT -> PROJECT

    Each call owns a fresh scratch buffer, so one MatchSorter can be
    reused for many queries.
    """

    def __init__(
        self,
        options: MatchSorterOptions[T] | None = None,
        metrics: MatchSorterMetrics | None = None,
    ) -> None:
        """Initialize the sorter.

        Args:
            options: Keys, threshold and sort configuration.
            metrics: Optional metrics instance.
        """
        self._options: MatchSorterOptions[T] = options or MatchSorterOptions()
        self._metrics = metrics or MatchSorterMetrics.get_instance()
        self._log = logger.bind(
            component="match_sorter",
            keys=len(self._options.keys),
            key_names=[key.name for key in self._options.keys],
        )

    @property
    def options(self) -> MatchSorterOptions[T]:
        """Get the options this sorter was built with."""
        return self._options

    def match(self, items: Sequence[T], query: str) -> list[T]:
        """Rank, filter and sort items for query.

        Args:
            items: Items to rank.
            query: Search query.

        Returns:
            Kept items, best match first.
        """
        return [ranked_item.item for ranked_item in self.match_ranked(items, query)]

    def match_ranked(self, items: Sequence[T], query: str) -> list[RankedItem[T]]:
        """Run the rank and sort phases, keeping the ranking metadata.

        Args:
            items: Items to rank.
            query: Search query.

        Returns:
            Kept items with their rankings, best match first.
        """
        self._log.debug(
            "match_sorter_started",
            items_in=len(items),
            query_chars=len(query),
        )
        self._metrics.record_call(len(items))

        start_rank = time.perf_counter()
        ranked = self.rank_items(items, query)
        ranking_ms = (time.perf_counter() - start_rank) * 1000
        self._metrics.record_ranking_duration(ranking_ms)

        start_sort = time.perf_counter()
        ordered = self.sort(ranked)
        sort_ms = (time.perf_counter() - start_sort) * 1000
        self._metrics.record_sort_duration(sort_ms)

        self._log.debug(
            "match_sorter_complete",
            items_in=len(items),
            items_matched=len(ordered),
            ranking_duration_ms=ranking_ms,
            sort_duration_ms=sort_ms,
        )

        return ordered

    def rank_items(self, items: Sequence[T], query: str) -> list[RankedItem[T]]:
        """Rank every item and keep those meeting their threshold.

        The effective threshold is the winning key's threshold when it
        set one, else the global threshold.

        Args:
            items: Items to rank.
            query: Search query.

        Returns:
            Kept items with ranking metadata, in input order.

        Raises:
            UnsupportedItemError: If no keys are configured and an item is
                neither a string nor implements as_match_str().
        """
        options = self._options
        prepared_query = PreparedQuery(query, options.keep_diacritics)
        buffer = LowercaseBuffer.for_query(query)

        kept: list[RankedItem[T]] = []
        for index, item in enumerate(items):
            info = self._rank_one(item, index, prepared_query, buffer)
            threshold = (
                info.key_threshold
                if info.key_threshold is not None
                else options.threshold
            )
            if info.rank >= threshold:
                kept.append(
                    RankedItem(
                        item=item,
                        index=index,
                        rank=info.rank,
                        ranked_value=info.ranked_value,
                        key_index=info.key_index,
                        key_threshold=info.key_threshold,
                    )
                )
                self._metrics.record_match(info.rank.tier)

        return kept

    def sort(self, ranked: list[RankedItem[T]]) -> list[RankedItem[T]]:
        """Order kept items with the configured sorter or comparator.

        Args:
            ranked: Kept items from rank_items.

        Returns:
            Items in output order.
        """
        if self._options.sorter is not None:
            return self._options.sorter(ranked)

        base_sort = self._options.base_sort or default_base_sort
        return sorted(
            ranked,
            key=cmp_to_key(lambda a, b: sort_ranked_values(a, b, base_sort)),
        )

    def _rank_one(
        self,
        item: T,
        index: int,
        prepared_query: PreparedQuery,
        buffer: LowercaseBuffer,
    ) -> RankingInfo:
        """Get the ranking info of a single item."""
        if self._options.keys:
            return get_highest_ranking_prepared(
                item, self._options.keys, prepared_query, buffer
            )

        value = as_match_str(item, index)
        return RankingInfo(
            rank=get_match_ranking_prepared(value, prepared_query, buffer),
            ranked_value=value,
            key_index=0,
        )


def match_sorter(
    items: Sequence[T],
    query: str,
    options: MatchSorterOptions[T] | None = None,
    metrics: MatchSorterMetrics | None = None,
) -> list[T]:
    """Return the items matching query, best match first.

    Pure-function entry point around MatchSorter.

    Args:
        items: Items to rank.
        query: Search query.
        options: Keys, threshold and sort configuration.
        metrics: Optional metrics instance.

    Returns:
        Kept items, best match first.
    """
    return MatchSorter(options, metrics).match(items, query)
