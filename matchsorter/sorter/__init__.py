"""Match sorter pipeline: threshold filtering and deterministic ordering.

This module ranks every item against a query, keeps those that meet
their threshold, and orders them by rank, key position and a pluggable
tiebreak.
"""

from matchsorter.sorter.comparator import default_base_sort, sort_ranked_values
from matchsorter.sorter.metrics import MatchSorterMetrics
from matchsorter.sorter.models import (
    DEFAULT_THRESHOLD,
    MatchSorterOptions,
    RankedItem,
    SupportsMatchStr,
)
from matchsorter.sorter.pipeline import (
    MatchSorter,
    as_match_str,
    match_sorter,
    rank_item,
)


__all__ = [
    "DEFAULT_THRESHOLD",
    "MatchSorter",
    "MatchSorterMetrics",
    "MatchSorterOptions",
    "RankedItem",
    "SupportsMatchStr",
    "as_match_str",
    "default_base_sort",
    "match_sorter",
    "rank_item",
    "sort_ranked_values",
]
