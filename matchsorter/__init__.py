"""Fuzzy string ranking and sorting.

Ranks candidate strings against a query using a fixed hierarchy of
match tiers (exact, case-insensitive, prefix, word prefix, substring,
acronym, fuzzy) and sorts items from best to worst match.
"""

from matchsorter.errors import MatchSorterError, UnsupportedItemError
from matchsorter.keys import Key, RankingInfo, get_highest_ranking
from matchsorter.ranking import Ranking, Tier, classify, get_match_ranking
from matchsorter.sorter import (
    MatchSorter,
    MatchSorterOptions,
    RankedItem,
    SupportsMatchStr,
    match_sorter,
)


__version__ = "0.1.0"

__all__ = [
    "Key",
    "MatchSorter",
    "MatchSorterError",
    "MatchSorterOptions",
    "RankedItem",
    "Ranking",
    "RankingInfo",
    "SupportsMatchStr",
    "Tier",
    "UnsupportedItemError",
    "__version__",
    "classify",
    "get_highest_ranking",
    "get_match_ranking",
    "match_sorter",
]
