"""Key-based evaluation of items with multiple candidate strings."""

from matchsorter.keys.evaluator import (
    NO_MATCH_INFO,
    RankingInfo,
    get_highest_ranking,
    get_highest_ranking_prepared,
    get_item_values,
)
from matchsorter.keys.key import Key


__all__ = [
    "NO_MATCH_INFO",
    "Key",
    "RankingInfo",
    "get_highest_ranking",
    "get_highest_ranking_prepared",
    "get_item_values",
]
