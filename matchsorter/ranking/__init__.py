"""Ranking engine: string preparation and match tier classification.

This module turns a (candidate, query) pair into a single ordered
Ranking value, from exact equality down to a fuzzy sub-score.
"""

from matchsorter.ranking.classifier import (
    PreparedQuery,
    classify,
    get_acronym,
    get_match_ranking,
    get_match_ranking_prepared,
)
from matchsorter.ranking.closeness import get_closeness_ranking
from matchsorter.ranking.models import Ranking, Tier
from matchsorter.ranking.normalizer import (
    LowercaseBuffer,
    PreparedText,
    lower_text,
    lowercase_into,
    prepare_text,
    prepare_value_for_comparison,
    strip_marks,
)


__all__ = [
    "LowercaseBuffer",
    "PreparedQuery",
    "PreparedText",
    "Ranking",
    "Tier",
    "classify",
    "get_acronym",
    "get_closeness_ranking",
    "get_match_ranking",
    "get_match_ranking_prepared",
    "lower_text",
    "lowercase_into",
    "prepare_text",
    "prepare_value_for_comparison",
    "strip_marks",
]
