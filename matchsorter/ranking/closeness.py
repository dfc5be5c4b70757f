"""Fuzzy closeness sub-score for in-order character matches."""

from matchsorter.ranking.constants import MAX_FUZZY_SCORE, MIN_FUZZY_SCORE
from matchsorter.ranking.models import Ranking


def get_closeness_ranking(candidate: str, query: str) -> Ranking:
    """Score how tightly the query's characters appear in the candidate.

    Each query character is searched for greedily, left to right, after
    the previous match. The spread between the first and last matched
    positions determines the sub-score: ``1 + 1/spread``, or the maximum
    sub-score when the spread is zero.

    Both strings are expected to be lowered already.

    Args:
        candidate: Lowered candidate string.
        query: Lowered query string.

    Returns:
        A MATCHES ranking, or NO_MATCH if some character is missing.
    """
    cursor = 0
    first_index = -1
    last_index = 0

    for char in query:
        position = candidate.find(char, cursor)
        if position < 0:
            return Ranking.NO_MATCH
        if first_index < 0:
            first_index = position
        last_index = position
        cursor = position + 1

    spread = last_index - max(first_index, 0)
    if spread == 0:
        return Ranking.matches(MAX_FUZZY_SCORE)
    return Ranking.matches(MIN_FUZZY_SCORE + 1.0 / spread)
