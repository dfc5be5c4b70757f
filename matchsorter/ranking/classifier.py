"""Tier classification of a single candidate against a query."""

from dataclasses import dataclass, field

from matchsorter.ranking.closeness import get_closeness_ranking
from matchsorter.ranking.constants import ACRONYM_DELIMITERS, WORD_BOUNDARY
from matchsorter.ranking.models import Ranking
from matchsorter.ranking.normalizer import (
    LowercaseBuffer,
    lower_text,
    lowercase_into,
    prepare_value_for_comparison,
)


def get_acronym(text: str) -> str:
    """Build the acronym of text.

    The first character is always kept. After that, a character is kept
    when it follows a space or hyphen and is not one itself, so runs of
    delimiters contribute nothing.

    Args:
        text: Source string.

    Returns:
        Acronym, empty for empty input.
    """
    if not text:
        return ""

    letters = [text[0]]
    previous = text[0]
    for char in text[1:]:
        if previous in ACRONYM_DELIMITERS and char not in ACRONYM_DELIMITERS:
            letters.append(char)
        previous = char
    return "".join(letters)


@dataclass(frozen=True)
class PreparedQuery:
    """A query prepared once for repeated classification.

    Attributes:
        query: Original query text.
        keep_diacritics: Whether diacritics were preserved.
        prepared: Query after diacritics handling.
        lower: Lowered prepared query.
        char_count: Number of characters in lower.
    """

    query: str
    keep_diacritics: bool = False
    prepared: str = field(init=False)
    lower: str = field(init=False)
    char_count: int = field(init=False)

    def __post_init__(self) -> None:
        prepared = prepare_value_for_comparison(self.query, self.keep_diacritics)
        lower = lower_text(prepared)
        object.__setattr__(self, "prepared", prepared)
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "char_count", len(lower))


def _starts_word(candidate: str, query: str, first: int) -> bool:
    """Check every occurrence from first onwards for a preceding space."""
    position = first
    while position >= 0:
        if position > 0 and candidate[position - 1] == WORD_BOUNDARY:
            return True
        position = candidate.find(query, position + 1)
    return False


def get_match_ranking_prepared(
    candidate: str,
    prepared_query: PreparedQuery,
    buffer: LowercaseBuffer,
) -> Ranking:
    """Classify a candidate against an already prepared query.

    Args:
        candidate: Raw candidate string.
        prepared_query: Query prepared with the same keep_diacritics flag.
        buffer: Scratch buffer that receives the lowered candidate.

    Returns:
        Ranking of the candidate.
    """
    prepared = prepare_value_for_comparison(candidate, prepared_query.keep_diacritics)

    if prepared_query.char_count > len(prepared):
        return Ranking.NO_MATCH

    if prepared == prepared_query.prepared:
        return Ranking.CASE_SENSITIVE_EQUAL

    lower = lowercase_into(prepared, buffer)
    query_lower = prepared_query.lower

    first = lower.find(query_lower)
    if first == 0:
        if len(lower) == len(query_lower):
            return Ranking.EQUAL
        return Ranking.STARTS_WITH
    if first > 0:
        if _starts_word(lower, query_lower, first):
            return Ranking.WORD_STARTS_WITH
        return Ranking.CONTAINS

    if prepared_query.char_count == 1:
        return Ranking.NO_MATCH

    if query_lower in get_acronym(lower):
        return Ranking.ACRONYM

    return get_closeness_ranking(lower, query_lower)


def get_match_ranking(
    candidate: str,
    query: str,
    keep_diacritics: bool = False,
) -> Ranking:
    """Classify how well candidate matches query.

    Convenience wrapper for one-off comparisons; batch callers should
    prepare the query once and use get_match_ranking_prepared.

    Args:
        candidate: String being ranked.
        query: Search query.
        keep_diacritics: Compare accented characters as-is.

    Returns:
        Ranking of the candidate.
    """
    prepared_query = PreparedQuery(query, keep_diacritics)
    return get_match_ranking_prepared(
        candidate, prepared_query, LowercaseBuffer.for_query(query)
    )


classify = get_match_ranking
