"""Ranking tiers and the ranking value type."""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from matchsorter.ranking.constants import MAX_FUZZY_SCORE, MIN_FUZZY_SCORE


class Tier(IntEnum):
    """Match quality classes, from worst to best.

    - NO_MATCH: The query was not found at all
    - MATCHES: In-order fuzzy character match, refined by a sub-score
    - ACRONYM: The query is part of the candidate's acronym
    - CONTAINS: The query is a substring of the candidate
    - WORD_STARTS_WITH: A space-delimited word starts with the query
    - STARTS_WITH: The candidate starts with the query
    - EQUAL: Case-insensitive equality
    - CASE_SENSITIVE_EQUAL: Exact equality of the prepared strings
    """

    NO_MATCH = 0
    MATCHES = 1
    ACRONYM = 2
    CONTAINS = 3
    WORD_STARTS_WITH = 4
    STARTS_WITH = 5
    EQUAL = 6
    CASE_SENSITIVE_EQUAL = 7


@dataclass(frozen=True, eq=False, repr=False)
class Ranking:
    """Quality of a match between a candidate and a query.

    Rankings of different tiers are ordered by tier alone, so every fixed
    tier outranks any fuzzy sub-score. Two MATCHES rankings are ordered by
    their sub-score. The sub-score is meaningful only for MATCHES and is
    0.0 for every other tier.

    Attributes:
        tier: Match quality class.
        score: Fuzzy sub-score in (1.0, 2.0] for MATCHES, else 0.0.
    """

    tier: Tier
    score: float = 0.0

    CASE_SENSITIVE_EQUAL: ClassVar["Ranking"]
    EQUAL: ClassVar["Ranking"]
    STARTS_WITH: ClassVar["Ranking"]
    WORD_STARTS_WITH: ClassVar["Ranking"]
    CONTAINS: ClassVar["Ranking"]
    ACRONYM: ClassVar["Ranking"]
    NO_MATCH: ClassVar["Ranking"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tier", Tier(self.tier))

    @classmethod
    def matches(cls, score: float) -> "Ranking":
        """Build a fuzzy ranking with the given sub-score.

        Args:
            score: Sub-score, expected in (1.0, 2.0].

        Returns:
            Ranking in the MATCHES tier.
        """
        return cls(Tier.MATCHES, float(score))

    @classmethod
    def parse(cls, text: str) -> "Ranking":
        """Parse a ranking from its textual form.

        Accepts tier names in any case with ``-``, ``_`` or spaces as
        separators (``"word-starts-with"``, ``"CONTAINS"``), plus
        ``"matches"`` and ``"matches:<score>"``.

        Args:
            text: Textual ranking.

        Returns:
            Parsed ranking.

        Raises:
            ValueError: If the name is not a known tier, or the score is
                not a finite number within [1.0, 2.0].
        """
        name, _, raw_score = text.strip().partition(":")
        normalized = name.strip().upper().replace("-", "_").replace(" ", "_")

        try:
            tier = Tier[normalized]
        except KeyError:
            allowed = ", ".join(t.name.lower() for t in Tier)
            msg = f"Unknown ranking '{text}'. Expected one of: {allowed}"
            raise ValueError(msg) from None

        if tier is Tier.MATCHES:
            if not raw_score.strip():
                return cls.matches(MIN_FUZZY_SCORE)
            try:
                score = float(raw_score)
            except ValueError:
                msg = f"Invalid fuzzy sub-score in ranking '{text}'"
                raise ValueError(msg) from None
            # NaN fails both comparisons.
            if not MIN_FUZZY_SCORE <= score <= MAX_FUZZY_SCORE:
                msg = (
                    f"Fuzzy sub-score in ranking '{text}' must be between "
                    f"{MIN_FUZZY_SCORE} and {MAX_FUZZY_SCORE}"
                )
                raise ValueError(msg)
            return cls.matches(score)

        if raw_score:
            msg = f"Only the matches tier takes a sub-score, got '{text}'"
            raise ValueError(msg)

        return _FIXED_RANKINGS[tier]

    @property
    def is_match(self) -> bool:
        """Whether this ranking is anything other than NO_MATCH."""
        return self.tier != Tier.NO_MATCH

    def _sort_key(self) -> tuple[int, float]:
        if self.tier == Tier.MATCHES:
            return (self.tier, self.score)
        return (self.tier, 0.0)

    def compare(self, other: "Ranking") -> int:
        """Three-way comparison.

        Unordered fuzzy payloads (NaN) compare as equal so that sorting
        stays well-defined.

        Args:
            other: Ranking to compare against.

        Returns:
            1 if self is better, -1 if worse, 0 otherwise.
        """
        if self > other:
            return 1
        if self < other:
            return -1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __lt__(self, other: "Ranking") -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "Ranking") -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "Ranking") -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: "Ranking") -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __repr__(self) -> str:
        if self.tier == Tier.MATCHES:
            return f"Ranking.matches({self.score!r})"
        return f"Ranking.{self.tier.name}"

    def __str__(self) -> str:
        if self.tier == Tier.MATCHES:
            return f"matches:{self.score!r}"
        return self.tier.name.lower()


_FIXED_RANKINGS: dict[Tier, Ranking] = {
    tier: Ranking(tier) for tier in Tier if tier is not Tier.MATCHES
}

Ranking.CASE_SENSITIVE_EQUAL = _FIXED_RANKINGS[Tier.CASE_SENSITIVE_EQUAL]
Ranking.EQUAL = _FIXED_RANKINGS[Tier.EQUAL]
Ranking.STARTS_WITH = _FIXED_RANKINGS[Tier.STARTS_WITH]
Ranking.WORD_STARTS_WITH = _FIXED_RANKINGS[Tier.WORD_STARTS_WITH]
Ranking.CONTAINS = _FIXED_RANKINGS[Tier.CONTAINS]
Ranking.ACRONYM = _FIXED_RANKINGS[Tier.ACRONYM]
Ranking.NO_MATCH = _FIXED_RANKINGS[Tier.NO_MATCH]
