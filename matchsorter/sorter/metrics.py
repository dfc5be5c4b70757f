"""Metrics collection for the match sorter pipeline."""

from dataclasses import dataclass, field
from typing import ClassVar

from matchsorter.ranking import Tier


@dataclass
class MatchSorterMetrics:
    """Metrics for match_sorter calls.

    Attributes:
        calls: Number of match_sorter calls.
        items_in: Total items ranked.
        items_matched: Total items kept after thresholding.
        matched_by_tier: Kept item count per tier name.
        ranking_duration_ms: Time spent ranking in the last call.
        sort_duration_ms: Time spent sorting in the last call.
        total_ranking_ms: Time spent ranking across all calls.
    """

    calls: int = 0
    items_in: int = 0
    items_matched: int = 0
    matched_by_tier: dict[str, int] = field(default_factory=dict)
    ranking_duration_ms: float = 0.0
    sort_duration_ms: float = 0.0
    total_ranking_ms: float = 0.0

    _instance: ClassVar["MatchSorterMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "MatchSorterMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_call(self, items_in: int) -> None:
        """Record the start of a call.

        Args:
            items_in: Number of items passed in.
        """
        self.calls += 1
        self.items_in += items_in

    def record_match(self, tier: Tier) -> None:
        """Record an item that passed the threshold.

        Args:
            tier: Tier of the item's ranking.
        """
        self.items_matched += 1
        name = tier.name.lower()
        self.matched_by_tier[name] = self.matched_by_tier.get(name, 0) + 1

    def record_ranking_duration(self, duration_ms: float) -> None:
        """Record ranking phase duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.ranking_duration_ms = duration_ms
        self.total_ranking_ms += duration_ms

    def record_sort_duration(self, duration_ms: float) -> None:
        """Record sort phase duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.sort_duration_ms = duration_ms

    def match_rate(self) -> float:
        """Fraction of ranked items that were kept."""
        if not self.items_in:
            return 0.0
        return self.items_matched / self.items_in

    def to_dict(self) -> dict[str, object]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "calls": self.calls,
            "items_in": self.items_in,
            "items_matched": self.items_matched,
            "matched_by_tier": dict(self.matched_by_tier),
            "match_rate": self.match_rate(),
            "ranking_duration_ms": self.ranking_duration_ms,
            "sort_duration_ms": self.sort_duration_ms,
            "total_ranking_ms": self.total_ranking_ms,
        }
