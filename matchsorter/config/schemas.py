"""Configuration schema for match sorter runs."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from matchsorter.keys import Key
from matchsorter.ranking import Ranking
from matchsorter.sorter import MatchSorterOptions


class StrictBaseModel(BaseModel):
    """Base model with strict, immutable defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")


def _normalize_ranking(value: str | None) -> str | None:
    if value is None:
        return None
    return str(Ranking.parse(value))


class KeyConfig(StrictBaseModel):
    """Configuration for a single key.

    Attributes:
        path: Dotted path of the value(s) to rank, e.g. ``author.name``.
        threshold: Per-key threshold, overriding the global one.
        max_ranking: Ceiling for rankings produced by this key.
        min_ranking: Floor that matches of this key are promoted to.
    """

    path: Annotated[str, Field(min_length=1, max_length=200)]
    threshold: str | None = None
    max_ranking: str | None = None
    min_ranking: str | None = None

    @field_validator("threshold", "max_ranking", "min_ranking")
    @classmethod
    def validate_ranking(cls, value: str | None) -> str | None:
        """Ensure ranking names parse, and store them in canonical form."""
        return _normalize_ranking(value)

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        """Ensure the path has at least one non-empty segment."""
        if not any(part.strip() for part in value.split(".")):
            msg = "Key path must contain at least one segment"
            raise ValueError(msg)
        return value.strip()

    def to_key(self) -> Key[Any]:
        """Build the Key described by this configuration.

        Returns:
            Key reading this path with the configured modifiers.
        """
        key: Key[Any] = Key.from_path(self.path)
        if self.threshold is not None:
            key = key.threshold(Ranking.parse(self.threshold))
        if self.max_ranking is not None:
            key = key.max_ranking(Ranking.parse(self.max_ranking))
        if self.min_ranking is not None:
            key = key.min_ranking(Ranking.parse(self.min_ranking))
        return key


class MatchSorterConfig(StrictBaseModel):
    """Top-level match sorter configuration.

    Attributes:
        keys: Keys to rank records by; empty ranks plain strings.
        threshold: Global minimum ranking.
        keep_diacritics: Compare accented characters as-is.
    """

    keys: list[KeyConfig] = Field(default_factory=list)
    threshold: str = "matches"
    keep_diacritics: bool = False

    @field_validator("threshold")
    @classmethod
    def validate_threshold(cls, value: str) -> str:
        """Ensure the global threshold parses."""
        return str(Ranking.parse(value))

    def to_options(self) -> MatchSorterOptions[Any]:
        """Build runtime options from this configuration.

        Returns:
            MatchSorterOptions with keys built from their paths.
        """
        return MatchSorterOptions(
            keys=tuple(key.to_key() for key in self.keys),
            threshold=Ranking.parse(self.threshold),
            keep_diacritics=self.keep_diacritics,
        )
