"""Unit tests for configuration schemas."""

import pytest
from pydantic import ValidationError

from matchsorter.config import KeyConfig, MatchSorterConfig
from matchsorter.ranking import Ranking


class TestKeyConfig:
    """Tests for KeyConfig."""

    @pytest.mark.unit
    def test_minimal(self) -> None:
        """Only a path is required."""
        config = KeyConfig(path="name")
        assert config.threshold is None
        assert config.max_ranking is None
        assert config.min_ranking is None

    @pytest.mark.unit
    def test_rankings_canonicalized(self) -> None:
        """Ranking names are stored in canonical form."""
        config = KeyConfig(
            path="name",
            threshold="Word-Starts-With",
            max_ranking="EQUAL",
            min_ranking="matches:1.5",
        )
        assert config.threshold == "word_starts_with"
        assert config.max_ranking == "equal"
        assert config.min_ranking == "matches:1.5"

    @pytest.mark.unit
    def test_unknown_ranking_rejected(self) -> None:
        """Unknown ranking names fail validation."""
        with pytest.raises(ValidationError) as exc_info:
            KeyConfig(path="name", threshold="almost")
        assert exc_info.value.errors()[0]["loc"] == ("threshold",)

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["", ".", " . "])
    def test_empty_path_rejected(self, path: str) -> None:
        """Paths without a segment fail validation."""
        with pytest.raises(ValidationError):
            KeyConfig(path=path)

    @pytest.mark.unit
    def test_extra_fields_forbidden(self) -> None:
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            KeyConfig.model_validate({"path": "name", "weight": 2})

    @pytest.mark.unit
    def test_frozen(self) -> None:
        """Configs are immutable."""
        config = KeyConfig(path="name")
        with pytest.raises(ValidationError):
            config.path = "other"  # type: ignore[misc]

    @pytest.mark.unit
    def test_to_key(self) -> None:
        """to_key applies every configured modifier."""
        key = KeyConfig(
            path="author.name",
            threshold="contains",
            max_ranking="starts_with",
            min_ranking="acronym",
        ).to_key()
        assert key.name == "author.name"
        assert key.threshold_value == Ranking.CONTAINS
        assert key.max_ranking_value == Ranking.STARTS_WITH
        assert key.min_ranking_value == Ranking.ACRONYM
        assert key.extract({"author": {"name": "Ada"}}) == ["Ada"]

    @pytest.mark.unit
    def test_to_key_defaults(self) -> None:
        """Unset modifiers keep the Key defaults."""
        key = KeyConfig(path="name").to_key()
        assert key.threshold_value is None
        assert key.max_ranking_value == Ranking.CASE_SENSITIVE_EQUAL
        assert key.min_ranking_value == Ranking.NO_MATCH


class TestMatchSorterConfig:
    """Tests for MatchSorterConfig."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """Defaults rank plain strings with the fuzzy threshold."""
        options = MatchSorterConfig().to_options()
        assert options.keys == ()
        assert options.threshold == Ranking.matches(1.0)
        assert options.keep_diacritics is False

    @pytest.mark.unit
    def test_from_mapping(self) -> None:
        """A parsed YAML mapping validates into options."""
        config = MatchSorterConfig.model_validate(
            {
                "keys": [{"path": "name"}, {"path": "tags", "threshold": "equal"}],
                "threshold": "contains",
                "keep_diacritics": True,
            }
        )
        options = config.to_options()
        assert len(options.keys) == 2
        assert options.keys[1].threshold_value == Ranking.EQUAL
        assert options.threshold == Ranking.CONTAINS
        assert options.keep_diacritics is True

    @pytest.mark.unit
    def test_invalid_threshold(self) -> None:
        """A bad global threshold fails validation."""
        with pytest.raises(ValidationError):
            MatchSorterConfig(threshold="matches:high")

    @pytest.mark.unit
    def test_nan_threshold_rejected(self) -> None:
        """A NaN fuzzy threshold fails validation instead of hiding matches."""
        with pytest.raises(ValidationError, match="must be between"):
            MatchSorterConfig(threshold="matches:nan")

    @pytest.mark.unit
    def test_nested_error_location(self) -> None:
        """Errors inside keys report their full location."""
        with pytest.raises(ValidationError) as exc_info:
            MatchSorterConfig.model_validate({"keys": [{"path": "a"}, {}]})
        assert exc_info.value.errors()[0]["loc"] == ("keys", 1, "path")
        assert exc_info.value.errors()[0]["type"] == "missing"
