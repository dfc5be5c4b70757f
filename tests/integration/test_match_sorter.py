"""Integration tests for match_sorter over realistic records."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from matchsorter import (
    Key,
    MatchSorterOptions,
    Ranking,
    match_sorter,
)
from matchsorter.config import load_config
from matchsorter.sorter import MatchSorterMetrics


pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def _reset_metrics() -> Iterator[None]:
    """Reset the metrics singleton around each test."""
    MatchSorterMetrics.reset()
    yield
    MatchSorterMetrics.reset()


CONTACTS: list[dict[str, Any]] = [
    {"name": "Grace Hopper", "email": "grace@navy.mil", "tags": ["cobol", "navy"]},
    {"name": "Ada Lovelace", "email": "ada@engine.org", "tags": ["analytical"]},
    {"name": "Alan Turing", "email": "alan@bletchley.uk", "tags": ["enigma"]},
    {"name": "Edsger Dijkstra", "email": "ewd@utexas.edu", "tags": ["algol"]},
    {"name": "Barbara Liskov", "email": "liskov@mit.edu", "tags": ["clu"]},
]

CITIES = [
    "Bogotá",
    "São Paulo",
    "San Francisco",
    "Santa Fe",
    "Frankfurt",
    "Zürich",
    "North-West Airlines Hub",
]


class TestStringLists:
    """match_sorter over plain string lists."""

    def test_city_search(self) -> None:
        """Diacritics are ignored and fuzzy matches trail the rest."""
        assert match_sorter(CITIES, "sao") == ["São Paulo", "San Francisco"]
        assert match_sorter(CITIES, "zurich") == ["Zürich"]
        assert match_sorter(CITIES, "san") == [
            "San Francisco",
            "Santa Fe",
            "North-West Airlines Hub",
        ]

    def test_keep_diacritics(self) -> None:
        """With keep_diacritics accents must match exactly."""
        options: MatchSorterOptions[str] = MatchSorterOptions(keep_diacritics=True)
        assert match_sorter(CITIES, "zurich", options) == []
        assert match_sorter(CITIES, "zür", options) == ["Zürich"]

    def test_acronym_search(self) -> None:
        """Acronyms of hyphenated and spaced words match."""
        assert match_sorter(CITIES, "nwah") == ["North-West Airlines Hub"]

    def test_hangul_with_accents(self) -> None:
        """An accented item with Hangul text is kept alongside its plain twin."""
        result = match_sorter(["서울 café", "서울 cafe"], "서울")
        assert result == ["서울 cafe", "서울 café"]

    def test_mixed_tiers(self) -> None:
        """Output walks down the tiers, best first."""
        result = match_sorter(CITIES, "fr")
        assert result == ["Frankfurt", "San Francisco"]


class TestRecords:
    """match_sorter over records with keys."""

    def test_multi_key_search(self) -> None:
        """Any key can produce the winning match, tags included."""
        options: MatchSorterOptions[dict[str, Any]] = MatchSorterOptions(
            keys=(Key.from_path("name"), Key.from_path("email"), Key.from_path("tags")),
        )
        result = match_sorter(CONTACTS, "al", options)
        assert [contact["name"] for contact in result] == [
            "Alan Turing",
            "Edsger Dijkstra",
            "Ada Lovelace",
            "Barbara Liskov",
            "Grace Hopper",
        ]

    def test_tag_threshold(self) -> None:
        """A strict key threshold hides weak tag matches."""
        options: MatchSorterOptions[dict[str, Any]] = MatchSorterOptions(
            keys=(
                Key.from_path("name"),
                Key.from_path("tags").threshold(Ranking.EQUAL),
            ),
        )
        assert [c["name"] for c in match_sorter(CONTACTS, "navy", options)] == [
            "Grace Hopper"
        ]
        assert match_sorter(CONTACTS, "nav", options) == []

    def test_from_config_file(self, tmp_path: Path) -> None:
        """A YAML config drives the same search."""
        path = tmp_path / "contacts.yaml"
        path.write_text(
            "threshold: contains\n"
            "keys:\n"
            "  - path: name\n"
            "  - path: email\n"
            "    max_ranking: contains\n"
        )
        options = load_config(path).to_options()
        result = match_sorter(CONTACTS, "liskov", options)
        assert [contact["name"] for contact in result] == ["Barbara Liskov"]

        metrics = MatchSorterMetrics.get_instance()
        assert metrics.calls == 1
        assert metrics.items_in == len(CONTACTS)
        assert metrics.matched_by_tier == {"word_starts_with": 1}
