"""Unit tests for the command-line interface."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from matchsorter import __version__
from matchsorter.cli import cli
from matchsorter.sorter import MatchSorterMetrics


@pytest.fixture(autouse=True)
def _reset_state() -> Iterator[None]:
    """Reset metrics and logging configuration around each test."""
    MatchSorterMetrics.reset()
    yield
    MatchSorterMetrics.reset()
    structlog.reset_defaults()


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


class TestRankCommand:
    """Tests for the rank command."""

    @pytest.mark.unit
    def test_fixed_tier(self, runner: CliRunner) -> None:
        """The tier name is printed."""
        result = runner.invoke(cli, ["rank", "San Francisco", "fran"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "word_starts_with"

    @pytest.mark.unit
    def test_fuzzy(self, runner: CliRunner) -> None:
        """Fuzzy rankings include the sub-score."""
        result = runner.invoke(cli, ["rank", "abcdef", "ace"])
        assert result.stdout.strip() == "matches:1.25"

    @pytest.mark.unit
    def test_keep_diacritics(self, runner: CliRunner) -> None:
        """--keep-diacritics compares accents as-is."""
        assert runner.invoke(cli, ["rank", "café", "cafe"]).stdout.strip() == (
            "case_sensitive_equal"
        )
        result = runner.invoke(cli, ["rank", "--keep-diacritics", "café", "cafe"])
        assert result.stdout.strip() == "no_match"


class TestSearchCommand:
    """Tests for the search command."""

    @pytest.mark.unit
    def test_plain_lines(self, runner: CliRunner) -> None:
        """Lines from stdin are filtered and sorted."""
        result = runner.invoke(
            cli, ["search", "apple"], input="pineapple\nkiwi\n\napple\napplesauce\n"
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["apple", "applesauce", "pineapple"]

    @pytest.mark.unit
    def test_threshold_option(self, runner: CliRunner) -> None:
        """--threshold raises the bar."""
        result = runner.invoke(
            cli,
            ["search", "apple", "--threshold", "starts-with"],
            input="pineapple\napple\napplesauce\n",
        )
        assert result.stdout.splitlines() == ["apple", "applesauce"]

    @pytest.mark.unit
    def test_invalid_threshold(self, runner: CliRunner) -> None:
        """Unknown ranking names are a usage error."""
        result = runner.invoke(cli, ["search", "a", "--threshold", "best"], input="")
        assert result.exit_code == 2
        assert "Unknown ranking" in result.output

    @pytest.mark.unit
    def test_json_output(self, runner: CliRunner) -> None:
        """--json prints ranking details per line."""
        result = runner.invoke(
            cli, ["search", "fran", "--json"], input="San Francisco\n"
        )
        record = json.loads(result.stdout.splitlines()[0])
        assert record == {
            "item": "San Francisco",
            "index": 0,
            "rank": "word_starts_with",
            "ranked_value": "San Francisco",
            "key_index": 0,
        }

    @pytest.mark.unit
    def test_config_with_keys(self, runner: CliRunner, tmp_path: Path) -> None:
        """A config with keys reads JSON Lines records."""
        config = tmp_path / "config.yaml"
        config.write_text("keys:\n  - path: name\n  - path: country\n")
        lines = [
            json.dumps({"name": "Lyon", "country": "France"}),
            json.dumps({"name": "Frankfurt", "country": "Germany"}),
            json.dumps({"name": "Rome", "country": "Italy"}),
        ]
        result = runner.invoke(
            cli,
            ["search", "fr", "--config", str(config)],
            input="\n".join(lines) + "\n",
        )
        assert result.exit_code == 0
        names = [json.loads(line)["name"] for line in result.stdout.splitlines()]
        assert names == ["Frankfurt", "Lyon"]

    @pytest.mark.unit
    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Validation errors are printed with hints."""
        config = tmp_path / "config.yaml"
        config.write_text("threshold: sometimes\n")
        result = runner.invoke(cli, ["search", "a", "--config", str(config)], input="")
        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output
        assert "Hint:" in result.output

    @pytest.mark.unit
    def test_bad_json_record(self, runner: CliRunner, tmp_path: Path) -> None:
        """Malformed records abort with the line number."""
        config = tmp_path / "config.yaml"
        config.write_text("keys:\n  - path: name\n")
        result = runner.invoke(
            cli,
            ["search", "a", "--config", str(config)],
            input='{"name": "ok"}\nnot json\n',
        )
        assert result.exit_code == 1
        assert "line 2" in result.output


class TestBenchCommand:
    """Tests for the bench command."""

    @pytest.mark.unit
    def test_report(self, runner: CliRunner) -> None:
        """bench prints a JSON timing report."""
        result = runner.invoke(cli, ["bench", "--items", "200", "--repeat", "2"])
        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["items"] == 200
        assert report["repeat"] == 2
        assert report["metrics"]["calls"] == 2
        assert report["metrics"]["items_in"] == 400
        assert report["best_ms"] <= report["mean_ms"]

    @pytest.mark.unit
    def test_deterministic(self, runner: CliRunner) -> None:
        """The same seed gives the same match count."""
        args = ["bench", "--items", "300", "--repeat", "1", "--seed", "7"]
        first = json.loads(runner.invoke(cli, args).stdout)
        second = json.loads(runner.invoke(cli, args).stdout)
        assert first["matched"] == second["matched"]


class TestVersion:
    """Tests for --version."""

    @pytest.mark.unit
    def test_version(self, runner: CliRunner) -> None:
        """--version prints the package version."""
        result = runner.invoke(cli, ["--version"])
        assert __version__ in result.output
