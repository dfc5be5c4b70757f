"""CLI commands for ranking and searching strings."""

import dataclasses
import json
import random
import statistics
import string
import sys
import time
from pathlib import Path
from typing import Any, TextIO

import click

from matchsorter import __version__
from matchsorter.config import (
    ConfigLoader,
    ConfigValidationError,
    MatchSorterConfig,
    format_validation_errors,
)
from matchsorter.observability import configure_from_settings, get_logger
from matchsorter.ranking import Ranking, get_match_ranking
from matchsorter.settings import get_settings
from matchsorter.sorter import MatchSorter, MatchSorterMetrics, MatchSorterOptions


logger = get_logger(__name__)

COMPONENT_CLI = "cli"

# Default synthetic dataset size for the bench command
DEFAULT_BENCH_ITEMS = 10_000


class RankingParamType(click.ParamType):
    """Click parameter type accepting ranking names like 'contains'."""

    name = "ranking"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Ranking:
        """Convert a command-line value to a Ranking."""
        if isinstance(value, Ranking):
            return value
        try:
            return Ranking.parse(str(value))
        except ValueError as e:
            self.fail(str(e), param, ctx)


RANKING = RankingParamType()


def _setup_logging(verbose: bool) -> None:
    """Configure logging from settings and the verbose flag."""
    configure_from_settings(get_settings(), verbose=verbose)


def _load_configuration(config_path: Path | None) -> MatchSorterConfig:
    """Load configuration, exit with hints on failure.

    Args:
        config_path: Optional path to a YAML configuration.

    Returns:
        Validated configuration (defaults when no path is given).
    """
    if config_path is None:
        return MatchSorterConfig()

    loader = ConfigLoader()
    try:
        return loader.load(config_path)
    except ConfigValidationError as e:
        logger.warning(
            "config_load_failed",
            component=COMPONENT_CLI,
            error=str(e),
            validation_errors=e.errors,
        )
        click.echo("Configuration validation failed:", err=True)
        for formatted in format_validation_errors(e.errors):
            click.echo(f"  - {formatted}", err=True)
        sys.exit(1)


def _read_items(stream: TextIO, records: bool) -> list[Any]:
    """Read candidate strings, or JSON Lines records when keys are used.

    Args:
        stream: Input stream.
        records: Parse each line as a JSON document.

    Returns:
        Items in input order, blank lines skipped.
    """
    items: list[Any] = []
    for line_number, line in enumerate(stream, start=1):
        text = line.rstrip("\r\n")
        if not text.strip():
            continue
        if not records:
            items.append(text)
            continue
        try:
            items.append(json.loads(text))
        except json.JSONDecodeError as e:
            click.echo(
                f"Error: line {line_number} is not valid JSON: {e.msg}", err=True
            )
            sys.exit(1)
    return items


def _generate_words(rng: random.Random, count: int) -> list[str]:
    """Generate deterministic pseudo-words, some multi-word and accented."""
    alphabet = string.ascii_lowercase + "éèüñ"
    words: list[str] = []
    for _ in range(count):
        parts = [
            "".join(rng.choice(alphabet) for _ in range(rng.randint(3, 9)))
            for _ in range(rng.randint(1, 3))
        ]
        separator = rng.choice([" ", " ", "-"])
        word = separator.join(parts)
        if rng.random() < 0.2:
            word = word.capitalize()
        words.append(word)
    return words


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Rank and sort strings by how well they match a query."""


@cli.command()
@click.argument("candidate")
@click.argument("query")
@click.option(
    "--keep-diacritics",
    is_flag=True,
    help="Compare accented characters as-is.",
)
def rank(candidate: str, query: str, keep_diacritics: bool) -> None:
    """Print how CANDIDATE ranks against QUERY."""
    click.echo(str(get_match_ranking(candidate, query, keep_diacritics)))


@cli.command()
@click.argument("query")
@click.option(
    "--input",
    "input_stream",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="File with one candidate per line, or JSON Lines records (default: stdin).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML configuration with keys and thresholds.",
)
@click.option(
    "--threshold",
    type=RANKING,
    default=None,
    help="Minimum ranking, e.g. 'contains' (overrides the configuration).",
)
@click.option(
    "--keep-diacritics",
    is_flag=True,
    default=False,
    help="Compare accented characters as-is.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output JSON Lines with ranking details.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def search(  # noqa: PLR0913
    query: str,
    input_stream: TextIO,
    config_path: Path | None,
    threshold: Ranking | None,
    keep_diacritics: bool,
    json_output: bool,
    verbose: bool,
) -> None:
    """Print the input items matching QUERY, best match first."""
    _setup_logging(verbose)
    config = _load_configuration(config_path)
    options = config.to_options()

    overrides: dict[str, Any] = {}
    if threshold is not None:
        overrides["threshold"] = threshold
    if keep_diacritics:
        overrides["keep_diacritics"] = True
    if overrides:
        options = dataclasses.replace(options, **overrides)

    items = _read_items(input_stream, records=bool(options.keys))
    ranked_items = MatchSorter(options).match_ranked(items, query)

    if not json_output:
        for ranked in ranked_items:
            item = ranked.item
            line = (
                item if isinstance(item, str) else json.dumps(item, ensure_ascii=False)
            )
            click.echo(line)
        return

    for ranked in ranked_items:
        click.echo(
            json.dumps(
                {
                    "item": ranked.item,
                    "index": ranked.index,
                    "rank": str(ranked.rank),
                    "ranked_value": ranked.ranked_value,
                    "key_index": ranked.key_index,
                },
                ensure_ascii=False,
            )
        )


@cli.command()
@click.option(
    "--items",
    "item_count",
    type=click.IntRange(min=0),
    default=DEFAULT_BENCH_ITEMS,
    show_default=True,
    help="Number of synthetic items.",
)
@click.option("--query", default="ab", show_default=True, help="Query to rank with.")
@click.option("--seed", type=int, default=42, show_default=True, help="Random seed.")
@click.option(
    "--repeat",
    type=click.IntRange(min=1),
    default=5,
    show_default=True,
    help="Number of timed runs.",
)
@click.option(
    "--keep-diacritics",
    is_flag=True,
    help="Compare accented characters as-is.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def bench(  # noqa: PLR0913
    item_count: int,
    query: str,
    seed: int,
    repeat: int,
    keep_diacritics: bool,
    verbose: bool,
) -> None:
    """Time match_sorter over a deterministic synthetic dataset."""
    _setup_logging(verbose)

    items = _generate_words(random.Random(seed), item_count)
    metrics = MatchSorterMetrics()
    sorter: MatchSorter[str] = MatchSorter(
        MatchSorterOptions(keep_diacritics=keep_diacritics), metrics=metrics
    )

    durations_ms: list[float] = []
    matched = 0
    for _ in range(repeat):
        start = time.perf_counter()
        matched = len(sorter.match(items, query))
        durations_ms.append((time.perf_counter() - start) * 1000)

    logger.info(
        "bench_complete",
        component=COMPONENT_CLI,
        items=item_count,
        repeat=repeat,
    )

    click.echo(
        json.dumps(
            {
                "items": item_count,
                "query": query,
                "repeat": repeat,
                "matched": matched,
                "best_ms": min(durations_ms),
                "mean_ms": statistics.fmean(durations_ms),
                "metrics": metrics.to_dict(),
            },
            indent=2,
            ensure_ascii=False,
        )
    )


def main() -> None:
    """Console script entry point."""
    cli()
