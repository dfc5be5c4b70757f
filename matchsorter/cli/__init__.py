"""Command-line interface for the match sorter."""

from matchsorter.cli.main import cli


__all__ = ["cli"]
