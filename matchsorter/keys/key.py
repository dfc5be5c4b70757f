"""Keys: named string extractors with per-key ranking modifiers."""

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from matchsorter.ranking import Ranking


T = TypeVar("T")

Extractor = Callable[[T], Iterable[str] | str | None]

PATH_SEPARATOR = "."


def _resolve_path(value: Any, parts: Sequence[str]) -> Iterator[str]:
    """Walk a dotted path through mappings, attributes and sequences.

    Lists and tuples are flattened wherever they appear unless the next
    path segment is an integer index. None is skipped and non-string
    leaves are converted with str().
    """
    if value is None:
        return

    if isinstance(value, (list, tuple)):
        if parts and parts[0].isdigit():
            index = int(parts[0])
            if index < len(value):
                yield from _resolve_path(value[index], parts[1:])
            return
        for element in value:
            yield from _resolve_path(element, parts)
        return

    if not parts:
        yield value if isinstance(value, str) else str(value)
        return

    head, rest = parts[0], parts[1:]
    if isinstance(value, Mapping):
        child = value.get(head)
    else:
        child = getattr(value, head, None)
    yield from _resolve_path(child, rest)


@dataclass(frozen=True)
class Key(Generic[T]):
    """Extraction rule that yields candidate strings for an item.

    Keys are immutable: the modifier methods return a new Key and leave
    the original untouched, and when the same modifier is applied twice
    the last call wins.

    Attributes:
        extractor: Callable returning the item's candidate strings.
        threshold_value: Minimum ranking for matches won by this key,
            overriding the global threshold.
        max_ranking_value: Ceiling applied to every ranking of this key.
        min_ranking_value: Floor that promotes matches of this key
            (NO_MATCH is never promoted).
        name: Label used in logs and repr.
    """

    extractor: Extractor[T] = field(repr=False)
    threshold_value: Ranking | None = None
    max_ranking_value: Ranking = Ranking.CASE_SENSITIVE_EQUAL
    min_ranking_value: Ranking = Ranking.NO_MATCH
    name: str = "<key>"

    @classmethod
    def from_fn(cls, fn: Callable[[T], str]) -> "Key[T]":
        """Create a key from a single-value extractor.

        Args:
            fn: Callable returning one string for an item.

        Returns:
            New key.
        """
        return cls(
            extractor=lambda item: (fn(item),),
            name=getattr(fn, "__name__", "<key>"),
        )

    @classmethod
    def from_fn_multi(cls, fn: Callable[[T], Iterable[str]]) -> "Key[T]":
        """Create a key from a multi-value extractor.

        Args:
            fn: Callable returning any number of strings for an item.

        Returns:
            New key.
        """
        return cls(extractor=fn, name=getattr(fn, "__name__", "<key>"))

    @classmethod
    def from_path(cls, path: str) -> "Key[Any]":
        """Create a key that reads a dotted path from mappings or objects.

        ``"author.name"`` reads ``item["author"]["name"]`` for dicts and
        ``item.author.name`` for objects; lists on the way are flattened,
        so ``"tags"`` on ``{"tags": ["a", "b"]}`` yields both tags.

        Args:
            path: Dotted attribute/key path.

        Returns:
            New key named after the path.
        """
        parts = tuple(part for part in path.split(PATH_SEPARATOR) if part)
        return cls(extractor=lambda item: _resolve_path(item, parts), name=path)

    def threshold(self, ranking: Ranking) -> "Key[T]":
        """Return a copy with a per-key threshold."""
        return replace(self, threshold_value=ranking)

    def max_ranking(self, ranking: Ranking) -> "Key[T]":
        """Return a copy whose rankings are clamped down to ranking."""
        return replace(self, max_ranking_value=ranking)

    def min_ranking(self, ranking: Ranking) -> "Key[T]":
        """Return a copy whose matches are promoted up to ranking."""
        return replace(self, min_ranking_value=ranking)

    def extract(self, item: T) -> list[str]:
        """Extract the candidate strings of an item, in key order.

        A bare string result counts as one value and None as none.

        Args:
            item: Item to extract from.

        Returns:
            List of candidate strings.
        """
        values = self.extractor(item)
        if values is None:
            return []
        if isinstance(values, str):
            return [values]
        return list(values)

    def apply_bounds(self, rank: Ranking) -> Ranking:
        """Clamp rank to max_ranking, then promote matches to min_ranking.

        Args:
            rank: Ranking computed for one of this key's values.

        Returns:
            Adjusted ranking.
        """
        if rank > self.max_ranking_value:
            rank = self.max_ranking_value
        if rank.is_match and rank < self.min_ranking_value:
            rank = self.min_ranking_value
        return rank
