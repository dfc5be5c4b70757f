"""Comparison forms for candidate and query strings.

Two operations live here: stripping diacritics (canonical decomposition
followed by removal of combining marks) and lowercasing into a reusable
buffer. Both hand back the caller's own string object whenever the
transformation would not change it, so callers can rely on identity
(``result is text``) to know that nothing was allocated.
"""

import unicodedata
from typing import NamedTuple

from matchsorter.ranking.constants import (
    LATIN1_MAX,
    MARK_CATEGORIES,
    MIN_BUFFER_CAPACITY,
)


class PreparedText(NamedTuple):
    """A comparison form together with its ownership.

    Attributes:
        value: The prepared string.
        borrowed: True when value is the caller's input object itself.
    """

    value: str
    borrowed: bool


class _MarkStripTable(dict[int, int | None]):
    """Lazily populated ``str.translate`` table that deletes marks."""

    def __missing__(self, codepoint: int) -> int | None:
        if unicodedata.category(chr(codepoint)) in MARK_CATEGORIES:
            self[codepoint] = None
            return None
        self[codepoint] = codepoint
        return codepoint


_MARK_STRIP_TABLE = _MarkStripTable()


def strip_marks(text: str) -> str:
    """Decompose text (NFD) and drop every combining mark.

    This is the general path that works for any script. What is left is
    recomposed (NFC), so Hangul syllables come back precomposed.

    Args:
        text: Input string.

    Returns:
        Recomposed string without combining marks.
    """
    if not unicodedata.is_normalized("NFD", text):
        text = unicodedata.normalize("NFD", text)
    return unicodedata.normalize("NFC", text.translate(_MARK_STRIP_TABLE))


def _build_latin1_table() -> dict[int, str]:
    table: dict[int, str] = {}
    for codepoint in range(ord(LATIN1_MAX) + 1):
        char = chr(codepoint)
        stripped = strip_marks(char)
        if stripped != char:
            table[codepoint] = stripped
    return table


# Derived from strip_marks so both paths agree for every Latin-1 input.
LATIN1_STRIP_TABLE: dict[int, str] = _build_latin1_table()


def prepare_text(text: str, keep_diacritics: bool) -> PreparedText:
    """Produce the comparison form of text.

    Fast paths, in order: keep_diacritics or pure ASCII returns the input
    untouched; text entirely within Latin-1 goes through a precomputed
    translation table; everything else takes the general decomposition
    path. If stripping leaves the text unchanged the input object is
    returned.

    Args:
        text: Input string.
        keep_diacritics: Skip diacritics removal entirely.

    Returns:
        PreparedText with the comparison form and its ownership.
    """
    if keep_diacritics or text.isascii():
        return PreparedText(text, True)

    if max(text) <= LATIN1_MAX:
        stripped = text.translate(LATIN1_STRIP_TABLE)
        if stripped == text:
            return PreparedText(text, True)
        return PreparedText(stripped, False)

    decomposed = text
    if not unicodedata.is_normalized("NFD", text):
        decomposed = unicodedata.normalize("NFD", text)
    stripped = decomposed.translate(_MARK_STRIP_TABLE)
    # Decomposition alone (e.g. Hangul syllables into jamo) does not count.
    if len(stripped) == len(decomposed):
        return PreparedText(text, True)
    return PreparedText(unicodedata.normalize("NFC", stripped), False)


def prepare_value_for_comparison(text: str, keep_diacritics: bool) -> str:
    """Return the comparison form of text, see prepare_text."""
    return prepare_text(text, keep_diacritics).value


class LowercaseBuffer:
    """Scratch slot reused for the lowered candidate of each item.

    One buffer serves one match_sorter call and is cleared, not
    recreated, between items. The capacity is only a sizing hint that
    tracks the longest value written so far.

    Attributes:
        value: Most recently written lowered string.
        capacity: Largest value length seen (at least the initial hint).
        shared_count: Writes that reused an already-lowercase input.
        lowered_count: Writes that had to build a lowered copy.
    """

    __slots__ = ("capacity", "lowered_count", "shared_count", "value")

    def __init__(self, capacity: int = MIN_BUFFER_CAPACITY) -> None:
        """Initialize the buffer.

        Args:
            capacity: Initial capacity hint, floored at MIN_BUFFER_CAPACITY.
        """
        self.value = ""
        self.capacity = max(capacity, MIN_BUFFER_CAPACITY)
        self.shared_count = 0
        self.lowered_count = 0

    @classmethod
    def for_query(cls, query: str) -> "LowercaseBuffer":
        """Create a buffer pre-sized from the query length."""
        return cls(capacity=len(query))

    def clear(self) -> None:
        """Reset the held value without touching the counters."""
        self.value = ""

    def write(self, text: str, *, shared: bool) -> str:
        """Store text as the current value.

        Args:
            text: Lowered string to hold.
            shared: Whether text is the caller's input reused as-is.

        Returns:
            The stored value.
        """
        self.value = text
        if len(text) > self.capacity:
            self.capacity = len(text)
        if shared:
            self.shared_count += 1
        else:
            self.lowered_count += 1
        return text


def lower_text(text: str) -> str:
    """Lowercase text one character at a time.

    ``str.lower`` turns a word-final capital sigma into a final sigma,
    which would make "ΟΔΟΣ" and "οδοσ" compare unequal. Lowering each
    character on its own maps every capital sigma to the plain form.
    """
    if "Σ" not in text:
        return text.lower()
    return "".join(char.lower() for char in text)


def lowercase_into(text: str, buffer: LowercaseBuffer) -> str:
    """Lowercase text into buffer, reusing text when already lowercase.

    Args:
        text: String to lowercase.
        buffer: Scratch buffer owned by the caller.

    Returns:
        The lowered string, identical to text when nothing changed.
    """
    buffer.clear()
    if text.islower():
        return buffer.write(text, shared=True)

    lowered = lower_text(text)
    # Strings without cased characters (digits, CJK) are already lowercase.
    if lowered == text:
        return buffer.write(text, shared=True)
    return buffer.write(lowered, shared=False)
