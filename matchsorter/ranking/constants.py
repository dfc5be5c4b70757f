"""Constants for the ranking module."""

from typing import Final


# Unicode general categories treated as combining marks when stripping
# diacritics (nonspacing, spacing combining, enclosing).
MARK_CATEGORIES: Final[frozenset[str]] = frozenset({"Mn", "Mc", "Me"})

# Highest code point handled by the Latin-1 translation table.
LATIN1_MAX: Final[str] = "\xff"

# Characters that separate words when building an acronym.
ACRONYM_DELIMITERS: Final[frozenset[str]] = frozenset({" ", "-"})

# The only character that marks a word boundary for WORD_STARTS_WITH.
WORD_BOUNDARY: Final[str] = " "

# Fuzzy sub-score bounds: scores live in (1.0, 2.0].
MIN_FUZZY_SCORE: Final[float] = 1.0
MAX_FUZZY_SCORE: Final[float] = 2.0

# Floor for the scratch buffer capacity hint.
MIN_BUFFER_CAPACITY: Final[int] = 16
