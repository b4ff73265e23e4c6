#!/usr/bin/env python3
"""
Dictionary Engine
=================
Word store, length filtering, entropy checks and secure sampling for
passphrase generation.

The word list is kept sorted by ascending word length (stable for words of
equal length), so a min/max length constraint is always a contiguous slice
of the list. Changing a constraint only moves the two slice boundaries;
the words themselves never change after loading.

Usage:
    from xkcdpwd.dictionary import Dictionary

    d = Dictionary.load(open("words.txt"))
    d.set_min_word_length(4)
    d.set_max_word_length(8)
    d.set_capitalize("first")
    words = d.passphrase(4)     # ['Staple', 'Horse', 'Correct', 'Battery']
"""

from __future__ import annotations

import bisect
import logging
from typing import Iterable, List, Tuple, Union

from .capitalize import Capitalize, capitalize_word
from .entropy import (
    MIN_ENTROPY,
    InsufficientEntropyError,
    RandomSourceError,
    check_entropy,
    entropy_bits,
    get_secure_random,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Loading
# =============================================================================

def parse_line(line: str) -> str:
    """
    Extract the word from one line of a word list.

    A '#' at the start of the line makes it a comment; a '#' later in the
    line cuts off the rest. Returns an empty string when there is no word.
    """
    i = line.find('#')
    if i == 0:
        return ""
    if i > 0:
        line = line[:i]
    return line.strip()


def parse_words(source: Union[str, Iterable[str]]) -> List[str]:
    """Parse a word list (text or iterable of lines) into words sorted by length."""
    if isinstance(source, str):
        source = source.splitlines()
    words = [w for w in (parse_line(line) for line in source) if w]
    # sorted() is stable, so equal-length words keep their input order
    return sorted(words, key=len)


# =============================================================================
# Dictionary
# =============================================================================

class Dictionary:
    """
    A word list with an active length range and a capitalization strategy.

    Configure with the setters, then call passphrase() as often as needed.
    Setters never raise. A passphrase() call reads the configuration once
    at the start, so concurrent callers must synchronize configuration
    changes themselves.
    """

    def __init__(self, words: Iterable[str] = (), rng=None):
        self._words: Tuple[str, ...] = tuple(sorted(words, key=len))
        self._lengths: List[int] = [len(w) for w in self._words]
        self._rng = rng if rng is not None else get_secure_random()
        self._capitalize = Capitalize.NONE
        self._min_word_length = 0
        self._max_word_length = 0
        self._start = 0
        self._stop = len(self._words)

        # Bounds start out at the shortest and longest word
        if self._words:
            self.set_max_word_length(self._lengths[-1])
            self.set_min_word_length(self._lengths[0])

    @classmethod
    def load(cls, source: Union[str, Iterable[str]], rng=None) -> "Dictionary":
        """
        Build a Dictionary from a word list.

        Args:
            source: Word list text, or an iterable of lines (e.g. an open file)
            rng: Random source with a randbelow(n) method (default: SecureRandom)
        """
        words = parse_words(source)
        logger.debug(f"Loaded {len(words)} words")
        return cls(words, rng=rng)

    def __repr__(self) -> str:
        return (f"Dictionary(words={len(self._words)}, active={self.length()}, "
                f"min={self._min_word_length}, max={self._max_word_length}, "
                f"capitalize={self._capitalize.value!r})")

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def capitalize(self) -> str:
        """Current capitalization strategy name."""
        return self._capitalize.value

    def set_capitalize(self, mode) -> None:
        """Set the capitalization strategy. Unknown values mean 'none'."""
        self._capitalize = Capitalize.parse(mode)

    @property
    def min_word_length(self) -> int:
        return self._min_word_length

    def set_min_word_length(self, n: int) -> None:
        """Set the minimum word length. 0 or less means no limit."""
        self._min_word_length = n
        if n <= 0:
            self._start = 0
        else:
            # First word at least n long; len(words) when there is none
            self._start = bisect.bisect_left(self._lengths, n)
        logger.debug(f"Min word length {n}: active range {self.active_range}")

    @property
    def max_word_length(self) -> int:
        return self._max_word_length

    def set_max_word_length(self, n: int) -> None:
        """Set the maximum word length. 0 or less means no limit."""
        self._max_word_length = n
        if n <= 0:
            self._stop = len(self._words)
        else:
            # One past the last word at most n long; 0 when there is none
            self._stop = bisect.bisect_right(self._lengths, n)
        logger.debug(f"Max word length {n}: active range {self.active_range}")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def words(self) -> Tuple[str, ...]:
        """All loaded words, shortest first."""
        return self._words

    @property
    def total(self) -> int:
        """Number of loaded words, ignoring length limits."""
        return len(self._words)

    @property
    def active_range(self) -> Tuple[int, int]:
        """(start, stop) indices of the words within the length limits."""
        return self._start, self._stop

    def length(self) -> int:
        """Number of words within the current length limits."""
        if self._start >= len(self._words) or self._stop <= 0:
            return 0
        return max(0, self._stop - self._start)

    def word(self, idx: int) -> str:
        """
        Word at idx within the active range.

        Returns an empty string for negative indices and indices at or past
        the end of the active range.
        """
        if idx < 0 or self._start + idx >= self._stop:
            return ""
        return self._words[self._start + idx]

    def active_words(self) -> Tuple[str, ...]:
        """Words within the current length limits."""
        if self.length() == 0:
            return ()
        return self._words[self._start:self._stop]

    def entropy(self, n: int) -> float:
        """Bits of entropy an n-word passphrase from this dictionary carries."""
        return entropy_bits(n, self.length())

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def passphrase(self, n: int, floor: float = MIN_ENTROPY) -> List[str]:
        """
        Return n randomly chosen words, capitalized per the current strategy.

        Words are drawn independently, so a word may repeat. A floor below
        MIN_ENTROPY is raised to MIN_ENTROPY.

        Raises:
            InsufficientEntropyError: If n words cannot reach floor bits
            RandomSourceError: If the secure random source fails
        """
        start, stop, mode = self._start, self._stop, self._capitalize
        floor = max(MIN_ENTROPY, floor)
        size = stop - start if start < len(self._words) and stop > 0 else 0
        if size < 1:
            raise InsufficientEntropyError(floor=floor, bits=0.0)
        check_entropy(n, size, floor)

        words = []
        for _ in range(n):
            idx = self._rng.randbelow(size)
            if not 0 <= idx < size:
                raise RandomSourceError(
                    ValueError(f"index {idx} outside active range of {size} words"))
            words.append(capitalize_word(self._words[start + idx], mode, self._rng))
        return words


def load_dictionary(path, rng=None) -> Dictionary:
    """Load a Dictionary from a word-list file on disk."""
    with open(path, encoding='utf-8') as f:
        return Dictionary.load(f, rng=rng)


__all__ = [
    "Dictionary",
    "load_dictionary",
    "parse_line",
    "parse_words",
]
