#!/usr/bin/env python3
"""
Capitalization strategies applied to sampled words.
"""

from enum import Enum

from .entropy import get_secure_random


class Capitalize(Enum):
    """How sampled words are capitalized."""
    NONE = "none"
    FIRST = "first"
    ALL = "all"
    RANDOM = "random"

    @classmethod
    def parse(cls, value) -> "Capitalize":
        """Normalize user input to a strategy; anything unrecognized is NONE."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return cls.NONE


# Draws per character for RANDOM: values below the threshold uppercase
RANDOM_OUTCOMES = 9
RANDOM_THRESHOLD = 5


def capitalize_word(word: str, mode: Capitalize, rng=None) -> str:
    """
    Apply a capitalization strategy to a single word.

    RANDOM draws one value in [0, 8] per character, left to right, and
    uppercases the character when the value is below 5. Errors from the
    random source propagate unchanged.
    """
    if not word or mode is Capitalize.NONE:
        return word
    if mode is Capitalize.ALL:
        return word.upper()
    if mode is Capitalize.FIRST:
        return word[0].upper() + word[1:]

    if rng is None:
        rng = get_secure_random()
    chars = list(word)
    for i, ch in enumerate(chars):
        if rng.randbelow(RANDOM_OUTCOMES) < RANDOM_THRESHOLD:
            chars[i] = ch.upper()
    return ''.join(chars)


def modes() -> list:
    """Names of all strategies, in display order."""
    return [m.value for m in Capitalize]
