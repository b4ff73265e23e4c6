#!/usr/bin/env python3
"""
Bundled Word Lists
==================
Maps language tags to the word lists shipped with the package.

Usage:
    from xkcdpwd.languages import get_dictionary, supported_languages

    d = get_dictionary("en_US.UTF-8")   # Dictionary, or None if unsupported
    supported_languages()               # ['en']
"""

import re
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Optional
from functools import lru_cache

from xkcdpwd.dictionary import Dictionary


logger = logging.getLogger(__name__)


# =============================================================================
# Registry
# =============================================================================

LANGUAGES_DIR = Path(__file__).parent

# Canonical tag -> word list file in LANGUAGES_DIR. Read-only.
LANGUAGES = MappingProxyType({
    "en": "en.txt",
})

_TAG_SEPARATORS = re.compile(r"[-_.@]")


def match_language(tag: str) -> Optional[str]:
    """
    Resolve a language tag to a supported canonical tag.

    Accepts BCP 47 tags ("en-GB") and POSIX locale names ("en_US.UTF-8").
    Returns None when the base language is not bundled.
    """
    if not tag:
        return None
    base = _TAG_SEPARATORS.split(tag.strip(), maxsplit=1)[0].lower()
    if base in LANGUAGES:
        return base
    return None


def supported_languages() -> list:
    """Canonical tags of all bundled word lists."""
    return sorted(LANGUAGES)


@lru_cache(maxsize=None)
def _read_word_list(canonical: str) -> str:
    path = LANGUAGES_DIR / LANGUAGES[canonical]
    logger.debug(f"Reading word list {path.name}")
    return path.read_text(encoding='utf-8')


def load_language(tag: str) -> Optional[str]:
    """Raw word list text for a language tag, or None if unsupported."""
    canonical = match_language(tag)
    if canonical is None:
        logger.debug(f"No word list for language tag {tag!r}")
        return None
    return _read_word_list(canonical)


def get_dictionary(tag: str, rng=None) -> Optional[Dictionary]:
    """
    Build a fresh Dictionary for a language tag.

    Each call returns an independent Dictionary, so configuring one does not
    affect another. Returns None for unsupported languages.
    """
    data = load_language(tag)
    if data is None:
        return None
    return Dictionary.load(data, rng=rng)


__all__ = [
    "LANGUAGES",
    "match_language",
    "supported_languages",
    "load_language",
    "get_dictionary",
]
