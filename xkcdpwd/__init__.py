#!/usr/bin/env python3
"""
xkcdpwd - Passphrase Generator
==============================

Generates multi-word passphrases from a word list, after XKCD comic #936
("correct horse battery staple").

Quick Start
-----------
    from xkcdpwd import get_dictionary

    d = get_dictionary("en")
    d.set_min_word_length(4)
    d.set_capitalize("first")
    print(" ".join(d.passphrase(4)))

Modules
-------
    xkcdpwd.dictionary - Word store, length filtering and sampling
    xkcdpwd.entropy    - Secure random source and entropy floor
    xkcdpwd.capitalize - Capitalization strategies
    xkcdpwd.languages  - Bundled word lists by language tag
    xkcdpwd.settings   - Defaults, user config file and environment

CLI Usage
---------
    python -m xkcdpwd -n 5 -w 4
    python -m xkcdpwd --capitalize random --separator -
"""

__version__ = "0.4.0"
__author__ = "xkcdpwd"

from .entropy import (
    MIN_ENTROPY,
    InsufficientEntropyError,
    RandomSourceError,
    SecureRandom,
    entropy_bits,
)
from .capitalize import Capitalize, capitalize_word
from .dictionary import Dictionary, load_dictionary, parse_line
from .languages import get_dictionary, supported_languages

__all__ = [
    '__version__',
    # Engine
    'Dictionary',
    'load_dictionary',
    'parse_line',
    'get_dictionary',
    'supported_languages',
    # Capitalization
    'Capitalize',
    'capitalize_word',
    # Entropy
    'MIN_ENTROPY',
    'SecureRandom',
    'entropy_bits',
    # Errors
    'InsufficientEntropyError',
    'RandomSourceError',
]
