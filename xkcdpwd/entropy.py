#!/usr/bin/env python3
"""
Entropy Module for Passphrase Generation
========================================
Secure random draws and entropy accounting for the dictionary engine.

Features:
- CSPRNG-backed uniform integer draws (secrets.SystemRandom / os.urandom)
- Failures of the OS entropy pool surfaced as RandomSourceError
- Entropy bits for a given word count and vocabulary size
- Minimum entropy floor enforced before any random draw
"""

import math
import secrets
import logging


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Passphrases weaker than this are refused outright
MIN_ENTROPY = 30.0


# =============================================================================
# Errors
# =============================================================================

class InsufficientEntropyError(ValueError):
    """Requested word count cannot reach the entropy floor."""

    def __init__(self, floor: float = MIN_ENTROPY, bits: float = 0.0):
        self.floor = floor
        self.bits = bits
        super().__init__(
            f"dictionary cannot support more than {floor:.0f} bits of entropy"
        )


class RandomSourceError(RuntimeError):
    """The secure random source failed mid-draw."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"cannot generate random words: {cause}")


# =============================================================================
# Secure Random Source
# =============================================================================

class SecureRandom:
    """
    Cryptographically secure random integer source.

    Wraps secrets.SystemRandom, which reads from the OS entropy pool
    (os.urandom). Every draw is independent; nothing is seeded or cached.

    Usage:
        rng = SecureRandom()
        idx = rng.randbelow(len(words))   # 0 <= idx < len(words)
    """

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def randbelow(self, n: int) -> int:
        """Return a uniform random integer in [0, n)."""
        if n < 1:
            raise ValueError(f"cannot draw from an empty range (n={n})")
        try:
            return self._rng.randrange(n)
        except OSError as e:
            logger.debug(f"Random source failed drawing below {n}: {e}")
            raise RandomSourceError(e) from e


# Global instance
_secure_random = SecureRandom()


def get_secure_random() -> SecureRandom:
    """Get the shared secure random source."""
    return _secure_random


# =============================================================================
# Entropy Model
# =============================================================================

def entropy_bits(word_count: int, vocabulary_size: int) -> float:
    """
    Bits of entropy for word_count words drawn from vocabulary_size words.

    Degenerate inputs (no words requested, empty vocabulary) give 0.0 bits.
    """
    if word_count <= 0 or vocabulary_size <= 0:
        return 0.0
    return word_count * math.log2(vocabulary_size)


def check_entropy(word_count: int, vocabulary_size: int,
                  floor: float = MIN_ENTROPY) -> float:
    """
    Validate that a passphrase can reach the entropy floor.

    Returns:
        The achievable entropy in bits

    Raises:
        InsufficientEntropyError: If the achievable entropy is below floor
    """
    bits = entropy_bits(word_count, vocabulary_size)
    if bits < floor:
        raise InsufficientEntropyError(floor=floor, bits=bits)
    return bits


def words_needed(vocabulary_size: int, floor: float = MIN_ENTROPY) -> int:
    """Smallest word count that reaches floor, or 0 if no count can."""
    if vocabulary_size <= 1:
        return 0
    return math.ceil(floor / math.log2(vocabulary_size))
