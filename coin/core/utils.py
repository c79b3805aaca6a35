"""
Coin — Shared bit helpers.

Pure functions on raw words. No imports from other coin modules except
coin.core.constants and coin.core.errors.
"""

from __future__ import annotations

from coin.core.constants import MAX_BIT_INDEX, MIN_BIT_INDEX, WORD_BITS
from coin.core.errors import BitIndexError


# ---------------------------------------------------------------------------
# Counting
# ---------------------------------------------------------------------------

def popcount(word: int) -> int:
    """Return the number of set bits in a non-negative ``word``."""
    if word < 0:
        raise ValueError(f"popcount of negative value {word}")
    return bin(word).count("1")


def hamming_distance(a: int, b: int) -> int:
    """Number of bit positions at which ``a`` and ``b`` differ."""
    return popcount(a ^ b)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def check_bit_index(index: object) -> int:
    """Return ``index`` unchanged if it addresses a bit of the word.

    ``bool`` is rejected even though it subclasses ``int``; a stray
    ``True`` is far more likely a bug than a request for bit 1.

    Raises
    ------
    BitIndexError
        When ``index`` is not an ``int`` in ``[MIN_BIT_INDEX, MAX_BIT_INDEX]``.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise BitIndexError(index)
    if not MIN_BIT_INDEX <= index <= MAX_BIT_INDEX:
        raise BitIndexError(index)
    return index


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_word(word: int) -> str:
    """Binary rendering, MSB first, grouped in nibbles, e.g. ``0b1111_1000``."""
    return f"0b{word:0{WORD_BITS + 1}_b}"
