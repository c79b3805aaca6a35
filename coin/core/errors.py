"""
coin.core.errors — Exceptions raised by the package.

Only coin.core.constants may be imported here.
"""

from coin.core.constants import MAX_BIT_INDEX, MIN_BIT_INDEX


class CoinError(Exception):
    """Base class for every error raised by coin."""


class BitIndexError(CoinError, IndexError):
    """A bit index outside the 8-bit word, or not an ``int`` at all."""

    def __init__(self, index: object):
        self.index = index
        super().__init__(
            f"bit index must be an int in [{MIN_BIT_INDEX}, {MAX_BIT_INDEX}], "
            f"got {index!r}"
        )
