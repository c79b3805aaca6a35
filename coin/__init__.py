"""
coin — a bit-flip resistant Boolean.

    >>> from coin import from_bool
    >>> c = from_bool(True).flip_bit(0).flip_bit(1).flip_bit(2)
    >>> c.bits, c.value()
    (248, True)
"""

from coin.core.errors import BitIndexError, CoinError
from coin.domain.models import Coin, from_bool

__all__ = ["BitIndexError", "Coin", "CoinError", "from_bool"]
