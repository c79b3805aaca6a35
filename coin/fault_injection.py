"""
Corruption simulation for Coin.

Flips bits on purpose so that the tolerance of the threshold decoding can
be exercised: single explicit upsets, seeded random upsets, and exhaustive
enumeration of every combination of ``count`` distinct bits.
"""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from coin import config
from coin.core.constants import WORD_BITS
from coin.core.logging import get_logger
from coin.core.utils import format_word
from coin.domain.models import Coin

logger = get_logger(__name__)

_rng: Optional[random.Random] = None


@dataclass(frozen=True)
class Upset:
    """One injected fault: the coin before, the coin after, and what was hit."""
    original: Coin
    corrupted: Coin
    flipped: Tuple[int, ...]

    @property
    def misread(self) -> bool:
        """True when the injected flips changed the decoded value."""
        return self.original.value() != self.corrupted.value()


def flip_bits(coin: Coin, indices: Iterable[int]) -> Coin:
    """Apply ``Coin.flip_bit`` for each index in order.

    Repeating an index toggles that bit back.
    """
    for index in indices:
        coin = coin.flip_bit(index)
    return coin


def _shared_rng() -> random.Random:
    global _rng
    if _rng is None:
        _rng = random.Random(config.FAULT_SEED)
    return _rng


def reset_rng() -> None:
    """Drop the shared RNG; the next unseeded upset reseeds it from config."""
    global _rng
    _rng = None


def _check_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"flip count must be an int, got {count!r}")
    if not 0 <= count <= WORD_BITS:
        raise ValueError(f"flip count must be in [0, {WORD_BITS}], got {count}")
    return count


def _inject(coin: Coin, flipped: Tuple[int, ...]) -> Upset:
    corrupted = flip_bits(coin, flipped)
    upset = Upset(original=coin, corrupted=corrupted, flipped=flipped)
    logger.debug(
        "Upset bits %s: %s -> %s (misread=%s)",
        list(flipped), format_word(coin.bits), format_word(corrupted.bits),
        upset.misread,
    )
    return upset


def random_upset(
    coin: Coin,
    count: int,
    rng: Optional[random.Random] = None,
) -> Upset:
    """Flip ``count`` distinct bits chosen at random.

    Without an explicit ``rng`` the shared module RNG is used. It is seeded
    once from ``config.FAULT_SEED`` (``None`` = OS entropy), so a campaign
    can be replayed by exporting ``COIN_FAULT_SEED``.
    """
    count = _check_count(count)
    if rng is None:
        rng = _shared_rng()
    flipped = tuple(sorted(rng.sample(range(WORD_BITS), count)))
    return _inject(coin, flipped)


def all_upsets(coin: Coin, count: int) -> Iterator[Upset]:
    """Yield one ``Upset`` per combination of ``count`` distinct bits."""
    count = _check_count(count)
    for flipped in itertools.combinations(range(WORD_BITS), count):
        yield _inject(coin, flipped)
