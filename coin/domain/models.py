"""
coin.domain.models — The Coin value type.

A standard ``bool`` is truth-biased: ``False`` matches exactly one bit
pattern (all zeros), so a single flipped bit invalidates it.  ``Coin``
stores a whole byte and reads it by population count: four or more set
bits mean ``True``.  Either canonical pattern survives up to three flipped
bits before it can be misread; a fourth flip may or may not change the
result depending on which bits it hits.

Import pattern::

    from coin.domain.models import Coin, from_bool

Rule of thumb: keep long-lived flags (module globals, cached state) as
``Coin`` and convert to ``bool`` with ``coin.value()`` at the point of use.
Beware ``int(True) == 1``: the pattern ``0b0000_0001`` reads as ``False``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from coin.core.constants import (
    CANONICAL_FALSE, CANONICAL_TRUE, TRUTH_THRESHOLD, WORD_MASK,
)
from coin.core.utils import check_bit_index, format_word, popcount


class Coin(BaseModel):
    """
    Bit-flip resistant Boolean backed by one unsigned byte.

    Every one of the 256 byte values is a valid ``Coin``; patterns that the
    canonical constructors never produce (the result of corruption) are
    interpreted, not rejected.  Instances are frozen: ``flip_bit`` returns
    a new ``Coin``.

    Equality, hashing and ordering follow the decoded truth value, so
    ``Coin(bits=0xFF) == Coin(bits=0x1F)``.  Use ``.bits`` to compare raw
    words.
    """
    model_config = ConfigDict(frozen=True)

    bits: int = Field(default=CANONICAL_FALSE, ge=0, le=WORD_MASK, strict=True)

    # -- construction -------------------------------------------------------

    @classmethod
    def from_bool(cls, b: bool) -> "Coin":
        """``0xFF`` when ``b`` is truthy, ``0x00`` otherwise.  Never fails."""
        return cls(bits=CANONICAL_TRUE if b else CANONICAL_FALSE)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Coin":
        """Rebuild a coin from a single raw byte, e.g. read from memory."""
        if len(data) != 1:
            raise ValueError(f"expected exactly 1 byte, got {len(data)}")
        return cls(bits=data[0])

    # -- decoding -----------------------------------------------------------

    def value(self) -> bool:
        return popcount(self.bits) >= TRUTH_THRESHOLD

    to_bool = value

    def __bool__(self) -> bool:
        return self.value()

    # -- corruption simulation ----------------------------------------------

    def flip_bit(self, index: int) -> "Coin":
        """Return a copy with bit ``index`` toggled.

        Bit 0 is the least significant bit: flipping bits 0..2 of ``0xFF``
        gives ``0b1111_1000`` (``00011111`` when written LSB-first).

        Raises ``BitIndexError`` for anything but an ``int`` in 0..7.
        """
        index = check_bit_index(index)
        return Coin(bits=self.bits ^ (1 << index))

    # -- value semantics ----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self.value() == other.value()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self.value() != other.value()

    def __hash__(self) -> int:
        return hash(self.value())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self.value() < other.value()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self.value() <= other.value()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self.value() > other.value()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Coin):
            return NotImplemented
        return self.value() >= other.value()

    def __bytes__(self) -> bytes:
        return bytes((self.bits,))

    def __str__(self) -> str:
        return f"Coin({format_word(self.bits)} -> {self.value()})"


def from_bool(b: bool) -> Coin:
    """Module-level alias for ``Coin.from_bool``."""
    return Coin.from_bool(b)
