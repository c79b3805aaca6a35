"""
Coin — Word layout constants.

The width / threshold pair is contractual: the three-flip tolerance is
derived from it, so neither value is configurable.
"""

# ---------------------------------------------------------------------------
# Word layout
# ---------------------------------------------------------------------------

WORD_BITS: int = 8
WORD_MASK: int = (1 << WORD_BITS) - 1    # 0xFF

# Lowest and highest valid bit index for flip_bit()
MIN_BIT_INDEX: int = 0
MAX_BIT_INDEX: int = WORD_BITS - 1

# ---------------------------------------------------------------------------
# Canonical patterns
# ---------------------------------------------------------------------------

CANONICAL_TRUE: int = WORD_MASK           # 0b1111_1111
CANONICAL_FALSE: int = 0                  # 0b0000_0000

# ---------------------------------------------------------------------------
# Threshold decoding
# ---------------------------------------------------------------------------

# popcount >= 4 reads as true. Exactly 4 set bits is true.
TRUTH_THRESHOLD: int = WORD_BITS // 2

# Flips either canonical pattern survives without being misread
MAX_TOLERATED_FLIPS: int = TRUTH_THRESHOLD - 1   # 3
