"""
Centralized configuration for coin.
Settings come from environment variables, read once at import.
"""

import os
from typing import Optional


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    val = os.environ.get(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val.strip())
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

# ---------------------------------------------------------------------------
# Fault injection
# ---------------------------------------------------------------------------
# Seed for random_upset() when the caller passes no RNG. Unset = OS entropy.
FAULT_SEED = _env_int("COIN_FAULT_SEED")
