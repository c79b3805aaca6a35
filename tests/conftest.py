"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • true_coin   — canonical true coin (0b1111_1111)
  • false_coin  — canonical false coin (0b0000_0000)
"""

from __future__ import annotations

import os
import sys

import pytest

# Ensure the project root is on the path so all coin imports resolve.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from coin import Coin, from_bool  # noqa: E402


@pytest.fixture
def true_coin() -> Coin:
    return from_bool(True)


@pytest.fixture
def false_coin() -> Coin:
    return from_bool(False)
