"""
Shared pytest fixtures for the combat calculation test suite.

This module provides reusable fixtures for:
- RNG with known seeds
- A scripted RNG that records every draw
"""

import pytest
import random
import sys

# Ensure project root is in path
import os
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)


# =============================================================================
# Scripted RNG
# =============================================================================


class ScriptedRandom:
    """
    Stand-in for random.Random that replays fixed draws.

    Records the bound passed to every randrange() call and counts coin flips,
    so tests can check both the draw order and the computed bounds.
    """

    def __init__(self, magnitudes=(), coins=(), floats=()):
        self._magnitudes = list(magnitudes)
        self._coins = list(coins)
        self._floats = list(floats)
        self.bounds = []
        self.coin_flips = 0
        self.float_draws = 0

    def randrange(self, bound):
        self.bounds.append(bound)
        return self._magnitudes.pop(0)

    def getrandbits(self, k):
        self.coin_flips += 1
        return self._coins.pop(0)

    def random(self):
        self.float_draws += 1
        return self._floats.pop(0)

    @property
    def draws(self):
        return len(self.bounds) + self.coin_flips + self.float_draws


# =============================================================================
# RNG Fixtures
# =============================================================================


@pytest.fixture
def rng_seed_42():
    """RNG initialized with seed 42 for deterministic tests."""
    return random.Random(42)


@pytest.fixture
def rng_seed_12345():
    """RNG initialized with seed 12345 for deterministic tests."""
    return random.Random(12345)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom
