"""
Shared test fixtures for arcade_ai tests.

Design principles:
- Seeded random sources everywhere randomness is involved
- Boards built as fresh int8 arrays per test
- Minimal, focused fixtures
"""

import random

import numpy as np
import pytest

from arcade_ai.games.gomoku import SIZE as GOMOKU_SIZE
from arcade_ai.games.lights_out import TOTAL
from arcade_ai.games.othello import initial_board


# =============================================================================
# Random Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def othello_opening() -> np.ndarray:
    """Standard Othello starting position."""
    return initial_board()


@pytest.fixture
def empty_gomoku() -> np.ndarray:
    """Empty 15x15 Gomoku board."""
    return np.zeros((GOMOKU_SIZE, GOMOKU_SIZE), dtype=np.int8)


@pytest.fixture
def lamps_off() -> np.ndarray:
    """All-off Lights-Out lamp vector."""
    return np.zeros(TOTAL, dtype=np.uint8)

