"""
Configuration and game registry.
"""

from typing import Optional

import numpy as np

from arcade_ai.core.types import BLACK
from arcade_ai.games import Gomoku, LightsOut, Othello
from arcade_ai.games.game_state import GameState
from arcade_ai.games.gomoku import SIZE as GOMOKU_SIZE
from arcade_ai.games.lights_out import SIZE as LIGHTS_SIZE
from arcade_ai.games.othello import initial_board
from arcade_ai.selection import OTHELLO_DIFFICULTY


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "othello": Othello,
    "gomoku": Gomoku,
    "lights_out": LightsOut,
}

# Initial states use int8 encoding (0 = empty / lamp off)
INITIAL_STATES = {
    "othello": GameState(initial_board(), current_player=BLACK),
    "gomoku": GameState(
        np.zeros((GOMOKU_SIZE, GOMOKU_SIZE), dtype=np.int8),
        current_player=BLACK,
    ),
    "lights_out": GameState(
        np.zeros((LIGHTS_SIZE, LIGHTS_SIZE), dtype=np.int8),
        current_player=1,
    ),
}

DIFFICULTIES = tuple(OTHELLO_DIFFICULTY)


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Play configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "othello",
        difficulty: str = "normal",
        seed: Optional[int] = None,
        level: int = 1,
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES)
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")
        if difficulty not in DIFFICULTIES:
            available = ", ".join(DIFFICULTIES)
            raise ValueError(f"Unknown difficulty: {difficulty}. Available: {available}")
        if level < 1:
            raise ValueError(f"Level must be >= 1, got {level}")

        self.game_name = game_name
        self.difficulty = difficulty
        self.seed = seed
        self.level = level

        self.num_players = GAMES[game_name]().num_players()


# Default configuration
DEFAULT_CONFIG = Config()
