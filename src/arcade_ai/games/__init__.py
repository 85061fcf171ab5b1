"""
Games module - puzzle and board game implementations.
"""

from arcade_ai.games.game_state import GameState
from arcade_ai.games.game_base import GameBase
from arcade_ai.games.game_rules import in_bounds, board_full, opponent, as_board
from arcade_ai.games.othello import Othello
from arcade_ai.games.gomoku import Gomoku
from arcade_ai.games.lights_out import LightsOut

__all__ = [
    "GameState",
    "GameBase",
    "Othello",
    "Gomoku",
    "LightsOut",
    "in_bounds",
    "board_full",
    "opponent",
    "as_board",
]
