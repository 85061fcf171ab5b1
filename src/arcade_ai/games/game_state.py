"""
GameState - board + side-to-move container.

Optimized for fast copying.
"""

from __future__ import annotations

import numpy as np


class GameState:
    """
    Lightweight game state container.

    Uses an int8 board:
        0 = empty
        1 = black
        2 = white

    Lights-Out stores lamp on/off as 1/0 in a 5x5 board and
    current_player is always 1.
    """
    __slots__ = ('board', 'current_player')

    def __init__(self, board: np.ndarray, current_player: int):
        self.board = board
        self.current_player = current_player

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(self.board.copy(), self.current_player)
