"""
A computer player bound to one seat, difficulty and random source.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from arcade_ai.core.types import Move
from arcade_ai.games.game_base import GameBase
from arcade_ai.games.gomoku import Gomoku
from arcade_ai.games.lights_out import SIZE as LIGHTS_SIZE
from arcade_ai.games.lights_out import LightsOut
from arcade_ai.games.othello import Othello
from arcade_ai.selection import OTHELLO_DIFFICULTY, best_gomoku_move, best_othello_move, hint_cell


@dataclass
class Agent:
    _player_id: int = 2  # The seat this agent plays (1 = black, 2 = white)
    _difficulty: str = "normal"  # Key into OTHELLO_DIFFICULTY; Gomoku and Lights-Out ignore it
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self):
        self.difficulty = self._difficulty

    @property
    def player_id(self) -> int:
        """Returns the player id (1 or 2)."""
        return self._player_id

    @player_id.setter
    def player_id(self, value: int):
        """Sets the player id (1 or 2)."""
        self._player_id = value

    @property
    def difficulty(self) -> str:
        """Returns the difficulty name."""
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: str):
        """Sets the difficulty name; must be a known level."""
        if value not in OTHELLO_DIFFICULTY:
            available = ", ".join(OTHELLO_DIFFICULTY)
            raise ValueError(f"Unknown difficulty: {value}. Available: {available}")
        self._difficulty = value

    def select_move(self, game: GameBase) -> Optional[Move]:
        """
        Choose a move for the current position of game.

        Returns None when there is nothing to play: an Othello pass, or a
        solved Lights-Out board.
        """
        board = game.get_state().board

        if isinstance(game, Othello):
            cfg = OTHELLO_DIFFICULTY[self.difficulty]
            return best_othello_move(board, self.player_id, cfg.depth, rng=self.rng, noise=cfg.noise)

        if isinstance(game, Gomoku):
            return best_gomoku_move(board, self.player_id, rng=self.rng)

        if isinstance(game, LightsOut):
            idx = hint_cell(game.lamps)
            if idx == -1:
                return None
            return Move(*divmod(idx, LIGHTS_SIZE))

        raise TypeError(f"No AI for game {game.game_id()}")
