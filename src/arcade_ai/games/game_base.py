"""
GameBase - abstract base class for all games.
"""

from abc import ABC, abstractmethod
from typing import List

from arcade_ai.core.types import Move, State
from arcade_ai.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for all games.

    Games own their state and rules. AI routines never receive a game
    object; they get the board array and return a Move.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'othello')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return number of players in the game."""
        pass

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """Deep copy of game + state."""
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    @abstractmethod
    def current_player(self) -> int:
        """Return ID of player to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[Move]:
        """Return all legal moves for the player to act."""
        pass

    @abstractmethod
    def apply_move(self, move: Move) -> None:
        """
        Apply a move to the game. Mutates internal state.

        Raises:
            IllegalMoveError: move is not in valid_moves().
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def get_result(self, player: int) -> State:
        """
        Return outcome for the player:
            WIN / TIE / NEUTRAL / LOSS
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
