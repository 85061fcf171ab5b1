"""
Othello (Reversi) on an 8x8 board.

Uses int8 board:
    0 = empty
    1 = black (moves first)
    2 = white

The module-level functions are pure: they never mutate the board they are
given, so the search can call them freely on shared positions.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from arcade_ai.core.types import BLACK, EMPTY, WHITE, IllegalMoveError, Move, State
from arcade_ai.games.game_base import GameBase
from arcade_ai.games.game_rules import ALL_DIRECTIONS, as_board, board_full, opponent
from arcade_ai.games.game_state import GameState

SIZE = 8

CELL_STRINGS = {0: "·", 1: "●", 2: "○"}


def initial_board() -> np.ndarray:
    """Standard opening: d4/e5 white, e4/d5 black."""
    board = np.zeros((SIZE, SIZE), dtype=np.int8)
    board[3, 3] = WHITE
    board[4, 4] = WHITE
    board[3, 4] = BLACK
    board[4, 3] = BLACK
    return board


def as_othello_board(board) -> np.ndarray:
    return as_board(board, (SIZE, SIZE))


def _flips_in_direction(board: np.ndarray, r: int, c: int, dr: int, dc: int, player: int) -> List[Tuple[int, int]]:
    """Opponent run starting next to (r, c) and capped by player's own disc, else []."""
    opp = opponent(player)
    run = []
    nr, nc = r + dr, c + dc
    while 0 <= nr < SIZE and 0 <= nc < SIZE and board[nr, nc] == opp:
        run.append((nr, nc))
        nr += dr
        nc += dc
    if run and 0 <= nr < SIZE and 0 <= nc < SIZE and board[nr, nc] == player:
        return run
    return []


def is_valid_move(board: np.ndarray, r: int, c: int, player: int) -> bool:
    if not (0 <= r < SIZE and 0 <= c < SIZE) or board[r, c] != EMPTY:
        return False
    return any(_flips_in_direction(board, r, c, dr, dc, player) for dr, dc in ALL_DIRECTIONS)


def valid_moves(board: np.ndarray, player: int) -> List[Move]:
    """All legal moves for player in row-major order. Recomputed on every call."""
    return [
        Move(r, c)
        for r in range(SIZE)
        for c in range(SIZE)
        if board[r, c] == EMPTY and is_valid_move(board, r, c, player)
    ]


def apply_move(board: np.ndarray, r: int, c: int, player: int) -> Tuple[np.ndarray, List[Tuple[int, int]]]:
    """
    Place player's disc at (r, c) on a copy of board and flip captured runs.

    Returns:
        (new_board, flipped) - the parent board is left untouched.

    Raises:
        IllegalMoveError: (r, c) captures nothing or is occupied.
    """
    if not (0 <= r < SIZE and 0 <= c < SIZE) or board[r, c] != EMPTY:
        raise IllegalMoveError(f"Cell ({r},{c}) is not playable")

    flipped: List[Tuple[int, int]] = []
    for dr, dc in ALL_DIRECTIONS:
        flipped.extend(_flips_in_direction(board, r, c, dr, dc, player))
    if not flipped:
        raise IllegalMoveError(f"Cell ({r},{c}) captures no discs for player {player}")

    new_board = board.copy()
    new_board[r, c] = player
    for fr, fc in flipped:
        new_board[fr, fc] = player
    return new_board, flipped


def count_discs(board: np.ndarray) -> Tuple[int, int]:
    """Return (black, white)."""
    return int(np.count_nonzero(board == BLACK)), int(np.count_nonzero(board == WHITE))


class Othello(GameBase):
    """
    Othello with pass handling.

    A side with no legal move passes automatically; two passes in a row or
    a full board end the game.
    """

    __slots__ = ('state', 'consecutive_passes', 'last_flipped')

    def __init__(self):
        self.state = GameState(initial_board(), current_player=BLACK)
        self.consecutive_passes = 0
        self.last_flipped: List[Tuple[int, int]] = []

    def game_id(self) -> str:
        return "othello"

    def num_players(self) -> int:
        return 2

    def deep_clone(self) -> "Othello":
        g = Othello.__new__(Othello)
        g.state = self.state.copy()
        g.consecutive_passes = self.consecutive_passes
        g.last_flipped = list(self.last_flipped)
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = GameState(as_othello_board(game_state.board), game_state.current_player)
        self.consecutive_passes = 0
        self._resolve_passes()

    def current_player(self) -> int:
        return self.state.current_player

    def valid_moves(self) -> List[Move]:
        return valid_moves(self.state.board, self.state.current_player)

    def apply_move(self, move: Move) -> None:
        r, c = int(move[0]), int(move[1])
        player = self.state.current_player
        self.state.board, self.last_flipped = apply_move(self.state.board, r, c, player)
        self.state.current_player = opponent(player)
        self.consecutive_passes = 0
        self._resolve_passes()

    def pass_turn(self) -> None:
        """Hand the turn over without placing a disc."""
        if self.valid_moves():
            raise IllegalMoveError("Cannot pass while a legal move exists")
        self.consecutive_passes += 1
        self.state.current_player = opponent(self.state.current_player)

    def _resolve_passes(self) -> None:
        """Skip sides with no legal move until someone can play or both have passed."""
        while (
            self.consecutive_passes < 2
            and not board_full(self.state.board)
            and not self.valid_moves()
        ):
            self.pass_turn()

    def is_over(self) -> bool:
        return self.consecutive_passes >= 2 or board_full(self.state.board)

    def winner(self) -> int:
        """Player with more discs, 0 on a draw."""
        black, white = count_discs(self.state.board)
        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return 0

    def get_result(self, player: int) -> State:
        if not self.is_over():
            return State.NEUTRAL
        winner = self.winner()
        if winner == 0:
            return State.TIE
        return State.WIN if winner == player else State.LOSS

    def state_string(self) -> str:
        board = self.state.board
        lines = ["  " + " ".join(str(c) for c in range(SIZE))]
        for r in range(SIZE):
            lines.append(f"{r} " + " ".join(CELL_STRINGS[int(v)] for v in board[r]))
        black, white = count_discs(board)
        lines.append(f"● {black}  ○ {white}")
        return "\n".join(lines)

