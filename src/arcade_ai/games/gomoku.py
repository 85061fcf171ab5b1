"""
Gomoku (omok) on a 15x15 board - five in a row wins.

Uses int8 board:
    0 = empty
    1 = black (moves first)
    2 = white
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from arcade_ai.core.types import BLACK, EMPTY, WHITE, IllegalMoveError, Move, State
from arcade_ai.games.game_base import GameBase
from arcade_ai.games.game_rules import LINE_DIRECTIONS, as_board, board_full, opponent
from arcade_ai.games.game_state import GameState

SIZE = 15
WIN_LENGTH = 5

CELL_STRINGS = {0: "·", 1: "●", 2: "○"}


def as_gomoku_board(board) -> np.ndarray:
    return as_board(board, (SIZE, SIZE))


def line_through(board: np.ndarray, r: int, c: int, dr: int, dc: int, player: int) -> List[Move]:
    """Contiguous run of player's stones through (r, c) along (dr, dc), in board order."""
    rows, cols = board.shape
    cells = [Move(r, c)]
    for step in range(1, WIN_LENGTH):
        nr, nc = r + dr * step, c + dc * step
        if not (0 <= nr < rows and 0 <= nc < cols) or board[nr, nc] != player:
            break
        cells.append(Move(nr, nc))
    for step in range(1, WIN_LENGTH):
        nr, nc = r - dr * step, c - dc * step
        if not (0 <= nr < rows and 0 <= nc < cols) or board[nr, nc] != player:
            break
        cells.insert(0, Move(nr, nc))
    return cells


def check_win(board: np.ndarray, r: int, c: int, player: int) -> Optional[List[Move]]:
    """Return the five winning cells through (r, c), or None."""
    for dr, dc in LINE_DIRECTIONS:
        cells = line_through(board, r, c, dr, dc, player)
        if len(cells) >= WIN_LENGTH:
            return cells[:WIN_LENGTH]
    return None


class Gomoku(GameBase):
    """Gomoku with move history, win-line tracking and undo."""

    __slots__ = ('state', 'history', 'winner', 'win_line')

    def __init__(self):
        self.state = GameState(np.zeros((SIZE, SIZE), dtype=np.int8), current_player=BLACK)
        self.history: List[Move] = []
        self.winner = 0
        self.win_line: Optional[List[Move]] = None

    def game_id(self) -> str:
        return "gomoku"

    def num_players(self) -> int:
        return 2

    def deep_clone(self) -> "Gomoku":
        g = Gomoku.__new__(Gomoku)
        g.state = self.state.copy()
        g.history = list(self.history)
        g.winner = self.winner
        g.win_line = list(self.win_line) if self.win_line else None
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = GameState(as_gomoku_board(game_state.board), game_state.current_player)
        self.history = []
        self.winner, self.win_line = self._compute_winner()

    def current_player(self) -> int:
        return self.state.current_player

    def valid_moves(self) -> List[Move]:
        if self.is_over():
            return []
        return [Move(int(r), int(c)) for r, c in np.argwhere(self.state.board == EMPTY)]

    def apply_move(self, move: Move) -> None:
        r, c = int(move[0]), int(move[1])
        if self.is_over():
            raise IllegalMoveError("Game is over")
        if not (0 <= r < SIZE and 0 <= c < SIZE):
            raise IllegalMoveError(f"Cell ({r},{c}) is off the board")
        if self.state.board[r, c] != EMPTY:
            raise IllegalMoveError(f"Cell ({r},{c}) is occupied")

        player = self.state.current_player
        self.state.board[r, c] = player
        self.history.append(Move(r, c))

        line = check_win(self.state.board, r, c, player)
        if line:
            self.winner = player
            self.win_line = line

        self.state.current_player = opponent(player)

    def undo(self, count: int = 2) -> List[Move]:
        """
        Take back the last `count` moves (default: the AI reply and the player's move).

        Returns the removed moves, most recent first.
        """
        if count > len(self.history):
            raise IllegalMoveError(f"Cannot undo {count} moves, only {len(self.history)} played")

        removed = []
        for _ in range(count):
            move = self.history.pop()
            self.state.board[move.row, move.col] = EMPTY
            self.state.current_player = opponent(self.state.current_player)
            removed.append(move)

        self.winner = 0
        self.win_line = None
        return removed

    @property
    def last_move(self) -> Optional[Move]:
        return self.history[-1] if self.history else None

    def is_over(self) -> bool:
        return self.winner != 0 or board_full(self.state.board)

    def get_result(self, player: int) -> State:
        if self.winner == player:
            return State.WIN
        if self.winner != 0:
            return State.LOSS
        if board_full(self.state.board):
            return State.TIE
        return State.NEUTRAL

    def _compute_winner(self):
        board = self.state.board
        for r, c in np.argwhere(board != EMPTY):
            player = int(board[r, c])
            line = check_win(board, int(r), int(c), player)
            if line:
                return player, line
        return 0, None

    def state_string(self) -> str:
        board = self.state.board
        lines = ["  " + "".join(f"{c:3d}" for c in range(SIZE))]
        for r in range(SIZE):
            lines.append(f"{r:2d}" + "".join(f"{CELL_STRINGS[int(v)]:>3}" for v in board[r]))
        return "\n".join(lines)
