"""
Gomoku AI: one-ply heuristic scoring.

Deep search is out of reach on 15x15, so every empty cell near existing
stones is scored by what a stone there would build:

    attack = sum over 4 lines of ATTACK_SCORES[run] (x2 if both ends open)
    defend = same, for an opponent stone, with DEFEND_SCORES
    score  = attack + 0.9 * defend

A cell that completes five for the AI is played immediately.
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Sequence, Tuple

import numpy as np

from arcade_ai.core.types import EMPTY, PLAYERS, WHITE, IllegalMoveError, Move, NoMoveAvailable
from arcade_ai.games.game_rules import LINE_DIRECTIONS, board_full, in_bounds, opponent
from arcade_ai.games.gomoku import WIN_LENGTH, as_gomoku_board

logger = logging.getLogger(__name__)

# Indexed by run length; five or more is a win
ATTACK_SCORES = (0, 10, 100, 1000, 50000, 999999)
DEFEND_SCORES = (0, 5, 50, 500, 25000, 999999)
WIN_SCORE = 999999

DEFEND_WEIGHT = 0.9
CANDIDATE_RADIUS = 2
OPENING_JITTER = 1


def score_direction(board: np.ndarray, r: int, c: int, dr: int, dc: int, player: int) -> Tuple[int, int]:
    """
    Run length and open ends through (r, c) along (dr, dc), assuming player owns (r, c).

    Returns:
        (count, open_ends). A run shorter than five that is blocked at both
        ends (by the edge or the opponent) is worthless and reported as (0, 0).
    """
    rows, cols = board.shape
    count = 1
    open_ends = 0
    blocked = 0

    for sign in (1, -1):
        nr, nc = r + sign * dr, c + sign * dc
        while 0 <= nr < rows and 0 <= nc < cols and board[nr, nc] == player:
            count += 1
            nr += sign * dr
            nc += sign * dc
        if 0 <= nr < rows and 0 <= nc < cols and board[nr, nc] == EMPTY:
            open_ends += 1
        else:
            blocked += 1

    if count >= WIN_LENGTH:
        return count, open_ends
    if blocked == 2:
        return 0, 0
    return count, open_ends


def _score_cell(work: np.ndarray, r: int, c: int, player: int, table: Sequence[int]) -> int:
    """Score a stone at (r, c) on a scratch board; the stone is removed again."""
    work[r, c] = player
    score = 0
    for dr, dc in LINE_DIRECTIONS:
        count, open_ends = score_direction(work, r, c, dr, dc, player)
        if count >= WIN_LENGTH:
            score += WIN_SCORE
            continue
        score += table[count] * (2 if open_ends == 2 else 1)
    work[r, c] = EMPTY
    return score


def evaluate_cell(board, r: int, c: int, player: int, table: Sequence[int] = ATTACK_SCORES) -> int:
    """Score of placing player's stone at (r, c); -1 if the cell is taken."""
    board = as_gomoku_board(board)
    if not in_bounds(board, r, c):
        raise IllegalMoveError(f"Cell ({r},{c}) is off the board")
    if board[r, c] != EMPTY:
        return -1
    return _score_cell(board, r, c, player, table)


def candidate_cells(board: np.ndarray, radius: int = CANDIDATE_RADIUS) -> List[Move]:
    """Empty cells within `radius` (square neighbourhood) of any stone, row-major."""
    rows, cols = board.shape
    near = np.zeros(board.shape, dtype=bool)
    for r, c in np.argwhere(board != EMPTY):
        near[max(0, r - radius):min(rows, r + radius + 1), max(0, c - radius):min(cols, c + radius + 1)] = True
    near &= board == EMPTY
    return [Move(int(r), int(c)) for r, c in np.argwhere(near)]


def best_gomoku_move(board, player: int = WHITE, rng: Optional[random.Random] = None) -> Move:
    """
    Pick player's next stone.

    Args:
        board: 15x15 board (array or nested lists). Not modified.
        player: the side to move, 2 (white) by default.
        rng: random source for opening jitter and tie-breaks.

    Raises:
        NoMoveAvailable: the board is full.
    """
    if player not in PLAYERS:
        raise ValueError(f"Unknown player: {player}")
    work = as_gomoku_board(board)
    rng = rng or random.Random()

    if board_full(work):
        raise NoMoveAvailable("Board is full")

    candidates = candidate_cells(work)
    if not candidates:
        center = work.shape[0] // 2
        offset = rng.randint(-OPENING_JITTER, OPENING_JITTER)
        logger.debug("Gomoku: opening near centre, offset %d", offset)
        return Move(center + offset, center + offset)

    opp = opponent(player)
    best_score = -math.inf
    best_cells: List[Move] = []

    for move in candidates:
        attack = _score_cell(work, move.row, move.col, player, ATTACK_SCORES)
        if attack >= WIN_SCORE:
            logger.debug("Gomoku: winning move %s", move)
            return move

        defend = _score_cell(work, move.row, move.col, opp, DEFEND_SCORES)
        combined = attack + DEFEND_WEIGHT * defend

        if combined > best_score:
            best_score = combined
            best_cells = [move]
        elif combined == best_score:
            best_cells.append(move)

    choice = rng.choice(best_cells)
    logger.debug(
        "Gomoku: picked %s (score %.1f, %d tied of %d candidates)",
        choice, best_score, len(best_cells), len(candidates),
    )
    return choice
