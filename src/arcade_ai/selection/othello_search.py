"""
Othello AI: minimax with alpha-beta pruning.

The tree is explored copy-on-apply, every child is a fresh board from
othello.apply_move, so no node ever mutates its parent. Legal moves are
regenerated at every node.

Leaves are scored from the searching player's point of view:

    sum(WEIGHT_TABLE[cell] * (+1 own, -1 opponent)) + 5 * (own mobility - opponent mobility)
"""

from __future__ import annotations

import logging
import math
import random
from typing import NamedTuple, Optional

import numpy as np

from arcade_ai.core.types import PLAYERS, Move, MoveCandidate
from arcade_ai.games.game_rules import opponent
from arcade_ai.games.othello import apply_move, as_othello_board, valid_moves

logger = logging.getLogger(__name__)

# Corners high, edges medium, cells next to corners negative
WEIGHT_TABLE = np.array([
    [120, -20,  20,   5,   5,  20, -20, 120],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [120, -20,  20,   5,   5,  20, -20, 120],
], dtype=np.int32)

MOBILITY_WEIGHT = 5


class Difficulty(NamedTuple):
    depth: int
    noise: float  # chance of playing a random legal move instead of searching


DIFFICULTY = {
    "easy": Difficulty(depth=1, noise=0.6),
    "normal": Difficulty(depth=3, noise=0.0),
    "hard": Difficulty(depth=5, noise=0.0),
}


def evaluate(board: np.ndarray, player: int) -> int:
    """Static evaluation of board for player: positional weights plus mobility."""
    opp = opponent(player)
    positional = int(WEIGHT_TABLE[board == player].sum() - WEIGHT_TABLE[board == opp].sum())
    mobility = len(valid_moves(board, player)) - len(valid_moves(board, opp))
    return positional + MOBILITY_WEIGHT * mobility


def minimax(
    board: np.ndarray,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    player: int,
) -> float:
    """
    Alpha-beta minimax value of board for `player`.

    A node with depth 0, or whose side to move has no legal move, is scored
    statically; a forced pass is not followed into the opponent's reply.
    """
    side = player if maximizing else opponent(player)
    moves = valid_moves(board, side)
    if depth == 0 or not moves:
        return evaluate(board, player)

    if maximizing:
        value = -math.inf
        for r, c in moves:
            child, _ = apply_move(board, r, c, side)
            value = max(value, minimax(child, depth - 1, alpha, beta, False, player))
            alpha = max(alpha, value)
            if beta <= alpha:
                break
        return value

    value = math.inf
    for r, c in moves:
        child, _ = apply_move(board, r, c, side)
        value = min(value, minimax(child, depth - 1, alpha, beta, True, player))
        beta = min(beta, value)
        if beta <= alpha:
            break
    return value


def best_othello_move(
    board,
    player: int,
    depth: int,
    rng: Optional[random.Random] = None,
    noise: float = 0.0,
) -> Optional[Move]:
    """
    Pick the move that maximizes player's evaluation `depth` plies ahead.

    Args:
        board: 8x8 board (array or nested lists). Not modified.
        player: 1 (black) or 2 (white).
        depth: search depth, >= 1.
        rng: random source for the noise roll.
        noise: probability of returning a random legal move instead.

    Returns:
        The chosen Move, or None when player has no legal move (pass).
        Ties go to the first move in row-major order.
    """
    if depth < 1:
        raise ValueError(f"Search depth must be >= 1, got {depth}")
    if player not in PLAYERS:
        raise ValueError(f"Unknown player: {player}")
    board = as_othello_board(board)

    moves = valid_moves(board, player)
    if not moves:
        logger.debug("Othello: player %d has no legal move, passing", player)
        return None

    if noise > 0:
        rng = rng or random.Random()
        if rng.random() < noise:
            move = rng.choice(moves)
            logger.debug("Othello: random move %s (noise %.2f)", move, noise)
            return move

    best: Optional[MoveCandidate] = None
    alpha = -math.inf
    for r, c in moves:
        child, _ = apply_move(board, r, c, player)
        score = minimax(child, depth - 1, alpha, math.inf, False, player)
        if best is None or score > best.score:
            best = MoveCandidate(Move(r, c), score)
            alpha = max(alpha, score)

    logger.debug("Othello: depth %d picked %s (score %s) from %d moves", depth, best.move, best.score, len(moves))
    return best.move
