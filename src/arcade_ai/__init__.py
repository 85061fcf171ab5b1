"""
Arcade AI - the search and solver routines behind a set of board-game and puzzle mini-games.

Quick Start:
    from arcade_ai import best_othello_move, best_gomoku_move, solve_lights_out

    move = best_othello_move(board, player=2, depth=3)
    if move is None:
        ...  # no legal move: pass

Modules:
    core       - Cell encoding, Move types, errors, GF(2) linear algebra
    games      - Othello, Gomoku and Lights-Out rules and state
    selection  - AI routines: minimax, heuristic scorer, Lights-Out solver
    agent      - Computer player bound to a seat and difficulty
    utils      - Game registry, configuration and factories
"""

from arcade_ai.api import (
    play,
    solve_lights_out,
    best_othello_move,
    best_gomoku_move,
)

from arcade_ai.core import Move, State

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play",
    "solve_lights_out",
    "best_othello_move",
    "best_gomoku_move",
    # Types
    "Move",
    "State",
]
