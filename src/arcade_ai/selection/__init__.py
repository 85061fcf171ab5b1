"""
Selection module - AI move selection for each game.

Provides the main entry points:
- solve_lights_out(): exact GF(2) solver behind Lights-Out hints
- best_othello_move(): minimax with alpha-beta pruning
- best_gomoku_move(): one-ply attack/defend heuristic
"""

from arcade_ai.selection.lights_out_solver import solve_lights_out, hint_cell, apply_solution
from arcade_ai.selection.othello_search import best_othello_move, DIFFICULTY as OTHELLO_DIFFICULTY
from arcade_ai.selection.gomoku_scorer import best_gomoku_move

__all__ = [
    "solve_lights_out",
    "hint_cell",
    "apply_solution",
    "best_othello_move",
    "best_gomoku_move",
    "OTHELLO_DIFFICULTY",
]
