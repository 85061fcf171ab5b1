"""
Core module - fundamental types, errors, and GF(2) linear algebra.

This module provides the building blocks used by every game and AI routine.
"""

from arcade_ai.core.types import (
    EMPTY,
    BLACK,
    WHITE,
    PLAYERS,
    State,
    Move,
    MoveCandidate,
    BoardShapeError,
    IllegalMoveError,
    NoMoveAvailable,
    UnsolvableBoardError,
)
from arcade_ai.core.gf2 import rref, solve, nullspace, min_weight_solution

__all__ = [
    # Cell constants
    "EMPTY",
    "BLACK",
    "WHITE",
    "PLAYERS",
    "State",
    # Types
    "Move",
    "MoveCandidate",
    # Errors
    "BoardShapeError",
    "IllegalMoveError",
    "NoMoveAvailable",
    "UnsolvableBoardError",
    # GF(2)
    "rref",
    "solve",
    "nullspace",
    "min_weight_solution",
]
