"""
Core types, constants, and errors.

This module contains the fundamental types shared by every game and AI:
- Cell encoding for two-player boards
- Move / MoveCandidate
- State: game result from one player's point of view
- Error hierarchy for bad input and unavailable moves
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple


class State(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


# ─── Cell encoding ────────────────────────────────────────────────────────────
#
# Boards are int8 arrays:
#     0 = empty
#     1 = black (player 1)
#     2 = white (player 2)

EMPTY = 0
BLACK = 1
WHITE = 2

PLAYERS = (BLACK, WHITE)


class Move(NamedTuple):
    """A board coordinate."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


@dataclass
class MoveCandidate:
    """A move paired with its evaluation during search."""

    move: Move
    score: float


# ─── Errors ───────────────────────────────────────────────────────────────────


class BoardShapeError(ValueError):
    """Board or lamp vector does not match the expected dimensions."""

    def __init__(self, expected, actual):
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        super().__init__(f"Expected board shape {self.expected}, got {self.actual}")


class IllegalMoveError(ValueError):
    """Move is off-board, on an occupied cell, or not legal for the player."""


class NoMoveAvailable(RuntimeError):
    """No empty cell is left to play."""


class UnsolvableBoardError(ValueError):
    """Lamp state cannot be produced by any sequence of toggles."""
