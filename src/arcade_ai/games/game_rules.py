"""
NumPy board utilities shared by the grid games.

All helpers take int8 boards; nothing here mutates its input.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from arcade_ai.core.types import BLACK, EMPTY, WHITE, BoardShapeError

# (dr, dc) vectors
ALL_DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)
LINE_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))  # horizontal, vertical, two diagonals


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def opponent(player: int) -> int:
    """Return the other player id (1 <-> 2)."""
    if player not in (BLACK, WHITE):
        raise ValueError(f"Unknown player: {player}")
    return 3 - player


def board_full(board: np.ndarray) -> bool:
    """Return True if no cell is empty."""
    return not np.any(board == EMPTY)


def as_board(board, shape: Tuple[int, ...], values: Sequence[int] = (EMPTY, BLACK, WHITE)) -> np.ndarray:
    """
    Coerce a nested sequence or array into an int8 board.

    Never pads or truncates: anything that is not exactly `shape` is a
    programmer error.

    Raises:
        BoardShapeError: wrong dimensions.
        ValueError: a cell holds a value outside `values`.
    """
    arr = np.asarray(board)
    if arr.shape != tuple(shape):
        raise BoardShapeError(shape, arr.shape)

    bad = ~np.isin(arr, values)
    if np.any(bad):
        found = np.unique(arr[bad]).tolist()
        raise ValueError(f"Invalid cell values {found}; allowed: {tuple(values)}")
    return arr.astype(np.int8)
