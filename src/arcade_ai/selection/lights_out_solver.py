"""
Lights-Out hint engine.

Pressing cell j flips the cells in its neighbourhood, and presses commute
and cancel in pairs, so clearing the board is the linear system A·x = lamps
over GF(2) where A[i, j] = 1 iff pressing j flips i. The neighbourhood is
symmetric, so row i of A is also the set of presses that affect cell i.

Free variables are fixed to 0. The result is a correct solution but not
always the shortest one; pass minimal=True to search the kernel for the
fewest presses.
"""

from __future__ import annotations

import logging

import numpy as np

from arcade_ai.core import gf2
from arcade_ai.games.lights_out import TOTAL, as_lamps, neighbours

logger = logging.getLogger(__name__)


def _press_matrix() -> np.ndarray:
    matrix = np.zeros((TOTAL, TOTAL), dtype=np.uint8)
    for i in range(TOTAL):
        matrix[i, neighbours(i)] = 1
    return matrix


# Fixed adjacency; never mutated
PRESS_MATRIX = _press_matrix()
PRESS_MATRIX.setflags(write=False)


def build_system(lamps) -> np.ndarray:
    """25x26 augmented matrix [A | lamps] for the given lamp state."""
    rhs = as_lamps(lamps).reshape(TOTAL, 1)
    return np.concatenate([PRESS_MATRIX, rhs], axis=1)


def solve_lights_out(lamps, minimal: bool = False) -> np.ndarray:
    """
    Cells to press to turn every lamp off.

    Args:
        lamps: length-25 vector or 5x5 grid, truthy = on.
        minimal: search all solutions for the one with the fewest presses.

    Returns:
        bool array of length 25; True means press that cell. All False when
        the board is already off.

    Raises:
        BoardShapeError: lamps is not 25 cells.
        UnsolvableBoardError: no sequence of presses produces this state.
    """
    system = build_system(lamps)
    coeffs, rhs = system[:, :TOTAL], system[:, TOTAL]

    if minimal:
        presses = gf2.min_weight_solution(coeffs, rhs)
    else:
        presses = gf2.solve(coeffs, rhs)

    logger.debug("Lights-Out solution: %d presses", int(presses.sum()))
    return presses.astype(bool)


def apply_solution(lamps, presses) -> np.ndarray:
    """Press every flagged cell and return the resulting lamp vector."""
    out = as_lamps(lamps).copy()
    for idx in np.nonzero(as_lamps(presses))[0]:
        out[neighbours(int(idx))] ^= 1
    return out


def hint_cell(lamps) -> int:
    """First cell of the current solution, or -1 if the board is already off."""
    presses = solve_lights_out(lamps)
    hits = np.nonzero(presses)[0]
    return int(hits[0]) if hits.size else -1
