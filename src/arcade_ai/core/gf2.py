"""
Linear algebra over GF(2).

Matrices are uint8 arrays of 0/1 values; addition is XOR. Used by the
Lights-Out hint engine, but nothing here is specific to that puzzle.
"""

from __future__ import annotations

import itertools
from typing import List, Tuple

import numpy as np

from arcade_ai.core.types import UnsolvableBoardError


def rref(augmented: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Gauss-Jordan elimination of an augmented matrix [A | b] over GF(2).

    The last column is treated as the right-hand side and never pivots.

    Args:
        augmented: (m, n+1) array of 0/1 values. Not modified.

    Returns:
        (reduced, pivot_cols) where pivot_cols[i] is the column row i pivots
        on, or -1 if row i has no pivot.
    """
    mat = (np.asarray(augmented) % 2).astype(np.uint8)
    rows, cols = mat.shape
    n = cols - 1
    pivot_cols = np.full(rows, -1, dtype=np.int32)

    row = 0
    for col in range(n):
        if row >= rows:
            break

        candidates = np.nonzero(mat[row:, col])[0]
        if candidates.size == 0:
            continue
        pivot = row + int(candidates[0])

        if pivot != row:
            mat[[row, pivot]] = mat[[pivot, row]]
        pivot_cols[row] = col

        # Clear this column everywhere else
        mask = mat[:, col].astype(bool)
        mask[row] = False
        mat[mask] ^= mat[row]

        row += 1

    return mat, pivot_cols


def _is_consistent(reduced: np.ndarray) -> bool:
    """False if any row reads 0 ... 0 | 1."""
    lhs = reduced[:, :-1]
    rhs = reduced[:, -1]
    return not np.any(~lhs.any(axis=1) & (rhs == 1))


def _particular(reduced: np.ndarray, pivot_cols: np.ndarray) -> np.ndarray:
    """Free variables fixed to 0; pivot variables read off the RHS column."""
    n = reduced.shape[1] - 1
    x = np.zeros(n, dtype=np.uint8)
    for row, col in enumerate(pivot_cols):
        if col != -1:
            x[col] = reduced[row, -1]
    return x


def solve(coeffs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Solve coeffs · x = rhs over GF(2).

    Free variables are fixed to 0, so the result is *a* solution, not
    necessarily the one with the fewest ones.

    Raises:
        UnsolvableBoardError: the system is inconsistent.
    """
    coeffs = np.asarray(coeffs, dtype=np.uint8)
    rhs = np.asarray(rhs, dtype=np.uint8).reshape(-1, 1)
    reduced, pivot_cols = rref(np.concatenate([coeffs, rhs], axis=1))

    if not _is_consistent(reduced):
        raise UnsolvableBoardError("System has no solution over GF(2)")

    return _particular(reduced, pivot_cols)


def nullspace(coeffs: np.ndarray) -> List[np.ndarray]:
    """Return a basis of the kernel of coeffs over GF(2), one vector per free column."""
    coeffs = np.asarray(coeffs, dtype=np.uint8)
    m, n = coeffs.shape
    reduced, pivot_cols = rref(np.concatenate([coeffs, np.zeros((m, 1), dtype=np.uint8)], axis=1))

    pivots = {int(c): row for row, c in enumerate(pivot_cols) if c != -1}
    basis: List[np.ndarray] = []
    for free in range(n):
        if free in pivots:
            continue
        v = np.zeros(n, dtype=np.uint8)
        v[free] = 1
        # Each pivot variable equals the free column entry in its row
        for col, row in pivots.items():
            v[col] = reduced[row, free]
        basis.append(v)
    return basis


def min_weight_solution(coeffs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Solution of coeffs · x = rhs with the fewest ones.

    Enumerates every combination of kernel vectors, so only use it where the
    kernel is small (two dimensions for 5x5 Lights-Out).
    """
    particular = solve(coeffs, rhs)
    best = particular
    best_weight = int(best.sum())
    basis = nullspace(coeffs)

    for k in range(1, len(basis) + 1):
        for combo in itertools.combinations(basis, k):
            cand = particular.copy()
            for v in combo:
                cand ^= v
            weight = int(cand.sum())
            if weight < best_weight:
                best, best_weight = cand, weight

    return best
