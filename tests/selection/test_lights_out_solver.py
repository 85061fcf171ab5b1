"""
Tests for arcade_ai.selection.lights_out_solver

Tests the GF(2) hint engine against boards produced by pressing cells.
"""

import random

import numpy as np
import pytest

from arcade_ai.core.types import BoardShapeError, UnsolvableBoardError
from arcade_ai.games.lights_out import TOTAL, generate_puzzle, is_all_off, toggle
from arcade_ai.selection.lights_out_solver import (
    PRESS_MATRIX, apply_solution, build_system, hint_cell, solve_lights_out,
)


def _pressed(cells) -> np.ndarray:
    lamps = np.zeros(TOTAL, dtype=np.uint8)
    for idx in cells:
        lamps = toggle(lamps, idx)
    return lamps


class TestBuildSystem:
    """build_system function tests."""

    def test_shape(self, lamps_off: np.ndarray):
        assert build_system(lamps_off).shape == (TOTAL, TOTAL + 1)

    def test_press_matrix_symmetric(self):
        """Neighbourhood is symmetric, so rows and columns coincide."""
        np.testing.assert_array_equal(PRESS_MATRIX, PRESS_MATRIX.T)

    def test_row_degrees(self):
        """Corners touch 3 cells, edges 4, interior 5."""
        degrees = PRESS_MATRIX.sum(axis=1)
        assert degrees[0] == 3
        assert degrees[2] == 4
        assert degrees[12] == 5

    def test_rhs_is_lamp_state(self):
        lamps = _pressed([12])
        np.testing.assert_array_equal(build_system(lamps)[:, TOTAL], lamps)


class TestSolveLightsOut:
    """solve_lights_out function tests."""

    def test_all_off_gives_zero_vector(self, lamps_off: np.ndarray):
        presses = solve_lights_out(lamps_off)
        assert presses.dtype == bool
        assert presses.shape == (TOTAL,)
        assert not presses.any()

    def test_solved_state_is_idempotent(self, lamps_off: np.ndarray):
        """Solving an all-off board twice still yields nothing to press."""
        first = solve_lights_out(lamps_off)
        assert not solve_lights_out(apply_solution(lamps_off, first)).any()

    def test_scenario_press_0_6_12(self):
        """Pressing {0, 6, 12} from all-off, then the solution, returns to all-off."""
        scrambled = _pressed([0, 6, 12])
        presses = solve_lights_out(scrambled)
        assert is_all_off(apply_solution(scrambled, presses))

    @pytest.mark.parametrize("seed", range(20))
    def test_reachable_states_are_solved(self, seed):
        """Any board produced by random presses is cleared by the solution."""
        rng = random.Random(seed)
        scrambled = _pressed(rng.randrange(TOTAL) for _ in range(rng.randint(1, 30)))
        presses = solve_lights_out(scrambled)
        assert is_all_off(apply_solution(scrambled, presses))

    def test_generated_puzzles_are_solved(self, rng: random.Random):
        for level in range(1, 10):
            lamps, _ = generate_puzzle(level, rng)
            assert is_all_off(apply_solution(lamps, solve_lights_out(lamps)))

    def test_accepts_5x5_grid(self):
        grid = _pressed([7]).reshape(5, 5).astype(bool)
        presses = solve_lights_out(grid)
        assert is_all_off(apply_solution(grid, presses))

    def test_input_not_modified(self):
        lamps = _pressed([3, 9])
        before = lamps.copy()
        solve_lights_out(lamps)
        np.testing.assert_array_equal(lamps, before)

    @pytest.mark.parametrize("size", [0, 24, 26, 36])
    def test_wrong_size_raises(self, size):
        with pytest.raises(BoardShapeError):
            solve_lights_out(np.zeros(size, dtype=np.uint8))

    def test_unreachable_state_raises(self):
        """A single lit corner cannot be produced by presses on 5x5."""
        lamps = np.zeros(TOTAL, dtype=np.uint8)
        lamps[0] = 1
        with pytest.raises(UnsolvableBoardError):
            solve_lights_out(lamps)


class TestMinimalSolution:
    """minimal=True search over the kernel."""

    @pytest.mark.parametrize("seed", range(10))
    def test_minimal_is_valid_and_not_longer(self, seed):
        rng = random.Random(seed)
        scrambled = _pressed(rng.randrange(TOTAL) for _ in range(8))
        default = solve_lights_out(scrambled)
        minimal = solve_lights_out(scrambled, minimal=True)

        assert is_all_off(apply_solution(scrambled, minimal))
        assert minimal.sum() <= default.sum()

    def test_single_press_found(self):
        """A one-press scramble is undone by exactly that press."""
        minimal = solve_lights_out(_pressed([12]), minimal=True)
        assert np.nonzero(minimal)[0].tolist() == [12]


class TestHintCell:
    """hint_cell function tests."""

    def test_solved_board(self, lamps_off: np.ndarray):
        assert hint_cell(lamps_off) == -1

    def test_hint_is_part_of_solution(self):
        lamps = _pressed([4, 20])
        idx = hint_cell(lamps)
        assert solve_lights_out(lamps)[idx]

    def test_following_hints_solves(self, rng: random.Random):
        """Repeatedly pressing the hinted cell clears the board."""
        lamps, _ = generate_puzzle(4, rng)
        for _ in range(TOTAL):
            idx = hint_cell(lamps)
            if idx == -1:
                break
            lamps = toggle(lamps, idx)
        assert is_all_off(lamps)
