"""
Tests for arcade_ai.selection.gomoku_scorer

Tests line scoring, candidate generation and move choice.
"""

import random

import numpy as np
import pytest

from arcade_ai.core.types import BLACK, WHITE, IllegalMoveError, Move, NoMoveAvailable
from arcade_ai.selection.gomoku_scorer import (
    ATTACK_SCORES, DEFEND_SCORES, best_gomoku_move, candidate_cells, evaluate_cell, score_direction,
)


def place(board: np.ndarray, player: int, cells) -> np.ndarray:
    for r, c in cells:
        board[r, c] = player
    return board


class TestScoreDirection:
    """score_direction function tests."""

    def test_lone_stone_open(self, empty_gomoku: np.ndarray):
        place(empty_gomoku, BLACK, [(7, 7)])
        assert score_direction(empty_gomoku, 7, 7, 0, 1, BLACK) == (1, 2)

    def test_run_counts_both_sides(self, empty_gomoku: np.ndarray):
        place(empty_gomoku, BLACK, [(7, 5), (7, 6), (7, 7), (7, 8)])
        assert score_direction(empty_gomoku, 7, 6, 0, 1, BLACK) == (4, 2)

    def test_one_end_blocked(self, empty_gomoku: np.ndarray):
        place(empty_gomoku, BLACK, [(7, 5), (7, 6)])
        place(empty_gomoku, WHITE, [(7, 4)])
        assert score_direction(empty_gomoku, 7, 5, 0, 1, BLACK) == (2, 1)

    def test_both_ends_blocked_is_worthless(self, empty_gomoku: np.ndarray):
        place(empty_gomoku, BLACK, [(7, 5), (7, 6), (7, 7)])
        place(empty_gomoku, WHITE, [(7, 4), (7, 8)])
        assert score_direction(empty_gomoku, 7, 6, 0, 1, BLACK) == (0, 0)

    def test_edge_counts_as_block(self, empty_gomoku: np.ndarray):
        place(empty_gomoku, BLACK, [(0, 0)])
        place(empty_gomoku, WHITE, [(0, 1)])
        assert score_direction(empty_gomoku, 0, 0, 0, 1, BLACK) == (0, 0)

    def test_blocked_five_still_counts(self, empty_gomoku: np.ndarray):
        place(empty_gomoku, BLACK, [(0, c) for c in range(5)])
        place(empty_gomoku, WHITE, [(0, 5)])
        count, _ = score_direction(empty_gomoku, 0, 2, 0, 1, BLACK)
        assert count == 5


class TestEvaluateCell:
    """evaluate_cell function tests."""

    def test_occupied_is_negative(self, empty_gomoku: np.ndarray):
        place(empty_gomoku, BLACK, [(7, 7)])
        assert evaluate_cell(empty_gomoku, 7, 7, WHITE) == -1

    def test_isolated_stone(self, empty_gomoku: np.ndarray):
        """Four open singles, each doubled for two open ends."""
        assert evaluate_cell(empty_gomoku, 7, 7, BLACK) == 4 * ATTACK_SCORES[1] * 2

    def test_defend_table(self, empty_gomoku: np.ndarray):
        assert evaluate_cell(empty_gomoku, 7, 7, BLACK, table=DEFEND_SCORES) == 4 * DEFEND_SCORES[1] * 2

    def test_board_not_mutated(self, empty_gomoku: np.ndarray):
        evaluate_cell(empty_gomoku, 7, 7, BLACK)
        assert not empty_gomoku.any()

    def test_off_board_raises(self, empty_gomoku: np.ndarray):
        with pytest.raises(IllegalMoveError):
            evaluate_cell(empty_gomoku, 15, 0, BLACK)


class TestCandidateCells:
    """candidate_cells function tests."""

    def test_empty_board_has_none(self, empty_gomoku: np.ndarray):
        assert candidate_cells(empty_gomoku) == []

    def test_square_around_stone(self, empty_gomoku: np.ndarray):
        """Radius 2 square minus the stone itself: 24 cells, row-major."""
        place(empty_gomoku, BLACK, [(7, 7)])
        cells = candidate_cells(empty_gomoku)
        assert len(cells) == 24
        assert cells == sorted(cells)
        assert (7, 7) not in cells
        assert (5, 5) in cells and (9, 9) in cells

    def test_clipped_at_corner(self, empty_gomoku: np.ndarray):
        place(empty_gomoku, BLACK, [(0, 0)])
        assert len(candidate_cells(empty_gomoku)) == 8


class TestBestGomokuMove:
    """best_gomoku_move function tests."""

    def test_completes_gapped_five(self, empty_gomoku: np.ndarray, rng: random.Random):
        place(empty_gomoku, WHITE, [(7, 3), (7, 4), (7, 6), (7, 7)])
        place(empty_gomoku, BLACK, [(8, 3), (8, 4), (8, 6)])
        assert best_gomoku_move(empty_gomoku, WHITE, rng) == Move(7, 5)

    def test_win_beats_block(self, empty_gomoku: np.ndarray, rng: random.Random):
        """Own five outranks stopping the opponent's four."""
        place(empty_gomoku, WHITE, [(3, c) for c in range(4)])
        place(empty_gomoku, BLACK, [(10, c) for c in range(5, 9)])
        assert best_gomoku_move(empty_gomoku, WHITE, rng) == Move(3, 4)

    def test_blocks_open_four(self, empty_gomoku: np.ndarray, rng: random.Random):
        place(empty_gomoku, BLACK, [(7, c) for c in range(3, 7)])
        assert best_gomoku_move(empty_gomoku, WHITE, rng) in {Move(7, 2), Move(7, 7)}

    def test_blocks_half_open_four(self, empty_gomoku: np.ndarray, rng: random.Random):
        place(empty_gomoku, BLACK, [(7, c) for c in range(3, 7)])
        place(empty_gomoku, WHITE, [(7, 2)])
        assert best_gomoku_move(empty_gomoku, WHITE, rng) == Move(7, 7)

    def test_plays_for_black(self, empty_gomoku: np.ndarray, rng: random.Random):
        place(empty_gomoku, BLACK, [(c, c) for c in range(2, 6)])
        place(empty_gomoku, WHITE, [(1, 1)])
        assert best_gomoku_move(empty_gomoku, BLACK, rng) == Move(6, 6)

    @pytest.mark.parametrize("seed", range(10))
    def test_opening_near_center(self, empty_gomoku: np.ndarray, seed):
        """Empty board: a diagonal step of at most one from the centre."""
        move = best_gomoku_move(empty_gomoku, WHITE, random.Random(seed))
        assert move.row == move.col
        assert 6 <= move.row <= 8

    def test_reply_is_near_stones(self, empty_gomoku: np.ndarray, rng: random.Random):
        place(empty_gomoku, BLACK, [(7, 7)])
        move = best_gomoku_move(empty_gomoku, WHITE, rng)
        assert max(abs(move.row - 7), abs(move.col - 7)) <= 2
        assert empty_gomoku[move.row, move.col] == 0

    def test_seeded_is_reproducible(self, empty_gomoku: np.ndarray):
        place(empty_gomoku, BLACK, [(7, 7)])
        a = best_gomoku_move(empty_gomoku, WHITE, random.Random(5))
        b = best_gomoku_move(empty_gomoku, WHITE, random.Random(5))
        assert a == b

    def test_full_board_raises(self):
        board = np.full((15, 15), BLACK, dtype=np.int8)
        with pytest.raises(NoMoveAvailable):
            best_gomoku_move(board, WHITE, random.Random(0))

    def test_board_not_mutated(self, empty_gomoku: np.ndarray, rng: random.Random):
        place(empty_gomoku, BLACK, [(7, 7), (7, 8)])
        before = empty_gomoku.copy()
        best_gomoku_move(empty_gomoku, WHITE, rng)
        np.testing.assert_array_equal(empty_gomoku, before)

    def test_unknown_player_rejected(self, empty_gomoku: np.ndarray):
        with pytest.raises(ValueError):
            best_gomoku_move(empty_gomoku, 0)
