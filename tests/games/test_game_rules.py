"""
Tests for arcade_ai.games.game_rules
"""

import numpy as np
import pytest

from arcade_ai.core.types import BoardShapeError
from arcade_ai.games.game_rules import (
    ALL_DIRECTIONS, LINE_DIRECTIONS, as_board, board_full, in_bounds, opponent,
)


class TestInBounds:

    @pytest.mark.parametrize("r,c,expected", [
        (0, 0, True), (7, 7, True), (-1, 0, False), (0, 8, False), (8, 3, False),
    ])
    def test_edges(self, r, c, expected):
        board = np.zeros((8, 8), dtype=np.int8)
        assert in_bounds(board, r, c) is expected


class TestOpponent:

    def test_swaps_players(self):
        assert opponent(1) == 2
        assert opponent(2) == 1

    def test_rejects_unknown(self):
        """Empty or out-of-range ids are not players."""
        with pytest.raises(ValueError):
            opponent(0)


class TestBoardFull:

    def test_empty_board(self):
        assert board_full(np.zeros((3, 3), dtype=np.int8)) is False

    def test_full_board(self):
        assert board_full(np.ones((3, 3), dtype=np.int8)) is True


class TestAsBoard:
    """as_board validation tests."""

    def test_accepts_nested_lists(self):
        """Lists are converted to an int8 array."""
        board = as_board([[0, 1], [2, 0]], (2, 2))
        assert board.dtype == np.int8
        np.testing.assert_array_equal(board, [[0, 1], [2, 0]])

    def test_returns_copy(self):
        """Result never aliases the caller's array."""
        src = np.zeros((2, 2), dtype=np.int8)
        board = as_board(src, (2, 2))
        board[0, 0] = 1
        assert src[0, 0] == 0

    def test_wrong_shape_raises(self):
        """Shape mismatch is a BoardShapeError, never padded."""
        with pytest.raises(BoardShapeError):
            as_board(np.zeros((7, 8)), (8, 8))

    def test_invalid_values_raise(self):
        """Cell values outside 0/1/2 are rejected."""
        with pytest.raises(ValueError, match="Invalid cell values"):
            as_board([[0, 3], [0, 0]], (2, 2))


class TestDirections:

    def test_counts(self):
        """Eight neighbour directions, four line directions."""
        assert len(set(ALL_DIRECTIONS)) == 8
        assert (0, 0) not in ALL_DIRECTIONS
        assert len(LINE_DIRECTIONS) == 4
