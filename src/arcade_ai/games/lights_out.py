"""
Lights-Out puzzle on a 5x5 grid.

Lamp state is a flat uint8 vector of 25 cells (row-major):
    0 = off
    1 = on

Pressing a cell flips it and its orthogonal neighbours (no wraparound).
Puzzles are generated by pressing random cells from all-off, so every
generated board is solvable.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from arcade_ai.core.types import BoardShapeError, IllegalMoveError, Move, State
from arcade_ai.games.game_base import GameBase
from arcade_ai.games.game_state import GameState

logger = logging.getLogger(__name__)

SIZE = 5
TOTAL = SIZE * SIZE
MAX_HINTS = 3
MAX_SCRAMBLE = 20

CELL_STRINGS = {0: "·", 1: "●"}


def as_lamps(lamps) -> np.ndarray:
    """
    Coerce a length-25 vector or 5x5 grid into a flat uint8 lamp vector.

    Raises:
        BoardShapeError: anything else.
    """
    arr = np.asarray(lamps)
    if arr.shape not in ((TOTAL,), (SIZE, SIZE)):
        raise BoardShapeError((TOTAL,), arr.shape)
    return (arr.reshape(TOTAL) != 0).astype(np.uint8)


def neighbours(idx: int) -> List[int]:
    """Cells flipped by pressing idx, including idx itself."""
    if not 0 <= idx < TOTAL:
        raise IllegalMoveError(f"Cell index {idx} is outside 0..{TOTAL - 1}")
    r, c = divmod(idx, SIZE)
    cells = [idx]
    if r > 0:
        cells.append(idx - SIZE)
    if r < SIZE - 1:
        cells.append(idx + SIZE)
    if c > 0:
        cells.append(idx - 1)
    if c < SIZE - 1:
        cells.append(idx + 1)
    return cells


def toggle(lamps, idx: int) -> np.ndarray:
    """Return a new lamp vector with idx pressed."""
    out = as_lamps(lamps).copy()
    out[neighbours(idx)] ^= 1
    return out


def is_all_off(lamps) -> bool:
    return not np.any(as_lamps(lamps))


def scramble_moves(level: int) -> int:
    """Presses used to scramble a level: 3, 5, 7, ... capped at 20."""
    if level < 1:
        raise ValueError(f"Level must be >= 1, got {level}")
    return min(3 + (level - 1) * 2, MAX_SCRAMBLE)


def generate_puzzle(level: int, rng: Optional[random.Random] = None) -> Tuple[np.ndarray, List[int]]:
    """
    Scramble an all-off grid with random presses.

    The same cell is never pressed twice in a row.

    Returns:
        (lamps, solution) where solution lists the cells pressed an odd
        number of times; pressing them again restores all-off.
    """
    rng = rng or random.Random()
    n = scramble_moves(level)
    lamps = np.zeros(TOTAL, dtype=np.uint8)
    press_count = np.zeros(TOTAL, dtype=np.uint8)

    last = -1
    for _ in range(n):
        idx = rng.randrange(TOTAL)
        while idx == last:
            idx = rng.randrange(TOTAL)
        lamps[neighbours(idx)] ^= 1
        press_count[idx] += 1
        last = idx

    solution = [int(i) for i in np.nonzero(press_count % 2)[0]]
    return lamps, solution


class LightsOut(GameBase):
    """Single-player Lights-Out with levels, move counting and limited hints."""

    __slots__ = ('state', 'level', 'moves', 'hints_left', 'rng')

    def __init__(self, level: int = 1, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.level = level
        self.moves = 0
        self.hints_left = MAX_HINTS
        self.state = GameState(np.zeros((SIZE, SIZE), dtype=np.int8), current_player=1)

    # ── GameBase ──────────────────────────────────────────────────────────

    def game_id(self) -> str:
        return "lights_out"

    def num_players(self) -> int:
        return 1

    def deep_clone(self) -> "LightsOut":
        g = LightsOut.__new__(LightsOut)
        g.state = self.state.copy()
        g.level = self.level
        g.moves = self.moves
        g.hints_left = self.hints_left
        g.rng = self.rng
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        if game_state.board.shape != (SIZE, SIZE):
            raise BoardShapeError((SIZE, SIZE), game_state.board.shape)
        self.state = game_state

    def current_player(self) -> int:
        return 1

    def valid_moves(self) -> List[Move]:
        if self.is_over():
            return []
        return [Move(r, c) for r in range(SIZE) for c in range(SIZE)]

    def apply_move(self, move: Move) -> None:
        r, c = int(move[0]), int(move[1])
        if not (0 <= r < SIZE and 0 <= c < SIZE):
            raise IllegalMoveError(f"Cell ({r},{c}) is off the board")
        self.press(r * SIZE + c)

    def is_over(self) -> bool:
        return is_all_off(self.lamps)

    def get_result(self, player: int) -> State:
        return State.WIN if self.is_over() else State.NEUTRAL

    def state_string(self) -> str:
        board = self.state.board
        lines = [" ".join(CELL_STRINGS[int(v)] for v in row) for row in board]
        lines.append(f"level {self.level} · moves {self.moves} · hints {self.hints_left}")
        return "\n".join(lines)

    # ── Puzzle flow ───────────────────────────────────────────────────────

    @property
    def lamps(self) -> np.ndarray:
        return self.state.board.reshape(TOTAL).astype(np.uint8)

    def start(self, level: Optional[int] = None) -> None:
        """Generate a fresh puzzle for level (default: current level)."""
        if level is not None:
            self.level = level
        lamps, _ = generate_puzzle(self.level, self.rng)
        self.state = GameState(lamps.reshape(SIZE, SIZE).astype(np.int8), current_player=1)
        self.moves = 0
        self.hints_left = MAX_HINTS
        logger.debug("Lights-Out level %d generated with %d lamps on", self.level, int(lamps.sum()))

    def next_level(self) -> None:
        self.start(self.level + 1)

    def press(self, idx: int) -> bool:
        """Press cell idx. Returns True if this press solved the puzzle."""
        lamps = toggle(self.lamps, idx)
        self.state.board = lamps.reshape(SIZE, SIZE).astype(np.int8)
        self.moves += 1
        return is_all_off(lamps)

    def use_hint(self) -> None:
        """Spend one hint from the per-level budget."""
        if self.hints_left <= 0:
            raise IllegalMoveError("No hints left")
        self.hints_left -= 1
