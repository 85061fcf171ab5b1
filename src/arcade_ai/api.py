"""
Public API: the three AI routines plus a terminal play loop.

Usage:
    from arcade_ai import best_othello_move, best_gomoku_move, solve_lights_out

    move = best_othello_move(board, player=2, depth=3)   # Move or None (pass)
    move = best_gomoku_move(board, player=2)             # Move
    presses = solve_lights_out(lamps)                    # bool[25]
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, TYPE_CHECKING

from arcade_ai.core.types import IllegalMoveError, Move
from arcade_ai.games.lights_out import LightsOut
from arcade_ai.selection import best_gomoku_move, best_othello_move, hint_cell, solve_lights_out

if TYPE_CHECKING:
    from arcade_ai.agent.agent import Agent
    from arcade_ai.games.game_base import GameBase

logger = logging.getLogger(__name__)


def _ai_turn(game: "GameBase", agent: "Agent") -> Optional[Move]:
    """AI selects and applies move. Returns move or None if it has nothing to play."""
    move = agent.select_move(game)
    if move is None:
        return None
    game.apply_move(move)
    return move


def _show_hint(game: LightsOut) -> None:
    try:
        game.use_hint()
    except IllegalMoveError as e:
        print(e)
        return
    idx = hint_cell(game.lamps)
    if idx == -1:
        print("Board is already solved")
    else:
        r, c = divmod(idx, game.state.board.shape[1])
        print(f"Hint: press {r},{c} ({game.hints_left} hints left)")


def _human_turn(game: "GameBase") -> Move:
    """Prompt human for move, apply it, return move."""
    print(f"\nYour turn (Player {game.current_player()})")
    print("Format: row,col (e.g., 3,2)" + ("  ·  'h' for a hint" if isinstance(game, LightsOut) else ""))

    while True:
        raw = input("Move: ").strip()
        if isinstance(game, LightsOut) and raw.lower() == "h":
            _show_hint(game)
            continue
        try:
            r, c = (int(x.strip()) for x in raw.split(","))
        except ValueError:
            print(f"Invalid input: {raw!r}")
            continue

        move = Move(r, c)
        if move not in game.valid_moves():
            print(f"Illegal move: {move}")
            continue
        game.apply_move(move)
        return move


def play(
    game: "GameBase",
    agents: Dict[int, "Agent"],
    human_players: Optional[List[int]] = None,
) -> None:
    """
    Run a game to completion in the terminal.

    Parameters
    ----------
    game : GameBase
        The game instance to play, already in its starting state.
    agents : Dict[int, Agent]
        Player ID -> computer player for every seat not in human_players.
    human_players : List[int], optional
        Player IDs controlled by keyboard input.
    """
    human_set = set(human_players or [])

    print(f"Starting {game.game_id()}")
    print(game.state_string())

    try:
        while not game.is_over():
            current = game.current_player()
            if current in human_set:
                move = _human_turn(game)
                print(f"\nYou played: {move}")
            else:
                move = _ai_turn(game, agents[current])
                if move is None:
                    break
                print(f"\nAI (Player {current}) played: {move}")

            print(game.state_string())

        print("\n" + "=" * 40)
        print("GAME OVER")
        print("=" * 40)
        for pid in range(1, game.num_players() + 1):
            print(f"Player {pid}: {game.get_result(pid).name}")

    except KeyboardInterrupt:
        print("\nInterrupted")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise


__all__ = [
    "play",
    "solve_lights_out",
    "best_othello_move",
    "best_gomoku_move",
]
