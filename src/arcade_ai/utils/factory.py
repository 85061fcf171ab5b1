"""
Factory functions for creating games and agents.
"""

import random
from typing import Dict, List, Optional

from arcade_ai.agent.agent import Agent
from arcade_ai.games.game_base import GameBase
from arcade_ai.games.game_state import GameState
from arcade_ai.games.lights_out import LightsOut
from arcade_ai.utils.config import GAMES, INITIAL_STATES


def create_agent(
    player_id: int,
    difficulty: str = "normal",
    seed: Optional[int] = None,
) -> Agent:
    """
    Create a computer player.

    Args:
        player_id: Seat the agent plays (1 or 2)
        difficulty: Key from DIFFICULTIES
        seed: Seed for the agent's random source; None for an unseeded one

    Returns:
        Configured Agent
    """
    agent = Agent(rng=random.Random(seed))
    agent.player_id = player_id
    agent.difficulty = difficulty
    return agent


def create_agents(
    players: List[int],
    difficulty: str = "normal",
    seed: Optional[int] = None,
) -> Dict[int, Agent]:
    """One agent per player; seeds are offset by player id so seats don't mirror each other."""
    return {
        pid: create_agent(pid, difficulty, None if seed is None else seed + pid)
        for pid in players
    }


def create_game(game_name: str, level: int = 1, seed: Optional[int] = None) -> GameBase:
    """
    Create a game instance with its initial state.

    Args:
        game_name: Key from GAMES registry (e.g., "othello")
        level: Lights-Out starting level
        seed: Seed for Lights-Out puzzle generation

    Returns:
        Configured game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    if game_name == "lights_out":
        game = LightsOut(level=level, rng=random.Random(seed))
        game.start()
        return game

    game_class = GAMES[game_name]
    initial_state: GameState = INITIAL_STATES[game_name]

    game = game_class()
    game.set_state(initial_state.copy())

    return game
