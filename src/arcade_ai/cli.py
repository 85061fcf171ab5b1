"""
Command-line interface for playing the games against the AI.
"""

import argparse
import logging

from arcade_ai.api import play
from arcade_ai.utils.config import Config, DIFFICULTIES, GAMES
from arcade_ai.utils.factory import create_agents, create_game


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Othello, Gomoku or Lights-Out against the AI"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="othello",
        help="Game to play (default: othello)",
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=list(DIFFICULTIES),
        default="normal",
        help="Othello AI strength (default: normal)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for AI tie-breaks and puzzle generation",
    )
    parser.add_argument(
        "--level", "-l",
        type=int,
        default=1,
        help="Lights-Out starting level (default: 1)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays for all players (no human players)",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated list of human player numbers (e.g., '1,2'). Overrides --self-play.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log AI decisions",
    )
    return parser.parse_args(argv)


def parse_human_players(players_str: str | None, num_players: int, game_id: str, self_play: bool) -> list[int]:
    """Parse and validate the human players argument."""
    if self_play and players_str is None:
        return []

    if players_str is None:
        return [1]  # Default: player 1 is human

    # Parse comma-separated values
    try:
        human_players = [int(p.strip()) for p in players_str.split(",") if p.strip()]
    except ValueError as e:
        raise ValueError(
            f"Invalid --players format: '{players_str}'. "
            "Expected comma-separated integers (e.g., '1,2')."
        ) from e

    # Validate player numbers
    invalid = [p for p in human_players if p < 1 or p > num_players]
    if invalid:
        raise ValueError(
            f"Invalid player number(s): {invalid}. {game_id} only supports players 1-{num_players}."
        )

    return sorted(set(human_players))


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        game_name=args.game,
        difficulty=args.difficulty,
        seed=args.seed,
        level=args.level,
    )

    game = create_game(config.game_name, level=config.level, seed=config.seed)
    human_players = parse_human_players(args.players, game.num_players(), game.game_id(), args.self_play)

    players = list(range(1, game.num_players() + 1))
    agents = create_agents(
        [p for p in players if p not in human_players],
        difficulty=config.difficulty,
        seed=config.seed,
    )

    play(game, agents, human_players=human_players)


if __name__ == "__main__":
    main()
