"""
Command-line interface for playing four wins on the console.
"""

import argparse
import logging
from typing import Optional, Sequence

from four_wins.algorithms import default_catalog
from four_wins.api import run_session
from four_wins.games.game_state import GameState
from four_wins.input.human import ConsoleInputProvider
from four_wins.utils.config import (
    Config,
    DEFAULT_HEIGHT,
    DEFAULT_PLAYERS,
    DEFAULT_WIDTH,
    LOG_LEVELS,
    OBSERVATION_DELAY_SEC,
)
from four_wins.utils.factory import create_players

HELP_TEXT = (
    "Commands: 1..{width} drop a tile | n new game | s start autoplay | "
    "p stop autoplay | r reload algorithms | Ctrl+C quit"
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Four wins: drop tiles, connect four to win"
    )
    parser.add_argument(
        "--width", "-W",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Board width in tiles (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--height", "-H",
        type=int,
        default=DEFAULT_HEIGHT,
        help=f"Board height in tiles (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "--player", "-p",
        action="append",
        dest="players",
        default=None,
        help="Player spec, give twice: 'Name' for a human, "
             "'Name=algorithm[@depth]' for a computer "
             f"(default: {' '.join(DEFAULT_PLAYERS)})",
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        help="Let computer-only games run without pressing 's' first",
    )
    parser.add_argument(
        "--games", "-g",
        type=int,
        default=None,
        help="Stop after this many games (default: play until interrupted)",
    )
    parser.add_argument(
        "--observation-delay",
        type=float,
        default=OBSERVATION_DELAY_SEC,
        help=f"Seconds to show the final board before a new game (default: {OBSERVATION_DELAY_SEC})",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--list-algorithms",
        action="store_true",
        help="Print the available algorithms and exit",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Turn parsed arguments into a validated Config."""
    players = args.players or list(DEFAULT_PLAYERS)
    # fail on malformed specs before the game starts
    create_players(players)
    return Config(
        width=args.width,
        height=args.height,
        players=players,
        autoplay=args.autoplay,
        observation_delay=args.observation_delay,
        max_games=args.games,
        log_level=args.log_level,
    )


def render(game_state: GameState) -> None:
    board = game_state.board
    print()
    print(board.state_string())
    print("".join(str((c + 1) % 10) for c in range(board.width)))
    if not game_state.is_game_over():
        print(f"Turn: {game_state.current_player().name}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    if args.list_algorithms:
        for name in default_catalog().names():
            print(name)
        return

    try:
        config = build_config(args)
    except ValueError as e:
        raise SystemExit(f"error: {e}") from e

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(HELP_TEXT.format(width=config.width))
    run_session(config, human_input=ConsoleInputProvider().start(), on_update=render)


if __name__ == "__main__":
    main()
