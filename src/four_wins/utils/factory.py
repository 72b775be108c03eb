"""
Factory functions for creating players, game states and dispatchers.
"""

import random
from typing import List, Optional, Sequence

from four_wins.agent.player import Player
from four_wins.algorithms import AlgorithmCatalog
from four_wins.dispatch import AlgorithmRegistry, CancellableDelay, TurnDispatcher
from four_wins.games.board import Board
from four_wins.games.game_state import GameState
from four_wins.input.provider import MoveProvider
from four_wins.utils.config import Config


def parse_player_spec(spec: str) -> Player:
    """
    Create a player from its textual description.

    Args:
        spec: "Name" for a human, "Name=algorithm" or
              "Name=algorithm@depth" for a computer player

    Returns:
        New Player instance
    """
    name, sep, rest = spec.partition("=")
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid player spec '{spec}': missing name")
    if not sep:
        return Player.human(name)

    algorithm, at, depth_str = rest.partition("@")
    algorithm = algorithm.strip()
    if not algorithm:
        raise ValueError(f"Invalid player spec '{spec}': missing algorithm")

    depth = 0
    if at:
        try:
            depth = int(depth_str)
        except ValueError as e:
            raise ValueError(
                f"Invalid player spec '{spec}': depth must be an integer"
            ) from e
        if depth < 0:
            raise ValueError(f"Invalid player spec '{spec}': depth must not be negative")

    return Player.computer(name, algorithm, max_think_depth=depth)


def create_players(specs: Sequence[str]) -> List[Player]:
    """Create exactly two players from their specs."""
    if len(specs) != 2:
        raise ValueError(f"Exactly two players are needed, got {len(specs)}")
    return [parse_player_spec(s) for s in specs]


def create_game_state(config: Config, rng: Optional[random.Random] = None) -> GameState:
    """
    Create a game state with an empty board.

    Args:
        config: Session configuration (board size and players)
        rng: Random source for picking the starting player

    Returns:
        GameState ready for start_new_game()
    """
    player1, player2 = create_players(config.players)
    return GameState(Board(config.width, config.height), player1, player2, rng=rng)


def create_dispatcher(
    human_input: MoveProvider,
    config: Config,
    catalog: Optional[AlgorithmCatalog] = None,
    delay: Optional[CancellableDelay] = None,
) -> TurnDispatcher:
    """Create a dispatcher with a fresh algorithm registry."""
    return TurnDispatcher(
        human_input,
        registry=AlgorithmRegistry(catalog),
        delay=delay,
        observation_delay=config.observation_delay,
        autoplay=config.autoplay,
    )
