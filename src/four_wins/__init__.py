"""
Four Wins - drop tiles into columns, connect four to win.

This package provides the board and its win detection, the game state,
and a turn dispatcher that lets humans and pluggable computer algorithms
play against each other.

Quick Start:
    from four_wins import Config, run_session

    run_session(Config(players=("Alice", "Bot=random")))

Modules:
    core       - Fundamental types (WinningCondition), constants, exceptions
    games      - Board, win detection and GameState
    input      - Input events and human-backed providers
    algorithms - Computer algorithms and the catalog they are looked up in
    dispatch   - Algorithm registry and turn dispatcher
"""

from four_wins.api import GameSession, run_session
from four_wins.core import WinningCondition
from four_wins.games import Board, GameState
from four_wins.utils.config import Config

__version__ = "1.0.0"

__all__ = [
    # Main API
    "run_session",
    "GameSession",
    "Config",
    # Types
    "Board",
    "GameState",
    "WinningCondition",
]
