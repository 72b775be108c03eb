"""
Games module - board, rules and game state.
"""

from four_wins.games.board import Board
from four_wins.games.game_rules import (
    detect_outcome,
    find_winner,
    first_run_owner,
    get_rows,
    get_cols,
    get_diagonals,
    get_anti_diagonals,
)
from four_wins.games.game_state import GameState

__all__ = [
    "Board",
    "GameState",
    "detect_outcome",
    "find_winner",
    "first_run_owner",
    "get_rows",
    "get_cols",
    "get_diagonals",
    "get_anti_diagonals",
]
