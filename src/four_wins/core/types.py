"""
Core types and constants.

This module contains the fundamental types shared by the board, the rules
and the game state:
- Board geometry constants
- Outcome: the kind of a finished game
- WinningCondition: the terminal result of a game
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from four_wins.agent.player import Player


# Tiles in a line needed to win
CONNECT_LENGTH = 4

# Smallest allowed board side
MIN_BOARD_SIZE = 4

# Returned by Board.move() when a column has no free cell left
NO_SPACE = None


class Outcome(Enum):
    WIN = auto()
    DRAW = auto()


@dataclass(frozen=True)
class WinningCondition:
    """
    State at the end of a game: either a draw (no more moves possible)
    or a win for exactly one player.
    """
    outcome: Outcome
    winner: Optional["Player"] = None

    def __post_init__(self):
        if self.outcome is Outcome.WIN and self.winner is None:
            raise ValueError("A win needs a winner")
        if self.outcome is Outcome.DRAW and self.winner is not None:
            raise ValueError("A draw has no winner")

    @classmethod
    def win(cls, player: "Player") -> "WinningCondition":
        return cls(Outcome.WIN, player)

    @classmethod
    def draw(cls) -> "WinningCondition":
        return cls(Outcome.DRAW)

    @property
    def is_draw(self) -> bool:
        return self.outcome is Outcome.DRAW

    @property
    def player(self) -> "Player":
        """Returns the player that won. Must not be called for a draw."""
        if self.is_draw:
            raise RuntimeError("Must not be called for a draw")
        return self.winner

    def __str__(self) -> str:
        return "DRAW" if self.is_draw else f"{self.winner.name} won"
