"""
MoveProvider - abstract base class for everything that produces input,
human players and computer algorithms alike.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from four_wins.games.game_state import GameState
    from four_wins.input.events import InputEvent


class MoveProvider(ABC):
    """
    Source of input events.

    Computer algorithms block in read_input() until they have picked a
    move. Human-backed providers return whatever input is pending, or None.
    """

    @abstractmethod
    def read_input(self, game_state: "GameState") -> Optional["InputEvent"]:
        """Return the next event for the given state, or None if there is none."""
        pass

    def clear_input_queue(self) -> None:
        """Discard buffered input. Nothing is buffered by default."""
        pass
