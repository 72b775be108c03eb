"""
GameState - the board, the two players and the session statistics.
"""

from __future__ import annotations

import random
from typing import Dict, Optional, Tuple, TYPE_CHECKING

from four_wins.core.types import WinningCondition
from four_wins.games.game_rules import detect_outcome

if TYPE_CHECKING:
    from four_wins.agent.player import Player
    from four_wins.games.board import Board


class GameState:
    """
    Holds the game's current state:

    - the ordered pair of players
    - the player that is to make the next move
    - how many games were played and how many each player won
    - the board with all the tiles that have been set so far

    A GameState lives for a whole session. The board is cleared, not
    replaced, when a new game starts, and the statistics accumulate.
    """

    def __init__(
        self,
        board: "Board",
        player1: "Player",
        player2: "Player",
        rng: Optional[random.Random] = None,
    ):
        if board is None:
            raise ValueError("board must not be None")
        if player1 is None:
            raise ValueError("player1 must not be None")
        if player2 is None:
            raise ValueError("player2 must not be None")
        if player1 is player2:
            raise ValueError("player1 and player2 must be different players")

        self.board = board
        self._players: Tuple["Player", "Player"] = (player1, player2)
        self._current_idx = 0
        self._game_count = 0
        self._win_counts: Dict["Player", int] = {p: 0 for p in self._players}
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    @property
    def players(self) -> Tuple["Player", "Player"]:
        return self._players

    def player(self, index: int) -> "Player":
        """Return the player with the given index (first player is 0)."""
        return self._players[index]

    def only_computer_players(self) -> bool:
        return all(p.is_computer for p in self._players)

    def current_player(self) -> "Player":
        """Return the player that is to make the current move."""
        return self._players[self._current_idx]

    def next_player(self) -> "Player":
        """Return the player that moves after the current one."""
        return self._players[1 - self._current_idx]

    def advance_to_next_player(self) -> None:
        self._current_idx = 1 - self._current_idx

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    @property
    def game_count(self) -> int:
        """Number of games finished so far."""
        return self._game_count

    @property
    def win_counts(self) -> Dict["Player", int]:
        return dict(self._win_counts)

    @property
    def draw_count(self) -> int:
        return self._game_count - sum(self._win_counts.values())

    # ------------------------------------------------------------------
    # Game flow
    # ------------------------------------------------------------------

    def start_new_game(self) -> None:
        """Clear the board and pick the starting player at random."""
        self.board.clear()
        self._current_idx = self._rng.randrange(len(self._players))

    def move_finished(self) -> Optional[WinningCondition]:
        """
        Update the statistics after a tile has been dropped.

        Returns the outcome if the move ended the game, otherwise None.
        """
        condition = self.outcome()
        if condition is not None:
            self._game_count += 1
            if not condition.is_draw:
                self._win_counts[condition.player] += 1
        return condition

    def outcome(self) -> Optional[WinningCondition]:
        """Draw or win for the current board, None while the game is on-going."""
        return detect_outcome(self.board)

    def is_game_over(self) -> bool:
        return self.outcome() is not None
