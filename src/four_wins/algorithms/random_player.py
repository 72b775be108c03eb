"""
A computer player that just does a random (but valid) move.
"""

from __future__ import annotations

import random
import time
from typing import Optional, TYPE_CHECKING

from four_wins.input.events import InputEvent, MoveEvent
from four_wins.input.provider import MoveProvider

if TYPE_CHECKING:
    from four_wins.games.game_state import GameState


class RandomPlayer(MoveProvider):

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def read_input(self, game_state: "GameState") -> Optional[InputEvent]:
        started = time.perf_counter()
        player = game_state.current_player()
        possible = game_state.board.valid_moves()
        player.record_move(len(possible), time.perf_counter() - started)

        if not possible:
            return None
        return MoveEvent(player, self.rng.choice(possible))
