"""
TurnDispatcher - decides, on every poll, whose input counts.

Wraps the human input channel and the computer algorithms and forwards
each poll to the right one depending on the player that has to move.
Computer algorithms never need to ask for a new game when the board is
decided; the dispatcher does that for them.
"""

from __future__ import annotations

import logging
import time
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from four_wins.dispatch.delay import CancellableDelay
from four_wins.dispatch.registry import AlgorithmRegistry
from four_wins.input.events import EventType, InputEvent, NewGameEvent
from four_wins.input.provider import MoveProvider
from four_wins.utils.config import OBSERVATION_DELAY_SEC

if TYPE_CHECKING:
    from four_wins.agent.player import Player
    from four_wins.games.game_state import GameState

logger = logging.getLogger(__name__)


class DispatchPhase(Enum):
    AWAITING_CONTROL = auto()   # computers only, nothing played yet, autoplay off
    HUMAN_TURN = auto()
    COMPUTER_TURN = auto()
    AUTOPLAY_PAUSED = auto()    # computers only, game running, autoplay off
    GAME_OVER = auto()


class TurnDispatcher(MoveProvider):
    """
    MoveProvider that routes each poll to the human channel or to the
    algorithm of the computer player on turn.

    The human channel doubles as the session control surface: Start/Stop
    toggle autoplay and PlayerMetadataChanged reloads every algorithm.
    Control events are global, so the human channel is polled for them even
    when no human takes part in the game.
    """

    def __init__(
        self,
        human_input: MoveProvider,
        registry: Optional[AlgorithmRegistry] = None,
        delay: Optional[CancellableDelay] = None,
        observation_delay: float = OBSERVATION_DELAY_SEC,
        autoplay: bool = False,
    ):
        if human_input is None:
            raise ValueError("human_input must not be None")
        if observation_delay < 0:
            raise ValueError("observation_delay must not be negative")

        self.human_input = human_input
        self.registry = registry if registry is not None else AlgorithmRegistry()
        self.delay = delay if delay is not None else CancellableDelay()
        self.observation_delay = observation_delay
        self._autoplay = autoplay

    @property
    def autoplay(self) -> bool:
        return self._autoplay

    @autoplay.setter
    def autoplay(self, value: bool) -> None:
        if value != self._autoplay:
            logger.info("Auto-play is now %s.", "ON" if value else "OFF")
        self._autoplay = value

    def phase(self, game_state: "GameState") -> DispatchPhase:
        """Describe what the next poll is going to wait for."""
        if game_state.is_game_over():
            return DispatchPhase.GAME_OVER
        if game_state.only_computer_players() and not self._autoplay:
            if game_state.board.is_empty():
                return DispatchPhase.AWAITING_CONTROL
            return DispatchPhase.AUTOPLAY_PAUSED
        if game_state.current_player().is_computer:
            return DispatchPhase.COMPUTER_TURN
        return DispatchPhase.HUMAN_TURN

    def read_input(self, game_state: "GameState") -> Optional[InputEvent]:
        current = game_state.current_player()
        only_computers = game_state.only_computer_players()

        if only_computers:
            event = self._filter_control_events(self.human_input.read_input(game_state))
            if event is not None and event.has_type(EventType.NEW_GAME):
                return event

        if current.is_computer:
            if game_state.is_game_over():
                # give the human a moment to look at the final board
                if not only_computers and self.delay.wait(self.observation_delay):
                    return None
                return NewGameEvent()

            if only_computers and not self._autoplay:
                return None

            return self._think(current, game_state)

        return self._filter_control_events(self.human_input.read_input(game_state))

    def clear_input_queue(self) -> None:
        self.human_input.clear_input_queue()

    def _think(self, player: "Player", game_state: "GameState") -> Optional[InputEvent]:
        provider = self.registry.resolve(player)
        logger.info(
            "'%s' is thinking (%d half-moves look-ahead) ...", player.name, player.max_think_depth
        )
        started = time.perf_counter()
        event = provider.read_input(game_state)
        logger.info(
            "'%s' done after %.3fs. Average speed is %.1f moves/s",
            player.name,
            time.perf_counter() - started,
            player.moves_per_second,
        )
        return event

    def _filter_control_events(self, event: Optional[InputEvent]) -> Optional[InputEvent]:
        """Consume Start/Stop/PlayerMetadataChanged, pass everything else on."""
        if event is None:
            return None
        if event.has_type(EventType.STOP):
            self.autoplay = False
            return None
        if event.has_type(EventType.START):
            self.autoplay = True
            return None
        if event.has_type(EventType.PLAYER_METADATA_CHANGED):
            self.registry.invalidate_all()
            return None
        return event
