"""
Public API for running game sessions.

Usage:
    from four_wins import Config, run_session

    run_session(Config(players=("Alice", "Bot=random")))

or, with full control over the pieces:

    state = create_game_state(config)
    dispatcher = create_dispatcher(human_input, config)
    with GameSession(state, dispatcher) as session:
        session.run(max_games=10)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TYPE_CHECKING

from four_wins.algorithms import AlgorithmCatalog
from four_wins.input.events import EventType, InputEvent, MoveEvent
from four_wins.input.human import ConsoleInputProvider
from four_wins.utils.config import Config, POLL_INTERVAL_SEC
from four_wins.utils.factory import create_dispatcher, create_game_state

if TYPE_CHECKING:
    from four_wins.dispatch.dispatcher import TurnDispatcher
    from four_wins.games.game_state import GameState
    from four_wins.input.human import HumanInputProvider

logger = logging.getLogger(__name__)

UpdateCallback = Callable[["GameState"], None]


class GameSession:
    """
    Drives a game session: polls the dispatcher and applies what it returns.

    The session owns the dispatcher's delay; closing the session cancels it
    so pending pauses end immediately.
    """

    def __init__(
        self,
        game_state: "GameState",
        dispatcher: "TurnDispatcher",
        poll_interval: float = POLL_INTERVAL_SEC,
        on_update: Optional[UpdateCallback] = None,
    ):
        self.game_state = game_state
        self.dispatcher = dispatcher
        self.poll_interval = poll_interval
        self.on_update = on_update

    def __enter__(self):
        self.dispatcher.delay.reset()
        return self

    def __exit__(self, exc_type, *_):
        self.close()

    @property
    def closed(self) -> bool:
        return self.dispatcher.delay.cancelled

    def close(self) -> None:
        self.dispatcher.delay.cancel()

    def new_game(self, clear_input: bool = True) -> None:
        self.game_state.start_new_game()
        if clear_input:
            self.dispatcher.clear_input_queue()
        logger.info("New game, '%s' begins.", self.game_state.current_player().name)
        self._notify()

    def step(self) -> Optional[InputEvent]:
        """Run one poll cycle. Returns the event that was applied, if any."""
        event = self.dispatcher.read_input(self.game_state)
        if event is None:
            return None

        if event.has_type(EventType.NEW_GAME):
            self.new_game()
        elif isinstance(event, MoveEvent):
            self._apply_move(event)
        return event

    def run(self, max_games: Optional[int] = None) -> None:
        """
        Play until closed, or until `max_games` more games have finished.
        """
        target = None if max_games is None else self.game_state.game_count + max_games
        # input submitted before the session started is kept
        self.new_game(clear_input=False)
        try:
            while not self.closed:
                if target is not None and self.game_state.game_count >= target:
                    break
                if self.step() is None:
                    self.dispatcher.delay.wait(self.poll_interval)
        except KeyboardInterrupt:
            logger.info("Interrupted - shutting down...")
            self.close()

    def _apply_move(self, event: MoveEvent) -> None:
        state = self.game_state
        board = state.board

        if state.is_game_over():
            logger.warning("Game is over, start a new one ('n')")
            return
        if event.player is not state.current_player():
            logger.warning(
                "Ignoring move by '%s', it is '%s''s turn",
                event.player.name,
                state.current_player().name,
            )
            return
        if not board.is_valid_column(event.column) or not board.has_space_in_column(event.column):
            logger.warning("Column %d does not accept any more tiles", event.column + 1)
            return

        board.move(event.column, event.player)
        condition = state.move_finished()
        if condition is not None:
            logger.info("Game over: %s", condition)
            logger.info(
                "After %d games: %s, %d draws",
                state.game_count,
                ", ".join(f"{p.name} {n} wins" for p, n in state.win_counts.items()),
                state.draw_count,
            )
        state.advance_to_next_player()
        self._notify()

    def _notify(self) -> None:
        if self.on_update is not None:
            self.on_update(self.game_state)


def run_session(
    config: Config,
    human_input: Optional["HumanInputProvider"] = None,
    catalog: Optional[AlgorithmCatalog] = None,
    on_update: Optional[UpdateCallback] = None,
) -> "GameState":
    """
    Main entry point: wire up a session from a configuration and play it.

    Parameters
    ----------
    config : Config
        Board size, players, autoplay and pacing settings.
    human_input : HumanInputProvider, optional
        Human input channel. Defaults to reading commands from stdin.
    catalog : AlgorithmCatalog, optional
        Algorithms available to computer players. Defaults to the
        built-in ones.
    on_update : callable, optional
        Called with the game state after every applied event.

    Returns
    -------
    GameState
        The final state, including the session statistics.
    """
    if human_input is None:
        human_input = ConsoleInputProvider().start()

    game_state = create_game_state(config)
    dispatcher = create_dispatcher(human_input, config, catalog=catalog)

    logger.info(
        "Starting session on a %dx%d board: %s vs %s",
        config.width,
        config.height,
        game_state.player(0).name,
        game_state.player(1).name,
    )
    with GameSession(game_state, dispatcher, config.poll_interval, on_update) as session:
        session.run(max_games=config.max_games)

    return game_state


__all__ = [
    "GameSession",
    "run_session",
]
