"""
Human-backed move providers.

Commands are typed as text and turned into events when they are read, so
a column number always becomes a move for whoever is to move at that time.

Commands:
    1..width        drop a tile into that column
    n, new          start a new game
    s, start        turn autoplay on
    p, stop         turn autoplay off
    r, reload       reload all computer algorithms
"""

from __future__ import annotations

import logging
import queue
import sys
import threading
from typing import Optional, TextIO, TYPE_CHECKING, Union

from four_wins.input.events import (
    InputEvent,
    MoveEvent,
    NewGameEvent,
    PlayerMetadataChangedEvent,
    StartEvent,
    StopEvent,
)
from four_wins.input.provider import MoveProvider

if TYPE_CHECKING:
    from four_wins.games.game_state import GameState

logger = logging.getLogger(__name__)

_CONTROL_COMMANDS = {
    "n": NewGameEvent,
    "new": NewGameEvent,
    "s": StartEvent,
    "start": StartEvent,
    "p": StopEvent,
    "stop": StopEvent,
    "r": PlayerMetadataChangedEvent,
    "reload": PlayerMetadataChangedEvent,
}


def parse_command(raw: str, game_state: "GameState") -> Optional[InputEvent]:
    """Turn a typed command into an event, or None if it is not understood."""
    text = raw.strip().lower()
    if not text:
        return None

    if text in _CONTROL_COMMANDS:
        return _CONTROL_COMMANDS[text]()

    try:
        column = int(text)
    except ValueError:
        logger.warning("Unknown command '%s'", raw.strip())
        return None

    width = game_state.board.width
    if not 1 <= column <= width:
        logger.warning("Column %d out of range 1..%d", column, width)
        return None
    return MoveEvent(game_state.current_player(), column - 1)


class HumanInputProvider(MoveProvider):
    """
    Queue of pending human input.

    read_input() never blocks: it takes one pending command (or ready-made
    event) if there is one, and returns None otherwise. The queue is
    thread-safe so input may be submitted from another thread.
    """

    def __init__(self):
        self._pending: "queue.Queue[Union[str, InputEvent]]" = queue.Queue()

    def submit(self, command: str) -> None:
        self._pending.put(command)

    def submit_event(self, event: InputEvent) -> None:
        self._pending.put(event)

    def pending(self) -> int:
        return self._pending.qsize()

    def read_input(self, game_state: "GameState") -> Optional[InputEvent]:
        try:
            item = self._pending.get_nowait()
        except queue.Empty:
            return None

        if isinstance(item, InputEvent):
            return item
        return parse_command(item, game_state)

    def clear_input_queue(self) -> None:
        while True:
            try:
                self._pending.get_nowait()
            except queue.Empty:
                return


class ConsoleInputProvider(HumanInputProvider):
    """HumanInputProvider fed line by line from a text stream (stdin by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__()
        self._stream = stream if stream is not None else sys.stdin
        self._reader: Optional[threading.Thread] = None

    def start(self) -> "ConsoleInputProvider":
        if self._reader is None:
            self._reader = threading.Thread(
                target=self._read_lines, name="console-input", daemon=True
            )
            self._reader.start()
        return self

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for the reader thread to hit the end of the stream."""
        if self._reader is not None:
            self._reader.join(timeout)

    def _read_lines(self) -> None:
        for line in self._stream:
            self.submit(line)
        logger.debug("Console input closed")
