"""
Input module - events and the providers that produce them.
"""

from four_wins.input.events import (
    EventType,
    InputEvent,
    MoveEvent,
    NewGameEvent,
    StartEvent,
    StopEvent,
    PlayerMetadataChangedEvent,
)
from four_wins.input.provider import MoveProvider
from four_wins.input.human import HumanInputProvider, ConsoleInputProvider, parse_command

__all__ = [
    "EventType",
    "InputEvent",
    "MoveEvent",
    "NewGameEvent",
    "StartEvent",
    "StopEvent",
    "PlayerMetadataChangedEvent",
    "MoveProvider",
    "HumanInputProvider",
    "ConsoleInputProvider",
    "parse_command",
]
