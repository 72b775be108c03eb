"""
Input events produced by move providers.

A MoveEvent drops a tile. Every other event is a control event that acts
on the session (new game, autoplay on/off, algorithm reload) and carries
no payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, TYPE_CHECKING

if TYPE_CHECKING:
    from four_wins.agent.player import Player


class EventType(Enum):
    MOVE = auto()
    NEW_GAME = auto()
    START = auto()
    STOP = auto()
    PLAYER_METADATA_CHANGED = auto()


@dataclass(frozen=True)
class InputEvent:
    event_type: ClassVar[EventType]

    def has_type(self, event_type: EventType) -> bool:
        return self.event_type is event_type

    @property
    def is_control(self) -> bool:
        return self.event_type is not EventType.MOVE


@dataclass(frozen=True)
class MoveEvent(InputEvent):
    """Drop a tile for `player` into `column` (first column is 0)."""
    event_type: ClassVar[EventType] = EventType.MOVE

    player: "Player"
    column: int


@dataclass(frozen=True)
class NewGameEvent(InputEvent):
    event_type: ClassVar[EventType] = EventType.NEW_GAME


@dataclass(frozen=True)
class StartEvent(InputEvent):
    """Turn autoplay on."""
    event_type: ClassVar[EventType] = EventType.START


@dataclass(frozen=True)
class StopEvent(InputEvent):
    """Turn autoplay off."""
    event_type: ClassVar[EventType] = EventType.STOP


@dataclass(frozen=True)
class PlayerMetadataChangedEvent(InputEvent):
    """Player settings changed, all algorithm instances must be recreated."""
    event_type: ClassVar[EventType] = EventType.PLAYER_METADATA_CHANGED
