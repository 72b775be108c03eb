"""
Shared test fixtures for four_wins tests.

Design principles:
- Small boards and named players so failures read naturally
- Scripted providers instead of real input
- Minimal, focused fixtures
"""

import random
from typing import Iterable, List, Optional

import pytest

from four_wins.agent.player import Player
from four_wins.algorithms import AlgorithmCatalog
from four_wins.dispatch import AlgorithmRegistry, CancellableDelay, TurnDispatcher
from four_wins.games.board import Board
from four_wins.games.game_state import GameState
from four_wins.input.events import InputEvent, MoveEvent
from four_wins.input.human import HumanInputProvider
from four_wins.input.provider import MoveProvider


# =============================================================================
# Test Doubles
# =============================================================================

class FirstFreeColumnAlgorithm(MoveProvider):
    """Computer algorithm that always picks the left-most free column."""

    instances = 0

    def __init__(self):
        FirstFreeColumnAlgorithm.instances += 1
        self.calls = 0

    def read_input(self, game_state: GameState) -> Optional[InputEvent]:
        self.calls += 1
        player = game_state.current_player()
        player.record_move(1, 0.5)
        moves = game_state.board.valid_moves()
        if not moves:
            return None
        return MoveEvent(player, moves[0])


class RecordingDelay(CancellableDelay):
    """CancellableDelay that never sleeps but remembers what it was asked."""

    def __init__(self, cancel_on_wait: bool = False):
        super().__init__()
        self.waits: List[float] = []
        self.cancel_on_wait = cancel_on_wait

    def wait(self, seconds: float) -> bool:
        self.waits.append(seconds)
        if self.cancel_on_wait:
            self.cancel()
        return self.cancelled


# Draw position on 4x4, reached by alternating drops (first mover A):
#   B B A A
#   A A B B
#   B B A A
#   A A B B
DRAW_COLUMNS_4X4 = [0, 2, 1, 3, 2, 0, 3, 1, 0, 2, 1, 3, 2, 0, 3, 1]


def play_columns(state: GameState, columns: Iterable[int]) -> None:
    """Drop tiles for alternating players starting with the current one."""
    for column in columns:
        assert state.board.move(column, state.current_player()) is not None
        state.move_finished()
        state.advance_to_next_player()


# =============================================================================
# Player Fixtures
# =============================================================================

@pytest.fixture
def alice() -> Player:
    return Player.human("Alice")


@pytest.fixture
def bob() -> Player:
    return Player.human("Bob")


@pytest.fixture
def bot_a() -> Player:
    return Player.computer("BotA", "first-free", max_think_depth=2)


@pytest.fixture
def bot_b() -> Player:
    return Player.computer("BotB", "first-free")


# =============================================================================
# Board / State Fixtures
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Empty standard 7x6 board."""
    return Board(7, 6)


@pytest.fixture
def human_vs_bot(alice: Player, bot_a: Player) -> GameState:
    return GameState(Board(7, 6), alice, bot_a, rng=random.Random(7))


@pytest.fixture
def bot_vs_bot(bot_a: Player, bot_b: Player) -> GameState:
    return GameState(Board(7, 6), bot_a, bot_b, rng=random.Random(7))


@pytest.fixture
def human_vs_human(alice: Player, bob: Player) -> GameState:
    return GameState(Board(7, 6), alice, bob, rng=random.Random(7))


# =============================================================================
# Dispatch Fixtures
# =============================================================================

@pytest.fixture
def catalog() -> AlgorithmCatalog:
    FirstFreeColumnAlgorithm.instances = 0
    return AlgorithmCatalog({"first-free": FirstFreeColumnAlgorithm})


@pytest.fixture
def human_input() -> HumanInputProvider:
    return HumanInputProvider()


@pytest.fixture
def delay() -> RecordingDelay:
    return RecordingDelay()


@pytest.fixture
def dispatcher(human_input, catalog, delay) -> TurnDispatcher:
    return TurnDispatcher(
        human_input,
        registry=AlgorithmRegistry(catalog),
        delay=delay,
        observation_delay=3.0,
    )
