"""
Tests for four_wins.agent.player

Tests Player construction, identity and performance counters.
"""

import pytest

from four_wins.agent.player import Player


class TestConstruction:
    """Player construction tests."""

    def test_human(self):
        player = Player.human("Alice")
        assert player.name == "Alice"
        assert not player.is_computer
        assert player.algorithm is None
        assert player.max_think_depth == 0

    def test_computer(self):
        player = Player.computer("Bot", "random", max_think_depth=5)
        assert player.is_computer
        assert player.algorithm == "random"
        assert player.max_think_depth == 5

    def test_human_drops_algorithm(self):
        assert Player("Alice", computer=False, algorithm="random").algorithm is None

    def test_empty_name_raises(self):
        with pytest.raises(ValueError, match="name"):
            Player.human("")

    def test_computer_needs_algorithm(self):
        with pytest.raises(ValueError, match="needs an algorithm"):
            Player("Bot", computer=True)

    def test_negative_depth_raises(self):
        with pytest.raises(ValueError):
            Player.computer("Bot", "random", max_think_depth=-1)

    def test_identity_is_read_only(self, alice):
        with pytest.raises(AttributeError):
            alice.name = "Eve"

    def test_no_extra_attributes(self, alice):
        """__slots__ keeps players lean."""
        with pytest.raises(AttributeError):
            alice.score = 3


class TestIdentity:
    """Players compare by identity."""

    def test_same_name_not_equal(self):
        assert Player.human("Ann") != Player.human("Ann")

    def test_usable_as_dict_key(self, alice, bob):
        counts = {alice: 1, bob: 2}
        assert counts[alice] == 1

    def test_repr(self, alice, bot_a):
        assert repr(alice) == "Player('Alice')"
        assert repr(bot_a) == "Player('BotA', algorithm='first-free')"


class TestCounters:
    """Performance counter tests."""

    def test_initially_zero(self, bot_a):
        assert bot_a.total_moves_analyzed == 0
        assert bot_a.total_move_time_seconds == 0.0
        assert bot_a.moves_per_second == 0.0

    def test_record_move_accumulates(self, bot_a):
        bot_a.record_move(100, 0.5)
        bot_a.record_move(300, 1.5)
        assert bot_a.total_moves_analyzed == 400
        assert bot_a.total_move_time_seconds == pytest.approx(2.0)
        assert bot_a.moves_per_second == pytest.approx(200.0)

    def test_reset_counters(self, bot_a):
        bot_a.record_move(100, 0.5)
        bot_a.reset_counters()
        assert bot_a.total_moves_analyzed == 0
        assert bot_a.moves_per_second == 0.0
