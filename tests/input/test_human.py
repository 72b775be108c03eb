"""
Tests for four_wins.input.human

Tests command parsing and the non-blocking human input queue.
"""

import io
import logging

import pytest

from four_wins.input.events import (
    MoveEvent,
    NewGameEvent,
    PlayerMetadataChangedEvent,
    StartEvent,
    StopEvent,
)
from four_wins.input.human import ConsoleInputProvider, HumanInputProvider, parse_command


class TestParseCommand:
    """Text command parsing."""

    def test_column_is_one_based(self, human_vs_human, alice):
        assert parse_command("1", human_vs_human) == MoveEvent(alice, 0)
        assert parse_command("7", human_vs_human) == MoveEvent(alice, 6)

    def test_move_for_current_player(self, human_vs_human, bob):
        human_vs_human.advance_to_next_player()
        assert parse_command("3", human_vs_human) == MoveEvent(bob, 2)

    @pytest.mark.parametrize("raw,expected", [
        ("n", NewGameEvent()),
        ("new", NewGameEvent()),
        ("s", StartEvent()),
        ("START", StartEvent()),
        ("p", StopEvent()),
        ("stop", StopEvent()),
        ("r", PlayerMetadataChangedEvent()),
        (" reload\n", PlayerMetadataChangedEvent()),
    ])
    def test_control_commands(self, human_vs_human, raw, expected):
        assert parse_command(raw, human_vs_human) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "\n"])
    def test_blank_is_ignored(self, human_vs_human, raw):
        assert parse_command(raw, human_vs_human) is None

    @pytest.mark.parametrize("raw", ["0", "8", "-1"])
    def test_column_out_of_range(self, human_vs_human, raw, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_command(raw, human_vs_human) is None
        assert "out of range" in caplog.text

    def test_unknown_command(self, human_vs_human, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_command("jump", human_vs_human) is None
        assert "Unknown command 'jump'" in caplog.text


class TestHumanInputProvider:
    """Queue behaviour."""

    def test_empty_returns_none(self, human_input, human_vs_human):
        assert human_input.read_input(human_vs_human) is None

    def test_fifo_order(self, human_input, human_vs_human, alice):
        human_input.submit("2")
        human_input.submit_event(StopEvent())
        assert human_input.read_input(human_vs_human) == MoveEvent(alice, 1)
        assert human_input.read_input(human_vs_human) == StopEvent()
        assert human_input.read_input(human_vs_human) is None

    def test_parsed_when_read(self, human_input, human_vs_human, bob):
        """A column becomes a move for whoever is on turn when it is read."""
        human_input.submit("5")
        human_vs_human.advance_to_next_player()
        assert human_input.read_input(human_vs_human) == MoveEvent(bob, 4)

    def test_events_pass_unchanged(self, human_input, human_vs_human, bob):
        event = MoveEvent(bob, 3)
        human_input.submit_event(event)
        assert human_input.read_input(human_vs_human) is event

    def test_invalid_command_is_consumed(self, human_input, human_vs_human):
        human_input.submit("x")
        assert human_input.read_input(human_vs_human) is None
        assert human_input.pending() == 0

    def test_clear_input_queue(self, human_input, human_vs_human):
        for command in ("1", "2", "n"):
            human_input.submit(command)
        assert human_input.pending() == 3

        human_input.clear_input_queue()
        assert human_input.pending() == 0
        assert human_input.read_input(human_vs_human) is None

    def test_clear_empty_queue(self, human_input):
        human_input.clear_input_queue()
        assert human_input.pending() == 0


class TestConsoleInputProvider:
    """Line reader thread."""

    def test_reads_all_lines(self, human_vs_human, alice):
        provider = ConsoleInputProvider(io.StringIO("4\nstart\n")).start()
        provider.join(timeout=1.0)

        assert provider.pending() == 2
        assert provider.read_input(human_vs_human) == MoveEvent(alice, 3)
        assert provider.read_input(human_vs_human) == StartEvent()

    def test_start_is_idempotent(self):
        provider = ConsoleInputProvider(io.StringIO("1\n"))
        assert provider.start() is provider
        provider.start()
        provider.join(timeout=1.0)
        assert provider.pending() == 1

    def test_join_before_start(self):
        ConsoleInputProvider(io.StringIO("")).join(timeout=0.1)

    def test_is_a_human_input_provider(self):
        assert isinstance(ConsoleInputProvider(io.StringIO("")), HumanInputProvider)
