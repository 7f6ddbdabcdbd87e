"""Tests for scripted cut commands."""

import pytest

from game_system import (
    BinaryLedsModule, CutCommand, CutCommandRunner, CutOutcome, RunnerStatus,
    WireColor, parse_cut_command
)
from game_system.interfaces import ModuleHost
from led_system import BinaryLedDisplay, MockLedStrip

RED, GREEN, BLUE = WireColor.RED, WireColor.GREEN, WireColor.BLUE


class SilentHost(ModuleHost):
    def sever(self, slot):
        pass

    def play_cut_cue(self):
        pass

    def report_strike(self):
        pass

    def report_pass(self):
        pass


@pytest.fixture
def module(logger):
    # Sequence 0: 17 15 6 2 24 8 26 25 21 24 1 15 18 8
    display = BinaryLedDisplay(MockLedStrip(5), logger)
    module = BinaryLedsModule(
        display, SilentHost(), logger, now=0.0,
        sequence_index=0, initial_offset=0, wire_colors=[BLUE, RED, GREEN]
    )
    module.activate()
    return module


@pytest.fixture
def cuts():
    return []


def make_runner(module, cuts, logger, text):
    def on_cut(slot, now):
        cuts.append((slot, now))
        module.cut(slot, now)
    return CutCommandRunner(module, parse_cut_command(text), on_cut, logger)


# ----------------------------------------------------------------------
# Parsing
# ----------------------------------------------------------------------

@pytest.mark.parametrize("text, expected", [
    ("cut red 25 26 8", CutCommand(RED, (25, 26, 8))),
    ("c g 8", CutCommand(GREEN, (8,))),
    ("CUT Blue 31", CutCommand(BLUE, (31,))),
    ("  cut   b   1  ", CutCommand(BLUE, (1,))),
])
def test_parse_valid(text, expected):
    assert parse_cut_command(text) == expected


@pytest.mark.parametrize("text", [
    "cut red",
    "cut purple 8",
    "snip red 8",
    "cut red 0",
    "cut red 32",
    "cut red eight",
    "",
])
def test_parse_invalid(text):
    assert parse_cut_command(text) is None


# ----------------------------------------------------------------------
# Running
# ----------------------------------------------------------------------

def test_single_value_cuts_when_shown(module, cuts, logger):
    runner = make_runner(module, cuts, logger, "cut red 8")

    assert runner.start(0.0) is RunnerStatus.WAITING
    assert runner.estimated_steps == 5
    assert not runner.long_wait

    for step in range(5):
        assert runner.poll(step + 0.5) is RunnerStatus.WAITING
    assert cuts == []

    assert runner.poll(5.5) is RunnerStatus.DONE
    assert cuts == [(1, 5.5)]
    assert module.solved


def test_value_chain(module, cuts, logger):
    runner = make_runner(module, cuts, logger, "cut red 17 8")
    runner.start(0.0)

    # 17 is shown right away, then the runner waits for 8
    assert runner.poll(0.5) is RunnerStatus.WAITING
    assert runner.poll(3.5) is RunnerStatus.WAITING
    assert runner.poll(5.5) is RunnerStatus.DONE
    assert cuts == [(1, 5.5)]


def test_repeated_value_matches_same_frame(module, cuts, logger):
    runner = make_runner(module, cuts, logger, "cut blue 17 17")
    runner.start(0.0)

    # Both values match the same frame while the lamps show 17
    assert runner.poll(0.5) is RunnerStatus.DONE
    assert cuts == [(0, 0.5)]


def test_missing_value_fails_after_full_walk(module, cuts, logger):
    runner = make_runner(module, cuts, logger, "cut red 31")
    runner.start(0.0)

    for step in range(13):
        assert runner.poll(step + 0.5) is RunnerStatus.WAITING

    assert runner.poll(13.5) is RunnerStatus.FAILED
    assert runner.message == "The specified led pattern could not be found."
    assert runner.finished
    assert cuts == []


def test_already_cut_wire_fails_on_start(module, cuts, logger):
    module.cut(1, 0.5)
    runner = make_runner(module, cuts, logger, "cut red 8")

    assert runner.start(1.0) is RunnerStatus.FAILED
    assert runner.message == "This wire has already been cut."


def test_long_wait_flag(module, cuts, logger):
    runner = make_runner(module, cuts, logger, "cut red 31 31")
    runner.start(0.0)

    assert runner.estimated_steps == 56
    assert runner.long_wait


def test_cancel_stops_the_cut(module, cuts, logger):
    runner = make_runner(module, cuts, logger, "cut red 8")
    runner.start(0.0)

    runner.cancel()

    assert runner.poll(5.5) is RunnerStatus.CANCELLED
    assert runner.finished
    assert cuts == []


def test_poll_before_start_does_nothing(module, cuts, logger):
    runner = make_runner(module, cuts, logger, "cut red 17")
    assert runner.poll(0.5) is RunnerStatus.PENDING
    assert cuts == []
