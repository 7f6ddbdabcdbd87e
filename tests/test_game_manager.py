"""Tests for the game manager hosting one module."""

import pytest

from audio_system import MockSoundController, ModuleSounds
from game_system import GameManager, ModuleConfig, ModulePhase, RunnerStatus, WireColor
from led_system import BinaryLedDisplay, MockLedStrip, value_to_lamps
from wire_system import WireReader

RED, GREEN, BLUE = WireColor.RED, WireColor.GREEN, WireColor.BLUE

# Sequence 0: 17 15 6 2 24 8 26 25 21 24 1 15 18 8, solutions RED 5 GREEN 3 BLUE 7
MODULE_SETUP = {
    "sequence_index": 0,
    "initial_offset": 0,
    "wire_colors": [RED, GREEN, BLUE],
    "module_id": 1,
}


class FakeCommandReader:
    def __init__(self):
        self.lines = []

    def read_commands(self):
        lines, self.lines = self.lines, []
        return lines


@pytest.fixture
def display(logger):
    return BinaryLedDisplay(MockLedStrip(5), logger)


@pytest.fixture
def sounds(logger):
    return MockSoundController(logger)


@pytest.fixture
def make_manager(sampler, display, sounds, logger):
    def factory(module_config=None, command_reader=None):
        return GameManager(
            wire_reader=WireReader(sampler, logger),
            display=display,
            sound_controller=sounds,
            logger=logger,
            module_config=module_config,
            command_reader=command_reader,
            clock=lambda: 0.0,
            module_setup=dict(MODULE_SETUP),
        )
    return factory


def test_first_frame_arms_and_lights(make_manager, display):
    manager = make_manager()

    manager.update(0.5)

    assert manager.module.phase is ModulePhase.ARMED
    assert display.current_lamps() == value_to_lamps(17)


def test_activation_delay(make_manager, display):
    manager = make_manager(ModuleConfig(activation_delay_ms=2000))

    manager.update(1.5)
    assert not manager.module.armed
    assert display.current_lamps() == [False] * 5

    manager.update(2.5)
    assert manager.module.armed
    assert display.current_lamps() == value_to_lamps(6)


def test_sensed_cut_at_solution_passes(make_manager, sampler, sounds, display):
    manager = make_manager()
    manager.update(0.5)

    sampler.open[0] = True
    manager.update(5.5)

    assert manager.passed
    assert manager.strikes == 0
    assert ModuleSounds.PASS in sounds.played
    assert ModuleSounds.WIRE_SNIP in sounds.played
    assert display.current_lamps() == [False] * 5


def test_sensed_wrong_cut_strikes(make_manager, sampler, sounds):
    manager = make_manager()
    manager.update(0.5)

    sampler.open[1] = True
    manager.update(1.5)
    manager.update(1.6)

    assert manager.strikes == 1
    assert not manager.passed
    assert sounds.played == [ModuleSounds.STRIKE, ModuleSounds.WIRE_SNIP]
    assert manager.module.blink_delay == 0.66


def test_cut_before_arming_strikes(make_manager, sampler):
    manager = make_manager(ModuleConfig(activation_delay_ms=10000))

    sampler.open[0] = True
    manager.update(5.5)

    assert manager.strikes == 1
    assert not manager.module.armed


def test_three_wrong_cuts_pass_the_module(make_manager, sampler):
    manager = make_manager()
    manager.update(0.1)

    sampler.open = [True, True, True]
    manager.update(0.2)

    assert manager.strikes == 3
    assert manager.passed


def test_scripted_command_cuts_without_sensed_edge(make_manager, sampler):
    manager = make_manager()
    manager.update(0.0)

    runner = manager.submit_command("cut red 8", 0.0)
    assert runner.status is RunnerStatus.WAITING

    for step in range(5):
        manager.update(step + 0.5)
    assert not manager.passed

    manager.update(5.5)
    assert manager.passed
    assert manager.command_runner is None

    # The synthesized cut is latched, so a later continuity read is not a second cut
    sampler.open[0] = True
    manager.update(6.5)
    assert manager.strikes == 0


def test_commands_from_reader(make_manager):
    reader = FakeCommandReader()
    manager = make_manager(command_reader=reader)

    reader.lines = ["cut r 17"]
    manager.update(0.5)

    assert manager.module.wires[0].is_cut
    assert manager.strikes == 1


def test_one_command_at_a_time(make_manager):
    manager = make_manager()

    assert manager.submit_command("cut red 8", 0.0) is not None
    assert manager.submit_command("cut green 2", 0.0) is None


def test_cancel_command(make_manager):
    manager = make_manager()
    runner = manager.submit_command("cut red 8", 0.0)

    manager.submit_command("cancel", 0.1)

    assert runner.status is RunnerStatus.CANCELLED
    assert manager.command_runner is None


@pytest.mark.parametrize("text", ["help", "cut red", "dance"])
def test_non_cut_commands_start_nothing(make_manager, text):
    manager = make_manager()
    assert manager.submit_command(text, 0.0) is None
    assert manager.command_runner is None


def test_failed_command_is_dropped(make_manager):
    manager = make_manager()
    manager.handle_wire_interaction(0, 0.5)

    runner = manager.submit_command("cut red 8", 1.0)

    assert runner.status is RunnerStatus.FAILED
    assert manager.command_runner is None


def test_command_cancelled_when_module_solves(make_manager):
    manager = make_manager()
    manager.update(0.0)
    runner = manager.submit_command("cut green 31", 0.0)

    manager.handle_wire_interaction(0, 5.5)
    manager.update(5.6)

    assert manager.passed
    assert runner.status is RunnerStatus.CANCELLED


def test_stop_releases_everything(make_manager, sampler, display):
    manager = make_manager()
    manager.update(0.5)

    manager.stop()

    assert not manager.running
    assert sampler.cleanup_called
    assert display.current_lamps() == [False] * 5
