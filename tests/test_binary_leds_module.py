"""Tests for the Binary LEDs puzzle module."""

import random

import pytest

from game_system import BinaryLedsModule, CutOutcome, ModulePhase, WireColor
from game_system.config import ModuleConfig
from game_system.interfaces import ModuleHost
from led_system import BinaryLedDisplay, MockLedStrip, value_to_lamps

RED, GREEN, BLUE = WireColor.RED, WireColor.GREEN, WireColor.BLUE


class RecordingHost(ModuleHost):
    """ModuleHost that records every effect in order"""

    def __init__(self):
        self.events = []

    def sever(self, slot):
        self.events.append(("sever", slot))

    def play_cut_cue(self):
        self.events.append(("cue",))

    def report_strike(self):
        self.events.append(("strike",))

    def report_pass(self):
        self.events.append(("pass",))

    def count(self, name):
        return sum(1 for event in self.events if event[0] == name)


@pytest.fixture
def display(logger):
    return BinaryLedDisplay(MockLedStrip(5), logger)


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def make_module(display, host, logger):
    def factory(config=None, armed=True, **setup):
        setup.setdefault("sequence_index", 0)
        setup.setdefault("initial_offset", 0)
        setup.setdefault("wire_colors", [RED, GREEN, BLUE])
        module = BinaryLedsModule(display, host, logger, now=0.0, config=config, **setup)
        if armed:
            module.activate()
        return module
    return factory


# ----------------------------------------------------------------------
# Setup
# ----------------------------------------------------------------------

def test_random_setup_is_in_range(display, host, logger):
    for seed in range(20):
        module = BinaryLedsModule(display, host, logger, now=0.0, rng=random.Random(seed))
        assert 0 <= module.sequence_index < 8
        assert 0 <= module.initial_offset < 14
        assert sorted(wire.color for wire in module.wires) == [RED, GREEN, BLUE]


def test_same_seed_same_setup(display, host, logger):
    first = BinaryLedsModule(display, host, logger, now=0.0, rng=random.Random(42))
    second = BinaryLedsModule(display, host, logger, now=0.0, rng=random.Random(42))

    assert first.sequence_index == second.sequence_index
    assert first.initial_offset == second.initial_offset
    assert [w.color for w in first.wires] == [w.color for w in second.wires]


def test_every_permutation_is_reachable(display, host, logger):
    seen = set()
    rng = random.Random(7)
    for _ in range(200):
        module = BinaryLedsModule(display, host, logger, now=0.0, rng=rng)
        seen.add(tuple(w.color for w in module.wires))
    assert len(seen) == 6


def test_module_ids(display, host, logger):
    injected = BinaryLedsModule(display, host, logger, now=0.0, module_id=99)
    first = BinaryLedsModule(display, host, logger, now=0.0)
    second = BinaryLedsModule(display, host, logger, now=0.0)

    assert injected.module_id == 99
    assert second.module_id > first.module_id


@pytest.mark.parametrize("setup", [
    {"sequence_index": 8},
    {"sequence_index": -1},
    {"initial_offset": 14},
    {"wire_colors": [RED, RED, BLUE]},
    {"wire_colors": [RED, GREEN]},
])
def test_invalid_fixed_setup(make_module, setup):
    with pytest.raises(ValueError):
        make_module(**setup)


def test_initial_state(make_module):
    module = make_module(armed=False)

    assert module.phase is ModulePhase.UNARMED
    assert module.blink_delay == 1.0
    assert module.wrong_cuts == 0
    assert not any(wire.is_cut for wire in module.wires)
    assert module.slot_for_color(GREEN) == 1


def test_wires_returns_a_copy(make_module):
    module = make_module()
    module.wires[0].is_cut = True
    assert not module.wires[0].is_cut


def test_activate_is_idempotent(make_module):
    module = make_module(armed=False)
    module.activate()
    module.activate()
    assert module.phase is ModulePhase.ARMED


# ----------------------------------------------------------------------
# Cuts
# ----------------------------------------------------------------------

def test_cut_at_solution_passes(make_module, host):
    module = make_module()

    # RED's solution for sequence 0 is position 5
    outcome = module.cut(0, 5.5)

    assert outcome is CutOutcome.PASS
    assert module.phase is ModulePhase.SOLVED
    assert host.events == [("sever", 0), ("pass",), ("cue",)]


def test_wrong_moment_strikes_and_speeds_up(make_module, host):
    module = make_module()

    # GREEN needs position 3, the lamps are at position 1
    assert module.position_at(1.5) == 1
    outcome = module.cut(1, 1.5)

    assert outcome is CutOutcome.STRIKE
    assert module.blink_delay == 0.66
    assert module.wrong_cuts == 1
    assert module.phase is ModulePhase.ARMED
    assert host.events == [("sever", 1), ("strike",), ("cue",)]


def test_recut_is_ignored(make_module, host):
    module = make_module()
    module.cut(1, 1.5)
    events_before = list(host.events)

    outcome = module.cut(1, 3.5)

    assert outcome is CutOutcome.NO_OP
    assert module.blink_delay == 0.66
    assert module.wrong_cuts == 1
    assert host.events == events_before


def test_cut_before_activation_strikes(make_module, host):
    module = make_module(armed=False)

    # Would be the right moment for RED if the module were armed
    outcome = module.cut(0, 5.5)

    assert outcome is CutOutcome.STRIKE
    assert module.phase is ModulePhase.UNARMED
    assert module.wires[0].is_cut
    assert host.count("strike") == 1


def test_blink_delay_escalation_is_capped(make_module):
    config = ModuleConfig(safety_valve_enabled=False)
    module = make_module(config=config)

    delays = []
    for slot in range(3):
        module.cut(slot, 0.1)
        delays.append(module.blink_delay)

    assert delays == [0.66, 0.5, 0.5]
    assert module.wrong_cuts == 3


def test_safety_valve_passes_after_three_wrong_cuts(make_module, host):
    module = make_module()

    assert module.cut(0, 0.1) is CutOutcome.STRIKE
    assert module.cut(1, 0.1) is CutOutcome.STRIKE
    assert module.cut(2, 0.1) is CutOutcome.PASS

    assert module.solved
    assert host.count("strike") == 3
    assert host.count("pass") == 1
    assert host.events[-3:] == [("strike",), ("cue",), ("pass",)]


def test_safety_valve_threshold_is_configurable(make_module, host):
    module = make_module(config=ModuleConfig(safety_valve_wrong_cuts=1))

    assert module.cut(1, 0.1) is CutOutcome.PASS
    assert host.count("strike") == 1
    assert module.solved


def test_without_safety_valve_module_stays_armed(make_module, host):
    module = make_module(config=ModuleConfig(safety_valve_enabled=False))

    outcomes = [module.cut(slot, 0.1) for slot in range(3)]

    assert outcomes == [CutOutcome.STRIKE] * 3
    assert module.phase is ModulePhase.ARMED
    assert host.count("pass") == 0


def test_solved_module_ignores_remaining_wires(make_module, host):
    module = make_module()
    module.cut(0, 5.5)
    events_before = list(host.events)

    assert module.cut(1, 6.5) is CutOutcome.NO_OP
    assert not module.wires[1].is_cut
    assert host.events == events_before


def test_position_uses_current_blink_delay(make_module):
    module = make_module()
    assert module.position_at(2.0) == 2

    module.cut(1, 0.1)

    # 2.0 / 0.66 truncates to 3
    assert module.position_at(2.0) == 3


def test_steps_until_value(make_module):
    module = make_module()
    assert module.steps_until_value(8, 0.5) == 5
    assert module.steps_until_value(31, 0.5) == 28


# ----------------------------------------------------------------------
# Lamps
# ----------------------------------------------------------------------

def test_tick_shows_sequence_value(make_module, display):
    module = make_module()

    module.tick(0.5)
    assert display.current_lamps() == value_to_lamps(17)

    module.tick(5.5)
    assert display.current_lamps() == value_to_lamps(8)

    module.tick(15.5)
    assert display.current_lamps() == value_to_lamps(15)


def test_tick_blank_while_unarmed(make_module, display):
    module = make_module(armed=False)
    module.tick(0.5)
    assert display.current_lamps() == [False] * 5


def test_tick_blank_once_solved(make_module, display):
    module = make_module()
    module.tick(5.5)
    module.cut(0, 5.5)

    module.tick(6.5)
    assert display.current_lamps() == [False] * 5


def test_tick_dead_zone(make_module, display):
    module = make_module(config=ModuleConfig(shown_fraction=0.5))

    module.tick(5.25)
    assert display.current_lamps() == value_to_lamps(8)

    module.tick(5.75)
    assert display.current_lamps() == [False] * 5
