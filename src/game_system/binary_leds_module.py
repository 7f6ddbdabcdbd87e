"""
Binary LEDs puzzle module - time-indexed pattern engine and cut rules
"""

import enum
import itertools
import random
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from . import sequence_table, time_index
from .config import ModuleConfig
from .sequence_table import SEQUENCE_COUNT, SEQUENCE_LENGTH, WireColor

if TYPE_CHECKING:
    from led_system.interfaces import DisplayDriver
    from utils import ClassLogger
    from .interfaces import ModuleHost


_module_ids = itertools.count(1)


def next_module_id() -> int:
    """Process-wide module id, used to tell module instances apart in logs"""
    return next(_module_ids)


class ModulePhase(enum.Enum):
    UNARMED = "unarmed"
    ARMED = "armed"
    SOLVED = "solved"


class CutOutcome(enum.Enum):
    PASS = "pass"
    STRIKE = "strike"
    NO_OP = "no-op"


@dataclass
class WireRuntimeState:
    """Per-slot wire state"""
    color: WireColor
    is_cut: bool = False


class BinaryLedsModule:
    """
    One Binary LEDs module.

    The lamps walk a randomly chosen sequence back and forth, one position per
    blink delay. Cutting a wire passes the module only if the sequence is at
    that wire color's solution position at the moment of the cut.

    Lifecycle:
    - UNARMED: lamps dark, every cut is a strike
    - ARMED (activate()): lamps show the sequence, cuts are evaluated
    - SOLVED: lamps dark, cuts are ignored

    Every wrong cut moves the blink delay one level down (1.0 → 0.66 → 0.5 by
    default). With the safety valve enabled, reaching the wrong-cut threshold
    solves the module.

    Both tick() and cut() take the current time explicitly and never block;
    the host calls them from its single game loop.
    """

    def __init__(self,
                 display: 'DisplayDriver',
                 host: 'ModuleHost',
                 logger: 'ClassLogger',
                 now: float,
                 config: Optional[ModuleConfig] = None,
                 rng: Optional[random.Random] = None,
                 module_id: Optional[int] = None,
                 sequence_index: Optional[int] = None,
                 initial_offset: Optional[int] = None,
                 wire_colors: Optional[Sequence[WireColor]] = None):
        """
        Create the module and draw its random setup.

        Args:
            display: Lamps to drive on every tick
            host: Receiver of sever/cue/strike/pass effects
            logger: Parent ClassLogger, a BinaryLeds#<id> child is created
            now: Current time in seconds, becomes the start time
            config: Puzzle rules (defaults to ModuleConfig())
            rng: Random source (defaults to a fresh random.Random())
            module_id: Log identifier (defaults to next_module_id())
            sequence_index: Fixed sequence instead of a random one
            initial_offset: Fixed offset instead of a random one
            wire_colors: Fixed color per slot instead of a random permutation

        Raises:
            ValueError: If a fixed setup value is out of range
        """
        self.display = display
        self.host = host
        self.config = config or ModuleConfig()
        self._rng = rng or random.Random()
        self.module_id = next_module_id() if module_id is None else module_id
        self.logger = logger.create_class_logger(f"BinaryLeds#{self.module_id}")

        if sequence_index is None:
            sequence_index = self._random_int(0, SEQUENCE_COUNT)
        elif not (0 <= sequence_index < SEQUENCE_COUNT):
            raise ValueError(f"Sequence index {sequence_index} out of range (0-{SEQUENCE_COUNT - 1})")

        if initial_offset is None:
            initial_offset = self._random_int(0, SEQUENCE_LENGTH)
        elif not (0 <= initial_offset < SEQUENCE_LENGTH):
            raise ValueError(f"Initial offset {initial_offset} out of range (0-{SEQUENCE_LENGTH - 1})")

        if wire_colors is None:
            wire_colors = self._shuffled_colors()
        elif sorted(wire_colors) != sorted(WireColor):
            raise ValueError(f"Wire colors must be a permutation of {[c.name for c in WireColor]}")

        self.sequence_index: int = sequence_index
        self.initial_offset: int = initial_offset
        self.start_time: float = now

        self._wires: List[WireRuntimeState] = [WireRuntimeState(WireColor(c)) for c in wire_colors]
        self._armed = False
        self._solved = False
        self._delay_level = 0
        self._wrong_cuts = 0

        self.logger.info(f"Using sequence number {self.sequence_index} with offset {self.initial_offset}")
        self.logger.info(f"Wire colors: {', '.join(w.color.name for w in self._wires)}")
        self.logger.debug(f"Solution: {self._solution_summary()}")

    # ------------------------------------------------------------------
    # Random setup
    # ------------------------------------------------------------------

    def _random_int(self, inclusive_min: int, exclusive_max: int) -> int:
        """Uniform integer from [inclusive_min, exclusive_max); rerolls on exclusive_max"""
        answer = self._rng.randrange(inclusive_min, exclusive_max)
        while answer == exclusive_max:
            answer = self._rng.randrange(inclusive_min, exclusive_max)
        return answer

    def _shuffled_colors(self) -> List[WireColor]:
        colors = list(WireColor)
        for i in range(len(colors)):
            chosen = self._random_int(i, len(colors))
            colors[i], colors[chosen] = colors[chosen], colors[i]
        return colors

    def _solution_summary(self) -> str:
        return ", ".join(
            f"{color.name}@{sequence_table.solution(self.sequence_index, color)}"
            f"={sequence_table.value_at(self.sequence_index, sequence_table.solution(self.sequence_index, color))}"
            for color in WireColor
        )

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    @property
    def phase(self) -> ModulePhase:
        if self._solved:
            return ModulePhase.SOLVED
        if self._armed:
            return ModulePhase.ARMED
        return ModulePhase.UNARMED

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def blink_delay(self) -> float:
        """Seconds each sequence position stays on the lamps"""
        return self.config.blink_delay_levels[self._delay_level]

    @property
    def wrong_cuts(self) -> int:
        return self._wrong_cuts

    @property
    def wires(self) -> List[WireRuntimeState]:
        """Snapshot of the wire slots"""
        return [replace(wire) for wire in self._wires]

    @property
    def sequence_values(self) -> Tuple[int, ...]:
        return sequence_table.sequence(self.sequence_index)

    def slot_for_color(self, color: WireColor) -> int:
        for slot, wire in enumerate(self._wires):
            if wire.color == color:
                return slot
        raise ValueError(f"No wire with color {color}")

    def position_at(self, now: float) -> int:
        """Sequence position shown at a given time with the current blink delay"""
        return time_index.position(now, self.start_time, self.initial_offset, self.blink_delay)

    def value_at_time(self, now: float) -> int:
        return sequence_table.value_at(self.sequence_index, self.position_at(now))

    def steps_until_value(self, value: int, now: float, skip_steps: int = 0) -> int:
        """Steps (after skip_steps) until the lamps show value, capped at two walks"""
        return time_index.steps_until_value(
            self.sequence_values, value, now, self.start_time,
            self.initial_offset, self.blink_delay, skip_steps
        )

    # ------------------------------------------------------------------
    # Host signals
    # ------------------------------------------------------------------

    def activate(self) -> None:
        """Arming signal from the host; repeated calls are ignored"""
        if self._armed:
            return
        old_phase = self.phase
        self._armed = True
        self.logger.info(f"Phase transition: {old_phase.name} → {self.phase.name}")

    def tick(self, now: float) -> None:
        """Refresh the lamps for the given time"""
        if self._solved or not self._armed:
            self.display.blank()
            return

        if time_index.step_fraction(now, self.start_time, self.blink_delay) > self.config.shown_fraction:
            self.display.blank()
        else:
            self.display.show(self.value_at_time(now))

    def cut(self, slot: int, now: float) -> CutOutcome:
        """
        Handle a cut of the wire in a slot.

        Args:
            slot: Wire slot index
            now: Time of the cut in seconds

        Returns:
            PASS if the module is now solved, STRIKE for a wrong or premature
            cut, NO_OP if the wire was already cut or the module is solved
        """
        wire = self._wires[slot]
        if wire.is_cut:
            self.logger.debug(f"Wire {slot} ({wire.color.name}) already cut, ignoring")
            return CutOutcome.NO_OP
        if self._solved:
            self.logger.debug(f"Module already solved, ignoring cut of wire {slot} ({wire.color.name})")
            return CutOutcome.NO_OP

        wire.is_cut = True
        self.host.sever(slot)

        current_index = self.position_at(now)
        required_index = sequence_table.solution(self.sequence_index, wire.color)
        self.logger.info(
            f"Cutting wire {wire.color.name}. Required time index is {required_index}, "
            f"current time index is {current_index}"
        )

        if not self._armed:
            self.logger.warning("Cut wire before module has been activated!")
            outcome = self._strike()
        elif current_index == required_index:
            outcome = self._solve()
        else:
            outcome = self._strike()

        self.host.play_cut_cue()

        if (outcome is CutOutcome.STRIKE
                and self.config.safety_valve_enabled
                and self._wrong_cuts >= self.config.safety_valve_wrong_cuts):
            self.logger.info(f"{self._wrong_cuts} wrong cuts, passing the module anyway")
            outcome = self._solve()

        return outcome

    # ------------------------------------------------------------------
    # Outcomes
    # ------------------------------------------------------------------

    def _strike(self) -> CutOutcome:
        self._wrong_cuts += 1
        old_delay = self.blink_delay
        self._delay_level = min(self._delay_level + 1, len(self.config.blink_delay_levels) - 1)
        self.logger.info(f"Strike #{self._wrong_cuts}, blink delay {old_delay} → {self.blink_delay}")
        self.host.report_strike()
        return CutOutcome.STRIKE

    def _solve(self) -> CutOutcome:
        old_phase = self.phase
        self._solved = True
        self.logger.info(f"Phase transition: {old_phase.name} → {self.phase.name}")
        self.host.report_pass()
        return CutOutcome.PASS
