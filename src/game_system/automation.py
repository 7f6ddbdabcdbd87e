"""
Scripted cut commands

A command such as "cut red 25 26 8" waits until the lamps have shown 25,
then 26, then 8, and cuts the red wire at the moment 8 is displayed.
The runner is polled once per frame and never blocks the game loop.
"""

import enum
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, TYPE_CHECKING

from .sequence_table import MAX_LED_VALUE, SEQUENCE_LENGTH, WireColor

if TYPE_CHECKING:
    from utils import ClassLogger
    from .binary_leds_module import BinaryLedsModule


HELP_MESSAGE = (
    "Cut the wire on a specific sequence with: cut red 25 26 8. "
    "(The wire is cut on the last number specified.)"
)

COLOR_ALIASES = {
    "red": WireColor.RED,
    "r": WireColor.RED,
    "green": WireColor.GREEN,
    "g": WireColor.GREEN,
    "blue": WireColor.BLUE,
    "b": WireColor.BLUE,
}

# Estimated waits at or above this many seconds are flagged as long
LONG_WAIT_SECONDS = 40


@dataclass(frozen=True)
class CutCommand:
    color: WireColor
    values: Tuple[int, ...]


class RunnerStatus(enum.Enum):
    PENDING = "pending"
    WAITING = "waiting"
    DONE = "done"
    FAILED = "failed"
    CANCELLED = "cancelled"


def parse_cut_command(text: str) -> Optional[CutCommand]:
    """
    Parse "cut|c <color> <value> [<value> ...]".

    Returns:
        CutCommand, or None when the text is not a well-formed cut command
        (unknown verb or color, or a value outside 1-31)
    """
    parts = text.lower().split()
    if len(parts) < 3 or parts[0] not in ("cut", "c"):
        return None

    color = COLOR_ALIASES.get(parts[1])
    if color is None:
        return None

    values = []
    for token in parts[2:]:
        try:
            value = int(token)
        except ValueError:
            return None
        if not (1 <= value <= MAX_LED_VALUE):
            return None
        values.append(value)

    return CutCommand(color=color, values=tuple(values))


class CutCommandRunner:
    """
    Executes one CutCommand against a module, one poll per frame.

    Status flow: PENDING → start() → WAITING → poll()... → DONE | FAILED,
    or CANCELLED at any point before completion. The runner only reads
    module state; the cut itself goes through on_cut so the host treats it
    like any other wire interaction.
    """

    def __init__(self,
                 module: 'BinaryLedsModule',
                 command: CutCommand,
                 on_cut: Callable[[int, float], None],
                 logger: 'ClassLogger'):
        self.module = module
        self.command = command
        self.on_cut = on_cut
        self.logger = logger

        self.status = RunnerStatus.PENDING
        self.message: Optional[str] = None
        self.estimated_steps = 0
        self.long_wait = False

        self.slot = module.slot_for_color(command.color)
        self._value_index = 0
        self._reset_search()

    def _reset_search(self) -> None:
        self._lowest_seen = SEQUENCE_LENGTH
        self._highest_seen = 0
        self._previous_position: Optional[int] = None

    def _fail(self, message: str) -> RunnerStatus:
        self.status = RunnerStatus.FAILED
        self.message = message
        self.logger.warning(f"Command failed: {message}")
        return self.status

    def start(self, now: float) -> RunnerStatus:
        """Check the wire and estimate the wait"""
        if self.status is not RunnerStatus.PENDING:
            return self.status

        if self.module.wires[self.slot].is_cut:
            return self._fail("This wire has already been cut.")

        steps = 0
        for value in self.command.values:
            steps += self.module.steps_until_value(value, now, steps)
        self.estimated_steps = steps
        self.long_wait = steps * self.module.blink_delay >= LONG_WAIT_SECONDS

        self.status = RunnerStatus.WAITING
        self.logger.info(
            f"Waiting for {list(self.command.values)} to cut {self.command.color.name} "
            f"(~{steps} steps{', long wait' if self.long_wait else ''})"
        )
        return self.status

    def poll(self, now: float) -> RunnerStatus:
        """Advance through the awaited values; cuts when the last one shows"""
        if self.status is not RunnerStatus.WAITING:
            return self.status

        values = self.command.values
        while self._value_index < len(values):
            target = values[self._value_index]
            position = self.module.position_at(now)

            if self.module.value_at_time(now) == target:
                self.logger.debug(f"Found LED pattern {target} at time index {position}")
                self._value_index += 1
                self._reset_search()
                continue

            if position != self._previous_position:
                self.logger.debug(
                    f"Looking for LED pattern {target}, current LED pattern is "
                    f"{self.module.value_at_time(now)}, current time index is {position}"
                )
                self._previous_position = position

            self._lowest_seen = min(self._lowest_seen, position)
            self._highest_seen = max(self._highest_seen, position)
            if self._lowest_seen == 0 and self._highest_seen == SEQUENCE_LENGTH - 1:
                return self._fail("The specified led pattern could not be found.")

            return self.status

        self.status = RunnerStatus.DONE
        self.logger.info(f"Pattern complete, cutting {self.command.color.name} wire (slot {self.slot})")
        self.on_cut(self.slot, now)
        return self.status

    def cancel(self) -> None:
        if self.status in (RunnerStatus.PENDING, RunnerStatus.WAITING):
            self.status = RunnerStatus.CANCELLED
            self.logger.info("Command cancelled")

    @property
    def finished(self) -> bool:
        return self.status in (RunnerStatus.DONE, RunnerStatus.FAILED, RunnerStatus.CANCELLED)
