"""
Wire reader implementation with cut latching and edge detection
"""

from typing import List

from .interfaces import IWireReader, IWireSampler
from .wire_state import WireState


class WireReader(IWireReader):
    """
    Wire reader with latched cut state and edge detection.

    Uses IWireSampler for hardware abstraction (GPIO, keyboard, scripted).
    A wire that reads open once stays cut even if the broken ends touch
    again, so contact bounce on a freshly cut wire produces a single edge.

    Example:
        sampler = GPIOWireSampler([5, 6, 13], "up", logger)
        reader = WireReader(sampler, logger)

        while True:
            state = reader.read_wires()
            for slot in state.newly_cut:
                module.cut(slot, time.time())
    """

    def __init__(self, sampler: IWireSampler, logger):
        """
        Initialize wire reader with injected sampler.

        Args:
            sampler: IWireSampler instance for reading wire hardware
            logger: ClassLogger instance
        """
        self._sampler = sampler
        self._logger = logger

        wire_count = sampler.get_wire_count()
        self._latched: List[bool] = [False] * wire_count
        self._previous: List[bool] = [False] * wire_count

        self._sampler.setup()

        self._logger.info(f"WireReader initialized with {wire_count} wires")

    def read_wires(self) -> WireState:
        for slot in range(len(self._latched)):
            if not self._latched[slot] and self._sampler.is_cut(slot):
                self._latched[slot] = True
                self._logger.info(f"Wire {slot} cut")

        state = WireState(
            is_cut=self._latched.copy(),
            previous_cut=self._previous.copy()
        )
        self._previous = self._latched.copy()
        return state

    def mark_cut(self, slot: int) -> None:
        if not self._latched[slot]:
            self._latched[slot] = True
            self._previous[slot] = True
            self._logger.debug(f"Wire {slot} marked as cut")

    def get_wire_count(self) -> int:
        return len(self._latched)

    def cleanup(self) -> None:
        self._sampler.cleanup()
        self._logger.info("WireReader cleaned up")
